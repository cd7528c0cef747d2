"""Process entry points for the multi-process tests.

Kept in an importable module so ``spawn``-started children can locate
them by name.
"""

from __future__ import annotations

from pathlib import Path

from ims.domain.exceptions import InsufficientStockError
from ims.domain.service.sale_processor import SaleProcessor
from ims.infrastructure.bootstrap import (
    product_repository,
    sale_repository,
    stock_ledger,
)
from ims.infrastructure.config import Settings


def sell_repeatedly(data_dir: str, barrier, results, attempts: int) -> None:
    """Try to sell one unit of product "1" *attempts* times; report successes."""
    settings = Settings(data_dir=Path(data_dir))
    processor = SaleProcessor(
        product_repository(settings), sale_repository(settings), stock_ledger(settings)
    )
    barrier.wait()
    sold = 0
    for _ in range(attempts):
        try:
            processor.record_sale("1", 1, "1")
            sold += 1
        except InsufficientStockError:
            pass
    results.put(sold)
