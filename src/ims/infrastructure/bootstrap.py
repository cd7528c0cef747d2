"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from ims.domain.service.stock_ledger import StockLedger
from ims.infrastructure.config import Settings
from ims.infrastructure.persistence.file_locks import FileProductLocks
from ims.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from ims.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from ims.infrastructure.persistence.json_sale_repository import JsonSaleRepository


def product_repository(settings: Settings) -> JsonProductRepository:
    return JsonProductRepository(settings.data_dir / "products.json")


def customer_repository(settings: Settings) -> JsonCustomerRepository:
    return JsonCustomerRepository(settings.data_dir / "customers.json")


def sale_repository(settings: Settings) -> JsonSaleRepository:
    return JsonSaleRepository(settings.data_dir / "sales.json")


@lru_cache(maxsize=None)
def _product_locks(data_dir: Path) -> FileProductLocks:
    # One registry per data dir, shared by every ledger in the process.
    return FileProductLocks(data_dir / "locks")


def stock_ledger(settings: Settings) -> StockLedger:
    locks = _product_locks(Path(settings.data_dir).resolve())
    return StockLedger(product_repository(settings), locks=locks)
