"""Application service: Record Sale use case.

Delegates validation and the stock/log update to the SaleProcessor
domain service, then reports how much stock is left so the caller can
warn about low stock.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from ims.application.dto import SaleDTO, SaleReceiptDTO
from ims.domain.model.product import DEFAULT_LOW_STOCK_THRESHOLD
from ims.domain.model.value_objects import Money, Quantity
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.repository.sale_repository import SaleRepository
from ims.domain.service.sale_processor import SaleProcessor
from ims.domain.service.stock_ledger import StockLedger

logger = logging.getLogger(__name__)


class RecordSaleHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        sale_repo: SaleRepository,
        ledger: StockLedger,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
        currency_symbol: str = "$",
    ) -> None:
        self._processor = SaleProcessor(product_repo, sale_repo, ledger)
        self._product_repo = product_repo
        self._threshold = low_stock_threshold
        self._symbol = currency_symbol

    def handle(
        self,
        product_id: str,
        quantity: int | str | Quantity,
        amount_tendered: str | int | Decimal | Money,
    ) -> SaleReceiptDTO:
        sale = self._processor.record_sale(product_id, quantity, amount_tendered)

        # Read after commit; a concurrent sale may already have lowered it.
        product = self._product_repo.get_by_id(product_id)
        remaining = product.quantity if product is not None else 0
        low = remaining < self._threshold
        if low:
            logger.warning(
                f"Low stock: '{sale.product_name}' has only {remaining} left"
            )

        return SaleReceiptDTO(
            sale=SaleDTO.from_domain(sale, self._symbol),
            remaining_quantity=remaining,
            low_stock=low,
        )
