"""Domain service: Sale Processor.

Turns a sale request into a validated, stock-consistent SaleRecord or
rejects it with no side effects. The checks run in a fixed order:

  1. request fields (quantity, tendered amount)  -> ValidationError
  2. product lookup                               -> ProductNotFoundError
  3. payment covers ``price * quantity``          -> InsufficientPaymentError
  4. stock decrement through the ledger           -> InsufficientStockError
  5. append the record to the sales log

Steps 2-5 run while holding the product's ledger lock, so the price
snapshot, the decrement and the append are one unit per product and
sales of one product are logged in the order their decrements commit.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from ims.domain.exceptions import (
    InsufficientPaymentError,
    ProductNotFoundError,
    StoreUnavailableError,
    ValidationError,
)
from ims.domain.model.sale import SaleRecord
from ims.domain.model.value_objects import Money, Quantity
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.repository.sale_repository import SaleRepository
from ims.domain.service.stock_ledger import StockLedger

logger = logging.getLogger(__name__)


class SaleProcessor:

    def __init__(
        self,
        product_repo: ProductRepository,
        sale_repo: SaleRepository,
        ledger: StockLedger,
    ) -> None:
        self._product_repo = product_repo
        self._sale_repo = sale_repo
        self._ledger = ledger

    def record_sale(
        self,
        product_id: str,
        quantity: int | str | Quantity,
        amount_tendered: str | int | Decimal | Money,
    ) -> SaleRecord:
        """Validate and execute a sale, returning the stored record."""
        qty = self._parse_quantity(quantity)
        tendered = (
            amount_tendered
            if isinstance(amount_tendered, Money)
            else Money.of(amount_tendered)
        )

        with self._ledger.exclusive(product_id):
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise ProductNotFoundError(product_id)

            total = product.price * qty.value
            if tendered < total:
                logger.warning(
                    f"Rejected sale of {qty} x {product.name}: "
                    f"total {total}, tendered {tendered}"
                )
                raise InsufficientPaymentError(total=total, tendered=tendered)

            self._ledger.apply_delta(product_id, -qty.value)

            sale = SaleRecord.create(product, qty, tendered)
            try:
                stored = self._sale_repo.append(sale)
            except StoreUnavailableError:
                logger.error(
                    f"Could not log sale of {qty} x {product.name}; "
                    f"reverting stock decrement",
                    exc_info=True,
                )
                self._ledger.apply_delta(product_id, qty.value)
                raise

        logger.info(
            f"Sale #{stored.id}: {qty} x {stored.product_name} "
            f"total {stored.total}, change {stored.change}"
        )
        return stored

    @staticmethod
    def _parse_quantity(quantity: int | str | Quantity) -> Quantity:
        if isinstance(quantity, Quantity):
            return quantity
        if isinstance(quantity, str):
            try:
                quantity = int(quantity.strip())
            except ValueError as exc:
                raise ValidationError(f"Invalid quantity: {quantity!r}") from exc
        return Quantity(quantity)
