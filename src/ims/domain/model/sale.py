"""SaleRecord: an immutable entry in the append-only sales log."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from ims.domain.exceptions import InsufficientPaymentError
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class SaleRecord:
    """A completed sale.

    The product name and unit price are snapshots taken at sale time, so
    later price changes or deletion of the product never alter the
    record. ``total`` and ``change`` are fixed at creation.
    """

    id: int | None
    product_id: str
    product_name: str
    unit_price: Money  # locked at sale time
    quantity: Quantity
    total: Money
    amount_tendered: Money
    change: Money
    sold_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        product: Product,
        quantity: Quantity,
        amount_tendered: Money,
        sold_at: datetime | None = None,
    ) -> SaleRecord:
        """Build a record for a sale whose stock has been committed.

        The payment check repeats the SaleProcessor check as a factory
        guard, so no record with negative change can be constructed.
        """
        total = product.price * quantity.value
        if amount_tendered < total:
            raise InsufficientPaymentError(total=total, tendered=amount_tendered)
        return SaleRecord(
            id=None,
            product_id=product.id,  # type: ignore[arg-type]
            product_name=product.name,
            unit_price=product.price,
            quantity=quantity,
            total=total,
            amount_tendered=amount_tendered,
            change=amount_tendered - total,
            sold_at=sold_at or datetime.now(timezone.utc),
        )
