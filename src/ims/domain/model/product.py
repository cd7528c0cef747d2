"""Product aggregate.

Products have their own lifecycle: details and prices change, stock goes
up and down, products are added and removed from the catalog. Quantity
is the one field with a hard invariant and is only changed through
``apply_delta`` (called by the StockLedger).
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.exceptions import InsufficientStockError, ValidationError
from ims.domain.model.value_objects import Money

DEFAULT_LOW_STOCK_THRESHOLD = 10


@dataclass
class Product:
    """A product in the catalog together with its quantity on hand.

    Invariants:
    - ``quantity`` is never negative
    - ``price`` is a non-negative Money (enforced by Money itself)
    """

    id: str | None
    name: str
    price: Money
    quantity: int = 0
    description: str = ""
    category: str = ""

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        name: str,
        price: Money,
        quantity: int = 0,
        description: str = "",
        category: str = "",
    ) -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValidationError("Initial quantity must be an integer")
        if quantity < 0:
            raise ValidationError("Initial quantity cannot be negative")
        return Product(
            id=None,
            name=name.strip(),
            price=price,
            quantity=quantity,
            description=(description or "").strip(),
            category=(category or "").strip(),
        )

    # --- Mutations ------------------------------------------------------------

    def update_details(
        self,
        name: str | None = None,
        description: str | None = None,
        category: str | None = None,
        price: Money | None = None,
    ) -> None:
        """Change descriptive fields and price.

        Existing sale records keep the name and price captured when they
        were created.
        """
        if name is not None:
            if not name.strip():
                raise ValidationError("Product name is required")
            self.name = name.strip()
        if description is not None:
            self.description = description.strip()
        if category is not None:
            self.category = category.strip()
        if price is not None:
            self.price = price

    def apply_delta(self, delta: int) -> int:
        """Adjust quantity by a signed delta and return the new quantity.

        Raises InsufficientStockError, leaving the quantity unchanged, if
        the result would be negative.
        """
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise ValidationError(
                f"Stock delta must be an integer, got {type(delta).__name__}"
            )
        new_quantity = self.quantity + delta
        if new_quantity < 0:
            raise InsufficientStockError(
                product_id=self.id, requested=-delta, available=self.quantity
            )
        self.quantity = new_quantity
        return new_quantity

    # --- Computed properties --------------------------------------------------

    @property
    def stock_value(self) -> Money:
        return self.price * self.quantity

    def is_low_stock(self, threshold: int) -> bool:
        return self.quantity < threshold
