"""Application service: read-only reports over current store contents.

Every figure is re-derived from the repositories on each call; nothing
is cached. A single figure reflects the committed state at the moment it
is computed, but two figures from two calls may straddle a concurrent
write.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.exceptions import ValidationError
from ims.domain.model.product import DEFAULT_LOW_STOCK_THRESHOLD, Product
from ims.domain.model.value_objects import Money
from ims.domain.repository.customer_repository import CustomerRepository
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.repository.sale_repository import SaleRepository


@dataclass(frozen=True)
class InventoryLineDTO:
    product_id: str
    product_name: str
    category: str
    price: str
    quantity: int
    value: str
    status: str  # "LOW STOCK" or "IN STOCK"


@dataclass(frozen=True)
class ReportSummaryDTO:
    total_inventory_value: str
    low_stock_count: int
    total_sales_value: str
    customer_count: int


class ReportAggregator:

    def __init__(
        self,
        product_repo: ProductRepository,
        sale_repo: SaleRepository,
        customer_repo: CustomerRepository,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
        currency_symbol: str = "$",
    ) -> None:
        self._product_repo = product_repo
        self._sale_repo = sale_repo
        self._customer_repo = customer_repo
        self._threshold = low_stock_threshold
        self._symbol = currency_symbol

    # --- Figures --------------------------------------------------------------

    def total_inventory_value(self) -> Money:
        result = Money.zero()
        for product in self._product_repo.list_all():
            result = result + product.stock_value
        return result

    def low_stock_items(self, threshold: int | None = None) -> list[Product]:
        """Products below the threshold, lowest quantity first."""
        limit = self._resolve_threshold(threshold)
        low = [p for p in self._product_repo.list_all() if p.is_low_stock(limit)]
        return sorted(low, key=lambda p: (p.quantity, p.name.lower()))

    def total_sales_value(self) -> Money:
        # Uses the totals fixed at sale time, not current prices.
        result = Money.zero()
        for sale in self._sale_repo.list_all():
            result = result + sale.total
        return result

    def customer_count(self) -> int:
        return len(self._customer_repo.list_all())

    # --- Composite views ------------------------------------------------------

    def summary(self) -> ReportSummaryDTO:
        return ReportSummaryDTO(
            total_inventory_value=self.total_inventory_value().format(self._symbol),
            low_stock_count=len(self.low_stock_items()),
            total_sales_value=self.total_sales_value().format(self._symbol),
            customer_count=self.customer_count(),
        )

    def inventory_report(self, threshold: int | None = None) -> list[InventoryLineDTO]:
        limit = self._resolve_threshold(threshold)
        return [
            InventoryLineDTO(
                product_id=p.id,  # type: ignore[arg-type]
                product_name=p.name,
                category=p.category,
                price=p.price.format(self._symbol),
                quantity=p.quantity,
                value=p.stock_value.format(self._symbol),
                status="LOW STOCK" if p.is_low_stock(limit) else "IN STOCK",
            )
            for p in self._product_repo.list_all()
        ]

    # --- Internal helpers -----------------------------------------------------

    def _resolve_threshold(self, threshold: int | None) -> int:
        if threshold is None:
            return self._threshold
        if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold < 0:
            raise ValidationError(
                f"Low-stock threshold must be a non-negative integer, got {threshold!r}"
            )
        return threshold
