"""Application service: Update Product use case."""

from __future__ import annotations

from ims.domain.exceptions import ProductNotFoundError, ValidationError
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.service.stock_ledger import StockLedger


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository, ledger: StockLedger) -> None:
        self._product_repo = product_repo
        self._ledger = ledger

    def handle(
        self,
        product_id: str,
        name: str | None = None,
        description: str | None = None,
        category: str | None = None,
        price: str | None = None,
    ) -> Product:
        """Update a product's descriptive fields and/or price.

        Quantity is not writable here; stock changes go through the
        ledger. The update holds the product's ledger lock so a sale
        committed meanwhile is not overwritten by a stale quantity.
        Existing sale records keep their price snapshot.
        """
        new_price = Money.of(price) if price is not None else None

        with self._ledger.exclusive(product_id):
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise ProductNotFoundError(product_id)

            if name is not None:
                clash = self._product_repo.get_by_name(name.strip())
                if clash is not None and clash.id != product.id:
                    raise ValidationError(f"Product '{name.strip()}' already exists")

            product.update_details(
                name=name, description=description, category=category, price=new_price
            )
            self._product_repo.save(product)
        return product
