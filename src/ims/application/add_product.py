"""Application service: Create Product use case."""

from __future__ import annotations

import logging

from ims.domain.exceptions import ValidationError
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money
from ims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str,
        quantity: int = 0,
        description: str = "",
        category: str = "",
    ) -> Product:
        """Add a new product to the catalog with its opening stock."""
        if name and self._product_repo.get_by_name(name.strip()) is not None:
            raise ValidationError(f"Product '{name.strip()}' already exists")

        product = Product.create(
            name=name,
            price=Money.of(price),
            quantity=quantity,
            description=description,
            category=category,
        )
        self._product_repo.save(product)
        logger.info(f"Product #{product.id} '{product.name}' created")
        return product
