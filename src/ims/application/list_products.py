"""Application service: product queries."""

from __future__ import annotations

from ims.application.dto import ProductDTO
from ims.domain.exceptions import ProductNotFoundError
from ims.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository, currency_symbol: str = "$") -> None:
        self._product_repo = product_repo
        self._symbol = currency_symbol

    def handle(self) -> list[ProductDTO]:
        return [
            ProductDTO.from_domain(p, self._symbol)
            for p in self._product_repo.list_all()
        ]


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository, currency_symbol: str = "$") -> None:
        self._product_repo = product_repo
        self._symbol = currency_symbol

    def handle(self, product_id: str) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return ProductDTO.from_domain(product, self._symbol)
