"""Application service: Delete Product use case.

Historical sale records are untouched: they carry their own snapshot of
the product name and price.
"""

from __future__ import annotations

import logging

from ims.domain.exceptions import ProductNotFoundError, ValidationError
from ims.domain.repository.product_repository import ProductRepository
from ims.domain.service.stock_ledger import StockLedger

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository, ledger: StockLedger) -> None:
        self._product_repo = product_repo
        self._ledger = ledger

    def handle(self, product_id: str, confirmed: bool = False) -> None:
        if not confirmed:
            raise ValidationError(
                f"Deleting product '{product_id}' must be explicitly confirmed"
            )

        with self._ledger.exclusive(product_id):
            if not self._product_repo.delete(product_id):
                raise ProductNotFoundError(product_id)
        logger.info(f"Product #{product_id} deleted")
