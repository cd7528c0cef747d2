"""Domain service: Stock Ledger.

The single point of mutation for product quantities. Every change to
``Product.quantity`` after creation goes through ``apply_delta``, which
runs a read-check-write cycle while holding that product's lock. Two
concurrent sales of the last unit therefore cannot both succeed, while
calls on different products proceed in parallel.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager

from ims.domain.exceptions import InsufficientStockError, ProductNotFoundError
from ims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductLocks:
    """Registry of one re-entrant lock per product ID.

    This in-memory version only excludes threads of one process; the
    infrastructure layer supplies a subclass whose locks also exclude
    other processes. Locks are never discarded, so a thread waiting on
    the lock of a product being deleted still excludes later callers.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.RLock] = {}

    def for_product(self, product_id: str) -> AbstractContextManager:
        with self._guard:
            lock = self._locks.get(product_id)
            if lock is None:
                lock = threading.RLock()
                self._locks[product_id] = lock
            return lock


class StockLedger:

    def __init__(
        self,
        product_repo: ProductRepository,
        locks: ProductLocks | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._locks = locks or ProductLocks()

    @contextmanager
    def exclusive(self, product_id: str) -> Iterator[None]:
        """Hold the product's lock for a multi-step operation.

        The lock is re-entrant, so ``apply_delta`` may be called inside.
        """
        with self._locks.for_product(product_id):
            yield

    def apply_delta(self, product_id: str, delta: int) -> int:
        """Atomically add a signed delta to a product's quantity.

        Positive deltas restock, negative deltas deduct. Returns the new
        quantity.

        Raises:
            ProductNotFoundError: no product with this ID.
            InsufficientStockError: the result would be negative; the
                stored quantity is left unchanged.
        """
        with self.exclusive(product_id):
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise ProductNotFoundError(product_id)

            before = product.quantity
            try:
                new_quantity = product.apply_delta(delta)
            except InsufficientStockError:
                logger.warning(
                    f"Rejected stock delta {delta:+d} for product {product_id}: "
                    f"only {before} on hand"
                )
                raise
            self._product_repo.save(product)

        logger.info(
            f"Stock for product {product_id} changed {before} -> {new_quantity} "
            f"({delta:+d})"
        )
        return new_quantity

    def quantity_of(self, product_id: str) -> int:
        """Return the current committed quantity of a product."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product.quantity
