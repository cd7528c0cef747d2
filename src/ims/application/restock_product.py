"""Application service: Restock Product use case."""

from __future__ import annotations

from ims.domain.model.value_objects import Quantity
from ims.domain.service.stock_ledger import StockLedger


class RestockProductHandler:

    def __init__(self, ledger: StockLedger) -> None:
        self._ledger = ledger

    def handle(self, product_id: str, amount: int) -> int:
        """Add *amount* units to stock and return the new quantity."""
        qty = Quantity(amount)
        return self._ledger.apply_delta(product_id, qty.value)
