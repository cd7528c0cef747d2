"""Abstract repository for the append-only sales log.

There is deliberately no update or delete: a SaleRecord never changes
once written.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ims.domain.model.sale import SaleRecord


class SaleRepository(ABC):

    @abstractmethod
    def append(self, sale: SaleRecord) -> SaleRecord:
        """Append a sale and return it with its assigned ID."""

    @abstractmethod
    def list_all(self) -> list[SaleRecord]:
        """Return every sale in append order (oldest first)."""
