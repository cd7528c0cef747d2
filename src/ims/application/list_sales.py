"""Application service: List Sales use case (query)."""

from __future__ import annotations

from ims.application.dto import SaleDTO
from ims.domain.repository.sale_repository import SaleRepository


class ListSalesHandler:

    def __init__(self, sale_repo: SaleRepository, currency_symbol: str = "$") -> None:
        self._sale_repo = sale_repo
        self._symbol = currency_symbol

    def handle(self) -> list[SaleDTO]:
        """Return every sale, newest first."""
        sales = reversed(self._sale_repo.list_all())
        return [SaleDTO.from_domain(s, self._symbol) for s in sales]
