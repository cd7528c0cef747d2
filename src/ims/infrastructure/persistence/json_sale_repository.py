"""JSON-file-backed implementation of SaleRepository (append-only)."""

from __future__ import annotations

import dataclasses
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from ims.domain.model.sale import SaleRecord
from ims.domain.model.value_objects import Money, Quantity
from ims.domain.repository.sale_repository import SaleRepository
from ims.infrastructure.persistence.json_file import JsonFile, next_numeric_id


class JsonSaleRepository(SaleRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def append(self, sale: SaleRecord) -> SaleRecord:
        with self._file.lock:
            records = self._file.load()
            stored = dataclasses.replace(sale, id=next_numeric_id(records))
            records.append(self._to_raw(stored))
            self._file.persist(records)
        return stored

    def list_all(self) -> list[SaleRecord]:
        return [self._to_domain(raw) for raw in self._file.load()]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(sale: SaleRecord) -> dict:
        return {
            "id": sale.id,
            "product_id": sale.product_id,
            "product_name": sale.product_name,
            "unit_price": str(sale.unit_price.amount),
            "quantity": sale.quantity.value,
            "total": str(sale.total.amount),
            "amount_tendered": str(sale.amount_tendered.amount),
            "change": str(sale.change.amount),
            "sold_at": sale.sold_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> SaleRecord:
        return SaleRecord(
            id=raw["id"],
            product_id=raw["product_id"],
            product_name=raw["product_name"],
            unit_price=Money(Decimal(raw["unit_price"])),
            quantity=Quantity(raw["quantity"]),
            total=Money(Decimal(raw["total"])),
            amount_tendered=Money(Decimal(raw["amount_tendered"])),
            change=Money(Decimal(raw["change"])),
            sold_at=datetime.fromisoformat(raw["sold_at"]),
        )
