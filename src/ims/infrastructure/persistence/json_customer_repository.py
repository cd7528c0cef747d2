"""JSON-file-backed implementation of CustomerRepository."""

from __future__ import annotations

from pathlib import Path

from ims.domain.model.customer import Customer
from ims.domain.repository.customer_repository import CustomerRepository
from ims.infrastructure.persistence.json_file import JsonFile, next_numeric_id


class JsonCustomerRepository(CustomerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_id(self, customer_id: str) -> Customer | None:
        for raw in self._file.load():
            if raw["id"] == customer_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Customer]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def save(self, customer: Customer) -> None:
        with self._file.lock:
            records = self._file.load()
            if customer.id is None:
                customer.id = str(next_numeric_id(records))
            for i, raw in enumerate(records):
                if raw["id"] == customer.id:
                    records[i] = self._to_raw(customer)
                    break
            else:
                records.append(self._to_raw(customer))
            self._file.persist(records)

    def delete(self, customer_id: str) -> bool:
        with self._file.lock:
            records = self._file.load()
            remaining = [raw for raw in records if raw["id"] != customer_id]
            if len(remaining) == len(records):
                return False
            self._file.persist(remaining)
            return True

    @staticmethod
    def _to_raw(customer: Customer) -> dict:
        return {
            "id": customer.id,
            "name": customer.name,
            "email": customer.email,
            "phone": customer.phone,
            "address": customer.address,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Customer:
        return Customer(
            id=raw["id"],
            name=raw["name"],
            email=raw.get("email", ""),
            phone=raw.get("phone", ""),
            address=raw.get("address", ""),
        )
