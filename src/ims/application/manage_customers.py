"""Application services: Customer use cases.

Customers are a plain record list with no ties to stock or sales, so
all of their use cases live in this one module.
"""

from __future__ import annotations

import logging

from ims.application.dto import CustomerDTO
from ims.domain.exceptions import CustomerNotFoundError, ValidationError
from ims.domain.model.customer import Customer
from ims.domain.repository.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


class AddCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(
        self, name: str, email: str = "", phone: str = "", address: str = ""
    ) -> CustomerDTO:
        customer = Customer.create(name=name, email=email, phone=phone, address=address)
        self._customer_repo.save(customer)
        logger.info(f"Customer #{customer.id} '{customer.name}' created")
        return CustomerDTO.from_domain(customer)


class UpdateCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(
        self,
        customer_id: str,
        name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> CustomerDTO:
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        customer.update(name=name, email=email, phone=phone, address=address)
        self._customer_repo.save(customer)
        return CustomerDTO.from_domain(customer)


class DeleteCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_id: str, confirmed: bool = False) -> None:
        if not confirmed:
            raise ValidationError(
                f"Deleting customer '{customer_id}' must be explicitly confirmed"
            )
        if not self._customer_repo.delete(customer_id):
            raise CustomerNotFoundError(customer_id)
        logger.info(f"Customer #{customer_id} deleted")


class ListCustomersHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self) -> list[CustomerDTO]:
        return [CustomerDTO.from_domain(c) for c in self._customer_repo.list_all()]


class ShowCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_id: str) -> CustomerDTO:
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        return CustomerDTO.from_domain(customer)
