"""Integration tests for the customer use cases."""

import pytest

from ims.application.manage_customers import (
    AddCustomerHandler,
    DeleteCustomerHandler,
    ListCustomersHandler,
    ShowCustomerHandler,
    UpdateCustomerHandler,
)
from ims.domain.exceptions import CustomerNotFoundError, ValidationError
from tests.fakes import FakeCustomerRepository


def _setup():
    repo = FakeCustomerRepository()
    dto = AddCustomerHandler(repo).handle(
        name="Ann Lee", email="ann@example.com", phone="555-0100", address="1 Main St"
    )
    return repo, dto


class TestCustomerLifecycle:

    def test_add_and_show(self):
        repo, dto = _setup()
        shown = ShowCustomerHandler(repo).handle(dto.id)
        assert shown == dto
        assert shown.id == "1"

    def test_update(self):
        repo, dto = _setup()
        updated = UpdateCustomerHandler(repo).handle(dto.id, phone="555-0199")
        assert updated.phone == "555-0199"
        assert updated.email == "ann@example.com"

    def test_update_with_bad_email_leaves_record(self):
        repo, dto = _setup()
        with pytest.raises(ValidationError):
            UpdateCustomerHandler(repo).handle(dto.id, email="nope")
        assert repo.get_by_id(dto.id).email == "ann@example.com"

    def test_update_unknown(self):
        repo, _ = _setup()
        with pytest.raises(CustomerNotFoundError):
            UpdateCustomerHandler(repo).handle("99", name="X")

    def test_delete_requires_confirmation(self):
        repo, dto = _setup()
        with pytest.raises(ValidationError, match="explicitly confirmed"):
            DeleteCustomerHandler(repo).handle(dto.id)
        assert len(ListCustomersHandler(repo).handle()) == 1

    def test_delete(self):
        repo, dto = _setup()
        DeleteCustomerHandler(repo).handle(dto.id, confirmed=True)
        assert ListCustomersHandler(repo).handle() == []

    def test_delete_unknown(self):
        repo, _ = _setup()
        with pytest.raises(CustomerNotFoundError):
            DeleteCustomerHandler(repo).handle("99", confirmed=True)
