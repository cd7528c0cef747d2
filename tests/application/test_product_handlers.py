"""Integration tests for the product and stock use cases."""

import pytest

from ims.application.add_product import AddProductHandler
from ims.application.delete_product import DeleteProductHandler
from ims.application.list_products import ListProductsHandler, ShowProductHandler
from ims.application.record_sale import RecordSaleHandler
from ims.application.restock_product import RestockProductHandler
from ims.application.update_product import UpdateProductHandler
from ims.domain.exceptions import ProductNotFoundError, ValidationError
from ims.domain.model.value_objects import Money
from ims.domain.service.stock_ledger import StockLedger
from tests.fakes import FakeProductRepository, FakeSaleRepository


def _setup():
    product_repo = FakeProductRepository()
    ledger = StockLedger(product_repo)
    product = AddProductHandler(product_repo).handle(
        name="Widget", price="15.00", quantity=12, category="Tools"
    )
    return product_repo, ledger, product


class TestAddProduct:

    def test_assigns_sequential_ids(self):
        product_repo, _, first = _setup()
        second = AddProductHandler(product_repo).handle(name="Gadget", price="3")
        assert first.id == "1"
        assert second.id == "2"

    def test_duplicate_name_rejected(self):
        product_repo, _, _ = _setup()
        with pytest.raises(ValidationError, match="already exists"):
            AddProductHandler(product_repo).handle(name="widget", price="1")

    def test_invalid_price_rejected(self):
        product_repo = FakeProductRepository()
        with pytest.raises(ValidationError, match="Invalid money amount"):
            AddProductHandler(product_repo).handle(name="Gadget", price="free")
        assert product_repo.list_all() == []


class TestUpdateProduct:

    def test_updates_details_not_quantity(self):
        product_repo, ledger, product = _setup()
        updated = UpdateProductHandler(product_repo, ledger).handle(
            product.id, name="Super Widget", price="18.50", description="Shiny"
        )
        stored = product_repo.get_by_id(product.id)
        assert updated.name == stored.name == "Super Widget"
        assert stored.price == Money.of("18.50")
        assert stored.description == "Shiny"
        assert stored.category == "Tools"
        assert stored.quantity == 12

    def test_update_keeps_stock_committed_by_sale(self):
        product_repo, ledger, product = _setup()
        RecordSaleHandler(product_repo, FakeSaleRepository(), ledger).handle(
            product.id, 2, "30"
        )
        UpdateProductHandler(product_repo, ledger).handle(product.id, price="20")
        assert product_repo.get_by_id(product.id).quantity == 10

    def test_unknown_product(self):
        product_repo, ledger, _ = _setup()
        with pytest.raises(ProductNotFoundError):
            UpdateProductHandler(product_repo, ledger).handle("99", name="X")

    def test_rename_to_existing_name_rejected(self):
        product_repo, ledger, product = _setup()
        AddProductHandler(product_repo).handle(name="Gadget", price="3")
        with pytest.raises(ValidationError, match="already exists"):
            UpdateProductHandler(product_repo, ledger).handle(product.id, name="Gadget")


class TestDeleteProduct:

    def test_requires_confirmation(self):
        product_repo, ledger, product = _setup()
        with pytest.raises(ValidationError, match="explicitly confirmed"):
            DeleteProductHandler(product_repo, ledger).handle(product.id)
        assert product_repo.get_by_id(product.id) is not None

    def test_confirmed_delete(self):
        product_repo, ledger, product = _setup()
        DeleteProductHandler(product_repo, ledger).handle(product.id, confirmed=True)
        assert product_repo.get_by_id(product.id) is None

    def test_unknown_product(self):
        product_repo, ledger, _ = _setup()
        with pytest.raises(ProductNotFoundError):
            DeleteProductHandler(product_repo, ledger).handle("99", confirmed=True)

    def test_sales_history_survives_delete(self):
        product_repo, ledger, product = _setup()
        sale_repo = FakeSaleRepository()
        RecordSaleHandler(product_repo, sale_repo, ledger).handle(product.id, 1, "15")
        DeleteProductHandler(product_repo, ledger).handle(product.id, confirmed=True)

        (sale,) = sale_repo.list_all()
        assert sale.product_name == "Widget"
        assert sale.total == Money.of("15.00")


class TestRestockProduct:

    def test_restock_adds_units(self):
        product_repo, ledger, product = _setup()
        assert RestockProductHandler(ledger).handle(product.id, 8) == 20
        assert product_repo.get_by_id(product.id).quantity == 20

    @pytest.mark.parametrize("amount", [0, -4])
    def test_non_positive_amount_rejected(self, amount):
        product_repo, ledger, product = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            RestockProductHandler(ledger).handle(product.id, amount)
        assert product_repo.get_by_id(product.id).quantity == 12

    def test_unknown_product(self):
        _, ledger, _ = _setup()
        with pytest.raises(ProductNotFoundError):
            RestockProductHandler(ledger).handle("99", 1)


class TestProductQueries:

    def test_list_formats_price(self):
        product_repo, _, _ = _setup()
        (dto,) = ListProductsHandler(product_repo, currency_symbol="M").handle()
        assert dto.price == "M15.00"
        assert dto.quantity == 12

    def test_show_unknown_product(self):
        product_repo, _, _ = _setup()
        with pytest.raises(ProductNotFoundError):
            ShowProductHandler(product_repo).handle("99")
