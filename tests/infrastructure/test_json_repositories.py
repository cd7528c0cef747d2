"""Tests for the JSON-file-backed repositories."""

import json
import threading

import pytest

from ims.domain.exceptions import StoreUnavailableError
from ims.domain.model.customer import Customer
from ims.domain.model.product import Product
from ims.domain.model.sale import SaleRecord
from ims.domain.model.value_objects import Money, Quantity
from ims.domain.service.sale_processor import SaleProcessor
from ims.domain.service.stock_ledger import StockLedger
from ims.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from ims.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from ims.infrastructure.persistence.json_sale_repository import JsonSaleRepository


class TestJsonProductRepository:

    def test_creates_empty_file(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "data" / "products.json")
        assert repo.list_all() == []
        assert (tmp_path / "data" / "products.json").read_text() == "[]\n"

    def test_save_assigns_id_and_round_trips(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        product = Product.create(
            name="Widget", price=Money.of("12.30"), quantity=4,
            description="Blue", category="Tools",
        )
        repo.save(product)

        assert product.id == "1"
        assert repo.get_by_id("1") == product
        assert repo.get_by_name("WIDGET") == product

    def test_save_updates_in_place(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(Product.create(name="Widget", price=Money.of("1")))
        repo.save(Product.create(name="Gadget", price=Money.of("2")))

        widget = repo.get_by_id("1")
        widget.apply_delta(7)
        repo.save(widget)

        assert [p.quantity for p in repo.list_all()] == [7, 0]

    def test_delete(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(Product.create(name="Widget", price=Money.of("1")))
        assert repo.delete("1") is True
        assert repo.delete("1") is False
        assert repo.list_all() == []

    def test_ids_not_reused_after_delete_of_earlier(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        for name in ("A", "B"):
            repo.save(Product.create(name=name, price=Money.of("1")))
        repo.delete("1")
        c = Product.create(name="C", price=Money.of("1"))
        repo.save(c)
        assert c.id == "3"

    def test_corrupt_file_is_store_unavailable(self, tmp_path):
        path = tmp_path / "products.json"
        path.write_text("{not json", encoding="utf-8")
        repo = JsonProductRepository(path)
        with pytest.raises(StoreUnavailableError):
            repo.list_all()

    def test_concurrent_sales_on_different_products_keep_both(self, tmp_path):
        product_repo = JsonProductRepository(tmp_path / "products.json")
        for name in ("A", "B"):
            product_repo.save(Product.create(name=name, price=Money.of("1"), quantity=50))
        sale_repo = JsonSaleRepository(tmp_path / "sales.json")
        processor = SaleProcessor(product_repo, sale_repo, StockLedger(product_repo))

        def sell(product_id: str) -> None:
            for _ in range(10):
                processor.record_sale(product_id, 1, "1")

        threads = [threading.Thread(target=sell, args=(pid,)) for pid in ("1", "2")]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert [p.quantity for p in product_repo.list_all()] == [40, 40]
        assert len(sale_repo.list_all()) == 20


class TestJsonCustomerRepository:

    def test_round_trip_and_delete(self, tmp_path):
        repo = JsonCustomerRepository(tmp_path / "customers.json")
        customer = Customer.create(name="Ann", email="ann@example.com")
        repo.save(customer)

        assert repo.get_by_id(customer.id) == customer
        assert repo.delete(customer.id) is True
        assert repo.get_by_id(customer.id) is None


class TestJsonSaleRepository:

    def _sale(self) -> SaleRecord:
        product = Product(id="7", name="Widget", price=Money.of("2.50"), quantity=10)
        return SaleRecord.create(product, Quantity(3), Money.of("10"))

    def test_append_assigns_ids_in_order(self, tmp_path):
        repo = JsonSaleRepository(tmp_path / "sales.json")
        first = repo.append(self._sale())
        second = repo.append(self._sale())

        assert (first.id, second.id) == (1, 2)
        assert [s.id for s in repo.list_all()] == [1, 2]

    def test_round_trip_preserves_money_and_timestamp(self, tmp_path):
        repo = JsonSaleRepository(tmp_path / "sales.json")
        stored = repo.append(self._sale())
        (loaded,) = repo.list_all()

        assert loaded == stored
        assert loaded.total == Money.of("7.50")
        assert loaded.change == Money.of("2.50")

    def test_amounts_stored_as_strings(self, tmp_path):
        path = tmp_path / "sales.json"
        JsonSaleRepository(path).append(self._sale())
        (raw,) = json.loads(path.read_text(encoding="utf-8"))
        assert raw["total"] == "7.50"
        assert raw["product_name"] == "Widget"
