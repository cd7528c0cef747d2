"""Tests for the ReportAggregator query service."""

import pytest

from ims.application.record_sale import RecordSaleHandler
from ims.application.reports import ReportAggregator
from ims.domain.exceptions import ValidationError
from ims.domain.model.customer import Customer
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money
from ims.domain.service.stock_ledger import StockLedger
from tests.fakes import FakeCustomerRepository, FakeProductRepository, FakeSaleRepository


def _setup():
    product_repo = FakeProductRepository([
        Product(id="1", name="Widget", price=Money.of("2.50"), quantity=20),
        Product(id="2", name="Gadget", price=Money.of("10.00"), quantity=3),
    ])
    sale_repo = FakeSaleRepository()
    customer_repo = FakeCustomerRepository([Customer.create(name="Ann")])
    reports = ReportAggregator(product_repo, sale_repo, customer_repo)
    seller = RecordSaleHandler(product_repo, sale_repo, StockLedger(product_repo))
    return product_repo, reports, seller


class TestFigures:

    def test_total_inventory_value(self):
        _, reports, _ = _setup()
        assert reports.total_inventory_value() == Money.of("80.00")

    def test_low_stock_returns_only_items_below_threshold(self):
        _, reports, _ = _setup()
        assert [p.name for p in reports.low_stock_items(10)] == ["Gadget"]

    def test_low_stock_sorted_ascending(self):
        _, reports, _ = _setup()
        assert [p.quantity for p in reports.low_stock_items(25)] == [3, 20]

    def test_low_stock_uses_configured_default(self):
        product_repo, _, _ = _setup()
        reports = ReportAggregator(
            product_repo, FakeSaleRepository(), FakeCustomerRepository(),
            low_stock_threshold=2,
        )
        assert reports.low_stock_items() == []

    def test_negative_threshold_rejected(self):
        _, reports, _ = _setup()
        with pytest.raises(ValidationError):
            reports.low_stock_items(-1)

    def test_total_sales_value_accumulates(self):
        _, reports, seller = _setup()
        assert reports.total_sales_value() == Money.zero()
        seller.handle("1", 2, "5")
        seller.handle("2", 1, "20")
        assert reports.total_sales_value() == Money.of("15.00")

    def test_sales_value_stable_after_price_change(self):
        product_repo, reports, seller = _setup()
        seller.handle("2", 1, "10")
        before = reports.total_sales_value()

        product = product_repo.get_by_id("2")
        product.update_details(price=Money.of("99"))
        product_repo.save(product)

        assert reports.total_sales_value() == before == Money.of("10.00")

    def test_customer_count(self):
        _, reports, _ = _setup()
        assert reports.customer_count() == 1


class TestCompositeViews:

    def test_summary(self):
        _, reports, seller = _setup()
        seller.handle("1", 4, "10")
        summary = reports.summary()
        assert summary.total_inventory_value == "$70.00"
        assert summary.low_stock_count == 1
        assert summary.total_sales_value == "$10.00"
        assert summary.customer_count == 1

    def test_inventory_report_status(self):
        _, reports, _ = _setup()
        lines = {line.product_name: line for line in reports.inventory_report()}
        assert lines["Widget"].status == "IN STOCK"
        assert lines["Widget"].value == "$50.00"
        assert lines["Gadget"].status == "LOW STOCK"

    def test_reports_do_not_mutate(self):
        product_repo, reports, _ = _setup()
        before = product_repo.list_all()
        reports.summary()
        reports.inventory_report()
        assert product_repo.list_all() == before
