"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Money values are
pre-formatted with the configured currency symbol.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.model.customer import Customer
from ims.domain.model.product import Product
from ims.domain.model.sale import SaleRecord


@dataclass(frozen=True)
class ProductDTO:

    id: str
    name: str
    description: str
    category: str
    price: str  # formatted, e.g. "$15.00"
    quantity: int

    @staticmethod
    def from_domain(product: Product, symbol: str = "$") -> ProductDTO:
        return ProductDTO(
            id=product.id,  # type: ignore[arg-type]
            name=product.name,
            description=product.description,
            category=product.category,
            price=product.price.format(symbol),
            quantity=product.quantity,
        )


@dataclass(frozen=True)
class CustomerDTO:

    id: str
    name: str
    email: str
    phone: str
    address: str

    @staticmethod
    def from_domain(customer: Customer) -> CustomerDTO:
        return CustomerDTO(
            id=customer.id,  # type: ignore[arg-type]
            name=customer.name,
            email=customer.email,
            phone=customer.phone,
            address=customer.address,
        )


@dataclass(frozen=True)
class SaleDTO:
    """Output: one completed sale as displayed to the user."""

    id: int
    product_id: str
    product_name: str
    quantity: int
    unit_price: str
    total: str
    amount_tendered: str
    change: str
    sold_at: str

    @staticmethod
    def from_domain(sale: SaleRecord, symbol: str = "$") -> SaleDTO:
        return SaleDTO(
            id=sale.id,  # type: ignore[arg-type]
            product_id=sale.product_id,
            product_name=sale.product_name,
            quantity=sale.quantity.value,
            unit_price=sale.unit_price.format(symbol),
            total=sale.total.format(symbol),
            amount_tendered=sale.amount_tendered.format(symbol),
            change=sale.change.format(symbol),
            sold_at=sale.sold_at.strftime("%Y-%m-%d %H:%M UTC"),
        )


@dataclass(frozen=True)
class SaleReceiptDTO:
    """Output of a sale: the record plus the stock left afterwards."""

    sale: SaleDTO
    remaining_quantity: int
    low_stock: bool
