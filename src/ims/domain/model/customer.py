"""Customer aggregate.

Customers have an independent lifecycle and no relationship to products
or sales.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ims.domain.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass
class Customer:

    id: str | None
    name: str
    email: str = ""
    phone: str = ""
    address: str = ""

    @staticmethod
    def create(
        name: str,
        email: str = "",
        phone: str = "",
        address: str = "",
    ) -> Customer:
        customer = Customer(id=None, name="")
        customer.update(name=name, email=email, phone=phone, address=address)
        return customer

    def update(
        self,
        name: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        address: str | None = None,
    ) -> None:
        """Apply the given fields; ``None`` leaves a field as it is."""
        if name is not None:
            if not name.strip():
                raise ValidationError("Customer name is required")
            self.name = name.strip()
        if email is not None:
            email = email.strip()
            if email and not _EMAIL_RE.match(email):
                raise ValidationError(f"Invalid email address: '{email}'")
            self.email = email
        if phone is not None:
            self.phone = phone.strip()
        if address is not None:
            self.address = address.strip()
