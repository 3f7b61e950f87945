from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple


@dataclass(frozen=True)
class InvoiceCompany:
    """The issuing agency's letterhead details."""

    name: str = ""
    address: str = ""
    phone: str = ""
    email: str = ""
    tax_id: str = ""

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "address": self.address,
            "phone": self.phone,
            "email": self.email,
            "tax_id": self.tax_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "InvoiceCompany":
        return cls(**{k: str(data.get(k) or "") for k in ("name", "address", "phone", "email", "tax_id")})


@dataclass(frozen=True)
class BankDetails:
    bank_name: str = ""
    account_name: str = ""
    account_number: str = ""
    ifsc: str = ""

    def to_dict(self) -> dict:
        return {
            "bank_name": self.bank_name,
            "account_name": self.account_name,
            "account_number": self.account_number,
            "ifsc": self.ifsc,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "BankDetails":
        return cls(**{k: str(data.get(k) or "") for k in ("bank_name", "account_name", "account_number", "ifsc")})


@dataclass(frozen=True)
class InvoiceLineItem:
    """One billed row. ``value`` is derived from the three factors, never stored independently."""

    id: str
    description: str
    guards: float
    days: float
    rate: float

    @property
    def value(self) -> float:
        return self.guards * self.days * self.rate

    def with_changes(self, **changes) -> "InvoiceLineItem":
        return replace(self, **changes)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "description": self.description,
            "guards": self.guards,
            "days": self.days,
            "rate": self.rate,
            "value": self.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "InvoiceLineItem":
        return cls(
            id=str(data["id"]),
            description=str(data.get("description") or ""),
            guards=_number(data.get("guards")),
            days=_number(data.get("days")),
            rate=_number(data.get("rate")),
        )


@dataclass(frozen=True)
class Invoice:
    """A saved client invoice. Saving again always produces a new record."""

    id: str
    invoice_number: str
    invoice_date: str
    company: InvoiceCompany
    client_name: str
    client_address: str
    line_items: Tuple[InvoiceLineItem, ...]
    bank_details: BankDetails
    created_at: str
    notes: str = ""

    @property
    def total_amount(self) -> float:
        return sum(item.value for item in self.line_items)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "invoice_number": self.invoice_number,
            "invoice_date": self.invoice_date,
            "company": self.company.to_dict(),
            "client_name": self.client_name,
            "client_address": self.client_address,
            "line_items": [item.to_dict() for item in self.line_items],
            "total_amount": self.total_amount,
            "bank_details": self.bank_details.to_dict(),
            "created_at": self.created_at,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Invoice":
        return cls(
            id=str(data["id"]),
            invoice_number=str(data["invoice_number"]),
            invoice_date=str(data.get("invoice_date") or ""),
            company=InvoiceCompany.from_dict(data.get("company") or {}),
            client_name=str(data.get("client_name") or ""),
            client_address=str(data.get("client_address") or ""),
            line_items=tuple(InvoiceLineItem.from_dict(i) for i in data.get("line_items") or []),
            bank_details=BankDetails.from_dict(data.get("bank_details") or {}),
            created_at=str(data.get("created_at") or ""),
            notes=str(data.get("notes") or ""),
        )


def _number(value) -> float:
    if value is None or value == "":
        return 0
    if isinstance(value, bool):
        raise ValueError("expected a number")
    if isinstance(value, (int, float)):
        return value
    number = float(value)
    return int(number) if number.is_integer() else number
