from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from ..common.ids import new_id
from ..common.validators import require_iso_date, require_non_empty, require_non_negative
from ..core.constants import DEFAULT_LINE_DAYS, DEFAULT_LINE_DESCRIPTION, DEFAULT_LINE_GUARDS, DEFAULT_LINE_RATE
from ..core.exceptions import NotFoundError
from .model import BankDetails, Invoice, InvoiceCompany, InvoiceLineItem

_FACTORS = ("guards", "days", "rate")


def new_line_item() -> InvoiceLineItem:
    return InvoiceLineItem(
        id=new_id(),
        description=DEFAULT_LINE_DESCRIPTION,
        guards=DEFAULT_LINE_GUARDS,
        days=DEFAULT_LINE_DAYS,
        rate=DEFAULT_LINE_RATE,
    )


@dataclass
class InvoiceDraft:
    """An invoice being edited (the Drafting state).

    Always holds at least one line item. Turning it into an :class:`Invoice`
    never touches a previously saved record.
    """

    invoice_number: str
    invoice_date: str
    company: InvoiceCompany = field(default_factory=InvoiceCompany)
    client_name: str = ""
    client_address: str = ""
    bank_details: BankDetails = field(default_factory=BankDetails)
    notes: str = ""
    line_items: List[InvoiceLineItem] = field(default_factory=lambda: [new_line_item()])

    def __post_init__(self):
        if not self.line_items:
            self.line_items = [new_line_item()]

    @property
    def total_amount(self) -> float:
        return sum(item.value for item in self.line_items)

    def add_line(self, **values) -> InvoiceLineItem:
        item = new_line_item()
        if values:
            item = self._apply(item, values)
        self.line_items.append(item)
        return item

    def update_line(self, line_id: str, **changes) -> InvoiceLineItem:
        for idx, item in enumerate(self.line_items):
            if item.id == line_id:
                updated = self._apply(item, changes)
                self.line_items[idx] = updated
                return updated
        raise NotFoundError("Line item not found")

    def remove_line(self, line_id: str) -> bool:
        """Drop a line. The last remaining line is kept; returns whether anything was removed."""
        if len(self.line_items) <= 1:
            return False
        kept = [item for item in self.line_items if item.id != line_id]
        removed = len(kept) != len(self.line_items)
        self.line_items = kept
        return removed

    def to_invoice(self, *, now: datetime) -> Invoice:
        return Invoice(
            id=new_id(),
            invoice_number=require_non_empty(self.invoice_number, "Invoice number"),
            invoice_date=require_iso_date(self.invoice_date, "Invoice date"),
            company=self.company,
            client_name=self.client_name.strip(),
            client_address=self.client_address.strip(),
            line_items=tuple(self.line_items),
            bank_details=self.bank_details,
            created_at=now.isoformat(timespec="seconds"),
            notes=self.notes,
        )

    @classmethod
    def from_invoice(cls, invoice: Invoice) -> "InvoiceDraft":
        return cls(
            invoice_number=invoice.invoice_number,
            invoice_date=invoice.invoice_date,
            company=invoice.company,
            client_name=invoice.client_name,
            client_address=invoice.client_address,
            bank_details=invoice.bank_details,
            notes=invoice.notes,
            line_items=list(invoice.line_items),
        )

    @staticmethod
    def _apply(item: InvoiceLineItem, changes: dict) -> InvoiceLineItem:
        unknown = set(changes) - {"description", *_FACTORS}
        if unknown:
            raise TypeError(f"Unknown line item fields: {sorted(unknown)}")
        clean = {}
        for name in _FACTORS:
            if name in changes:
                clean[name] = require_non_negative(changes[name], name.capitalize())
        if "description" in changes:
            clean["description"] = str(changes["description"] or "")
        return item.with_changes(**clean)


def blank_draft(
    *,
    invoice_number: str,
    invoice_date: str,
    company: Optional[InvoiceCompany] = None,
    bank_details: Optional[BankDetails] = None,
) -> InvoiceDraft:
    return InvoiceDraft(
        invoice_number=invoice_number,
        invoice_date=invoice_date,
        company=company or InvoiceCompany(),
        bank_details=bank_details or BankDetails(),
    )
