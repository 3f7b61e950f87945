from __future__ import annotations

import random
from datetime import datetime
from typing import List, Optional

from ..common.datetime_utils import now_local
from ..core.exceptions import NotFoundError
from .draft import InvoiceDraft, blank_draft
from .model import BankDetails, Invoice, InvoiceCompany
from .numbering import generate_invoice_number
from .repository import InvoiceRepository


class InvoiceService:
    """Use case: draft, save, reload and delete client invoices."""

    def __init__(
        self,
        invoices: InvoiceRepository,
        *,
        company: Optional[InvoiceCompany] = None,
        bank_details: Optional[BankDetails] = None,
        rng: Optional[random.Random] = None,
    ):
        self._invoices = invoices
        self._company = company or InvoiceCompany()
        self._bank = bank_details or BankDetails()
        self._rng = rng or random.Random()

    def new_draft(self, *, now: Optional[datetime] = None) -> InvoiceDraft:
        now = now or now_local()
        return blank_draft(
            invoice_number=generate_invoice_number(now, self._rng),
            invoice_date=now.date().isoformat(),
            company=self._company,
            bank_details=self._bank,
        )

    def save_draft(self, draft: InvoiceDraft, *, now: Optional[datetime] = None) -> Invoice:
        """Persist the draft as a brand-new invoice record."""
        invoice = draft.to_invoice(now=now or now_local())
        self._invoices.add(invoice)
        return invoice

    def list_invoices(self) -> List[Invoice]:
        """Newest first."""
        return sorted(self._invoices.get_all(), key=lambda i: i.created_at, reverse=True)

    def get(self, invoice_id: str) -> Invoice:
        invoice = self._invoices.get(invoice_id)
        if not invoice:
            raise NotFoundError("Invoice not found")
        return invoice

    def load_draft(self, invoice_id: str) -> InvoiceDraft:
        return InvoiceDraft.from_invoice(self.get(invoice_id))

    def delete_invoice(self, invoice_id: str) -> None:
        if not self._invoices.delete(invoice_id):
            raise NotFoundError("Invoice not found")
