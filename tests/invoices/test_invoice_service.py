from __future__ import annotations

import random
from datetime import datetime

import pytest

from guard_manager.core.exceptions import NotFoundError
from guard_manager.invoices.model import InvoiceCompany
from guard_manager.invoices.pdf import render_invoice_pdf
from guard_manager.invoices.service import InvoiceService
from guard_manager.invoices.store_invoice_repository import StoreInvoiceRepository


@pytest.fixture
def svc(store):
    return InvoiceService(
        StoreInvoiceRepository(store),
        company=InvoiceCompany(name="Shield Security Services", tax_id="ABCDE1234F"),
        rng=random.Random(1),
    )


def test_new_draft_uses_fiscal_year_and_company_defaults(svc):
    draft = svc.new_draft(now=datetime(2025, 2, 10, 9, 0))
    assert draft.invoice_number.startswith("INV/2024-25/")
    assert draft.invoice_date == "2025-02-10"
    assert draft.company.name == "Shield Security Services"


def test_save_persists_total_and_timestamp(svc):
    draft = svc.new_draft(now=datetime(2025, 5, 1, 9, 0))
    draft.client_name = "Logistics Corp"
    draft.update_line(draft.line_items[0].id, guards=2, rate=700)

    invoice = svc.save_draft(draft, now=datetime(2025, 5, 1, 9, 30))

    [stored] = svc.list_invoices()
    assert stored == invoice
    assert stored.total_amount == 2 * 26 * 700
    assert stored.created_at == "2025-05-01T09:30:00"
    assert stored.to_dict()["total_amount"] == 36400


def test_resaving_a_loaded_invoice_creates_a_new_record(svc):
    original = svc.save_draft(svc.new_draft(now=datetime(2025, 5, 1)), now=datetime(2025, 5, 1, 9, 0))

    draft = svc.load_draft(original.id)
    draft.client_name = "Changed Client"
    copy = svc.save_draft(draft, now=datetime(2025, 5, 2, 9, 0))

    invoices = svc.list_invoices()
    assert [i.id for i in invoices] == [copy.id, original.id]
    assert svc.get(original.id).client_name == ""
    assert copy.invoice_number == original.invoice_number


def test_delete_removes_saved_invoice(svc):
    invoice = svc.save_draft(svc.new_draft())
    svc.delete_invoice(invoice.id)
    assert svc.list_invoices() == []
    with pytest.raises(NotFoundError):
        svc.delete_invoice(invoice.id)
    with pytest.raises(NotFoundError):
        svc.load_draft(invoice.id)


def test_pdf_renders(svc):
    draft = svc.new_draft(now=datetime(2025, 5, 1))
    draft.client_name = "A & B <Traders>"
    draft.update_line(draft.line_items[0].id, rate=650)

    pdf = render_invoice_pdf(svc.save_draft(draft))

    assert pdf.startswith(b"%PDF")
    assert len(pdf) > 1000
