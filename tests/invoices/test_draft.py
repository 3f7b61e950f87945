from __future__ import annotations

from datetime import datetime

import pytest

from guard_manager.core.exceptions import NotFoundError, ValidationError
from guard_manager.invoices.draft import InvoiceDraft
from guard_manager.invoices.model import InvoiceLineItem


def _draft():
    return InvoiceDraft(invoice_number="INV/2025-26/1234", invoice_date="2025-05-01")


def test_new_draft_starts_with_default_line():
    draft = _draft()
    [item] = draft.line_items
    assert item.description == "Security Guard"
    assert (item.guards, item.days, item.rate) == (1, 26, 0)
    assert draft.total_amount == 0


def test_value_follows_every_factor_edit():
    draft = _draft()
    line_id = draft.line_items[0].id

    assert draft.update_line(line_id, rate=800).value == 1 * 26 * 800
    assert draft.update_line(line_id, guards=3).value == 3 * 26 * 800
    assert draft.update_line(line_id, days="30").value == 3 * 30 * 800
    assert draft.total_amount == 72000


def test_total_tracks_added_and_removed_lines():
    draft = _draft()
    draft.update_line(draft.line_items[0].id, rate=100)
    extra = draft.add_line(description="Supervisor", guards=1, days=30, rate=1000)

    assert draft.total_amount == 2600 + 30000

    assert draft.remove_line(extra.id) is True
    assert draft.total_amount == 2600


def test_last_line_cannot_be_removed():
    draft = _draft()
    only = draft.line_items[0].id

    assert draft.remove_line(only) is False
    assert len(draft.line_items) == 1


def test_negative_factor_is_rejected():
    draft = _draft()
    with pytest.raises(ValidationError):
        draft.update_line(draft.line_items[0].id, rate=-5)


def test_update_unknown_line():
    with pytest.raises(NotFoundError):
        _draft().update_line("missing", rate=1)


def test_stored_value_is_ignored_on_load():
    item = InvoiceLineItem.from_dict({"id": "x", "description": "Guard", "guards": 2, "days": 10, "rate": 50, "value": 1})
    assert item.value == 1000


def test_to_invoice_requires_number_and_date():
    draft = _draft()
    draft.invoice_number = "  "
    with pytest.raises(ValidationError):
        draft.to_invoice(now=datetime(2025, 5, 1, 10, 0))
