from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..common.datetime_utils import now_local
from ..common.ids import new_id
from ..common.validators import require_non_negative
from ..container import Container
from ..core.exceptions import ValidationError
from .draft import InvoiceDraft
from .formatting import format_inr
from .model import BankDetails, InvoiceCompany, InvoiceLineItem
from .pdf import render_invoice_pdf
from .words import amount_to_words


def draft_to_json(draft: InvoiceDraft) -> dict:
    return {
        "invoice_number": draft.invoice_number,
        "invoice_date": draft.invoice_date,
        "company": draft.company.to_dict(),
        "client_name": draft.client_name,
        "client_address": draft.client_address,
        "bank_details": draft.bank_details.to_dict(),
        "notes": draft.notes,
        "line_items": [item.to_dict() for item in draft.line_items],
        "total_amount": draft.total_amount,
        "total_in_words": amount_to_words(draft.total_amount),
    }


def draft_from_json(data: dict) -> InvoiceDraft:
    draft = InvoiceDraft(
        invoice_number=str(data.get("invoice_number") or ""),
        invoice_date=str(data.get("invoice_date") or ""),
        company=InvoiceCompany.from_dict(data.get("company") or {}),
        client_name=str(data.get("client_name") or ""),
        client_address=str(data.get("client_address") or ""),
        bank_details=BankDetails.from_dict(data.get("bank_details") or {}),
        notes=str(data.get("notes") or ""),
        line_items=[],
    )
    items = data.get("line_items") or []
    if items:
        try:
            draft.line_items = [InvoiceLineItem.from_dict({**i, "id": i.get("id") or new_id()}) for i in items]
        except (AttributeError, KeyError, TypeError, ValueError):
            raise ValidationError("Malformed line item") from None
        for item in draft.line_items:
            for name in ("guards", "days", "rate"):
                require_non_negative(getattr(item, name), name.capitalize())
    return draft


def register(app: Flask, container: Container) -> None:
    svc = container.invoice_service

    @app.route("/api/invoices", methods=["GET"], endpoint="invoices_list")
    def invoices_list():
        return jsonify({"success": True, "invoices": [i.to_dict() for i in svc.list_invoices()]})

    @app.route("/api/invoices/new", methods=["GET"], endpoint="invoices_new")
    def invoices_new():
        return jsonify({"success": True, "draft": draft_to_json(svc.new_draft())})

    @app.route("/api/invoices", methods=["POST"], endpoint="invoices_save")
    def invoices_save():
        invoice = svc.save_draft(draft_from_json(request.get_json(silent=True) or {}))
        return jsonify({"success": True, "invoice": invoice.to_dict()}), 201

    @app.route("/api/invoices/<invoice_id>/draft", methods=["GET"], endpoint="invoices_load")
    def invoices_load(invoice_id: str):
        return jsonify({"success": True, "draft": draft_to_json(svc.load_draft(invoice_id))})

    @app.route("/api/invoices/<invoice_id>", methods=["DELETE"], endpoint="invoices_delete")
    def invoices_delete(invoice_id: str):
        svc.delete_invoice(invoice_id)
        return jsonify({"success": True})

    @app.route("/api/invoices/<invoice_id>/pdf", methods=["GET"], endpoint="invoices_pdf")
    def invoices_pdf(invoice_id: str):
        invoice = svc.get(invoice_id)
        return _pdf_response(render_invoice_pdf(invoice), invoice.invoice_number)

    @app.route("/api/invoices/preview.pdf", methods=["POST"], endpoint="invoices_preview_pdf")
    def invoices_preview_pdf():
        invoice = draft_from_json(request.get_json(silent=True) or {}).to_invoice(now=now_local())
        return _pdf_response(render_invoice_pdf(invoice), invoice.invoice_number)

    @app.route("/api/amount-in-words", methods=["GET"], endpoint="amount_in_words")
    def amount_in_words():
        amount = require_non_negative(request.args.get("amount", "0"), "Amount")
        return jsonify({"success": True, "words": amount_to_words(amount), "formatted": format_inr(amount)})

    def _pdf_response(pdf: bytes, invoice_number: str):
        filename = "Invoice_" + invoice_number.replace("/", "-") + ".pdf"
        return send_file(io.BytesIO(pdf), mimetype="application/pdf", as_attachment=True, download_name=filename)
