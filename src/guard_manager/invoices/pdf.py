"""Generate printable invoice PDFs."""
import io
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_RIGHT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import HRFlowable, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from .formatting import format_inr
from .model import Invoice
from .words import amount_to_words

BLUE = colors.HexColor('#1152d4')
LIGHT_BLUE = colors.HexColor('#f0f4ff')
GRAY = colors.HexColor('#555555')


def render_invoice_pdf(invoice: Invoice) -> bytes:
    """Render a saved invoice (or a draft turned into one) as an A4 PDF."""
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        rightMargin=15 * mm,
        leftMargin=15 * mm,
        topMargin=15 * mm,
        bottomMargin=15 * mm,
        title=invoice.invoice_number,
    )

    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(
        name='CompanyName',
        parent=styles['Heading1'],
        fontSize=18,
        textColor=BLUE,
        spaceAfter=2,
    ))
    styles.add(ParagraphStyle(
        name='InvoiceTitle',
        parent=styles['Heading1'],
        fontSize=22,
        alignment=TA_RIGHT,
        textColor=BLUE,
    ))
    styles.add(ParagraphStyle(
        name='Muted',
        parent=styles['Normal'],
        fontSize=9,
        textColor=GRAY,
    ))
    styles.add(ParagraphStyle(
        name='MutedRight',
        parent=styles['Normal'],
        fontSize=9,
        alignment=TA_RIGHT,
        textColor=GRAY,
    ))
    styles.add(ParagraphStyle(
        name='SectionHeader',
        parent=styles['Heading3'],
        fontSize=9,
        textColor=BLUE,
        spaceBefore=8,
        spaceAfter=2,
    ))

    company = invoice.company
    bank = invoice.bank_details
    story = []

    # ── Header ────────────────────────────────────────────────────
    company_lines = [
        company.address,
        f"Phone: {company.phone}" if company.phone else "",
        f"Email: {company.email}" if company.email else "",
        f"PAN: {company.tax_id}" if company.tax_id else "",
    ]
    left = [Paragraph(escape(company.name or "Your Company Name"), styles['CompanyName'])]
    left += [Paragraph(escape(line), styles['Muted']) for line in company_lines if line]
    right = [
        Paragraph("INVOICE", styles['InvoiceTitle']),
        Paragraph(f"<b>Invoice No:</b> {escape(invoice.invoice_number)}", styles['MutedRight']),
        Paragraph(f"Date: {escape(invoice.invoice_date)}", styles['MutedRight']),
    ]
    header = Table([[left, right]], colWidths=[110 * mm, 70 * mm])
    header.setStyle(TableStyle([('VALIGN', (0, 0), (-1, -1), 'TOP')]))
    story.append(header)
    story.append(HRFlowable(width="100%", thickness=1, color=BLUE))

    # ── Bill To ───────────────────────────────────────────────────
    story.append(Paragraph("BILL TO", styles['SectionHeader']))
    story.append(Paragraph(f"<b>{escape(invoice.client_name or '-')}</b>", styles['Normal']))
    if invoice.client_address:
        story.append(Paragraph(escape(invoice.client_address), styles['Muted']))
    story.append(Spacer(1, 8))

    # ── Line items ────────────────────────────────────────────────
    rows = [["#", "Description", "Guards", "Days", "Rate", "Value"]]
    for idx, item in enumerate(invoice.line_items, start=1):
        rows.append([
            str(idx),
            Paragraph(escape(item.description), styles['Normal']),
            _qty(item.guards),
            _qty(item.days),
            format_inr(item.rate),
            format_inr(item.value),
        ])
    rows.append(["", "", "", "", "Total", f"Rs. {format_inr(invoice.total_amount)}"])

    items_table = Table(rows, colWidths=[10 * mm, 70 * mm, 20 * mm, 20 * mm, 28 * mm, 32 * mm], repeatRows=1)
    items_table.setStyle(TableStyle([
        ('BACKGROUND', (0, 0), (-1, 0), BLUE),
        ('TEXTCOLOR', (0, 0), (-1, 0), colors.white),
        ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ('FONTSIZE', (0, 0), (-1, -1), 9),
        ('ALIGN', (2, 0), (-1, -1), 'RIGHT'),
        ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
        ('GRID', (0, 0), (-1, -2), 0.5, colors.HexColor('#e2e8f0')),
        ('ROWBACKGROUNDS', (0, 1), (-1, -2), [colors.white, LIGHT_BLUE]),
        ('FONTNAME', (4, -1), (-1, -1), 'Helvetica-Bold'),
        ('LINEABOVE', (4, -1), (-1, -1), 1, BLUE),
        ('BOTTOMPADDING', (0, 0), (-1, -1), 4),
        ('TOPPADDING', (0, 0), (-1, -1), 4),
    ]))
    story.append(items_table)
    story.append(Spacer(1, 8))

    # ── Amount in words ───────────────────────────────────────────
    story.append(Paragraph("AMOUNT IN WORDS", styles['SectionHeader']))
    story.append(Paragraph(amount_to_words(invoice.total_amount), styles['Normal']))

    if invoice.notes:
        story.append(Paragraph("NOTE", styles['SectionHeader']))
        story.append(Paragraph(escape(invoice.notes), styles['Muted']))

    # ── Bank details ──────────────────────────────────────────────
    story.append(Paragraph("BANK DETAILS", styles['SectionHeader']))
    bank_rows = [
        ["Bank Name:", bank.bank_name or "-"],
        ["Account Name:", bank.account_name or "-"],
        ["Account No:", bank.account_number or "-"],
        ["IFSC:", bank.ifsc or "-"],
    ]
    bank_table = Table(bank_rows, colWidths=[35 * mm, 90 * mm])
    bank_table.setStyle(TableStyle([
        ('FONTSIZE', (0, 0), (-1, -1), 9),
        ('FONTNAME', (0, 0), (0, -1), 'Helvetica-Bold'),
        ('TEXTCOLOR', (0, 0), (0, -1), GRAY),
        ('BOTTOMPADDING', (0, 0), (-1, -1), 2),
        ('TOPPADDING', (0, 0), (-1, -1), 2),
    ]))
    story.append(bank_table)
    story.append(Spacer(1, 24))

    # ── Signature ─────────────────────────────────────────────────
    story.append(Paragraph(f"For <b>{escape(company.name or 'Company Name')}</b>", styles['MutedRight']))
    story.append(Spacer(1, 28))
    story.append(Paragraph("Authorized Signatory", styles['MutedRight']))

    doc.build(story)
    return buffer.getvalue()


def _qty(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:g}"
