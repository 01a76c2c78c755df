"""Tests for invoice rendering: layout, HTML view and the PDF handler.

The document engine is faked; the reportlab engine has its own tests.
"""

from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from invoicer.application import document_renderer
from invoicer.application.document_renderer import (
    BRAND_TITLE,
    ITEM_HEADERS,
    InvoiceDocumentRenderer,
    build_layout,
    tax_label,
)
from invoicer.application.render_invoice_pdf import (
    RenderInvoiceHtmlHandler,
    RenderInvoicePdfHandler,
)
from invoicer.domain.exceptions import EntityNotFoundError, RenderError
from invoicer.domain.model.invoice import Invoice, InvoiceItem, InvoiceStatus
from invoicer.domain.model.product import Product
from tests.fakes import (
    BrokenDocumentEngine,
    FakeDocumentEngine,
    FakeInvoiceItemRepository,
    FakeInvoiceRepository,
)

CREATED = datetime(2026, 3, 14, 15, 9, tzinfo=timezone.utc)


def _stored_invoice(invoice_repo, item_repo, owner_id=1, **overrides):
    product = Product.create(owner_id, "Widget", 3, "10.00")
    fields = dict(
        owner_id=owner_id,
        invoice_number=f"INV-{len(invoice_repo.all()) + 1}-ABC123",
        client_name="Acme",
        client_email="ap@acme.test",
        products=[product],
        created_at=CREATED,
    )
    fields.update(overrides)
    invoice = invoice_repo.add(Invoice.create(**fields))
    item_repo.add(InvoiceItem.snapshot_of(product, invoice.id))
    return invoice


def _setup(engine=None):
    invoice_repo = FakeInvoiceRepository()
    item_repo = FakeInvoiceItemRepository()
    engine = engine or FakeDocumentEngine()
    renderer = InvoiceDocumentRenderer(engine)
    return invoice_repo, item_repo, renderer, engine


class TestBuildLayout:

    def test_rows(self):
        invoice_repo, item_repo, _, _ = _setup()
        invoice = _stored_invoice(
            invoice_repo, item_repo,
            client_company="Acme Corp", due_date=date(2026, 4, 1),
            status=InvoiceStatus.SENT,
        )
        layout = build_layout(invoice, item_repo.list_by_invoice(invoice.id))

        assert layout.title == BRAND_TITLE
        assert [(r.label, r.value) for r in layout.invoice_rows] == [
            ("Invoice Number", invoice.invoice_number),
            ("Date", "2026-03-14"),
            ("Due Date", "2026-04-01"),
            ("Status", "Sent"),
        ]
        assert [(r.label, r.value) for r in layout.client_rows] == [
            ("Company", "Acme Corp"),
            ("Contact", "Acme"),
            ("Email", "ap@acme.test"),
        ]
        assert layout.item_headers == ITEM_HEADERS
        assert layout.item_rows == (("Widget", "3", "$10.00", "$30.00"),)
        assert [(r.label, r.value) for r in layout.total_rows] == [
            ("Subtotal", "$30.00"),
            ("Tax (18%)", "$5.40"),
            ("Total Amount", "$35.40"),
        ]

    def test_missing_optionals_show_na(self):
        invoice_repo, item_repo, _, _ = _setup()
        invoice = _stored_invoice(invoice_repo, item_repo)
        layout = build_layout(invoice, item_repo.list_by_invoice(invoice.id))
        assert layout.invoice_rows[2].value == "N/A"
        assert layout.client_rows[0].value == "N/A"

    def test_tax_label_follows_tax_rate(self, monkeypatch):
        assert tax_label() == "Tax (18%)"
        monkeypatch.setattr(document_renderer, "TAX_RATE", Decimal("0.2"))
        assert tax_label() == "Tax (20%)"

    def test_same_invoice_same_layout(self):
        invoice_repo, item_repo, _, _ = _setup()
        invoice = _stored_invoice(invoice_repo, item_repo)
        items = item_repo.list_by_invoice(invoice.id)
        assert build_layout(invoice, items) == build_layout(invoice, items)


class TestRenderHtml:

    def test_contains_invoice_data(self):
        invoice_repo, item_repo, renderer, _ = _setup()
        invoice = _stored_invoice(invoice_repo, item_repo)
        page = RenderInvoiceHtmlHandler(invoice_repo, item_repo, renderer).handle(1, invoice.id)
        assert page.startswith("<!DOCTYPE html>")
        assert invoice.invoice_number in page
        assert "<td>Widget</td>" in page
        assert "$35.40" in page

    def test_client_text_is_escaped(self):
        invoice_repo, item_repo, renderer, _ = _setup()
        invoice = _stored_invoice(
            invoice_repo, item_repo, client_name="<script>alert(1)</script>"
        )
        page = renderer.render_html(invoice, item_repo.list_by_invoice(invoice.id))
        assert "<script>" not in page
        assert "&lt;script&gt;" in page


class TestRenderPdf:

    def test_returns_engine_bytes_and_filename(self):
        invoice_repo, item_repo, renderer, engine = _setup()
        invoice = _stored_invoice(invoice_repo, item_repo)

        document = RenderInvoicePdfHandler(invoice_repo, item_repo, renderer).handle(1, invoice.id)
        assert document.filename == f"invoice-{invoice.invoice_number}.pdf"
        assert document.content.startswith(b"%PDF")
        assert len(engine.layouts) == 1

    def test_render_is_repeatable(self):
        invoice_repo, item_repo, renderer, engine = _setup()
        invoice = _stored_invoice(invoice_repo, item_repo)
        handler = RenderInvoicePdfHandler(invoice_repo, item_repo, renderer)

        first = handler.handle(1, invoice.id)
        second = handler.handle(1, invoice.id)
        assert first == second
        assert engine.layouts[0] == engine.layouts[1]

    def test_other_users_invoice_is_not_found(self):
        invoice_repo, item_repo, renderer, engine = _setup()
        invoice = _stored_invoice(invoice_repo, item_repo, owner_id=2)
        with pytest.raises(EntityNotFoundError, match="Invoice not found"):
            RenderInvoicePdfHandler(invoice_repo, item_repo, renderer).handle(1, invoice.id)
        assert engine.layouts == []

    def test_engine_failure_becomes_render_error(self):
        invoice_repo, item_repo, renderer, _ = _setup(engine=BrokenDocumentEngine())
        invoice = _stored_invoice(invoice_repo, item_repo)
        with pytest.raises(RenderError, match="Failed to generate PDF"):
            RenderInvoicePdfHandler(invoice_repo, item_repo, renderer).handle(1, invoice.id)

    @pytest.mark.parametrize("output", [b"", b"<html>not a pdf</html>"])
    def test_non_pdf_output_becomes_render_error(self, output):
        invoice_repo, item_repo, renderer, _ = _setup(engine=FakeDocumentEngine(output))
        invoice = _stored_invoice(invoice_repo, item_repo)
        with pytest.raises(RenderError):
            renderer.render(invoice, item_repo.list_by_invoice(invoice.id))
