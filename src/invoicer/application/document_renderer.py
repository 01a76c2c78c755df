"""Invoice document rendering.

``InvoiceDocumentRenderer`` projects a persisted invoice and its items
onto a fixed layout. The layout is rendered two ways: as an HTML page for
on-screen viewing, and through a ``DocumentEngine`` that rasterizes it to
PDF bytes. The projection is a pure function of the invoice: the printed
date comes from ``invoice.created_at``, never from the clock.
"""

from __future__ import annotations

import html
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from invoicer.domain.exceptions import RenderError
from invoicer.domain.model.invoice import Invoice, InvoiceItem
from invoicer.domain.model.product import TAX_RATE

logger = logging.getLogger(__name__)

BRAND_TITLE = "INVOICE GENERATOR"
BRAND_TAGLINE = "Professional Invoice Services"
ITEM_HEADERS = ("Product", "Qty", "Rate", "Total")


@dataclass(frozen=True)
class LayoutRow:
    label: str
    value: str


@dataclass(frozen=True)
class InvoiceLayout:
    """Everything that appears on the page, already formatted."""

    title: str
    tagline: str
    invoice_rows: tuple[LayoutRow, ...]
    client_rows: tuple[LayoutRow, ...]
    item_headers: tuple[str, ...]
    item_rows: tuple[tuple[str, str, str, str], ...]
    total_rows: tuple[LayoutRow, ...]


class DocumentEngine(ABC):

    @abstractmethod
    def render(self, layout: InvoiceLayout) -> bytes:
        """Rasterize ``layout`` and return the PDF bytes."""


def tax_label() -> str:
    return f"Tax ({TAX_RATE * 100:.0f}%)"


def build_layout(invoice: Invoice, items: list[InvoiceItem]) -> InvoiceLayout:
    due = invoice.due_date.strftime("%Y-%m-%d") if invoice.due_date else "N/A"
    return InvoiceLayout(
        title=BRAND_TITLE,
        tagline=BRAND_TAGLINE,
        invoice_rows=(
            LayoutRow("Invoice Number", invoice.invoice_number),
            LayoutRow("Date", invoice.created_at.strftime("%Y-%m-%d")),
            LayoutRow("Due Date", due),
            LayoutRow("Status", invoice.status.value.capitalize()),
        ),
        client_rows=(
            LayoutRow("Company", invoice.client_company or "N/A"),
            LayoutRow("Contact", invoice.client_name),
            LayoutRow("Email", invoice.client_email),
        ),
        item_headers=ITEM_HEADERS,
        item_rows=tuple(
            (item.product_name, str(item.quantity), str(item.rate), str(item.total))
            for item in items
        ),
        total_rows=(
            LayoutRow("Subtotal", str(invoice.subtotal)),
            LayoutRow(tax_label(), str(invoice.total_tax)),
            LayoutRow("Total Amount", str(invoice.total_amount)),
        ),
    )


_HTML_PAGE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>Invoice {number}</title>
<style>
  body {{ font-family: Arial, sans-serif; margin: 0; padding: 20px; }}
  .header {{ background: #1f2937; color: white; padding: 20px; margin-bottom: 20px; }}
  .company-name {{ font-size: 24px; font-weight: bold; }}
  .invoice-details {{ display: flex; justify-content: space-between; margin-bottom: 20px; }}
  .table {{ width: 100%; border-collapse: collapse; }}
  .table th, .table td {{ border: 1px solid #ddd; padding: 10px; text-align: left; }}
  .table th {{ background: #1f2937; color: white; }}
  .totals {{ text-align: right; margin-top: 20px; }}
  .total-row {{ font-weight: bold; font-size: 18px; }}
</style>
</head>
<body>
<div class="header">
  <div class="company-name">{title}</div>
  <div>{tagline}</div>
</div>
<div class="invoice-details">
  <div>
    <h3>Invoice Details</h3>
{invoice_rows}
  </div>
  <div>
    <h3>Client Information</h3>
{client_rows}
  </div>
</div>
<table class="table">
  <thead>
    <tr>{headers}</tr>
  </thead>
  <tbody>
{item_rows}
  </tbody>
</table>
<div class="totals">
{total_rows}
</div>
</body>
</html>
"""


def _html_rows(rows: tuple[LayoutRow, ...], last_class: str = "") -> str:
    lines = []
    for index, row in enumerate(rows):
        css = f' class="{last_class}"' if last_class and index == len(rows) - 1 else ""
        lines.append(
            f"    <p{css}><strong>{html.escape(row.label)}:</strong> "
            f"{html.escape(row.value)}</p>"
        )
    return "\n".join(lines)


def layout_to_html(layout: InvoiceLayout) -> str:
    number = layout.invoice_rows[0].value
    headers = "".join(f"<th>{html.escape(h)}</th>" for h in layout.item_headers)
    item_rows = "\n".join(
        "    <tr>" + "".join(f"<td>{html.escape(cell)}</td>" for cell in row) + "</tr>"
        for row in layout.item_rows
    )
    return _HTML_PAGE.format(
        number=html.escape(number),
        title=html.escape(layout.title),
        tagline=html.escape(layout.tagline),
        invoice_rows=_html_rows(layout.invoice_rows),
        client_rows=_html_rows(layout.client_rows),
        headers=headers,
        item_rows=item_rows,
        total_rows=_html_rows(layout.total_rows, last_class="total-row"),
    )


class InvoiceDocumentRenderer:

    def __init__(self, engine: DocumentEngine) -> None:
        self._engine = engine

    def render(self, invoice: Invoice, items: list[InvoiceItem]) -> bytes:
        """Render the invoice to PDF, returning the engine output untouched.

        Raises RenderError if the engine fails or hands back something
        that is not a PDF.
        """
        layout = build_layout(invoice, items)
        try:
            content = self._engine.render(layout)
        except RenderError:
            raise
        except Exception as exc:
            logger.exception("Document engine failed for %s", invoice.invoice_number)
            raise RenderError("Failed to generate PDF") from exc

        if not content or not content.startswith(b"%PDF"):
            logger.error(
                "Document engine returned no PDF for %s", invoice.invoice_number
            )
            raise RenderError("Failed to generate PDF")
        return content

    def render_html(self, invoice: Invoice, items: list[InvoiceItem]) -> str:
        return layout_to_html(build_layout(invoice, items))
