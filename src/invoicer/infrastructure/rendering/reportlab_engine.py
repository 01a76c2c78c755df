"""DocumentEngine that lays an InvoiceLayout out on A4 with reportlab."""

from __future__ import annotations

import io
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from invoicer.application.document_renderer import DocumentEngine, InvoiceLayout, LayoutRow

_DARK = colors.HexColor("#1f2937")
_BORDER = colors.HexColor("#dddddd")
_MARGIN = 15 * mm
_DOC_WIDTH = A4[0] - 2 * _MARGIN


class ReportLabDocumentEngine(DocumentEngine):
    """Builds with ``invariant=1`` so equal layouts give equal bytes."""

    def __init__(self) -> None:
        styles = getSampleStyleSheet()
        self._normal = styles["Normal"]
        self._heading = ParagraphStyle(
            "InvoiceHeading", parent=styles["Heading3"], spaceAfter=4
        )
        self._brand = ParagraphStyle(
            "Brand", parent=styles["Title"], fontSize=20, leading=24,
            textColor=colors.white, alignment=0,
        )
        self._tagline = ParagraphStyle(
            "Tagline", parent=styles["Normal"], textColor=colors.white
        )

    def render(self, layout: InvoiceLayout) -> bytes:
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer, pagesize=A4,
            leftMargin=_MARGIN, rightMargin=_MARGIN,
            topMargin=_MARGIN, bottomMargin=_MARGIN,
            title=f"Invoice {layout.invoice_rows[0].value}",
            author=layout.title.title(),
            creator="invoicer",
            invariant=1,
        )

        elements = [
            self._header(layout),
            Spacer(1, 6 * mm),
            self._details(layout),
            Spacer(1, 6 * mm),
            self._items(layout),
            Spacer(1, 6 * mm),
            self._totals(layout.total_rows),
        ]
        doc.build(elements)
        return buffer.getvalue()

    # --- Blocks ---------------------------------------------------------------

    def _header(self, layout: InvoiceLayout) -> Table:
        band = Table(
            [[Paragraph(escape(layout.title), self._brand)],
             [Paragraph(escape(layout.tagline), self._tagline)]],
            colWidths=[_DOC_WIDTH],
        )
        band.setStyle(TableStyle([
            ("BACKGROUND", (0, 0), (-1, -1), _DARK),
            ("LEFTPADDING", (0, 0), (-1, -1), 12),
            ("TOPPADDING", (0, 0), (-1, 0), 12),
            ("BOTTOMPADDING", (0, -1), (-1, -1), 12),
        ]))
        return band

    def _details(self, layout: InvoiceLayout) -> Table:
        left = [Paragraph("Invoice Details", self._heading)]
        left += [self._labelled(row) for row in layout.invoice_rows]
        right = [Paragraph("Client Information", self._heading)]
        right += [self._labelled(row) for row in layout.client_rows]

        half = _DOC_WIDTH / 2
        table = Table([[left, right]], colWidths=[half, half])
        table.setStyle(TableStyle([("VALIGN", (0, 0), (-1, -1), "TOP")]))
        return table

    def _items(self, layout: InvoiceLayout) -> Table:
        data = [list(layout.item_headers)]
        for name, qty, rate, total in layout.item_rows:
            data.append([Paragraph(escape(name), self._normal), qty, rate, total])

        width = _DOC_WIDTH
        table = Table(
            data,
            colWidths=[width * 0.49, width * 0.13, width * 0.19, width * 0.19],
            repeatRows=1,
        )
        table.setStyle(TableStyle([
            ("BACKGROUND", (0, 0), (-1, 0), _DARK),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("FONTSIZE", (0, 0), (-1, -1), 10),
            ("GRID", (0, 0), (-1, -1), 0.5, _BORDER),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ("TOPPADDING", (0, 0), (-1, -1), 6),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
        ]))
        return table

    def _totals(self, rows: tuple[LayoutRow, ...]) -> Table:
        data = [[f"{row.label}:", row.value] for row in rows]
        width = _DOC_WIDTH
        table = Table(data, colWidths=[width * 0.75, width * 0.25])
        table.setStyle(TableStyle([
            ("ALIGN", (0, 0), (-1, -1), "RIGHT"),
            ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
            ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
            ("FONTSIZE", (0, -1), (-1, -1), 13),
            ("LINEABOVE", (0, -1), (-1, -1), 0.75, _DARK),
        ]))
        return table

    def _labelled(self, row: LayoutRow) -> Paragraph:
        return Paragraph(f"<b>{escape(row.label)}:</b> {escape(row.value)}", self._normal)
