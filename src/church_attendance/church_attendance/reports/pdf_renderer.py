from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Sequence

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from ..common.datetime_utils import now_utc
from ..core.enums import EntryKind
from ..core.exceptions import ReportRenderError
from ..ledger.model import LedgerRow
from .formatting import display_value, format_check_in, format_long_date, format_service_date
from .layout import LEDGER_COLUMNS, PageGeometry, PagePlan, Paginator, TableMetrics, column_widths, fit_text

logger = logging.getLogger(__name__)

BG = colors.HexColor("#0f0f1a")
GOLD = colors.HexColor("#c8aa64")
GOLD_DIM = colors.HexColor("#6b5a2e")
TEXT = colors.HexColor("#e8e0d0")
TEXT_DIM = colors.HexColor("#8a8278")
ROW_EVEN = colors.HexColor("#161625")
ROW_ODD = colors.HexColor("#1e1e32")
HDR_BG = colors.HexColor("#1a1a2e")
MEMBER_GREEN = colors.HexColor("#5ebd7a")

FONT = "Helvetica"
FONT_BOLD = "Helvetica-Bold"
CELL_PADDING = 6


@dataclass(frozen=True)
class RenderedReport:
    data: bytes
    page_count: int


def cell_text(row: LedgerRow, key: str) -> str:
    if key == "service_date":
        return format_service_date(row.service_date)
    if key == "check_in_time":
        return format_check_in(row.check_in_time)
    if key == "kind":
        return row.kind.value
    return display_value(getattr(row, key))


class LedgerPdfRenderer:
    """Draws the attendance ledger as a paginated A4 PDF."""

    def __init__(
        self,
        *,
        title: str = "RFP Ministries",
        subtitle: str = "Raised For a Purpose",
        geometry: PageGeometry | None = None,
        metrics: TableMetrics | None = None,
        clock: Callable[[], datetime] = now_utc,
    ):
        self.title = title
        self.subtitle = subtitle
        self.geometry = geometry or PageGeometry(width=A4[0], height=A4[1], margin=48)
        self.paginator = Paginator(self.geometry, metrics)
        self.metrics = self.paginator.metrics
        self.widths = column_widths(LEDGER_COLUMNS, self.geometry.usable_width)
        self._clock = clock

    # reportlab measures from the bottom edge; layout measures from the top.
    def _y(self, top: float) -> float:
        return self.geometry.height - top

    def render(self, rows: Sequence[LedgerRow]) -> bytes:
        return self.render_report(rows).data

    def render_report(self, rows: Sequence[LedgerRow]) -> RenderedReport:
        buf = io.BytesIO()
        try:
            c = canvas.Canvas(buf, pagesize=(self.geometry.width, self.geometry.height))
            c.setTitle(f"{self.title} - Attendance History")

            self._draw_background(c)
            table_top = self._draw_title_block(c)
            pages = self.paginator.paginate(rows, first_table_top=table_top)

            for page in pages:
                if page.continued:
                    c.showPage()
                    self._draw_background(c)
                    self._draw_caption(c, page)
                self._draw_page_body(c, page)

            last = pages[-1]
            bottom = self.paginator.body_bottom(last)
            if not rows:
                bottom = self._draw_empty_message(c, bottom)
            self._draw_rule(c, bottom + 10)

            c.save()
        except Exception as e:
            logger.exception("Attendance PDF rendering failed")
            raise ReportRenderError("PDF generation failed") from e

        logger.info("Rendered attendance PDF: %d rows on %d pages", len(rows), len(pages))
        return RenderedReport(data=buf.getvalue(), page_count=len(pages))

    def _draw_background(self, c: canvas.Canvas) -> None:
        g = self.geometry
        c.setFillColor(BG)
        c.rect(0, 0, g.width, g.height, stroke=0, fill=1)
        c.setFillColor(GOLD)
        c.rect(0, g.height - 6, g.width, 6, stroke=0, fill=1)

    def _draw_centered(self, c: canvas.Canvas, text: str, top: float, *, font: str, size: float, color) -> None:
        c.setFillColor(color)
        c.setFont(font, size)
        c.drawCentredString(self.geometry.width / 2, self._y(top), text)

    def _draw_title_block(self, c: canvas.Canvas) -> float:
        """Draws the first-page heading and returns where the table starts."""
        top = self.geometry.margin
        top += 22
        self._draw_centered(c, self.title, top, font=FONT_BOLD, size=22, color=GOLD)
        top += 16
        self._draw_centered(c, self.subtitle, top, font=FONT, size=10, color=TEXT_DIM)
        top += 26
        self._draw_centered(c, "Attendance History", top, font=FONT_BOLD, size=15, color=TEXT)

        now = self._clock()
        label = f"Generated: {format_long_date(now.date())}  |  {format_check_in(now)} UTC"
        top += 16
        self._draw_centered(c, label, top, font=FONT, size=9, color=TEXT_DIM)

        top += 12
        self._draw_rule(c, top)
        return top + 12

    def _draw_rule(self, c: canvas.Canvas, top: float) -> None:
        g = self.geometry
        c.setStrokeColor(GOLD_DIM)
        c.setLineWidth(0.7)
        c.line(g.margin, self._y(top), g.width - g.margin, self._y(top))

    def _draw_caption(self, c: canvas.Canvas, page: PagePlan) -> None:
        text = f"{self.title} – Attendance History (continued)"
        self._draw_centered(c, text, page.caption_top + 8, font=FONT, size=8, color=TEXT_DIM)

    def _draw_page_body(self, c: canvas.Canvas, page: PagePlan) -> None:
        self._draw_header(c, page.header_top)
        for placed in page.rows:
            self._draw_row(c, placed.row, placed.top, placed.is_even)

    def _draw_header(self, c: canvas.Canvas, top: float) -> None:
        g, m = self.geometry, self.metrics
        c.setFillColor(HDR_BG)
        c.rect(g.margin, self._y(top + m.header_height), g.usable_width, m.header_height, stroke=0, fill=1)
        c.setStrokeColor(GOLD)
        c.setLineWidth(1)
        c.line(g.margin, self._y(top), g.margin + g.usable_width, self._y(top))

        x = g.margin
        c.setFillColor(GOLD)
        c.setFont(FONT_BOLD, 8.5)
        for col, width in zip(LEDGER_COLUMNS, self.widths):
            label = fit_text(col.label, width - 2 * CELL_PADDING, lambda s: stringWidth(s, FONT_BOLD, 8.5))
            c.drawString(x + CELL_PADDING, self._y(top + 16), label)
            x += width

    def _draw_row(self, c: canvas.Canvas, row: LedgerRow, top: float, is_even: bool) -> None:
        g, m = self.geometry, self.metrics
        c.setFillColor(ROW_EVEN if is_even else ROW_ODD)
        c.rect(g.margin, self._y(top + m.row_height), g.usable_width, m.row_height, stroke=0, fill=1)

        x = g.margin
        c.setFont(FONT, 8)
        for col, width in zip(LEDGER_COLUMNS, self.widths):
            if col.key == "kind":
                c.setFillColor(MEMBER_GREEN if row.kind is EntryKind.MEMBER else GOLD)
            else:
                c.setFillColor(TEXT)
            text = fit_text(cell_text(row, col.key), width - 2 * CELL_PADDING, lambda s: stringWidth(s, FONT, 8))
            c.drawString(x + CELL_PADDING, self._y(top + 14), text)
            x += width

    def _draw_empty_message(self, c: canvas.Canvas, top: float) -> float:
        top += 24
        self._draw_centered(c, "No attendance records found.", top, font=FONT, size=11, color=TEXT_DIM)
        return top + 8
