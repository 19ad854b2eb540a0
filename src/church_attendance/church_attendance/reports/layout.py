"""Page layout for the attendance ledger report.

Everything here is pure: coordinates are measured top-down from the top edge
of the page, in points. The PDF renderer turns a list of PagePlan into drawing
calls; tests exercise pagination and row banding directly on the plans.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Sequence

from ..ledger.model import LedgerRow

ELLIPSIS = "…"


@dataclass(frozen=True)
class Column:
    key: str
    label: str
    weight: float


LEDGER_COLUMNS: tuple[Column, ...] = (
    Column("name", "Name", 0.22),
    Column("kind", "Type", 0.10),
    Column("phone", "Phone", 0.16),
    Column("gender", "Gender", 0.10),
    Column("service", "Service", 0.22),
    Column("service_date", "Date", 0.10),
    Column("check_in_time", "Check-in", 0.10),
)


@dataclass(frozen=True)
class PageGeometry:
    width: float
    height: float
    margin: float

    @property
    def usable_width(self) -> float:
        return self.width - 2 * self.margin

    def remaining(self, top: float) -> float:
        return self.height - self.margin - top


@dataclass(frozen=True)
class TableMetrics:
    header_height: float = 26
    row_height: float = 22
    safety_margin: float = 10
    caption_offset: float = 18
    caption_height: float = 16


def column_widths(columns: Sequence[Column], usable_width: float) -> list[float]:
    """Turn relative weights into absolute widths that add up to usable_width."""
    total = sum(c.weight for c in columns)
    if total <= 0:
        raise ValueError("column weights must add up to a positive number")
    return [c.weight / total * usable_width for c in columns]


def fit_text(text: str, max_width: float, measure: Callable[[str], float]) -> str:
    """Single-line fit: cut text and append an ellipsis when it is too wide."""
    if measure(text) <= max_width:
        return text
    if measure(ELLIPSIS) > max_width:
        return ""
    lo, hi = 0, len(text)
    # Longest prefix p with measure(p + ELLIPSIS) <= max_width.
    while lo < hi:
        mid = (lo + hi + 1) // 2
        if measure(text[:mid].rstrip() + ELLIPSIS) <= max_width:
            lo = mid
        else:
            hi = mid - 1
    return text[:lo].rstrip() + ELLIPSIS


@dataclass(frozen=True)
class PlacedRow:
    row: LedgerRow
    top: float
    band: int

    @property
    def is_even(self) -> bool:
        return self.band % 2 == 0


@dataclass
class PagePlan:
    number: int
    header_top: float
    caption_top: Optional[float] = None
    rows: list[PlacedRow] = field(default_factory=list)

    @property
    def continued(self) -> bool:
        return self.caption_top is not None


class Paginator:
    def __init__(self, geometry: PageGeometry, metrics: TableMetrics | None = None):
        self.geometry = geometry
        self.metrics = metrics or TableMetrics()

    def body_bottom(self, page: PagePlan) -> float:
        if page.rows:
            return page.rows[-1].top + self.metrics.row_height
        return page.header_top + self.metrics.header_height

    def _continuation(self, number: int) -> PagePlan:
        caption_top = self.geometry.margin + self.metrics.caption_offset
        return PagePlan(
            number=number,
            caption_top=caption_top,
            header_top=caption_top + self.metrics.caption_height,
        )

    def paginate(self, rows: Iterable[LedgerRow], *, first_table_top: float) -> list[PagePlan]:
        m = self.metrics
        page = PagePlan(number=1, header_top=first_table_top)
        pages = [page]
        cursor = page.header_top + m.header_height
        band = 0  # page-local; every header is followed by an even row

        for row in rows:
            if self.geometry.remaining(cursor) < m.row_height + m.safety_margin:
                page = self._continuation(len(pages) + 1)
                pages.append(page)
                cursor = page.header_top + m.header_height
                band = 0

            page.rows.append(PlacedRow(row=row, top=cursor, band=band))
            cursor += m.row_height
            band += 1

        return pages
