from __future__ import annotations

from datetime import date, datetime

import pytest

from src.church_attendance.church_attendance.core.enums import EntryKind
from src.church_attendance.church_attendance.ledger.model import LedgerRow
from src.church_attendance.church_attendance.reports.layout import (
    ELLIPSIS,
    LEDGER_COLUMNS,
    Column,
    PageGeometry,
    Paginator,
    TableMetrics,
    column_widths,
    fit_text,
)

GEOMETRY = PageGeometry(width=600, height=800, margin=50)
METRICS = TableMetrics(header_height=26, row_height=22, safety_margin=10, caption_offset=18, caption_height=16)


def _rows(n):
    return [
        LedgerRow(
            name=f"Person {i}",
            kind=EntryKind.MEMBER if i % 3 else EntryKind.VISITOR,
            phone="0999",
            gender="Female",
            service="Sunday Morning Service",
            service_date=date(2026, 2, 1),
            check_in_time=datetime(2026, 2, 1, 8, 0),
        )
        for i in range(n)
    ]


def test_column_widths_follow_weights_and_fill_usable_width():
    widths = column_widths(LEDGER_COLUMNS, GEOMETRY.usable_width)

    assert len(widths) == 7
    assert sum(widths) == pytest.approx(500)
    assert widths[0] == pytest.approx(0.22 / 1.0 * 500)
    assert widths[0] == pytest.approx(widths[4])


def test_column_widths_are_relative_ratios():
    widths = column_widths([Column("a", "A", 1), Column("b", "B", 3)], 400)

    assert widths == [pytest.approx(100), pytest.approx(300)]


def test_column_widths_reject_zero_weights():
    with pytest.raises(ValueError):
        column_widths([Column("a", "A", 0)], 100)


def test_fit_text_keeps_short_text():
    assert fit_text("Grace", 10, len) == "Grace"


def test_fit_text_truncates_with_ellipsis():
    out = fit_text("Sunday Morning Service", 10, len)

    assert out.endswith(ELLIPSIS)
    assert len(out) <= 10
    assert out == "Sunday Mo" + ELLIPSIS


def test_fit_text_drops_trailing_space_before_ellipsis():
    assert fit_text("Grace Banda", 7, len) == "Grace" + ELLIPSIS


def test_fit_text_too_narrow_for_anything():
    assert fit_text("Grace", 0, len) == ""


def test_rows_that_fit_stay_on_one_page():
    pages = Paginator(GEOMETRY, METRICS).paginate(_rows(5), first_table_top=100)

    assert len(pages) == 1
    assert [p.top for p in pages[0].rows] == [126, 148, 170, 192, 214]
    assert [p.is_even for p in pages[0].rows] == [True, False, True, False, True]


def test_overflow_starts_new_page_with_caption_and_header():
    paginator = Paginator(GEOMETRY, METRICS)
    # First page body starts at 126; rows fit while 750 - top >= 32, i.e. top <= 718.
    first_page_capacity = (718 - 126) // 22 + 1

    pages = paginator.paginate(_rows(first_page_capacity + 3), first_table_top=100)

    assert len(pages) == 2
    assert len(pages[0].rows) == first_page_capacity
    assert not pages[0].continued
    second = pages[1]
    assert second.continued
    assert second.caption_top == 68
    assert second.header_top == 84
    assert second.rows[0].top == 110
    assert len(second.rows) == 3


def test_banding_restarts_even_after_every_header():
    paginator = Paginator(GEOMETRY, METRICS)

    pages = paginator.paginate(_rows(100), first_table_top=100)

    assert len(pages) > 2
    for page in pages:
        assert page.rows[0].is_even
        assert [r.band for r in page.rows] == list(range(len(page.rows)))
    # Odd-sized first page: a global counter would make page 2 start odd.
    assert len(pages[0].rows) % 2 == 1


def test_every_row_is_placed_once_in_order():
    rows = _rows(60)

    pages = Paginator(GEOMETRY, METRICS).paginate(rows, first_table_top=100)

    assert [p.row for page in pages for p in page.rows] == rows


def test_rows_never_cross_the_bottom_margin():
    pages = Paginator(GEOMETRY, METRICS).paginate(_rows(80), first_table_top=100)

    for page in pages:
        for placed in page.rows:
            assert placed.top + METRICS.row_height <= GEOMETRY.height - GEOMETRY.margin


def test_empty_ledger_still_has_one_page_with_header():
    paginator = Paginator(GEOMETRY, METRICS)

    pages = paginator.paginate([], first_table_top=100)

    assert len(pages) == 1
    assert pages[0].rows == []
    assert paginator.body_bottom(pages[0]) == 126
