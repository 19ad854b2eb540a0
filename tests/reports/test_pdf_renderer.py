from __future__ import annotations

from datetime import date, datetime

import pytest

from src.church_attendance.church_attendance.core.enums import EntryKind
from src.church_attendance.church_attendance.core.exceptions import ReportRenderError
from src.church_attendance.church_attendance.ledger.model import LedgerRow
from src.church_attendance.church_attendance.reports import pdf_renderer
from src.church_attendance.church_attendance.reports.pdf_renderer import LedgerPdfRenderer, cell_text


def _clock():
    return datetime(2026, 2, 1, 12, 0)


def _rows(n):
    return [
        LedgerRow(
            name=f"Visitor With A Rather Long Name Number {i}",
            kind=EntryKind.VISITOR,
            phone=None,
            gender="Male",
            service="Lunch-Hour Service",
            service_date=date(2026, 2, 1),
            check_in_time=datetime(2026, 2, 1, 13, i % 60),
        )
        for i in range(n)
    ]


def test_small_ledger_renders_single_page_pdf():
    renderer = LedgerPdfRenderer(clock=_clock)

    report = renderer.render_report(_rows(3))

    assert report.data.startswith(b"%PDF")
    assert report.page_count == 1


def test_long_ledger_spans_several_pages():
    renderer = LedgerPdfRenderer(clock=_clock)

    report = renderer.render_report(_rows(120))

    assert report.data.startswith(b"%PDF")
    assert report.page_count > 1


def test_header_drawn_once_per_page_and_banding_resets(monkeypatch):
    renderer = LedgerPdfRenderer(clock=_clock)
    events: list[tuple] = []
    real_header = renderer._draw_header
    real_row = renderer._draw_row

    def header(c, top):
        events.append(("header", c.getPageNumber()))
        real_header(c, top)

    def row(c, r, top, is_even):
        events.append(("row", c.getPageNumber(), is_even))
        real_row(c, r, top, is_even)

    monkeypatch.setattr(renderer, "_draw_header", header)
    monkeypatch.setattr(renderer, "_draw_row", row)

    report = renderer.render_report(_rows(90))

    headers = [e[1] for e in events if e[0] == "header"]
    assert headers == list(range(1, report.page_count + 1))
    for i, event in enumerate(events):
        if event[0] == "header":
            assert events[i + 1] == ("row", event[1], True)


def test_empty_ledger_renders_message():
    renderer = LedgerPdfRenderer(clock=_clock)
    drawn: list[str] = []
    real = renderer._draw_centered

    def spy(c, text, top, **kwargs):
        drawn.append(text)
        real(c, text, top, **kwargs)

    renderer._draw_centered = spy

    report = renderer.render_report([])

    assert report.data.startswith(b"%PDF")
    assert report.page_count == 1
    assert "No attendance records found." in drawn


def test_render_failure_is_wrapped(monkeypatch):
    renderer = LedgerPdfRenderer(clock=_clock)

    def boom(*_args, **_kwargs):
        raise RuntimeError("font missing")

    monkeypatch.setattr(pdf_renderer, "stringWidth", boom)

    with pytest.raises(ReportRenderError):
        renderer.render(_rows(2))


def test_cell_text_formats_dates_and_missing_values():
    row = _rows(1)[0]

    assert cell_text(row, "service_date") == "01 Feb 2026"
    assert cell_text(row, "check_in_time") == "01:00 pm"
    assert cell_text(row, "kind") == "Visitor"
    assert cell_text(row, "phone") == "—"
