import pytest

from prayer_timetables.parsers import parser_pdf
from prayer_timetables.parsers.parser_pdf import iter_mi_rows, parse_mi_line, pdf_to_text

from conftest import MI_ROW_TIMES


def test_scenario_line_uses_pdf_offsets() -> None:
    day, times = parse_mi_line(f"1 Sun {MI_ROW_TIMES}")

    assert day == "01"
    assert times.model_dump() == {
        "fajr": "05:18",
        "zuhr": "13:05",
        "asr": "16:50",
        "maghrib": "19:02",
        "isha": "20:32",
    }


def test_weekday_token_can_be_anything() -> None:
    day, _ = parse_mi_line(f"12 Ramadan {MI_ROW_TIMES}")
    assert day == "12"


def test_short_and_non_row_lines_are_skipped() -> None:
    assert parse_mi_line("3 Mon 05:10 05:18") is None
    assert parse_mi_line("Date Day Fajr Sunrise") is None
    assert parse_mi_line(f"Sun {MI_ROW_TIMES}") is None


def test_day_out_of_range_is_skipped() -> None:
    assert parse_mi_line(f"32 Sun {MI_ROW_TIMES}") is None
    assert parse_mi_line(f"0 Sun {MI_ROW_TIMES}") is None


def test_odd_pdf_spaces_are_normalized() -> None:
    day, times = parse_mi_line(f"\u00a07\u2009Fri\u00a0{MI_ROW_TIMES} ")
    assert day == "07"
    assert times.isha == "20:32"


def test_iter_mi_rows_collects_valid_days(mi_pdf_text: str) -> None:
    rows = dict(iter_mi_rows(mi_pdf_text))
    assert list(rows) == ["01", "02"]


class _FakePage:
    def __init__(self, text):
        self._text = text

    def extract_text(self):
        return self._text


class _FakePdf:
    def __init__(self, pages):
        self.pages = pages

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False


def test_pdf_to_text_joins_pages(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = {}

    def fake_open(stream):
        seen["data"] = stream.read()
        return _FakePdf([_FakePage("page one"), _FakePage(None), _FakePage("page three")])

    monkeypatch.setattr(parser_pdf.pdfplumber, "open", fake_open)

    assert pdf_to_text(b"%PDF-fake") == "page one\n\npage three"
    assert seen["data"] == b"%PDF-fake"
