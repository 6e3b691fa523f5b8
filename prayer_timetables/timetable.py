"""Fold extracted day rows into monthly timetables."""

from __future__ import annotations

from typing import Dict, Optional

from .models import ElmDayTimes, ElmMonthlyTimetable, MiDayTimes, MiMonthlyTimetable
from .parsers.config import LayoutConfig, get_layout_config
from .parsers.parser_html import iter_elm_rows
from .parsers.parser_pdf import iter_mi_rows
from .settings import ELM_SOURCE_NAME, MI_SOURCE_NAME

MONTH_KEYS = tuple(f"{month:02d}" for month in range(1, 13))


def assemble_elm_year(
    text: str,
    year: int,
    *,
    layouts: Optional[LayoutConfig] = None,
    source: str = ELM_SOURCE_NAME,
) -> Dict[str, ElmMonthlyTimetable]:
    """Build all twelve ELM months of ``year`` from the page text.

    Every month key is present in the result, also when no row for that month
    was found. A later row for the same date replaces an earlier one.
    """

    layouts = layouts or get_layout_config()
    buckets: Dict[str, Dict[str, ElmDayTimes]] = {month: {} for month in MONTH_KEYS}
    for month, day, times in iter_elm_rows(text, year, layouts.elm):
        buckets[month][day] = times

    return {
        month: ElmMonthlyTimetable(source=source, year=year, month=month, days=days)
        for month, days in buckets.items()
    }


def assemble_mi_month(
    text: str,
    year: int,
    month: int,
    *,
    layouts: Optional[LayoutConfig] = None,
    source: str = MI_SOURCE_NAME,
) -> MiMonthlyTimetable:
    """Build one MI month from the linearized PDF text."""

    if not 1 <= month <= 12:
        raise ValueError(f"Ongeldige maand: {month}")
    layouts = layouts or get_layout_config()
    days: Dict[str, MiDayTimes] = {}
    for day, times in iter_mi_rows(text, layouts.mi):
        days[day] = times
    return MiMonthlyTimetable(source=source, year=year, month=f"{month:02d}", days=days)


__all__ = ["MONTH_KEYS", "assemble_elm_year", "assemble_mi_month"]
