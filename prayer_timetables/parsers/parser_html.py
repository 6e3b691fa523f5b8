"""Row extraction for the ELM prayer-times page.

The page renders one table row per calendar day. Rows are recognised purely by
their text: a ``dd/mm/yyyy`` date for the requested year followed by the time
columns. Anything else on the page is ignored.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional, Tuple

from ..models import ElmDayTimes
from .config import ColumnLayout, ELM_LAYOUT

logger = logging.getLogger(__name__)

RE_DATE_TOKEN = re.compile(r"(\d{2})/(\d{2})/(\d{4})")
RE_TIME_TOKEN = re.compile(r"\b\d{1,2}:\d{2}\b")

ElmRow = Tuple[str, str, ElmDayTimes]


def year_row_pattern(year: int) -> re.Pattern[str]:
    return re.compile(rf"\b\d{{2}}/\d{{2}}/{year}\b")


def parse_elm_line(
    line: str,
    year: int,
    layout: ColumnLayout = ELM_LAYOUT,
    *,
    row_pattern: Optional[re.Pattern[str]] = None,
) -> Optional[ElmRow]:
    """Parse one text line into ``(month, day, times)`` or ``None``."""

    pattern = row_pattern or year_row_pattern(year)
    if not pattern.search(line):
        return None

    # De eerste datum op de regel bepaalt dag en maand, ook als die uit een ander jaar komt
    date_match = RE_DATE_TOKEN.search(line)
    if not date_match:
        return None
    day, month = date_match.group(1), date_match.group(2)
    if not ("01" <= month <= "12" and "01" <= day <= "31"):
        logger.debug("Ongeldige datum overgeslagen: %s", date_match.group(0))
        return None

    tokens = RE_TIME_TOKEN.findall(line)
    mapped = layout.map_tokens(tokens)
    if mapped is None:
        logger.debug(
            "Regel %s/%s overgeslagen: %d tijden, minimaal %d nodig",
            day,
            month,
            len(tokens),
            layout.min_tokens,
        )
        return None
    return month, day, ElmDayTimes(**mapped)


def iter_elm_rows(text: str, year: int, layout: ColumnLayout = ELM_LAYOUT) -> Iterator[ElmRow]:
    """Yield ``(month, day, times)`` for every data row of ``year`` in ``text``."""

    pattern = year_row_pattern(year)
    for raw_line in text.splitlines():
        row = parse_elm_line(raw_line.strip(), year, layout, row_pattern=pattern)
        if row is not None:
            yield row


__all__ = ["ElmRow", "iter_elm_rows", "parse_elm_line", "year_row_pattern"]
