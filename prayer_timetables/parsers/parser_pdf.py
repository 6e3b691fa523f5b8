"""PDF parsing utilities for the MI monthly timetable.

The PDF is first linearized to plain text with ``pdfplumber``; every table row
then shows up as one line starting with the day of the month and a weekday
abbreviation, followed by the time columns.
"""

from __future__ import annotations

import io
import logging
import re
from typing import Iterator, Optional, Tuple

import pdfplumber

from ..models import MiDayTimes
from .config import ColumnLayout, MI_LAYOUT

logger = logging.getLogger(__name__)

RE_DAY_ROW = re.compile(r"^(\d{1,2})\s+(\S+)\s+(.+)$")
RE_TIME_TOKEN = re.compile(r"\b\d{1,2}:\d{2}\b")

MiRow = Tuple[str, MiDayTimes]


def pdf_to_text(data: bytes) -> str:
    """Linearize every page of a PDF into newline separated text."""

    pages = []
    with pdfplumber.open(io.BytesIO(data)) as pdf:
        for page in pdf.pages:
            pages.append(page.extract_text() or "")
    return "\n".join(pages)


def _normalize_line(value: str) -> str:
    # Rare PDF-spaties normaliseren
    value = re.sub(r"[\u00A0\u2000-\u200B]", " ", value)
    return re.sub(r"\s+", " ", value).strip()


def parse_mi_line(line: str, layout: ColumnLayout = MI_LAYOUT) -> Optional[MiRow]:
    """Parse one linearized PDF line into ``(day, times)`` or ``None``."""

    match = RE_DAY_ROW.match(_normalize_line(line))
    if not match:
        return None

    day_number = int(match.group(1))
    if not 1 <= day_number <= 31:
        return None
    day = f"{day_number:02d}"

    tokens = RE_TIME_TOKEN.findall(match.group(3))
    mapped = layout.map_tokens(tokens)
    if mapped is None:
        logger.debug(
            "PDF-regel voor dag %s overgeslagen: %d tijden, minimaal %d nodig",
            day,
            len(tokens),
            layout.min_tokens,
        )
        return None
    return day, MiDayTimes(**mapped)


def iter_mi_rows(text: str, layout: ColumnLayout = MI_LAYOUT) -> Iterator[MiRow]:
    """Yield ``(day, times)`` for every timetable row in the PDF text."""

    for raw_line in text.splitlines():
        if not raw_line.strip():
            continue
        row = parse_mi_line(raw_line, layout)
        if row is not None:
            yield row


__all__ = ["MiRow", "iter_mi_rows", "parse_mi_line", "pdf_to_text"]
