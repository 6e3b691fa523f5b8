"""Locate the monthly timetable PDF on a listing page."""

from __future__ import annotations

import logging
from typing import List, Sequence
from urllib.parse import urljoin

from lxml import etree, html

from .errors import NoDocumentFoundError

logger = logging.getLogger(__name__)

DOCUMENT_SUFFIX = ".pdf"

# Vaste Engelse namen: calendar.month_name volgt de locale van het proces
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def month_name(month: int) -> str:
    if not 1 <= month <= 12:
        raise ValueError(f"Ongeldige maand: {month}")
    return MONTH_NAMES[month - 1]


def expected_filename(year: int, month: int) -> str:
    """Canonical file name the publisher uses, e.g. ``PrayerTimetableMarch2025.pdf``."""

    return f"PrayerTimetable{month_name(month)}{year}{DOCUMENT_SUFFIX}"


def extract_pdf_links(html_content: str) -> List[str]:
    """Return every anchor href ending in ``.pdf``, in document order."""

    if not html_content or not html_content.strip():
        return []
    # Als bytes parsen: lxml weigert str met een XML-encodingdeclaratie
    parser = html.HTMLParser(encoding="utf-8")
    try:
        doc = html.fromstring(html_content.encode("utf-8"), parser=parser)
    except etree.ParserError:
        return []
    links: List[str] = []
    for href in doc.xpath("//a/@href"):
        value = str(href).strip()
        if value.lower().endswith(DOCUMENT_SUFFIX):
            links.append(value)
    return links


def select_pdf_link(links: Sequence[str], year: int, month: int, base_url: str) -> str:
    """Pick the timetable for ``year``/``month`` and return it as an absolute URL.

    Preference order: exact canonical file name, then month name, then the
    first listed candidate. All comparisons are case-insensitive.
    """

    candidates = [link for link in links if link]
    if not candidates:
        raise NoDocumentFoundError(
            "Geen PDF-link gevonden op de overzichtspagina",
            context={"base_url": base_url, "year": year, "month": month},
        )

    target = expected_filename(year, month).lower()
    name = month_name(month).lower()

    found = next((link for link in candidates if target in link.lower()), None)
    if found is None:
        found = next((link for link in candidates if name in link.lower()), None)
        if found is not None:
            logger.info("Geen exacte PDF voor %s; val terug op maandnaam: %s", target, found)
    if found is None:
        found = candidates[0]
        logger.warning("Geen PDF voor %s %s; gebruik eerste link: %s", name, year, found)

    return urljoin(base_url, found)


def resolve_pdf_url(html_content: str, year: int, month: int, base_url: str) -> str:
    return select_pdf_link(extract_pdf_links(html_content), year, month, base_url)


__all__ = [
    "DOCUMENT_SUFFIX",
    "expected_filename",
    "extract_pdf_links",
    "month_name",
    "resolve_pdf_url",
    "select_pdf_link",
]
