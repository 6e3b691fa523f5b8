"""Downloads for the ELM page and the MI listing/PDF.

HTTP errors are not wrapped: ``httpx.HTTPStatusError`` and friends reach the
caller unchanged so the sync run aborts with the original cause.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

import httpx

from .parsers.link_resolver import resolve_pdf_url
from .parsers.parser_pdf import pdf_to_text
from .settings import SourceSettings, get_source_settings

logger = logging.getLogger(__name__)

TextGetter = Callable[[str], str]
BytesGetter = Callable[[str], bytes]


def _get(url: str, settings: SourceSettings) -> httpx.Response:
    logger.info("Ophalen: %s", url)
    response = httpx.get(
        url,
        headers={"User-Agent": settings.user_agent},
        timeout=settings.timeout,
        follow_redirects=True,
    )
    response.raise_for_status()
    return response


def fetch_text(url: str, settings: Optional[SourceSettings] = None) -> str:
    return _get(url, settings or get_source_settings()).text


def fetch_bytes(url: str, settings: Optional[SourceSettings] = None) -> bytes:
    return _get(url, settings or get_source_settings()).content


def fetch_elm_page(
    settings: Optional[SourceSettings] = None,
    *,
    http_get: Optional[TextGetter] = None,
) -> str:
    settings = settings or get_source_settings()
    getter = http_get or (lambda url: fetch_text(url, settings))
    return getter(settings.elm_url)


def find_mi_pdf(
    year: int,
    month: int,
    settings: Optional[SourceSettings] = None,
    *,
    http_get: Optional[TextGetter] = None,
) -> str:
    """Return the absolute URL of the MI timetable PDF for ``year``/``month``."""

    settings = settings or get_source_settings()
    getter = http_get or (lambda url: fetch_text(url, settings))
    listing = getter(settings.mi_page)
    return resolve_pdf_url(listing, year, month, settings.mi_page)


def fetch_mi_pdf_text(
    year: int,
    month: int,
    settings: Optional[SourceSettings] = None,
    *,
    http_get: Optional[TextGetter] = None,
    http_get_bytes: Optional[BytesGetter] = None,
) -> str:
    settings = settings or get_source_settings()
    pdf_url = find_mi_pdf(year, month, settings, http_get=http_get)
    getter = http_get_bytes or (lambda url: fetch_bytes(url, settings))
    return pdf_to_text(getter(pdf_url))


__all__ = [
    "BytesGetter",
    "TextGetter",
    "fetch_bytes",
    "fetch_elm_page",
    "fetch_mi_pdf_text",
    "fetch_text",
    "find_mi_pdf",
]
