"""Fetch, extract and persist the timetables of both sources.

A run is fail-fast: the first error aborts the batch and is re-raised. Months
that were written before the failure stay on disk.
"""

from __future__ import annotations

from datetime import date
import logging
from pathlib import Path
from typing import List, Optional, Tuple

from .parsers.config import LayoutConfig, get_layout_config
from .services.data_store import TimetableStore, timetable_store
from .settings import SourceSettings, get_source_settings
from .sources import BytesGetter, TextGetter, fetch_elm_page, fetch_mi_pdf_text
from .timetable import assemble_elm_year, assemble_mi_month

logger = logging.getLogger(__name__)


def month_after(year: int, month: int) -> Tuple[int, int]:
    if month == 12:
        return year + 1, 1
    return year, month + 1


def months_to_fetch(today: date) -> List[Tuple[int, int]]:
    """Current and next month; MI publishes one PDF per month."""

    return [(today.year, today.month), month_after(today.year, today.month)]


def sync_elm(
    year: int,
    *,
    store: Optional[TimetableStore] = None,
    settings: Optional[SourceSettings] = None,
    layouts: Optional[LayoutConfig] = None,
    http_get: Optional[TextGetter] = None,
) -> List[Path]:
    store = store or timetable_store
    page = fetch_elm_page(settings, http_get=http_get)
    months = assemble_elm_year(page, year, layouts=layouts)
    return [store.write_timetable("elm", timetable) for timetable in months.values()]


def sync_mi(
    year: int,
    month: int,
    *,
    store: Optional[TimetableStore] = None,
    settings: Optional[SourceSettings] = None,
    layouts: Optional[LayoutConfig] = None,
    http_get: Optional[TextGetter] = None,
    http_get_bytes: Optional[BytesGetter] = None,
) -> Path:
    store = store or timetable_store
    text = fetch_mi_pdf_text(
        year, month, settings, http_get=http_get, http_get_bytes=http_get_bytes
    )
    timetable = assemble_mi_month(text, year, month, layouts=layouts)
    if not timetable.days:
        logger.warning("MI %s-%02d: geen dagen herkend in de PDF", year, month)
    return store.write_timetable("mi", timetable)


def sync_all(
    today: Optional[date] = None,
    *,
    sources: Tuple[str, ...] = ("elm", "mi"),
    store: Optional[TimetableStore] = None,
    settings: Optional[SourceSettings] = None,
    http_get: Optional[TextGetter] = None,
    http_get_bytes: Optional[BytesGetter] = None,
) -> List[Path]:
    """Refresh the ELM year of ``today`` and the MI current/next month."""

    today = today or date.today()
    settings = settings or get_source_settings()
    layouts = get_layout_config()
    written: List[Path] = []

    try:
        if "elm" in sources:
            written.extend(
                sync_elm(
                    today.year,
                    store=store,
                    settings=settings,
                    layouts=layouts,
                    http_get=http_get,
                )
            )
        if "mi" in sources:
            for year, month in months_to_fetch(today):
                written.append(
                    sync_mi(
                        year,
                        month,
                        store=store,
                        settings=settings,
                        layouts=layouts,
                        http_get=http_get,
                        http_get_bytes=http_get_bytes,
                    )
                )
    except Exception:
        logger.exception("Sync afgebroken na %d bestand(en)", len(written))
        raise

    logger.info("Sync klaar: %d bestand(en) bijgewerkt", len(written))
    return written


__all__ = ["month_after", "months_to_fetch", "sync_all", "sync_elm", "sync_mi"]
