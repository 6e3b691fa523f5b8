"""Errors raised by the timetable parsers."""

from __future__ import annotations

from typing import Any


class TimetableParseError(Exception):
    """Base class for parsing related issues."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class NoDocumentFoundError(TimetableParseError):
    """Raised when a listing page links to no candidate PDF at all."""


__all__ = ["TimetableParseError", "NoDocumentFoundError"]
