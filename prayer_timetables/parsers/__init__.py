# eenvoudige re-export, met absolute imports intern
from .config import ColumnLayout, LayoutConfig, get_layout_config
from .errors import NoDocumentFoundError, TimetableParseError
from .link_resolver import extract_pdf_links, resolve_pdf_url, select_pdf_link
from .parser_html import iter_elm_rows
from .parser_pdf import iter_mi_rows, pdf_to_text

__all__ = [
    "ColumnLayout",
    "LayoutConfig",
    "NoDocumentFoundError",
    "TimetableParseError",
    "extract_pdf_links",
    "get_layout_config",
    "iter_elm_rows",
    "iter_mi_rows",
    "pdf_to_text",
    "resolve_pdf_url",
    "select_pdf_link",
]
