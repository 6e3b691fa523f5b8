"""Command line entry point: ``prayer-timetables sync`` and ``prayer-timetables serve``."""

from __future__ import annotations

import argparse
from datetime import date
import logging
import os
from pathlib import Path
from typing import List, Optional, Sequence

from . import __version__
from .logging_setup import configure_logging, get_uvicorn_log_config
from .parsers.config import get_layout_config
from .services.data_store import TimetableStore
from .sync import months_to_fetch, sync_all, sync_elm, sync_mi

LOGGER = logging.getLogger("prayer_timetables.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prayer-timetables",
        description="Haal ELM- en MI-gebedstijden op en schrijf ze als maandbestanden weg",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    sync = sub.add_parser("sync", help="Bronnen ophalen en JSON-bestanden schrijven")
    sync.add_argument("--source", choices=("elm", "mi", "all"), default="all")
    sync.add_argument("--year", type=int, help="Jaar (standaard: huidig jaar)")
    sync.add_argument(
        "--month",
        type=int,
        choices=range(1, 13),
        metavar="{1..12}",
        help="Alleen deze MI-maand ophalen (standaard: huidige en volgende maand)",
    )
    sync.add_argument("--data-dir", help="Uitvoermap (standaard: PRAYER_TIMES_DATA_DIR of web/data)")

    serve = sub.add_parser("serve", help="Start de API-server")
    serve.add_argument("--host", default=os.getenv("PRAYER_TIMES_HOST", "127.0.0.1"))
    serve.add_argument("--port", type=int, default=int(os.getenv("PRAYER_TIMES_PORT", "8000")))
    return parser


def _run_sync(args: argparse.Namespace) -> List[Path]:
    today = date.today()
    store = TimetableStore(Path(args.data_dir)) if args.data_dir else None

    if args.year is None and args.month is None:
        sources = ("elm", "mi") if args.source == "all" else (args.source,)
        return sync_all(today, sources=sources, store=store)

    year = args.year or today.year
    layouts = get_layout_config()
    written: List[Path] = []
    if args.source in ("elm", "all"):
        written.extend(sync_elm(year, store=store, layouts=layouts))
    if args.source in ("mi", "all"):
        if args.month is not None:
            plan = [(year, args.month)]
        else:
            plan = months_to_fetch(today.replace(year=year, day=1))
        for plan_year, plan_month in plan:
            written.append(sync_mi(plan_year, plan_month, store=store, layouts=layouts))
    return written


def _run_serve(args: argparse.Namespace) -> None:
    import uvicorn

    from .app import app

    uvicorn.run(app, host=args.host, port=args.port, log_config=get_uvicorn_log_config())


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging()

    if args.command == "serve":
        _run_serve(args)
        return 0

    try:
        written = _run_sync(args)
    except Exception as exc:
        LOGGER.error("Sync mislukt: %s", exc)
        print(f"[x] {exc}")
        return 1

    for path in written:
        print(f"[✓] {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
