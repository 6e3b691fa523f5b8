import logging
import os
import re
from typing import Any, Dict, List

import httpx
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .models import StoredTimetable
from .parsers.errors import NoDocumentFoundError
from .services.data_store import SOURCE_TAGS, timetable_store
from .sync import sync_all

app = FastAPI(title="Prayer Timetables API", version=__version__)

logger = logging.getLogger(__name__)

RE_MONTH = re.compile(r"[0-9]{1,2}")

# CORS voor de statische webpagina die de maandbestanden leest
_cors_origins = [
    origin.strip()
    for origin in os.getenv("PRAYER_TIMES_CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]
if _cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )


@app.get("/api/system/version")
def api_get_version() -> dict[str, str]:
    return {"version": __version__}


@app.get("/api/timetables", response_model=List[StoredTimetable])
def list_timetables():
    return timetable_store.list_timetables()


@app.get("/api/timetables/{source}/{year}/{month}")
def get_timetable(source: str, year: int, month: str) -> Dict[str, Any]:
    if source not in SOURCE_TAGS:
        raise HTTPException(status_code=400, detail=f"Onbekende bron: {source}")
    if not RE_MONTH.fullmatch(month) or not 1 <= int(month) <= 12:
        raise HTTPException(status_code=400, detail=f"Ongeldige maand: {month}")
    try:
        return timetable_store.read_timetable(source, year, month)
    except FileNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Rooster niet gevonden") from exc


@app.post("/api/timetables/refresh")
def refresh_timetables() -> Dict[str, Any]:
    try:
        written = sync_all()
    except NoDocumentFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except httpx.HTTPError as exc:
        logger.warning("Bron ophalen mislukt: %s", exc)
        raise HTTPException(status_code=502, detail="Download van de bron mislukt") from exc

    return {"status": "ok", "files": [path.name for path in written]}
