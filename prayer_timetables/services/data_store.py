from __future__ import annotations

import json
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel

from ..models import SourceTag, StoredTimetable

logger = logging.getLogger(__name__)

DATA_DIR_ENV_VAR = "PRAYER_TIMES_DATA_DIR"
FILE_NAME_RE = re.compile(r"^(elm|mi)-(\d{4})-(0[1-9]|1[0-2])\.json$")
SOURCE_TAGS = ("elm", "mi")


def timetable_filename(source: str, year: int, month: Union[int, str]) -> str:
    if source not in SOURCE_TAGS:
        raise ValueError(f"Onbekende bron: {source}")
    month_key = f"{int(month):02d}"
    if not 1 <= int(month_key) <= 12:
        raise ValueError(f"Ongeldige maand: {month}")
    return f"{source}-{year}-{month_key}.json"


class TimetableStore:
    """Writes and reads the per-month timetable JSON documents."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        self._default_base = Path(base_path) if base_path else self._determine_default_base()
        self._configure(self._default_base)

    @staticmethod
    def _determine_default_base() -> Path:
        custom = os.getenv(DATA_DIR_ENV_VAR)
        if custom:
            return Path(custom).expanduser()
        return Path("web") / "data"

    def _configure(self, base_path: Path) -> None:
        self._base_path = Path(base_path)

    def ensure_ready(self) -> None:
        self._base_path.mkdir(parents=True, exist_ok=True)

    @property
    def base_path(self) -> Path:
        return self._base_path

    def set_base_path(self, base_path: Path) -> None:
        self._configure(Path(base_path))

    def reset_base_path(self) -> None:
        self._configure(self._default_base)

    def path_for(self, source: str, year: int, month: Union[int, str]) -> Path:
        return self._base_path / timetable_filename(source, year, month)

    def write_timetable(self, source: SourceTag, timetable: BaseModel) -> Path:
        payload: Dict[str, Any] = timetable.model_dump(mode="json")
        path = self.path_for(source, payload["year"], payload["month"])
        self.ensure_ready()
        # Eerst naar een tijdelijk bestand, zodat een afgebroken run geen half bestand achterlaat
        # Unieke naam per schrijver; gelijktijdige schrijvers mogen elkaar niet raken
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.stem}-",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_path = Path(handle.name)
            try:
                handle.write(json.dumps(payload, ensure_ascii=False, indent=2))
            except BaseException:
                handle.close()
                tmp_path.unlink(missing_ok=True)
                raise
        try:
            os.replace(tmp_path, path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise
        logger.info("Geschreven: %s (%d dagen)", path, len(payload.get("days", {})))
        return path

    def read_timetable(self, source: str, year: int, month: Union[int, str]) -> Dict[str, Any]:
        path = self.path_for(source, year, month)
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)

    def list_timetables(self) -> List[StoredTimetable]:
        if not self._base_path.is_dir():
            return []
        entries: List[StoredTimetable] = []
        for path in sorted(self._base_path.iterdir()):
            match = FILE_NAME_RE.match(path.name)
            if not match or not path.is_file():
                continue
            source, year, month = match.groups()
            entries.append(
                StoredTimetable(source=source, year=int(year), month=month, file=path.name)
            )
        return entries


timetable_store = TimetableStore()
