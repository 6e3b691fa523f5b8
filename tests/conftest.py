import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from prayer_timetables.parsers.config import LAYOUTS_ENV_VAR  # noqa: E402


ELM_ROW_TIMES = "05:10 05:18 06:02 13:05 13:10 16:45 16:50 17:55 19:02 19:10 20:32"
MI_ROW_TIMES = "05:10 05:18 06:02 12:30 13:05 13:10 16:45 16:50 19:02 19:10 20:32"


@pytest.fixture(autouse=True)
def default_layouts(monkeypatch):
    monkeypatch.delenv(LAYOUTS_ENV_VAR, raising=False)


@pytest.fixture
def elm_page() -> str:
    return "\n".join(
        [
            "<html><body><table>",
            "<tr><th>Date</th><th>Sunrise</th><th>Fajr</th></tr>",
            f"<tr><td>Sun</td><td>01/09/2024</td><td>{ELM_ROW_TIMES.replace(' ', '</td><td>')}</td></tr>",
            f"<tr><td>Mon</td><td>02/09/2024</td><td>{ELM_ROW_TIMES.replace(' ', '</td><td>')}</td></tr>",
            "<tr><td>Tue</td><td>03/09/2024</td><td>05:12</td><td>05:20</td></tr>",
            f"<tr><td>Wed</td><td>15/01/2024</td><td>{ELM_ROW_TIMES.replace(' ', '</td><td>')}</td></tr>",
            f"<tr><td>Thu</td><td>16/01/2023</td><td>{ELM_ROW_TIMES.replace(' ', '</td><td>')}</td></tr>",
            "</table></body></html>",
        ]
    )


@pytest.fixture
def mi_pdf_text() -> str:
    return "\n".join(
        [
            "UKIM Masjid Ibrahim Prayer Timetable March 2025",
            "Date Day Fajr Sunrise Zuhr Asr Maghrib Isha",
            f"1 Sat {MI_ROW_TIMES}",
            f"2 Sun {MI_ROW_TIMES}",
            "3 Mon 05:10 05:18",
            "Jumu'ah 13:15 & 14:00",
        ]
    )
