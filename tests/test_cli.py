from datetime import date

import pytest

from prayer_timetables import cli
from prayer_timetables.parsers.errors import NoDocumentFoundError


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda: None)


def test_sync_defaults_to_full_refresh(monkeypatch, capsys, tmp_path):
    calls = {}

    def fake_sync_all(today, *, sources, store):
        calls["sources"] = sources
        calls["store"] = store
        return [tmp_path / "elm-2025-01.json"]

    monkeypatch.setattr(cli, "sync_all", fake_sync_all)

    assert cli.main(["sync"]) == 0
    assert calls == {"sources": ("elm", "mi"), "store": None}
    assert "elm-2025-01.json" in capsys.readouterr().out


def test_sync_single_mi_month(monkeypatch, tmp_path):
    calls = []

    def fake_sync_mi(year, month, *, store, layouts):
        calls.append((year, month, store.base_path))
        return tmp_path / f"mi-{year}-{month:02d}.json"

    monkeypatch.setattr(cli, "sync_mi", fake_sync_mi)

    assert cli.main(["sync", "--source", "mi", "--year", "2025", "--month", "3", "--data-dir", str(tmp_path)]) == 0
    assert calls == [(2025, 3, tmp_path)]


def test_sync_year_without_month_fetches_two_mi_months(monkeypatch, tmp_path):
    calls = []
    monkeypatch.setattr(
        cli,
        "sync_mi",
        lambda year, month, *, store, layouts: calls.append((year, month)) or tmp_path / "x.json",
    )

    assert cli.main(["sync", "--source", "mi", "--year", "2030"]) == 0
    today = date.today()
    first = (2030, today.month)
    second = (2031, 1) if today.month == 12 else (2030, today.month + 1)
    assert calls == [first, second]


def test_sync_failure_returns_non_zero(monkeypatch, capsys):
    def failing(today, *, sources, store):
        raise NoDocumentFoundError("Geen PDF-link gevonden op de overzichtspagina")

    monkeypatch.setattr(cli, "sync_all", failing)

    assert cli.main(["sync", "--source", "mi"]) == 1
    assert "Geen PDF-link" in capsys.readouterr().out


def test_invalid_month_is_rejected_by_argparse():
    with pytest.raises(SystemExit):
        cli.main(["sync", "--month", "13"])
