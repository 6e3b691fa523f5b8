import json

import pytest

from prayer_timetables.parsers.config import (
    ColumnLayout,
    ELM_LAYOUT,
    LAYOUTS_ENV_VAR,
    MI_LAYOUT,
    get_layout_config,
)


def test_default_layouts() -> None:
    config = get_layout_config()
    assert config.elm == ELM_LAYOUT
    assert config.mi == MI_LAYOUT
    assert dict(ELM_LAYOUT.fields) == {
        0: "sunrise",
        1: "fajr",
        3: "zuhr",
        5: "asr_mithl1",
        6: "asr_mithl2",
        8: "maghrib",
        10: "isha",
    }
    assert dict(MI_LAYOUT.fields) == {1: "fajr", 4: "zuhr", 7: "asr", 8: "maghrib", 10: "isha"}
    assert ELM_LAYOUT.min_tokens == MI_LAYOUT.min_tokens == 11


def test_map_tokens_requires_minimum() -> None:
    tokens = [f"0{i}:00" for i in range(10)]
    assert MI_LAYOUT.map_tokens(tokens) is None
    mapped = MI_LAYOUT.map_tokens(tokens + ["10:00"])
    assert mapped == {
        "fajr": "01:00",
        "zuhr": "04:00",
        "asr": "07:00",
        "maghrib": "08:00",
        "isha": "10:00",
    }


def test_layout_rejects_index_beyond_minimum() -> None:
    with pytest.raises(ValueError):
        ColumnLayout(fields=((11, "isha"),), min_tokens=11)


def test_override_file_changes_mi_layout(monkeypatch, tmp_path) -> None:
    path = tmp_path / "layouts.json"
    path.write_text(
        json.dumps(
            {
                "mi": {
                    "min_tokens": 12,
                    "fields": {"fajr": 1, "zuhr": 4, "asr": 7, "maghrib": 9, "isha": 11},
                }
            }
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv(LAYOUTS_ENV_VAR, str(path))

    config = get_layout_config()
    assert config.elm == ELM_LAYOUT
    assert config.mi.min_tokens == 12
    assert dict(config.mi.fields)[11] == "isha"


def test_override_with_unknown_field_is_rejected(monkeypatch, tmp_path) -> None:
    path = tmp_path / "layouts.json"
    path.write_text(json.dumps({"elm": {"fields": {"dhuhr": 3}}}), encoding="utf-8")
    monkeypatch.setenv(LAYOUTS_ENV_VAR, str(path))

    with pytest.raises(RuntimeError):
        get_layout_config()


def test_override_with_invalid_json_is_rejected(monkeypatch, tmp_path) -> None:
    path = tmp_path / "layouts.json"
    path.write_text("{not json", encoding="utf-8")
    monkeypatch.setenv(LAYOUTS_ENV_VAR, str(path))

    with pytest.raises(RuntimeError):
        get_layout_config()


def test_missing_override_file_falls_back_to_defaults(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv(LAYOUTS_ENV_VAR, str(tmp_path / "missing.json"))
    assert get_layout_config().mi == MI_LAYOUT


def test_override_with_empty_fields_is_rejected(monkeypatch, tmp_path) -> None:
    path = tmp_path / "layouts.json"
    path.write_text(json.dumps({"mi": {"fields": {}}}), encoding="utf-8")
    monkeypatch.setenv(LAYOUTS_ENV_VAR, str(path))

    with pytest.raises(RuntimeError, match="precies deze velden"):
        get_layout_config()
