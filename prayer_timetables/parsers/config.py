"""Column layout configuration.

Each source publishes a fixed set of time columns per row. Which token
position maps to which prayer field is kept in one table per source so a
publisher reformat can be fixed here (or through an override file) without
touching the extractors.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
import os
from pathlib import Path
from typing import Dict, Mapping, Sequence, Tuple

LAYOUTS_ENV_VAR = "PRAYER_TIMES_LAYOUTS"
DEFAULT_MIN_TOKENS = 11


@dataclass(frozen=True)
class ColumnLayout:
    fields: Tuple[Tuple[int, str], ...]
    min_tokens: int = DEFAULT_MIN_TOKENS

    def __post_init__(self) -> None:
        if not self.fields:
            raise ValueError("Een kolomindeling heeft minstens één veld nodig")
        highest = max(index for index, _ in self.fields)
        if min(index for index, _ in self.fields) < 0:
            raise ValueError("Kolomindex mag niet negatief zijn")
        if highest >= self.min_tokens:
            raise ValueError(
                f"Kolomindex {highest} valt buiten het minimum van {self.min_tokens} tijden"
            )

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(name for _, name in self.fields)

    def map_tokens(self, tokens: Sequence[str]) -> Dict[str, str] | None:
        """Map positional time tokens onto field names.

        Returns ``None`` when the row carries fewer tokens than the layout
        requires, so callers can drop the row as a whole.
        """

        if len(tokens) < self.min_tokens:
            return None
        return {name: tokens[index] for index, name in self.fields}


# Index 2, 4, 7 en 9 zijn secundaire kolommen (jama'ah/duplicaten) in de ELM-tabel
ELM_LAYOUT = ColumnLayout(
    fields=(
        (0, "sunrise"),
        (1, "fajr"),
        (3, "zuhr"),
        (5, "asr_mithl1"),
        (6, "asr_mithl2"),
        (8, "maghrib"),
        (10, "isha"),
    ),
)

MI_LAYOUT = ColumnLayout(
    fields=(
        (1, "fajr"),
        (4, "zuhr"),
        (7, "asr"),
        (8, "maghrib"),
        (10, "isha"),
    ),
)


@dataclass(frozen=True)
class LayoutConfig:
    elm: ColumnLayout = ELM_LAYOUT
    mi: ColumnLayout = MI_LAYOUT


def _load_overrides(path: Path) -> dict:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise RuntimeError(f"Ongeldige JSON in layout-config: {path}") from exc
    if not isinstance(data, dict):
        raise RuntimeError("Layout-config moet een JSON-object zijn")
    return data


def _apply_override(base: ColumnLayout, override: Mapping) -> ColumnLayout:
    if not isinstance(override, Mapping):
        raise RuntimeError("Layout-override moet een JSON-object zijn")

    fields = base.fields
    raw_fields = override.get("fields")
    if raw_fields is not None:
        if not isinstance(raw_fields, Mapping):
            raise RuntimeError("'fields' moet een object zijn van veldnaam naar index")
        expected = set(base.field_names)
        if set(raw_fields) != expected:
            raise RuntimeError(
                f"'fields' moet precies deze velden bevatten: {', '.join(sorted(expected))}"
            )
        try:
            fields = tuple(
                sorted(((int(index), str(name)) for name, index in raw_fields.items()))
            )
        except (TypeError, ValueError) as exc:
            raise RuntimeError("Kolomindexen moeten gehele getallen zijn") from exc

    min_tokens = base.min_tokens
    if override.get("min_tokens") is not None:
        try:
            min_tokens = int(override["min_tokens"])
        except (TypeError, ValueError) as exc:
            raise RuntimeError("'min_tokens' moet een geheel getal zijn") from exc

    try:
        return ColumnLayout(fields=fields, min_tokens=min_tokens)
    except ValueError as exc:
        raise RuntimeError(str(exc)) from exc


def get_layout_config() -> LayoutConfig:
    """Return the column layouts, optionally overridden via env."""

    env_value = os.environ.get(LAYOUTS_ENV_VAR)
    if not env_value:
        return LayoutConfig()

    override_path = Path(env_value).expanduser()
    if not override_path.is_file():
        return LayoutConfig()

    overrides = _load_overrides(override_path)
    elm = ELM_LAYOUT
    mi = MI_LAYOUT
    if "elm" in overrides:
        elm = _apply_override(ELM_LAYOUT, overrides["elm"])
    if "mi" in overrides:
        mi = _apply_override(MI_LAYOUT, overrides["mi"])
    return LayoutConfig(elm=elm, mi=mi)


__all__ = [
    "ColumnLayout",
    "DEFAULT_MIN_TOKENS",
    "ELM_LAYOUT",
    "LAYOUTS_ENV_VAR",
    "LayoutConfig",
    "MI_LAYOUT",
    "get_layout_config",
]
