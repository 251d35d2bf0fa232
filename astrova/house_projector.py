"""Whole-sign house projection for the North-Indian diamond layout."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any

from astrova.chart_normalizer import chart_for, resolve_sign_names
from astrova.chart_tables import BODY_GLYPHS

HOUSE_NUMBERS = tuple(range(1, 13))

# Indicator tag -> tooltip label, in display order.
INDICATOR_LABELS = (
    ("retro", "retrograde", "Retrograde"),
    ("combust", "combust", "Combust"),
    ("vargottama", "vargottama", "Vargottama"),
    ("exalted", "exalted", "Exalted"),
    ("debilitated", "debilitated", "Debilitated"),
)


def clamp_sign_index(value: Any) -> int:
    """Coerce any ascendant input into 0..11; unusable input becomes 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if not math.isfinite(value):
        return 0
    return int(value) % 12


def sign_index_for_house(house: int, ascendant_sign_index: Any) -> int:
    """Sign occupying ``house`` when house 1 holds the ascendant sign."""
    return (clamp_sign_index(ascendant_sign_index) + int(house) - 1) % 12


def bodies_in_house(grid: Sequence[Sequence[str]], house: int, ascendant_sign_index: Any) -> list[str]:
    sign_index = sign_index_for_house(house, ascendant_sign_index)
    slot = grid[sign_index] if sign_index < len(grid) else []
    return list(dict.fromkeys(slot))


def lagna_sign_index(payload: Mapping[str, Any] | None, chart_type: str = "rasi") -> int:
    """Ascendant sign for the requested chart.

    The Navamsa ascendant is an independent field from the API and is never
    derived from the Rasi one.
    """
    lagna = payload.get("lagna") if isinstance(payload, Mapping) else None
    if not isinstance(lagna, Mapping):
        return 0
    field = "navamsa_sign_index" if chart_type == "navamsa" else "sign_index"
    return clamp_sign_index(lagna.get(field))


def body_indicators(planets: Mapping[str, Any] | None, name: str, chart_type: str = "rasi") -> list[str]:
    """Condition tags for a body; the harmonic chart never shows them."""
    if chart_type == "navamsa" or not isinstance(planets, Mapping):
        return []
    record = planets.get(name)
    if not isinstance(record, Mapping):
        return []
    return [tag for tag, field, _label in INDICATOR_LABELS if bool(record.get(field))]


def body_title(name: str, indicators: Sequence[str]) -> str:
    labels = {tag: label for tag, _field, label in INDICATOR_LABELS}
    return " | ".join([name, *(labels[tag] for tag in indicators if tag in labels)])


def _body_entry(name: str, planets: Mapping[str, Any] | None, chart_type: str) -> dict[str, Any]:
    abbreviation, color = BODY_GLYPHS.get(name, (name[:2], "#fff"))
    indicators = body_indicators(planets, name, chart_type)
    return {
        "name": name,
        "abbreviation": abbreviation,
        "color": color,
        "indicators": indicators,
        "title": body_title(name, indicators),
    }


def project_houses(payload: Mapping[str, Any] | None, chart_type: str = "rasi") -> list[dict[str, Any]]:
    """All 12 houses with their sign and occupants, house 1 first.

    Empty houses are still returned; the lagna itself is often body-free.
    """
    grid = chart_for(payload, chart_type)
    ascendant = lagna_sign_index(payload, chart_type)
    sign_names = resolve_sign_names(payload)
    planets = payload.get("planets") if isinstance(payload, Mapping) else None

    houses: list[dict[str, Any]] = []
    for house in HOUSE_NUMBERS:
        sign_index = sign_index_for_house(house, ascendant)
        houses.append({
            "house": house,
            "sign_index": sign_index,
            "sign_number": sign_index + 1,
            "sign_name": sign_names[sign_index],
            "bodies": [_body_entry(n, planets, chart_type) for n in bodies_in_house(grid, house, ascendant)],
        })
    return houses
