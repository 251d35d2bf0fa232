"""Longitude-based aspect detection between chart bodies."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any

from astrova.aspect_texts import ASPECT_ONE_LINERS, PAIR_ONE_LINERS
from astrova.chart_tables import CLASSICAL_PLANETS, LUNAR_NODES, SHADOW_POINTS

logger = logging.getLogger(__name__)

# Tested in this order; the first type within orb wins.
ASPECT_DEFS: tuple[dict[str, Any], ...] = (
    {"name": "Conjunction", "angle": 0.0, "orb": 10.0, "nature": "neutral", "color": "#e9d5ff", "symbol": "☌",
     "description": "Blending of energies, intensification"},
    {"name": "Opposition", "angle": 180.0, "orb": 10.0, "nature": "tense", "color": "#f87171", "symbol": "☍",
     "description": "Polarity, awareness, balance needed"},
    {"name": "Trine", "angle": 120.0, "orb": 8.0, "nature": "harmonious", "color": "#4ade80", "symbol": "△",
     "description": "Flow, natural talent, ease"},
    {"name": "Square", "angle": 90.0, "orb": 8.0, "nature": "tense", "color": "#fbbf24", "symbol": "□",
     "description": "Friction, challenge, growth"},
    {"name": "Sextile", "angle": 60.0, "orb": 6.0, "nature": "harmonious", "color": "#93c5fd", "symbol": "⚹",
     "description": "Opportunity, cooperation"},
)

ASPECT_NATURES = ("harmonious", "tense", "neutral")


def _longitude(record: Any) -> float | None:
    if not isinstance(record, Mapping):
        return None
    lon = record.get("longitude")
    if isinstance(lon, bool) or not isinstance(lon, (int, float)) or not math.isfinite(lon):
        return None
    return float(lon)


def separation(lon1: float, lon2: float) -> float:
    """Shortest-arc distance between two longitudes (0..180)."""
    diff = abs(lon1 - lon2) % 360.0
    return min(diff, 360.0 - diff)


def match_aspect(angle: float) -> dict[str, Any] | None:
    for aspect_def in ASPECT_DEFS:
        if abs(angle - aspect_def["angle"]) <= aspect_def["orb"]:
            return aspect_def
    return None


def body_universe(bodies: Mapping[str, Any]) -> list[str]:
    """Evaluation order: classical planets, then nodes and shadow points that are present."""
    return [
        *CLASSICAL_PLANETS,
        *(n for n in LUNAR_NODES if bodies.get(n)),
        *(n for n in SHADOW_POINTS if bodies.get(n)),
    ]


def collect_bodies(planets: Mapping[str, Any] | None, upagrahas: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Merge planet and upagraha records; upagrahas win on a name clash."""
    merged: dict[str, Any] = dict(planets) if isinstance(planets, Mapping) else {}
    if isinstance(upagrahas, Mapping):
        merged.update(upagrahas)
    return merged


def compute_aspects(bodies: Mapping[str, Any] | None) -> list[dict[str, Any]]:
    """All aspects between the chart's bodies, tightest orb first.

    Each unordered pair is evaluated once in universe order. Bodies missing
    from ``bodies`` (or without a usable longitude) are skipped quietly.
    """
    if not isinstance(bodies, Mapping):
        return []

    names = body_universe(bodies)
    longitudes = {name: _longitude(bodies.get(name)) for name in names}
    found: list[dict[str, Any]] = []

    for i, first in enumerate(names):
        lon1 = longitudes[first]
        if lon1 is None:
            continue
        for second in names[i + 1:]:
            lon2 = longitudes[second]
            if lon2 is None:
                continue
            angle = separation(lon1, lon2)
            aspect_def = match_aspect(angle)
            if aspect_def is None:
                continue
            orb = abs(angle - aspect_def["angle"])
            generic = ASPECT_ONE_LINERS[aspect_def["name"]]
            found.append({
                "planet1": first,
                "planet2": second,
                "type": aspect_def["name"],
                "angle": round(angle),
                "orb": round(orb, 1),
                "nature": aspect_def["nature"],
                "one_line": generic,
                "pair_one_line": PAIR_ONE_LINERS.get((first, second, aspect_def["name"]), generic),
                "description": aspect_def["description"],
                "symbol": aspect_def["symbol"],
                "color": aspect_def["color"],
            })

    skipped = [n for n in names if longitudes[n] is None]
    if skipped:
        logger.debug("Aspect pairs skipped for bodies without longitude: %s", ", ".join(skipped))

    # Sort on the reported orb; sorted() is stable, so equal orbs keep discovery order.
    return sorted(found, key=lambda aspect: aspect["orb"])


def filter_aspects(
    aspects: Iterable[Mapping[str, Any]],
    planet: str = "all",
    aspect_type: str = "all",
    nature: str = "all",
) -> list[Mapping[str, Any]]:
    """Filter by participating planet, aspect type and nature; ``"all"`` disables a filter."""
    out = []
    for aspect in aspects:
        if planet != "all" and planet not in (aspect.get("planet1"), aspect.get("planet2")):
            continue
        if aspect_type != "all" and aspect.get("type") != aspect_type:
            continue
        if nature != "all" and aspect.get("nature") != nature:
            continue
        out.append(aspect)
    return out


def aspect_planets(aspects: Iterable[Mapping[str, Any]]) -> list[str]:
    names: set[str] = set()
    for aspect in aspects:
        names.update((aspect["planet1"], aspect["planet2"]))
    return sorted(names)


def aspect_nature_counts(aspects: Iterable[Mapping[str, Any]]) -> dict[str, int]:
    counts = dict.fromkeys(ASPECT_NATURES, 0)
    for aspect in aspects:
        nature = aspect.get("nature")
        if nature in counts:
            counts[nature] += 1
    return counts
