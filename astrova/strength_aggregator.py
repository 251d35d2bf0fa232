"""Shad Bala / Bhava Bala aggregation into ratios, tiers and life-area scores.

The calculation API has reported strength in several units over time
(rupas, shashtiamsas, a raw bala total). Each record resolves to rupas
through a fixed precedence, and an absent record behaves like an all-zero
one so partial responses still render.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any

from astrova.chart_tables import (
    BHAVA_MAX_RUPAS,
    CLASSICAL_PLANETS,
    DEFAULT_REQUIRED_RUPAS,
    LIFE_AREAS,
    MEDIUM_THRESHOLD_PCT,
    REQUIRED_RUPAS,
    STRONG_THRESHOLD_PCT,
)

SHASHTIAMSAS_PER_RUPA = 60.0
STRONG_RATIO = STRONG_THRESHOLD_PCT / 100.0


def _number(record: Any, field: str) -> float | None:
    if not isinstance(record, Mapping):
        return None
    value = record.get(field)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        return None
    return float(value)


def _resolve_rupas(record: Any, generic_field: str) -> float:
    rupas = _number(record, "total_rupas")
    if rupas is not None:
        return rupas
    for field in ("total_shashtiamsas", generic_field):
        value = _number(record, field)
        if value is not None:
            return value / SHASHTIAMSAS_PER_RUPA
    return 0.0


def classify_strength(percentage: float) -> str:
    """Three-band tier shared by planets and houses; lower bounds inclusive."""
    if percentage >= STRONG_THRESHOLD_PCT:
        return "Strong"
    if percentage >= MEDIUM_THRESHOLD_PCT:
        return "Medium"
    return "Weak"


# ------------------------------------------------------------------------------
# Shad Bala (planets)
# ------------------------------------------------------------------------------
def planet_rupas(record: Any) -> float:
    return _resolve_rupas(record, "total_bala")


def planet_total_shashtiamsas(record: Any) -> float:
    """Whole shashtiamsa total for table display."""
    value = _number(record, "total_shashtiamsas")
    if value is not None:
        return round(value)
    rupas = _number(record, "total_rupas")
    if rupas is not None:
        return round(rupas * SHASHTIAMSAS_PER_RUPA)
    return _number(record, "total_bala") or 0


def required_rupas(planet: str, record: Any = None) -> float:
    explicit = _number(record, "required_rupas")
    if explicit is not None and explicit > 0:
        return explicit
    return REQUIRED_RUPAS.get(planet, DEFAULT_REQUIRED_RUPAS)


def planet_strength(planet: str, record: Any) -> dict[str, Any]:
    rupas = planet_rupas(record)
    required = required_rupas(planet, record)
    ratio = rupas / required
    # Scaling before dividing keeps exact band boundaries (e.g. 4.5 / 5.0) exact.
    percentage = rupas * 100.0 / required
    return {
        "planet": planet,
        "rupas": rupas,
        "required": required,
        "total_shashtiamsas": planet_total_shashtiamsas(record),
        "ratio": ratio,
        "percentage": percentage,
        "tier": classify_strength(percentage),
    }


def planet_strengths(shad_bala: Mapping[str, Any] | None) -> list[dict[str, Any]]:
    """One row per classical planet, in fixed order."""
    source = shad_bala if isinstance(shad_bala, Mapping) else {}
    return [planet_strength(planet, source.get(planet)) for planet in CLASSICAL_PLANETS]


# ------------------------------------------------------------------------------
# Bhava Bala (houses)
# ------------------------------------------------------------------------------
def bhava_rupas(record: Any) -> float:
    return _resolve_rupas(record, "strength")


def _house_record(bhava_bala: Mapping[Any, Any], house: int) -> Any:
    # JSON turns integer house keys into strings.
    record = bhava_bala.get(house)
    return record if record is not None else bhava_bala.get(str(house))


def has_house_data(bhava_bala: Any) -> bool:
    return isinstance(bhava_bala, Mapping)


def house_strength(house: int, record: Any) -> dict[str, Any]:
    rupas = bhava_rupas(record)
    ratio = rupas / BHAVA_MAX_RUPAS
    percentage = rupas * 100.0 / BHAVA_MAX_RUPAS
    return {
        "house": house,
        "rupas": rupas,
        "max": BHAVA_MAX_RUPAS,
        "ratio": ratio,
        "percentage": percentage,
        "tier": classify_strength(percentage),
    }


def house_strengths(bhava_bala: Mapping[Any, Any] | None) -> list[dict[str, Any]]:
    """Rows for houses 1..12, or an empty list when the chart has no Bhava Bala section.

    An empty section still yields twelve zero-strength houses.
    """
    if not has_house_data(bhava_bala):
        return []
    return [house_strength(house, _house_record(bhava_bala, house)) for house in range(1, 13)]


# ------------------------------------------------------------------------------
# Composites
# ------------------------------------------------------------------------------
def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def life_area_scores(
    planet_rows: Sequence[Mapping[str, Any]],
    house_rows: Sequence[Mapping[str, Any]],
) -> list[dict[str, Any]]:
    """Blend planet and house ratios per life area.

    Without any house data the planet average stands alone. Areas may share
    planets and houses.
    """
    planet_ratio = {row["planet"]: row["ratio"] for row in planet_rows}
    house_ratio = {row["house"]: row["ratio"] for row in house_rows}

    scores = []
    for area in LIFE_AREAS:
        planet_score = _mean([planet_ratio.get(p, 0.0) for p in area["planets"]])
        if house_rows:
            house_score = _mean([house_ratio.get(h, 0.0) for h in area["houses"]])
            score = (planet_score + house_score) / 2.0
        else:
            house_score = None
            score = planet_score
        scores.append({
            "key": area["key"],
            "label": area["label"],
            "planets": list(area["planets"]),
            "houses": list(area["houses"]),
            "planet_score": planet_score,
            "house_score": house_score,
            "score": score,
            "color": area["color"],
        })
    return scores


def strength_insights(
    planet_rows: Sequence[Mapping[str, Any]],
    house_rows: Sequence[Mapping[str, Any]],
) -> dict[str, Any]:
    planet_ratios = [row["ratio"] for row in planet_rows]
    house_ratios = [row["ratio"] for row in house_rows]
    # min/max return the first extreme, so ties resolve to the earlier planet.
    strongest = max(planet_rows, key=lambda row: row["ratio"], default=None)
    weakest = min(planet_rows, key=lambda row: row["ratio"], default=None)
    return {
        "planet_average": _mean(planet_ratios),
        "house_average": _mean(house_ratios),
        "strong_planets": sum(1 for r in planet_ratios if r >= STRONG_RATIO),
        "strong_houses": sum(1 for r in house_ratios if r >= STRONG_RATIO),
        "strongest_planet": strongest["planet"] if strongest else None,
        "weakest_planet": weakest["planet"] if weakest else None,
    }


# ------------------------------------------------------------------------------
# Time-sweep peaks
# ------------------------------------------------------------------------------
BALA_SECTIONS = ("shad_bala", "bhava_bala")
PEAK_RANKINGS = ("shad_bala", "bhava_bala", "combined")
DEFAULT_PEAK_COUNT = 10


def sweep_total(result: Any, section: str) -> float:
    """``result[section]["total"]`` from a sweep row; missing or invalid is 0."""
    if section == "combined":
        return sum(sweep_total(result, s) for s in BALA_SECTIONS)
    record = result.get(section) if isinstance(result, Mapping) else None
    return _number(record, "total") or 0.0


def best_bala_moment(results: Sequence[Mapping[str, Any]], section: str = "shad_bala") -> Mapping[str, Any] | None:
    """Row with the highest total; the earliest row wins a tie."""
    best = None
    for row in results:
        if best is None or sweep_total(row, section) > sweep_total(best, section):
            best = row
    return best


def top_bala_moments(
    results: Sequence[Mapping[str, Any]],
    count: int = DEFAULT_PEAK_COUNT,
    ranking: str = "shad_bala",
) -> list[Mapping[str, Any]]:
    """Up to ``count`` rows, highest total first; equal totals keep sweep order."""
    if ranking not in PEAK_RANKINGS:
        raise ValueError(f"ranking must be one of {', '.join(PEAK_RANKINGS)}")
    ranked = sorted(results, key=lambda row: sweep_total(row, ranking), reverse=True)
    return ranked[:max(0, count)]


def bala_peaks(results: Sequence[Mapping[str, Any]], count: int = DEFAULT_PEAK_COUNT) -> dict[str, Any]:
    """Best single moments and top-``count`` lists over a Shad/Bhava Bala time sweep."""
    rows = [row for row in results if isinstance(row, Mapping)] if isinstance(results, Sequence) else []
    return {
        "total_calculations": len(rows),
        "max_shad_bala": best_bala_moment(rows, "shad_bala"),
        "max_bhava_bala": best_bala_moment(rows, "bhava_bala"),
        "top_shad_bala": top_bala_moments(rows, count, "shad_bala"),
        "top_bhava_bala": top_bala_moments(rows, count, "bhava_bala"),
        "top_combined": top_bala_moments(rows, count, "combined"),
    }
