"""Spider-chart geometry for strength data.

Two plotting modes:

- direct: radius follows the strength ratio, capped at ``MAX_SCALE`` so one
  outlier cannot flatten the rest of the polygon;
- stretched: used for houses, whose twelve ratios usually sit close
  together. The observed min..max range is spread over a fixed visual band
  ``[0.5, 1.4]`` via ``plot_ratio`` while labels keep the true percentage.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any

from astrova.chart_tables import HOUSE_PROFILES, PLANET_PROFILES

DEFAULT_SIZE = 240
BASE_RADIUS_FACTOR = 0.32
MAX_SCALE = 1.3
LABEL_OFFSET = 22
RING_LEVELS = 5

STRETCH_FLOOR = 0.5
STRETCH_SPAN = 0.9
MIN_STRETCH_RANGE = 0.001


def _geometry(size: float) -> tuple[float, float, float]:
    center = size / 2
    base_radius = size * BASE_RADIUS_FACTOR
    web_radius = base_radius * MAX_SCALE
    return center, base_radius, web_radius


def _spoke_angle(index: int, count: int) -> float:
    # First spoke at the top; screen y grows downward, so increasing angle runs clockwise.
    return (2 * math.pi / count) * index - math.pi / 2


def point_ratio(point: Mapping[str, Any]) -> float:
    max_value = point.get("max_value") or 0
    return point.get("value", 0) / max_value if max_value > 0 else 0.0


def display_label(percent: float) -> str:
    return f"{percent:.0f}%"


def project(points: Sequence[Mapping[str, Any]], size: float = DEFAULT_SIZE) -> list[dict[str, Any]]:
    """Place each data point on its spoke; an empty input yields an empty polygon."""
    count = len(points)
    if count == 0:
        return []
    center, base_radius, web_radius = _geometry(size)

    projected = []
    for i, item in enumerate(points):
        angle = _spoke_angle(i, count)
        ratio = point_ratio(item)
        plot_ratio = item.get("plot_ratio")
        normalized = min(ratio if plot_ratio is None else plot_ratio, MAX_SCALE)
        radius = base_radius * normalized
        strength_ratio = item.get("strength_ratio")
        display_percent = item.get("display_percent")
        projected.append({
            **item,
            "x": center + radius * math.cos(angle),
            "y": center + radius * math.sin(angle),
            "label_x": center + (web_radius + LABEL_OFFSET) * math.cos(angle),
            "label_y": center + (web_radius + LABEL_OFFSET) * math.sin(angle),
            "angle": angle,
            "normalized_value": normalized,
            "strength_ratio": ratio if strength_ratio is None else strength_ratio,
            "display_percent": ratio * 100 if display_percent is None else display_percent,
        })
    for entry in projected:
        entry["percent_label"] = display_label(entry["display_percent"])
    return projected


def polygon_path(projected: Sequence[Mapping[str, Any]]) -> str:
    return " ".join(f"{p['x']},{p['y']}" for p in projected)


def web_rings(count: int, size: float = DEFAULT_SIZE, levels: int = RING_LEVELS) -> list[dict[str, Any]]:
    """Guide polygons at (k / levels) * 1.3; one landing on scale 1.0 is flagged ``is_main``."""
    if count <= 0:
        return []
    center, base_radius, _web_radius = _geometry(size)
    rings = []
    for level in range(1, levels + 1):
        t = (level / levels) * MAX_SCALE
        r = base_radius * t
        ring_points = " ".join(
            f"{center + r * math.cos(_spoke_angle(j, count))},{center + r * math.sin(_spoke_angle(j, count))}"
            for j in range(count)
        )
        rings.append({"t": t, "points": ring_points, "is_main": abs(t - 1.0) < 0.01})
    return rings


def grid_lines(count: int, size: float = DEFAULT_SIZE) -> list[dict[str, float]]:
    if count <= 0:
        return []
    center, _base_radius, web_radius = _geometry(size)
    return [
        {
            "x1": center,
            "y1": center,
            "x2": center + web_radius * math.cos(_spoke_angle(i, count)),
            "y2": center + web_radius * math.sin(_spoke_angle(i, count)),
        }
        for i in range(count)
    ]


# ------------------------------------------------------------------------------
# Data point builders
# ------------------------------------------------------------------------------
def planet_radar_points(planet_rows: Sequence[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Direct-mode points for Shad Bala."""
    points = []
    for row in planet_rows:
        profile = PLANET_PROFILES.get(row["planet"], {})
        icon = profile.get("icon", "")
        points.append({
            "label": f"{icon} {row['planet']}".strip(),
            "short_label": profile.get("label", row["planet"]),
            "description": profile.get("description", ""),
            "value": row["rupas"],
            "max_value": row["required"],
            "color": profile.get("color", "#ffffff"),
            "icon": icon,
        })
    return points


def stretched_plot_ratios(ratios: Sequence[float]) -> list[float]:
    """Spread ``ratios`` over [0.5, 1.4]; identical inputs all map to 0.5."""
    if not ratios:
        return []
    low, high = min(ratios), max(ratios)
    spread = max(MIN_STRETCH_RANGE, high - low)
    return [STRETCH_FLOOR + ((r - low) / spread) * STRETCH_SPAN for r in ratios]


def house_radar_points(house_rows: Sequence[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Stretched-mode points for Bhava Bala."""
    plot_ratios = stretched_plot_ratios([row["ratio"] for row in house_rows])
    points = []
    for row, plot_ratio in zip(house_rows, plot_ratios):
        profile = HOUSE_PROFILES.get(row["house"], {})
        points.append({
            "label": f"H{row['house']}",
            "short_label": profile.get("short_label", f"H{row['house']}"),
            "description": profile.get("description", ""),
            "value": row["rupas"],
            "max_value": row["max"],
            "strength_ratio": row["ratio"],
            "display_percent": row["ratio"] * 100,
            "plot_ratio": plot_ratio,
            "color": profile.get("color", "#ffffff"),
        })
    return points


def life_area_radar_points(scores: Sequence[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Direct-mode points for life-area composites (scale 1.0 = full strength)."""
    return [
        {
            "label": area["label"],
            "short_label": area["label"],
            "description": f"Combined strength for {area['label'].lower()}",
            "value": area["score"],
            "max_value": 1,
            "color": area["color"],
        }
        for area in scores
    ]
