"""Assemble every derived view for one kundali payload."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Optional

from astrova.aspect_engine import aspect_nature_counts, aspect_planets, collect_bodies, compute_aspects
from astrova.cache_manager import DerivationCache, cache as default_cache, payload_key
from astrova.chart_normalizer import chart_for
from astrova.dasha_timeline import dasha_timeline
from astrova.house_projector import lagna_sign_index, project_houses
from astrova.radar_projector import (
    house_radar_points,
    life_area_radar_points,
    planet_radar_points,
    project,
)
from astrova.strength_aggregator import (
    house_strengths,
    life_area_scores,
    planet_strengths,
    strength_insights,
)

logger = logging.getLogger(__name__)


def _field(payload: Mapping[str, Any], name: str) -> Any:
    value = payload.get(name)
    return value if isinstance(value, Mapping) else None


def _chart_section(payload: Mapping[str, Any], chart_type: str) -> dict[str, Any]:
    return {
        "grid": chart_for(payload, chart_type),
        "lagna_sign_index": lagna_sign_index(payload, chart_type),
        "houses": project_houses(payload, chart_type),
    }


def _derive(payload: Mapping[str, Any]) -> dict[str, Any]:
    bodies = collect_bodies(_field(payload, "planets"), _field(payload, "upagrahas"))
    aspects = compute_aspects(bodies)

    planet_rows = planet_strengths(_field(payload, "shad_bala"))
    house_rows = house_strengths(_field(payload, "bhava_bala"))
    life_areas = life_area_scores(planet_rows, house_rows)

    return {
        "rasi": _chart_section(payload, "rasi"),
        "navamsa": _chart_section(payload, "navamsa"),
        "aspects": aspects,
        "aspect_summary": {
            "total": len(aspects),
            "natures": aspect_nature_counts(aspects),
            "planets": aspect_planets(aspects),
        },
        "planet_strengths": planet_rows,
        "house_strengths": house_rows,
        "life_areas": life_areas,
        "insights": strength_insights(planet_rows, house_rows),
        "radar": {
            "planets": project(planet_radar_points(planet_rows)),
            "houses": project(house_radar_points(house_rows)),
            "life_areas": project(life_area_radar_points(life_areas)),
        },
    }


def build_chart_view(
    payload: Mapping[str, Any] | None,
    *,
    cache: Optional[DerivationCache] = None,
    now: Optional[datetime] = None,
) -> dict[str, Any]:
    """Every derived view of ``payload``; malformed sections degrade to empty output.

    The time-independent part is memoized by payload content and handed out
    as a deep copy. The dasha status table depends on ``now`` and is
    computed on every call.
    """
    if not isinstance(payload, Mapping):
        payload = {}
    store = default_cache if cache is None else cache

    key = payload_key(payload)
    cached = store.get(key)
    if cached is None:
        cached = _derive(payload)
        store.set(key, cached)
    else:
        logger.debug("chart view cache hit key=%s", key[:12])

    view = copy.deepcopy(cached)
    view["dasha"] = dasha_timeline(_field(payload, "dasha"), now=now)
    return view
