#!/usr/bin/env python3
"""Astrova chart service (FastAPI).

- Chart calculation: remote kundali API
- Derived views: houses, aspects, strengths, radar geometry, dasha status
"""

import logging
from typing import Any, Optional

from fastapi import Body, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field

from astrova import config
from astrova.api_client import AYANAMSHAS, MIN_YEAR, CalculationApiError, KundaliRequest, fetch_kundali, max_year
from astrova.aspect_engine import collect_bodies, compute_aspects, filter_aspects
from astrova.cache_manager import cache
from astrova.chart_view import build_chart_view
from astrova.match_grader import match_grade
from astrova.strength_aggregator import DEFAULT_PEAK_COUNT, bala_peaks

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s - %(message)s",
)

logger = logging.getLogger("astrova")

app = FastAPI(title="Astrova Chart Service")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class AspectQuery(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    planets: dict[str, Any] = Field(default_factory=dict, description="Planet records keyed by name")
    upagrahas: Optional[dict[str, Any]] = Field(None, description="Upagraha records keyed by name")
    planet: str = Field("all", description="Only aspects involving this body")
    aspect_type: str = Field("all", alias="type", description="Aspect type filter")
    nature: str = Field("all", description="harmonious | tense | neutral | all")


class BalaSweep(BaseModel):
    results: list[dict[str, Any]] = Field(default_factory=list, description="Time-sweep rows with shad_bala and bhava_bala totals")
    count: int = Field(DEFAULT_PEAK_COUNT, ge=0, le=1000)


# ------------------------------------------------------------------------------
# API endpoints: Health Check
# ------------------------------------------------------------------------------
@app.get("/health")
def health():
    return {
        "status": "ok",
        "api_url": config.ASTROVA_API_URL,
        "cache_items": len(cache),
        "cache_max_items": cache.max_items,
        "cache_ttl_sec": config.CACHE_TTL_SEC,
    }


@app.get("/defaults")
def get_defaults():
    return {
        "request": KundaliRequest().model_dump(),
        "ayanamshas": list(AYANAMSHAS),
        "min_year": MIN_YEAR,
        "max_year": max_year(),
    }


# ------------------------------------------------------------------------------
# API endpoints: Derived views
# ------------------------------------------------------------------------------
@app.post("/derive")
def derive(payload: Any = Body(...)):
    if not isinstance(payload, dict):
        raise HTTPException(status_code=422, detail="Request body must be a kundali JSON object.")
    return build_chart_view(payload)


@app.post("/aspects")
def aspects(query: AspectQuery):
    found = compute_aspects(collect_bodies(query.planets, query.upagrahas))
    filtered = filter_aspects(found, planet=query.planet, aspect_type=query.aspect_type, nature=query.nature)
    return {"total": len(found), "count": len(filtered), "aspects": filtered}


@app.post("/kundali")
async def kundali(request: KundaliRequest):
    try:
        payload = await fetch_kundali(request)
    except CalculationApiError as e:
        logger.warning("kundali fetch failed code=%s status=%s", e.code, e.status_code)
        raise HTTPException(status_code=e.status_code, detail=e.message) from e
    return {"kundali": payload, "view": build_chart_view(payload)}


@app.post("/bala/peaks")
def bala_sweep_peaks(sweep: BalaSweep):
    return bala_peaks(sweep.results, sweep.count)


@app.get("/match/grade")
def grade_match(score: float, max_score: float = 36.0):
    return match_grade(score, max_score)
