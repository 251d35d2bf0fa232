"""Vimshottari Mahadasha status table."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any

logger = logging.getLogger(__name__)

STATUS_ACTIVE = "Active"
STATUS_PAST = "Past"
STATUS_FUTURE = "Future"


def parse_moment(value: Any) -> datetime | None:
    """ISO datetime or date string -> aware UTC datetime; naive values are taken as UTC."""
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _ymd(period: Mapping[str, Any], prefix: str) -> datetime | None:
    parts = [period.get(f"{prefix}_{unit}") for unit in ("year", "month", "day")]
    if not all(isinstance(p, int) and not isinstance(p, bool) and p for p in parts):
        return None
    try:
        return datetime.combine(date(*parts), datetime.min.time(), tzinfo=timezone.utc)
    except ValueError:
        return None


def period_start(period: Mapping[str, Any]) -> datetime | None:
    # An unparseable start_datetime does not fall back to the y/m/d fields.
    if period.get("start_datetime") is not None:
        return parse_moment(period.get("start_datetime"))
    return _ymd(period, "start")


def period_end(period: Mapping[str, Any]) -> datetime | None:
    for field in ("end_datetime", "end_date"):
        if period.get(field) is not None:
            return parse_moment(period.get(field))
    return _ymd(period, "end")


def is_active(period: Mapping[str, Any], now: datetime) -> bool:
    start = period_start(period)
    if start is None:
        return False
    end = period_end(period)
    return start <= now and (end is None or now <= end)


def active_index(periods: list[Mapping[str, Any]], now: datetime) -> int:
    for index, period in enumerate(periods):
        if is_active(period, now):
            return index
    return -1


def _status(index: int, active: int) -> str:
    if index == active:
        return STATUS_ACTIVE
    # With no active period every row reads as upcoming.
    if index < active:
        return STATUS_PAST
    return STATUS_FUTURE


def dasha_timeline(dasha: Mapping[str, Any] | None, now: datetime | None = None) -> dict[str, Any]:
    """Label each Mahadasha relative to ``now`` and name the running one.

    ``current`` prefers the period found active by date, then the API's own
    ``current_dasha`` field, then ``"Unknown"``.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    if not isinstance(dasha, Mapping):
        return {"current": "Unknown", "periods": []}

    raw_periods = dasha.get("periods")
    periods = [p for p in raw_periods if isinstance(p, Mapping)] if isinstance(raw_periods, list) else []
    active = active_index(periods, now)
    if active < 0 and periods:
        logger.debug("No Mahadasha period spans %s", now.isoformat())

    rows = []
    for index, period in enumerate(periods):
        rows.append({
            "planet": period.get("planet"),
            "start": period.get("start_datetime") or period.get("start_date"),
            "end": period.get("end_datetime") or period.get("end_date"),
            "years": period.get("years"),
            "status": _status(index, active),
        })

    if active >= 0:
        current = periods[active].get("planet") or "Unknown"
    else:
        current = dasha.get("current_dasha") or "Unknown"
    return {"current": current, "periods": rows}
