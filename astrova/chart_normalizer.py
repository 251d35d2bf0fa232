"""Canonical 12-slot chart grids from the shapes the calculation API emits.

The API has shipped three encodings of the same sign-indexed chart over time:

- a list of up to 12 lists of body names,
- a mapping keyed by the sign index as a digit string (``"0"`` .. ``"11"``),
- a mapping keyed by sign name (English, lowercased English or Sanskrit).

``normalize_chart`` folds all of them into ``list[list[str]]`` with exactly 12
slots. It never raises; anything it cannot read becomes empty slots.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from astrova.chart_tables import SIGN_NAMES, SIGN_NAMES_SANSKRIT

logger = logging.getLogger(__name__)

SLOT_COUNT = 12


def _empty_grid() -> list[list[str]]:
    return [[] for _ in range(SLOT_COUNT)]


def _dedupe(names: Any) -> list[str]:
    if not isinstance(names, (list, tuple)):
        return []
    return list(dict.fromkeys(n for n in names if isinstance(n, str)))


def _is_list_of_string_lists(raw: Any) -> bool:
    return isinstance(raw, (list, tuple)) and all(
        isinstance(row, (list, tuple)) and all(isinstance(n, str) for n in row)
        for row in raw
    )


def _is_index_key(key: Any) -> bool:
    if isinstance(key, bool):
        return False
    if isinstance(key, int):
        return key >= 0
    return isinstance(key, str) and key.isascii() and key.isdigit()


def _from_numeric_keys(raw: Mapping[Any, Any]) -> list[list[str]]:
    # JSON keys arrive as strings; in-process payloads may still use ints.
    return [_dedupe(raw.get(str(i), raw.get(i))) for i in range(SLOT_COUNT)]


def _from_sign_names(raw: Mapping[Any, Any], signs_sanskrit: Sequence[Any]) -> list[list[str]]:
    grid = _empty_grid()
    for i, english in enumerate(SIGN_NAMES):
        localized = signs_sanskrit[i] if i < len(signs_sanskrit) else None
        candidates = [english, english.lower()]
        if localized is not None:
            candidates += [localized, str(localized)]
        for key in candidates:
            try:
                if key in raw:
                    grid[i] = _dedupe(raw[key])
                    break
            except TypeError:
                # Unhashable localized names cannot be mapping keys.
                continue
    return grid


def normalize_chart(raw: Any, signs_sanskrit: Sequence[Any] = SIGN_NAMES_SANSKRIT) -> list[list[str]]:
    """Return the 12-slot sign-indexed grid for any supported chart encoding."""
    if _is_list_of_string_lists(raw):
        rows = list(raw)[:SLOT_COUNT]
        grid = [_dedupe(row) for row in rows]
        grid.extend([] for _ in range(SLOT_COUNT - len(grid)))
        return grid

    if isinstance(raw, Mapping):
        if any(_is_index_key(k) for k in raw):
            return _from_numeric_keys(raw)
        return _from_sign_names(raw, signs_sanskrit)

    if raw is not None:
        logger.debug("Unrecognized chart shape %s; using empty grid", type(raw).__name__)
    return _empty_grid()


def resolve_sign_names(payload: Mapping[str, Any] | None) -> list[str]:
    """Localized sign names from the payload, falling back to the Sanskrit defaults."""
    names = payload.get("signs_sanskrit") if isinstance(payload, Mapping) else None
    if isinstance(names, (list, tuple)) and len(names) >= SLOT_COUNT:
        return [str(n) for n in names]
    return list(SIGN_NAMES_SANSKRIT)


def chart_for(payload: Mapping[str, Any] | None, chart_type: str = "rasi") -> list[list[str]]:
    """Normalized grid for ``"rasi"`` or ``"navamsa"`` straight from a kundali response."""
    if not isinstance(payload, Mapping):
        return _empty_grid()
    key = "navamsa_chart" if chart_type == "navamsa" else "rasi_chart"
    return normalize_chart(payload.get(key), resolve_sign_names(payload))
