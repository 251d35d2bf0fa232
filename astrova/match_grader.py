"""Colour bands and compatibility levels for kundali match scores."""

from __future__ import annotations

import math
from typing import Any

# (minimum percentage, colour), highest band first.
SCORE_COLORS = (
    (75.0, "#10b981"),
    (50.0, "#f59e0b"),
    (0.0, "#ef4444"),
)

COMPATIBILITY_LEVELS = (
    (80.0, "Excellent Match", "Highly compatible with strong astrological harmony"),
    (60.0, "Good Match", "Compatible with good potential for harmony"),
    (40.0, "Moderate Match", "Some compatibility, may require effort and understanding"),
    (0.0, "Challenging Match", "Lower compatibility, requires conscious effort and compromise"),
)


def score_percentage(score: float, max_score: float) -> float:
    """``score / max_score * 100``; a non-positive or unusable maximum gives 0."""
    if not max_score or max_score <= 0:
        return 0.0
    percentage = score * 100.0 / max_score
    return percentage if math.isfinite(percentage) else 0.0


def score_color(score: float, max_score: float) -> str:
    percentage = score_percentage(score, max_score)
    for minimum, color in SCORE_COLORS:
        if percentage >= minimum:
            return color
    return SCORE_COLORS[-1][1]


def compatibility_level(score: float, max_score: float) -> dict[str, str]:
    percentage = score_percentage(score, max_score)
    for minimum, label, description in COMPATIBILITY_LEVELS:
        if percentage >= minimum:
            return {"label": label, "description": description}
    _minimum, label, description = COMPATIBILITY_LEVELS[-1]
    return {"label": label, "description": description}


def match_grade(score: float, max_score: float) -> dict[str, Any]:
    """Percentage, colour band and compatibility level for one match score."""
    percentage = score_percentage(score, max_score)
    return {
        "score": score,
        "max_score": max_score,
        "percentage": percentage,
        "rounded_percentage": round(percentage),
        "color": score_color(score, max_score),
        **compatibility_level(score, max_score),
    }
