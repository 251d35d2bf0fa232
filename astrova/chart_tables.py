"""Static lookup tables shared by the chart derivation modules."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

SIGN_NAMES = (
    "Aries", "Taurus", "Gemini", "Cancer", "Leo", "Virgo",
    "Libra", "Scorpio", "Sagittarius", "Capricorn", "Aquarius", "Pisces",
)

SIGN_NAMES_SANSKRIT = (
    "Mesha", "Vrishabha", "Mithuna", "Karka", "Simha", "Kanya",
    "Tula", "Vrishchika", "Dhanu", "Makara", "Kumbha", "Meena",
)

CLASSICAL_PLANETS = ("Sun", "Moon", "Mars", "Mercury", "Jupiter", "Venus", "Saturn")
LUNAR_NODES = ("Rahu", "Ketu")
SHADOW_POINTS = ("Mandi", "Gulika")

# Minimum Shad Bala (rupas) a planet needs to count as sufficiently strong.
REQUIRED_RUPAS: Mapping[str, float] = MappingProxyType({
    "Sun": 5.0,
    "Moon": 6.0,
    "Mars": 5.0,
    "Mercury": 7.0,
    "Jupiter": 6.5,
    "Venus": 5.5,
    "Saturn": 5.0,
})
DEFAULT_REQUIRED_RUPAS = 5.0

BHAVA_MAX_RUPAS = 4.5

STRONG_THRESHOLD_PCT = 120.0
MEDIUM_THRESHOLD_PCT = 90.0

# Chart glyph abbreviation and colour per body.
BODY_GLYPHS: Mapping[str, tuple[str, str]] = MappingProxyType({
    "Sun": ("Su", "#FF8C00"),
    "Moon": ("Mo", "#C0C0C0"),
    "Mars": ("Ma", "#DC143C"),
    "Mercury": ("Me", "#32CD32"),
    "Jupiter": ("Ju", "#FFD700"),
    "Venus": ("Ve", "#FF69B4"),
    "Saturn": ("Sa", "#4169E1"),
    "Rahu": ("Ra", "#708090"),
    "Ketu": ("Ke", "#8B4513"),
    "Asc": ("Asc", "#FF1493"),
    "Uranus": ("Ur", "#00CED1"),
    "Neptune": ("Ne", "#1E90FF"),
    "Pluto": ("Pl", "#9932CC"),
    "Mandi": ("Mn", "#696969"),
    "Gulika": ("Gk", "#556B2F"),
    "Dhuma": ("Dh", "#CD853F"),
    "Vyatipata": ("Vy", "#B22222"),
    "Parivesha": ("Pv", "#DAA520"),
    "Indrachapa": ("Ic", "#6B8E23"),
    "Upaketu": ("Uk", "#A0522D"),
})

PLANET_PROFILES: Mapping[str, Mapping[str, Any]] = MappingProxyType({
    "Sun": {
        "icon": "☉", "label": "Self", "color": "#fbbf24",
        "description": "Identity, purpose, leadership, vitality, father, authority",
        "keywords": ("Soul", "Ego", "Power", "Government", "Father"),
    },
    "Moon": {
        "icon": "☽", "label": "Mind", "color": "#e2e8f0",
        "description": "Emotions, mother, comfort, intuition, memory, public",
        "keywords": ("Mind", "Mother", "Emotions", "Public", "Nurturing"),
    },
    "Mars": {
        "icon": "♂", "label": "Drive", "color": "#f87171",
        "description": "Courage, action, energy, siblings, competition, property",
        "keywords": ("Energy", "Courage", "Brothers", "Land", "Surgery"),
    },
    "Mercury": {
        "icon": "☿", "label": "Intellect", "color": "#4ade80",
        "description": "Communication, learning, trade, writing, calculation",
        "keywords": ("Speech", "Logic", "Trade", "Education", "Friends"),
    },
    "Jupiter": {
        "icon": "♃", "label": "Growth", "color": "#fde047",
        "description": "Wisdom, expansion, luck, teachers, children, dharma",
        "keywords": ("Wisdom", "Fortune", "Guru", "Children", "Dharma"),
    },
    "Venus": {
        "icon": "♀", "label": "Love", "color": "#f9a8d4",
        "description": "Relationships, beauty, art, luxury, spouse, pleasure",
        "keywords": ("Love", "Beauty", "Marriage", "Art", "Luxury"),
    },
    "Saturn": {
        "icon": "♄", "label": "Discipline", "color": "#93c5fd",
        "description": "Structure, karma, delays, service, longevity, renunciation",
        "keywords": ("Karma", "Discipline", "Service", "Delays", "Longevity"),
    },
    "Rahu": {
        "icon": "☊", "label": "Obsession", "color": "#c084fc",
        "description": "Desires, illusions, foreign, unconventional, amplification",
        "keywords": ("Desire", "Illusion", "Foreign", "Obsession", "Amplify"),
    },
    "Ketu": {
        "icon": "☋", "label": "Liberation", "color": "#fb923c",
        "description": "Spirituality, detachment, past karma, moksha, intuition",
        "keywords": ("Moksha", "Detachment", "Past Life", "Intuition", "Spiritual"),
    },
    "Mandi": {
        "icon": "Mn", "label": "Obstacles", "color": "#94a3b8",
        "description": "Son of Saturn, obstacles, delays, suffering, karmic debt",
        "keywords": ("Obstacles", "Delays", "Suffering", "Karma", "Restriction"),
    },
    "Gulika": {
        "icon": "Gk", "label": "Poison", "color": "#64748b",
        "description": "Son of Saturn, poison, death-like experiences, transformation",
        "keywords": ("Poison", "Death", "Transform", "Hidden", "Intense"),
    },
})

HOUSE_PROFILES: Mapping[int, Mapping[str, Any]] = MappingProxyType({
    1: {"label": "Ascendant", "short_label": "Self", "color": "#f87171",
        "description": "Identity, body, personality, health, new beginnings",
        "significator": "Sun", "category": "Kendra"},
    2: {"label": "Wealth", "short_label": "Wealth", "color": "#fbbf24",
        "description": "Money, family, speech, food, early education",
        "significator": "Jupiter", "category": "Maraka"},
    3: {"label": "Siblings", "short_label": "Effort", "color": "#fde047",
        "description": "Courage, siblings, short travel, communication, skills",
        "significator": "Mars", "category": "Upachaya"},
    4: {"label": "Home", "short_label": "Home", "color": "#4ade80",
        "description": "Mother, property, vehicles, comfort, education, happiness",
        "significator": "Moon", "category": "Kendra"},
    5: {"label": "Children", "short_label": "Create", "color": "#22d3ee",
        "description": "Intelligence, children, romance, speculation, past merit",
        "significator": "Jupiter", "category": "Trikona"},
    6: {"label": "Enemies", "short_label": "Health", "color": "#06b6d4",
        "description": "Health, enemies, debts, service, pets, daily work",
        "significator": "Mars", "category": "Dusthana"},
    7: {"label": "Partnership", "short_label": "Partner", "color": "#93c5fd",
        "description": "Marriage, business partners, public, foreign travel",
        "significator": "Venus", "category": "Kendra"},
    8: {"label": "Transformation", "short_label": "Change", "color": "#c084fc",
        "description": "Death, inheritance, secrets, research, transformation",
        "significator": "Saturn", "category": "Dusthana"},
    9: {"label": "Fortune", "short_label": "Dharma", "color": "#e9d5ff",
        "description": "Luck, father, guru, higher learning, long travel, dharma",
        "significator": "Jupiter", "category": "Trikona"},
    10: {"label": "Career", "short_label": "Career", "color": "#f9a8d4",
         "description": "Profession, status, authority, karma, achievements",
         "significator": "Saturn", "category": "Kendra"},
    11: {"label": "Gains", "short_label": "Gains", "color": "#fda4af",
         "description": "Income, gains, friends, elder siblings, aspirations",
         "significator": "Jupiter", "category": "Upachaya"},
    12: {"label": "Liberation", "short_label": "Moksha", "color": "#a5b4fc",
         "description": "Losses, expenses, foreign lands, spirituality, moksha",
         "significator": "Saturn", "category": "Dusthana"},
})

# Composite life areas: each averages its planets' and its houses' ratios.
LIFE_AREAS: tuple[Mapping[str, Any], ...] = (
    {"key": "identity", "label": "Identity", "planets": ("Sun",), "houses": (1,), "color": "#f97316"},
    {"key": "emotions", "label": "Emotions", "planets": ("Moon",), "houses": (4,), "color": "#a3a3a3"},
    {"key": "action", "label": "Action", "planets": ("Mars",), "houses": (3, 6), "color": "#ef4444"},
    {"key": "intellect", "label": "Intellect", "planets": ("Mercury",), "houses": (3, 5), "color": "#22c55e"},
    {"key": "growth", "label": "Growth", "planets": ("Jupiter",), "houses": (9, 5), "color": "#eab308"},
    {"key": "relationships", "label": "Relationships", "planets": ("Venus",), "houses": (7,), "color": "#ec4899"},
    {"key": "career", "label": "Career", "planets": ("Saturn", "Sun"), "houses": (10,), "color": "#3b82f6"},
    {"key": "wealth", "label": "Wealth", "planets": ("Jupiter", "Venus"), "houses": (2, 11), "color": "#14b8a6"},
)
