from __future__ import annotations

import unittest
from datetime import datetime, timezone
from unittest.mock import patch

from astrova.cache_manager import DerivationCache
from astrova.chart_view import build_chart_view


def sample_kundali() -> dict:
    rasi = [[] for _ in range(12)]
    rasi[0] = ["Sun", "Mercury"]
    rasi[4] = ["Moon"]
    rasi[9] = ["Saturn", "Rahu"]
    return {
        "lagna": {"sign_index": 0, "navamsa_sign_index": 6},
        "rasi_chart": rasi,
        "navamsa_chart": {"6": ["Sun"], "0": ["Moon"]},
        "planets": {
            "Sun": {"longitude": 10.0, "exalted": True},
            "Moon": {"longitude": 130.0},
            "Mercury": {"longitude": 25.0, "retrograde": True},
            "Saturn": {"longitude": 280.0},
            "Rahu": {"longitude": 290.0},
        },
        "upagrahas": {"Mandi": {"longitude": 100.0}},
        "shad_bala": {"Sun": {"total_rupas": 6.5}, "Saturn": {"total_shashtiamsas": 270}},
        "bhava_bala": {str(h): {"total_rupas": 3.0} for h in range(1, 13)},
        "dasha": {
            "current_dasha": "Saturn",
            "periods": [{"planet": "Saturn", "start_datetime": "2015-01-01T00:00:00Z", "end_datetime": "2034-01-01T00:00:00Z", "years": 19}],
        },
    }


NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


class TestBuildChartView(unittest.TestCase):
    def setUp(self) -> None:
        self.cache = DerivationCache(max_items=8)

    def test_view_sections(self) -> None:
        view = build_chart_view(sample_kundali(), cache=self.cache, now=NOW)
        self.assertEqual(
            set(view),
            {"rasi", "navamsa", "aspects", "aspect_summary", "planet_strengths", "house_strengths",
             "life_areas", "insights", "radar", "dasha"},
        )
        self.assertEqual(view["rasi"]["houses"][0]["sign_name"], "Mesha")
        self.assertEqual([b["name"] for b in view["rasi"]["houses"][0]["bodies"]], ["Sun", "Mercury"])
        self.assertEqual(view["navamsa"]["lagna_sign_index"], 6)
        self.assertEqual(view["navamsa"]["houses"][0]["bodies"][0]["name"], "Sun")

    def test_aspects_include_upagrahas(self) -> None:
        view = build_chart_view(sample_kundali(), cache=self.cache, now=NOW)
        first = view["aspects"][0]
        self.assertEqual((first["planet1"], first["planet2"], first["type"]), ("Sun", "Moon", "Trine"))
        self.assertIn("Mandi", view["aspect_summary"]["planets"])
        self.assertEqual(view["aspect_summary"]["total"], len(view["aspects"]))

    def test_strength_sections(self) -> None:
        view = build_chart_view(sample_kundali(), cache=self.cache, now=NOW)
        sun, saturn = view["planet_strengths"][0], view["planet_strengths"][6]
        self.assertEqual(sun["tier"], "Strong")
        self.assertEqual(saturn["tier"], "Medium")
        self.assertEqual(len(view["house_strengths"]), 12)
        self.assertEqual(view["insights"]["strongest_planet"], "Sun")
        self.assertEqual(len(view["radar"]["planets"]), 7)
        self.assertTrue(all(p["plot_ratio"] == 0.5 for p in view["radar"]["houses"]))
        self.assertEqual(len(view["radar"]["life_areas"]), len(view["life_areas"]))
        self.assertEqual(view["dasha"]["current"], "Saturn")

    def test_partial_payload(self) -> None:
        view = build_chart_view({"rasi_chart": "garbage"}, cache=self.cache, now=NOW)
        self.assertEqual(len(view["rasi"]["houses"]), 12)
        self.assertEqual(view["aspects"], [])
        self.assertEqual(view["house_strengths"], [])
        self.assertEqual(view["radar"]["houses"], [])
        self.assertEqual(view["dasha"], {"current": "Unknown", "periods": []})

    def test_non_mapping_payload(self) -> None:
        view = build_chart_view(None, cache=self.cache, now=NOW)
        self.assertEqual(len(view["planet_strengths"]), 7)

    def test_cached_view_is_reused_and_copied(self) -> None:
        payload = sample_kundali()
        first = build_chart_view(payload, cache=self.cache, now=NOW)
        first["aspects"].clear()
        first["rasi"]["houses"][0]["bodies"].append({"name": "Intruder"})

        with patch("astrova.chart_view._derive") as derive:
            second = build_chart_view(payload, cache=self.cache, now=NOW)
        derive.assert_not_called()
        self.assertTrue(second["aspects"])
        self.assertEqual(len(second["rasi"]["houses"][0]["bodies"]), 2)
        self.assertEqual(self.cache.hits, 1)

    def test_dasha_recomputed_on_cache_hit(self) -> None:
        payload = sample_kundali()
        build_chart_view(payload, cache=self.cache, now=NOW)
        later = build_chart_view(payload, cache=self.cache, now=datetime(2040, 1, 1, tzinfo=timezone.utc))
        self.assertEqual(later["dasha"]["periods"][0]["status"], "Future")
        self.assertEqual(later["dasha"]["current"], "Saturn")


if __name__ == "__main__":
    unittest.main()
