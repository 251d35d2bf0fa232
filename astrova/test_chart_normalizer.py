from __future__ import annotations

import unittest

from astrova.chart_normalizer import chart_for, normalize_chart, resolve_sign_names
from astrova.chart_tables import SIGN_NAMES_SANSKRIT


class TestNormalizeChart(unittest.TestCase):
    def test_list_of_lists_is_padded_to_twelve_slots(self) -> None:
        grid = normalize_chart([["Sun", "Moon"], ["Mars"]])
        self.assertEqual(len(grid), 12)
        self.assertEqual(grid[0], ["Sun", "Moon"])
        self.assertEqual(grid[1], ["Mars"])
        self.assertTrue(all(slot == [] for slot in grid[2:]))

    def test_list_longer_than_twelve_is_truncated(self) -> None:
        raw = [[f"B{i}"] for i in range(14)]
        grid = normalize_chart(raw)
        self.assertEqual(len(grid), 12)
        self.assertEqual(grid[11], ["B11"])

    def test_duplicates_removed_keeping_first_seen_order(self) -> None:
        grid = normalize_chart([["Moon", "Sun", "Moon", "Sun"]])
        self.assertEqual(grid[0], ["Moon", "Sun"])

    def test_numeric_string_keys(self) -> None:
        grid = normalize_chart({"0": ["Sun"], "11": ["Ketu"], "5": ["Mars", "Mars"]})
        self.assertEqual(grid[0], ["Sun"])
        self.assertEqual(grid[5], ["Mars"])
        self.assertEqual(grid[11], ["Ketu"])
        self.assertEqual(grid[3], [])

    def test_integer_keys(self) -> None:
        grid = normalize_chart({0: ["Sun"], 7: ["Saturn"]})
        self.assertEqual(grid[0], ["Sun"])
        self.assertEqual(grid[7], ["Saturn"])

    def test_numeric_key_round_trip(self) -> None:
        original = [["Sun"], [], ["Moon", "Mars"], [], [], ["Venus"], [], [], [], ["Rahu"], [], ["Ketu"]]
        keyed = {str(i): slot for i, slot in enumerate(original)}
        self.assertEqual(normalize_chart(keyed), original)

    def test_english_sign_names(self) -> None:
        grid = normalize_chart({"Aries": ["Sun", "Moon"], "Taurus": []})
        self.assertEqual(grid[0], ["Sun", "Moon"])
        self.assertEqual(grid[1], [])
        self.assertEqual(len(grid), 12)

    def test_lowercase_and_sanskrit_sign_names(self) -> None:
        grid = normalize_chart({"pisces": ["Jupiter"], "Simha": ["Sun"]})
        self.assertEqual(grid[11], ["Jupiter"])
        self.assertEqual(grid[4], ["Sun"])

    def test_custom_localized_sign_names(self) -> None:
        localized = [f"S{i}" for i in range(12)]
        grid = normalize_chart({"S3": ["Moon"]}, localized)
        self.assertEqual(grid[3], ["Moon"])

    def test_english_name_takes_precedence_over_localized(self) -> None:
        grid = normalize_chart({"Aries": ["Sun"], "Mesha": ["Moon"]})
        self.assertEqual(grid[0], ["Sun"])

    def test_unreadable_inputs_become_empty_grid(self) -> None:
        for raw in (None, "chart", 42, [["Sun", 3]], {"Nowhere": ["Sun"]}):
            with self.subTest(raw=raw):
                self.assertEqual(normalize_chart(raw), [[] for _ in range(12)])

    def test_non_list_slot_values_are_empty(self) -> None:
        grid = normalize_chart({"0": "Sun", "1": ["Moon", 5]})
        self.assertEqual(grid[0], [])
        self.assertEqual(grid[1], ["Moon"])


class TestPayloadHelpers(unittest.TestCase):
    def test_resolve_sign_names_falls_back_when_short(self) -> None:
        self.assertEqual(resolve_sign_names({"signs_sanskrit": ["A", "B"]}), list(SIGN_NAMES_SANSKRIT))
        self.assertEqual(resolve_sign_names(None), list(SIGN_NAMES_SANSKRIT))

    def test_chart_for_picks_navamsa(self) -> None:
        payload = {"rasi_chart": [["Sun"]], "navamsa_chart": {"1": ["Sun"]}}
        self.assertEqual(chart_for(payload, "rasi")[0], ["Sun"])
        self.assertEqual(chart_for(payload, "navamsa")[1], ["Sun"])
        self.assertEqual(chart_for(payload, "navamsa")[0], [])

    def test_chart_for_missing_chart(self) -> None:
        self.assertEqual(chart_for({}, "navamsa"), [[] for _ in range(12)])


if __name__ == "__main__":
    unittest.main()
