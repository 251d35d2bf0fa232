from __future__ import annotations

import math
import unittest

from astrova.radar_projector import (
    display_label,
    grid_lines,
    house_radar_points,
    life_area_radar_points,
    planet_radar_points,
    polygon_path,
    project,
    stretched_plot_ratios,
    web_rings,
)
from astrova.strength_aggregator import house_strengths, life_area_scores, planet_strengths


class TestProjectGeometry(unittest.TestCase):
    def test_empty_input(self) -> None:
        self.assertEqual(project([]), [])
        self.assertEqual(web_rings(0), [])
        self.assertEqual(grid_lines(0), [])

    def test_first_point_sits_at_top(self) -> None:
        projected = project([{"value": 5, "max_value": 5}, {"value": 5, "max_value": 5}])
        top = projected[0]
        self.assertAlmostEqual(top["angle"], -math.pi / 2)
        self.assertAlmostEqual(top["x"], 120.0)
        self.assertAlmostEqual(top["y"], 120.0 - 240 * 0.32)
        self.assertAlmostEqual(top["label_y"], 120.0 - (240 * 0.32 * 1.3 + 22))
        self.assertAlmostEqual(projected[1]["angle"], math.pi / 2)

    def test_direct_mode_caps_at_1_3(self) -> None:
        point = project([{"value": 20, "max_value": 5}])[0]
        self.assertEqual(point["normalized_value"], 1.3)
        self.assertAlmostEqual(point["strength_ratio"], 4.0)
        self.assertAlmostEqual(point["display_percent"], 400.0)
        self.assertEqual(point["percent_label"], "400%")

    def test_non_positive_max_value_plots_at_center(self) -> None:
        point = project([{"value": 3, "max_value": 0}])[0]
        self.assertEqual(point["normalized_value"], 0.0)
        self.assertAlmostEqual(point["x"], 120.0)
        self.assertAlmostEqual(point["y"], 120.0)

    def test_plot_ratio_overrides_radius_not_label(self) -> None:
        point = project([{"value": 1, "max_value": 4, "plot_ratio": 0.9, "display_percent": 25.0}])[0]
        self.assertEqual(point["normalized_value"], 0.9)
        self.assertEqual(point["percent_label"], "25%")

    def test_custom_size(self) -> None:
        point = project([{"value": 1, "max_value": 1}], size=100)[0]
        self.assertAlmostEqual(point["y"], 50 - 32)

    def test_polygon_path(self) -> None:
        path = polygon_path([{"x": 1.5, "y": 2}, {"x": 3, "y": 4}])
        self.assertEqual(path, "1.5,2 3,4")

    def test_display_label_rounds(self) -> None:
        self.assertEqual(display_label(66.666), "67%")
        self.assertEqual(display_label(0), "0%")


class TestGuides(unittest.TestCase):
    def test_web_rings(self) -> None:
        rings = web_rings(7)
        self.assertEqual(len(rings), 5)
        self.assertAlmostEqual(rings[-1]["t"], 1.3)
        self.assertEqual(len(rings[0]["points"].split(" ")), 7)
        self.assertFalse(any(r["is_main"] for r in rings))

    def test_ring_on_full_strength_is_main(self) -> None:
        rings = web_rings(8, levels=13)
        self.assertEqual([i for i, r in enumerate(rings) if r["is_main"]], [9])

    def test_grid_lines_reach_web_radius(self) -> None:
        lines = grid_lines(4)
        self.assertEqual(len(lines), 4)
        self.assertAlmostEqual(lines[0]["y2"], 120 - 240 * 0.32 * 1.3)
        self.assertTrue(all(line["x1"] == 120 and line["y1"] == 120 for line in lines))


class TestStretchedMode(unittest.TestCase):
    def test_identical_ratios_map_to_floor(self) -> None:
        rows = house_strengths({h: {"total_rupas": 3.0} for h in range(1, 13)})
        points = house_radar_points(rows)
        self.assertEqual(len(points), 12)
        self.assertTrue(all(p["plot_ratio"] == 0.5 for p in points))
        projected = project(points)
        for p in projected:
            self.assertFalse(math.isnan(p["x"]) or math.isnan(p["y"]))
            self.assertEqual(p["percent_label"], "67%")

    def test_range_spreads_over_band(self) -> None:
        self.assertEqual(stretched_plot_ratios([]), [])
        low, mid, high = stretched_plot_ratios([0.5, 0.75, 1.0])
        self.assertAlmostEqual(low, 0.5)
        self.assertAlmostEqual(mid, 0.95)
        self.assertAlmostEqual(high, 1.4)

    def test_top_of_band_is_capped_when_projected(self) -> None:
        rows = house_strengths({1: {"total_rupas": 1.0}, 2: {"total_rupas": 4.5}})
        projected = project(house_radar_points(rows))
        self.assertEqual(max(p["normalized_value"] for p in projected), 1.3)
        self.assertEqual(projected[1]["percent_label"], "100%")
        self.assertEqual(projected[0]["short_label"], "Self")


class TestPointBuilders(unittest.TestCase):
    def test_planet_points(self) -> None:
        points = planet_radar_points(planet_strengths({"Sun": {"total_rupas": 5}}))
        self.assertEqual(len(points), 7)
        sun = points[0]
        self.assertEqual(sun["label"], "☉ Sun")
        self.assertEqual(sun["short_label"], "Self")
        self.assertEqual(sun["max_value"], 5.0)

    def test_life_area_points(self) -> None:
        planets = planet_strengths({})
        scores = life_area_scores(planets, [])
        points = life_area_radar_points(scores)
        self.assertEqual(len(points), len(scores))
        self.assertEqual(points[0]["max_value"], 1)
        self.assertEqual(points[0]["description"], "Combined strength for identity")


if __name__ == "__main__":
    unittest.main()
