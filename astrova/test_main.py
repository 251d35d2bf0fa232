from __future__ import annotations

import unittest
from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

from astrova import main
from astrova.api_client import CalculationApiError
from astrova.test_chart_view import sample_kundali


class TestServiceEndpoints(unittest.TestCase):
    def setUp(self) -> None:
        self.client = TestClient(main.app)
        main.cache.clear()

    def test_health(self) -> None:
        res = self.client.get("/health")
        self.assertEqual(res.status_code, 200)
        body = res.json()
        self.assertEqual(body["status"], "ok")
        self.assertEqual(body["cache_items"], 0)
        self.assertIn("api_url", body)

    def test_defaults(self) -> None:
        body = self.client.get("/defaults").json()
        self.assertEqual(body["request"]["latitude"], 19.076)
        self.assertEqual(body["ayanamshas"], ["lahiri", "raman", "krishnamurti"])
        self.assertEqual(body["min_year"], 1900)

    def test_derive(self) -> None:
        res = self.client.post("/derive", json=sample_kundali())
        self.assertEqual(res.status_code, 200)
        view = res.json()
        self.assertEqual(view["planet_strengths"][0]["tier"], "Strong")
        self.assertEqual(len(view["rasi"]["houses"]), 12)
        self.assertEqual(self.client.get("/health").json()["cache_items"], 1)

    def test_derive_rejects_non_object(self) -> None:
        res = self.client.post("/derive", json=[1, 2, 3])
        self.assertEqual(res.status_code, 422)

    def test_aspects_filtering(self) -> None:
        planets = {"Sun": {"longitude": 0}, "Moon": {"longitude": 120}, "Mars": {"longitude": 90}}
        res = self.client.post("/aspects", json={"planets": planets, "type": "Trine"})
        self.assertEqual(res.status_code, 200)
        body = res.json()
        self.assertEqual(body["total"], 2)
        self.assertEqual(body["count"], 1)
        self.assertEqual(body["aspects"][0]["type"], "Trine")

    def test_aspects_by_nature(self) -> None:
        planets = {"Sun": {"longitude": 0}, "Moon": {"longitude": 120}, "Mars": {"longitude": 90}}
        body = self.client.post("/aspects", json={"planets": planets, "nature": "tense"}).json()
        self.assertEqual([a["type"] for a in body["aspects"]], ["Square"])

    def test_kundali_returns_payload_and_view(self) -> None:
        payload = sample_kundali()
        with patch("astrova.main.fetch_kundali", new=AsyncMock(return_value=payload)) as fetch:
            res = self.client.post("/kundali", json={"year": 1995, "latitude": 28.6, "longitude": 77.2})
        self.assertEqual(res.status_code, 200)
        sent = fetch.await_args.args[0]
        self.assertEqual(sent.year, 1995)
        self.assertEqual(sent.ayanamsha, "lahiri")
        body = res.json()
        self.assertEqual(body["kundali"]["lagna"], payload["lagna"])
        self.assertEqual(body["view"]["dasha"]["periods"][0]["planet"], "Saturn")

    def test_kundali_validation_error(self) -> None:
        res = self.client.post("/kundali", json={"year": 1800})
        self.assertEqual(res.status_code, 422)

    def test_kundali_upstream_error(self) -> None:
        error = CalculationApiError("Network error. Please check your connection.", 502, "NETWORK_ERROR")
        with patch("astrova.main.fetch_kundali", new=AsyncMock(side_effect=error)):
            res = self.client.post("/kundali", json={})
        self.assertEqual(res.status_code, 502)
        self.assertEqual(res.json()["detail"], "Network error. Please check your connection.")

    def test_bala_peaks(self) -> None:
        results = [
            {"datetime": "2024-01-01T06:00", "shad_bala": {"total": 40.0}, "bhava_bala": {"total": 50.0}},
            {"datetime": "2024-01-01T07:00", "shad_bala": {"total": 45.0}, "bhava_bala": {"total": 30.0}},
        ]
        res = self.client.post("/bala/peaks", json={"results": results, "count": 1})
        self.assertEqual(res.status_code, 200)
        body = res.json()
        self.assertEqual(body["total_calculations"], 2)
        self.assertEqual(body["max_shad_bala"]["datetime"], "2024-01-01T07:00")
        self.assertEqual(body["max_bhava_bala"]["datetime"], "2024-01-01T06:00")
        self.assertEqual([r["datetime"] for r in body["top_combined"]], ["2024-01-01T06:00"])

    def test_bala_peaks_rejects_negative_count(self) -> None:
        res = self.client.post("/bala/peaks", json={"results": [], "count": -1})
        self.assertEqual(res.status_code, 422)

    def test_match_grade(self) -> None:
        body = self.client.get("/match/grade", params={"score": 27}).json()
        self.assertEqual(body["percentage"], 75.0)
        self.assertEqual(body["color"], "#10b981")
        self.assertEqual(body["label"], "Good Match")


if __name__ == "__main__":
    unittest.main()
