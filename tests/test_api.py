from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path
from typing import Iterable

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest
from fastapi.testclient import TestClient


@pytest.fixture(scope="module")
def api_client() -> Iterable[TestClient]:
    from suntimes_api import app

    with TestClient(app) as client:
        yield client


def test_health_endpoint(api_client: TestClient) -> None:
    response = api_client.get("/health")
    assert response.status_code == 200
    payload = response.json()
    assert payload["ok"] is True
    assert payload["version"]


def test_sun_endpoint(api_client: TestClient) -> None:
    response = api_client.get(
        "/sun",
        params={"lat": 53.38, "lon": -1.48, "date": "2022-06-21", "elev_m": 100},
    )
    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["date_utc"] == "2022-06-21"
    assert payload["sunrise_utc"].startswith("2022-06-21T03:")
    assert payload["sunset_utc"].startswith("2022-06-21T20:")
    assert payload["sunrise_utc"].endswith("Z")
    assert payload["solar_noon_utc"].startswith("2022-06-21T12:")
    assert 16 * 3600 < payload["day_length_seconds"] < 18 * 3600
    assert payload["sunrise_local"] is None


def test_sun_endpoint_local_times(api_client: TestClient) -> None:
    response = api_client.get(
        "/sun",
        params={"lat": 53.38, "lon": -1.48, "date": "2022-06-21", "offset_hours": 1},
    )
    assert response.status_code == 200
    payload = response.json()
    sunrise_utc = datetime.fromisoformat(payload["sunrise_utc"].replace("Z", "+00:00"))
    sunrise_local = datetime.fromisoformat(payload["sunrise_local"])
    assert sunrise_local == sunrise_utc
    assert payload["sunrise_local"].endswith("+01:00")


def test_sun_endpoint_polar_night(api_client: TestClient) -> None:
    response = api_client.get("/sun", params={"lat": 80, "lon": 0, "date": "2022-12-21"})
    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "polar_night"
    assert payload["sunrise_utc"] is None
    assert payload["sunset_utc"] is None
    assert payload["day_length_seconds"] == 0


def test_validation_error(api_client: TestClient) -> None:
    response = api_client.get(
        "/sun",
        params={
            "lat": 95,  # invalid latitude
            "lon": 0,
            "date": "2025-10-21",
        },
    )
    assert response.status_code == 422
    payload = response.json()
    assert payload["code"] == "validation_error"
    assert payload["ok"] is False


def test_negative_elevation_is_rejected(api_client: TestClient) -> None:
    response = api_client.get(
        "/sun", params={"lat": 10, "lon": 0, "date": "2022-01-01", "elev_m": -5}
    )
    assert response.status_code == 422
    assert response.json()["code"] == "validation_error"


def test_infinite_elevation_is_rejected(api_client: TestClient) -> None:
    response = api_client.get(
        "/sun", params={"lat": 10, "lon": 0, "date": "2022-03-20", "elev_m": "inf"}
    )
    assert response.status_code == 422
    assert response.json()["code"] == "validation_error"


def test_sun_endpoint_reports_conversion_failure(api_client: TestClient) -> None:
    response = api_client.get("/sun", params={"lat": 10, "lon": -180, "date": "9999-12-31"})
    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "conversion_failed"
    assert payload["sunrise_utc"] is None
    assert payload["sunset_utc"] is None
    assert payload["day_length_seconds"] is None


def test_altitude_endpoint(api_client: TestClient) -> None:
    response = api_client.get(
        "/altitude", params={"lat": 0, "lon": 0, "time": "2022-03-20T12:00:00"}
    )
    assert response.status_code == 200
    payload = response.json()
    assert payload["time_utc"] == "2022-03-20T12:00:00Z"
    assert payload["altitude_deg"] > 88.0
    assert payload["above_horizon"] is True


def test_altitude_endpoint_normalizes_offsets(api_client: TestClient) -> None:
    response = api_client.get(
        "/altitude", params={"lat": 0, "lon": 0, "time": "2022-03-20T14:00:00+02:00"}
    )
    assert response.status_code == 200
    assert response.json()["time_utc"] == "2022-03-20T12:00:00Z"


def test_chart_endpoint(api_client: TestClient) -> None:
    response = api_client.get("/chart", params={"year": 2022, "lat": 80})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert len(response.text.splitlines()) == 25


def test_unknown_route(api_client: TestClient) -> None:
    response = api_client.get("/moon")
    assert response.status_code == 404
    assert response.json()["code"] == "http_404"
