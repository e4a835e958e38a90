"""
tests.api.test_health

Purpose:
    Smoke tests for health and info endpoints.
"""

from __future__ import annotations


def test_health_root_ok(client) -> None:
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["ok"] is True
    assert r.headers.get("x-request-id")


def test_health_v1_ok(client) -> None:
    r = client.get("/v1/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}
    assert r.headers.get("x-request-id")


def test_request_id_is_echoed(client) -> None:
    r = client.get("/v1/health", headers={"X-Request-Id": "abc-123"})
    assert r.headers["x-request-id"] == "abc-123"


def test_unsafe_request_id_is_replaced(client) -> None:
    r = client.get("/v1/health", headers={"X-Request-Id": "x" * 500})
    assert r.headers["x-request-id"] != "x" * 500


def test_info_lists_supported_options(client_factory) -> None:
    client = client_factory(time_zone="Europe/Helsinki")
    r = client.get("/v1/info")
    assert r.status_code == 200

    data = r.json()
    assert data["endpoints"]["route_request"] == "/v1/route-request"
    assert data["time_zone"] == "Europe/Helsinki"
    assert "BICYCLE" in data["supported"]["modes"]
    assert "RENT" in data["supported"]["qualifiers"]
    assert "TRIANGLE" in data["supported"]["optimize"]
    assert "BUS" in data["supported"]["transit_modes"]
