"""Liveness, health and presentation read endpoints."""

from __future__ import annotations


def test_root_returns_static_greeting(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.get_json() == {
        "message": "Welcome to the backend server!",
        "say": "Server is running successfully, Test Owner",
    }


def test_health_check(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json()["status"] == "ok"


def test_unknown_route_is_json_404(client):
    response = client.get("/nope")

    assert response.status_code == 404
    assert response.get_json()["success"] is False


def test_cors_headers_on_api_routes(client):
    response = client.get("/api/site", headers={"Origin": "http://localhost:3000"})

    assert response.headers.get("Access-Control-Allow-Origin") in ("*", "http://localhost:3000")


def test_site_content(client):
    body = client.get("/api/site").get_json()

    assert body["owner"] == "Test Owner"
    assert body["letters"] == list("TEST")
    assert body["typewriterTexts"] == ["Full Stack Developer ", "Problem Solver "]
    assert [link["name"] for link in body["socialLinks"]] == ["Instagram", "LinkedIn"]
    assert body["thresholds"]["hideWelcome"] == 800.0


def test_frame_before_shrink(client):
    body = client.get("/api/frame?scrollY=100&width=1440").get_json()

    assert body["welcome"]["scale"] == 1
    assert body["welcome"]["opacity"] == 1
    assert body["bucket"] == "desktop"
    assert body["scroll"] == {"scrollY": 100.0, "isScrolled": True, "showMainContent": False}


def test_frame_past_threshold_has_no_welcome(client):
    body = client.get("/api/frame?scrollY=900&width=500").get_json()

    assert body["welcome"] is None
    assert body["bucket"] == "small"
    assert body["scroll"]["showMainContent"] is True
    assert body["sections"]["about"] is True
    assert body["sections"]["contact"] is False


def test_frame_rejects_bad_numbers(client):
    assert client.get("/api/frame?scrollY=abc").status_code == 400
    assert client.get("/api/frame?scrollY=-5").status_code == 400
    assert client.get("/api/frame?width=inf").status_code == 400
