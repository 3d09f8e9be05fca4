import pytest
from fastapi.testclient import TestClient

from threerings.frame import configuration_from_payload, time_from_payload
from threerings.main import app

client = TestClient(app)


def test_configuration_from_payload_merges_defaults():
    config = configuration_from_payload({"minSize": 10, "ringRatioPercent": 40}, 800)
    assert config.min_size == 10
    assert config.max_size == 70
    assert config.ring_ratio == pytest.approx(0.4)


def test_time_from_payload():
    sample = time_from_payload({"hour": 13, "minute": 5, "second": 9})
    assert (sample.hour12, sample.minute, sample.second) == (1, 5, 9)


def test_controls_endpoint():
    resp = client.get("/api/controls", params={"canvasSize": 800})
    assert resp.status_code == 200
    data = resp.json()
    names = [c["name"] for c in data["controls"]]
    assert names == ["minSize", "maxSize", "orbit", "ringRatioPercent"]
    assert data["swatches"] == ["#FFFFFF", "#FC5800"]
    assert data["defaults"]["activeColor"] == "#FC5800"


def test_frame_endpoint():
    resp = client.post(
        "/api/frame",
        json={"canvasSize": 800, "time": {"hour": 15, "minute": 30, "second": 0}},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["time"]["hour12"] == 3
    assert len(data["geometry"]["outerMarkers"]) == 12
    assert len(data["geometry"]["middleMarkers"]) == 60
    active = [m for m in data["geometry"]["outerMarkers"] if m["isActive"]]
    assert len(active) == 1
    assert active[0]["diameter"] == pytest.approx(18 + 52 * 30 / 59)
    assert data["status"].startswith("15:30:00 // min size: 18px")
    assert data["drawList"]


def test_frame_endpoint_hidden_inner_ring():
    resp = client.post(
        "/api/frame",
        json={
            "canvasSize": 600,
            "config": {"showInnerRing": False, "activeColor": "#FFFFFF"},
            "time": {"hour": 0, "minute": 0, "second": 0},
            "includeDrawList": False,
        },
    )
    data = resp.json()
    assert data["geometry"]["innerMarker"] is None
    assert data["geometry"]["guideRadii"]["inner"] is None
    assert data["drawList"] == []
    assert data["config"]["activeColor"] == "#FFFFFF"


def test_frame_endpoint_profile():
    resp = client.post(
        "/api/frame",
        json={"time": {"hour": 1, "minute": 2, "second": 3}, "profile": True},
    )
    assert resp.status_code == 200
    timings = resp.json()["meta"]["profile"]["timingsMs"]
    assert {"compute_frame", "draw_list", "serialize_response_json"} <= set(timings)


def test_bad_color_is_rejected():
    resp = client.post("/api/frame", json={"config": {"activeColor": "orange"}})
    assert resp.status_code == 400


def test_frame_png():
    resp = client.post(
        "/api/frame.png",
        json={"canvasSize": 200, "time": {"hour": 6, "minute": 0, "second": 30}},
    )
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "image/png"
    assert resp.content.startswith(b"\x89PNG")
