# File: tests/test_api.py
"""
Test the HTTP API with FastAPI's TestClient.
"""

import csv
import io

from fastapi.testclient import TestClient

from api.main import app

client = TestClient(app)


def _simply_supported(**overrides):
    body = {
        "beam": {"length": 10.0},
        "supports": [
            {"id": "A", "x": 0.0, "type": "pinned"},
            {"id": "B", "x": 10.0, "type": "roller"},
        ],
        "loads": [{"id": "P1", "type": "point", "x": 5.0, "magnitude": -20.0}],
    }
    body.update(overrides)
    return body


def test_health():
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_analyze_success():
    response = client.post("/api/analyze", json=_simply_supported())
    assert response.status_code == 200

    data = response.json()
    assert data["success"] is True
    results = data["results"]
    assert results["method"] == "equilibrium"
    ry = {r["support_id"]: r["Ry"] for r in results["reactions"]}
    assert abs(ry["A"] - 10.0) < 1e-9
    assert abs(ry["B"] - 10.0) < 1e-9
    assert abs(results["peak_moment"]["value"] - 50.0) < 1e-6
    assert len(results["diagram"]["x"]) == len(results["diagram"]["moment"])
    print("✓ /api/analyze returns reactions and diagrams")


def test_analyze_hyperstatic_without_fem():
    body = _simply_supported(supports=[
        {"id": "A", "x": 0.0, "type": "pinned"},
        {"id": "B", "x": 5.0, "type": "roller"},
        {"id": "C", "x": 10.0, "type": "roller"},
    ])
    data = client.post("/api/analyze", json=body).json()

    assert data["success"] is False
    assert data["error_kind"] == "MethodUnavailable"
    assert data["results"] is None


def test_analyze_hyperstatic_with_fem():
    body = _simply_supported(
        beam={"length": 10.0, "section": {"E": 210e9, "I": 8e-6}},
        supports=[
            {"id": "A", "x": 0.0, "type": "pinned"},
            {"id": "B", "x": 5.0, "type": "roller"},
            {"id": "C", "x": 10.0, "type": "roller"},
        ],
        loads=[{"id": "q1", "type": "udl", "x_start": 0.0, "x_end": 10.0, "w": -2.0}],
        use_fem=True,
    )
    data = client.post("/api/analyze", json=body).json()

    assert data["success"] is True
    assert data["results"]["method"] == "fem"


def test_analyze_invalid_model():
    body = _simply_supported(supports=[
        {"id": "A", "x": 0.0, "type": "pinned"},
        {"id": "B", "x": 12.0, "type": "roller"},
    ])
    data = client.post("/api/analyze", json=body).json()

    assert data["success"] is False
    assert data["error_kind"] == "InvalidModel"


def test_request_validation():
    response = client.post("/api/analyze", json=_simply_supported(beam={"length": 0.0}))
    assert response.status_code == 422

    body = _simply_supported(supports=[{"id": "A", "x": 0.0, "type": "hinge"}])
    assert client.post("/api/analyze", json=body).status_code == 422


def test_export_csv():
    response = client.post("/api/export/csv", json=_simply_supported())
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")

    rows = list(csv.reader(io.StringIO(response.text)))
    assert rows[0] == ["x", "shear_left", "shear_right", "moment_left", "moment_right", "description"]
    assert [r[5] for r in rows[1:]] == ["Start, Support A", "Load P1", "End, Support B"]


def test_export_csv_failure():
    body = _simply_supported(supports=[])
    response = client.post("/api/export/csv", json=body)
    assert response.status_code == 400


def test_export_json():
    response = client.post("/api/export/json", json=_simply_supported())
    assert response.status_code == 200

    payload = response.json()
    assert payload["type"] == "beam"
    assert payload["model"]["beam"]["length"] == 10.0
    assert payload["model"]["supports"][1]["type"] == "roller"
    assert payload["results"]["method"] == "equilibrium"


def test_analyze_udl_missing_start():
    body = _simply_supported(loads=[{"id": "q1", "type": "udl", "x_end": 4.0, "w": -2.0}])
    data = client.post("/api/analyze", json=body).json()

    assert data["success"] is False
    assert data["error_kind"] == "InvalidModel"
    assert "x_start" in data["error"]
