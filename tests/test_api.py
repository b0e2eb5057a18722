import pytest
from fastapi.testclient import TestClient

from conftest import GEOMETRY
from screenmap.api.app import create_app
from screenmap.api.routes import get_controller
from screenmap.automation.controller import AutomationController


@pytest.fixture
def controller(make_session, pointer, screenshot, home_observations):
    return AutomationController(
        make_session(home_observations),
        pointer=pointer,
        geometry_provider=lambda: GEOMETRY,
        screenshot_provider=lambda: screenshot,
    )


@pytest.fixture
def client(controller):
    app = create_app()
    app.dependency_overrides[get_controller] = lambda: controller
    with TestClient(app) as test_client:
        yield test_client


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"


def test_analysis_then_queries(client, screenshot):
    response = client.post("/api/v1/analysis", json={"image_path": screenshot})
    assert response.status_code == 200
    body = response.json()
    assert body["element_count"] == 4
    assert body["screen_width"] == 1000.0
    assert body["elements"][0]["element_type"] == "navigation"

    found = client.get("/api/v1/elements/find", params={"contains": "home", "type": "navigation"})
    assert found.status_code == 200
    assert found.json()["screen_coordinates"]["x"] == pytest.approx(50.0)

    missing = client.get("/api/v1/elements/find", params={"contains": "home", "type": "button"})
    assert missing.status_code == 404

    buttons = client.get("/api/v1/elements", params={"type": "button"}).json()["elements"]
    assert [e["text"] for e in buttons] == ["Send"]
    assert len(client.get("/api/v1/elements").json()["elements"]) == 4

    within = client.get(
        "/api/v1/elements/within",
        params={"x": 0, "y": 1100, "width": 100, "height": 100},
    ).json()["elements"]
    assert [e["text"] for e in within] == ["Home"]


def test_analysis_with_explicit_geometry(client, screenshot):
    body = client.post(
        "/api/v1/analysis",
        json={"image_path": screenshot, "screen_width": 100, "screen_height": 200},
    ).json()
    assert body["screen_height"] == 200.0


def test_analysis_missing_image(client, tmp_path):
    response = client.post("/api/v1/analysis", json={"image_path": str(tmp_path / "x.png")})
    assert response.status_code == 404


def test_analysis_recognition_failure(make_session, pointer, screenshot):
    from screenmap.core.exceptions import RecognitionError

    controller = AutomationController(
        make_session(error=RecognitionError("engine down")),
        pointer=pointer,
        geometry_provider=lambda: GEOMETRY,
        screenshot_provider=lambda: screenshot,
    )
    app = create_app()
    app.dependency_overrides[get_controller] = lambda: controller
    with TestClient(app) as client:
        response = client.post("/api/v1/analysis", json={"image_path": screenshot})
    assert response.status_code == 502


def test_pointer_move(client, screenshot, driver):
    assert client.post("/api/v1/pointer/move", json={"contains": "send"}).status_code == 404

    client.post("/api/v1/analysis", json={"image_path": screenshot})
    response = client.post("/api/v1/pointer/move", json={"contains": "send", "type": "button"})
    assert response.status_code == 200
    assert driver.moves == [(response.json()["x"], response.json()["y"])]


def test_elements_before_analysis_is_empty(client):
    assert client.get("/api/v1/elements").json() == {"elements": []}


def test_unknown_element_type_is_rejected(client):
    response = client.get("/api/v1/elements", params={"type": "widget"})
    assert response.status_code == 422
