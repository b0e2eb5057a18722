import pytest

from conftest import GEOMETRY, obs
from screenmap.vision.builder import RecognitionResultBuilder, build
from screenmap.vision.models import ElementType


def test_builds_elements_in_observation_order(home_observations):
    result = build(home_observations, GEOMETRY)
    assert [e.text for e in result] == ["Home", "Send", "Search messages", "Quarterly report"]
    assert [e.element_type for e in result] == [
        ElementType.NAVIGATION,
        ElementType.BUTTON,
        ElementType.INPUT,
        ElementType.TEXT,
    ]
    assert result.geometry == GEOMETRY


def test_home_scenario():
    result = build([obs("Home", 0.0, 0.4, 0.1, 0.05, confidence=0.9)], GEOMETRY)
    (home,) = result.elements
    assert home.element_type is ElementType.NAVIGATION
    assert home.screen_coordinates.x == pytest.approx(50.0)
    assert home.screen_coordinates.y == pytest.approx(1150.0)
    assert home.confidence == pytest.approx(0.9)


def test_observations_without_candidates_are_dropped():
    observations = [
        obs("Home", 0.0, 0.4),
        obs(None, 0.3, 0.3),
        obs("Send", 0.8, 0.1),
        obs(None, 0.5, 0.5),
    ]
    result = build(observations, GEOMETRY)
    assert len(result) == len(observations) - 2
    assert [e.text for e in result] == ["Home", "Send"]


def test_blank_candidate_text_is_dropped():
    result = build([obs("   ", 0.5, 0.5), obs("Reply", 0.5, 0.5)], GEOMETRY)
    assert [e.text for e in result] == ["Reply"]


def test_min_confidence_filter():
    builder = RecognitionResultBuilder(min_confidence=0.5)
    result = builder.build([obs("Send", 0.5, 0.5, confidence=0.2), obs("Post", 0.5, 0.5)], GEOMETRY)
    assert [e.text for e in result] == ["Post"]


def test_detected_text_has_one_line_per_element(home_observations):
    result = build(home_observations, GEOMETRY)
    lines = result.detected_text.splitlines()
    assert len(lines) == len(result)
    assert lines[0].startswith("Home at (x: 0.0000, y: 0.4000")


def test_empty_input_gives_empty_result():
    result = build([], GEOMETRY)
    assert len(result) == 0
    assert result.detected_text == ""


def test_rebuilding_is_deterministic(home_observations):
    first = build(home_observations, GEOMETRY)
    second = build(home_observations, GEOMETRY)
    assert first.elements == second.elements
