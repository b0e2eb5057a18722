"""Shared fixtures for screenmap tests."""

from __future__ import annotations

import cv2
import numpy as np
import pytest

from screenmap.automation.pointer import PointerMover
from screenmap.core.exceptions import RecognitionError
from screenmap.vision.models import NormalizedRect, ScreenGeometry, TextCandidate, TextObservation
from screenmap.vision.session import AnalysisSession

GEOMETRY = ScreenGeometry(1000.0, 2000.0)


def obs(text, min_x, min_y, width=0.1, height=0.05, confidence=0.9):
    """Build a single-candidate observation; ``text=None`` means no candidates."""
    candidates = () if text is None else (TextCandidate(text, confidence),)
    return TextObservation(candidates=candidates, bounding_box=NormalizedRect(min_x, min_y, width, height))


class FakeOCREngine:
    """Returns queued observation lists, or raises, instead of running OCR."""

    def __init__(self, *batches, error=None):
        self.batches = list(batches)
        self.error = error
        self.calls = 0

    def recognize(self, image):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.batches.pop(0) if self.batches else []


class FakeDriver:
    def __init__(self):
        self.moves = []

    def moveTo(self, x, y, duration=0.0):  # noqa: N802
        self.moves.append((x, y))


@pytest.fixture
def screenshot(tmp_path):
    path = tmp_path / "screen.png"
    cv2.imwrite(str(path), np.full((40, 60, 3), 255, dtype=np.uint8))
    return str(path)


@pytest.fixture
def home_observations():
    return [
        obs("Home", 0.0, 0.4),
        obs("Send", 0.8, 0.05),
        obs("Search messages", 0.4, 0.9, width=0.3),
        obs("Quarterly report", 0.5, 0.5),
    ]


@pytest.fixture
def make_session():
    sessions = []

    def _make(*batches, error=None, ocr_timeout=5.0):
        session = AnalysisSession(
            engine=FakeOCREngine(*batches, error=error),
            geometry_provider=lambda: GEOMETRY,
            ocr_timeout=ocr_timeout,
        )
        sessions.append(session)
        return session

    yield _make
    for session in sessions:
        session.close()


@pytest.fixture
def driver():
    return FakeDriver()


@pytest.fixture
def pointer(driver):
    return PointerMover(driver=driver, duration=0.0)


@pytest.fixture
def failing_engine():
    return FakeOCREngine(error=RecognitionError("engine down"))
