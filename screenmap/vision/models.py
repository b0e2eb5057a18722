"""Data models for the screen-text analysis subsystem."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum


class ElementType(str, Enum):
    """Semantic category assigned to a recognized text region."""

    BUTTON = "button"
    INPUT = "input"
    NAVIGATION = "navigation"
    TEXT = "text"
    OTHER = "other"  # never produced by the default rules


@dataclass(frozen=True, slots=True)
class NormalizedRect:
    """Rectangle in unit-square coordinates with a bottom-left origin."""

    min_x: float
    min_y: float
    width: float
    height: float

    @property
    def mid_x(self) -> float:
        return self.min_x + self.width / 2

    @property
    def mid_y(self) -> float:
        return self.min_y + self.height / 2

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Return the rect as ``(min_x, min_y, width, height)``."""
        return self.min_x, self.min_y, self.width, self.height

    def __str__(self) -> str:
        return (
            f"(x: {self.min_x:.4f}, y: {self.min_y:.4f}, "
            f"w: {self.width:.4f}, h: {self.height:.4f})"
        )


@dataclass(frozen=True, slots=True)
class ScreenGeometry:
    """Pixel size of the target display, top-left origin."""

    width: float
    height: float


@dataclass(frozen=True, slots=True)
class ScreenPoint:
    """Pixel-space point on the target display."""

    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return self.x, self.y


@dataclass(frozen=True, slots=True)
class ScreenRect:
    """Pixel-space rectangle (x, y is the top-left corner)."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, point: ScreenPoint) -> bool:
        """Return True if *point* lies inside the rect, edges included."""
        return (
            self.x <= point.x <= self.x + self.width
            and self.y <= point.y <= self.y + self.height
        )


@dataclass(frozen=True, slots=True)
class TextCandidate:
    """One recognition hypothesis for a text region."""

    text: str
    confidence: float


@dataclass(frozen=True, slots=True)
class TextObservation:
    """A recognized text region as reported by the OCR engine.

    Candidates are ordered best-first. An engine may report a region with no
    candidates at all; such observations are dropped when building results.
    """

    candidates: tuple[TextCandidate, ...]
    bounding_box: NormalizedRect

    def top_candidate(self) -> TextCandidate | None:
        return self.candidates[0] if self.candidates else None


@dataclass(frozen=True, slots=True)
class UIElement:
    """Representation of a detected UI element on screen."""

    text: str
    element_type: ElementType
    normalized_rect: NormalizedRect
    screen_coordinates: ScreenPoint
    confidence: float

    def to_dict(self) -> dict:
        """Plain-dict view used by the API layer."""
        return {
            "text": self.text,
            "element_type": self.element_type.value,
            "normalized_rect": {
                "min_x": self.normalized_rect.min_x,
                "min_y": self.normalized_rect.min_y,
                "width": self.normalized_rect.width,
                "height": self.normalized_rect.height,
            },
            "screen_coordinates": {
                "x": self.screen_coordinates.x,
                "y": self.screen_coordinates.y,
            },
            "confidence": self.confidence,
        }


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Elements produced by one analysis pass, in OCR observation order."""

    elements: tuple[UIElement, ...]
    geometry: ScreenGeometry
    detected_text: str = ""
    created_at: float = field(default_factory=time.time)

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements)
