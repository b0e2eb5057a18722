"""Screen-text analysis for screenmap.

This sub-package turns OCR output into classified UI elements with screen
coordinates and answers lookups over the latest analysis pass.
"""

from .builder import RecognitionResultBuilder, build
from .classifier import ClassificationRule, ElementClassifier, classify
from .geometry import to_normalized_rect, to_screen_point
from .models import (
    AnalysisResult,
    ElementType,
    NormalizedRect,
    ScreenGeometry,
    ScreenPoint,
    ScreenRect,
    TextCandidate,
    TextObservation,
    UIElement,
)
from .query import ElementQuery
from .session import AnalysisSession

__all__ = [
    "AnalysisResult",
    "AnalysisSession",
    "ClassificationRule",
    "ElementClassifier",
    "ElementQuery",
    "ElementType",
    "NormalizedRect",
    "RecognitionResultBuilder",
    "ScreenGeometry",
    "ScreenPoint",
    "ScreenRect",
    "TextCandidate",
    "TextObservation",
    "UIElement",
    "build",
    "classify",
    "to_normalized_rect",
    "to_screen_point",
]
