"""Turn raw OCR observations into a typed analysis result."""

from __future__ import annotations

from typing import Iterable, Optional

from loguru import logger

from .classifier import ElementClassifier
from .geometry import to_screen_point
from .models import AnalysisResult, ScreenGeometry, TextObservation, UIElement


class RecognitionResultBuilder:
    """Combine the classifier and the coordinate mapper over one OCR pass."""

    def __init__(
        self,
        classifier: Optional[ElementClassifier] = None,
        min_confidence: float = 0.0,
    ) -> None:
        self.classifier = classifier or ElementClassifier()
        self.min_confidence = min_confidence

    def build(
        self,
        observations: Iterable[TextObservation],
        geometry: ScreenGeometry,
    ) -> AnalysisResult:
        """Return an ``AnalysisResult`` in observation order.

        Observations without a usable text candidate are dropped silently.
        """
        elements: list[UIElement] = []
        lines: list[str] = []
        dropped = 0

        for observation in observations:
            candidate = observation.top_candidate()
            if (
                candidate is None
                or not candidate.text.strip()
                or candidate.confidence < self.min_confidence
            ):
                dropped += 1
                continue

            rect = observation.bounding_box
            element = UIElement(
                text=candidate.text,
                element_type=self.classifier.classify(candidate.text, rect),
                normalized_rect=rect,
                screen_coordinates=to_screen_point(rect, geometry),
                confidence=candidate.confidence,
            )
            elements.append(element)
            lines.append(f"{candidate.text} at {rect}")

            logger.debug(
                f"Element found: '{element.text}' ({element.element_type.value}) "
                f"at {element.screen_coordinates.as_tuple()}"
            )

        if dropped:
            logger.debug(f"Dropped {dropped} observations without a usable candidate")

        detected_text = "\n".join(lines) + "\n" if lines else ""
        return AnalysisResult(
            elements=tuple(elements),
            geometry=geometry,
            detected_text=detected_text,
        )


def build(
    observations: Iterable[TextObservation],
    geometry: ScreenGeometry,
) -> AnalysisResult:
    """Build with the default classifier."""
    return RecognitionResultBuilder().build(observations, geometry)
