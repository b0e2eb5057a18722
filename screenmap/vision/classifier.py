"""Rule-based classification of recognized text into UI element types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence

from .models import ElementType, NormalizedRect

BUTTON_KEYWORDS = (
    "send", "post", "reply", "share", "like", "react",
    "submit", "save", "cancel", "ok", "yes", "no",
)
INPUT_KEYWORDS = ("type", "enter", "search", "filter", "input", "field")
NAVIGATION_THRESHOLD = 0.2


@dataclass(frozen=True)
class ClassificationRule:
    """One row of the classification table.

    A rule matches when any keyword is a substring of the lower-cased text,
    or, for keyword-less rules, when the positional predicate holds.
    """

    element_type: ElementType
    keywords: tuple[str, ...] = ()
    predicate: Optional[Callable[[NormalizedRect], bool]] = None

    def matches(self, lowered_text: str, rect: NormalizedRect) -> bool:
        if self.keywords and any(keyword in lowered_text for keyword in self.keywords):
            return True
        if self.predicate is not None and self.predicate(rect):
            return True
        return False


def left_of(threshold: float) -> Callable[[NormalizedRect], bool]:
    """Predicate that holds for boxes starting left of *threshold*."""

    def _predicate(rect: NormalizedRect) -> bool:
        return rect.min_x < threshold

    return _predicate


def build_default_rules(navigation_threshold: float = NAVIGATION_THRESHOLD) -> tuple[ClassificationRule, ...]:
    """Return the default ordered rule table."""
    return (
        ClassificationRule(ElementType.BUTTON, keywords=BUTTON_KEYWORDS),
        ClassificationRule(ElementType.INPUT, keywords=INPUT_KEYWORDS),
        ClassificationRule(ElementType.NAVIGATION, predicate=left_of(navigation_threshold)),
    )


DEFAULT_RULES = build_default_rules()


class ElementClassifier:
    """Assign an ``ElementType`` using an ordered rule table; first match wins."""

    def __init__(
        self,
        rules: Sequence[ClassificationRule] = DEFAULT_RULES,
        default: ElementType = ElementType.TEXT,
    ) -> None:
        self.rules = tuple(rules)
        self.default = default

    def classify(self, text: str, rect: NormalizedRect) -> ElementType:
        lowered = text.lower()
        for rule in self.rules:
            if rule.matches(lowered, rect):
                return rule.element_type
        return self.default

    def extended(self, extra_rules: Iterable[ClassificationRule]) -> "ElementClassifier":
        """Return a classifier that tries *extra_rules* after the current ones."""
        return ElementClassifier(self.rules + tuple(extra_rules), default=self.default)


_default_classifier = ElementClassifier()


def classify(text: str, rect: NormalizedRect) -> ElementType:
    """Classify with the default rule table."""
    return _default_classifier.classify(text, rect)
