"""Read-only lookups over an analysis result."""

from __future__ import annotations

from typing import Optional

from .models import AnalysisResult, ElementType, ScreenPoint, ScreenRect, UIElement


class ElementQuery:
    """Answer element lookups against one immutable ``AnalysisResult``.

    A query built over ``None`` (no analysis has run yet) behaves like a query
    over an empty result.
    """

    def __init__(self, result: Optional[AnalysisResult]) -> None:
        self.result = result
        self._elements: tuple[UIElement, ...] = result.elements if result is not None else ()

    def find_first(
        self,
        containing: str,
        of_type: Optional[ElementType] = None,
    ) -> Optional[UIElement]:
        """Return the first element whose text contains *containing*.

        Matching is case-insensitive. When *of_type* is given the element must
        also have exactly that type.
        """
        needle = containing.lower()
        for element in self._elements:
            if needle not in element.text.lower():
                continue
            if of_type is not None and element.element_type != of_type:
                continue
            return element
        return None

    def find_all_of_type(self, of_type: ElementType) -> list[UIElement]:
        return [element for element in self._elements if element.element_type == of_type]

    def find_all_within(self, region: ScreenRect) -> list[UIElement]:
        return [
            element for element in self._elements
            if region.contains(element.screen_coordinates)
        ]

    def coordinates_of(
        self,
        containing: str,
        of_type: Optional[ElementType] = None,
    ) -> Optional[ScreenPoint]:
        element = self.find_first(containing, of_type)
        return element.screen_coordinates if element is not None else None
