"""Automation actions driven by screen analysis."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from ..core.config import config
from ..core.exceptions import AnalysisError
from ..core.logger import log
from ..vision.models import AnalysisResult, ElementType, ScreenGeometry, ScreenPoint
from ..vision.session import AnalysisSession
from .pointer import PointerMover

HOME_TARGET = "home"


class AutomationController:
    """Locate elements on screen and move the pointer to them."""

    def __init__(
        self,
        session: AnalysisSession,
        pointer: Optional[PointerMover] = None,
        geometry_provider: Optional[Callable[[], ScreenGeometry]] = None,
        screenshot_provider: Optional[Callable[[], str]] = None,
    ) -> None:
        """Initialize the controller.

        Args:
            session: Analysis session that owns the element snapshot.
            pointer: Pointer mover (defaults to a pyautogui-backed one).
            geometry_provider: Returns the active screen geometry.
            screenshot_provider: Captures the screen and returns the image path.
        """
        self.session = session
        self.pointer = pointer or PointerMover()
        if geometry_provider is None or screenshot_provider is None:
            from ..vision import screencap

            geometry_provider = geometry_provider or screencap.get_screen_geometry
            screenshot_provider = screenshot_provider or screencap.capture_screenshot
        self._geometry_provider = geometry_provider
        self._screenshot_provider = screenshot_provider
        self.known_locations: Dict[str, ScreenPoint] = {}

    # ------------------------------------------------------------------
    # Mouse control
    # ------------------------------------------------------------------
    def move_mouse(self, point: ScreenPoint) -> None:
        self.pointer.move_to(point)

    def move_mouse_to_top_left(self) -> ScreenPoint:
        point = ScreenPoint(0.0, 0.0)
        self.move_mouse(point)
        return point

    def move_mouse_to_top_right(self) -> ScreenPoint:
        geometry = self._geometry_provider()
        point = ScreenPoint(geometry.width, 0.0)
        self.move_mouse(point)
        return point

    def screen_info(self) -> str:
        """Return a multi-line report about the active display."""
        geometry = self._geometry_provider()
        width, height = int(geometry.width), int(geometry.height)
        return "\n".join(
            [
                f"Screen Resolution: {width} × {height}",
                "Origin: (0, 0)",
                f"Top-right corner: ({width}, 0)",
            ]
        )

    # ------------------------------------------------------------------
    # Analysis-backed actions
    # ------------------------------------------------------------------
    def run_analysis(self, image_path: Optional[str] = None) -> Optional[AnalysisResult]:
        """Analyze *image_path*, or a fresh screenshot when it is ``None``.

        Returns ``None`` when the pass could not be performed; the previous
        snapshot is kept in that case.
        """
        try:
            path = image_path or self._screenshot_provider()
            return self.session.analyze(path, self._geometry_provider())
        except AnalysisError as e:
            log.error(f"Vision analysis not performed: {e}")
            return None

    def locate(
        self,
        containing: str,
        of_type: Optional[ElementType] = None,
        image_path: Optional[str] = None,
        name: Optional[str] = None,
    ) -> Optional[ScreenPoint]:
        """Run an analysis pass and remember where *containing* was found."""
        log.log_automation_step("locate", {"text": containing, "type": of_type.value if of_type else None})
        self.run_analysis(image_path)

        point = self.session.coordinates_of(containing, of_type)
        if point is None:
            log.warning(f"Could not find '{containing}' on screen")
            return None

        self.known_locations[name or containing.lower()] = point
        log.success(f"Found '{containing}' at ({point.x:.1f}, {point.y:.1f})")
        return point

    def move_to_element(self, containing: str, of_type: Optional[ElementType] = None) -> Optional[ScreenPoint]:
        """Move to an element of the current snapshot without re-analyzing."""
        point = self.session.coordinates_of(containing, of_type)
        if point is None:
            log.warning(f"No element containing '{containing}' in the current analysis")
            return None
        self.move_mouse(point)
        return point

    def find_home_button(self, image_path: Optional[str] = None) -> Optional[ScreenPoint]:
        return self.locate(HOME_TARGET, ElementType.NAVIGATION, image_path=image_path, name=HOME_TARGET)

    def go_to_home(self) -> ScreenPoint:
        """Move to the located Home button, or to the fallback coordinates."""
        point = self.known_locations.get(HOME_TARGET)
        if point is None:
            point = ScreenPoint(config.fallback_home_x, config.fallback_home_y)
            log.warning(f"Home button not located yet, using fallback coordinates {point.as_tuple()}")
        self.move_mouse(point)
        return point
