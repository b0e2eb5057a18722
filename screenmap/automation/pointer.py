"""System pointer control."""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Dict, Protocol

from ..core.config import config
from ..core.logger import log
from ..vision.models import ScreenPoint

MOVE_HISTORY_SIZE = 100


class PointerDriver(Protocol):
    """The subset of ``pyautogui`` used to move the pointer."""

    def moveTo(self, x: float, y: float, duration: float = 0.0) -> None:  # noqa: N802
        ...


class PointerMover:
    """Move the system cursor to screen points.

    Points are passed through unchanged; reachability is not checked.
    """

    def __init__(self, driver: PointerDriver | None = None, duration: float | None = None) -> None:
        self._driver = driver
        self.duration = config.pointer_move_duration if duration is None else duration
        self.move_history: Deque[Dict[str, Any]] = deque(maxlen=MOVE_HISTORY_SIZE)

    @property
    def driver(self) -> PointerDriver:
        if self._driver is None:
            import pyautogui  # type: ignore

            # Corner moves are legitimate targets here.
            pyautogui.FAILSAFE = False
            self._driver = pyautogui
        return self._driver

    def move_to(self, point: ScreenPoint) -> None:
        """Move the cursor to *point*."""
        self.driver.moveTo(point.x, point.y, duration=self.duration)
        self.move_history.append({"x": point.x, "y": point.y})
        log.info(f"Moving mouse to: ({point.x:.1f}, {point.y:.1f})")
