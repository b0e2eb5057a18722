"""Screenshot capture and screen geometry for the active display.

``pyautogui`` needs a display connection at import time, so it is imported
inside the functions that use it. Any failure there, including the import
itself, is reported as :class:`ImageAcquisitionError`.
"""

from __future__ import annotations

import os
import time
from pathlib import Path
from typing import Optional

from ..core.config import config
from ..core.exceptions import ImageAcquisitionError
from ..core.logger import log
from .models import ScreenGeometry


def get_screen_geometry() -> ScreenGeometry:
    """Return the size of the main display.

    The ``screen_width``/``screen_height`` configuration values win over the
    display when both are set.
    """
    if config.screen_width > 0 and config.screen_height > 0:
        return ScreenGeometry(config.screen_width, config.screen_height)

    try:
        import pyautogui  # type: ignore

        size = pyautogui.size()
    except Exception as e:
        log.error(f"Could not read screen size: {e}")
        raise ImageAcquisitionError("Screen size unavailable") from e
    return ScreenGeometry(float(size.width), float(size.height))


def capture_screenshot(save_path: Optional[str] = None) -> str:
    """Capture the main display to a PNG file and return its path.

    Raises
    ------
    ImageAcquisitionError
        If the screenshot could not be taken or written.

    """
    if save_path is None:
        save_path = os.path.join(
            config.get_screenshot_path(),
            f"screenshot_{int(time.time() * 1000)}.png",
        )
    Path(save_path).parent.mkdir(parents=True, exist_ok=True)

    try:
        import pyautogui  # type: ignore

        # pyscreeze errors do not derive from PyAutoGUIException.
        image = pyautogui.screenshot()
        image.save(save_path)
    except Exception as e:
        log.error(f"Screenshot capture failed: {e}")
        raise ImageAcquisitionError("Screenshot capture failed") from e

    log.debug(f"Captured screenshot to {save_path}")
    return save_path
