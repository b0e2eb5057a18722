"""Coordinate conversion between OCR space and screen space.

OCR bounding boxes live in a unit square with the origin at the bottom-left
corner. The screen uses pixels with the origin at the top-left corner, so the
vertical axis is flipped during conversion.
"""

from __future__ import annotations

from .models import NormalizedRect, ScreenGeometry, ScreenPoint


def to_screen_point(rect: NormalizedRect, geometry: ScreenGeometry) -> ScreenPoint:
    """Map the centre of *rect* to a pixel point on *geometry*.

    Values outside ``[0, 1]`` are extrapolated linearly, never clamped.
    """
    x = rect.mid_x * geometry.width
    y = (1.0 - rect.mid_y) * geometry.height
    return ScreenPoint(x, y)


def to_normalized_rect(
    left: float,
    top: float,
    width: float,
    height: float,
    image_width: float,
    image_height: float,
) -> NormalizedRect:
    """Convert a top-left-origin pixel box into a normalized rect.

    Parameters
    ----------
    left, top, width, height : float
        Box in image pixels, as reported by Tesseract.
    image_width, image_height : float
        Size of the image the box was measured on.

    Returns
    -------
    NormalizedRect
        Box in unit-square coordinates with a bottom-left origin. A zero-sized
        image yields a zero rect.

    """
    if image_width <= 0 or image_height <= 0:
        return NormalizedRect(0.0, 0.0, 0.0, 0.0)

    norm_w = width / image_width
    norm_h = height / image_height
    min_x = left / image_width
    min_y = 1.0 - (top + height) / image_height
    return NormalizedRect(min_x, min_y, norm_w, norm_h)
