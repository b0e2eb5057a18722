"""Vision debugging helpers: draw mapped element points onto screenshots."""

from __future__ import annotations

from pathlib import Path

import cv2  # type: ignore

from ..core.config import config
from .models import AnalysisResult, ElementType

# BGR colours per element type
TYPE_COLORS = {
    ElementType.BUTTON: (0, 0, 255),
    ElementType.INPUT: (255, 0, 0),
    ElementType.NAVIGATION: (0, 160, 0),
    ElementType.TEXT: (80, 80, 80),
    ElementType.OTHER: (0, 200, 200),
}


def save_debug_overlay(image_path: str, result: AnalysisResult) -> str | None:
    """Draw boxes and labels for *result* and save under ``ocr_images_dir``.

    Boxes are drawn in image pixels; the element label carries the mapped
    screen point, which differs from the image position when the screenshot
    resolution is not the screen resolution.
    """
    if not config.save_vision_debug:
        return None

    img = cv2.imread(image_path)
    if img is None:
        return None

    img_h, img_w = img.shape[:2]
    font = cv2.FONT_HERSHEY_SIMPLEX
    font_scale = 0.5

    for el in result:
        color = TYPE_COLORS.get(el.element_type, (0, 0, 255))
        rect = el.normalized_rect
        x1 = int(rect.min_x * img_w)
        y1 = int((1.0 - rect.min_y - rect.height) * img_h)
        x2 = int((rect.min_x + rect.width) * img_w)
        y2 = int((1.0 - rect.min_y) * img_h)
        cv2.rectangle(img, (x1, y1), (x2, y2), color, thickness=2)

        point = el.screen_coordinates
        label = f"{el.element_type.value}:{el.text} ({point.x:.0f},{point.y:.0f})"
        (text_w, text_h), _ = cv2.getTextSize(label, font, font_scale, 1)

        # White background behind text for legibility
        text_bg_tl = (x1, max(0, y1 - text_h - 4))
        text_bg_br = (x1 + text_w + 4, max(0, y1))
        cv2.rectangle(img, text_bg_tl, text_bg_br, (255, 255, 255), thickness=cv2.FILLED)
        cv2.putText(
            img,
            label,
            (x1 + 2, max(10, y1 - 2)),
            font,
            font_scale,
            color,
            thickness=1,
            lineType=cv2.LINE_AA,
        )

    debug_dir = Path(image_path).resolve().parent / config.ocr_images_dir
    debug_dir.mkdir(parents=True, exist_ok=True)
    out_path = debug_dir / f"{Path(image_path).stem}_debug.png"
    cv2.imwrite(str(out_path), img)
    return str(out_path)
