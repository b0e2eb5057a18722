"""Image acquisition and OCR for screenshot analysis."""

from __future__ import annotations

import os
from typing import Any, Optional, Protocol, Sequence

import cv2  # type: ignore
import numpy as np
import pytesseract  # type: ignore
from loguru import logger

from ..core.config import config
from ..core.exceptions import ImageDecodeError, ImageNotFoundError, RecognitionError
from .geometry import to_normalized_rect
from .models import TextCandidate, TextObservation

# Tesseract reports one row per page/block/paragraph/line/word; words are level 5.
WORD_LEVEL = 5


def load_image(image_path: str) -> np.ndarray:
    """Load *image_path* as a BGR pixel array.

    Raises
    ------
    ImageNotFoundError
        If the file does not exist.
    ImageDecodeError
        If OpenCV cannot decode the file.

    """
    if not os.path.exists(image_path):
        logger.error(f"Screenshot not found: {image_path}")
        raise ImageNotFoundError(f"Image not found: {image_path}")

    image = cv2.imread(image_path)
    if image is None:
        logger.error(f"Failed to load image: {image_path}")
        raise ImageDecodeError(f"Failed to decode image: {image_path}")
    return image


def preprocess(image: np.ndarray) -> np.ndarray:
    """Grayscale and Otsu-threshold *image* to improve OCR contrast."""
    gray = image if image.ndim == 2 else cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
    _, thresh = cv2.threshold(gray, 150, 255, cv2.THRESH_BINARY | cv2.THRESH_OTSU)
    return thresh


class OCREngine(Protocol):
    """Anything that turns pixels into text observations."""

    def recognize(self, image: np.ndarray) -> Sequence[TextObservation]:
        ...


def group_lines(ocr_data: dict[str, list[Any]], image_width: int, image_height: int) -> list[TextObservation]:
    """Group Tesseract word rows into one observation per text line.

    Lines keep the order in which Tesseract first reports them. A line whose
    words are all blank yields an observation with no candidates.
    """
    lines: dict[tuple[int, int, int, int], dict[str, Any]] = {}

    for i in range(len(ocr_data["level"])):
        if int(ocr_data["level"][i]) != WORD_LEVEL:
            continue

        key = (
            int(ocr_data["page_num"][i]),
            int(ocr_data["block_num"][i]),
            int(ocr_data["par_num"][i]),
            int(ocr_data["line_num"][i]),
        )
        left = int(ocr_data["left"][i])
        top = int(ocr_data["top"][i])
        right = left + int(ocr_data["width"][i])
        bottom = top + int(ocr_data["height"][i])

        line = lines.get(key)
        if line is None:
            line = {"words": [], "confs": [], "box": [left, top, right, bottom]}
            lines[key] = line
        else:
            box = line["box"]
            box[0] = min(box[0], left)
            box[1] = min(box[1], top)
            box[2] = max(box[2], right)
            box[3] = max(box[3], bottom)

        text = str(ocr_data["text"][i]).strip()
        conf = float(ocr_data["conf"][i])
        if text and conf >= 0:
            line["words"].append(text)
            line["confs"].append(conf)

    observations: list[TextObservation] = []
    for line in lines.values():
        left, top, right, bottom = line["box"]
        rect = to_normalized_rect(left, top, right - left, bottom - top, image_width, image_height)
        if line["words"]:
            confidence = sum(line["confs"]) / len(line["confs"]) / 100.0
            candidates = (TextCandidate(" ".join(line["words"]), confidence),)
        else:
            candidates = ()
        observations.append(TextObservation(candidates=candidates, bounding_box=rect))
    return observations


class TesseractOCREngine:
    """Recognize text lines in a screenshot with Tesseract."""

    def __init__(
        self,
        lang: Optional[str] = None,
        psm: Optional[int] = None,
        preprocess_image: Optional[bool] = None,
    ) -> None:
        """Initialize the engine.

        Parameters
        ----------
        lang : str, optional
            Tesseract language code (default from ``config.ocr_lang``).
        psm : int, optional
            Page segmentation mode (default from ``config.ocr_psm``).
        preprocess_image : bool, optional
            Threshold the image before OCR (default from ``config.ocr_preprocess``).

        """
        # If the user provided a custom tesseract cmd path, set it.
        tesseract_cmd = config.tesseract_cmd or os.getenv("TESSERACT_CMD")
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd
        self.lang = lang or config.ocr_lang
        self.psm = psm if psm is not None else config.ocr_psm
        self.preprocess_image = config.ocr_preprocess if preprocess_image is None else preprocess_image

    def is_available(self) -> bool:
        """Return True if the Tesseract binary can be executed."""
        try:
            version = pytesseract.get_tesseract_version()
        except (pytesseract.TesseractNotFoundError, OSError) as exc:
            logger.warning(f"TesseractOCREngine: Tesseract not available ({exc})")
            return False
        logger.info(f"TesseractOCREngine: using Tesseract {version}")
        return True

    def recognize(self, image: np.ndarray) -> list[TextObservation]:
        """Return one observation per recognized text line.

        Raises
        ------
        RecognitionError
            If Tesseract is missing or fails on the image.

        """
        height, width = image.shape[:2]
        pixels = preprocess(image) if self.preprocess_image else image

        try:
            ocr_data = pytesseract.image_to_data(
                pixels,
                lang=self.lang,
                config=f"--psm {self.psm}",
                output_type=pytesseract.Output.DICT,
            )
        except (pytesseract.TesseractError, pytesseract.TesseractNotFoundError, OSError) as exc:
            logger.error(f"Tesseract recognition failed: {exc}")
            raise RecognitionError(f"OCR engine failed: {exc}") from exc

        observations = group_lines(ocr_data, width, height)
        logger.debug(f"TesseractOCREngine recognized {len(observations)} text lines")
        return observations
