"""Exceptions raised by the screenmap analysis pipeline."""

from __future__ import annotations


class ScreenmapError(RuntimeError):
    """Base class for all screenmap errors."""


class AnalysisError(ScreenmapError):
    """An analysis pass was not performed; no result was published."""


class ImageAcquisitionError(AnalysisError):
    """The screenshot could not be turned into pixel data."""


class ImageNotFoundError(ImageAcquisitionError):
    """The requested image path does not exist."""


class ImageDecodeError(ImageAcquisitionError):
    """The image exists but its pixels could not be decoded."""


class RecognitionError(AnalysisError):
    """The OCR engine failed, raised, or timed out."""
