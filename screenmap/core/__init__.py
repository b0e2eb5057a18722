"""Core components of the screenmap framework."""

from .config import Config, config
from .exceptions import (
    AnalysisError,
    ImageAcquisitionError,
    ImageDecodeError,
    ImageNotFoundError,
    RecognitionError,
    ScreenmapError,
)
from .logger import Logger, configure_sinks, log

__all__ = [
    "AnalysisError",
    "Config",
    "ImageAcquisitionError",
    "ImageDecodeError",
    "ImageNotFoundError",
    "Logger",
    "RecognitionError",
    "ScreenmapError",
    "config",
    "configure_sinks",
    "log",
]
