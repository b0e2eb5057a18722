"""Loguru sinks and the component-tagged ``log`` front end."""

from __future__ import annotations

import os
import sys
from typing import Any

from loguru import logger

from .config import config

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level:<8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level:<8} | {name}:{function}:{line} | {message}"


def configure_sinks(level: str | None = None, to_file: bool | None = None) -> list[int]:
    """Replace loguru's sinks with a console sink and, optionally, a daily log file.

    Returns the handler ids so callers can remove them again.
    """
    logger.remove()
    handler_ids = [
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level or config.log_level, colorize=True)
    ]

    if config.log_to_file if to_file is None else to_file:
        os.makedirs(config.logs_dir, exist_ok=True)
        handler_ids.append(
            logger.add(
                os.path.join(config.logs_dir, "screenmap_{time:YYYY-MM-DD}.log"),
                format=FILE_FORMAT,
                level="DEBUG",
                rotation="1 day",
                retention="30 days",
                compression="zip",
            )
        )
    return handler_ids


class Logger:
    """Prefixes every record with ``[name]``.

    Records point at the caller, not at this wrapper.
    """

    def __init__(self, name: str = "screenmap", configure: bool = True) -> None:
        self.name = name
        if configure:
            configure_sinks()

    def _emit(self, level: str, message: str, depth: int = 2) -> None:
        logger.opt(depth=depth).log(level, f"[{self.name}] {message}")

    def info(self, message: str) -> None:
        self._emit("INFO", message)

    def debug(self, message: str) -> None:
        self._emit("DEBUG", message)

    def warning(self, message: str) -> None:
        self._emit("WARNING", message)

    def error(self, message: str) -> None:
        self._emit("ERROR", message)

    def success(self, message: str) -> None:
        self._emit("SUCCESS", message)

    def log_automation_step(self, step: str, details: dict[str, Any] | None = None) -> None:
        """Log one automation action and its parameters."""
        message = f"AUTOMATION STEP: {step}"
        if details:
            message += f" | Details: {details}"
        self._emit("INFO", message)

    def log_performance(self, operation: str, duration_ms: float) -> None:
        self._emit("DEBUG", f"PERFORMANCE: {operation} took {duration_ms:.2f}ms")


log = Logger()
