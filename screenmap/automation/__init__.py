"""Pointer automation built on top of screen analysis."""

from .controller import AutomationController
from .pointer import PointerMover

__all__ = [
    "AutomationController",
    "PointerMover",
]
