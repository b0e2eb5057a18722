"""Analysis session: owns the current snapshot and runs analysis passes."""

from __future__ import annotations

import asyncio
import concurrent.futures
import threading
import time
from typing import Callable, Optional, Sequence

from loguru import logger

from ..core.config import config
from ..core.exceptions import RecognitionError
from ..core.logger import log
from .builder import RecognitionResultBuilder
from .classifier import ElementClassifier, build_default_rules
from .engine import OCREngine, TesseractOCREngine, load_image
from .models import (
    AnalysisResult,
    ElementType,
    ScreenGeometry,
    ScreenPoint,
    ScreenRect,
    TextObservation,
    UIElement,
)
from .query import ElementQuery

PublishListener = Callable[[AnalysisResult], None]


class AnalysisSession:
    """Single owner of the latest ``AnalysisResult``.

    OCR runs on a worker pool. Building and publishing run on one dedicated
    thread, so concurrent passes replace the snapshot one at a time and
    readers always see a complete result.
    """

    def __init__(
        self,
        engine: Optional[OCREngine] = None,
        builder: Optional[RecognitionResultBuilder] = None,
        geometry_provider: Optional[Callable[[], ScreenGeometry]] = None,
        ocr_timeout: Optional[float] = None,
        ocr_workers: Optional[int] = None,
    ) -> None:
        self.engine: OCREngine = engine or TesseractOCREngine()
        self.builder = builder or RecognitionResultBuilder(
            ElementClassifier(build_default_rules(config.navigation_threshold)),
            min_confidence=config.min_confidence,
        )
        if geometry_provider is None:
            from .screencap import get_screen_geometry

            geometry_provider = get_screen_geometry
        self._geometry_provider = geometry_provider
        self.ocr_timeout = ocr_timeout if ocr_timeout is not None else config.ocr_timeout

        self._publish_local = threading.local()
        self._ocr_executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=ocr_workers or config.ocr_workers,
            thread_name_prefix="screenmap-ocr",
        )
        self._publish_executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=1,
            thread_name_prefix="screenmap-publish",
            initializer=self._mark_publish_thread,
        )
        self._snapshot: Optional[AnalysisResult] = None
        self._listeners: list[PublishListener] = []

    # ------------------------------------------------------------------
    # Snapshot access
    # ------------------------------------------------------------------
    @property
    def snapshot(self) -> Optional[AnalysisResult]:
        """The latest published result, or ``None`` before the first pass."""
        return self._snapshot

    @property
    def detected_text(self) -> str:
        snapshot = self._snapshot
        return snapshot.detected_text if snapshot is not None else ""

    def query(self) -> ElementQuery:
        """Return a query bound to the snapshot current at call time."""
        return ElementQuery(self._snapshot)

    def subscribe(self, listener: PublishListener) -> None:
        """Call *listener* with every newly published result."""
        self._listeners.append(listener)

    # ------------------------------------------------------------------
    # Analysis passes
    # ------------------------------------------------------------------
    def analyze(self, image_path: str, geometry: Optional[ScreenGeometry] = None) -> AnalysisResult:
        """Run one full pass over the image at *image_path*.

        Raises
        ------
        ImageAcquisitionError
            If the image is missing or cannot be decoded.
        RecognitionError
            If the OCR engine fails or times out.

        On failure nothing is published and the previous snapshot stays.
        """
        started = time.perf_counter()
        image = load_image(image_path)
        geometry = geometry or self._geometry_provider()

        future = self._ocr_executor.submit(self.engine.recognize, image)
        try:
            observations = future.result(timeout=self.ocr_timeout)
        except concurrent.futures.TimeoutError as exc:
            logger.error(f"OCR timed out after {self.ocr_timeout:.1f}s for {image_path}")
            raise RecognitionError(f"OCR timed out after {self.ocr_timeout:.1f}s") from exc
        except RecognitionError:
            raise
        except Exception as exc:
            logger.error(f"OCR engine raised on {image_path}: {exc}")
            raise RecognitionError(f"OCR engine failed: {exc}") from exc

        result = self._publish(observations, geometry)

        if config.save_vision_debug:
            try:
                from .debug import save_debug_overlay

                save_debug_overlay(image_path, result)
            except Exception as exc:  # pragma: no cover
                logger.warning(f"Failed to save debug overlay: {exc}")

        log.log_performance(f"analysis of {image_path}", (time.perf_counter() - started) * 1000)
        return result

    async def analyze_async(
        self,
        image_path: str,
        geometry: Optional[ScreenGeometry] = None,
    ) -> AnalysisResult:
        """Awaitable form of :meth:`analyze` for asyncio callers."""
        return await asyncio.to_thread(self.analyze, image_path, geometry)

    def analyze_observations(
        self,
        observations: Sequence[TextObservation],
        geometry: Optional[ScreenGeometry] = None,
    ) -> AnalysisResult:
        """Publish a result built from already-recognized observations."""
        return self._publish(observations, geometry or self._geometry_provider())

    def _mark_publish_thread(self) -> None:
        self._publish_local.is_publisher = True

    def _publish(self, observations: Sequence[TextObservation], geometry: ScreenGeometry) -> AnalysisResult:
        if getattr(self._publish_local, "is_publisher", False):
            # A listener started this pass; the single worker is already ours.
            return self._build_and_publish(list(observations), geometry)
        future = self._publish_executor.submit(self._build_and_publish, list(observations), geometry)
        return future.result()

    def _build_and_publish(self, observations: list[TextObservation], geometry: ScreenGeometry) -> AnalysisResult:
        result = self.builder.build(observations, geometry)
        self._snapshot = result

        logger.info(f"Vision analysis found {len(result)} UI elements")
        for element in result:
            logger.debug(
                f"{element.element_type.value}: '{element.text}' "
                f"at {element.screen_coordinates.as_tuple()}"
            )

        for listener in self._listeners:
            try:
                listener(result)
            except Exception as exc:
                logger.warning(f"Publish listener failed: {exc}")
        return result

    # ------------------------------------------------------------------
    # Query passthroughs
    # ------------------------------------------------------------------
    def find_first(self, containing: str, of_type: Optional[ElementType] = None) -> Optional[UIElement]:
        return self.query().find_first(containing, of_type)

    def find_all_of_type(self, of_type: ElementType) -> list[UIElement]:
        return self.query().find_all_of_type(of_type)

    def find_all_within(self, region: ScreenRect) -> list[UIElement]:
        return self.query().find_all_within(region)

    def coordinates_of(self, containing: str, of_type: Optional[ElementType] = None) -> Optional[ScreenPoint]:
        return self.query().coordinates_of(containing, of_type)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def close(self) -> None:
        """Shut down the worker pools."""
        self._ocr_executor.shutdown(wait=False)
        self._publish_executor.shutdown(wait=True)

    def __enter__(self) -> "AnalysisSession":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
