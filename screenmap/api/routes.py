"""API route definitions for screenmap."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ..automation.controller import AutomationController
from ..core.exceptions import ImageDecodeError, ImageNotFoundError, RecognitionError
from ..core.logger import log
from ..vision.models import ElementType, ScreenGeometry, ScreenRect
from ..vision.session import AnalysisSession

# Create router instances
analysis_router = APIRouter()
elements_router = APIRouter()
pointer_router = APIRouter()

# Global controller instance
controller_instance: Optional[AutomationController] = None


def get_controller() -> AutomationController:
    """Get or create the global automation controller."""
    global controller_instance
    if controller_instance is None:
        controller_instance = AutomationController(AnalysisSession())
    return controller_instance


# Pydantic models for request/response
class AnalysisRequest(BaseModel):
    """Request model for an analysis pass."""
    image_path: str
    screen_width: Optional[float] = None
    screen_height: Optional[float] = None


class AnalysisResponse(BaseModel):
    """Summary of the published analysis result."""
    element_count: int
    screen_width: float
    screen_height: float
    detected_text: str
    elements: List[Dict[str, Any]]


class PointerMoveRequest(BaseModel):
    """Request model for moving the pointer to an element."""
    contains: str
    type: Optional[ElementType] = None


class PointerMoveResponse(BaseModel):
    """Where the pointer was moved."""
    x: float
    y: float


# Analysis routes
@analysis_router.post("", response_model=AnalysisResponse)
async def run_analysis(
    request: AnalysisRequest,
    controller: AutomationController = Depends(get_controller),
):
    """Analyze a screenshot and publish the resulting elements."""
    geometry = None
    if request.screen_width and request.screen_height:
        geometry = ScreenGeometry(request.screen_width, request.screen_height)

    try:
        result = await controller.session.analyze_async(request.image_path, geometry)
    except ImageNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ImageDecodeError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except RecognitionError as e:
        log.error(f"Analysis failed: {e}")
        raise HTTPException(status_code=502, detail=str(e))

    return AnalysisResponse(
        element_count=len(result),
        screen_width=result.geometry.width,
        screen_height=result.geometry.height,
        detected_text=result.detected_text,
        elements=[element.to_dict() for element in result],
    )


# Element query routes
@elements_router.get("")
async def list_elements(
    type: Optional[ElementType] = None,
    controller: AutomationController = Depends(get_controller),
):
    """List elements of the current analysis, optionally filtered by type."""
    query = controller.session.query()
    if type is None:
        elements = list(query.result or ())
    else:
        elements = query.find_all_of_type(type)
    return {"elements": [element.to_dict() for element in elements]}


@elements_router.get("/find")
async def find_element(
    contains: str,
    type: Optional[ElementType] = None,
    controller: AutomationController = Depends(get_controller),
):
    """Return the first element whose text contains *contains*."""
    element = controller.session.find_first(contains, type)
    if element is None:
        raise HTTPException(status_code=404, detail=f"No element containing '{contains}'")
    return element.to_dict()


@elements_router.get("/within")
async def elements_within(
    x: float,
    y: float,
    width: float,
    height: float,
    controller: AutomationController = Depends(get_controller),
):
    """List elements whose screen point lies inside the given region."""
    elements = controller.session.find_all_within(ScreenRect(x, y, width, height))
    return {"elements": [element.to_dict() for element in elements]}


# Pointer routes
@pointer_router.post("/move", response_model=PointerMoveResponse)
async def move_pointer(
    request: PointerMoveRequest,
    controller: AutomationController = Depends(get_controller),
):
    """Move the pointer to an element of the current analysis."""
    point = controller.move_to_element(request.contains, request.type)
    if point is None:
        raise HTTPException(status_code=404, detail=f"No element containing '{request.contains}'")
    return PointerMoveResponse(x=point.x, y=point.y)
