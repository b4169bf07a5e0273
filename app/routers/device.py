# =============================================================================
# app/routers/device.py - Device Capability Endpoint
# =============================================================================
# Classifies the calling browser from its User-Agent header and the core
# count it reports, and optionally caps a requested render count.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Header, Query
from pydantic import BaseModel

from lib.device import (
    PerformanceLevel,
    get_device_performance_level,
    get_optimal_render_count,
    is_mobile_device,
)

router = APIRouter()


class DeviceCapabilities(BaseModel):
    isMobile: bool
    performanceLevel: PerformanceLevel
    renderCount: int | None = None


@router.get("/capabilities", response_model=DeviceCapabilities, response_model_exclude_none=True)
async def device_capabilities(
    user_agent: Annotated[str | None, Header()] = None,
    cores: Annotated[int | None, Query(ge=1, le=1024, description="navigator.hardwareConcurrency")] = None,
    count: Annotated[int | None, Query(ge=0, description="Elements the client wants to render")] = None,
):
    """
    Device tier for the caller.

    Pass `count` to get the render cap for that many elements.
    """
    level = get_device_performance_level(user_agent, cores)
    return DeviceCapabilities(
        isMobile=is_mobile_device(user_agent),
        performanceLevel=level,
        renderCount=get_optimal_render_count(count, level=level) if count is not None else None,
    )
