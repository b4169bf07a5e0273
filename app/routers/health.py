# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# =============================================================================

from fastapi import APIRouter
from pydantic import BaseModel

from app.dependencies import SettingsDep
from lib.utils import utc_now_iso

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class DelegateStatus(BaseModel):
    """Whether each external service has credentials configured."""
    ai: str
    okx: str


class HealthResponse(BaseModel):
    """Process status plus which delegates have credentials."""
    status: str
    timestamp: str
    environment: str
    version: str
    delegates: DelegateStatus


class LivenessResponse(BaseModel):
    status: str
    timestamp: str


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check(settings: SettingsDep):
    """
    Readiness summary for monitors.

    Returns basic health status plus delegate configuration. Delegates are
    not called; an unconfigured one only fails its own routes.
    """
    return HealthResponse(
        status="healthy",
        timestamp=utc_now_iso(),
        environment=settings.ENVIRONMENT,
        version="1.0.0",
        delegates=DelegateStatus(
            ai="configured" if settings.ai_configured else "not_configured",
            okx="configured" if settings.okx_configured else "not_configured",
        ),
    )


@router.get("/health/live", response_model=LivenessResponse)
async def liveness_check():
    """Answers as long as the event loop is running."""
    return LivenessResponse(
        status="alive",
        timestamp=utc_now_iso(),
    )
