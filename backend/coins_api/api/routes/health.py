"""Health Probe: liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 if the process is up
    - service is the fixed id "coins-api", independent of configuration
    - No readiness variant: the service has no downstream dependencies
"""

from fastapi import APIRouter, Depends, status

from coins_api.api.app_state import AppState, get_app_state
from coins_api.schemas.service import HealthResponse

SERVICE_ID = "coins-api"

router = APIRouter(tags=["health"])


@router.get(
    "/health", response_model=HealthResponse, status_code=status.HTTP_200_OK,
)
async def health_check(state: AppState = Depends(get_app_state)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return HealthResponse(status="healthy", service=SERVICE_ID, version=state.version)
