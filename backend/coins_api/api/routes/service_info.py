"""Service Info: root endpoint describing the API surface."""

from fastapi import APIRouter, Depends

from coins_api.api.app_state import AppState, get_app_state
from coins_api.schemas.service import ServiceInfoResponse

router = APIRouter(tags=["info"])

SERVICE_TITLE = "Coin Combinations API"

ENDPOINTS: dict[str, str] = {
    "/": "API information",
    "/health": "Health check",
    "/random": "Get a random coin combination",
    "/all": "Get all possible coin combinations (16 total)",
}


@router.get("/", response_model=ServiceInfoResponse)
async def service_info(state: AppState = Depends(get_app_state)):
    return ServiceInfoResponse(
        service=SERVICE_TITLE, version=state.version, endpoints=ENDPOINTS,
    )
