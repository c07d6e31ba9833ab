"""
Health check endpoints.

Provides liveness and readiness probes with a strategy catalog check.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from ohcraps.models.strategy import Strategy
from ohcraps.services.strategy_catalog import get_strategy_catalog

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    strategies: int | None = None


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Liveness probe.

    Returns healthy if the service is running.
    Does not check dependencies.
    """
    return HealthResponse(status="healthy")


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
async def ready(
    response: Response,
    catalog: Annotated[tuple[Strategy, ...], Depends(get_strategy_catalog)],
) -> HealthResponse:
    """
    Readiness probe.

    Returns ready once the strategy catalog is loaded. Returns 503 if no
    strategies could be loaded.
    """
    if not catalog:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthResponse(status="not ready", strategies=0)
    return HealthResponse(status="ready", strategies=len(catalog))
