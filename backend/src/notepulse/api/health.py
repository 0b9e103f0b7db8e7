"""Health endpoints.

Only a database outage makes the API unavailable (503). Redis backs token
revocation alone, so losing it reports ``degraded`` with a 200.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.common import HealthCheckResponse
from ..core.services import HealthService
from ..database import get_db_session

router = APIRouter(prefix="/health", tags=["health"])


def get_health_service(session: AsyncSession = Depends(get_db_session)) -> HealthService:
    return HealthService(session)


@router.get(
    "/",
    response_model=HealthCheckResponse,
    responses={status.HTTP_503_SERVICE_UNAVAILABLE: {"model": HealthCheckResponse}},
)
async def health_check(response: Response, service: HealthService = Depends(get_health_service)):
    """Overall status: healthy, degraded (no Redis) or unhealthy (no database)."""
    report = await service.get_health_status()
    if report.status == "unhealthy":
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return report


@router.get("/database", response_model=Dict[str, Any])
async def database_health(response: Response, service: HealthService = Depends(get_health_service)):
    check = await service.check_database_health()
    if not check["connected"]:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return check


@router.get("/redis", response_model=Dict[str, Any])
async def redis_health(service: HealthService = Depends(get_health_service)):
    """Redis reachability; always 200 since notes keep working without it."""
    return await service.check_redis_health()
