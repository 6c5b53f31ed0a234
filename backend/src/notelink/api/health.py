"""Health check API endpoint."""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.common import HealthCheckResponse
from ..core.services import HealthService
from ..database import get_db_session

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthCheckResponse)
async def health_check(request: Request, session: AsyncSession = Depends(get_db_session)):
    """Get overall system health status."""
    state = request.app.state
    redis_client = state.redis_client if state.settings.rate_limit_enabled else None
    health_service = HealthService(session, redis_client, state.settings.app_version)
    return await health_service.get_health_status()
