"""Health check endpoint."""

from fastapi import APIRouter

from .. import __version__
from ..config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Report service status along with the skill and library version it serves."""
    return {
        "status": "healthy",
        "service": settings.service_name,
        "environment": settings.environment,
        "skill": settings.skill_name,
        "version": __version__,
    }
