"""Health check endpoints"""

from fastapi import APIRouter, Depends

from logidesk.container import ServiceContainer

from .deps import get_container

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/")
async def health_check(container: ServiceContainer = Depends(get_container)):
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "service": "logidesk-backend",
        "storage_backend": container.settings.storage_backend,
    }
