# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: System endpoints: health, readiness, metrics.
Pure HTTP layer: no business logic.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from user_directory.core.config import settings
from user_directory.core.dependencies import get_directory_service
from user_directory.services.directory_service import DirectoryService

router = APIRouter(tags=["System"])


@router.get("/health")
def health_check(service: DirectoryService = Depends(get_directory_service)):
    """Liveness probe for Docker and orchestration."""
    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "roster_size": len(service.roster()),
    }


@router.get("/health/ready")
def readiness_check(service: DirectoryService = Depends(get_directory_service)):
    """Readiness probe: the roster has been fetched from the employees API."""
    return {
        "status": "ready" if service.loaded else "degraded",
        "service": settings.SERVICE_NAME,
        "roster_loaded": service.loaded,
        "employee_api": service.client.base_url,
    }


@router.get("/metrics")
def prometheus_metrics():
    """Expose Prometheus metrics in OpenMetrics format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
