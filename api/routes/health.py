"""Health check and version routes"""

from fastapi import APIRouter
import logging

from app.config import settings
from api.responses import HealthResponse, VersionResponse

router = APIRouter(tags=["App"])
logger = logging.getLogger("smartbite.api.health")


@router.get("/", response_model=HealthResponse)
def health_check():
    """Basic health check endpoint"""
    return HealthResponse(
        status="healthy", message=f"{settings.app_name} is running successfully"
    )


@router.get("/version", response_model=VersionResponse)
def get_version():
    """API version information"""
    return VersionResponse(
        version=settings.app_version,
        name=settings.app_name,
        description=settings.api_description,
    )
