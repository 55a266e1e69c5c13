"""Meta endpoints for the linedelta API."""

import logging

from fastapi import APIRouter

from .. import __version__
from ...settings import get_remote_credentials
from ..models import HealthResponse, VersionResponse

router = APIRouter(tags=["meta"])

logger = logging.getLogger(__name__)


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    url, _ = get_remote_credentials()
    logger.info("Health check invoked", extra={"remote_configured": bool(url)})
    return HealthResponse(
        status="healthy",
        version=__version__,
        remote_configured=bool(url),
    )


@router.get("/version", response_model=VersionResponse)
def version_info() -> VersionResponse:
    """Version information endpoint."""
    logger.info("Version endpoint invoked")
    return VersionResponse(version=__version__, api_version="v1")


@router.get("/", include_in_schema=False)
def root() -> dict:
    """Root endpoint providing basic API metadata."""
    logger.debug("Root endpoint served")
    return {
        "name": "linedelta API",
        "version": __version__,
        "description": "Per-commit line attribution for files on a remote GitLab",
        "endpoints": {
            "diff-file": "POST /diff-file - Attribute a file's line change to a commit",
            "health": "GET /health - Health check",
            "version": "GET /version - Version information",
            "docs": "GET /docs - API documentation",
        },
    }
