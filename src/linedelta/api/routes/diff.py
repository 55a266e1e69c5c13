"""Diff-file routes for the linedelta API."""

import logging
from typing import Any, Dict

from fastapi import APIRouter, HTTPException

from ..models import DiffFileRequest
from ..services import DiffFileService

router = APIRouter(tags=["diff"])

logger = logging.getLogger(__name__)

diff_service = DiffFileService()


@router.post("/diff-file")
def diff_file(request: DiffFileRequest) -> Dict[str, Any]:
    """Attribute the net line change of a file to a commit."""
    logger.info(
        "Received diff-file request",
        extra={
            "project": request.project_id,
            "commit": request.commit_id,
            "path": request.file_path,
        },
    )

    try:
        return diff_service.process_request(
            project_id=request.project_id,
            commit_id=request.commit_id,
            file_path=request.file_path,
            status=request.status,
            reference_date=request.reference_date,
        )

    except Exception as exc:
        logger.exception("Diff-file request failed", extra={"path": request.file_path})
        raise HTTPException(
            status_code=500,
            detail={
                "ok": False,
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": f"Failed to attribute file: {str(exc)}",
                    "details": {"exception_type": type(exc).__name__},
                },
            },
        ) from exc
