"""Pydantic models for linedelta API requests and responses."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..models import ChangeStatus


class DiffFileRequest(BaseModel):
    """Request model for the diff-file endpoint."""

    project_id: int = Field(
        ...,
        description="Numeric project id on the remote",
        ge=1,
        examples=[42],
    )
    commit_id: str = Field(
        ...,
        description="Commit SHA or ref to attribute",
        examples=["d7a39abec5a282b9955afdd1649a5f1bafae35f7"],
    )
    file_path: str = Field(
        ...,
        description="Repository path of the file",
        examples=["src/app.py"],
    )
    status: ChangeStatus = Field(
        ChangeStatus.MODIFICATION,
        description="Claimed change status; checked against the fetched content",
    )
    reference_date: Optional[date] = Field(
        None,
        description="Date whose month is the attribution window (default: today)",
        examples=["2024-05-01"],
    )

    @field_validator("commit_id")
    @classmethod
    def commit_id_must_be_valid(cls, v):
        """Basic validation for commit ids."""
        v = v.strip()
        if not v:
            raise ValueError("commit_id cannot be empty")
        return v

    @field_validator("file_path")
    @classmethod
    def file_path_must_be_valid(cls, v):
        """Reject empty and absolute paths."""
        v = v.strip()
        if not v:
            raise ValueError("file_path cannot be empty")
        if v.startswith("/"):
            raise ValueError("file_path must be relative to the repository root")
        return v


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    status: str = Field(..., examples=["healthy"])
    version: str = Field(..., examples=["1.0.0"])
    remote_configured: bool = Field(..., examples=[True])


class VersionResponse(BaseModel):
    """Response model for version endpoint."""

    version: str = Field(..., examples=["1.0.0"])
    api_version: str = Field(..., examples=["v1"])
    supported_statuses: list = Field(
        default_factory=lambda: [status.value for status in ChangeStatus]
    )
