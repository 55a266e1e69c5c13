"""Error definitions for linedelta."""

from typing import Any, Dict, Optional


class LineDeltaError(Exception):
    """Base exception for linedelta errors."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with code, message, and optional details."""
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for JSON serialization."""
        result = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


class RejectionError(LineDeltaError):
    """A (commit, file) pair that cannot be attributed.

    The message is tagged with the file path and commit id so that callers
    processing many files can log it as-is.
    """

    def __init__(
        self,
        code: str,
        file_path: str,
        commit_id: str,
        reason: str,
        extra_details: Optional[Dict[str, Any]] = None,
    ):
        details = {"file_path": file_path, "commit_id": commit_id}
        if extra_details:
            details.update(extra_details)
        super().__init__(
            code=code,
            message=f"{file_path} @ #{commit_id}: {reason}",
            details=details,
        )
        self.reason = reason


class InvalidFileError(RejectionError):
    """File path is ignored or has no recognized skill."""

    def __init__(self, file_path: str, commit_id: str):
        super().__init__("INVALID_FILE", file_path, commit_id, "ignored or unskilled file")


class CommitDataUnavailableError(RejectionError):
    """Commit metadata could not be loaded or parsed."""

    def __init__(self, file_path: str, commit_id: str, cause: Optional[str] = None):
        super().__init__(
            "COMMIT_DATA_UNAVAILABLE",
            file_path,
            commit_id,
            "error loading commit data",
            {"cause": cause} if cause else None,
        )


class MergeCommitError(RejectionError):
    """Commit has more than one parent."""

    def __init__(self, file_path: str, commit_id: str, parent_count: int):
        super().__init__(
            "MERGE_COMMIT",
            file_path,
            commit_id,
            "commit was a merge",
            {"parent_count": parent_count},
        )


class OutOfWindowError(RejectionError):
    """Commit was created outside the current attribution month."""

    def __init__(self, file_path: str, commit_id: str, created_at: str, reference_time: str):
        super().__init__(
            "OUT_OF_WINDOW",
            file_path,
            commit_id,
            "commit was not made this month",
            {"created_at": created_at, "reference_time": reference_time},
        )


class ContentUnavailableError(LineDeltaError):
    """File content payload could not be decoded."""

    def __init__(self, file_path: str, ref: str, reason: str):
        super().__init__(
            code="CONTENT_UNAVAILABLE",
            message=f"Content for {file_path} at {ref} is unavailable: {reason}",
            details={"file_path": file_path, "ref": ref, "reason": reason},
        )


class RemoteQueryError(LineDeltaError):
    """Remote API request failed or returned an unusable body."""

    def __init__(self, resource_path: str, reason: str, status_code: Optional[int] = None):
        details: Dict[str, Any] = {"resource_path": resource_path, "reason": reason}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(
            code="REMOTE_QUERY_FAILED",
            message=f"Query {resource_path} failed: {reason}",
            details=details,
        )
        self.resource_path = resource_path
        self.reason = reason
        self.status_code = status_code

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404
