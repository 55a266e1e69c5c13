"""JSON output for attribution results."""

import hashlib
import json
import logging
from datetime import datetime
from typing import Any, Dict, Optional

from .config import RemoteConfig
from .models import ChangeStatus, Commit, File

logger = logging.getLogger(__name__)


class ResultSerializer:
    """Renders attribution results and errors as stable JSON envelopes."""

    def __init__(self, config: Optional[RemoteConfig] = None):
        """Initialize with the configuration used to produce the result."""
        self.config = config

    def serialize_result(
        self,
        commit: Commit,
        file: File,
        status: ChangeStatus,
        reference_time: Optional[datetime] = None,
    ) -> Dict[str, Any]:
        """Serialize one attributed file to a dictionary."""
        provenance: Dict[str, Any] = (
            self.config.to_provenance_dict() if self.config else {}
        )
        if reference_time is not None:
            provenance["reference_time"] = reference_time.isoformat()

        result = file.to_dict()
        result.update(commit_id=commit.id, status=status.value)
        payload = {"provenance": provenance, "result": result}
        payload["provenance"]["checksum"] = self._compute_checksum(payload)

        logger.debug(
            "Serialized result",
            extra={"path": file.path, "additions": file.additions},
        )
        return payload

    def _compute_checksum(self, payload: Dict[str, Any]) -> str:
        """SHA-256 of the result section, so identical attributions compare equal."""
        json_bytes = self._to_deterministic_json_bytes(payload["result"])
        return hashlib.sha256(json_bytes).hexdigest()

    def _to_deterministic_json_bytes(self, obj: Any) -> bytes:
        json_str = json.dumps(
            obj,
            ensure_ascii=False,
            sort_keys=True,
            separators=(",", ":"),
        )
        return json_str.encode("utf-8", errors="replace")

    def to_json_string(self, payload: Dict[str, Any]) -> str:
        """Convert payload to pretty-printed JSON string."""
        return json.dumps(payload, ensure_ascii=False, sort_keys=True, indent=2)

    def create_success_envelope(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Create success envelope around payload."""
        return {"ok": True, "data": payload}

    def create_error_envelope(
        self,
        error_code: str,
        error_message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Create error envelope."""
        logger.debug("Creating error envelope", extra={"code": error_code})
        error_data: Dict[str, Any] = {
            "code": error_code,
            "message": error_message,
        }
        if details:
            error_data["details"] = details

        return {"ok": False, "error": error_data}
