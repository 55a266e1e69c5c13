"""Service layer for the linedelta API."""

import logging
from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, Optional

from ...config import RemoteConfig
from ...engine import DiffAttributionEngine
from ...errors import LineDeltaError
from ...models import ChangeStatus, Commit, Project
from ...remote import RemoteClient
from ...serialize import ResultSerializer
from ...settings import load_remote_config

logger = logging.getLogger(__name__)


class DiffFileService:
    """Runs one attribution per request and wraps it in an envelope."""

    def __init__(
        self,
        config_factory: Callable[[], RemoteConfig] = load_remote_config,
        client_factory: Callable[[RemoteConfig], Any] = RemoteClient,
    ):
        self.config_factory = config_factory
        self.client_factory = client_factory

    def process_request(
        self,
        project_id: int,
        commit_id: str,
        file_path: str,
        status: ChangeStatus,
        reference_date: Optional[date] = None,
    ) -> Dict[str, Any]:
        """Attribute one file and return the success or error envelope."""
        logger.info(
            "Processing diff-file request",
            extra={"project": project_id, "commit": commit_id, "path": file_path},
        )
        serializer = ResultSerializer()
        reference_time = None
        if reference_date is not None:
            reference_time = datetime(
                reference_date.year, reference_date.month, reference_date.day,
                tzinfo=timezone.utc,
            )

        try:
            config = self.config_factory()
            serializer = ResultSerializer(config)
            commit = Commit(project=Project(id=project_id), id=commit_id)

            client = self.client_factory(config)
            try:
                engine = DiffAttributionEngine(
                    client,
                    reference_time=reference_time,
                    context_lines=config.context_lines,
                )
                file = engine.diff_file(commit, file_path, status)
            finally:
                close = getattr(client, "close", None)
                if close is not None:
                    close()

            payload = serializer.serialize_result(commit, file, status, reference_time)
            logger.info(
                "Diff-file request succeeded",
                extra={"path": file_path, "additions": file.additions},
            )
            return serializer.create_success_envelope(payload)

        except LineDeltaError as e:
            logger.info("Diff-file request rejected: %s", e.message)
            return serializer.create_error_envelope(e.code, e.message, e.details)

        except ValueError as e:
            logger.warning("Diff-file request misconfigured: %s", e)
            return serializer.create_error_envelope("INVALID_CONFIGURATION", str(e))
