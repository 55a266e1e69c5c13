"""HTTP client for the remote GitLab API."""

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .config import RemoteConfig
from .errors import RemoteQueryError
from .models import Commit, Project

logger = logging.getLogger(__name__)

# Statuses worth retrying; everything else is returned to the caller as-is.
_RETRY_STATUSES = (429, 500, 502, 503, 504)


class RemoteClient:
    """Read-only, authenticated access to the remote API."""

    def __init__(self, config: RemoteConfig, session: Optional[requests.Session] = None):
        """Initialize with configuration and an optional preconfigured session."""
        self.config = config
        self.session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        session = requests.Session()
        session.headers.update(self.config.headers)

        retry = Retry(
            total=self.config.max_retries,
            backoff_factor=0.5,
            status_forcelist=_RETRY_STATUSES,
            allowed_methods=frozenset({"GET"}),
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "RemoteClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def query(self, resource_path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET a resource and return its decoded JSON body.

        Raises RemoteQueryError on transport failures, non-2xx responses and
        bodies that are not JSON. The error message is the API's ``message``
        (or ``error``) field when the body carries one.
        """
        url = self.config.api_url(resource_path)
        logger.debug("Querying remote resource", extra={"resource": resource_path})

        try:
            response = self.session.get(
                url, params=params, timeout=self.config.timeout_seconds
            )
        except requests.exceptions.RequestException as e:
            raise RemoteQueryError(resource_path, str(e)) from e

        if not response.ok:
            reason = _error_message(response)
            logger.debug(
                "Remote resource returned an error",
                extra={"resource": resource_path, "status_code": response.status_code},
            )
            raise RemoteQueryError(resource_path, reason, response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise RemoteQueryError(
                resource_path, "response body is not valid JSON", response.status_code
            ) from e

    def get_project(self, project_id: int) -> Project:
        """Fetch a project record."""
        return Project.from_api(self.query(f"projects/{project_id}"))

    def get_commit(self, commit: Commit) -> Any:
        """Fetch the raw commit record for a revision."""
        return self.query(
            f"projects/{commit.project.id}/repository/commits/{quote(commit.id, safe='')}"
        )

    def get_file(self, commit: Commit, file_path: str) -> Any:
        """Fetch the raw file record (base64 content and metadata) at a revision.

        API v3 takes the path as a query parameter; later versions take it
        URL-encoded as part of the resource path.
        """
        if self.config.api_version == "v3":
            return self.query(
                f"projects/{commit.project.id}/repository/files",
                params={"file_path": file_path, "ref": commit.id},
            )
        encoded_path = quote(file_path, safe="")
        return self.query(
            f"projects/{commit.project.id}/repository/files/{encoded_path}",
            params={"ref": commit.id},
        )


def _error_message(response: requests.Response) -> str:
    """Extract a readable reason from an error response."""
    try:
        body = response.json()
    except ValueError:
        return response.reason or f"HTTP {response.status_code}"

    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        if message:
            return message if isinstance(message, str) else str(message)
    return response.reason or f"HTTP {response.status_code}"
