"""Fetching file content at a revision."""

import base64
import binascii
import logging
from typing import Any

from .errors import ContentUnavailableError, RemoteQueryError
from .models import Commit, File

logger = logging.getLogger(__name__)


def decode_content(payload: Any, file_path: str = "", ref: str = "") -> str:
    """Decode the ``content`` of a repository file record to text.

    Base64 payloads are decoded to UTF-8, replacing undecodable bytes;
    any other encoding is taken as plain text.
    """
    if not isinstance(payload, dict):
        raise ContentUnavailableError(file_path, ref, "payload is not an object")
    if payload.get("content") is None:
        raise ContentUnavailableError(file_path, ref, "payload has no content")

    content = payload["content"]
    encoding = (payload.get("encoding") or "base64").lower()
    if encoding != "base64":
        return str(content)

    try:
        raw = base64.b64decode(content, validate=False)
    except (binascii.Error, ValueError, TypeError) as e:
        raise ContentUnavailableError(file_path, ref, f"invalid base64: {e}") from e
    return raw.decode("utf-8", errors="replace")


class ContentFetcher:
    """Resolves a File's content at one revision.

    Failures never propagate: a missing file, a failed query or an
    undecodable payload all leave the content absent, since "not there at
    this revision" is the signal the attribution logic relies on.
    """

    def __init__(self, client):
        """Initialize with a client exposing ``get_file(commit, file_path)``."""
        self.client = client

    def fetch(self, commit: Commit, file: File) -> File:
        """Attach the file's content at ``commit`` and return the same File."""
        file.ref = commit.id
        try:
            payload = self.client.get_file(commit, file.path)
            if payload:
                file.content = decode_content(payload, file.path, commit.id)
        except RemoteQueryError as e:
            logger.warning(
                "%s @ #%s: error loading file content - %s",
                file.path,
                commit.id,
                e.reason,
                extra={"status_code": e.status_code},
            )
        except ContentUnavailableError as e:
            logger.warning(
                "%s @ #%s: error loading file content - %s",
                file.path,
                commit.id,
                e.details.get("reason"),
            )
        else:
            logger.debug(
                "Fetched file content",
                extra={"path": file.path, "ref": commit.id, "exists": file.exists},
            )
        return file
