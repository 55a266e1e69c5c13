"""Pytest configuration and fixtures for linedelta tests."""

import base64
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

import pytest

from linedelta.errors import RemoteQueryError
from linedelta.models import Commit, Project

REFERENCE_TIME = datetime(2024, 5, 15, 12, 0, tzinfo=timezone.utc)


def encode(text: str) -> str:
    """Base64-encode text the way the files API returns it."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


class FakeRemoteClient:
    """In-memory stand-in for RemoteClient.

    Commits are raw API records keyed by id; files are keyed by (ref, path)
    and hold text, or an exception to raise.
    """

    def __init__(self):
        self.commits: Dict[str, Any] = {}
        self.files: Dict[Tuple[str, str], Any] = {}
        self.calls: List[Tuple[str, str, Optional[str]]] = []

    def add_commit(
        self,
        commit_id: str,
        parent_ids: List[str],
        created_at: str = "2024-05-10T09:30:00.000+00:00",
    ) -> None:
        self.commits[commit_id] = {
            "id": commit_id,
            "parent_ids": parent_ids,
            "created_at": created_at,
        }

    def add_file(self, ref: str, path: str, text: str) -> None:
        self.files[(ref, path)] = text

    def fail_file(self, ref: str, path: str, error: Exception) -> None:
        self.files[(ref, path)] = error

    def get_commit(self, commit: Commit) -> Any:
        self.calls.append(("commit", commit.id, None))
        record = self.commits.get(commit.id)
        if isinstance(record, Exception):
            raise record
        if record is None:
            raise RemoteQueryError(f"commits/{commit.id}", "404 Commit Not Found", 404)
        return record

    def get_file(self, commit: Commit, file_path: str) -> Any:
        self.calls.append(("file", commit.id, file_path))
        entry = self.files.get((commit.id, file_path))
        if isinstance(entry, Exception):
            raise entry
        if entry is None:
            raise RemoteQueryError("repository/files", "404 File Not Found", 404)
        return {
            "file_path": file_path,
            "ref": commit.id,
            "encoding": "base64",
            "content": encode(entry),
        }

    @property
    def file_calls(self) -> List[Tuple[str, str, Optional[str]]]:
        return [call for call in self.calls if call[0] == "file"]


@pytest.fixture
def project() -> Project:
    """A project record."""
    return Project(id=42, name="widgets", namespace="acme", path="acme/widgets")


@pytest.fixture
def commit(project: Project) -> Commit:
    """The commit under evaluation."""
    return Commit(project=project, id="c0ffee")


@pytest.fixture
def remote() -> FakeRemoteClient:
    """An empty fake remote."""
    return FakeRemoteClient()


@pytest.fixture
def reference_time() -> datetime:
    """Fixed evaluation time inside May 2024."""
    return REFERENCE_TIME
