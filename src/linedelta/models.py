"""Records for projects, commits and files on the remote service."""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .diffpack import count_lines

logger = logging.getLogger(__name__)


class ChangeStatus(str, Enum):
    """Caller's claim about how a commit changed a file."""

    ADDITION = "addition"
    REMOVAL = "removal"
    MODIFICATION = "modification"

    @classmethod
    def parse(cls, value: "ChangeStatus | str") -> "ChangeStatus":
        """Accept an enum member or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise ValueError(
                f"Unknown change status {value!r} (expected one of: {valid})"
            ) from None


@dataclass(frozen=True)
class Project:
    """A project on the remote service."""

    id: int
    name: str = ""
    namespace: str = ""
    path: str = ""
    description: str = ""
    tags: Tuple[str, ...] = ()

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Project":
        """Build a Project from a `projects/:id` API record."""
        namespace = data.get("namespace") or {}
        if isinstance(namespace, dict):
            namespace = namespace.get("full_path") or namespace.get("name") or ""
        tags = data.get("topics") or data.get("tag_list") or []
        return cls(
            id=int(data["id"]),
            name=data.get("name") or "",
            namespace=namespace,
            path=data.get("path_with_namespace") or data.get("path") or "",
            description=data.get("description") or "",
            tags=tuple(tags),
        )


@dataclass(frozen=True)
class Commit:
    """A revision of a project, by hash or symbolic ref."""

    project: Project
    id: str

    def parent(self, parent_id: str) -> "Commit":
        """Return the commit for a parent revision in the same project."""
        return Commit(project=self.project, id=parent_id)


@dataclass(frozen=True)
class CommitMetadata:
    """The parts of a commit API record that decide eligibility."""

    id: str
    parent_ids: Tuple[str, ...]
    created_at: datetime

    @property
    def is_merge(self) -> bool:
        return len(self.parent_ids) > 1

    @property
    def parent_id(self) -> Optional[str]:
        """The single parent revision, or None for an initial commit."""
        return self.parent_ids[0] if len(self.parent_ids) == 1 else None

    @classmethod
    def from_api(cls, data: Optional[Dict[str, Any]]) -> Optional["CommitMetadata"]:
        """Parse a commit record, returning None when it is unusable."""
        if not isinstance(data, dict):
            return None

        commit_id = data.get("id")
        parent_ids = data.get("parent_ids")
        created_at = data.get("created_at") or data.get("committed_date")
        if not commit_id or parent_ids is None or not created_at:
            logger.debug(
                "Commit record missing required fields",
                extra={"commit": commit_id, "fields": sorted(data)},
            )
            return None

        try:
            created = parse_timestamp(created_at)
        except ValueError:
            logger.debug("Unparsable commit timestamp", extra={"created_at": created_at})
            return None

        return cls(id=str(commit_id), parent_ids=tuple(parent_ids), created_at=created)


@dataclass
class File:
    """A file path in a project, with content resolved at one revision.

    ``content`` is ``None`` when the file does not exist at the revision,
    which is different from an existing empty file (``""``).
    """

    project: Project
    path: str
    content: Optional[str] = None
    additions: int = 0
    ref: Optional[str] = field(default=None, compare=False)

    @property
    def exists(self) -> bool:
        return self.content is not None

    @property
    def lines(self) -> int:
        """Number of lines in the content; 0 when absent."""
        return count_lines(self.content)

    def set_additions(self, count: int) -> None:
        self.additions = count

    def add_additions(self, count: int) -> None:
        self.additions += count

    def to_dict(self) -> Dict[str, Any]:
        """Summary of the file for JSON output."""
        return {
            "project_id": self.project.id,
            "file_path": self.path,
            "ref": self.ref,
            "exists": self.exists,
            "lines": self.lines,
            "additions": self.additions,
        }


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 timestamp from the API, assuming UTC when naive."""
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
