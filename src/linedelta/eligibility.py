"""Rules deciding whether a commit may be attributed."""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from .errors import CommitDataUnavailableError, MergeCommitError, OutOfWindowError
from .models import CommitMetadata

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Eligibility:
    """An eligible commit and the parent to diff against."""

    commit_id: str
    parent_id: Optional[str]

    @property
    def is_initial(self) -> bool:
        return self.parent_id is None


def same_month(created_at: datetime, reference_time: datetime) -> bool:
    """Check whether two instants fall in the same calendar month.

    ``created_at`` is converted to the reference's timezone first, so the
    month boundary is the one the evaluation runs in.
    """
    if reference_time.tzinfo is None:
        reference_time = reference_time.replace(tzinfo=timezone.utc)
    local_created = created_at.astimezone(reference_time.tzinfo)
    return (local_created.year, local_created.month) == (
        reference_time.year,
        reference_time.month,
    )


class CommitEligibilityFilter:
    """Checks commit metadata against the attribution rules.

    The attribution window is the calendar month of ``reference_time``. When
    no reference is given, the clock is read at each evaluation.
    """

    def __init__(self, reference_time: Optional[datetime] = None):
        self.reference_time = reference_time

    def _now(self) -> datetime:
        return self.reference_time or datetime.now(timezone.utc)

    def evaluate(
        self,
        metadata: Optional[CommitMetadata],
        file_path: str = "",
        commit_id: str = "",
        reference_time: Optional[datetime] = None,
    ) -> Eligibility:
        """Return the eligibility of a commit or raise the rejection.

        Rules apply in order: unusable metadata, merge commit, then the
        attribution month.
        """
        if metadata is None:
            raise CommitDataUnavailableError(file_path, commit_id)

        if metadata.is_merge:
            raise MergeCommitError(file_path, commit_id, len(metadata.parent_ids))

        reference = reference_time or self._now()
        if not same_month(metadata.created_at, reference):
            raise OutOfWindowError(
                file_path,
                commit_id,
                metadata.created_at.isoformat(),
                reference.isoformat(),
            )

        logger.debug(
            "Commit eligible for attribution",
            extra={"commit": metadata.id, "parent": metadata.parent_id},
        )
        return Eligibility(commit_id=metadata.id, parent_id=metadata.parent_id)
