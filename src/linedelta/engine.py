"""Attribution of net line changes to a file for one commit."""

import logging
from datetime import datetime
from typing import Optional, Union

from .content import ContentFetcher
from .diffpack import DiffProcessor, net_line_delta
from .eligibility import CommitEligibilityFilter, Eligibility
from .errors import CommitDataUnavailableError, InvalidFileError, RemoteQueryError
from .models import ChangeStatus, Commit, CommitMetadata, File
from .policies import FilePolicies

logger = logging.getLogger(__name__)


class DiffAttributionEngine:
    """Computes the signed line delta of one (commit, file, status) triple.

    The status is a hint. Whether the file actually exists before and after
    the commit decides between the addition, removal and modification paths.

    The engine keeps no per-call state, so one instance can serve several
    threads as long as the client can.
    """

    def __init__(
        self,
        client,
        reference_time: Optional[datetime] = None,
        context_lines: int = 3,
        policies: type = FilePolicies,
    ):
        """Initialize with a remote client exposing ``get_commit`` and ``get_file``."""
        self.client = client
        self.policies = policies
        self.fetcher = ContentFetcher(client)
        self.eligibility = CommitEligibilityFilter(reference_time)
        self.diff_processor = DiffProcessor(context_lines)

    def fetch_file_content(self, commit: Commit, file: File) -> File:
        """Resolve a file's content at a commit; absent if it cannot be loaded."""
        return self.fetcher.fetch(commit, file)

    def diff_file(
        self,
        commit: Commit,
        file_path: str,
        status: Union[ChangeStatus, str],
        reference_time: Optional[datetime] = None,
    ) -> File:
        """Attribute the net line change of ``file_path`` to ``commit``.

        Returns the File whose ``additions`` holds the delta: the new version
        for additions and modifications, the parent version for removals.
        Raises a RejectionError subclass when the file or commit cannot be
        attributed; those are raised before any content is fetched.
        """
        status = ChangeStatus.parse(status)
        tag = f"{file_path} @ #{commit.id}"

        if not self.policies.is_processable(file_path):
            logger.debug(
                "%s: skipping file",
                tag,
                extra={"category": self.policies.get_file_category(file_path or "")},
            )
            raise InvalidFileError(file_path, commit.id)

        eligibility = self._load_eligibility(commit, file_path, reference_time)

        new_file = self.fetch_file_content(
            commit, File(project=commit.project, path=file_path)
        )

        if status is ChangeStatus.ADDITION or eligibility.is_initial:
            logger.info("%s: detected addition", tag)
            new_file.set_additions(new_file.lines)
            return new_file

        old_file = self.fetch_file_content(
            commit.parent(eligibility.parent_id),
            File(project=commit.project, path=file_path),
        )

        if status is ChangeStatus.REMOVAL or not new_file.exists:
            logger.info("%s: detected removal", tag)
            old_file.set_additions(-old_file.lines)
            return old_file

        if not old_file.exists:
            logger.info("%s: detected addition (file absent in parent)", tag)
            new_file.set_additions(new_file.lines)
            return new_file

        hunks = self.diff_processor.compute_hunks(old_file.content, new_file.content)
        if hunks:
            new_file.add_additions(net_line_delta(hunks))
            logger.info("%s: parsed %s diff(s)", tag, len(hunks))
        else:
            logger.info("%s: no diffs found", tag)
        return new_file

    def _load_eligibility(
        self,
        commit: Commit,
        file_path: str,
        reference_time: Optional[datetime],
    ) -> Eligibility:
        try:
            record = self.client.get_commit(commit)
        except RemoteQueryError as e:
            raise CommitDataUnavailableError(file_path, commit.id, e.reason) from e

        metadata = CommitMetadata.from_api(record)
        return self.eligibility.evaluate(
            metadata,
            file_path=file_path,
            commit_id=commit.id,
            reference_time=reference_time,
        )
