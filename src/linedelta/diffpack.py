"""Line diffs between two versions of a file, split into hunks."""

import difflib
import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)

HUNK_HEADER_PATTERN = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")


@dataclass
class DiffHunk:
    """Represents a single diff hunk."""

    header: str
    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    added: int
    deleted: int
    patch: str

    @property
    def delta(self) -> int:
        """Net lines this hunk adds (negative when it removes)."""
        return self.new_lines - self.old_lines


class DiffProcessor:
    """Builds unified diffs with difflib and splits them into hunks."""

    def __init__(self, context_lines: int = 3):
        """Initialize diff processor."""
        if context_lines < 0:
            raise ValueError("context_lines cannot be negative")
        self.context_lines = context_lines
        self.hunk_header_pattern = HUNK_HEADER_PATTERN

    def unified_diff(
        self, old_text: str, new_text: str, old_name: str = "a", new_name: str = "b"
    ) -> str:
        """Render a unified diff between two texts."""
        diff_lines = difflib.unified_diff(
            split_lines(old_text),
            split_lines(new_text),
            fromfile=old_name,
            tofile=new_name,
            n=self.context_lines,
            lineterm="",
        )
        return "\n".join(diff_lines)

    def compute_hunks(self, old_text: str, new_text: str) -> List[DiffHunk]:
        """Diff two texts line by line; identical texts give no hunks."""
        if old_text == new_text:
            return []
        return self.split_into_hunks(self.unified_diff(old_text, new_text))

    def split_into_hunks(self, unified_diff: str) -> List[DiffHunk]:
        """Split unified diff into individual hunks."""
        hunks = []
        lines = unified_diff.split("\n")

        current_hunk_lines: List[str] = []
        current_header = None
        current_header_match = None

        for line in lines:
            header_match = self.hunk_header_pattern.match(line)
            if header_match:
                if current_header and current_hunk_lines:
                    hunks.append(
                        self._create_hunk(
                            current_header, current_header_match, current_hunk_lines
                        )
                    )

                current_header = line
                current_header_match = header_match
                current_hunk_lines = []
            elif current_header:
                current_hunk_lines.append(line)

        if current_header and current_hunk_lines:
            hunks.append(
                self._create_hunk(current_header, current_header_match, current_hunk_lines)
            )

        logger.debug("Split unified diff into %s hunks", len(hunks))
        return hunks

    def _create_hunk(
        self, header: str, header_match: re.Match, lines: List[str]
    ) -> DiffHunk:
        """Create a DiffHunk from header and body lines."""
        old_start = int(header_match.group(1))
        old_lines = int(header_match.group(2) or "1")
        new_start = int(header_match.group(3))
        new_lines = int(header_match.group(4) or "1")

        # Inside a hunk every +/- line is content, including "---" and "+++".
        added = sum(1 for line in lines if line.startswith("+"))
        deleted = sum(1 for line in lines if line.startswith("-"))

        return DiffHunk(
            header=header,
            old_start=old_start,
            old_lines=old_lines,
            new_start=new_start,
            new_lines=new_lines,
            added=added,
            deleted=deleted,
            patch="\n".join([header] + lines),
        )


def compute_hunks(
    old_text: str, new_text: str, context_lines: int = 3
) -> List[DiffHunk]:
    """Ordered hunks between two texts."""
    return DiffProcessor(context_lines).compute_hunks(old_text, new_text)


def net_line_delta(hunks: Iterable[DiffHunk]) -> int:
    """Sum of new minus old line counts over all hunks; 0 for none."""
    return sum(hunk.delta for hunk in hunks)


def count_lines(text: Optional[str]) -> int:
    """Number of lines in ``text``; 0 for absent content."""
    if text is None:
        return 0
    return len(split_lines(text))


def split_lines(text: str) -> List[str]:
    """Split ``text`` on ``\\n`` only, the way git counts lines.

    A trailing newline does not open another line, and a ``\\r`` before the
    newline is dropped so CRLF and LF files diff alike. Form feeds and
    Unicode line separators stay inside their line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
