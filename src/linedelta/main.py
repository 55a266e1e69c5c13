"""Command line entry point for linedelta."""

import argparse
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from .config import RemoteConfig
from .engine import DiffAttributionEngine
from .errors import LineDeltaError
from .logging_utils import configure_logging
from .models import ChangeStatus, Commit, Project
from .remote import RemoteClient
from .serialize import ResultSerializer
from .settings import load_remote_config

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="linedelta",
        description="Attribute a file's net line change to a commit on a remote GitLab",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  linedelta --project 42 --commit 1a2b3c4d --path src/app.py
  linedelta --project 42 --commit 1a2b3c4d --path README.md --status addition
  linedelta --url https://gitlab.example.com --token $TOKEN \\
            --project 42 --commit 1a2b3c4d --path lib/util.js --json out.json
        """,
    )

    # Required arguments
    parser.add_argument(
        "--project",
        required=True,
        type=int,
        help="Numeric project id on the remote",
    )
    parser.add_argument(
        "--commit",
        required=True,
        help="Commit SHA or ref to attribute",
    )
    parser.add_argument(
        "--path",
        required=True,
        help="Repository path of the file",
    )

    # Optional arguments
    parser.add_argument(
        "--status",
        default=ChangeStatus.MODIFICATION.value,
        choices=[status.value for status in ChangeStatus],
        help="Claimed change status (default: modification)",
    )
    parser.add_argument(
        "--url",
        help="Remote base URL (default: $LINEDELTA_URL)",
    )
    parser.add_argument(
        "--token",
        help="Private access token (default: $LINEDELTA_TOKEN)",
    )
    parser.add_argument(
        "--api-version",
        help="Remote API version (default: $LINEDELTA_API_VERSION or v4)",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        help="Request timeout in seconds (default: $LINEDELTA_TIMEOUT or 30)",
    )
    parser.add_argument(
        "--retries",
        type=int,
        help="Retries for transient HTTP failures (default: $LINEDELTA_MAX_RETRIES or 3)",
    )
    parser.add_argument(
        "--context",
        type=int,
        help="Number of context lines in diffs (default: $LINEDELTA_CONTEXT_LINES or 3)",
    )
    parser.add_argument(
        "--reference-date",
        help="Date (YYYY-MM-DD) whose month is the attribution window (default: today)",
    )
    parser.add_argument(
        "--json",
        help="Output JSON to file instead of stdout",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: $LOG_LEVEL or INFO)",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command line arguments."""
    if args.timeout is not None and args.timeout <= 0:
        raise ValueError("--timeout must be positive")
    if args.retries is not None and args.retries < 0:
        raise ValueError("--retries cannot be negative")
    if args.context is not None and args.context < 0:
        raise ValueError("--context cannot be negative")
    if not args.path.strip():
        raise ValueError("--path cannot be empty")
    if args.reference_date:
        parse_reference_date(args.reference_date)


def parse_reference_date(value: str) -> datetime:
    """Parse a YYYY-MM-DD reference date as midnight UTC."""
    try:
        parsed = datetime.strptime(value, "%Y-%m-%d")
    except ValueError as e:
        raise ValueError(f"--reference-date must be YYYY-MM-DD, got {value!r}") from e
    return parsed.replace(tzinfo=timezone.utc)


def create_config(args: argparse.Namespace) -> RemoteConfig:
    """Create configuration from command line arguments and the environment."""
    return load_remote_config(
        base_url=args.url,
        token=args.token,
        api_version=args.api_version,
        timeout_seconds=args.timeout,
        max_retries=args.retries,
        context_lines=args.context,
    )


def process_file(
    config: RemoteConfig,
    project_id: int,
    commit_id: str,
    file_path: str,
    status: ChangeStatus,
    reference_time: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Run the attribution for one file and return the result payload."""
    commit = Commit(project=Project(id=project_id), id=commit_id)

    with RemoteClient(config) as client:
        engine = DiffAttributionEngine(
            client,
            reference_time=reference_time,
            context_lines=config.context_lines,
        )
        file = engine.diff_file(commit, file_path, status)

    serializer = ResultSerializer(config)
    return serializer.serialize_result(commit, file, status, reference_time)


def output_result(result: dict, output_path: Optional[str]) -> None:
    """Output result to stdout or file."""
    json_str = ResultSerializer().to_json_string(result)

    if output_path:
        Path(output_path).write_text(json_str, encoding="utf-8")
    else:
        print(json_str)


def main() -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()
    configure_logging(args.log_level)
    serializer = ResultSerializer()

    try:
        validate_args(args)
        config = create_config(args)
        reference_time = (
            parse_reference_date(args.reference_date) if args.reference_date else None
        )

        payload = process_file(
            config,
            args.project,
            args.commit,
            args.path,
            ChangeStatus.parse(args.status),
            reference_time,
        )
        output_result(serializer.create_success_envelope(payload), args.json)
        return 0

    except LineDeltaError as e:
        logger.info("Attribution rejected: %s", e.message)
        result = serializer.create_error_envelope(e.code, e.message, e.details)
        output_result(result, args.json)
        return 1

    except ValueError as e:
        result = serializer.create_error_envelope("INVALID_ARGUMENT", str(e))
        output_result(result, args.json)
        return 1

    except Exception as e:
        logger.exception("Unexpected error during attribution")
        result = serializer.create_error_envelope(
            "INTERNAL_ERROR",
            f"Internal error: {str(e)}",
            {"type": type(e).__name__},
        )
        output_result(result, args.json)
        return 1


if __name__ == "__main__":
    sys.exit(main())
