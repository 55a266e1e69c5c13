"""Application-wide settings and environment loading."""

import logging
import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

from .config import RemoteConfig

logger = logging.getLogger(__name__)

load_dotenv()
logger.debug("Environment variables loaded from .env if present")


@lru_cache(maxsize=1)
def get_remote_credentials() -> tuple[Optional[str], Optional[str]]:
    """Return the remote base URL and access token from environment variables."""
    url = os.getenv("LINEDELTA_URL")
    token = os.getenv("LINEDELTA_TOKEN")
    if url and token:
        logger.debug("Remote credentials retrieved", extra={"url": url})
    else:
        logger.debug("Remote credentials not fully configured", extra={"url": url})
    return url, token


def load_remote_config(
    base_url: Optional[str] = None,
    token: Optional[str] = None,
    api_version: Optional[str] = None,
    timeout_seconds: Optional[int] = None,
    max_retries: Optional[int] = None,
    context_lines: Optional[int] = None,
) -> RemoteConfig:
    """Build a RemoteConfig; explicit values win over the environment."""
    env_url, env_token = get_remote_credentials()
    base_url = base_url or env_url
    token = token or env_token
    if not base_url:
        raise ValueError("Remote URL not configured (set LINEDELTA_URL or pass --url)")

    if api_version is None:
        api_version = os.getenv("LINEDELTA_API_VERSION", "v4")
    if timeout_seconds is None:
        timeout_seconds = int(os.getenv("LINEDELTA_TIMEOUT", "30"))
    if max_retries is None:
        max_retries = int(os.getenv("LINEDELTA_MAX_RETRIES", "3"))
    if context_lines is None:
        context_lines = int(os.getenv("LINEDELTA_CONTEXT_LINES", "3"))

    return RemoteConfig(
        base_url=base_url,
        token=token or "",
        api_version=api_version,
        timeout_seconds=timeout_seconds,
        max_retries=max_retries,
        context_lines=context_lines,
    )
