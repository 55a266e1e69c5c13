"""Configuration management for linedelta."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class RemoteConfig:
    """Connection and diff settings for a remote GitLab instance."""

    # Required parameters
    base_url: str
    token: str

    # API options
    api_version: str = "v4"
    timeout_seconds: int = 30
    max_retries: int = 3

    # Diff options
    context_lines: int = 3

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.base_url:
            raise ValueError("base_url cannot be empty")
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        if not self.api_version:
            raise ValueError("api_version cannot be empty")
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        if self.max_retries < 0:
            raise ValueError("max_retries cannot be negative")
        if self.context_lines < 0:
            raise ValueError("context_lines cannot be negative")

    @property
    def headers(self) -> Dict[str, str]:
        """Get HTTP headers for authenticated API requests."""
        headers = {"Accept": "application/json"}
        if self.token:
            headers["PRIVATE-TOKEN"] = self.token
        return headers

    def api_url(self, resource_path: str) -> str:
        """Build the full URL for an API resource path."""
        base = self.base_url.rstrip("/")
        return f"{base}/api/{self.api_version}/{resource_path.lstrip('/')}"

    def to_provenance_dict(self) -> Dict[str, Any]:
        """Convert config to provenance dictionary for output, without the token."""
        return {
            "base_url": self.base_url,
            "api_version": self.api_version,
            "context_lines": self.context_lines,
        }
