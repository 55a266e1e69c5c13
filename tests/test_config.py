"""Tests for configuration and settings."""

import pytest

from linedelta import settings
from linedelta.config import RemoteConfig


class TestRemoteConfig:
    """Test RemoteConfig class."""

    def test_default_config(self):
        """Test default configuration values."""
        config = RemoteConfig(base_url="https://gitlab.example.com", token="secret")

        assert config.api_version == "v4"
        assert config.timeout_seconds == 30
        assert config.max_retries == 3
        assert config.context_lines == 3

    def test_headers(self):
        config = RemoteConfig(base_url="https://gitlab.example.com", token="secret")

        assert config.headers == {"Accept": "application/json", "PRIVATE-TOKEN": "secret"}

    def test_headers_without_token(self):
        config = RemoteConfig(base_url="https://gitlab.example.com", token="")

        assert "PRIVATE-TOKEN" not in config.headers

    @pytest.mark.parametrize(
        "base_url,resource,expected",
        [
            ("https://gitlab.example.com", "projects/1", "https://gitlab.example.com/api/v4/projects/1"),
            ("https://gitlab.example.com/", "/projects/1", "https://gitlab.example.com/api/v4/projects/1"),
            ("http://host/gitlab", "projects", "http://host/gitlab/api/v4/projects"),
        ],
    )
    def test_api_url(self, base_url, resource, expected):
        assert RemoteConfig(base_url=base_url, token="t").api_url(resource) == expected

    def test_provenance_omits_token(self):
        provenance = RemoteConfig(base_url="https://gitlab.example.com", token="secret").to_provenance_dict()

        assert provenance == {
            "base_url": "https://gitlab.example.com",
            "api_version": "v4",
            "context_lines": 3,
        }
        assert "secret" not in str(provenance)

    @pytest.mark.parametrize(
        "kwargs,message",
        [
            ({"base_url": ""}, "base_url cannot be empty"),
            ({"base_url": "gitlab.example.com"}, "base_url must start with"),
            ({"api_version": ""}, "api_version cannot be empty"),
            ({"timeout_seconds": 0}, "timeout_seconds must be positive"),
            ({"max_retries": -1}, "max_retries cannot be negative"),
            ({"context_lines": -1}, "context_lines cannot be negative"),
        ],
    )
    def test_validation(self, kwargs, message):
        values = {"base_url": "https://gitlab.example.com", "token": "t"}
        values.update(kwargs)

        with pytest.raises(ValueError, match=message):
            RemoteConfig(**values)


class TestSettings:
    """Test environment loading."""

    @pytest.fixture(autouse=True)
    def clear_cache(self):
        settings.get_remote_credentials.cache_clear()
        yield
        settings.get_remote_credentials.cache_clear()

    def test_credentials_from_environment(self, monkeypatch):
        monkeypatch.setenv("LINEDELTA_URL", "https://gitlab.example.com")
        monkeypatch.setenv("LINEDELTA_TOKEN", "secret")

        assert settings.get_remote_credentials() == ("https://gitlab.example.com", "secret")

    def test_load_remote_config(self, monkeypatch):
        monkeypatch.setenv("LINEDELTA_URL", "https://gitlab.example.com")
        monkeypatch.setenv("LINEDELTA_TOKEN", "secret")
        monkeypatch.setenv("LINEDELTA_API_VERSION", "v3")
        monkeypatch.setenv("LINEDELTA_TIMEOUT", "10")
        monkeypatch.setenv("LINEDELTA_MAX_RETRIES", "0")

        config = settings.load_remote_config()

        assert config.base_url == "https://gitlab.example.com"
        assert config.token == "secret"
        assert config.api_version == "v3"
        assert config.timeout_seconds == 10
        assert config.max_retries == 0

    def test_explicit_values_win(self, monkeypatch):
        monkeypatch.setenv("LINEDELTA_URL", "https://env.example.com")
        monkeypatch.setenv("LINEDELTA_TOKEN", "env-token")

        config = settings.load_remote_config("https://cli.example.com", "cli-token")

        assert config.base_url == "https://cli.example.com"
        assert config.token == "cli-token"

    def test_missing_url(self, monkeypatch):
        monkeypatch.delenv("LINEDELTA_URL", raising=False)
        monkeypatch.delenv("LINEDELTA_TOKEN", raising=False)

        with pytest.raises(ValueError, match="Remote URL not configured"):
            settings.load_remote_config()

    def test_explicit_tuning_wins(self, monkeypatch):
        monkeypatch.setenv("LINEDELTA_URL", "https://gitlab.example.com")
        monkeypatch.setenv("LINEDELTA_TIMEOUT", "10")
        monkeypatch.setenv("LINEDELTA_CONTEXT_LINES", "8")

        config = settings.load_remote_config(timeout_seconds=5, max_retries=1)

        assert config.timeout_seconds == 5
        assert config.max_retries == 1
        assert config.context_lines == 8
