"""Tests for file policies module."""

import pytest

from linedelta.policies import FilePolicies


class TestFilePolicies:
    """Test FilePolicies class."""

    def test_is_lockfile(self):
        """Test lockfile detection."""
        assert FilePolicies.is_lockfile("package-lock.json") is True
        assert FilePolicies.is_lockfile("frontend/yarn.lock") is True
        assert FilePolicies.is_lockfile("backend/poetry.lock") is True
        assert FilePolicies.is_lockfile("some/deep/path/Cargo.lock") is True

        assert FilePolicies.is_lockfile("package.json") is False
        assert FilePolicies.is_lockfile("requirements.txt") is False

    def test_is_minified(self):
        """Test minified file detection."""
        assert FilePolicies.is_minified("dist/app.min.js") is True
        assert FilePolicies.is_minified("assets/style.min.css") is True

        assert FilePolicies.is_minified("script.js") is False
        assert FilePolicies.is_minified("admin.js") is False

    def test_is_source_map(self):
        """Test source map detection."""
        assert FilePolicies.is_source_map("app.js.map") is True
        assert FilePolicies.is_source_map("style.css.map") is True

        assert FilePolicies.is_source_map("mapper.py") is False

    def test_is_vendored(self):
        """Test vendored and build directory detection."""
        assert FilePolicies.is_vendored("node_modules/left-pad/index.js") is True
        assert FilePolicies.is_vendored("web/vendor/jquery.js") is True
        assert FilePolicies.is_vendored("build/output.c") is True

        assert FilePolicies.is_vendored("src/vendor.py") is False
        assert FilePolicies.is_vendored("src/builder/main.go") is False

    def test_is_binary(self):
        """Test binary extension detection."""
        assert FilePolicies.is_binary("docs/logo.PNG") is True
        assert FilePolicies.is_binary("lib/native.so") is True

        assert FilePolicies.is_binary("src/image.py") is False

    @pytest.mark.parametrize(
        "path,skill",
        [
            ("src/app.py", "python"),
            ("web/App.tsx", "typescript"),
            ("lib/util.js", "javascript"),
            ("cmd/main.go", "go"),
            ("README.md", "markdown"),
            ("deploy/Dockerfile", "docker"),
            (".gitlab-ci.yml", "ci"),
            ("config/settings.YAML", "yaml"),
            ("notes.xyz", None),
            ("LICENSE", None),
        ],
    )
    def test_get_skill(self, path, skill):
        """Test skill classification."""
        assert FilePolicies.get_skill(path) == skill

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("src/app.py", True),
            ("lib/util.js", True),
            ("dist/app.min.js", False),
            ("node_modules/lib/index.js", False),
            ("package-lock.json", False),
            ("assets/logo.png", False),
            ("LICENSE", False),
            ("", False),
            ("   ", False),
        ],
    )
    def test_is_processable(self, path, expected):
        """Processable paths are not ignored and have a skill."""
        assert FilePolicies.is_processable(path) is expected

    def test_get_file_category(self):
        """Test file category classification."""
        assert FilePolicies.get_file_category("yarn.lock") == "lockfile"
        assert FilePolicies.get_file_category("app.min.js") == "minified"
        assert FilePolicies.get_file_category("app.js.map") == "source_map"
        assert FilePolicies.get_file_category("vendor/lib.rb") == "vendored"
        assert FilePolicies.get_file_category("font.woff2") == "binary"
        assert FilePolicies.get_file_category("main.py") == "regular"
