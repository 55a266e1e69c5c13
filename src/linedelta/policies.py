"""File path policies: which files are attributed and under which skill."""

import os
from pathlib import PurePosixPath
from typing import Dict, Optional


class FilePolicies:
    """Ignore rules and skill classification for repository paths."""

    # Lockfiles and other generated manifests
    LOCKFILES = {
        # JavaScript/Node.js
        "package-lock.json",
        "yarn.lock",
        "pnpm-lock.yaml",
        "npm-shrinkwrap.json",
        # Python
        "poetry.lock",
        "Pipfile.lock",
        # Java
        "gradle.lockfile",
        # Ruby
        "Gemfile.lock",
        # PHP
        "composer.lock",
        # Rust
        "Cargo.lock",
        # Go
        "go.sum",
        # Swift
        "Package.resolved",
        # Elixir
        "mix.lock",
        # .NET
        "packages.lock.json",
    }

    MINIFIED_EXTENSIONS = {".min.js", ".min.css"}
    MAP_EXTENSIONS = {".map", ".js.map", ".css.map"}

    # Directories holding vendored or build output
    IGNORED_DIRECTORIES = {
        "node_modules",
        "bower_components",
        "vendor",
        "dist",
        "build",
        "coverage",
        "__pycache__",
        ".git",
    }

    BINARY_EXTENSIONS = {
        # Images
        ".png", ".jpg", ".jpeg", ".gif", ".bmp", ".ico", ".webp", ".psd",
        # Fonts
        ".ttf", ".otf", ".woff", ".woff2", ".eot",
        # Archives
        ".zip", ".gz", ".tgz", ".bz2", ".xz", ".7z", ".rar", ".jar", ".war",
        # Compiled objects
        ".exe", ".dll", ".so", ".dylib", ".o", ".a", ".class", ".pyc",
        # Media and documents
        ".mp3", ".mp4", ".mov", ".avi", ".wav", ".pdf",
    }

    SKILLS_BY_EXTENSION: Dict[str, str] = {
        ".py": "python",
        ".js": "javascript",
        ".jsx": "javascript",
        ".mjs": "javascript",
        ".ts": "typescript",
        ".tsx": "typescript",
        ".java": "java",
        ".kt": "kotlin",
        ".go": "go",
        ".rb": "ruby",
        ".php": "php",
        ".rs": "rust",
        ".c": "c",
        ".h": "c",
        ".cpp": "cpp",
        ".cc": "cpp",
        ".hpp": "cpp",
        ".cs": "csharp",
        ".swift": "swift",
        ".scala": "scala",
        ".sh": "shell",
        ".bash": "shell",
        ".sql": "sql",
        ".html": "html",
        ".htm": "html",
        ".css": "css",
        ".scss": "css",
        ".less": "css",
        ".vue": "vue",
        ".md": "markdown",
        ".rst": "documentation",
        ".yml": "yaml",
        ".yaml": "yaml",
        ".json": "json",
        ".xml": "xml",
        ".toml": "configuration",
        ".ini": "configuration",
        ".cfg": "configuration",
    }

    SKILLS_BY_FILENAME: Dict[str, str] = {
        "Dockerfile": "docker",
        "Makefile": "make",
        "Jenkinsfile": "ci",
        ".gitlab-ci.yml": "ci",
    }

    @classmethod
    def is_lockfile(cls, file_path: str) -> bool:
        """Check if file is a lockfile."""
        return os.path.basename(file_path) in cls.LOCKFILES

    @classmethod
    def is_minified(cls, file_path: str) -> bool:
        """Check if file is minified."""
        name = PurePosixPath(file_path).name
        return any(name.endswith(ext) for ext in cls.MINIFIED_EXTENSIONS)

    @classmethod
    def is_source_map(cls, file_path: str) -> bool:
        """Check if file is a source map."""
        name = PurePosixPath(file_path).name
        return any(name.endswith(ext) for ext in cls.MAP_EXTENSIONS)

    @classmethod
    def is_vendored(cls, file_path: str) -> bool:
        """Check if any parent directory is a vendored or build directory."""
        parents = PurePosixPath(file_path).parts[:-1]
        return any(part in cls.IGNORED_DIRECTORIES for part in parents)

    @classmethod
    def is_binary(cls, file_path: str) -> bool:
        """Check if the extension marks a binary file."""
        return PurePosixPath(file_path).suffix.lower() in cls.BINARY_EXTENSIONS

    @classmethod
    def is_ignored(cls, file_path: str) -> bool:
        """Check if the path is excluded from attribution."""
        return (
            cls.is_lockfile(file_path)
            or cls.is_minified(file_path)
            or cls.is_source_map(file_path)
            or cls.is_vendored(file_path)
            or cls.is_binary(file_path)
        )

    @classmethod
    def get_skill(cls, file_path: str) -> Optional[str]:
        """Return the skill a path counts towards, or None if unrecognized."""
        path = PurePosixPath(file_path)
        if path.name in cls.SKILLS_BY_FILENAME:
            return cls.SKILLS_BY_FILENAME[path.name]
        return cls.SKILLS_BY_EXTENSION.get(path.suffix.lower())

    @classmethod
    def is_processable(cls, file_path: str) -> bool:
        """A path is attributed only when not ignored and it has a skill."""
        if not file_path or not file_path.strip():
            return False
        return not cls.is_ignored(file_path) and cls.get_skill(file_path) is not None

    @classmethod
    def get_file_category(cls, file_path: str) -> str:
        """Get category of file for notes/logging."""
        if cls.is_lockfile(file_path):
            return "lockfile"
        elif cls.is_minified(file_path):
            return "minified"
        elif cls.is_source_map(file_path):
            return "source_map"
        elif cls.is_vendored(file_path):
            return "vendored"
        elif cls.is_binary(file_path):
            return "binary"
        else:
            return "regular"
