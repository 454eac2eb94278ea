"""Custom exceptions for dep-doc."""

from __future__ import annotations

from pathlib import Path


class DepDocError(Exception):
    """Base exception for all dep-doc errors."""


class NoManifestFoundError(DepDocError):
    """Raised when neither package.json nor Cargo.toml exists in the base directory."""

    def __init__(self, base_dir: Path, labels: list[str]):
        self.base_dir = base_dir
        self.labels = labels
        super().__init__(f"No {' or '.join(labels)} found.")


class ManifestParseError(DepDocError):
    """Raised when a manifest cannot be read or is not valid JSON/TOML."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse {path}: {reason}")


class DocFileNotFoundError(DepDocError):
    """Raised when dep-doc.toml does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"{path} not found")


class DocParseError(DepDocError):
    """Raised when dep-doc.toml is not valid TOML."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse {path}: {reason}")


class SchemaValidationError(DepDocError):
    """Raised when dep-doc.toml parses but violates the entry schema.

    ``issues`` holds one ``(dotted_path, message)`` pair per violation.
    """

    def __init__(self, issues: list[tuple[str, str]]):
        self.issues = issues
        lines = [f"- {path}: {message}" for path, message in issues]
        super().__init__("Invalid dep-doc schema:\n" + "\n".join(lines))
