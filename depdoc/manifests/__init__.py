"""Manifest readers — auto-registered on import."""

from depdoc.manifests import (
    cargo_toml,  # noqa: F401
    package_json,  # noqa: F401
)
from depdoc.manifests.registry import (
    READER_REGISTRY,
    ManifestReader,
    detect_manifest,
    find_reader,
)

__all__ = ["READER_REGISTRY", "ManifestReader", "detect_manifest", "find_reader"]
