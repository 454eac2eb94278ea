"""Reader registry — detect which manifest a project uses."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from depdoc.exceptions import NoManifestFoundError
from depdoc.models import ManifestInventory, Scope


@runtime_checkable
class ManifestReader(Protocol):
    """Interface that every manifest reader must satisfy."""

    label: str  # manifest file name, also used as the verdict label
    priority: int  # lower is detected first

    def read(self, file_path: Path) -> ManifestInventory: ...


READER_REGISTRY: dict[str, ManifestReader] = {}


def register_reader(reader: ManifestReader) -> None:
    """Register a reader instance by its label."""
    READER_REGISTRY[reader.label] = reader


def readers_by_priority() -> list[ManifestReader]:
    return sorted(READER_REGISTRY.values(), key=lambda r: r.priority)


def find_reader(base_dir: Path) -> ManifestReader | None:
    """Return the first registered reader whose manifest exists in *base_dir*."""
    for reader in readers_by_priority():
        if (base_dir / reader.label).is_file():
            return reader
    return None


def detect_manifest(base_dir: Path) -> ManifestReader:
    """Like :func:`find_reader` but raises when no manifest is present."""
    reader = find_reader(base_dir)
    if reader is None:
        raise NoManifestFoundError(base_dir, [r.label for r in readers_by_priority()])
    return reader


def assign_scope(scope_by_name: dict[str, Scope], name: str, scope: Scope) -> None:
    """Record *scope* for *name*: prod always overwrites, other scopes only fill gaps."""
    if scope is Scope.PROD or name not in scope_by_name:
        scope_by_name[name] = scope
