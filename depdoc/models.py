"""Data models for dep-doc reconciliation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


class Scope(Enum):
    """Where a dependency is used: production, development-only or build-only."""

    PROD = "prod"
    DEV = "dev"
    BUILD = "build"


@dataclass(frozen=True)
class ManifestInventory:
    """Dependencies declared by one manifest file. Read-only once built."""

    label: str  # "package.json" | "Cargo.toml"
    names: tuple[str, ...]  # sorted
    scope_by_name: Mapping[str, Scope] = field(hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", tuple(self.names))
        object.__setattr__(self, "scope_by_name", MappingProxyType(dict(self.scope_by_name)))


@dataclass(frozen=True)
class DocInventory:
    """Dependencies declared in dep-doc.toml, deduplicated by name. Read-only once built."""

    names: tuple[str, ...]  # sorted
    scopes: Mapping[str, Scope] = field(hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", tuple(self.names))
        object.__setattr__(self, "scopes", MappingProxyType(dict(self.scopes)))


@dataclass
class ScopeMismatch:
    name: str
    manifest_scope: Scope
    dep_doc_scope: Scope


@dataclass
class DepDocResult:
    """Verdict of one reconciliation run.

    ``errors`` is ``None`` when the check ran to completion. When it is set,
    the three diff lists are always empty.
    """

    ok: bool
    label: str
    missing: list[str] = field(default_factory=list)
    extra: list[str] = field(default_factory=list)
    scope_mismatches: list[ScopeMismatch] = field(default_factory=list)
    errors: list[str] | None = None

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation (camelCase keys, scope values as strings)."""
        data: dict[str, Any] = {
            "ok": self.ok,
            "label": self.label,
            "missing": list(self.missing),
            "extra": list(self.extra),
            "scopeMismatches": [
                {
                    "name": m.name,
                    "manifestScope": m.manifest_scope.value,
                    "depDocScope": m.dep_doc_scope.value,
                }
                for m in self.scope_mismatches
            ],
        }
        if self.errors is not None:
            data["errors"] = list(self.errors)
        return data
