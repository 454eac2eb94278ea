"""Reconciler — compare dep-doc.toml against the project manifest."""

from __future__ import annotations

import os
from pathlib import Path

import structlog

import depdoc.manifests  # noqa: F401  (registers readers)
from depdoc.docfile import DEP_DOC_FILENAME, load_dep_doc
from depdoc.exceptions import DepDocError
from depdoc.manifests.package_json import PackageJsonReader
from depdoc.manifests.registry import detect_manifest, find_reader
from depdoc.models import DepDocResult, DocInventory, ManifestInventory, ScopeMismatch

log = structlog.get_logger("depdoc.reconciler")

# Label reported when no manifest exists at all.
DEFAULT_LABEL = PackageJsonReader.label


def _label_for(base_dir: Path) -> str:
    try:
        reader = find_reader(base_dir)
    except OSError:
        return DEFAULT_LABEL
    return reader.label if reader is not None else DEFAULT_LABEL


def diff(manifest: ManifestInventory, doc: DocInventory) -> DepDocResult:
    """Three-way comparison of a manifest inventory and documented dependencies."""
    doc_names = set(doc.names)
    manifest_names = set(manifest.names)

    missing = [n for n in manifest.names if n not in doc_names]
    extra = [n for n in doc.names if n not in manifest_names]

    scope_mismatches: list[ScopeMismatch] = []
    for name in doc.names:
        manifest_scope = manifest.scope_by_name.get(name)
        if manifest_scope is None:
            continue  # reported via extra
        if manifest_scope is not doc.scopes[name]:
            scope_mismatches.append(
                ScopeMismatch(
                    name=name,
                    manifest_scope=manifest_scope,
                    dep_doc_scope=doc.scopes[name],
                )
            )

    return DepDocResult(
        ok=not missing and not extra and not scope_mismatches,
        label=manifest.label,
        missing=missing,
        extra=extra,
        scope_mismatches=scope_mismatches,
    )


def check_dep_doc(base_dir: str | os.PathLike[str]) -> DepDocResult:
    """Check that dep-doc.toml in *base_dir* documents exactly the manifest's dependencies.

    Never raises for dep-doc or I/O failures: they are returned in
    ``DepDocResult.errors`` with ``ok=False`` and empty diff lists.
    """
    base = Path(base_dir)
    try:
        reader = detect_manifest(base)
        log.debug("reconciler.manifest_detected", base_dir=str(base), label=reader.label)
        doc = load_dep_doc(base / DEP_DOC_FILENAME)
        manifest = reader.read(base / reader.label)
    except (DepDocError, OSError) as exc:
        log.info("reconciler.failed", base_dir=str(base), error_type=type(exc).__name__)
        return DepDocResult(ok=False, label=_label_for(base), errors=[str(exc)])

    result = diff(manifest, doc)
    log.info(
        "reconciler.done",
        label=result.label,
        ok=result.ok,
        missing=len(result.missing),
        extra=len(result.extra),
        scope_mismatches=len(result.scope_mismatches),
    )
    return result
