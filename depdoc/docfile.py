"""dep-doc.toml loading and strict schema validation."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import structlog
from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, field_validator

from depdoc.exceptions import DocFileNotFoundError, DocParseError, SchemaValidationError
from depdoc.models import DocInventory, Scope

log = structlog.get_logger("depdoc.docfile")

DEP_DOC_FILENAME = "dep-doc.toml"

NonEmptyStr = Annotated[StrictStr, Field(min_length=1)]


class DepDocEntry(BaseModel):
    """One ``[[dependency]]`` table. Unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")

    name: NonEmptyStr
    purpose: NonEmptyStr
    scope: Scope

    @field_validator("name", mode="before")
    @classmethod
    def _strip_whitespace(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v


class DepDocFile(BaseModel):
    dependency: list[DepDocEntry] = Field(min_length=1)


def _format_loc(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) or "(root)"


def validate_dep_doc(data: dict) -> DepDocFile:
    """Validate parsed TOML against the dep-doc schema.

    Raises :class:`SchemaValidationError` with one ``(path, message)`` issue
    per violation, e.g. ``("dependency.0.scope", "Input should be ...")``.
    """
    try:
        return DepDocFile.model_validate(data)
    except ValidationError as exc:
        issues = [(_format_loc(err["loc"]), err["msg"]) for err in exc.errors()]
        raise SchemaValidationError(issues) from exc


def load_dep_doc(path: Path) -> DocInventory:
    """Load *path*, validate it and collapse entries by name (later entries win)."""
    if not path.is_file():
        raise DocFileNotFoundError(path)
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise DocParseError(path, f"invalid TOML: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise DocParseError(path, str(exc)) from exc

    doc = validate_dep_doc(data)

    scopes: dict[str, Scope] = {}
    for entry in doc.dependency:
        prev = scopes.get(entry.name)
        if prev is not None and prev is not entry.scope:
            log.debug(
                "docfile.duplicate_overwritten",
                name=entry.name,
                old_scope=prev.value,
                new_scope=entry.scope.value,
            )
        scopes[entry.name] = entry.scope

    log.debug("docfile.loaded", path=str(path), entries=len(doc.dependency), names=len(scopes))
    return DocInventory(names=tuple(sorted(scopes)), scopes=scopes)
