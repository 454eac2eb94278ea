"""Reader for Node package.json files."""

from __future__ import annotations

import json
from pathlib import Path

from depdoc.exceptions import ManifestParseError
from depdoc.manifests.registry import assign_scope, register_reader
from depdoc.models import ManifestInventory, Scope

_DEP_SECTIONS = (
    ("dependencies", Scope.PROD),
    ("devDependencies", Scope.DEV),
)


class PackageJsonReader:
    label = "package.json"
    priority = 0

    def read(self, file_path: Path) -> ManifestInventory:
        try:
            data = json.loads(file_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            raise ManifestParseError(file_path, str(exc)) from exc
        except json.JSONDecodeError as exc:
            raise ManifestParseError(file_path, f"invalid JSON: {exc}") from exc

        if not isinstance(data, dict):
            raise ManifestParseError(file_path, "top-level value must be an object")

        scope_by_name: dict[str, Scope] = {}
        for section, scope in _DEP_SECTIONS:
            table = data.get(section)
            if table is None:
                continue
            if not isinstance(table, dict):
                raise ManifestParseError(file_path, f"'{section}' must be an object")
            for name in table:
                assign_scope(scope_by_name, name, scope)

        return ManifestInventory(
            label=self.label,
            names=tuple(sorted(scope_by_name)),
            scope_by_name=scope_by_name,
        )


register_reader(PackageJsonReader())
