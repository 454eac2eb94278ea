"""Reader for Rust Cargo.toml files."""

from __future__ import annotations

import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from depdoc.exceptions import ManifestParseError
from depdoc.manifests.registry import assign_scope, register_reader
from depdoc.models import ManifestInventory, Scope

# dev-dependencies must come before build-dependencies: on a dev/build
# collision the first assignment is kept.
_DEP_SECTIONS = (
    ("dependencies", Scope.PROD),
    ("dev-dependencies", Scope.DEV),
    ("build-dependencies", Scope.BUILD),
)


class CargoTomlReader:
    label = "Cargo.toml"
    priority = 10

    def read(self, file_path: Path) -> ManifestInventory:
        try:
            data = tomllib.loads(file_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            raise ManifestParseError(file_path, str(exc)) from exc
        except tomllib.TOMLDecodeError as exc:
            raise ManifestParseError(file_path, f"invalid TOML: {exc}") from exc

        scope_by_name: dict[str, Scope] = {}
        for section, scope in _DEP_SECTIONS:
            # Values are version strings or tables; only the key matters.
            table = data.get(section, {})
            if not isinstance(table, dict):
                raise ManifestParseError(file_path, f"[{section}] must be a table")
            for name in table:
                assign_scope(scope_by_name, name, scope)

        return ManifestInventory(
            label=self.label,
            names=tuple(sorted(scope_by_name)),
            scope_by_name=scope_by_name,
        )


register_reader(CargoTomlReader())
