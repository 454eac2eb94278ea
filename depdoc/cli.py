"""CLI entry point: dep-doc.

Usage:
    dep-doc                     # check the current directory (or $DEPDOC_BASE_DIR)
    dep-doc --run --base-dir .  # same, explicit
    dep-doc --json              # print the verdict as JSON
    dep-doc --version
"""

from __future__ import annotations

import json
import sys
from dataclasses import replace
from pathlib import Path

import click

from depdoc import __version__
from depdoc.core.config import Settings
from depdoc.core.logging import setup_logging
from depdoc.docfile import DEP_DOC_FILENAME
from depdoc.models import DepDocResult
from depdoc.reconciler import check_dep_doc


def _error(msg: str) -> None:
    click.echo(f"[dep-doc] ERROR: {msg}", err=True)


def _report(result: DepDocResult) -> int:
    """Print a human-readable report and return the exit code."""
    if result.ok:
        click.secho(f"🎖️ Success! dep-doc valid ({result.label})", fg="bright_white")
        return 0

    if result.errors:
        for e in result.errors:
            _error(e)
        return 1

    _error(f"dep-doc failed ({result.label}):")
    if result.missing:
        _error(f"  Missing in {DEP_DOC_FILENAME}:")
        for name in result.missing:
            _error(f"    - {name}")
    if result.extra:
        _error(f"  Present in {DEP_DOC_FILENAME} but not in manifest:")
        for name in result.extra:
            _error(f"    - {name}")
    if result.scope_mismatches:
        _error(f"  Scope mismatches between {DEP_DOC_FILENAME} and manifest:")
        for m in result.scope_mismatches:
            _error(
                f"    - {m.name}: {DEP_DOC_FILENAME}={m.dep_doc_scope.value}, "
                f"manifest={m.manifest_scope.value}"
            )
    return 1


@click.command()
@click.option("--run", "run_check", is_flag=True, help="Run the check (default action)")
@click.option("--version", "show_version", is_flag=True, help="Print the version and exit")
@click.option(
    "--base-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project directory (default: $DEPDOC_BASE_DIR or the current directory)",
)
@click.option("--json", "as_json", is_flag=True, help="Output the verdict as JSON")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    run_check: bool,
    show_version: bool,
    base_dir: Path | None,
    as_json: bool,
    verbose: bool,
) -> None:
    """Check that dep-doc.toml documents every manifest dependency."""
    if show_version:
        click.echo(f"version: {__version__}")
        sys.exit(0)

    settings = Settings.from_env()
    if base_dir is not None:
        settings = replace(settings, base_dir=base_dir)
    if verbose:
        settings = replace(settings, log_level="DEBUG")
    setup_logging(settings.log_level, settings.log_format)

    result = check_dep_doc(settings.base_dir)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)

    sys.exit(_report(result))
