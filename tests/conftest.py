"""Shared pytest fixtures for dep-doc tests."""

from __future__ import annotations

import json
import textwrap
from pathlib import Path

import pytest


def write_file(path: Path, content: str) -> Path:
    path.write_text(textwrap.dedent(content).strip() + "\n")
    return path


@pytest.fixture
def write_package_json(tmp_path):
    def _write(dependencies: dict | None = None, dev_dependencies: dict | None = None, **extra):
        data: dict = {"name": "demo", "version": "1.0.0", **extra}
        if dependencies is not None:
            data["dependencies"] = dependencies
        if dev_dependencies is not None:
            data["devDependencies"] = dev_dependencies
        path = tmp_path / "package.json"
        path.write_text(json.dumps(data, indent=2))
        return path

    return _write


@pytest.fixture
def write_cargo_toml(tmp_path):
    def _write(content: str):
        return write_file(tmp_path / "Cargo.toml", content)

    return _write


@pytest.fixture
def write_dep_doc(tmp_path):
    def _write(content: str):
        return write_file(tmp_path / "dep-doc.toml", content)

    return _write


@pytest.fixture
def write_dep_doc_entries(write_dep_doc):
    """Write ``(name, scope)`` pairs as ``[[dependency]]`` tables."""

    def _write(*entries: tuple[str, str]):
        blocks = [
            f'[[dependency]]\nname = "{name}"\npurpose = "Used for {name}"\nscope = "{scope}"\n'
            for name, scope in entries
        ]
        return write_dep_doc("\n".join(blocks))

    return _write
