"""Test helper functions for building forge artifact trees.

Provides reusable fixtures-in-code for exporter tests so each test only
states the bytecode it cares about.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from bytecodegen.sdk.artifacts import resolve_artifact_path
from bytecodegen.sdk.models import ContractEntry


def write_artifact(artifacts_dir: Path, name: str, bytecode: Any = None, raw: str | None = None) -> Path:
    """Write a forge-style artifact for ``name`` and return its path.

    ``bytecode`` defaults to a short deterministic hex string derived from the
    name. Pass ``raw`` to write arbitrary file content instead.
    """
    path = resolve_artifact_path(artifacts_dir, name)
    path.parent.mkdir(parents=True, exist_ok=True)
    if raw is not None:
        path.write_text(raw)
        return path
    if bytecode is None:
        bytecode = "0x6080" + name.encode("utf-8").hex()
    data = {
        "abi": [],
        "bytecode": {"object": bytecode, "linkReferences": {}},
        "deployedBytecode": {"object": "0x00"},
    }
    path.write_text(json.dumps(data))
    return path


def build_tree(artifacts_dir: Path, names: list[str]) -> list[ContractEntry]:
    """Write one artifact per name and return the ordered contract table."""
    for name in names:
        write_artifact(artifacts_dir, name)
    return make_entries(artifacts_dir, names)


def make_entries(artifacts_dir: Path, names: list[str]) -> list[ContractEntry]:
    """Build a contract table without touching the filesystem."""
    return [
        ContractEntry(name=name, artifact_path=resolve_artifact_path(artifacts_dir, name))
        for name in names
    ]
