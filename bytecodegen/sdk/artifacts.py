"""Artifact loading and bytecode extraction.

Reads forge build artifacts (``<Name>.sol/<Name>.json``) and pulls the
deployment bytecode out of ``bytecode.object``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from bytecodegen.sdk.errors import (
    ArtifactMalformedError,
    ArtifactNotFoundError,
    MissingBytecodeError,
)
from bytecodegen.sdk.models import Artifact, BytecodeExport, ContractEntry

logger = logging.getLogger(__name__)

HEX_PREFIX = "0x"

# Characters that would break out of a double-quoted TS string literal.
_FORBIDDEN_CHARS = frozenset('"\\`')


def resolve_artifact_path(artifacts_dir: Path, contract_name: str) -> Path:
    """Return the forge artifact location for a contract."""
    return Path(artifacts_dir) / f"{contract_name}.sol" / f"{contract_name}.json"


def load_artifact(entry: ContractEntry) -> Artifact:
    """Read and parse one artifact file.

    Args:
        entry: Contract table row naming the artifact

    Returns:
        Parsed artifact record

    Raises:
        ArtifactNotFoundError: file missing or unreadable
        ArtifactMalformedError: content is not a JSON object
    """
    path = entry.artifact_path
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ArtifactNotFoundError(entry.name, path, "artifact file not found")
    except (OSError, UnicodeDecodeError) as e:
        raise ArtifactNotFoundError(entry.name, path, f"cannot read artifact: {e}")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ArtifactMalformedError(entry.name, path, f"invalid JSON: {e}")

    if not isinstance(data, dict):
        raise ArtifactMalformedError(entry.name, path, "artifact must be a JSON object")

    logger.debug("Loaded artifact %s from %s", entry.name, path)
    return Artifact(entry=entry, data=data)


def extract_bytecode(artifact: Artifact) -> str:
    """Return ``bytecode.object`` verbatim after shape checks."""
    entry = artifact.entry
    section = artifact.data.get("bytecode")
    if section is None:
        raise MissingBytecodeError(entry.name, entry.artifact_path, "missing 'bytecode' field")
    if not isinstance(section, dict):
        raise ArtifactMalformedError(entry.name, entry.artifact_path, "'bytecode' must be an object")

    value = section.get("object")
    if value is None:
        raise MissingBytecodeError(entry.name, entry.artifact_path, "missing 'bytecode.object' field")
    if not isinstance(value, str):
        raise MissingBytecodeError(entry.name, entry.artifact_path, "'bytecode.object' must be a string")
    if value in ("", HEX_PREFIX):
        raise MissingBytecodeError(entry.name, entry.artifact_path, "'bytecode.object' is empty")

    _check_literal_safe(entry, value)
    return value


def _check_literal_safe(entry: ContractEntry, value: str) -> None:
    """Reject values that cannot be emitted as a 0x-typed string literal."""
    if not value.startswith(HEX_PREFIX):
        raise ArtifactMalformedError(
            entry.name, entry.artifact_path, f"bytecode must start with '{HEX_PREFIX}'"
        )
    for ch in value:
        if ch in _FORBIDDEN_CHARS or ch.isspace() or not ch.isprintable():
            raise ArtifactMalformedError(
                entry.name, entry.artifact_path, f"bytecode contains invalid character {ch!r}"
            )


def load_exports(entries: Iterable[ContractEntry]) -> list[BytecodeExport]:
    """Load every artifact in declared order and build the export list.

    Any failure propagates before the caller gets a partial list.
    """
    exports = []
    for entry in entries:
        artifact = load_artifact(entry)
        bytecode = extract_bytecode(artifact)
        exports.append(BytecodeExport(constant_name=entry.constant_name, bytecode=bytecode))
    return exports
