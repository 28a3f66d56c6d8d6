"""Exception taxonomy for bytecode export.

Every failure is fatal to a generation run; none of these are recovered
from inside the library.
"""

from __future__ import annotations

from pathlib import Path


class BytecodeExportError(Exception):
    """Base exception for the bytecode exporter."""
    pass


class ArtifactError(BytecodeExportError):
    """Failure tied to a single contract artifact."""

    def __init__(self, contract_name: str, path: Path, message: str):
        self.contract_name = contract_name
        self.path = path
        self.message = message
        super().__init__(f"{contract_name} ({path}): {message}")


class ArtifactNotFoundError(ArtifactError):
    """Artifact file is missing or unreadable."""
    pass


class ArtifactMalformedError(ArtifactError):
    """Artifact is not the expected JSON shape."""
    pass


class MissingBytecodeError(ArtifactError):
    """Artifact has no usable bytecode.object value."""
    pass


class ConfigurationError(BytecodeExportError):
    """Invalid contract table or paths."""
    pass


class OutputWriteError(BytecodeExportError):
    """Generated file could not be written."""

    def __init__(self, path: Path, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")
