"""Pydantic models for bytecode export data structures.

Provides typed records for the contract table, loaded artifacts and the
exports rendered into the generated module.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ContractEntry(BaseModel):
    """One row of the ordered contract table."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Contract name, used as constant prefix")
    artifact_path: Path = Field(..., description="Path to the build artifact JSON")

    @property
    def constant_name(self) -> str:
        return f"{self.name}_bytecode"


class Artifact(BaseModel):
    """Parsed build artifact for a single contract."""

    entry: ContractEntry
    data: dict[str, Any] = Field(..., description="Raw artifact JSON object")


class BytecodeExport(BaseModel):
    """A constant to be written into the generated module."""

    model_config = ConfigDict(frozen=True)

    constant_name: str = Field(..., description="Exported constant identifier")
    bytecode: str = Field(..., description="0x-prefixed hex string, verbatim")


class GenerationResult(BaseModel):
    """Outcome of a successful generation run."""

    output_path: Path
    constants: list[str] = Field(default_factory=list)
    size: int = Field(default=0, description="Bytes written")
