"""CLI configuration management for bytecodegen using pydantic-settings.

Holds the ordered contract table, artifact directory and output path.
Defaults reproduce the liquidator build; every value can be overridden
through ``BYTECODEGEN_*`` environment variables or a ``.env`` file.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bytecodegen.sdk.artifacts import resolve_artifact_path
from bytecodegen.sdk.errors import ConfigurationError
from bytecodegen.sdk.models import ContractEntry

DEFAULT_CONTRACTS = [
    "AaveFLTaker",
    "AaveLiquidator",
    "BatchLiquidator",
    "GhoFMTaker",
    "GhoLiquidator",
    "PriceHelper",
    "SiloFLTaker",
    "SiloLiquidator",
]


class ExporterConfig(BaseSettings):
    """Bytecode exporter configuration using pydantic-settings BaseSettings."""

    model_config = SettingsConfigDict(
        env_prefix='BYTECODEGEN_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore'
    )

    artifacts_dir: Path = Field(
        default=Path("forge-out"),
        description="Forge build output directory"
    )
    output_path: Path = Field(
        default=Path("src/bytecode/bytecode.generated.ts"),
        description="Generated TypeScript module"
    )
    contracts: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CONTRACTS),
        description="Contract names in export order"
    )

    @field_validator('contracts')
    @classmethod
    def validate_contracts(cls, v: list[str]) -> list[str]:
        """Validate the contract table is non-empty, unique and identifier-safe."""
        if not v:
            raise ValueError("At least one contract must be configured")
        seen = set()
        for name in v:
            if not name.isidentifier():
                raise ValueError(f"Invalid contract name: {name!r}")
            if name in seen:
                raise ValueError(f"Duplicate contract name: {name}")
            seen.add(name)
        return v

    def entries(self) -> list[ContractEntry]:
        """Build the ordered contract table."""
        return [
            ContractEntry(name=name, artifact_path=resolve_artifact_path(self.artifacts_dir, name))
            for name in self.contracts
        ]


def validate_config(config: ExporterConfig) -> None:
    """Validate configuration paths before a generation run."""
    if not config.artifacts_dir.is_dir():
        raise ConfigurationError(
            f"Artifacts directory not found: {config.artifacts_dir}. Run 'forge build' first."
        )
    if config.output_path.is_dir():
        raise ConfigurationError(f"Output path is a directory: {config.output_path}")
