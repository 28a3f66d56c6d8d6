#!/usr/bin/env python3
"""Regenerate the TypeScript bytecode module from forge build output.

Usage: python -m bytecodegen.scripts.generate_bytecode
Takes no arguments; paths and contract list come from ExporterConfig.
"""

from __future__ import annotations

import sys

from bytecodegen.cli.config import ExporterConfig, validate_config
from bytecodegen.sdk.errors import BytecodeExportError
from bytecodegen.sdk.exporter import generate


def main() -> int:
    try:
        config = ExporterConfig()
        validate_config(config)
        generate(config.entries(), config.output_path)
        return 0
    except BytecodeExportError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
