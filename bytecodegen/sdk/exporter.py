"""Generated module rendering and atomic output.

Turns the ordered export list into TypeScript source and commits it to
disk in a single replace.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Iterable, Optional

from bytecodegen.sdk.artifacts import load_exports
from bytecodegen.sdk.errors import ConfigurationError, OutputWriteError
from bytecodegen.sdk.models import BytecodeExport, ContractEntry, GenerationResult

logger = logging.getLogger(__name__)

HEX_TYPE = "`0x${string}`"


def render_export_line(export: BytecodeExport) -> str:
    """Render one ``export const`` statement."""
    return f'export const {export.constant_name}: {HEX_TYPE} = "{export.bytecode}";'


def render_module(exports: Iterable[BytecodeExport]) -> str:
    """Render the full generated module, one line per export."""
    lines = [render_export_line(export) for export in exports]
    if not lines:
        raise ConfigurationError("No contracts configured")
    return "\n".join(lines) + "\n"


def _target_mode(path: Path) -> int:
    """Existing file's permission bits, or the umask default for a new file."""
    if path.exists():
        return stat.S_IMODE(path.stat().st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_atomic(path: Path, content: str) -> None:
    """Write ``content`` to ``path`` via temp file + replace.

    The parent directory must already exist. A symlinked ``path`` is written
    through to its target. The file keeps its previous permission bits, or
    gets the umask default when new. On failure the previous file is left as
    it was and the temp file is removed.
    """
    path = Path(path)
    if path.is_symlink():
        path = path.resolve()
    if not path.parent.is_dir():
        raise OutputWriteError(path, "output directory does not exist")

    tmp_path: Optional[Path] = None
    try:
        mode = _target_mode(path)
        fd, name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
        tmp_path = Path(name)
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
        tmp_path = None
    except OSError as e:
        raise OutputWriteError(path, f"cannot write output: {e}")
    finally:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()

    logger.debug("Wrote %d bytes to %s", len(content.encode("utf-8")), path)


def generate(entries: Iterable[ContractEntry], output_path: Path) -> GenerationResult:
    """Load all artifacts, render the module and write it.

    Args:
        entries: Ordered contract table
        output_path: Generated file location, overwritten on success

    Returns:
        Summary of the written file
    """
    exports = load_exports(entries)
    content = render_module(exports)
    write_atomic(output_path, content)
    return GenerationResult(
        output_path=Path(output_path),
        constants=[export.constant_name for export in exports],
        size=len(content.encode("utf-8")),
    )
