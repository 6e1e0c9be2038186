"""
Generated file persistence — atomic writes for rendered sources.

Writes go to a temp file in the target directory and are renamed into
place, so an interrupted run never leaves a half-written .g.cs behind.
Files whose bytes are already identical are left untouched, keeping
their mtime stable for build tools that cache on it.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Literal

from src.core.models.template import GeneratedFile

logger = logging.getLogger(__name__)

WriteOutcome = Literal["written", "unchanged", "skipped"]


def _default_mode() -> int:
    """0o666 masked by the process umask, like a plainly created file."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class GenerationWriteError(OSError):
    """Raised when a generated file cannot be written."""


def write_generated_file(root: Path, file: GeneratedFile) -> WriteOutcome:
    """Write a GeneratedFile under ``root``.

    Args:
        root: Output directory.
        file: The rendered file.

    Returns:
        "written", "unchanged" (same content already on disk) or
        "skipped" (exists with different content and overwrite is off).

    Raises:
        GenerationWriteError: If the directory or file cannot be written.
    """
    target = root / file.path
    data = file.content.encode("utf-8")
    mode = _default_mode()

    if target.is_file():
        # Byte comparison: line endings and undecodable files count as changes
        try:
            existing = target.read_bytes()
            mode = stat.S_IMODE(target.stat().st_mode)
        except OSError as e:
            raise GenerationWriteError(f"Cannot read {target}: {e}") from e
        if existing == data:
            logger.debug("Unchanged: %s", target)
            return "unchanged"
        if not file.overwrite:
            logger.info("Skipped existing file: %s", target)
            return "skipped"

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=target.parent,
            prefix=".tvogen_",
            suffix=".tmp",
        )
        os.close(fd)
        tmp = Path(tmp_path)
        try:
            tmp.write_bytes(data)
            # mkstemp creates 0600; generated sources get normal file permissions
            tmp.chmod(mode)
            tmp.replace(target)
        except Exception:
            tmp.unlink(missing_ok=True)
            raise
    except OSError as e:
        raise GenerationWriteError(f"Cannot write {target}: {e}") from e

    logger.info("Wrote generated file: %s", target)
    return "written"
