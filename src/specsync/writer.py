"""Serialise the merged document and persist it atomically.

The on-disk format is fixed: UTF-8 JSON, two-space indentation, keys in
the document's own insertion order, non-ASCII characters kept as-is, and
exactly one trailing newline. :func:`render_document` produces that text;
:func:`write_document` persists it with a temp-file-then-rename strategy
so a reader never sees a half-written file.
"""

from __future__ import annotations

import json
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, Optional, Union

from specsync.exceptions import WriteError
from specsync.output import info, success

_INDENT = 2
_DEFAULT_MODE = 0o644


def render_document(document: dict[str, Any]) -> str:
    """Return the canonical text form of *document*.

    Raises:
        WriteError: If the document holds values JSON cannot represent.
    """
    try:
        return json.dumps(document, indent=_INDENT, ensure_ascii=False, allow_nan=False) + "\n"
    except (TypeError, ValueError) as exc:
        raise WriteError(f"Cannot serialise OpenAPI spec: {exc}") from exc


def write_document(document: dict[str, Any], destination: Union[str, Path]) -> None:
    """Write *document* to *destination*, replacing any existing content.

    The parent directory must already exist; it is not created.

    Args:
        document: The merged OpenAPI document.
        destination: Target file path.

    Raises:
        WriteError: If the parent directory is missing, the destination is
            not writable, or the disk is full.
    """
    path = Path(destination)
    info(f"Saving to: {path}")

    text = render_document(document)

    if not path.parent.is_dir():
        raise WriteError(f"Failed to save OpenAPI spec: directory {path.parent} does not exist")

    try:
        _atomic_write(path, text)
    except OSError as exc:
        raise WriteError(f"Failed to save OpenAPI spec to {path}: {exc}") from exc

    success("OpenAPI spec saved successfully")


def _atomic_write(path: Path, data: str) -> None:
    """Write data to file atomically using temp file + rename.

    The temporary file is created in the same directory as *path* so that
    ``os.replace`` is an atomic rename on POSIX systems. On any failure the
    temp file is removed and the original exception propagates.
    """
    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
            newline="\n",
        )
        tmp_path = fd.name
        fd.write(data)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None  # prevent double-close in finally
        # NamedTemporaryFile creates files as 0600; keep the destination mode.
        mode = stat.S_IMODE(path.stat().st_mode) if path.exists() else _DEFAULT_MODE
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except BaseException:
        # Clean up the temp file on any error (including KeyboardInterrupt).
        if fd is not None:
            fd.close()
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise
