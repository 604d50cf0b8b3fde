"""
Canonical encoding for sorted locale files.

Files are rewritten as pretty-printed JSON with keys in ascending order,
non-ASCII text kept as UTF-8 and no trailing newline.
"""

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Mapping

from loguru import logger

from .core.exceptions import CanonicalEncodeError, RewriteError

DEFAULT_INDENT = 2


def encode_sorted(data: Mapping[str, str], path: Path, indent: int = DEFAULT_INDENT) -> bytes:
    """
    Encode a flat translation mapping with its keys sorted.

    Args:
        data: Key to value mapping loaded from ``path``
        path: File the data came from, used in error messages
        indent: Number of spaces per indentation level

    Returns:
        UTF-8 encoded JSON document

    Raises:
        CanonicalEncodeError: If the data cannot be serialized, e.g. it holds
            lone surrogates decoded from ``\\ud800`` style escapes.
    """
    try:
        text = json.dumps(dict(data), ensure_ascii=False, indent=indent, sort_keys=True)
        return text.encode("utf-8")
    except (TypeError, ValueError) as e:
        raise CanonicalEncodeError(path, str(e)) from e


def write_atomic(path: Path, content: bytes) -> None:
    """
    Replace ``path`` with ``content``.

    Writes to a uniquely named hidden temporary file in the same directory,
    copies the original file's permissions onto it, then moves it over the
    original. Existing files next to ``path`` are never touched.

    Raises:
        RewriteError: If the temporary file cannot be written or moved.
    """
    try:
        fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    except OSError as e:
        raise RewriteError(path, str(e)) from e

    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(content)
        if path.exists():
            shutil.copymode(path, temp_path)
        temp_path.replace(path)
    except OSError as e:
        try:
            temp_path.unlink(missing_ok=True)
        except OSError as cleanup_error:
            logger.warning(f"Failed to remove temporary file {temp_path}: {cleanup_error}")
        raise RewriteError(path, str(e)) from e
