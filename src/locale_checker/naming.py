"""Derive language and namespace names from filesystem paths."""

import os
from pathlib import PurePath

# Used when a path has no usable basename (e.g. "/" or "")
UNKNOWN_NAME = "unknown folder"


def entry_name(path: str | os.PathLike) -> str:
    """
    Return the basename of a directory entry.

    Language directories are named after their folder ("en", "zh-Hant"),
    namespaces after their file, extension included ("common.json").

    Args:
        path: Path to the directory or file

    Returns:
        The final path component, or UNKNOWN_NAME if there is none.
    """
    name = PurePath(os.fspath(path)).name
    return name or UNKNOWN_NAME
