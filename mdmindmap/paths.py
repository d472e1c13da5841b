"""Working out where a mind map for a Markdown file is written."""

from __future__ import annotations

import os

OUTPUT_SUFFIX = "_mindmap.txt"

_WINDOWS = os.name == "nt"


def _split_windows(full_path: str) -> tuple[str, str]:
    drive = full_path[:2] if len(full_path) >= 2 and full_path[1] == ":" else ""
    rest = full_path[len(drive):]
    cut = max(rest.rfind("/"), rest.rfind("\\")) + 1
    return drive + rest[:cut], rest[cut:]


def _split_posix(full_path: str) -> tuple[str, str]:
    cut = full_path.rfind("/")
    if cut < 0:
        return "./", full_path
    return full_path[: cut + 1], full_path[cut + 1:]


def split_path(full_path: str) -> tuple[str, str]:
    """Split ``full_path`` into its directory (with trailing separator) and file name.

    On POSIX systems a bare file name is given the directory ``./``; on
    Windows the drive and directory are kept as written, possibly empty.
    """
    if _WINDOWS:
        return _split_windows(full_path)
    return _split_posix(full_path)


def mindmap_filename(input_filename: str) -> str:
    """Replace everything from the last dot of ``input_filename`` with the mind map suffix."""
    stem, dot, _ = input_filename.rpartition(".")
    base = stem if dot else input_filename
    return base + OUTPUT_SUFFIX


def mindmap_filename_beside(input_filename: str) -> str:
    """Name a mind map file in the same directory, dropping the file's own extension.

    Only a dot in the file name itself counts as an extension; dots in
    directory names are kept.
    """
    directory, name = split_path(input_filename)
    stem, dot, _ = name.rpartition(".")
    base = stem if dot else name
    return directory + base + OUTPUT_SUFFIX