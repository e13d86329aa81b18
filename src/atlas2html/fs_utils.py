"""Filesystem helpers for reading sources and writing pages."""

from __future__ import annotations

from pathlib import Path

from atlas2html.config import ATLAS2HTML_ENCODING
from atlas2html.exceptions import OutputWriteError, SourceReadError


def read_source(path: str | Path, role: str, encoding: str = ATLAS2HTML_ENCODING) -> str:
    """Read a whole input document.

    Args:
        path: Path of the document.
        role: What the document is ("taxonomy", "destinations"), used in errors.
        encoding: Text encoding to use.

    Raises:
        SourceReadError: If the file cannot be opened or decoded.
    """
    try:
        return Path(path).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(role, path) from exc


def ensure_directory(path: str | Path) -> None:
    """Create ``path`` and any missing parents; existing directories are fine.

    Raises:
        OutputWriteError: If the directory cannot be created.
    """
    try:
        Path(path).mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputWriteError(path, f"Failed to create output directory {path}") from exc


def write_page(path: str | Path, html: str, encoding: str = ATLAS2HTML_ENCODING) -> None:
    """Write a rendered page, replacing any existing file.

    Raises:
        OutputWriteError: If the file cannot be opened for writing.
    """
    try:
        with Path(path).open("w", encoding=encoding) as f:
            f.write(html)
    except OSError as exc:
        raise OutputWriteError(path) from exc
