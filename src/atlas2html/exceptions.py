"""Custom exceptions for atlas2html."""

from __future__ import annotations

from pathlib import Path


class Atlas2htmlError(Exception):
    """Base exception for atlas2html operations."""


class SourceReadError(Atlas2htmlError):
    """An input document could not be opened or read."""

    def __init__(self, role: str, path: str | Path) -> None:
        self.role = role
        self.path = Path(path)
        super().__init__(f"Failed to open {role} file {path} for reading")


class MalformedDocumentError(Atlas2htmlError):
    """An input document lacks the elements required to process it."""


class OutputWriteError(Atlas2htmlError):
    """An output file or directory could not be written."""

    def __init__(self, path: str | Path, message: str | None = None) -> None:
        self.path = Path(path)
        super().__init__(message or f"Failed to open html file {path} for writing")


class TemplateError(Atlas2htmlError):
    """A page template could not be loaded."""


class ParseError(Atlas2htmlError):
    """The XML parsing dependencies (beautifulsoup4, lxml) are not installed."""
