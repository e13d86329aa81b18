"""Generic parsed document tree."""

from __future__ import annotations

from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field


class DocumentNode(BaseModel):
    """A parsed element with its attributes, element children and text.

    ``text`` is the first non-blank run of character data; ``leading_text``
    is the same run when it precedes every child element, otherwise None.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    attributes: dict[str, str] = Field(default_factory=dict)
    children: list["DocumentNode"] = Field(default_factory=list)
    text: str | None = None
    leading_text: str | None = None

    def find_child(self, name: str) -> "DocumentNode | None":
        """Return the first direct child element called ``name``."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def iter_children(self, name: str) -> Iterator["DocumentNode"]:
        """Yield every direct child element called ``name`` in document order."""
        for child in self.children:
            if child.name == name:
                yield child
