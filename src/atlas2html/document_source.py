"""Parse XML text into owned DocumentNode trees."""

from __future__ import annotations

from atlas2html.exceptions import ParseError
from atlas2html.schemas import DocumentNode

try:
    from bs4 import BeautifulSoup
    from bs4.element import (
        CData,
        Comment,
        Declaration,
        Doctype,
        NavigableString,
        ProcessingInstruction,
        Tag,
    )
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ParseError(
        "BeautifulSoup4 is required for XML parsing (pip install beautifulsoup4 lxml)."
    ) from exc


_IGNORED_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)
DOCUMENT_NODE_NAME = "[document]"


def parse_document(text: str) -> DocumentNode:
    """Parse XML text and return the document node.

    The returned node is named ``[document]``; its children are the top-level
    elements. Element children are kept in document order and each element's
    first run of character data (CDATA included, surrounding whitespace
    removed) becomes its ``text``; ``leading_text`` is that run only when it
    comes before the first child element.
    """
    # lxml rejects str input that carries its own encoding declaration.
    soup = BeautifulSoup(text.encode("utf-8"), "xml", from_encoding="utf-8")
    return _convert(soup)


def _convert(root: Tag) -> DocumentNode:
    # Build children before parents with an explicit stack so deep input
    # cannot exhaust the interpreter's recursion limit.
    built: dict[int, DocumentNode] = {}
    stack: list[tuple[Tag, bool]] = [(root, False)]
    while stack:
        tag, expanded = stack.pop()
        if not expanded:
            stack.append((tag, True))
            for child in reversed(_child_tags(tag)):
                stack.append((child, False))
            continue
        built[id(tag)] = DocumentNode(
            name=DOCUMENT_NODE_NAME if tag is root else _tag_name(tag),
            attributes={key: _attribute_text(value) for key, value in tag.attrs.items()},
            children=[built.pop(id(child)) for child in _child_tags(tag)],
            text=_direct_text(tag),
            leading_text=_leading_text(tag),
        )
    return built[id(root)]


def _child_tags(tag: Tag) -> list[Tag]:
    return [child for child in tag.children if isinstance(child, Tag)]


def _tag_name(tag: Tag) -> str:
    if tag.prefix:
        return f"{tag.prefix}:{tag.name}"
    return tag.name


def _attribute_text(value: object) -> str:
    if isinstance(value, list):
        return " ".join(str(item) for item in value)
    return str(value)


def _text_runs(tag: Tag, *, stop_at_element: bool) -> list[str]:
    runs: list[str] = []
    for child in tag.children:
        if isinstance(child, Tag):
            if stop_at_element:
                break
            continue
        if isinstance(child, _IGNORED_STRINGS):
            continue
        if isinstance(child, (CData, NavigableString)):
            runs.append(str(child))
    return runs


def _first_run(runs: list[str]) -> str | None:
    # Indentation around a CDATA section is not content.
    for run in runs:
        if run.strip():
            return run.strip()
    return None


def _direct_text(tag: Tag) -> str | None:
    return _first_run(_text_runs(tag, stop_at_element=False))


def _leading_text(tag: Tag) -> str | None:
    return _first_run(_text_runs(tag, stop_at_element=True))
