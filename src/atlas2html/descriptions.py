"""Index destination descriptions by identifier and section."""

from __future__ import annotations

from typing import Iterable, Iterator

from atlas2html.config import DEFAULT_SECTION
from atlas2html.schemas import DocumentNode
from atlas2html.taxonomy import parse_identifier
from atlas2html.utils.logging_config import get_logger

logger = get_logger(__name__)

DESTINATIONS_ELEMENT = "destinations"
DESTINATION_ELEMENT = "destination"
DESTINATION_ID_ATTRIBUTE = "atlas_id"


def normalize_section_names(section_names: Iterable[str] | None) -> tuple[str, ...]:
    """De-duplicate section names, keeping first-seen order.

    An empty or missing selection falls back to ``("overview",)``.
    """
    names = tuple(dict.fromkeys(name for name in (section_names or ()) if name))
    return names or (DEFAULT_SECTION,)


class DescriptionIndex:
    """Merged description sections for every destination with an identifier."""

    def __init__(
        self,
        section_names: Iterable[str] | None = None,
        descriptions: dict[int, dict[str, str]] | None = None,
    ) -> None:
        self._section_names = normalize_section_names(section_names)
        self._descriptions = descriptions or {}

    @classmethod
    def build(
        cls, document: DocumentNode, section_names: Iterable[str] | None = None
    ) -> "DescriptionIndex":
        """Collect section content from the top-level ``destinations`` element.

        For each ``destination`` carrying an ``atlas_id``, every element in its
        subtree whose name is a selected section contributes ``<p>text</p>``
        to that section, in document order. All selected sections are present
        for every indexed destination, empty when nothing matched.
        """
        names = normalize_section_names(section_names)
        descriptions: dict[int, dict[str, str]] = {}

        destinations = document.find_child(DESTINATIONS_ELEMENT)
        if destinations is None:
            logger.info("No %s element found; description index is empty", DESTINATIONS_ELEMENT)
            return cls(names, descriptions)

        for destination in destinations.iter_children(DESTINATION_ELEMENT):
            atlas_id = destination.attributes.get(DESTINATION_ID_ATTRIBUTE)
            if atlas_id is None:
                continue
            identifier = parse_identifier(atlas_id)
            if identifier in descriptions:
                logger.warning("Ignoring duplicate destination atlas_id %s", identifier)
                continue
            descriptions[identifier] = _collect_sections(destination, names)

        logger.info("Indexed descriptions for %d destinations", len(descriptions))
        return cls(names, descriptions)

    @property
    def section_names(self) -> tuple[str, ...]:
        return self._section_names

    def get(self, identifier: int) -> dict[str, str]:
        """Return the sections for ``identifier``, or an empty dict if unknown."""
        return dict(self._descriptions.get(identifier, {}))

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._descriptions

    def __len__(self) -> int:
        return len(self._descriptions)

    def __iter__(self) -> Iterator[int]:
        return iter(self._descriptions)


def _collect_sections(destination: DocumentNode, section_names: tuple[str, ...]) -> dict[str, str]:
    parts: dict[str, list[str]] = {name: [] for name in section_names}
    stack = [destination]
    while stack:
        node = stack.pop()
        if node.name in parts:
            text = _first_content_text(node)
            if text is not None:
                parts[node.name].append(f"<p>{text}</p>")
        stack.extend(reversed(node.children))
    return {name: "".join(chunks) for name, chunks in parts.items()}


def _first_content_text(node: DocumentNode) -> str | None:
    # Only the section's first child counts: character data placed before
    # any element (usually CDATA), otherwise the first child element's text.
    if node.leading_text is not None:
        return node.leading_text
    if node.children:
        return node.children[0].text
    return None
