"""Normalize the taxonomy document into a single rooted TaxonomyNode tree."""

from __future__ import annotations

import re

from atlas2html.config import ROOT_NODE_ID, ROOT_NODE_NAME
from atlas2html.exceptions import MalformedDocumentError
from atlas2html.schemas import DocumentNode, TaxonomyNode
from atlas2html.utils.logging_config import get_logger

logger = get_logger(__name__)

_LEADING_INTEGER_RE = re.compile(r"^\s*([+-]?\d+)")

NODE_ELEMENT = "node"
NODE_ID_ATTRIBUTE = "atlas_node_id"
NODE_NAME_ELEMENT = "node_name"


def parse_identifier(value: str) -> int:
    """Parse the leading integer of identifier text; text without one gives 0.

    ``"355064"`` gives 355064, ``"12a"`` gives 12, ``""`` and ``"abc"`` give 0.
    """
    match = _LEADING_INTEGER_RE.match(value)
    if match is None:
        return 0
    return int(match.group(1))


def normalize_taxonomy(document: DocumentNode) -> TaxonomyNode:
    """Build the taxonomy tree under a synthesized "World" root.

    The source shape is ``taxonomies > taxonomy > (taxonomy_name, node*)``.
    The ``taxonomy`` element becomes the root node with identifier ``1`` and
    display name ``World``; ``taxonomy_name`` is ignored. The parsed document
    is left untouched.

    Raises:
        MalformedDocumentError: If ``taxonomies`` or ``taxonomy`` is missing.
    """
    taxonomies = document.find_child("taxonomies")
    if taxonomies is None:
        raise MalformedDocumentError(
            'Mal-formed taxonomy document: found no first-level "taxonomies" element'
        )
    taxonomy = taxonomies.find_child("taxonomy")
    if taxonomy is None:
        raise MalformedDocumentError(
            'Mal-formed taxonomy document: found no second-level "taxonomy" element'
        )

    children = [_convert_node(child) for child in taxonomy.iter_children(NODE_ELEMENT)]
    return TaxonomyNode(
        atlas_node_id=ROOT_NODE_ID,
        node_name=ROOT_NODE_NAME,
        identifier=int(ROOT_NODE_ID),
        children=children,
    )


def _convert_node(source: DocumentNode) -> TaxonomyNode:
    # Post-order over an explicit stack; taxonomies can nest deeply.
    built: dict[int, TaxonomyNode] = {}
    stack: list[tuple[DocumentNode, bool]] = [(source, False)]
    while stack:
        element, expanded = stack.pop()
        node_children = list(element.iter_children(NODE_ELEMENT))
        if not expanded:
            stack.append((element, True))
            stack.extend((child, False) for child in reversed(node_children))
            continue
        built[id(element)] = _make_node(element, [built.pop(id(child)) for child in node_children])
    return built[id(source)]


def _make_node(element: DocumentNode, children: list[TaxonomyNode]) -> TaxonomyNode:
    atlas_node_id = element.attributes.get(NODE_ID_ATTRIBUTE)
    identifier = None if atlas_node_id is None else parse_identifier(atlas_node_id)
    name_element = element.find_child(NODE_NAME_ELEMENT)
    node_name = None
    if name_element is not None:
        node_name = name_element.text or ""

    if atlas_node_id == ROOT_NODE_ID:
        logger.warning(
            "Taxonomy node %r reuses the reserved root id %s", node_name, ROOT_NODE_ID
        )

    return TaxonomyNode(
        atlas_node_id=atlas_node_id,
        node_name=node_name,
        identifier=identifier,
        children=children,
    )
