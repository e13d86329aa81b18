"""Render one HTML page per usable taxonomy node."""

from __future__ import annotations

import html
from pathlib import Path
from typing import Callable, Mapping

from atlas2html.config import FILE_NAME_PREFIX, FILE_NAME_SUFFIX
from atlas2html.descriptions import DescriptionIndex
from atlas2html.fs_utils import ensure_directory as _ensure_directory
from atlas2html.fs_utils import write_page
from atlas2html.schemas import DEFAULT_TEMPLATE, HtmlTemplate, TaxonomyNode
from atlas2html.utils.logging_config import get_logger

logger = get_logger(__name__)


def make_file_name(identifier: int | str) -> str:
    """Build ``lp_<identifier>.html`` from the raw identifier text."""
    return f"{FILE_NAME_PREFIX}{identifier}{FILE_NAME_SUFFIX}"


def format_heading(section_name: str) -> str:
    """Capitalize the first character of a section name."""
    return section_name[:1].upper() + section_name[1:]


def render_page(
    node: TaxonomyNode,
    parent: TaxonomyNode | None,
    description: Mapping[str, str],
    template: HtmlTemplate = DEFAULT_TEMPLATE,
) -> str:
    """Render the page for a usable ``node``.

    ``parent`` is the nearest usable ancestor, or None for no up link.
    Display names are escaped; description fragments are inserted as-is.
    """
    name = _escape(node.node_name)
    navigation: list[str] = []
    if parent is not None:
        navigation.append(
            f'<p>Up to <a href="{_href(parent)}">{_escape(parent.node_name)}</a></p>'
        )
    for child in node.children:
        if child.usable:
            navigation.append(
                f'<p><a href="{_href(child)}">{_escape(child.node_name)}</a></p>'
            )

    content = [
        f"<h3>{html.escape(format_heading(section))}</h3>{fragment}"
        for section, fragment in description.items()
    ]

    return "".join(
        [
            template.part1,
            name,
            template.part2,
            *navigation,
            template.part3,
            name,
            template.part4,
            *content,
            template.part5,
        ]
    )


def _href(node: TaxonomyNode) -> str:
    return html.escape(make_file_name(node.atlas_node_id))


def _escape(text: str | None) -> str:
    return html.escape(text or "", quote=False)


class SiteGenerator:
    """Write the cross-linked page set for a normalized taxonomy tree."""

    def __init__(
        self,
        template: HtmlTemplate = DEFAULT_TEMPLATE,
        ensure_directory: Callable[[Path], None] = _ensure_directory,
    ) -> None:
        self.template = template
        self._ensure_directory = ensure_directory

    def generate(self, root: TaxonomyNode, index: DescriptionIndex, output_dir: str | Path) -> None:
        """Write ``lp_<id>.html`` into ``output_dir`` for every usable node.

        Nodes are visited pre-order, children in source order. Unusable nodes
        get no page but their descendants are still visited and link up to
        the nearest usable ancestor. A node whose identifier was already
        written overwrites the earlier page.

        Raises:
            OutputWriteError: If the directory or a page cannot be written.
        """
        output_path = Path(output_dir)
        self._ensure_directory(output_path)

        written: set[str] = set()
        # (node, nearest usable ancestor); children pushed reversed to pop in order.
        stack: list[tuple[TaxonomyNode, TaxonomyNode | None]] = [(root, None)]
        while stack:
            node, ancestor = stack.pop()
            if node.usable:
                self._emit(node, ancestor, index, output_path, written)
                ancestor = node
            stack.extend((child, ancestor) for child in reversed(node.children))

        logger.info("Wrote %d pages to %s", len(written), output_path)

    def _emit(
        self,
        node: TaxonomyNode,
        parent: TaxonomyNode | None,
        index: DescriptionIndex,
        output_path: Path,
        written: set[str],
    ) -> None:
        file_name = make_file_name(node.atlas_node_id)
        if file_name in written:
            logger.warning("Duplicate id %r: overwriting %s", node.atlas_node_id, file_name)
        page = render_page(node, parent, index.get(node.identifier), self.template)
        write_page(output_path / file_name, page)
        written.add(file_name)
        logger.debug("Wrote %s (%s)", file_name, node.node_name)
