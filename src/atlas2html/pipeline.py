"""Pipeline from taxonomy and destinations XML files to a page directory."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from atlas2html.descriptions import DescriptionIndex, normalize_section_names
from atlas2html.document_source import parse_document
from atlas2html.fs_utils import read_source
from atlas2html.generator import SiteGenerator
from atlas2html.schemas import DEFAULT_TEMPLATE, HtmlTemplate
from atlas2html.taxonomy import normalize_taxonomy
from atlas2html.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class SiteOptions:
    """Options for a site build.

    Attributes:
        sections: Destination sections to render, in heading order. Empty
            means ``overview`` only.
        template: Page template to render into.
    """

    sections: list[str] = field(default_factory=list)
    template: HtmlTemplate = DEFAULT_TEMPLATE

    @property
    def section_names(self) -> tuple[str, ...]:
        return normalize_section_names(self.sections)


def build_site(
    *,
    taxonomy_path: str | Path,
    destinations_path: str | Path,
    output_dir: str | Path,
    options: SiteOptions | None = None,
) -> None:
    """Read both documents and write the page set into ``output_dir``.

    Both inputs are read and the taxonomy structure is checked before the
    output directory is touched, so input errors leave no files behind.

    Raises:
        SourceReadError: If an input file cannot be read.
        MalformedDocumentError: If the taxonomy lacks its top-level elements.
        OutputWriteError: If the output directory or a page cannot be written.
    """
    opts = options or SiteOptions()

    taxonomy_document = parse_document(read_source(taxonomy_path, "taxonomy"))
    logger.info("Read taxonomy file %s", taxonomy_path)
    root = normalize_taxonomy(taxonomy_document)

    destinations_document = parse_document(read_source(destinations_path, "destinations"))
    logger.info("Read destinations file %s", destinations_path)
    index = DescriptionIndex.build(destinations_document, opts.section_names)

    SiteGenerator(template=opts.template).generate(root, index, output_dir)
