"""atlas2html: render destination taxonomies as cross-linked HTML pages."""

from atlas2html.descriptions import DescriptionIndex
from atlas2html.document_source import parse_document
from atlas2html.exceptions import (
    Atlas2htmlError,
    MalformedDocumentError,
    OutputWriteError,
    SourceReadError,
    TemplateError,
)
from atlas2html.generator import SiteGenerator, make_file_name, render_page
from atlas2html.pipeline import SiteOptions, build_site
from atlas2html.schemas import DEFAULT_TEMPLATE, DocumentNode, HtmlTemplate, TaxonomyNode
from atlas2html.taxonomy import normalize_taxonomy

__all__ = [
    "Atlas2htmlError",
    "DEFAULT_TEMPLATE",
    "DescriptionIndex",
    "DocumentNode",
    "HtmlTemplate",
    "MalformedDocumentError",
    "OutputWriteError",
    "SiteGenerator",
    "SiteOptions",
    "SourceReadError",
    "TaxonomyNode",
    "TemplateError",
    "build_site",
    "make_file_name",
    "normalize_taxonomy",
    "parse_document",
    "render_page",
]
