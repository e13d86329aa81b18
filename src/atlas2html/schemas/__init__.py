"""Shared schemas for atlas2html."""

from atlas2html.schemas.document import DocumentNode
from atlas2html.schemas.taxonomy import TaxonomyNode
from atlas2html.schemas.template import DEFAULT_TEMPLATE, HtmlTemplate

__all__ = ["DEFAULT_TEMPLATE", "DocumentNode", "HtmlTemplate", "TaxonomyNode"]
