"""Normalized taxonomy tree models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TaxonomyNode(BaseModel):
    """A destination in the taxonomy hierarchy.

    Attributes:
        atlas_node_id: Raw identifier text, or None when the source node had none.
        node_name: Display name, or None when the source node had no ``node_name``.
        identifier: Integer join key with the description index, parsed
            leniently from ``atlas_node_id``; page names use the raw text.
        children: Every ``node`` child of the source element, usable or not.
    """

    model_config = ConfigDict(frozen=True)

    atlas_node_id: str | None = None
    node_name: str | None = None
    identifier: int | None = None
    children: list["TaxonomyNode"] = Field(default_factory=list)

    @property
    def usable(self) -> bool:
        """Whether the node gets a page of its own."""
        return self.atlas_node_id is not None and self.node_name is not None
