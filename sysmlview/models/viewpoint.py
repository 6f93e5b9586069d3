"""
Viewpoint model: a named selection over node and edge kinds.
"""

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field

from sysmlview.models.element import Element, Relationship


class Viewpoint(BaseModel):
    """
    Named subset of node/edge kinds plus optional predicates.

    An absent include_edge_kinds means no kind-based edge filtering; an
    empty tuple excludes every edge.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    id: str = Field(..., description="Viewpoint ID")
    name: str = Field(..., description="Display name")
    description: str = Field(default="", description="What the viewpoint shows")
    include_node_kinds: tuple[str, ...] = Field(
        default_factory=tuple, description="Node kinds selected by this viewpoint"
    )
    include_edge_kinds: tuple[str, ...] | None = Field(
        default=None, description="Edge kinds selected, or None for all"
    )
    node_filter: Callable[[Element], bool] | None = Field(default=None, exclude=True)
    relationship_filter: Callable[[Relationship], bool] | None = Field(
        default=None, exclude=True
    )

    def accepts_node(self, element: Element) -> bool:
        if element.kind not in self.include_node_kinds:
            return False
        return self.node_filter is None or bool(self.node_filter(element))

    def accepts_relationship(self, relationship: Relationship) -> bool:
        if self.include_edge_kinds is not None and relationship.type not in self.include_edge_kinds:
            return False
        return self.relationship_filter is None or bool(self.relationship_filter(relationship))
