"""
Model elements, relationships and model snapshots.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Element(BaseModel):
    """
    A SysML v2 model element as stored in the graph.

    The kind is kept as a plain string and validated lazily by the kind
    registry, so a stored kind that drifted from the enumeration surfaces
    as UnknownNodeKind at projection time instead of at construction.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Globally unique, stable element ID")
    kind: str = Field(..., description="Node kind identifier, e.g. 'part-definition'")
    spec: dict[str, Any] = Field(
        default_factory=dict, description="Kind-specific attributes (camelCase keys)"
    )

    @model_validator(mode="before")
    @classmethod
    def _lift_spec_id(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("id"):
            spec = data.get("spec") or {}
            if isinstance(spec, dict) and spec.get("id"):
                data = {**data, "id": spec["id"]}
        return data

    @property
    def name(self) -> str | None:
        return self.spec.get("name")

    @property
    def stereotype(self) -> str | None:
        return self.spec.get("stereotype")

    @property
    def description(self) -> str | None:
        return self.spec.get("description")

    @property
    def definition(self) -> str | None:
        """ID of the definition this usage is typed by, if any."""
        return self.spec.get("definition")


class Relationship(BaseModel):
    """
    Directed relationship between two elements.

    Source and target are element IDs; they are not checked against the
    model, and extra stored properties are retained.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    id: str = Field(..., description="Relationship ID")
    type: str = Field(..., description="Edge kind identifier, e.g. 'satisfy'")
    source: str = Field(..., description="Source element ID")
    target: str = Field(..., description="Target element ID")
    label: str | None = None
    rationale: str | None = None
    trigger: str | None = None
    guard: str | None = None
    effect: str | None = None
    label_offset_x: float | None = Field(default=None, alias="labelOffsetX")
    label_offset_y: float | None = Field(default=None, alias="labelOffsetY")


class Model(BaseModel):
    """Immutable snapshot of elements and relationships."""

    model_config = ConfigDict(frozen=True)

    nodes: tuple[Element, ...] = Field(default_factory=tuple)
    relationships: tuple[Relationship, ...] = Field(default_factory=tuple)

    def get_node(self, node_id: str) -> Element | None:
        """Return the element with the given ID, or None."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None
