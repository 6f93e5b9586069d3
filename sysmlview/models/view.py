"""
View models produced by materialization.

Field names are snake_case in Python and serialize to the renderer's
camelCase shape with model_dump(by_alias=True, exclude_none=True).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from sysmlview.models.kinds import EdgeMarker, EdgePath, ElementKind, ShapeFamily

_VIEW_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Position(BaseModel):
    """Canvas position. Missing coordinates normalize to 0."""

    model_config = _VIEW_CONFIG

    x: float = 0.0
    y: float = 0.0

    @field_validator("x", "y", mode="before")
    @classmethod
    def _none_to_zero(cls, value: Any) -> Any:
        return 0.0 if value is None else value


class CompartmentItem(BaseModel):
    """One row inside a compartment."""

    model_config = _VIEW_CONFIG

    label: str
    value: str | None = None
    emphasis: bool | None = None
    inherited: bool | None = None


class Compartment(BaseModel):
    """Titled list of display rows."""

    model_config = _VIEW_CONFIG

    title: str | None = None
    items: list[CompartmentItem] = Field(default_factory=list)


class ViewNode(BaseModel):
    """Positioned, typed diagram node."""

    model_config = _VIEW_CONFIG

    id: str
    kind: str
    type: str = Field(..., description="Renderer type tag, 'sysml.<kind>'")
    shape: ShapeFamily
    accent: str
    name: str
    stereotype: str | None = None
    documentation: str | None = None
    element_kind: ElementKind | None = None
    base_definition: str | None = None
    redefines: list[str] | None = None
    subsets: list[str] | None = None
    status: str | None = None
    control_type: str | None = None
    emphasis: str | None = None
    tags: list[str] | None = None
    compartments: list[Compartment] = Field(default_factory=list)
    show_compartments: bool = False
    position: Position = Field(default_factory=Position)


class EdgeStyle(BaseModel):
    """Stroke colour, dash pattern, markers and routing of an edge."""

    model_config = _VIEW_CONFIG

    stroke: str
    dashed: bool = False
    marker_start: EdgeMarker | None = None
    marker_end: EdgeMarker | None = None
    path: EdgePath = EdgePath.STRAIGHT


class ViewEdge(BaseModel):
    """Typed, styled diagram edge."""

    model_config = _VIEW_CONFIG

    id: str
    kind: str
    type: str = "sysml.relationship"
    source: str
    target: str
    label: str
    trigger: str | None = None
    guard: str | None = None
    effect: str | None = None
    rationale: str | None = None
    label_offset_x: float | None = None
    label_offset_y: float | None = None
    style: EdgeStyle


class View(BaseModel):
    """Materialized view: nodes and edges in model order."""

    model_config = _VIEW_CONFIG

    nodes: list[ViewNode] = Field(default_factory=list)
    edges: list[ViewEdge] = Field(default_factory=list)

    def to_renderer(self) -> dict[str, Any]:
        """Serialize to the renderer's camelCase JSON shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
