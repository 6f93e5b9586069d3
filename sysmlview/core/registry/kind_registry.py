"""
Kind registry: display metadata for every node and edge kind.

All tables are built once at import and exposed read-only.
"""

from types import MappingProxyType

from sysmlview.models.kinds import (
    EdgeKind,
    EdgeMarker,
    EdgePath,
    ElementKind,
    NodeKind,
    ShapeFamily,
)
from sysmlview.models.view import EdgeStyle
from sysmlview.utils.exceptions import UnknownEdgeKind, UnknownNodeKind

DEFAULT_NODE_ACCENT = "#262626"
DEFAULT_EDGE_STROKE = "#8d8d8d"

_NODE_KINDS = frozenset(kind.value for kind in NodeKind)
_EDGE_KINDS = frozenset(kind.value for kind in EdgeKind)

# ═══════════════════════════════════════════════════════════
# NODE SHAPES
# ═══════════════════════════════════════════════════════════

_SHAPE_BY_KIND: dict[NodeKind, ShapeFamily] = {
    # Structural
    NodeKind.PART_DEFINITION: ShapeFamily.DEFINITION,
    NodeKind.PART_USAGE: ShapeFamily.DEFINITION,
    NodeKind.ATTRIBUTE_DEFINITION: ShapeFamily.DEFINITION,
    NodeKind.ATTRIBUTE_USAGE: ShapeFamily.DEFINITION,
    NodeKind.PORT_DEFINITION: ShapeFamily.DEFINITION,
    NodeKind.PORT_USAGE: ShapeFamily.DEFINITION,
    NodeKind.ITEM_DEFINITION: ShapeFamily.DEFINITION,
    NodeKind.ITEM_USAGE: ShapeFamily.DEFINITION,
    NodeKind.CONNECTION_DEFINITION: ShapeFamily.DEFINITION,
    NodeKind.CONNECTION_USAGE: ShapeFamily.DEFINITION,
    NodeKind.INTERFACE_DEFINITION: ShapeFamily.DEFINITION,
    NodeKind.INTERFACE_USAGE: ShapeFamily.DEFINITION,
    NodeKind.ALLOCATION_DEFINITION: ShapeFamily.DEFINITION,
    NodeKind.ALLOCATION_USAGE: ShapeFamily.DEFINITION,
    NodeKind.REFERENCE_USAGE: ShapeFamily.DEFINITION,
    NodeKind.OCCURRENCE_DEFINITION: ShapeFamily.DEFINITION,
    NodeKind.OCCURRENCE_USAGE: ShapeFamily.DEFINITION,
    # Behavioral
    NodeKind.ACTION_DEFINITION: ShapeFamily.DEFINITION,
    NodeKind.ACTION_USAGE: ShapeFamily.DEFINITION,
    NodeKind.ACTIVITY_CONTROL: ShapeFamily.ACTIVITY_CONTROL,
    NodeKind.CALCULATION_DEFINITION: ShapeFamily.DEFINITION,
    NodeKind.CALCULATION_USAGE: ShapeFamily.DEFINITION,
    NodeKind.PERFORM_ACTION: ShapeFamily.ACTIVITY,
    NodeKind.SEND_ACTION: ShapeFamily.ACTIVITY,
    NodeKind.ACCEPT_ACTION: ShapeFamily.ACTIVITY,
    NodeKind.ASSIGNMENT_ACTION: ShapeFamily.ACTIVITY,
    NodeKind.IF_ACTION: ShapeFamily.ACTIVITY,
    NodeKind.FOR_LOOP_ACTION: ShapeFamily.ACTIVITY,
    NodeKind.WHILE_LOOP_ACTION: ShapeFamily.ACTIVITY,
    NodeKind.STATE: ShapeFamily.STATE,
    NodeKind.STATE_MACHINE: ShapeFamily.STATE_MACHINE,
    NodeKind.STATE_DEFINITION: ShapeFamily.STATE,
    NodeKind.STATE_USAGE: ShapeFamily.STATE,
    NodeKind.TRANSITION_USAGE: ShapeFamily.STATE,
    NodeKind.EXHIBIT_STATE: ShapeFamily.STATE,
    # Requirements & Cases
    NodeKind.REQUIREMENT_DEFINITION: ShapeFamily.REQUIREMENT,
    NodeKind.REQUIREMENT_USAGE: ShapeFamily.REQUIREMENT,
    NodeKind.CONSTRAINT_DEFINITION: ShapeFamily.PARAMETRIC,
    NodeKind.CONSTRAINT_USAGE: ShapeFamily.PARAMETRIC,
    NodeKind.VERIFICATION_CASE_DEFINITION: ShapeFamily.REQUIREMENT,
    NodeKind.VERIFICATION_CASE_USAGE: ShapeFamily.REQUIREMENT,
    NodeKind.ANALYSIS_CASE_DEFINITION: ShapeFamily.ACTIVITY,
    NodeKind.ANALYSIS_CASE_USAGE: ShapeFamily.ACTIVITY,
    NodeKind.USE_CASE_DEFINITION: ShapeFamily.USE_CASE,
    NodeKind.USE_CASE_USAGE: ShapeFamily.USE_CASE,
    NodeKind.CONCERN_DEFINITION: ShapeFamily.REQUIREMENT,
    NodeKind.CONCERN_USAGE: ShapeFamily.REQUIREMENT,
    # Organizational
    NodeKind.PACKAGE: ShapeFamily.BLOCK,
    NodeKind.LIBRARY_PACKAGE: ShapeFamily.BLOCK,
    # Interactions
    NodeKind.SEQUENCE_LIFELINE: ShapeFamily.SEQUENCE_LIFELINE,
    NodeKind.INTERACTION: ShapeFamily.SEQUENCE_LIFELINE,
    # Metadata
    NodeKind.METADATA_DEFINITION: ShapeFamily.DEFINITION,
    NodeKind.METADATA_USAGE: ShapeFamily.DEFINITION,
    NodeKind.COMMENT: ShapeFamily.DEFINITION,
    NodeKind.DOCUMENTATION: ShapeFamily.DEFINITION,
}

# ═══════════════════════════════════════════════════════════
# NODE ACCENTS
# ═══════════════════════════════════════════════════════════

_ACCENT_BY_KIND: dict[NodeKind, str] = {
    NodeKind.STATE: "#33B1FF",
    NodeKind.STATE_MACHINE: "#3DDBD9",
    NodeKind.SEQUENCE_LIFELINE: "#F1C21B",
    NodeKind.ACTIVITY_CONTROL: "#E0E0E0",
    # Structural
    NodeKind.PART_DEFINITION: "#4589FF",
    NodeKind.PART_USAGE: "#0F62FE",
    NodeKind.ATTRIBUTE_DEFINITION: "#6929C4",
    NodeKind.ATTRIBUTE_USAGE: "#8A3FFC",
    NodeKind.PORT_DEFINITION: "#08BDBA",
    NodeKind.PORT_USAGE: "#1192E8",
    NodeKind.ITEM_DEFINITION: "#BA4E00",
    NodeKind.ITEM_USAGE: "#FF832B",
    NodeKind.CONNECTION_DEFINITION: "#A56EFF",
    NodeKind.CONNECTION_USAGE: "#BE95FF",
    NodeKind.INTERFACE_DEFINITION: "#0072C3",
    NodeKind.INTERFACE_USAGE: "#1192E8",
    NodeKind.ALLOCATION_DEFINITION: "#FA4D56",
    NodeKind.ALLOCATION_USAGE: "#FF8389",
    NodeKind.REFERENCE_USAGE: "#D02670",
    NodeKind.OCCURRENCE_DEFINITION: "#D12765",
    NodeKind.OCCURRENCE_USAGE: "#FF7EB6",
    # Behavioral
    NodeKind.ACTION_DEFINITION: "#FF7EB6",
    NodeKind.ACTION_USAGE: "#FFB3B8",
    NodeKind.CALCULATION_DEFINITION: "#198038",
    NodeKind.CALCULATION_USAGE: "#24A148",
    NodeKind.PERFORM_ACTION: "#6FDC8C",
    NodeKind.SEND_ACTION: "#007D79",
    NodeKind.ACCEPT_ACTION: "#005D5D",
    NodeKind.ASSIGNMENT_ACTION: "#9EF0F0",
    NodeKind.IF_ACTION: "#FFD6E8",
    NodeKind.FOR_LOOP_ACTION: "#D6E6FF",
    NodeKind.WHILE_LOOP_ACTION: "#BAE6FF",
    NodeKind.STATE_DEFINITION: "#0043CE",
    NodeKind.STATE_USAGE: "#33B1FF",
    NodeKind.TRANSITION_USAGE: "#82CFFF",
    NodeKind.EXHIBIT_STATE: "#D0E2FF",
    # Requirements & Cases
    NodeKind.REQUIREMENT_DEFINITION: "#0043CE",
    NodeKind.REQUIREMENT_USAGE: "#0F62FE",
    NodeKind.CONSTRAINT_DEFINITION: "#FA4D56",
    NodeKind.CONSTRAINT_USAGE: "#FF8389",
    NodeKind.VERIFICATION_CASE_DEFINITION: "#198038",
    NodeKind.VERIFICATION_CASE_USAGE: "#24A148",
    NodeKind.ANALYSIS_CASE_DEFINITION: "#8A3800",
    NodeKind.ANALYSIS_CASE_USAGE: "#FF832B",
    NodeKind.USE_CASE_DEFINITION: "#B28600",
    NodeKind.USE_CASE_USAGE: "#FFB000",
    NodeKind.CONCERN_DEFINITION: "#9F1853",
    NodeKind.CONCERN_USAGE: "#D02670",
    # Organizational
    NodeKind.PACKAGE: "#6929C4",
    NodeKind.LIBRARY_PACKAGE: "#8A3FFC",
    # Interactions
    NodeKind.INTERACTION: "#EE5396",
    # Metadata
    NodeKind.METADATA_DEFINITION: "#525252",
    NodeKind.METADATA_USAGE: "#8D8D8D",
    NodeKind.COMMENT: "#A8A8A8",
    NodeKind.DOCUMENTATION: "#C6C6C6",
}

# ═══════════════════════════════════════════════════════════
# EDGE STYLES
# ═══════════════════════════════════════════════════════════

_EDGE_STROKE: dict[EdgeKind, str] = {
    EdgeKind.DEPENDENCY: "#8d8d8d",
    EdgeKind.SATISFY: "#0f62fe",
    EdgeKind.VERIFY: "#24a148",
    EdgeKind.REFINE: "#ff832b",
    EdgeKind.ALLOCATE: "#ee5396",
    EdgeKind.INCLUDE: "#be95ff",
    EdgeKind.EXTEND: "#ff7eb6",
    EdgeKind.TRANSITION: "#33b1ff",
    EdgeKind.MESSAGE: "#f1c21b",
    EdgeKind.CONTROL_FLOW: "#6fdc8c",
    EdgeKind.FLOW_CONNECTION: "#82cfff",
    EdgeKind.ITEM_FLOW: "#d4bbff",
    EdgeKind.ACTION_FLOW: "#a7f0ba",
    EdgeKind.SUCCESSION: "#42be65",
    EdgeKind.SPECIALIZATION: "#78a9ff",
    EdgeKind.CONJUGATION: "#d02670",
    EdgeKind.FEATURE_TYPING: "#fa4d56",
    EdgeKind.SUBSETTING: "#ff832b",
    EdgeKind.REDEFINITION: "#f1c21b",
    EdgeKind.TYPE_FEATURING: "#42be65",
    EdgeKind.COMPOSITION: "#525252",
    EdgeKind.AGGREGATION: "#8d8d8d",
    EdgeKind.FEATURE_MEMBERSHIP: "#08bdba",
}

_DASHED_EDGES = frozenset(
    {
        EdgeKind.DEPENDENCY,
        EdgeKind.SATISFY,
        EdgeKind.VERIFY,
        EdgeKind.REFINE,
        EdgeKind.ALLOCATE,
        EdgeKind.INCLUDE,
        EdgeKind.EXTEND,
    }
)

_MARKER_START: dict[EdgeKind, EdgeMarker] = {
    EdgeKind.COMPOSITION: EdgeMarker.DIAMOND_FILLED,
    EdgeKind.AGGREGATION: EdgeMarker.DIAMOND_HOLLOW,
}

_TRIANGLE_END = frozenset({EdgeKind.SPECIALIZATION, EdgeKind.CONJUGATION})
_OPEN_ARROW_END = frozenset(
    {
        EdgeKind.FEATURE_TYPING,
        EdgeKind.SUBSETTING,
        EdgeKind.REDEFINITION,
        EdgeKind.SATISFY,
        EdgeKind.VERIFY,
        EdgeKind.REFINE,
        EdgeKind.ALLOCATE,
        EdgeKind.DEPENDENCY,
    }
)
_NO_END_MARKER = frozenset({EdgeKind.COMPOSITION, EdgeKind.AGGREGATION})
_SMOOTH_EDGES = frozenset(
    {EdgeKind.COMPOSITION, EdgeKind.AGGREGATION, EdgeKind.FLOW_CONNECTION}
)


def _marker_end(kind: EdgeKind) -> EdgeMarker | None:
    if kind in _TRIANGLE_END:
        return EdgeMarker.TRIANGLE_HOLLOW
    if kind in _NO_END_MARKER:
        return None
    if kind in _OPEN_ARROW_END:
        return EdgeMarker.ARROW_OPEN
    return EdgeMarker.ARROW_FILLED


_EDGE_STYLES: MappingProxyType = MappingProxyType(
    {
        kind: EdgeStyle(
            stroke=_EDGE_STROKE.get(kind, DEFAULT_EDGE_STROKE),
            dashed=kind in _DASHED_EDGES,
            marker_start=_MARKER_START.get(kind),
            marker_end=_marker_end(kind),
            path=EdgePath.SMOOTH if kind in _SMOOTH_EDGES else EdgePath.STRAIGHT,
        )
        for kind in EdgeKind
    }
)

SHAPES: MappingProxyType = MappingProxyType(_SHAPE_BY_KIND)
ACCENTS: MappingProxyType = MappingProxyType(_ACCENT_BY_KIND)
EDGE_STYLES = _EDGE_STYLES


# ═══════════════════════════════════════════════════════════
# LOOKUPS
# ═══════════════════════════════════════════════════════════


def _kind_value(kind: str) -> str:
    # Enum members hash by name, so set lookups need the plain value
    return kind.value if isinstance(kind, (NodeKind, EdgeKind)) else kind


def resolve_node_kind(kind: str) -> NodeKind:
    """
    Resolve a stored kind identifier to a NodeKind.

    Raises:
        UnknownNodeKind: If the identifier is not a registered node kind
    """
    kind = _kind_value(kind)
    if kind not in _NODE_KINDS:
        raise UnknownNodeKind(kind)
    return NodeKind(kind)


def resolve_edge_kind(kind: str) -> EdgeKind:
    """
    Resolve a stored relationship type to an EdgeKind.

    Raises:
        UnknownEdgeKind: If the identifier is not a registered edge kind
    """
    kind = _kind_value(kind)
    if kind not in _EDGE_KINDS:
        raise UnknownEdgeKind(kind)
    return EdgeKind(kind)


def shape_for(kind: str) -> ShapeFamily:
    """Shape family used to render a node kind."""
    return SHAPES[resolve_node_kind(kind)]


def accent_for(kind: str) -> str:
    """
    Accent colour for a node or edge kind.

    Never raises: unregistered kinds degrade to the neutral node accent.
    """
    kind = _kind_value(kind)
    if kind in _NODE_KINDS:
        return ACCENTS.get(NodeKind(kind), DEFAULT_NODE_ACCENT)
    if kind in _EDGE_KINDS:
        return _EDGE_STROKE.get(EdgeKind(kind), DEFAULT_EDGE_STROKE)
    return DEFAULT_NODE_ACCENT


def is_definition_kind(kind: str) -> bool:
    """True iff the node kind identifier ends in '-definition'."""
    return resolve_node_kind(kind).value.endswith("-definition")


def element_kind_for(kind: str) -> ElementKind | None:
    """Definition/usage classification, or None for kinds that are neither."""
    node_kind = resolve_node_kind(kind)
    if node_kind.value.endswith("-definition"):
        return ElementKind.DEFINITION
    if node_kind.value.endswith("-usage"):
        return ElementKind.USAGE
    return None


def view_type_for(kind: str) -> str:
    """Renderer type tag for a node kind."""
    return f"sysml.{resolve_node_kind(kind).value}"


def humanize_kind(kind: str) -> str:
    """'flow-connection' -> 'Flow Connection'."""
    kind = _kind_value(kind)
    return " ".join(part.capitalize() for part in kind.split("-") if part)


def label_for(kind: str) -> str:
    """Human label for a node or edge kind."""
    kind = _kind_value(kind)
    if kind not in _NODE_KINDS and kind not in _EDGE_KINDS:
        raise UnknownNodeKind(kind)
    return humanize_kind(kind)


def edge_style_for(kind: str) -> EdgeStyle:
    """Stroke, dash, markers and routing for an edge kind."""
    return EDGE_STYLES[resolve_edge_kind(kind)]
