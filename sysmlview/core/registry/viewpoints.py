"""
Built-in SysML v2 viewpoints.
"""

from sysmlview.models.kinds import EdgeKind as E
from sysmlview.models.kinds import NodeKind as N
from sysmlview.models.viewpoint import Viewpoint


def _kinds(*kinds) -> tuple[str, ...]:
    return tuple(kind.value for kind in kinds)


STRUCTURAL_DEFINITION = Viewpoint(
    id="sysml.structuralDefinition",
    name="Structural Definition Viewpoint",
    description=(
        "Focuses on part/action/port/item definitions and the specialization "
        "chains that tie them together."
    ),
    include_node_kinds=_kinds(
        N.PART_DEFINITION,
        N.PART_USAGE,
        N.ACTION_DEFINITION,
        N.PORT_DEFINITION,
        N.ITEM_DEFINITION,
        N.ATTRIBUTE_DEFINITION,
        N.CONNECTION_DEFINITION,
        N.CONSTRAINT_DEFINITION,
        N.CALCULATION_DEFINITION,
    ),
    include_edge_kinds=_kinds(
        E.SPECIALIZATION,
        E.DEFINITION,
        E.DEPENDENCY,
        E.FLOW_CONNECTION,
        E.COMPOSITION,
        E.AGGREGATION,
    ),
)

USAGE_STRUCTURE = Viewpoint(
    id="sysml.usageStructure",
    name="Usage Structure Viewpoint",
    description="Shows part, port, action, and item usages mapped back to their definitions.",
    include_node_kinds=_kinds(N.PART_USAGE, N.PORT_USAGE, N.ACTION_USAGE, N.ITEM_USAGE),
    include_edge_kinds=_kinds(
        E.DEFINITION,
        E.DEPENDENCY,
        E.ALLOCATE,
        E.ACTION_FLOW,
        E.FLOW_CONNECTION,
        E.COMPOSITION,
        E.AGGREGATION,
    ),
)

BEHAVIOR_CONTROL = Viewpoint(
    id="sysml.behaviorControl",
    name="Behavior & Control Viewpoint",
    description=(
        "Captures actions and control nodes with succession, action flows, "
        "item flows, and their definitions."
    ),
    include_node_kinds=_kinds(
        N.ACTION_DEFINITION, N.ACTION_USAGE, N.ACTIVITY_CONTROL, N.PERFORM_ACTION
    ),
    include_edge_kinds=_kinds(
        E.DEFINITION,
        E.SUCCESSION,
        E.SUCCESSION_AS_USAGE,
        E.ACTION_FLOW,
        E.ITEM_FLOW,
        E.DEPENDENCY,
    ),
)

INTERACTION = Viewpoint(
    id="sysml.interaction",
    name="Interaction Viewpoint",
    description="Sequence lifelines and messages for interaction scenarios.",
    include_node_kinds=_kinds(N.SEQUENCE_LIFELINE),
    include_edge_kinds=_kinds(E.MESSAGE),
)

STATE = Viewpoint(
    id="sysml.state",
    name="State Viewpoint",
    description="State machines, state definitions/usages, transitions, and actions.",
    include_node_kinds=_kinds(
        N.STATE_MACHINE, N.STATE_DEFINITION, N.STATE_USAGE, N.ACTION_DEFINITION, N.ACTION_USAGE
    ),
    include_edge_kinds=_kinds(E.TRANSITION, E.COMPOSITION, E.AGGREGATION, E.DEFINITION),
)

REQUIREMENT = Viewpoint(
    id="sysml.requirement",
    name="Requirement Viewpoint",
    description="Requirement definitions and usages with satisfy/refine/verify relationships.",
    include_node_kinds=_kinds(N.REQUIREMENT_DEFINITION, N.REQUIREMENT_USAGE),
    include_edge_kinds=_kinds(E.SATISFY, E.REFINE, E.VERIFY, E.DEPENDENCY),
)

USE_CASE = Viewpoint(
    id="sysml.useCase",
    name="Use Case Viewpoint",
    description="Use case definitions and usages with actors, includes, and extends relationships.",
    include_node_kinds=_kinds(N.USE_CASE_DEFINITION, N.USE_CASE_USAGE),
    include_edge_kinds=_kinds(E.INCLUDE, E.EXTEND, E.DEPENDENCY, E.DEFINITION),
)

_ALL_VIEWPOINTS: tuple[Viewpoint, ...] = (
    STRUCTURAL_DEFINITION,
    USAGE_STRUCTURE,
    BEHAVIOR_CONTROL,
    INTERACTION,
    STATE,
    REQUIREMENT,
    USE_CASE,
)


def all_viewpoints() -> list[Viewpoint]:
    """All built-in viewpoints, in display order."""
    return list(_ALL_VIEWPOINTS)


def get_viewpoint_by_id(viewpoint_id: str) -> Viewpoint | None:
    """Look up a built-in viewpoint; None if the ID is unknown."""
    for viewpoint in _ALL_VIEWPOINTS:
        if viewpoint.id == viewpoint_id:
            return viewpoint
    return None


def get_available_types_for_viewpoint(viewpoint_id: str) -> dict[str, list[str]]:
    """
    Node and edge kinds a viewpoint can show.

    Returns:
        {"node_kinds": [...], "edge_kinds": [...]}; both empty for an unknown ID
    """
    viewpoint = get_viewpoint_by_id(viewpoint_id)
    if viewpoint is None:
        return {"node_kinds": [], "edge_kinds": []}

    return {
        "node_kinds": list(viewpoint.include_node_kinds),
        "edge_kinds": list(viewpoint.include_edge_kinds or ()),
    }
