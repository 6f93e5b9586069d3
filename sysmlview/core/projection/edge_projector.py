"""
Edge projection: relationship -> view edge.
"""

from sysmlview.core.registry import edge_style_for, humanize_kind, resolve_edge_kind
from sysmlview.models.element import Relationship
from sysmlview.models.view import ViewEdge


def project_edge(relationship: Relationship) -> ViewEdge:
    """
    Project a relationship into a typed, styled view edge.

    Endpoints are not checked against the model. Rationale, trigger, guard
    and effect pass through verbatim.

    Raises:
        UnknownEdgeKind: If the relationship type is not registered
    """
    kind = resolve_edge_kind(relationship.type)

    return ViewEdge(
        id=relationship.id,
        kind=kind.value,
        source=relationship.source,
        target=relationship.target,
        label=relationship.label or humanize_kind(kind),
        trigger=relationship.trigger,
        guard=relationship.guard,
        effect=relationship.effect,
        rationale=relationship.rationale,
        label_offset_x=relationship.label_offset_x,
        label_offset_y=relationship.label_offset_y,
        style=edge_style_for(kind).model_copy(),
    )
