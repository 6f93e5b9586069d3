"""
Node projection: element -> view node.
"""

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from pydantic import TypeAdapter, ValidationError

from sysmlview.config import LayoutConfig
from sysmlview.core.compartments import build_compartments
from sysmlview.core.registry import (
    accent_for,
    element_kind_for,
    resolve_node_kind,
    shape_for,
    view_type_for,
)
from sysmlview.models.element import Element
from sysmlview.models.kinds import NodeKind
from sysmlview.models.view import Compartment, Position, ViewNode
from sysmlview.utils.logger import get_logger

logger = get_logger(__name__)

Mapper = Callable[[dict[str, Any], Mapping[str, Any]], None]

_COMPARTMENTS = TypeAdapter(list[Compartment])
_DEFAULT_LAYOUT = LayoutConfig()


# ═══════════════════════════════════════════════════════════
# DATA MAPPERS
# ═══════════════════════════════════════════════════════════


def _as_list(value: Any) -> Any:
    if isinstance(value, str):
        return [value] if value else None
    return value


def _usage_refs(fields: dict[str, Any], spec: Mapping[str, Any]) -> None:
    fields["base_definition"] = spec.get("definition")
    fields["redefines"] = _as_list(spec.get("redefines"))
    fields["subsets"] = _as_list(spec.get("subsets"))


def _status(fields: dict[str, Any], spec: Mapping[str, Any]) -> None:
    fields["status"] = spec.get("status")


def _control_type(fields: dict[str, Any], spec: Mapping[str, Any]) -> None:
    fields["stereotype"] = spec.get("controlType")
    fields["control_type"] = spec.get("controlType")


def _emphasis(key: str) -> Mapper:
    def mapper(fields: dict[str, Any], spec: Mapping[str, Any]) -> None:
        fields["emphasis"] = spec.get(key)

    return mapper


def _default_stereotype(value: str) -> Mapper:
    def mapper(fields: dict[str, Any], spec: Mapping[str, Any]) -> None:
        fields["stereotype"] = spec.get("stereotype") or value

    return mapper


def _default_name(value: str) -> Mapper:
    def mapper(fields: dict[str, Any], spec: Mapping[str, Any]) -> None:
        fields["name"] = spec.get("name") or value

    return mapper


def _body_documentation(fields: dict[str, Any], spec: Mapping[str, Any]) -> None:
    fields["documentation"] = spec.get("body") or fields.get("documentation")


def _classifier_documentation(fields: dict[str, Any], spec: Mapping[str, Any]) -> None:
    fields["documentation"] = spec.get("classifier") or fields.get("documentation")


NODE_MAPPERS: Mapping[NodeKind, tuple[Mapper, ...]] = MappingProxyType(
    {
        kind: (
            *((_usage_refs,) if kind.value.endswith("-usage") else ()),
            *extra,
        )
        for kind, extra in {
            # Structural
            NodeKind.PART_DEFINITION: (),
            NodeKind.PART_USAGE: (),
            NodeKind.ATTRIBUTE_DEFINITION: (),
            NodeKind.ATTRIBUTE_USAGE: (),
            NodeKind.PORT_DEFINITION: (),
            NodeKind.PORT_USAGE: (),
            NodeKind.ITEM_DEFINITION: (),
            NodeKind.ITEM_USAGE: (),
            NodeKind.CONNECTION_DEFINITION: (),
            NodeKind.CONNECTION_USAGE: (),
            NodeKind.INTERFACE_DEFINITION: (),
            NodeKind.INTERFACE_USAGE: (),
            NodeKind.ALLOCATION_DEFINITION: (),
            NodeKind.ALLOCATION_USAGE: (),
            NodeKind.REFERENCE_USAGE: (),
            NodeKind.OCCURRENCE_DEFINITION: (),
            NodeKind.OCCURRENCE_USAGE: (),
            # Behavioral
            NodeKind.ACTION_DEFINITION: (),
            NodeKind.ACTION_USAGE: (),
            NodeKind.ACTIVITY_CONTROL: (_control_type,),
            NodeKind.CALCULATION_DEFINITION: (_emphasis("expression"),),
            NodeKind.CALCULATION_USAGE: (_emphasis("calculationBody"),),
            NodeKind.PERFORM_ACTION: (),
            NodeKind.SEND_ACTION: (),
            NodeKind.ACCEPT_ACTION: (),
            NodeKind.ASSIGNMENT_ACTION: (),
            NodeKind.IF_ACTION: (),
            NodeKind.FOR_LOOP_ACTION: (),
            NodeKind.WHILE_LOOP_ACTION: (),
            NodeKind.STATE: (_default_stereotype("state"), _status),
            NodeKind.STATE_MACHINE: (_default_stereotype("stateMachine"),),
            NodeKind.STATE_DEFINITION: (),
            NodeKind.STATE_USAGE: (),
            NodeKind.TRANSITION_USAGE: (),
            NodeKind.EXHIBIT_STATE: (),
            # Requirements & Cases
            NodeKind.REQUIREMENT_DEFINITION: (),
            NodeKind.REQUIREMENT_USAGE: (_status,),
            NodeKind.CONSTRAINT_DEFINITION: (_emphasis("expression"),),
            NodeKind.CONSTRAINT_USAGE: (_emphasis("expression"),),
            NodeKind.VERIFICATION_CASE_DEFINITION: (),
            NodeKind.VERIFICATION_CASE_USAGE: (_status,),
            NodeKind.ANALYSIS_CASE_DEFINITION: (),
            NodeKind.ANALYSIS_CASE_USAGE: (),
            NodeKind.USE_CASE_DEFINITION: (),
            NodeKind.USE_CASE_USAGE: (_status,),
            NodeKind.CONCERN_DEFINITION: (),
            NodeKind.CONCERN_USAGE: (),
            # Organizational
            NodeKind.PACKAGE: (),
            NodeKind.LIBRARY_PACKAGE: (),
            # Interactions
            NodeKind.SEQUENCE_LIFELINE: (
                _default_stereotype("lifeline"),
                _classifier_documentation,
            ),
            NodeKind.INTERACTION: (),
            # Metadata
            NodeKind.METADATA_DEFINITION: (),
            NodeKind.METADATA_USAGE: (),
            NodeKind.COMMENT: (_default_name("Comment"), _body_documentation),
            NodeKind.DOCUMENTATION: (_default_name("Documentation"), _body_documentation),
        }.items()
    }
)


_TEXT_FIELDS = (
    "name",
    "stereotype",
    "documentation",
    "base_definition",
    "status",
    "control_type",
    "emphasis",
)
_LIST_FIELDS = ("redefines", "subsets")


def _sanitize(fields: dict[str, Any], element_id: str) -> None:
    """Coerce scalar field values to strings; drop values of any other shape."""
    for key in _TEXT_FIELDS:
        value = fields.get(key)
        if value is None or isinstance(value, str):
            continue
        if isinstance(value, (int, float)):
            fields[key] = str(value)
            continue
        logger.warning(
            f"Dropping malformed {key!r} on {element_id!r}: {type(value).__name__}"
        )
        fields[key] = "" if key == "name" else None

    for key in _LIST_FIELDS:
        value = fields.get(key)
        if value is None:
            continue
        if isinstance(value, list) and all(isinstance(v, (str, int, float)) for v in value):
            fields[key] = [str(v) for v in value] or None
            continue
        logger.warning(
            f"Dropping malformed {key!r} on {element_id!r}: {type(value).__name__}"
        )
        fields[key] = None


# ═══════════════════════════════════════════════════════════
# LAYOUT
# ═══════════════════════════════════════════════════════════


def grid_position(index: int, layout: LayoutConfig | None = None) -> Position:
    """Fallback grid slot for the index-th node of a view."""
    layout = layout or _DEFAULT_LAYOUT
    return Position(
        x=(index % layout.columns) * layout.column_spacing,
        y=(index // layout.columns) * layout.row_spacing,
    )


def _resolve_position(
    position: Position | Mapping[str, Any] | None, index: int, layout: LayoutConfig | None
) -> Position:
    if position is None:
        return grid_position(index, layout)
    if isinstance(position, Position):
        return position.model_copy()
    return Position.model_validate(dict(position))


# ═══════════════════════════════════════════════════════════
# PROJECTION
# ═══════════════════════════════════════════════════════════


def _compartments(
    element: Element, node_kind: NodeKind, definition: Element | None
) -> list[Compartment]:
    precomputed = element.spec.get("compartments")
    if precomputed is not None:
        try:
            return _COMPARTMENTS.validate_python(precomputed)
        except ValidationError:
            logger.warning(
                f"Ignoring malformed precomputed compartments on {element.id!r}, synthesizing"
            )

    inherited = definition.spec.get("parameters") if definition is not None else None
    return build_compartments(node_kind, element.spec, inherited_parameters=inherited)


def project_node(
    element: Element,
    position: Position | Mapping[str, Any] | None = None,
    *,
    index: int = 0,
    definition: Element | None = None,
    layout: LayoutConfig | None = None,
) -> ViewNode:
    """
    Project an element into a positioned, typed view node.

    Args:
        element: Model element
        position: Explicit position; the grid slot for index is used when None
        index: Position of the element among the selected nodes
        definition: Resolved definition of a usage, for parameter inheritance
        layout: Grid layout settings

    Returns:
        A fresh ViewNode

    Raises:
        UnknownNodeKind: If the element's kind is not registered
    """
    node_kind = resolve_node_kind(element.kind)
    spec = element.spec

    fields: dict[str, Any] = {
        "name": spec.get("name") or "",
        "stereotype": spec.get("stereotype"),
        "documentation": spec.get("description") or spec.get("documentation"),
    }
    for mapper in NODE_MAPPERS[node_kind]:
        mapper(fields, spec)
    _sanitize(fields, element.id)

    compartments = _compartments(element, node_kind, definition)
    show = spec.get("showCompartments")

    tags = spec.get("tags")
    return ViewNode(
        id=element.id,
        kind=node_kind.value,
        type=view_type_for(node_kind),
        shape=shape_for(node_kind),
        accent=accent_for(node_kind),
        element_kind=element_kind_for(node_kind),
        tags=[str(tag) for tag in tags] if isinstance(tags, list) and tags else None,
        compartments=compartments,
        show_compartments=show if isinstance(show, bool) else bool(compartments),
        position=_resolve_position(position, index, layout),
        **fields,
    )
