"""
Compartment synthesis per node kind.

Builder order within a kind: identity/text, inputs/outputs, structural
children, nested behaviour.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from sysmlview.core.compartments.builders import (
    Builder,
    action_ref,
    names,
    owned,
    ports,
    properties,
    single,
)
from sysmlview.core.compartments.parameters import parameters_or_io
from sysmlview.core.registry import resolve_node_kind
from sysmlview.models.kinds import NodeKind
from sysmlview.models.view import Compartment
from sysmlview.utils.exceptions import MalformedCompartmentInput
from sysmlview.utils.logger import get_logger

logger = get_logger(__name__)

# Usages that inherit parameters from their definition
PARAMETER_INHERITING_KINDS = frozenset({NodeKind.ACTION_USAGE, NodeKind.CALCULATION_USAGE})

_direction = single("direction")
_quantity = (single("quantity kind", "quantityKind"), single("unit"))
_state_behaviour = (
    action_ref("entry", "entryAction"),
    action_ref("do", "doActivity", "doAction"),
    action_ref("exit", "exitAction"),
)
_requirement_text = (
    single("text"),
    single("id", "reqId"),
    names("assume", "assumeConstraint"),
    names("require", "requireConstraint"),
)
_analysis = (single("action", "analysisAction"), single("result", "resultExpression"))

KIND_BUILDERS: Mapping[NodeKind, tuple[Builder, ...]] = MappingProxyType(
    {
        # Structural
        NodeKind.PART_DEFINITION: (
            properties("attributes"),
            ports(),
            owned("parts"),
            names("actions"),
            names("states"),
        ),
        NodeKind.PART_USAGE: (properties("attributes"), ports(), owned("parts")),
        NodeKind.ATTRIBUTE_DEFINITION: (single("type"), single("default", "defaultValue")),
        NodeKind.ATTRIBUTE_USAGE: (single("type"), single("value")),
        NodeKind.PORT_DEFINITION: (_direction, properties("items")),
        NodeKind.PORT_USAGE: (_direction, properties("items")),
        NodeKind.ITEM_DEFINITION: _quantity,
        NodeKind.ITEM_USAGE: _quantity,
        NodeKind.CONNECTION_DEFINITION: (properties("ends"), properties("attributes")),
        NodeKind.CONNECTION_USAGE: (
            names("connected", "connectedParts"),
            properties("attributes"),
        ),
        NodeKind.INTERFACE_DEFINITION: (ports(), properties("attributes")),
        NodeKind.INTERFACE_USAGE: (names("ports", "connectedPorts"),),
        NodeKind.ALLOCATION_DEFINITION: (single("source"), single("target")),
        NodeKind.ALLOCATION_USAGE: (single("from", "allocatedFrom"), single("to", "allocatedTo")),
        NodeKind.REFERENCE_USAGE: (single("references", "referencedElement"),),
        NodeKind.OCCURRENCE_DEFINITION: (single("lifeClass"),),
        NodeKind.OCCURRENCE_USAGE: (single("portionOf"),),
        # Behavioral
        NodeKind.ACTION_DEFINITION: (parameters_or_io(),),
        NodeKind.ACTION_USAGE: (parameters_or_io(),),
        NodeKind.ACTIVITY_CONTROL: (),
        NodeKind.CALCULATION_DEFINITION: (
            parameters_or_io(),
            single("return", "returnResult"),
        ),
        NodeKind.CALCULATION_USAGE: (parameters_or_io(),),
        NodeKind.PERFORM_ACTION: (
            single("performs", "performedAction"),
            properties("inputs"),
            properties("outputs"),
        ),
        NodeKind.SEND_ACTION: (single("payload"), single("to", "target"), single("via")),
        NodeKind.ACCEPT_ACTION: (
            single("accepts", "payloadType"),
            single("via"),
            single("receiver"),
        ),
        NodeKind.ASSIGNMENT_ACTION: (
            single("target", "targetFeature"),
            single("value", "valueExpression"),
        ),
        NodeKind.IF_ACTION: (
            single("if", "condition"),
            single("then", "thenAction"),
            single("else", "elseAction"),
        ),
        NodeKind.FOR_LOOP_ACTION: (
            single("var", "variable"),
            single("in", "collection"),
            single("do", "body"),
        ),
        NodeKind.WHILE_LOOP_ACTION: (single("while", "condition"), single("do", "body")),
        NodeKind.STATE: _state_behaviour,
        NodeKind.STATE_MACHINE: (names("states"),),
        NodeKind.STATE_DEFINITION: (*_state_behaviour, names("substates")),
        NodeKind.STATE_USAGE: (*_state_behaviour, names("substates")),
        NodeKind.TRANSITION_USAGE: (single("trigger"), single("guard"), single("effect")),
        NodeKind.EXHIBIT_STATE: (single("state", "exhibitedState"), single("performer")),
        # Requirements & Cases
        NodeKind.REQUIREMENT_DEFINITION: (
            *_requirement_text,
            names("concerns", "framedConcerns"),
            names("actors"),
        ),
        NodeKind.REQUIREMENT_USAGE: _requirement_text,
        NodeKind.CONSTRAINT_DEFINITION: (),
        NodeKind.CONSTRAINT_USAGE: (),
        NodeKind.VERIFICATION_CASE_DEFINITION: (
            single("verifies", "verifiedRequirement"),
            single("objective", "objectiveRequirement"),
        ),
        NodeKind.VERIFICATION_CASE_USAGE: (
            single("verifies", "verifiedRequirement"),
            single("method", "verificationMethod"),
        ),
        NodeKind.ANALYSIS_CASE_DEFINITION: _analysis,
        NodeKind.ANALYSIS_CASE_USAGE: _analysis,
        NodeKind.USE_CASE_DEFINITION: (
            names("includes", "includedUseCases"),
            single("objective", "objectiveRequirement"),
        ),
        NodeKind.USE_CASE_USAGE: (names("actors"), names("includes"), names("extends")),
        NodeKind.CONCERN_DEFINITION: (single("text"),),
        NodeKind.CONCERN_USAGE: (single("text"), names("stakeholders")),
        # Organizational
        NodeKind.PACKAGE: (names("members"), names("imports")),
        NodeKind.LIBRARY_PACKAGE: (names("members"),),
        # Interactions
        NodeKind.SEQUENCE_LIFELINE: (),
        NodeKind.INTERACTION: (names("participants"), names("messages")),
        # Metadata
        NodeKind.METADATA_DEFINITION: (single("baseType"), properties("attributes")),
        NodeKind.METADATA_USAGE: (single("annotates", "annotatedElement"),),
        NodeKind.COMMENT: (single("annotates", "annotatedElement"),),
        NodeKind.DOCUMENTATION: (single("documents", "documentedElement"),),
    }
)


def build_compartments(
    kind: str,
    spec: Mapping[str, Any],
    inherited_parameters: list[Any] | None = None,
) -> list[Compartment]:
    """
    Synthesize the ordered display compartments of an element.

    Args:
        kind: Node kind identifier
        spec: Element attributes
        inherited_parameters: Parameters of the usage's definition; only
            honoured for action and calculation usages

    Returns:
        Compartments in builder order; absent or empty attributes yield none

    Raises:
        UnknownNodeKind: If the kind is not registered
    """
    node_kind = resolve_node_kind(kind)
    inherited = inherited_parameters if node_kind in PARAMETER_INHERITING_KINDS else None

    compartments: list[Compartment] = []
    for builder in KIND_BUILDERS[node_kind]:
        try:
            result = builder(spec, inherited)
        except MalformedCompartmentInput as e:
            logger.warning(
                f"Dropping compartment of {node_kind.value} {spec.get('id', '')!r}: {e.message}"
            )
            continue

        if result is None:
            continue
        if isinstance(result, list):
            compartments.extend(result)
        else:
            compartments.append(result)

    return compartments
