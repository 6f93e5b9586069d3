"""
Closed enumerations of SysML v2 node and relationship kinds.
"""

from enum import Enum


class NodeKind(str, Enum):
    """Kinds of elements that can appear as diagram nodes."""

    # Structural Elements
    PART_DEFINITION = "part-definition"
    PART_USAGE = "part-usage"
    ATTRIBUTE_DEFINITION = "attribute-definition"
    ATTRIBUTE_USAGE = "attribute-usage"
    PORT_DEFINITION = "port-definition"
    PORT_USAGE = "port-usage"
    ITEM_DEFINITION = "item-definition"
    ITEM_USAGE = "item-usage"
    CONNECTION_DEFINITION = "connection-definition"
    CONNECTION_USAGE = "connection-usage"
    INTERFACE_DEFINITION = "interface-definition"
    INTERFACE_USAGE = "interface-usage"
    ALLOCATION_DEFINITION = "allocation-definition"
    ALLOCATION_USAGE = "allocation-usage"
    REFERENCE_USAGE = "reference-usage"
    OCCURRENCE_DEFINITION = "occurrence-definition"
    OCCURRENCE_USAGE = "occurrence-usage"

    # Behavioral Elements
    ACTION_DEFINITION = "action-definition"
    ACTION_USAGE = "action-usage"
    ACTIVITY_CONTROL = "activity-control"
    CALCULATION_DEFINITION = "calculation-definition"
    CALCULATION_USAGE = "calculation-usage"
    PERFORM_ACTION = "perform-action"
    SEND_ACTION = "send-action"
    ACCEPT_ACTION = "accept-action"
    ASSIGNMENT_ACTION = "assignment-action"
    IF_ACTION = "if-action"
    FOR_LOOP_ACTION = "for-loop-action"
    WHILE_LOOP_ACTION = "while-loop-action"
    STATE = "state"
    STATE_MACHINE = "state-machine"
    STATE_DEFINITION = "state-definition"
    STATE_USAGE = "state-usage"
    TRANSITION_USAGE = "transition-usage"
    EXHIBIT_STATE = "exhibit-state"

    # Requirements & Cases
    REQUIREMENT_DEFINITION = "requirement-definition"
    REQUIREMENT_USAGE = "requirement-usage"
    CONSTRAINT_DEFINITION = "constraint-definition"
    CONSTRAINT_USAGE = "constraint-usage"
    VERIFICATION_CASE_DEFINITION = "verification-case-definition"
    VERIFICATION_CASE_USAGE = "verification-case-usage"
    ANALYSIS_CASE_DEFINITION = "analysis-case-definition"
    ANALYSIS_CASE_USAGE = "analysis-case-usage"
    USE_CASE_DEFINITION = "use-case-definition"
    USE_CASE_USAGE = "use-case-usage"
    CONCERN_DEFINITION = "concern-definition"
    CONCERN_USAGE = "concern-usage"

    # Organizational Elements
    PACKAGE = "package"
    LIBRARY_PACKAGE = "library-package"

    # Interactions
    SEQUENCE_LIFELINE = "sequence-lifeline"
    INTERACTION = "interaction"

    # Metadata
    METADATA_DEFINITION = "metadata-definition"
    METADATA_USAGE = "metadata-usage"
    COMMENT = "comment"
    DOCUMENTATION = "documentation"


class EdgeKind(str, Enum):
    """Kinds of relationships that can appear as diagram edges."""

    # Dependency
    DEPENDENCY = "dependency"

    # Requirement
    SATISFY = "satisfy"
    VERIFY = "verify"
    REFINE = "refine"

    # Allocation
    ALLOCATE = "allocate"

    # Use Case
    INCLUDE = "include"
    EXTEND = "extend"

    # State Machine
    TRANSITION = "transition"

    # Interaction
    MESSAGE = "message"
    SUCCESSION = "succession"
    SUCCESSION_AS_USAGE = "succession-as-usage"

    # Flow
    CONTROL_FLOW = "control-flow"
    FLOW_CONNECTION = "flow-connection"
    ITEM_FLOW = "item-flow"
    ACTION_FLOW = "action-flow"

    # Typing
    SPECIALIZATION = "specialization"
    CONJUGATION = "conjugation"
    FEATURE_TYPING = "feature-typing"
    SUBSETTING = "subsetting"
    REDEFINITION = "redefinition"
    TYPE_FEATURING = "type-featuring"

    # Definition/Usage
    DEFINITION = "definition"
    FEATURE_MEMBERSHIP = "feature-membership"
    OWNING_MEMBERSHIP = "owning-membership"
    VARIANT_MEMBERSHIP = "variant-membership"

    # Connectors
    BINDING_CONNECTOR = "binding-connector"
    CONNECTOR_AS_USAGE = "connector-as-usage"

    # Features
    FEATURE_CHAINING = "feature-chaining"
    FEATURE_INVERTING = "feature-inverting"
    FEATURE_VALUE = "feature-value"

    # Composition
    COMPOSITION = "composition"
    AGGREGATION = "aggregation"


class ShapeFamily(str, Enum):
    """Node shape families understood by the diagram renderer."""

    DEFINITION = "definition"
    BLOCK = "block"
    ACTIVITY = "activity"
    PARAMETRIC = "parametric"
    REQUIREMENT = "requirement"
    USE_CASE = "use-case"
    STATE = "state"
    STATE_MACHINE = "state-machine"
    SEQUENCE_LIFELINE = "sequence-lifeline"
    ACTIVITY_CONTROL = "activity-control"


class ElementKind(str, Enum):
    """Definition/usage classification derived from the kind identifier."""

    DEFINITION = "definition"
    USAGE = "usage"


class EdgePath(str, Enum):
    """Edge path routing styles."""

    SMOOTH = "smooth"
    STRAIGHT = "straight"


class EdgeMarker(str, Enum):
    """Edge end decorations."""

    ARROW_FILLED = "arrow-filled"
    ARROW_OPEN = "arrow-open"
    TRIANGLE_HOLLOW = "arrow-triangle-hollow"
    DIAMOND_FILLED = "diamond-filled"
    DIAMOND_HOLLOW = "diamond-hollow"
