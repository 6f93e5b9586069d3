"""
Mapping between SysML kinds and graph labels/relationship types, and
between stored graph properties and element attributes.
"""

import json
import re
from collections.abc import Mapping
from typing import Any

from sysmlview.models.element import Element, Relationship
from sysmlview.models.kinds import ElementKind
from sysmlview.utils.logger import get_logger

logger = get_logger(__name__)

BASE_LABEL = "SysMLElement"

# Properties stored as JSON strings
JSON_PROPERTIES = (
    "attributes",
    "ports",
    "tags",
    "parameters",
    "inputs",
    "outputs",
    "items",
    "ends",
    "metadataValues",
    "internalTransitions",
)
# Stored property name -> attribute name
RENAMED_JSON_PROPERTIES = {"layoutPositions": "positions"}

_RELATIONSHIP_FIELDS = ("id", "type", "source", "target")


def node_kind_to_label(kind: str) -> str:
    """'part-definition' -> 'PartDefinition'."""
    return "".join(word[:1].upper() + word[1:] for word in kind.split("-"))


def label_to_node_kind(label: str) -> str:
    """'PartDefinition' -> 'part-definition'."""
    return re.sub(r"([A-Z])", r"-\1", label).lower()[1:]


def edge_kind_to_rel_type(kind: str) -> str:
    """'control-flow' -> 'CONTROL_FLOW'."""
    return kind.replace("-", "_").upper()


def rel_type_to_edge_kind(rel_type: str) -> str:
    """'CONTROL_FLOW' -> 'control-flow'."""
    return rel_type.replace("_", "-").lower()


def get_node_labels(kind: str) -> list[str]:
    """All graph labels of a node of the given kind."""
    return [BASE_LABEL, node_kind_to_label(kind)]


def get_element_kind(kind: str) -> ElementKind | None:
    """Definition/usage classification of a kind identifier."""
    if kind.endswith("-definition"):
        return ElementKind.DEFINITION
    if kind.endswith("-usage"):
        return ElementKind.USAGE
    return None


def _decode(key: str, raw: Any) -> tuple[bool, Any]:
    if not isinstance(raw, str):
        return True, raw
    try:
        return True, json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning(f"Dropping property {key!r}: invalid JSON ({e})")
        return False, None


def properties_to_spec(properties: Mapping[str, Any]) -> dict[str, Any]:
    """
    Convert stored graph properties to element attributes.

    JSON-string properties are decoded; a property that fails to decode is
    dropped with a warning. Null properties are omitted.
    """
    spec: dict[str, Any] = {}
    for key, raw in properties.items():
        if raw is None:
            continue

        if key in JSON_PROPERTIES or key in RENAMED_JSON_PROPERTIES:
            ok, value = _decode(key, raw)
            if ok:
                spec[RENAMED_JSON_PROPERTIES.get(key, key)] = value
            continue

        spec[key] = raw
    return spec


def record_to_element(labels: list[str], properties: Mapping[str, Any]) -> Element:
    """
    Build an element from a node's labels and properties.

    A node carrying only the base label maps to an empty kind, which the
    kind registry rejects at projection time.
    """
    specific = next((label for label in labels if label != BASE_LABEL), None)
    kind = label_to_node_kind(specific) if specific else ""
    spec = properties_to_spec(properties)
    return Element(id=spec.get("id", ""), kind=kind, spec=spec)


def record_to_relationship(
    rel_type: str, source: str, target: str, properties: Mapping[str, Any]
) -> Relationship:
    """Build a relationship; the ID falls back to '{source}-{kind}-{target}'."""
    kind = rel_type_to_edge_kind(rel_type)
    spec = properties_to_spec(properties)
    extra = {key: value for key, value in spec.items() if key not in _RELATIONSHIP_FIELDS}
    return Relationship(
        id=spec.get("id") or f"{source}-{kind}-{target}",
        type=kind,
        source=source,
        target=target,
        **extra,
    )
