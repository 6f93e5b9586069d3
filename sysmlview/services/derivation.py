"""
Read-only derivations over a model snapshot.

Resolves a usage's definition and the parts/states an element owns through
composition or aggregation. References to elements missing from the model
are skipped silently.
"""

from typing import Any

from sysmlview.models.element import Element, Model
from sysmlview.models.kinds import EdgeKind, NodeKind

_OWNERSHIP = (EdgeKind.COMPOSITION.value, EdgeKind.AGGREGATION.value)


class ModelIndex:
    """
    Lookup tables built once per materialization.

    Never mutates the model; enrich() returns copies.
    """

    def __init__(self, model: Model):
        self._nodes: dict[str, Element] = {}
        for node in model.nodes:
            self._nodes.setdefault(node.id, node)

        self._definitions: dict[str, str] = {}
        self._owned: dict[str, list[tuple[str, str]]] = {}
        for rel in model.relationships:
            if rel.type == EdgeKind.DEFINITION.value:
                self._definitions.setdefault(rel.source, rel.target)
            elif rel.type in _OWNERSHIP:
                self._owned.setdefault(rel.source, []).append((rel.target, rel.type))

    def get(self, element_id: str) -> Element | None:
        return self._nodes.get(element_id)

    def definition_of(self, element: Element) -> Element | None:
        """
        Resolve the definition of a usage.

        A 'definition' relationship wins over the 'definition' attribute.
        """
        target = self._definitions.get(element.id) or element.definition
        if not target:
            return None
        return self._nodes.get(target)

    def _owned_members(self, element: Element, child_kind: NodeKind) -> list[dict[str, Any]]:
        members = []
        for target, rel_type in self._owned.get(element.id, []):
            child = self._nodes.get(target)
            if child is None or child.kind != child_kind.value:
                continue
            definition = self.definition_of(child)
            member = {
                "id": child.id,
                "name": child.name or child.id,
                "definitionId": definition.id if definition else None,
                "definitionName": definition.name if definition else None,
                "relationshipType": rel_type,
            }
            if child_kind == NodeKind.PART_USAGE:
                member["multiplicity"] = child.spec.get("multiplicity")
            members.append(member)
        return members

    def owned_parts(self, element: Element) -> list[dict[str, Any]]:
        """Part usages owned by the element, in relationship order."""
        return self._owned_members(element, NodeKind.PART_USAGE)

    def owned_states(self, element: Element) -> list[dict[str, Any]]:
        """State usages owned by the element, in relationship order."""
        return self._owned_members(element, NodeKind.STATE_USAGE)

    def enrich(self, element: Element) -> Element:
        """
        Copy of the element with derived 'parts' and 'states'.

        Explicit attributes are never replaced.
        """
        additions: dict[str, Any] = {}

        if not element.spec.get("parts"):
            parts = self.owned_parts(element)
            if parts:
                additions["parts"] = parts

        if element.kind == NodeKind.STATE_MACHINE.value and not element.spec.get("states"):
            states = self.owned_states(element)
            if states:
                additions["states"] = states

        if not additions:
            return element
        return element.model_copy(update={"spec": {**element.spec, **additions}})
