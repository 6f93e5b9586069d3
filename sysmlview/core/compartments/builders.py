"""
Compartment builders.

Each factory returns a builder: a callable taking the element spec and the
inherited parameters (if any) and returning a compartment, or None when
the attribute is absent or empty. A builder raises MalformedCompartmentInput
when the attribute exists but has an unexpected shape.
"""

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import TypeAdapter, ValidationError

from sysmlview.models.specs import OwnedMember, PortSpec, PropertySpec
from sysmlview.models.view import Compartment, CompartmentItem
from sysmlview.utils.exceptions import MalformedCompartmentInput

Builder = Callable[[Mapping[str, Any], list | None], Compartment | list[Compartment] | None]

_PROPERTIES = TypeAdapter(list[PropertySpec])
_PORTS = TypeAdapter(list[PortSpec])
_NAMED = TypeAdapter(list[str | OwnedMember])
_SCALAR = TypeAdapter(str | int | float)


def validate(adapter: TypeAdapter, value: Any, key: str) -> Any:
    """Validate an attribute value, converting failures to MalformedCompartmentInput."""
    try:
        return adapter.validate_python(value)
    except ValidationError as e:
        raise MalformedCompartmentInput(
            f"Malformed '{key}' attribute: {e.error_count()} validation error(s)",
            context={"key": key, "errors": e.errors(include_url=False)},
        ) from e


def _present(value: Any) -> bool:
    return value is not None and value != "" and value != [] and value != {}


def _join(*parts: Any) -> str:
    return " ".join(str(part) for part in parts if part)


def properties(title: str, key: str | None = None) -> Builder:
    """List of name/type/multiplicity/value entries, e.g. attributes or ends."""
    key = key or title

    def build(spec: Mapping[str, Any], _inherited: list | None) -> Compartment | None:
        raw = spec.get(key)
        if not _present(raw):
            return None
        entries = validate(_PROPERTIES, raw, key)
        return Compartment(
            title=title,
            items=[
                CompartmentItem(
                    label=entry.name, value=_join(entry.multiplicity, entry.type, entry.value)
                )
                for entry in entries
            ],
        )

    return build


def ports(title: str = "ports", key: str = "ports") -> Builder:
    """Ports rendered as 'DIRECTION type'."""

    def build(spec: Mapping[str, Any], _inherited: list | None) -> Compartment | None:
        raw = spec.get(key)
        if not _present(raw):
            return None
        entries = validate(_PORTS, raw, key)
        return Compartment(
            title=title,
            items=[
                CompartmentItem(
                    label=port.name,
                    value=_join(port.direction.value.upper() if port.direction else None, port.type),
                )
                for port in entries
            ],
        )

    return build


def names(title: str, key: str | None = None) -> Builder:
    """
    List of labels.

    Entries may be plain strings or objects carrying a 'name'.
    """
    key = key or title

    def build(spec: Mapping[str, Any], _inherited: list | None) -> Compartment | None:
        raw = spec.get(key)
        if not _present(raw):
            return None
        entries = validate(_NAMED, raw, key)
        return Compartment(
            title=title,
            items=[
                CompartmentItem(label=entry if isinstance(entry, str) else entry.name)
                for entry in entries
            ],
        )

    return build


def owned(title: str, key: str | None = None) -> Builder:
    """Owned members rendered as 'name: multiplicity definition'."""
    key = key or title

    def build(spec: Mapping[str, Any], _inherited: list | None) -> Compartment | None:
        raw = spec.get(key)
        if not _present(raw):
            return None
        entries = validate(_NAMED, raw, key)
        items = []
        for entry in entries:
            if isinstance(entry, str):
                items.append(CompartmentItem(label=entry))
            else:
                value = _join(entry.multiplicity, entry.definition_name)
                items.append(CompartmentItem(label=entry.name, value=value or None))
        return Compartment(title=title, items=items)

    return build


def single(title: str, *keys: str) -> Builder:
    """
    One-row compartment from a scalar attribute.

    The first key holding a value wins.
    """
    keys = keys or (title,)

    def build(spec: Mapping[str, Any], _inherited: list | None) -> Compartment | None:
        for key in keys:
            raw = spec.get(key)
            if _present(raw):
                value = validate(_SCALAR, raw, key)
                return Compartment(title=title, items=[CompartmentItem(label=str(value))])
        return None

    return build


def action_ref(title: str, *keys: str) -> Builder:
    """
    One-row compartment naming an action.

    Accepts a plain string or a reference object with 'actionName' or 'name'.
    """

    def build(spec: Mapping[str, Any], _inherited: list | None) -> Compartment | None:
        for key in keys:
            raw = spec.get(key)
            if not _present(raw):
                continue
            if isinstance(raw, str):
                return Compartment(title=title, items=[CompartmentItem(label=raw)])
            if isinstance(raw, Mapping):
                label = raw.get("actionName") or raw.get("name")
                if isinstance(label, str) and label:
                    return Compartment(title=title, items=[CompartmentItem(label=label)])
            raise MalformedCompartmentInput(
                f"Malformed '{key}' attribute: expected an action name or reference",
                context={"key": key},
            )
        return None

    return build
