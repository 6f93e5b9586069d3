"""
Parameter inheritance and parameter compartments.

A usage inherits its definition's parameters. Local parameters override
inherited ones by name only; direction and type are not compared.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter

from sysmlview.core.compartments.builders import Builder, properties, validate
from sysmlview.models.specs import Parameter
from sysmlview.models.view import Compartment, CompartmentItem
from sysmlview.utils.exceptions import MalformedCompartmentInput
from sysmlview.utils.logger import get_logger

logger = get_logger(__name__)

_PARAMETERS = TypeAdapter(list[Parameter])

_inputs = properties("inputs")
_outputs = properties("outputs")


def merge_parameters(
    local: list[Any] | None, inherited: list[Any] | None = None
) -> list[Parameter]:
    """
    Merge a usage's local parameters with those inherited from its definition.

    Args:
        local: Parameters declared on the usage
        inherited: Parameters declared on the definition

    Returns:
        Surviving inherited parameters (inherited=True) followed by the local
        parameters (inherited=False)

    Raises:
        MalformedCompartmentInput: If either list has an unexpected shape
    """
    local_params = [
        param.model_copy(update={"inherited": False})
        for param in validate(_PARAMETERS, local or [], "parameters")
    ]
    inherited_params = [
        param.model_copy(update={"inherited": True})
        for param in validate(_PARAMETERS, inherited or [], "definition parameters")
    ]

    local_names = {param.name for param in local_params}
    return [p for p in inherited_params if p.name not in local_names] + local_params


def _item(param: Parameter) -> CompartmentItem:
    return CompartmentItem(
        label=param.name,
        value=param.type or "",
        emphasis=False if param.inherited else None,
        inherited=param.inherited,
    )


def parameter_compartments(parameters: list[Parameter]) -> list[Compartment]:
    """Group parameters into 'inputs' (in/inout) and 'outputs' (out/inout)."""
    compartments = []

    inputs = [_item(p) for p in parameters if p.is_input]
    if inputs:
        compartments.append(Compartment(title="inputs", items=inputs))

    outputs = [_item(p) for p in parameters if p.is_output]
    if outputs:
        compartments.append(Compartment(title="outputs", items=outputs))

    return compartments


def parameters_or_io() -> Builder:
    """
    Parameter compartments, or plain inputs/outputs when there are no parameters.

    Inherited parameters are merged only when the caller supplies them. A
    malformed inherited list is ignored so the local parameters still render.
    """

    def build(spec: Mapping[str, Any], inherited: list | None) -> list[Compartment] | None:
        if inherited:
            try:
                validate(_PARAMETERS, inherited, "definition parameters")
            except MalformedCompartmentInput as e:
                logger.warning(
                    f"Ignoring inherited parameters of {spec.get('id', '')!r}: {e.message}"
                )
                inherited = None

        merged = merge_parameters(spec.get("parameters"), inherited)
        if merged:
            return parameter_compartments(merged)

        fallback = [c for c in (_inputs(spec, None), _outputs(spec, None)) if c is not None]
        return fallback or None

    return build
