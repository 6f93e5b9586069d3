"""
Compartment synthesis for sysmlview.

Builds the titled display compartments of a node from its attributes,
including parameter inheritance from a definition to its usages.
"""

from sysmlview.core.compartments.parameters import (
    merge_parameters,
    parameter_compartments,
)
from sysmlview.core.compartments.synthesizer import (
    KIND_BUILDERS,
    PARAMETER_INHERITING_KINDS,
    build_compartments,
)

__all__ = [
    "build_compartments",
    "merge_parameters",
    "parameter_compartments",
    "KIND_BUILDERS",
    "PARAMETER_INHERITING_KINDS",
]
