"""
Data models for sysmlview.

Input models (frozen snapshots read from the graph):
- Element, Relationship, Model
- Viewpoint: named subset of node/edge kinds plus optional predicates

Output models (built fresh on every materialization):
- View, ViewNode, ViewEdge, EdgeStyle
- Compartment, CompartmentItem, Position

Enumerations:
- NodeKind, EdgeKind: closed kind tables
- ShapeFamily, ElementKind, EdgePath, EdgeMarker: display metadata
"""

from sysmlview.models.element import Element, Model, Relationship
from sysmlview.models.kinds import (
    EdgeKind,
    EdgeMarker,
    EdgePath,
    ElementKind,
    NodeKind,
    ShapeFamily,
)
from sysmlview.models.specs import (
    OwnedMember,
    Parameter,
    ParameterDirection,
    PortSpec,
    PropertySpec,
)
from sysmlview.models.view import (
    Compartment,
    CompartmentItem,
    EdgeStyle,
    Position,
    View,
    ViewEdge,
    ViewNode,
)
from sysmlview.models.viewpoint import Viewpoint

__all__ = [
    # Input models
    "Element",
    "Relationship",
    "Model",
    "Viewpoint",
    # Attribute shapes
    "Parameter",
    "ParameterDirection",
    "PropertySpec",
    "PortSpec",
    "OwnedMember",
    # View models
    "View",
    "ViewNode",
    "ViewEdge",
    "EdgeStyle",
    "Compartment",
    "CompartmentItem",
    "Position",
    # Enumerations
    "NodeKind",
    "EdgeKind",
    "ShapeFamily",
    "ElementKind",
    "EdgePath",
    "EdgeMarker",
]
