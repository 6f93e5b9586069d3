"""
sysmlview: viewpoint-driven SysML v2 model-to-view materialization.

    from sysmlview import materialize, Model, Element, get_viewpoint_by_id

    view = materialize(model, get_viewpoint_by_id("sysml.requirement"))
"""

from sysmlview.config import Config, default_config
from sysmlview.core.registry import all_viewpoints, get_viewpoint_by_id
from sysmlview.models import (
    Element,
    Model,
    Relationship,
    View,
    ViewEdge,
    Viewpoint,
    ViewNode,
)
from sysmlview.services import ViewMaterializer, ViewService, materialize

__version__ = "0.1.0"

__all__ = [
    "materialize",
    "ViewMaterializer",
    "ViewService",
    "Element",
    "Relationship",
    "Model",
    "Viewpoint",
    "View",
    "ViewNode",
    "ViewEdge",
    "all_viewpoints",
    "get_viewpoint_by_id",
    "Config",
    "default_config",
]
