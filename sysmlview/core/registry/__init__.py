"""
Kind registry for sysmlview.

Maps every node kind to a shape family, accent colour and view type tag,
and every edge kind to an edge style. Also holds the built-in viewpoints.
"""

from sysmlview.core.registry.kind_registry import (
    ACCENTS,
    DEFAULT_EDGE_STROKE,
    DEFAULT_NODE_ACCENT,
    EDGE_STYLES,
    SHAPES,
    accent_for,
    edge_style_for,
    element_kind_for,
    humanize_kind,
    is_definition_kind,
    label_for,
    resolve_edge_kind,
    resolve_node_kind,
    shape_for,
    view_type_for,
)
from sysmlview.core.registry.viewpoints import (
    all_viewpoints,
    get_available_types_for_viewpoint,
    get_viewpoint_by_id,
)

__all__ = [
    # Tables
    "SHAPES",
    "ACCENTS",
    "EDGE_STYLES",
    "DEFAULT_NODE_ACCENT",
    "DEFAULT_EDGE_STROKE",
    # Lookups
    "resolve_node_kind",
    "resolve_edge_kind",
    "shape_for",
    "accent_for",
    "is_definition_kind",
    "element_kind_for",
    "view_type_for",
    "label_for",
    "humanize_kind",
    "edge_style_for",
    # Viewpoints
    "all_viewpoints",
    "get_viewpoint_by_id",
    "get_available_types_for_viewpoint",
]
