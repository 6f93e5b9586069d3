"""
Projection of model elements and relationships into view nodes and edges.
"""

from sysmlview.core.projection.edge_projector import project_edge
from sysmlview.core.projection.node_projector import (
    NODE_MAPPERS,
    grid_position,
    project_node,
)

__all__ = [
    "project_node",
    "project_edge",
    "grid_position",
    "NODE_MAPPERS",
]
