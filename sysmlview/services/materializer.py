"""
View materialization: model + viewpoint (+ positions) -> view.
"""

from collections.abc import Mapping
from typing import Any

from sysmlview.config import Config, default_config
from sysmlview.core.projection import project_edge, project_node
from sysmlview.models.element import Element, Model
from sysmlview.models.view import Position, View
from sysmlview.models.viewpoint import Viewpoint
from sysmlview.services.derivation import ModelIndex
from sysmlview.utils.logger import get_logger

logger = get_logger(__name__)

PositionMap = Mapping[str, Position | Mapping[str, Any]]


class ViewMaterializer:
    """
    Deterministic projection of a model through a viewpoint.

    Pure and synchronous: the same inputs always yield an equal view, and
    neither the model nor the position map is modified.
    """

    def __init__(self, config: Config | None = None):
        """
        Initialize materializer.

        Args:
            config: Configuration (layout settings are used)
        """
        self.config = config or default_config
        self.layout = self.config.layout

    def _position_for(
        self, element: Element, viewpoint: Viewpoint | None, positions: PositionMap
    ) -> Position | Mapping[str, Any] | None:
        explicit = positions.get(element.id)
        if explicit is not None:
            return explicit

        # Stored per-viewpoint layout
        stored = element.spec.get("positions")
        if viewpoint is not None and isinstance(stored, Mapping):
            candidate = stored.get(viewpoint.id)
            if isinstance(candidate, Mapping):
                return candidate
        return None

    def materialize(
        self,
        model: Model,
        viewpoint: Viewpoint | None = None,
        positions: PositionMap | None = None,
    ) -> View:
        """
        Produce a view of the model.

        Args:
            model: Model snapshot
            viewpoint: Selection to apply; None selects everything
            positions: Explicit node positions by element ID

        Returns:
            View with nodes in model order, then edges in model order

        Raises:
            UnknownNodeKind: If a selected element has an unregistered kind
            UnknownEdgeKind: If a selected relationship has an unregistered type
        """
        positions = positions or {}
        index = ModelIndex(model)

        if viewpoint is None:
            selected_nodes = list(model.nodes)
            selected_rels = list(model.relationships)
        else:
            selected_nodes = [n for n in model.nodes if viewpoint.accepts_node(n)]
            selected_rels = [r for r in model.relationships if viewpoint.accepts_relationship(r)]

        nodes = [
            project_node(
                index.enrich(element),
                self._position_for(element, viewpoint, positions),
                index=i,
                definition=index.definition_of(element),
                layout=self.layout,
            )
            for i, element in enumerate(selected_nodes)
        ]
        edges = [project_edge(rel) for rel in selected_rels]

        logger.debug(
            f"Materialized {viewpoint.id if viewpoint else 'unfiltered'} view: "
            f"{len(nodes)}/{len(model.nodes)} nodes, "
            f"{len(edges)}/{len(model.relationships)} edges"
        )
        return View(nodes=nodes, edges=edges)


def materialize(
    model: Model,
    viewpoint: Viewpoint | None = None,
    positions: PositionMap | None = None,
    config: Config | None = None,
) -> View:
    """Materialize a view with a one-off ViewMaterializer."""
    return ViewMaterializer(config).materialize(model, viewpoint, positions)
