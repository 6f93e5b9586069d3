"""
View service: fetch a model from a source and materialize a viewpoint.
"""

from collections.abc import Mapping
from typing import Any

from sysmlview.config import Config, default_config
from sysmlview.core.model_source import ModelSource, ModelSourceFactory
from sysmlview.core.registry import get_viewpoint_by_id
from sysmlview.models.view import Position, View
from sysmlview.services.materializer import ViewMaterializer
from sysmlview.utils.exceptions import ViewpointNotFoundError
from sysmlview.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


class ViewService:
    """
    Async facade over a model source and the materializer.

    Usage:
        service = ViewService(Neo4jModelSource(...), config)
        view = await service.render("sysml.requirement")
    """

    def __init__(self, source: ModelSource, config: Config | None = None):
        """
        Initialize view service.

        Args:
            source: Model source to fetch snapshots from
            config: Configuration
        """
        self.source = source
        self.config = config or default_config
        self.materializer = ViewMaterializer(self.config)

    @classmethod
    def from_config(cls, config: Config | None = None) -> "ViewService":
        """
        Build a service from configuration: logging, then the model source.

        Args:
            config: Configuration (loaded from the environment when None)

        Returns:
            ViewService instance

        Raises:
            ConfigurationError: If the model source backend is not supported
        """
        config = config or Config.from_env()

        setup_logging(
            level=config.logging.level,
            log_to_file=config.logging.log_to_file,
            log_dir=config.logging.log_dir,
            file_rotation=config.logging.file_rotation,
            file_retention=config.logging.file_retention,
            compression=config.logging.compression,
            serialize=config.logging.serialize,
        )

        logger.info(f"Creating model source: {config.model_source}")
        source = ModelSourceFactory.create(config)
        return cls(source, config)

    async def render(
        self,
        viewpoint_id: str | None = None,
        positions: Mapping[str, Position | Mapping[str, Any]] | None = None,
    ) -> View:
        """
        Fetch the model and materialize a view.

        Args:
            viewpoint_id: Built-in viewpoint ID; None renders everything
            positions: Explicit node positions by element ID

        Returns:
            Materialized view

        Raises:
            ViewpointNotFoundError: If the viewpoint ID is unknown
            ModelSourceError: If the model cannot be fetched
        """
        viewpoint = None
        if viewpoint_id is not None:
            viewpoint = get_viewpoint_by_id(viewpoint_id)
            if viewpoint is None:
                raise ViewpointNotFoundError(
                    f"Viewpoint not found: {viewpoint_id}", {"viewpoint_id": viewpoint_id}
                )

        model = await self.source.fetch_model(viewpoint_id)
        view = self.materializer.materialize(model, viewpoint, positions)

        logger.info(
            f"Rendered {viewpoint_id or 'unfiltered'} view: "
            f"{len(view.nodes)} nodes, {len(view.edges)} edges"
        )
        return view

    async def close(self) -> None:
        """Close the underlying model source."""
        await self.source.close()
