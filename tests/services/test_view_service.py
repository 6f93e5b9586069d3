"""
Tests for the async view service.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from sysmlview.config import Config
from sysmlview.core.model_source import ModelSource
from sysmlview.services.view_service import ViewService
from sysmlview.utils.exceptions import ConfigurationError, ModelSourceError, ViewpointNotFoundError


@pytest.fixture
def mock_source(vehicle_model):
    """Model source returning the vehicle model."""
    source = AsyncMock(spec=ModelSource)
    source.fetch_model.return_value = vehicle_model
    return source


@pytest.mark.unit
@pytest.mark.asyncio
class TestViewService:
    """Test ViewService rendering."""

    async def test_render_viewpoint(self, mock_source):
        """Test rendering fetches with the viewpoint ID and materializes."""
        service = ViewService(mock_source)

        view = await service.render("sysml.requirement")

        mock_source.fetch_model.assert_awaited_once_with("sysml.requirement")
        assert [n.id for n in view.nodes] == ["req-stop"]

    async def test_render_unfiltered(self, mock_source, vehicle_model):
        """Test rendering without a viewpoint keeps all nodes."""
        service = ViewService(mock_source)

        view = await service.render()

        mock_source.fetch_model.assert_awaited_once_with(None)
        assert len(view.nodes) == len(vehicle_model.nodes)

    async def test_render_with_positions(self, mock_source):
        """Test explicit positions are forwarded to the materializer."""
        service = ViewService(mock_source)

        view = await service.render("sysml.requirement", positions={"req-stop": {"x": 3, "y": 4}})

        assert (view.nodes[0].position.x, view.nodes[0].position.y) == (3, 4)

    async def test_unknown_viewpoint(self, mock_source):
        """Test unknown viewpoint IDs fail before fetching."""
        service = ViewService(mock_source)

        with pytest.raises(ViewpointNotFoundError, match="sysml.nope"):
            await service.render("sysml.nope")

        mock_source.fetch_model.assert_not_awaited()

    async def test_source_errors_propagate(self, mock_source):
        """Test model source failures reach the caller."""
        mock_source.fetch_model.side_effect = ModelSourceError("Failed to fetch model: down")
        service = ViewService(mock_source)

        with pytest.raises(ModelSourceError):
            await service.render("sysml.requirement")

    async def test_close(self, mock_source):
        """Test closing closes the source."""
        service = ViewService(mock_source)

        await service.close()

        mock_source.close.assert_awaited_once()


@pytest.mark.unit
class TestViewServiceFromConfig:
    """Test building the service from configuration."""

    def test_from_config(self):
        """Test the source is created through the factory."""
        config = Config()
        source = MagicMock()

        with (
            patch("sysmlview.services.view_service.ModelSourceFactory") as mock_factory,
            patch("sysmlview.services.view_service.setup_logging") as mock_logging,
        ):
            mock_factory.create.return_value = source
            service = ViewService.from_config(config)

        mock_factory.create.assert_called_once_with(config)
        mock_logging.assert_called_once()
        assert service.source is source
        assert service.materializer.layout == config.layout

    def test_from_config_unsupported_backend(self):
        """Test unsupported backends raise ConfigurationError."""
        config = Config(model_source="sqlite")

        with patch("sysmlview.services.view_service.setup_logging"):
            with pytest.raises(ConfigurationError, match="Unsupported model source"):
                ViewService.from_config(config)
