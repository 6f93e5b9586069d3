"""
Factory for creating model source backends.
"""

from sysmlview.config import Config
from sysmlview.core.model_source.base import ModelSource
from sysmlview.core.model_source.neo4j_source import Neo4jModelSource
from sysmlview.utils.exceptions import ConfigurationError


class ModelSourceFactory:
    """Factory for creating model sources from configuration."""

    @staticmethod
    def create(config: Config) -> ModelSource:
        """
        Create model source from configuration.

        Args:
            config: Main configuration object

        Returns:
            Model source instance

        Raises:
            ConfigurationError: If backend is not supported
        """
        if config.model_source == "neo4j":
            return Neo4jModelSource(
                uri=config.neo4j.uri,
                username=config.neo4j.username,
                password=config.neo4j.password,
                database=config.neo4j.database,
            )
        else:
            raise ConfigurationError(
                f"Unsupported model source: {config.model_source}",
                {"model_source": config.model_source},
            )
