"""
Configuration for sysmlview.

Supports loading from:
1. Environment variables (highest priority)
2. YAML config file
3. Default values (fallback)
"""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class LayoutConfig(BaseModel):
    """Fallback grid layout for nodes without a stored position."""

    columns: int = Field(default=3, ge=1)
    column_spacing: float = 320.0
    row_spacing: float = 260.0


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    log_to_file: bool = False
    log_dir: str = "logs"
    file_rotation: str = "10 MB"
    file_retention: str = "7 days"
    compression: str = "zip"
    serialize: bool = True


class Neo4jConfig(BaseModel):
    """Neo4j graph database configuration."""

    uri: str = "bolt://localhost:7687"
    username: str = "neo4j"
    password: str = "password"
    database: str = "neo4j"


class Config(BaseModel):
    """Main configuration."""

    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    neo4j: Neo4jConfig = Field(default_factory=Neo4jConfig)

    # Model source backend
    model_source: str = "neo4j"

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> "Config":
        """
        Load configuration from environment variables.

        Priority: .env file -> system environment variables -> defaults

        Args:
            env_file: Optional path to .env file (default: .env in project root)

        Returns:
            Config instance

        Environment variables:
            SYSMLVIEW_MODEL_SOURCE: Model source backend (neo4j)
            SYSMLVIEW_NEO4J_URI: Neo4j URI
            SYSMLVIEW_NEO4J_USERNAME: Neo4j username
            SYSMLVIEW_NEO4J_PASSWORD: Neo4j password
            SYSMLVIEW_NEO4J_DATABASE: Neo4j database name
            SYSMLVIEW_LAYOUT_COLUMNS: Columns of the fallback grid
            SYSMLVIEW_LAYOUT_COLUMN_SPACING: Horizontal grid spacing
            SYSMLVIEW_LAYOUT_ROW_SPACING: Vertical grid spacing
            SYSMLVIEW_LOG_LEVEL: Log level
            SYSMLVIEW_LOG_TO_FILE: Enable the rotating file sink
        """
        if env_file:
            load_dotenv(env_file)
        elif Path(".env").exists():
            load_dotenv()

        def get_env(key: str, default: Any = None) -> Any:
            """Get environment variable with type conversion."""
            value = os.getenv(key)
            if value is None:
                return default
            if value == "":
                return default
            # bool before int: bool is a subclass of int
            if isinstance(default, bool):
                return str(value).lower() in ("true", "1", "yes")
            if isinstance(default, int):
                return int(value)
            if isinstance(default, float):
                return float(value)
            return value

        return cls(
            model_source=get_env("SYSMLVIEW_MODEL_SOURCE", "neo4j"),
            neo4j=Neo4jConfig(
                uri=get_env("SYSMLVIEW_NEO4J_URI", "bolt://localhost:7687"),
                username=get_env("SYSMLVIEW_NEO4J_USERNAME", "neo4j"),
                password=get_env("SYSMLVIEW_NEO4J_PASSWORD", "password"),
                database=get_env("SYSMLVIEW_NEO4J_DATABASE", "neo4j"),
            ),
            layout=LayoutConfig(
                columns=get_env("SYSMLVIEW_LAYOUT_COLUMNS", 3),
                column_spacing=get_env("SYSMLVIEW_LAYOUT_COLUMN_SPACING", 320.0),
                row_spacing=get_env("SYSMLVIEW_LAYOUT_ROW_SPACING", 260.0),
            ),
            logging=LoggingConfig(
                level=get_env("SYSMLVIEW_LOG_LEVEL", "INFO"),
                log_to_file=get_env("SYSMLVIEW_LOG_TO_FILE", False),
                log_dir=get_env("SYSMLVIEW_LOG_DIR", "logs"),
                file_rotation=get_env("SYSMLVIEW_LOG_FILE_ROTATION", "10 MB"),
                file_retention=get_env("SYSMLVIEW_LOG_FILE_RETENTION", "7 days"),
                compression=get_env("SYSMLVIEW_LOG_COMPRESSION", "zip"),
                serialize=get_env("SYSMLVIEW_LOG_SERIALIZE", True),
            ),
        )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> "Config":
        """
        Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            yaml.YAMLError: If YAML is invalid
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path) as f:
            data = yaml.safe_load(f)

        return cls(**(data or {}))

    @classmethod
    def from_env_or_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str | Path | None = None
    ) -> "Config":
        """
        Load configuration with priority: env vars > YAML > defaults.

        Args:
            yaml_path: Optional path to YAML config
            env_file: Optional path to .env file

        Returns:
            Config instance
        """
        if yaml_path and Path(yaml_path).exists():
            with open(yaml_path) as f:
                config_dict = yaml.safe_load(f) or {}
        else:
            config_dict = {}

        env_config = cls.from_env(env_file=env_file)

        final_dict = {**config_dict}

        # Only sections that differ from defaults count as env overrides
        default = cls()
        if env_config.neo4j != default.neo4j:
            final_dict["neo4j"] = env_config.neo4j.model_dump()
        if env_config.layout != default.layout:
            final_dict["layout"] = env_config.layout.model_dump()
        if env_config.logging != default.logging:
            final_dict["logging"] = env_config.logging.model_dump()

        if env_config.model_source != default.model_source:
            final_dict["model_source"] = env_config.model_source

        return cls(**final_dict) if final_dict else env_config


# Default config instance
default_config = Config()
