"""Utility modules for sysmlview."""

from sysmlview.utils.exceptions import (
    ConfigurationError,
    MalformedCompartmentInput,
    ModelSourceError,
    SysMLViewError,
    UnknownEdgeKind,
    UnknownKindError,
    UnknownNodeKind,
    ViewpointNotFoundError,
)
from sysmlview.utils.logger import get_logger, setup_logging

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Exceptions
    "SysMLViewError",
    "UnknownKindError",
    "UnknownNodeKind",
    "UnknownEdgeKind",
    "MalformedCompartmentInput",
    "ModelSourceError",
    "ViewpointNotFoundError",
    "ConfigurationError",
]
