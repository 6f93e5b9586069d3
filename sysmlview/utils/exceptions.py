"""
Custom exception hierarchy for sysmlview.

Provides structured error types for view materialization and model loading.
All exceptions inherit from SysMLViewError for easy catching.
"""


class SysMLViewError(Exception):
    """
    Base exception for all sysmlview errors.
    All custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, context: dict | None = None):
        """
        Initialize sysmlview error.
        Args:
            message: Error message
            context: Optional context dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class UnknownKindError(SysMLViewError):
    """
    Kind lookup errors.
    Raised when a node or edge kind has no entry in the kind registry.
    """

    def __init__(self, kind: str, context: dict | None = None):
        super().__init__(f"kind not found: {kind!r}", {"kind": kind, **(context or {})})
        self.kind = kind


class UnknownNodeKind(UnknownKindError):
    """
    Unknown node kind.
    Raised when an element's kind has no projection configuration. Fatal to
    the materialization call: it signals drift between the kind enumeration
    and the stored data.
    """

    pass


class UnknownEdgeKind(UnknownKindError):
    """
    Unknown relationship kind.
    Raised when a relationship type is not a registered edge kind.
    """

    pass


class MalformedCompartmentInput(SysMLViewError):
    """
    Malformed compartment input.
    Raised by a compartment builder when an attribute has an unexpected
    shape. Recovered by the synthesizer: only that compartment is dropped.
    """

    pass


class ModelSourceError(SysMLViewError):
    """
    Model source errors.
    Raised when the graph database cannot be reached or queried.
    """

    pass


class ViewpointNotFoundError(SysMLViewError):
    """
    Viewpoint lookup errors.
    Raised when a viewpoint id is not in the viewpoint registry.
    """

    pass


class ConfigurationError(SysMLViewError):
    """
    Configuration errors.
    Raised when configuration is invalid or missing required values.
    """

    pass
