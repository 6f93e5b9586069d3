"""
Base interface for model sources.
"""

from abc import ABC, abstractmethod

from sysmlview.models.element import Model


class ModelSource(ABC):
    """Abstract base class for read-only model sources."""

    @abstractmethod
    async def fetch_model(self, viewpoint_id: str | None = None) -> Model:
        """
        Fetch a model snapshot.

        Args:
            viewpoint_id: Optional viewpoint to coarse-filter by; sources may
                return a superset of what the viewpoint selects

        Returns:
            Model snapshot
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release connections held by the source."""
        pass
