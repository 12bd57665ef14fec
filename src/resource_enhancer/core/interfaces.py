"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from resource_enhancer.core.entities import BackendReply, ProcessingResult


class ResourceBackend(ABC):
    """Interface for the remote resource-processing backend."""

    @abstractmethod
    async def submit(
        self, urls: list[str], project_context: Any, project_id: Optional[str] = None
    ) -> BackendReply:
        """Send one processing request.

        Returns the reply for any completed exchange, including non-2xx
        ones. Raises ``BackendUnavailableError`` if the request never
        completed.
        """
        pass


class ResourceRenderer(ABC):
    """Interface for rendering processing results."""

    @abstractmethod
    async def render(self, result: ProcessingResult, heading: str) -> str:
        """Render the result as text."""
        pass
