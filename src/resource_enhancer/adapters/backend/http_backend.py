"""HTTP client for the resource-processing backend."""

from typing import Any, Optional

import httpx

from resource_enhancer.config import Settings
from resource_enhancer.core import BackendReply, BackendUnavailableError, ResourceBackend


class HttpResourceBackend(ResourceBackend):
    """POSTs processing requests to the backend with httpx.

    One attempt per call; retry policy belongs to the caller.
    """

    def __init__(self, settings: Settings) -> None:
        self.url = settings.backend_url
        self.timeout = settings.backend_timeout
        self.token = settings.backend_token

    async def submit(
        self, urls: list[str], project_context: Any, project_id: Optional[str] = None
    ) -> BackendReply:
        """Send URLs and project context for enhancement."""
        headers = {"content-type": "application/json"}
        if self.token:
            headers["authorization"] = f"Bearer {self.token}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.url,
                    headers=headers,
                    json={
                        "urls": list(urls),
                        "projectContext": project_context,
                        "projectId": project_id,
                    },
                )
        except httpx.RequestError as e:
            # Some httpx errors (e.g. timeouts) carry an empty message
            raise BackendUnavailableError(str(e) or f"Network error: {type(e).__name__}") from e

        return BackendReply(status_code=response.status_code, body=response.text)
