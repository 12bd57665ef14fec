"""Tests for the HTTP backend adapter."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from resource_enhancer.adapters.backend import HttpResourceBackend
from resource_enhancer.config import Settings
from resource_enhancer.core import BackendUnavailableError


@pytest.fixture
def settings() -> Settings:
    """Create settings pointing at a test backend."""
    settings = Settings()
    settings.backend.base_url = "https://backend.test/"
    settings.backend.timeout = 5.0
    return settings


def mock_async_client(mock_client_class: MagicMock, response=None, error=None) -> AsyncMock:
    mock_client = AsyncMock()
    mock_client.__aenter__.return_value = mock_client
    if error is not None:
        mock_client.post.side_effect = error
    else:
        mock_client.post.return_value = response
    mock_client_class.return_value = mock_client
    return mock_client


@pytest.mark.asyncio
async def test_submit_success(settings: Settings) -> None:
    """Test a completed request is returned as a reply."""
    backend = HttpResourceBackend(settings)

    with patch("httpx.AsyncClient") as mock_client_class:
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.text = '{"enhanced_resources": []}'
        mock_client = mock_async_client(mock_client_class, response=mock_response)

        reply = await backend.submit(["https://a.com"], {"goal": "learn"}, "p1")

        assert reply.status_code == 200
        assert reply.body == '{"enhanced_resources": []}'
        mock_client_class.assert_called_once_with(timeout=5.0)

        call_args = mock_client.post.call_args
        assert call_args.args[0] == "https://backend.test/api/process-resources"
        assert call_args.kwargs["json"] == {
            "urls": ["https://a.com"],
            "projectContext": {"goal": "learn"},
            "projectId": "p1",
        }
        assert "authorization" not in call_args.kwargs["headers"]


@pytest.mark.asyncio
async def test_submit_returns_error_status(settings: Settings) -> None:
    """Test non-2xx statuses are returned, not raised."""
    backend = HttpResourceBackend(settings)

    with patch("httpx.AsyncClient") as mock_client_class:
        mock_response = MagicMock()
        mock_response.status_code = 502
        mock_response.text = "Bad Gateway"
        mock_client = mock_async_client(mock_client_class, response=mock_response)

        reply = await backend.submit(["https://a.com"], {})

        assert reply.status_code == 502
        assert not reply.ok
        assert mock_client.post.call_count == 1


@pytest.mark.asyncio
async def test_submit_network_error(settings: Settings) -> None:
    """Test transport failures become BackendUnavailableError."""
    backend = HttpResourceBackend(settings)

    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client = mock_async_client(
            mock_client_class, error=httpx.ConnectError("Connection refused")
        )

        with pytest.raises(BackendUnavailableError, match="Connection refused"):
            await backend.submit(["https://a.com"], {})

        # No retries at this layer
        assert mock_client.post.call_count == 1


@pytest.mark.asyncio
async def test_submit_timeout_without_message(settings: Settings) -> None:
    """Test errors without a message still produce a readable cause."""
    backend = HttpResourceBackend(settings)

    with patch("httpx.AsyncClient") as mock_client_class:
        mock_async_client(mock_client_class, error=httpx.ReadTimeout(""))

        with pytest.raises(BackendUnavailableError, match="ReadTimeout"):
            await backend.submit(["https://a.com"], {})


@pytest.mark.asyncio
async def test_submit_sends_token(settings: Settings) -> None:
    """Test the optional bearer token."""
    settings.backend_token = "secret"
    backend = HttpResourceBackend(settings)

    with patch("httpx.AsyncClient") as mock_client_class:
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.text = "{}"
        mock_client = mock_async_client(mock_client_class, response=mock_response)

        await backend.submit([], {})

        headers = mock_client.post.call_args.kwargs["headers"]
        assert headers["authorization"] == "Bearer secret"
