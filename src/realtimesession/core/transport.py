import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol

import httpx

from realtimesession.modules.config import Config
from realtimesession.modules.errors import TransportError
from realtimesession.modules.logging import log_error


@dataclass(frozen=True)
class RawResponse:
    status_code: int
    content: bytes = b""
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class Transport(Protocol):
    async def execute(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        body: Any,
        timeout: Optional[float],
    ) -> RawResponse: ...


class HttpxTransport:
    """Send requests to the OpenAI API with httpx, adding authentication headers."""

    def __init__(self, api_key=None, base_url=Config.BASE_URL, timeout=Config.DEFAULT_TIMEOUT, client=None):
        self.api_key = api_key or os.getenv(Config.API_KEY_ENV)
        if not self.api_key:
            raise TransportError(f"No API key given and {Config.API_KEY_ENV} is not set")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def close(self):
        """Close the underlying client if this transport created it"""
        if self._owns_client:
            await self.client.aclose()

    def _headers(self, headers):
        return {
            "Authorization": f"Bearer {self.api_key}",
            "OpenAI-Beta": Config.OPENAI_BETA_HEADER,
            **headers,
        }

    async def execute(self, method, url, headers, body, timeout):
        full_url = f"{self.base_url}{url}"
        try:
            response = await self.client.request(
                method,
                full_url,
                headers=self._headers(headers),
                json=body,
                timeout=timeout if timeout is not None else self.timeout,
            )
        except httpx.HTTPError as e:
            log_error(f"Request to {full_url} failed: {e}")
            raise TransportError(f"{method} {full_url} failed: {e}") from e

        return RawResponse(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
        )
