import json
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from realtimesession.core.transport import RawResponse, Transport
from realtimesession.modules.config import Config
from realtimesession.modules.decoder import decode
from realtimesession.modules.encoder import encode
from realtimesession.modules.errors import DecodeError, HttpStatusError
from realtimesession.modules.logging import log_error, log_info, log_request, log_response
from realtimesession.modules.session_config import SessionConfig, SessionResult


@dataclass(frozen=True)
class HttpRequestDescriptor:
    """A request that has been described but not yet sent."""

    method: str
    url: str
    body: Dict[str, Any]
    parse_response: Callable[[Any], SessionResult]
    headers: Dict[str, str] = field(default_factory=dict)
    timeout: Optional[float] = None

    def resolve(self, raw: RawResponse) -> SessionResult:
        """Map a raw response to a session, raising HttpStatusError or DecodeError."""
        log_response(raw.status_code, self.url)
        if not raw.ok:
            log_error(f"Session request rejected with HTTP {raw.status_code}")
            raise HttpStatusError(raw.status_code, raw.text)

        try:
            payload = json.loads(raw.content)
        except (ValueError, RecursionError) as e:
            raise DecodeError("$", "JSON document", f"unparseable body ({e})") from e

        return self.parse_response(payload)


class SessionClient:
    def __init__(self, transport: Transport):
        self.transport = transport

    def build_request(self, config: SessionConfig) -> HttpRequestDescriptor:
        return HttpRequestDescriptor(
            method="POST",
            url=Config.SESSIONS_PATH,
            body=encode(config),
            parse_response=decode,
        )

    async def create(self, config: SessionConfig) -> SessionResult:
        """Create a realtime session and return it with its client secret."""
        request = self.build_request(config)
        log_request(request.method, request.url, request.body)
        raw = await self.transport.execute(
            request.method,
            request.url,
            request.headers,
            request.body,
            request.timeout,
        )
        session = request.resolve(raw)
        log_info(f"🔌 Session {session.id} created, secret expires at {session.client_secret.expires_at.isoformat()}")
        return session
