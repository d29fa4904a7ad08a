class RealtimeSessionError(Exception):
    """Base class for errors raised while creating a realtime session."""


class TransportError(RealtimeSessionError):
    """The request could not be delivered or the server rejected it."""


class HttpStatusError(TransportError):
    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Session request failed with HTTP {status_code}: {body}")


class DecodeError(RealtimeSessionError):
    """The response body did not match the expected session shape."""

    def __init__(self, path: str, expected: str, actual: str):
        self.path = path
        self.expected = expected
        self.actual = actual
        super().__init__(f"{path}: expected {expected}, got {actual}")
