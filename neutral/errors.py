class NeutralError(Exception):
    """Base error for the neutrinoapi.com client."""


class InvalidBaseAddressError(NeutralError):
    """Raised when the client base address has no usable scheme or host."""


class MalformedRequestError(NeutralError):
    """Raised when a request URI or its headers cannot be composed."""


class TransportError(NeutralError):
    """Raised when no HTTP status was obtained (connection, TLS, timeout or cancellation)."""


class RemoteFailureError(NeutralError):
    """Raised when neutrinoapi.com answers with any status other than 200.

    The body is kept verbatim: the service returns plain diagnostic text on
    failure rather than a fixed error schema.
    """

    def __init__(self, status_code: int, body: bytes) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"neutrinoapi.com returned HTTP {status_code}: {self.text}")

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class DecodeError(NeutralError):
    """Raised when a 200 response body does not match the expected response model."""

    def __init__(self, message: str, body: bytes) -> None:
        self.body = body
        super().__init__(message)
