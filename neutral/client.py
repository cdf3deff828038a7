import asyncio
import re
from http import HTTPStatus
from ipaddress import IPv4Address, IPv6Address
from types import TracebackType
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from neutral.auth import ApiAuth
from neutral.endpoints import HLR_LOOKUP, IP_BLOCKLIST, IP_INFO, IP_PROBE, PHONE_VALIDATE, Endpoint
from neutral.errors import (
    DecodeError,
    InvalidBaseAddressError,
    MalformedRequestError,
    RemoteFailureError,
    TransportError,
)
from neutral.models.ip import IpBlocklistResponse, IpInfoResponse, IpProbeResponse
from neutral.models.phone import HlrLookupResponse, PhoneValidateResponse
from neutral.transport import HttpsOnlyTransport

ResponseT = TypeVar("ResponseT", bound=BaseModel)

DEFAULT_BASE_URL = "https://neutrinoapi.net"
SUPPORTED_SCHEMES = ("http", "https")
# Visible ASCII plus space and tab; anything else cannot travel in a header value.
HEADER_VALUE_RE = re.compile(r"[\x20-\x7e\t]*")


class Neutral:
    """Client for the neutrinoapi.com REST API.

    Every feature goes through the same pipeline: `build_request` attaches the
    base address and the credentials, `dispatch` sends it and classifies the
    status code, `decode` maps the body onto the endpoint's response model.

    The client holds no mutable state after construction, so one instance can
    be shared by any number of concurrent tasks. Close it with `aclose()` or
    use it as an async context manager to release the connection pool.
    """

    __slots__ = ("_scheme", "_authority", "_auth", "_http_client")

    def __init__(
        self,
        base_url: str,
        auth: ApiAuth,
        *,
        timeout_seconds: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        try:
            url = httpx.URL(base_url)
        except httpx.InvalidURL as exc:
            raise InvalidBaseAddressError(f"Cannot parse base address {base_url!r}: {exc}") from exc

        if url.scheme not in SUPPORTED_SCHEMES:
            raise InvalidBaseAddressError(f"Base address {base_url!r} must use http or https")
        if not url.host:
            raise InvalidBaseAddressError(f"Base address {base_url!r} has no host")

        # Only scheme and authority are kept; any path on the base address is dropped.
        self._scheme = url.scheme
        self._authority = url.netloc.decode("ascii")
        self._auth = auth

        if self._scheme == "https":
            transport = HttpsOnlyTransport(transport or httpx.AsyncHTTPTransport())
        self._http_client = httpx.AsyncClient(transport=transport, timeout=timeout_seconds)

    @property
    def scheme(self) -> str:
        return self._scheme

    @property
    def authority(self) -> str:
        return self._authority

    @property
    def https_only(self) -> bool:
        return self._scheme == "https"

    def __repr__(self) -> str:
        return f"Neutral(base_url='{self._scheme}://{self._authority}', auth={self._auth!r})"

    async def __aenter__(self) -> "Neutral":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http_client.aclose()

    def build_request(self, path_and_query: str) -> httpx.Request:
        """Compose an authenticated GET request for `path_and_query`.

        `path_and_query` must already be percent-encoded, e.g.
        `/ip-info?output-case=snake&ip=8.8.8.8`.
        """
        if not self._scheme or not self._authority:
            raise MalformedRequestError("Client has no scheme or authority to send requests to")
        if not path_and_query.startswith("/"):
            raise MalformedRequestError(f"Path {path_and_query!r} must start with '/'")

        headers = self._auth.headers()
        if not all(HEADER_VALUE_RE.fullmatch(value) for value in headers.values()):
            raise MalformedRequestError("Credentials cannot be sent as HTTP header values")

        try:
            url = httpx.URL(f"{self._scheme}://{self._authority}{path_and_query}")
            return self._http_client.build_request("GET", url, headers=headers)
        except httpx.InvalidURL as exc:
            raise MalformedRequestError(f"Cannot build request URI for {path_and_query!r}: {exc}") from exc

    async def dispatch(self, request: httpx.Request) -> bytes:
        """Send the request and return the body of a 200 response.

        Any other status raises `RemoteFailureError` with the body kept verbatim.
        """
        if self._http_client.is_closed:
            raise TransportError("Cannot send a request to neutrinoapi.com, the client has been closed")

        try:
            response = await self._http_client.send(request)
        except httpx.RequestError as exc:
            raise TransportError(f"Request to neutrinoapi.com failed: {exc!r}") from exc
        except asyncio.CancelledError as exc:
            raise TransportError("Request to neutrinoapi.com was cancelled") from exc

        if response.status_code != HTTPStatus.OK:
            raise RemoteFailureError(response.status_code, response.content)

        return response.content

    @staticmethod
    def decode(body: bytes, response_model: type[ResponseT]) -> ResponseT:
        try:
            return response_model.model_validate_json(body)
        except ValidationError as exc:
            raise DecodeError(
                f"Failed to decode neutrinoapi.com response as {response_model.__name__}: {exc}",
                body=body,
            ) from exc

    async def send(self, endpoint: Endpoint[ResponseT], *args: Any, **kwargs: Any) -> ResponseT:
        """Run one endpoint through the request/response pipeline."""
        request = self.build_request(endpoint.path_and_query(*args, **kwargs))
        body = await self.dispatch(request)
        return self.decode(body, endpoint.response_model)

    async def phone_validate(self, phone_number: str) -> PhoneValidateResponse:
        return await self.send(PHONE_VALIDATE, phone_number)

    async def hlr_lookup(self, phone_number: str) -> HlrLookupResponse:
        return await self.send(HLR_LOOKUP, phone_number)

    async def ip_blocklist(self, ip: str | IPv4Address | IPv6Address) -> IpBlocklistResponse:
        return await self.send(IP_BLOCKLIST, ip)

    async def ip_info(self, ip: str | IPv4Address | IPv6Address) -> IpInfoResponse:
        return await self.send(IP_INFO, ip)

    async def ip_probe(self, ip: str | IPv4Address | IPv6Address) -> IpProbeResponse:
        return await self.send(IP_PROBE, ip)
