import httpx


class HttpsOnlyTransport(httpx.AsyncBaseTransport):
    """Wraps a transport and refuses every request that is not `https`."""

    def __init__(self, transport: httpx.AsyncBaseTransport) -> None:
        self._transport = transport

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        if request.url.scheme != "https":
            raise httpx.UnsupportedProtocol(
                f"Refusing insecure request to {request.url.scheme}://{request.url.host}",
                request=request,
            )
        return await self._transport.handle_async_request(request)

    async def aclose(self) -> None:
        await self._transport.aclose()
