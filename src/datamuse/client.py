"""Datamuse API client."""

from datamuse.adapter.external.httpx_transport import HttpxTransport
from datamuse.domain.model.query import EndPoint, Vocabulary
from datamuse.port.transport import TransportPort
from datamuse.services.request_builder import RequestBuilder


class DatamuseClient:
    """Entry point for building requests to the Datamuse API.

    The API needs no key; usage above 100,000 requests per day may be
    rate-limited. One client can serve many concurrent requests as long as
    each uses its own RequestBuilder.

    Args:
        transport: Transport to send requests with. Defaults to an
            HttpxTransport owning its own httpx.AsyncClient.
    """

    def __init__(self, transport: TransportPort | None = None):
        self._transport = transport or HttpxTransport()

    async def __aenter__(self) -> "DatamuseClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def new_query(self, vocabulary: Vocabulary, endpoint: EndPoint) -> RequestBuilder:
        """Start a request against ``endpoint`` using ``vocabulary``."""
        return RequestBuilder(self._transport, vocabulary, endpoint)

    async def aclose(self) -> None:
        await self._transport.aclose()
