"""Transport port: outbound interface for the HTTP collaborator."""

from typing import Protocol


class TransportPort(Protocol):
    """Port for issuing GET requests against the Datamuse API.

    get_text() returns the full response body regardless of HTTP status;
    interpreting the body is the response parser's job. Implementations
    raise TransportError for network, DNS, TLS or request-construction
    failures and must be safe to share between concurrent requests.
    """

    async def get_text(self, url: str) -> str: ...

    async def aclose(self) -> None: ...
