"""In-memory implementation of TransportPort for testing."""


class FakeTransport:
    """Fake transport that returns a preconfigured body or raises an error."""

    def __init__(self, body: str = "[]", error: Exception | None = None):
        self.body = body
        self.error = error
        self.requested_urls: list[str] = []
        self.closed = False

    async def get_text(self, url: str) -> str:
        self.requested_urls.append(url)
        if self.error is not None:
            raise self.error
        return self.body

    async def aclose(self) -> None:
        self.closed = True
