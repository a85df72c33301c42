"""httpx transport adapter.

Implements TransportPort on top of a shared httpx.AsyncClient. No retries
are attempted; failures surface immediately as TransportError.
"""

import logging
import os

import httpx

from datamuse.domain.model.errors import TransportError

logger = logging.getLogger(__name__)

API_TIMEOUT_SECONDS = float(os.getenv("DATAMUSE_TIMEOUT_SECONDS", "5.0"))


class HttpxTransport:
    """Transport that sends requests with an httpx.AsyncClient.

    When no client is given, one is created with API_TIMEOUT_SECONDS and
    closed by aclose(). A caller-supplied client is left open.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = API_TIMEOUT_SECONDS,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def get_text(self, url: str) -> str:
        """Send a GET request and return the decoded response body.

        Raises:
            TransportError: The request could not be built or sent, or the
                body could not be decoded to text.
        """
        try:
            response = await self._client.get(url)
            text = response.text
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.warning(
                "Datamuse API request error",
                extra={"url": url, "error_type": type(e).__name__},
            )
            raise TransportError(str(e) or type(e).__name__) from e
        except (UnicodeDecodeError, LookupError) as e:
            logger.warning(
                "Datamuse API response body could not be decoded",
                extra={"url": url, "error_type": type(e).__name__},
            )
            raise TransportError(str(e)) from e

        # Status codes are not interpreted; error bodies go to the parser.
        logger.debug(
            "Datamuse API response received",
            extra={"url": url, "status_code": response.status_code, "body_length": len(text)},
        )
        return text

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
