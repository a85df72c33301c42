"""Request building for the Datamuse API.

RequestBuilder accumulates query parameters through chained calls. build()
validates them against the vocabulary and endpoint and serializes them into
an immutable Request, which send() hands to the transport.

Query pair order: ipa flag, vocabulary, then parameters in insertion order
with topics and metadata appended last.
"""

import logging
import os
from dataclasses import dataclass, field
from urllib.parse import urlencode

from datamuse.domain.model.query import (
    MAX_TOPICS,
    EndPoint,
    HintString,
    LeftContext,
    MaxResults,
    MeansLike,
    MetaData,
    MetaDataFlag,
    Parameter,
    Related,
    RelatedType,
    RightContext,
    SoundsLike,
    SpelledLike,
    Topics,
    Vocabulary,
)
from datamuse.domain.model.validation import validate_parameter
from datamuse.domain.model.word import WordElement
from datamuse.port.transport import TransportPort
from datamuse.services.response_parser import Response

logger = logging.getLogger(__name__)

DATAMUSE_API_BASE_URL = os.getenv("DATAMUSE_API_BASE_URL", "https://api.datamuse.com")


@dataclass(frozen=True)
class Request:
    """A fully serialized request, ready to be sent.

    ``url`` includes the encoded query string; ``params`` holds the same
    pairs unencoded, in order.
    """
    url: str
    params: tuple[tuple[str, str], ...]
    transport: TransportPort = field(repr=False, compare=False)

    async def send(self) -> Response:
        """Send the request and return the unparsed response.

        Raises:
            TransportError: The request could not be sent.
        """
        body = await self.transport.get_text(self.url)
        return Response(body)


class RequestBuilder:
    """Builds requests to the Datamuse API.

    Every setter appends a parameter and returns the builder, so calling the
    same setter twice sends the parameter twice. Not every parameter is
    available for every vocabulary and endpoint; violations are reported by
    build().

    Example:
        words = await (
            client.new_query(Vocabulary.ENGLISH, EndPoint.WORDS)
            .means_like("breakfast")
            .related(RelatedType.RHYME, "grape")
            .list()
        )
    """

    def __init__(
        self, transport: TransportPort, vocabulary: Vocabulary, endpoint: EndPoint,
    ):
        self.vocabulary = vocabulary
        self.endpoint = endpoint
        self._transport = transport
        self._parameters: list[Parameter] = []
        self._topics: list[str] = []
        self._meta_data_flags: list[MetaDataFlag] = []

    def means_like(self, word: str) -> "RequestBuilder":
        """Words with a meaning similar to ``word``."""
        self._parameters.append(MeansLike(word))
        return self

    def sounds_like(self, word: str) -> "RequestBuilder":
        """Words that sound similar to ``word``."""
        self._parameters.append(SoundsLike(word))
        return self

    def spelled_like(self, pattern: str) -> "RequestBuilder":
        """Words spelled like ``pattern``.

        ``?`` matches a single letter and ``*`` any number of letters.
        """
        self._parameters.append(SpelledLike(pattern))
        return self

    def related(self, related_type: RelatedType, word: str) -> "RequestBuilder":
        """Words related to ``word`` by ``related_type``.

        Not available for the Spanish vocabulary.
        """
        self._parameters.append(Related(related_type, word))
        return self

    def add_topic(self, word: str) -> "RequestBuilder":
        """Skew results towards a topic.

        Topics past the fifth are ignored when the request is built.
        """
        self._topics.append(word)
        return self

    def left_context(self, word: str) -> "RequestBuilder":
        """Word appearing immediately before the target word."""
        self._parameters.append(LeftContext(word))
        return self

    def right_context(self, word: str) -> "RequestBuilder":
        """Word appearing immediately after the target word."""
        self._parameters.append(RightContext(word))
        return self

    def max_results(self, maximum: int) -> "RequestBuilder":
        """Maximum number of results (API default 100, limit 1000).

        Also allowed on the suggest endpoint.
        """
        self._parameters.append(MaxResults(maximum))
        return self

    def meta_data(self, flag: MetaDataFlag) -> "RequestBuilder":
        """Request extra data for each word, see MetaDataFlag."""
        self._meta_data_flags.append(flag)
        return self

    def hint_string(self, hint: str) -> "RequestBuilder":
        """Text typed so far, for the suggest endpoint only."""
        self._parameters.append(HintString(hint))
        return self

    def build(self) -> Request:
        """Validate and serialize the accumulated parameters into a Request.

        The builder is left unchanged and can be built again.

        Raises:
            VocabularyError: A parameter is not supported by the vocabulary.
            EndPointError: A parameter is not supported by the endpoint.
        """
        pairs: list[tuple[str, str]] = []
        parameters = list(self._parameters)

        if self._topics:
            parameters.append(Topics(tuple(self._topics[:MAX_TOPICS])))

        if self._meta_data_flags:
            parameters.append(MetaData(tuple(self._meta_data_flags)))
            # The API only returns IPA pronunciations when asked explicitly
            if any(flag.is_ipa for flag in self._meta_data_flags):
                pairs.append(("ipa", "1"))

        vocabulary_pair = self.vocabulary.query_pair
        if vocabulary_pair is not None:
            pairs.append(vocabulary_pair)

        for parameter in parameters:
            validate_parameter(parameter, self.vocabulary, self.endpoint)
            pairs.append(parameter.to_query_pair())

        url = f"{DATAMUSE_API_BASE_URL}/{self.endpoint.path}"
        if pairs:
            url = f"{url}?{urlencode(pairs)}"

        logger.debug(
            "Built Datamuse request",
            extra={"url": url, "pair_count": len(pairs)},
        )
        return Request(url=url, params=tuple(pairs), transport=self._transport)

    async def send(self) -> Response:
        """Build and send the request in one step."""
        return await self.build().send()

    async def list(self) -> list[WordElement]:
        """Build, send and parse the request in one step."""
        response = await self.send()
        return response.list()
