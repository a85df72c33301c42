"""Unofficial async client for the Datamuse API.

The Datamuse API returns lists of words matching constraints on meaning,
sound, spelling and relations to other words, and autocomplete
suggestions for partially typed text.

Words endpoint:

    async with DatamuseClient() as client:
        words = await (
            client.new_query(Vocabulary.ENGLISH, EndPoint.WORDS)
            .means_like("breakfast")
            .related(RelatedType.RHYME, "grape")
            .list()
        )

Suggest endpoint:

    request = (
        client.new_query(Vocabulary.ENGLISH, EndPoint.SUGGEST)
        .hint_string("hello wor")
        .max_results(2)
        .build()
    )
    response = await request.send()
    words = response.list()

API Documentation: https://www.datamuse.com/api/
"""

from datamuse.client import DatamuseClient
from datamuse.domain.model.errors import (
    DatamuseError,
    DecodeError,
    EndPointError,
    ParameterError,
    TransportError,
    VocabularyError,
)
from datamuse.domain.model.query import (
    DEFINITIONS,
    PARTS_OF_SPEECH,
    PRONUNCIATION_ARPABET,
    PRONUNCIATION_IPA,
    SYLLABLE_COUNT,
    WORD_FREQUENCY,
    EndPoint,
    MetaDataFlag,
    PronunciationFormat,
    RelatedType,
    Vocabulary,
    pronunciation,
)
from datamuse.domain.model.word import Definition, PartOfSpeech, WordElement
from datamuse.services.request_builder import Request, RequestBuilder
from datamuse.services.response_parser import Response

__all__ = [
    "DatamuseClient",
    "RequestBuilder",
    "Request",
    "Response",
    "Vocabulary",
    "EndPoint",
    "RelatedType",
    "MetaDataFlag",
    "PronunciationFormat",
    "DEFINITIONS",
    "PARTS_OF_SPEECH",
    "SYLLABLE_COUNT",
    "WORD_FREQUENCY",
    "PRONUNCIATION_ARPABET",
    "PRONUNCIATION_IPA",
    "pronunciation",
    "WordElement",
    "Definition",
    "PartOfSpeech",
    "DatamuseError",
    "TransportError",
    "DecodeError",
    "ParameterError",
    "VocabularyError",
    "EndPointError",
]
