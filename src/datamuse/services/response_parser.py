"""Datamuse response parsing.

Decodes the JSON array returned by the API and expands the compact tag
encoding into WordElement domain objects.

Tags are colon-separated strings:
    "n", "adj", "adv", "v"  part of speech ("u" marks undefined)
    "f:16.567268"           frequency per million words
    "pron:K AW1 "           ARPABET pronunciation
    "ipa_pron:kaʊ"          IPA pronunciation (requested with ipa=1)

Definitions are "<pos code>\\t<text>" strings.
"""

import logging

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from datamuse.domain.model.errors import DecodeError
from datamuse.domain.model.word import Definition, PartOfSpeech, WordElement

logger = logging.getLogger(__name__)


class _DatamuseWordObject(BaseModel):
    """Raw word object as sent by the API."""
    model_config = ConfigDict(alias_generator=to_camel, strict=True)

    word: str
    score: int = Field(..., ge=0)
    num_syllables: int | None = Field(None, ge=0)
    tags: list[str] | None = None
    defs: list[str] | None = None


_WORD_LIST = TypeAdapter(list[_DatamuseWordObject])


class Response:
    """Raw body of a Datamuse API response.

    The body is parsed on each call to list(); parsing has no side effects
    so it can be repeated.
    """

    def __init__(self, body: str):
        self._body = body

    def __repr__(self) -> str:
        return f"Response(body_length={len(self._body)})"

    @property
    def body(self) -> str:
        return self._body

    def list(self) -> list[WordElement]:
        """Parse the response into a list of word elements.

        Raises:
            DecodeError: The body is not a JSON array of word objects.
        """
        return parse_response(self._body)


def parse_response(body: str) -> list[WordElement]:
    """Decode a JSON response body into word elements, preserving order."""
    try:
        word_objects = _WORD_LIST.validate_json(body)
    except ValidationError as e:
        logger.warning(
            "Failed to decode Datamuse response",
            extra={"error_count": e.error_count(), "content_preview": body[:200]},
        )
        raise DecodeError(str(e)) from e

    words = [_to_word_element(word_object) for word_object in word_objects]
    logger.debug("Parsed Datamuse response", extra={"word_count": len(words)})
    return words


def _to_word_element(word_object: _DatamuseWordObject) -> WordElement:
    parts_of_speech, pronunciation, frequency = _decode_tags(word_object.tags or [])
    return WordElement(
        word=word_object.word,
        score=word_object.score,
        num_syllables=word_object.num_syllables,
        parts_of_speech=parts_of_speech,
        pronunciation=pronunciation,
        frequency=frequency,
        definitions=_decode_definitions(word_object.defs or []),
    )


def _decode_tags(
    tags: list[str],
) -> tuple[list[PartOfSpeech] | None, str | None, float | None]:
    """Expand tags into (parts_of_speech, pronunciation, frequency).

    Malformed or unknown tags are skipped. An ARPABET pronunciation never
    replaces one already found, while an IPA pronunciation always does.
    """
    parts_of_speech: list[PartOfSpeech] = []
    pronunciation: str | None = None
    frequency: float | None = None

    for tag in tags:
        segments = tag.split(":")
        head = segments[0]

        if head == "f":
            if len(segments) == 2:
                frequency = _parse_frequency(segments[1])
        elif head == "pron":
            if pronunciation is None and len(segments) == 2:
                pronunciation = segments[1]
        elif head == "ipa_pron":
            if len(segments) == 2:
                pronunciation = segments[1]
        elif len(segments) == 1:
            pos = PartOfSpeech.from_code(head)
            if pos is not None:
                parts_of_speech.append(pos)

    return parts_of_speech or None, pronunciation, frequency


def _parse_frequency(value: str) -> float | None:
    # Padded values and digit separators are not valid frequencies
    if value != value.strip() or "_" in value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _decode_definitions(defs: list[str]) -> list[Definition] | None:
    definitions: list[Definition] = []
    for raw in defs:
        segments = raw.split("\t")
        if len(segments) != 2:
            continue
        code, text = segments
        definitions.append(
            Definition(definition=text, part_of_speech=PartOfSpeech.from_code(code))
        )
    return definitions or None
