"""Query value objects for the Datamuse API.

Vocabulary and endpoint selection, related-word types, metadata flags and
the query parameters a RequestBuilder accumulates. Each parameter knows
how to serialize itself into a single ``(key, value)`` query pair.

API Documentation: https://www.datamuse.com/api/
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

# The API ignores topics past the fifth
MAX_TOPICS = 5


class Vocabulary(Enum):
    """Word list used as the source for a request.

    ENGLISH is the default 550,000 word list, SPANISH a 500,000 word list,
    and ENGLISH_WIKI an alternative 6 million word list built from
    Wikipedia.
    """

    ENGLISH = "English"
    SPANISH = "Spanish"
    ENGLISH_WIKI = "EnglishWiki"

    @property
    def query_pair(self) -> tuple[str, str] | None:
        """The ``v`` query pair, or None for the default English list."""
        code = _VOCABULARY_CODES[self]
        return ("v", code) if code else None


_VOCABULARY_CODES = {
    Vocabulary.ENGLISH: None,
    Vocabulary.SPANISH: "es",
    Vocabulary.ENGLISH_WIKI: "enwiki",
}


class EndPoint(Enum):
    """API endpoint a request is sent to.

    WORDS returns word lists matching a set of constraints, SUGGEST returns
    autocomplete suggestions for a hint string.
    """

    WORDS = "Words"
    SUGGEST = "Suggest"

    @property
    def path(self) -> str:
        return _ENDPOINT_PATHS[self]


_ENDPOINT_PATHS = {
    EndPoint.WORDS: "words",
    EndPoint.SUGGEST: "sug",
}


class RelatedType(Enum):
    """Relation used by the ``rel_*`` parameters, valued by its API code."""

    NOUN_MODIFIED_BY = "jja"      # nouns typically modified by the adjective
    ADJECTIVE_MODIFIER = "jjb"    # adjectives typically modifying the noun
    SYNONYM = "syn"
    TRIGGER = "trg"               # statistically associated words
    ANTONYM = "ant"
    KIND_OF = "spc"               # hypernyms
    MORE_GENERAL = "gen"          # hyponyms
    COMPRISES = "com"             # holonyms
    PART_OF = "par"               # meronyms
    FOLLOWER = "bga"              # frequent followers
    PREDECESSOR = "bgb"           # frequent predecessors
    RHYME = "rhy"
    APPROXIMATE_RHYME = "nry"
    HOMOPHONES = "hom"
    CONSONANT_MATCH = "cns"

    @property
    def code(self) -> str:
        return self.value


class PronunciationFormat(Enum):
    """Format of pronunciations returned for the pronunciation flag."""

    ARPABET = "Arpabet"
    IPA = "Ipa"


@dataclass(frozen=True)
class MetaDataFlag:
    """Immutable value object for a metadata flag (``md`` letter).

    Use the module-level instances below rather than constructing flags
    directly.
    """

    name: str
    code: str
    pronunciation_format: PronunciationFormat | None = None

    @property
    def is_ipa(self) -> bool:
        return self.pronunciation_format is PronunciationFormat.IPA


# ── Metadata flag instances ───────────────────────────────────

DEFINITIONS = MetaDataFlag(name="Definitions", code="d")
PARTS_OF_SPEECH = MetaDataFlag(name="PartsOfSpeech", code="p")
SYLLABLE_COUNT = MetaDataFlag(name="SyllableCount", code="s")
WORD_FREQUENCY = MetaDataFlag(name="WordFrequency", code="f")
PRONUNCIATION_ARPABET = MetaDataFlag(
    name="Pronunciation", code="r", pronunciation_format=PronunciationFormat.ARPABET,
)
PRONUNCIATION_IPA = MetaDataFlag(
    name="Pronunciation", code="r", pronunciation_format=PronunciationFormat.IPA,
)


def pronunciation(fmt: PronunciationFormat = PronunciationFormat.ARPABET) -> MetaDataFlag:
    """Return the pronunciation flag for the given format."""
    if fmt is PronunciationFormat.IPA:
        return PRONUNCIATION_IPA
    return PRONUNCIATION_ARPABET


# ── Parameters ────────────────────────────────────────────────


@dataclass(frozen=True)
class _TextParameter:
    value: str

    key: ClassVar[str] = ""

    @property
    def kind(self) -> str:
        return type(self).__name__

    def to_query_pair(self) -> tuple[str, str]:
        return self.key, self.value


@dataclass(frozen=True)
class MeansLike(_TextParameter):
    key: ClassVar[str] = "ml"


@dataclass(frozen=True)
class SoundsLike(_TextParameter):
    key: ClassVar[str] = "sl"


@dataclass(frozen=True)
class SpelledLike(_TextParameter):
    """Spelling pattern; ``?`` matches one letter, ``*`` any number."""
    key: ClassVar[str] = "sp"


@dataclass(frozen=True)
class LeftContext(_TextParameter):
    key: ClassVar[str] = "lc"


@dataclass(frozen=True)
class RightContext(_TextParameter):
    key: ClassVar[str] = "rc"


@dataclass(frozen=True)
class HintString(_TextParameter):
    """Prefix typed so far; only valid on the suggest endpoint."""
    key: ClassVar[str] = "s"


@dataclass(frozen=True)
class Related:
    related_type: RelatedType
    value: str

    kind: ClassVar[str] = "Related"

    def to_query_pair(self) -> tuple[str, str]:
        return f"rel_{self.related_type.code}", self.value


@dataclass(frozen=True)
class Topics:
    topics: tuple[str, ...]

    kind: ClassVar[str] = "Topics"

    def to_query_pair(self) -> tuple[str, str]:
        return "topics", ",".join(self.topics)


@dataclass(frozen=True)
class MaxResults:
    maximum: int

    kind: ClassVar[str] = "MaxResults"

    def to_query_pair(self) -> tuple[str, str]:
        return "max", str(self.maximum)


@dataclass(frozen=True)
class MetaData:
    flags: tuple[MetaDataFlag, ...]

    kind: ClassVar[str] = "MetaData"

    def to_query_pair(self) -> tuple[str, str]:
        return "md", "".join(flag.code for flag in self.flags)


Parameter = (
    MeansLike | SoundsLike | SpelledLike | Related | Topics
    | LeftContext | RightContext | MaxResults | MetaData | HintString
)
