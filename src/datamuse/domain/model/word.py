"""Word domain models decoded from API responses."""

from dataclasses import dataclass
from enum import Enum


class PartOfSpeech(Enum):
    """Part of speech, valued by the code the API uses in tags and defs."""

    NOUN = "n"
    ADJECTIVE = "adj"
    ADVERB = "adv"
    VERB = "v"

    @classmethod
    def from_code(cls, code: str) -> "PartOfSpeech | None":
        """Look up a part of speech by API code.

        Returns None for unknown codes, including the API's "u" (undefined).
        """
        try:
            return cls(code)
        except ValueError:
            return None


@dataclass(frozen=True)
class Definition:
    """A single definition and the part of speech it applies to."""
    definition: str
    part_of_speech: PartOfSpeech | None = None


@dataclass(frozen=True)
class WordElement:
    """A word returned by the API together with its metadata.

    Optional fields are only populated when the matching metadata flag was
    requested, and may still be None if the API had no data for the word.
    Scores rank how well the word fits the query; results arrive sorted
    from highest to lowest.
    """
    word: str
    score: int
    num_syllables: int | None = None
    parts_of_speech: list[PartOfSpeech] | None = None
    pronunciation: str | None = None
    # occurrences per million words of text
    frequency: float | None = None
    definitions: list[Definition] | None = None
