"""Tests for parameter compatibility rules and parameter errors."""

import unittest

from datamuse.domain.model.errors import (
    DatamuseError,
    EndPointError,
    ParameterError,
    VocabularyError,
)
from datamuse.domain.model.query import (
    DEFINITIONS,
    EndPoint,
    HintString,
    LeftContext,
    MaxResults,
    MeansLike,
    MetaData,
    Related,
    RelatedType,
    RightContext,
    SoundsLike,
    SpelledLike,
    Topics,
    Vocabulary,
)
from datamuse.domain.model.validation import validate_parameter

ALL_PARAMETERS = [
    MeansLike("cap"),
    SoundsLike("flat"),
    SpelledLike("w?rd"),
    Related(RelatedType.TRIGGER, "cow"),
    Topics(("color",)),
    LeftContext("drink"),
    RightContext("food"),
    MaxResults(10),
    MetaData((DEFINITIONS,)),
    HintString("hel"),
]


class TestSuggestEndPoint(unittest.TestCase):
    """Test the suggest endpoint only accepts MaxResults and HintString."""

    def test_rejects_other_parameters(self):
        """Test every other parameter kind raises EndPointError."""
        for parameter in ALL_PARAMETERS:
            if isinstance(parameter, (MaxResults, HintString)):
                continue
            with self.subTest(parameter=parameter.kind):
                with self.assertRaises(EndPointError) as ctx:
                    validate_parameter(parameter, Vocabulary.ENGLISH, EndPoint.SUGGEST)
                self.assertEqual(ctx.exception.endpoint, "Suggest")
                self.assertEqual(ctx.exception.parameter, parameter.kind)

    def test_accepts_max_results_and_hint(self):
        """Test MaxResults and HintString pass on the suggest endpoint."""
        validate_parameter(MaxResults(20), Vocabulary.ENGLISH, EndPoint.SUGGEST)
        validate_parameter(HintString("hel"), Vocabulary.ENGLISH, EndPoint.SUGGEST)

    def test_accepts_any_vocabulary(self):
        """Test suggest parameters are valid for every vocabulary."""
        for vocabulary in Vocabulary:
            validate_parameter(HintString("hol"), vocabulary, EndPoint.SUGGEST)


class TestWordsEndPoint(unittest.TestCase):
    """Test the words endpoint rules."""

    def test_rejects_hint_string(self):
        """Test a hint string raises EndPointError on the words endpoint."""
        with self.assertRaises(EndPointError) as ctx:
            validate_parameter(HintString("blu"), Vocabulary.ENGLISH, EndPoint.WORDS)
        self.assertEqual(ctx.exception.endpoint, "Words")
        self.assertEqual(ctx.exception.parameter, "HintString")

    def test_accepts_everything_else(self):
        """Test all other parameters pass for English words queries."""
        for parameter in ALL_PARAMETERS:
            if isinstance(parameter, HintString):
                continue
            with self.subTest(parameter=parameter.kind):
                validate_parameter(parameter, Vocabulary.ENGLISH, EndPoint.WORDS)


class TestSpanishVocabulary(unittest.TestCase):
    """Test Spanish vocabulary restrictions."""

    def test_rejects_related(self):
        """Test related parameters raise VocabularyError for Spanish."""
        with self.assertRaises(VocabularyError) as ctx:
            validate_parameter(
                Related(RelatedType.TRIGGER, "frutas"), Vocabulary.SPANISH, EndPoint.WORDS,
            )
        self.assertEqual(ctx.exception.vocabulary, "Spanish")
        self.assertEqual(ctx.exception.parameter, "Related")

    def test_vocabulary_checked_before_endpoint(self):
        """Test the vocabulary rule wins over the suggest rule."""
        with self.assertRaises(VocabularyError):
            validate_parameter(
                Related(RelatedType.RHYME, "casa"), Vocabulary.SPANISH, EndPoint.SUGGEST,
            )

    def test_related_allowed_for_english_wiki(self):
        """Test related parameters pass for the Wikipedia vocabulary."""
        validate_parameter(
            Related(RelatedType.RHYME, "cat"), Vocabulary.ENGLISH_WIKI, EndPoint.WORDS,
        )

    def test_other_parameters_allowed(self):
        """Test non-related parameters pass for Spanish."""
        validate_parameter(SoundsLike("manta"), Vocabulary.SPANISH, EndPoint.WORDS)


class TestParameterErrors(unittest.TestCase):
    """Test error hierarchy and messages."""

    def test_vocabulary_error_message(self):
        """Test the vocabulary error message names both sides."""
        error = VocabularyError("Spanish", "Related")
        self.assertEqual(str(error), "The parameter Related is not yet supported for Spanish")

    def test_endpoint_error_message(self):
        """Test the endpoint error message names both sides."""
        error = EndPointError("Words", "HintString")
        self.assertEqual(str(error), "The parameter HintString is not supported for Words")

    def test_hierarchy(self):
        """Test parameter errors can be caught through their base classes."""
        self.assertIsInstance(VocabularyError("Spanish", "Related"), ParameterError)
        self.assertIsInstance(EndPointError("Words", "HintString"), ParameterError)
        self.assertIsInstance(EndPointError("Words", "HintString"), DatamuseError)
