"""Tests for the spaCy-backed Document.

These pin down how the English pipeline answers each question the rules
ask. Most of them are skipped when ``en_core_web_sm`` is not installed.
Phrase matching, the negation word list and empty input only need the
tokenizer, so those also run against a blank English pipeline.
"""

from __future__ import annotations

import pytest
import spacy

from promptlint.nlp import NLPUnavailableError, Parser, load_parser


class TestQuestions:
    @pytest.mark.parametrize(
        "text",
        ["Are you a pirate?", "What should the summary cover?", "You are a pirate, right?"],
    )
    def test_questions(self, spacy_parser, text):
        assert spacy_parser(text).has_question()

    @pytest.mark.parametrize("text", ["You are a pirate.", "Summarize the article.", ""])
    def test_statements(self, spacy_parser, text):
        assert not spacy_parser(text).has_question()

    def test_any_sentence_counts(self, spacy_parser):
        assert spacy_parser("You are a pirate. Are you?").has_question()


class TestImperative:
    def test_command(self, spacy_parser):
        assert spacy_parser("Write a poem about the sea.").has_imperative()

    @pytest.mark.parametrize(
        "text",
        [
            "The report covers sales in March.",
            "You should write a poem.",
            "",
        ],
    )
    def test_not_a_command(self, spacy_parser, text):
        assert not spacy_parser(text).has_imperative()


class TestFirstVerb:
    def test_skips_helper_verbs(self, spacy_parser):
        assert spacy_parser("She was running home.").first_verb() == "run"

    def test_copula_is_be(self, spacy_parser):
        assert spacy_parser("My goal is a report.").first_verb() == "be"

    def test_no_verb(self, spacy_parser):
        assert spacy_parser("").first_verb() is None


class TestNegation:
    @pytest.mark.parametrize(
        "text",
        ["Don't use jargon.", "Never mention prices.", "Use no more than ten words."],
    )
    def test_negative(self, spacy_parser, text):
        assert spacy_parser(text).has_negation()

    def test_positive(self, spacy_parser):
        assert not spacy_parser("Use plain words.").has_negation()


class TestPhrases:
    def test_multiword_phrase(self, spacy_parser):
        assert spacy_parser("It has a sort of beach vibe.").has("sort of")

    def test_case_insensitive(self, spacy_parser):
        assert spacy_parser("Basically, yes.").has("basically")

    def test_word_boundaries(self, spacy_parser):
        assert not spacy_parser("Scan the file.").has("can")

    def test_matched_subset(self, spacy_parser):
        doc = spacy_parser("Maybe it is just fine.")
        assert doc.matched_phrases(["maybe", "just", "perhaps"]) == {"maybe", "just"}

    def test_contains(self, spacy_parser):
        doc = spacy_parser("Fruit, e.g. apples.")
        assert doc.contains(r"e\.g\.")
        assert not doc.contains(r"i\.e\.")


class TestLoadParser:
    def test_missing_model(self):
        with pytest.raises(NLPUnavailableError, match="not installed"):
            load_parser("xx_no_such_pipeline")

    def test_cached(self, spacy_parser):
        assert load_parser() is spacy_parser


# ---------------------------------------------------------------------------
# Tokenizer-only checks
# ---------------------------------------------------------------------------

@pytest.fixture(scope="module")
def blank_parser():
    return Parser(spacy.blank("en"))


class TestTokenizerOnly:
    def test_phrases_match_whole_tokens(self, blank_parser):
        doc = blank_parser("Can you sort of help, in my opinion?")
        phrases = ["can", "sort of", "in my opinion", "maybe"]
        assert doc.matched_phrases(phrases) == {"can", "sort of", "in my opinion"}

    def test_phrase_inside_word_is_ignored(self, blank_parser):
        assert not blank_parser("Scan it.").has("can")

    def test_contains_ignores_case(self, blank_parser):
        assert blank_parser("Fruit, E.G. apples.").contains(r"e\.g\.")

    @pytest.mark.parametrize("text", ["Don't use jargon.", "Never mention prices."])
    def test_negation_words(self, blank_parser, text):
        assert blank_parser(text).has_negation()

    def test_no_negation(self, blank_parser):
        assert not blank_parser("Use plain words.").has_negation()

    def test_empty_text(self, blank_parser):
        doc = blank_parser("")
        assert doc.text == ""
        assert doc.first_verb() is None
        assert not doc.has_question()
        assert not doc.has_imperative()
        assert not doc.has_negation()
        assert doc.matched_phrases(["can"]) == set()
