"""Natural-language queries over prompt text, backed by spaCy.

Rules never look at tokens directly. They ask a Document a handful of
questions (is anything phrased as a question, is there a command, what is
the first verb, is there a negation, does a phrase occur) and this module
answers them from a spaCy parse.

The English pipeline is loaded once per process. Set
PROMPTLINT_SPACY_MODEL to use something other than ``en_core_web_sm``.
"""

from __future__ import annotations

import logging
import os
import re
from functools import lru_cache
from typing import Callable, Iterable, Optional, Protocol

import spacy
from spacy.language import Language
from spacy.matcher import PhraseMatcher
from spacy.tokens import Doc, Span, Token

from promptlint.vocabulary import NEGATIVE_WORDS, QUESTION_WORDS

logger = logging.getLogger(__name__)

MODEL_ENV = "PROMPTLINT_SPACY_MODEL"
DEFAULT_MODEL = "en_core_web_sm"

_SUBJECT_DEPS = frozenset({"nsubj", "nsubjpass", "csubj", "expl"})
_HELPER_DEPS = frozenset({"aux", "auxpass"})


class NLPUnavailableError(Exception):
    """Raised when the spaCy pipeline cannot be loaded."""


class Document(Protocol):
    """What the linting rules need to know about a piece of text."""

    text: str

    def has_question(self) -> bool: ...

    def has_imperative(self) -> bool: ...

    def first_verb(self) -> Optional[str]: ...

    def has_negation(self) -> bool: ...

    def has(self, phrase: str) -> bool: ...

    def matched_phrases(self, phrases: Iterable[str]) -> set[str]: ...

    def contains(self, pattern: str) -> bool: ...


# ---------------------------------------------------------------------------
# Sentence and token checks
# ---------------------------------------------------------------------------

def _is_question(sent: Span) -> bool:
    tokens = [t for t in sent if not t.is_space]
    if not tokens:
        return False
    last = tokens[-1].text
    if "?" in last:
        return True
    if last in (".", "!"):
        return False

    # Unpunctuated: "What is X", "Are you a pirate"
    first = tokens[0]
    if first.lower_ in QUESTION_WORDS:
        return True
    if first.pos_ == "AUX" or first.tag_ == "MD":
        return any(t.dep_ in _SUBJECT_DEPS and t.i > first.i for t in sent)
    return False


def _is_command(verb: Token) -> bool:
    if "Imp" in verb.morph.get("Mood"):
        return True
    if verb.tag_ != "VB":
        return False
    for child in verb.children:
        if child.dep_ in _SUBJECT_DEPS:
            return False
        if child.dep_ in _HELPER_DEPS and child.tag_ in ("MD", "TO"):
            return False
    return True


def _is_imperative(sent: Span) -> bool:
    root = sent.root
    verbs = [root] + [
        c for c in root.children if c.dep_ == "conj" and c.pos_ in ("VERB", "AUX")
    ]
    return any(_is_command(v) for v in verbs)


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------

class SpacyDocument:
    """A parsed prompt field."""

    def __init__(self, doc: Doc, make_doc: Callable[[str], Doc]):
        self._doc = doc
        self._make_doc = make_doc

    @property
    def text(self) -> str:
        return self._doc.text

    def _sentences(self) -> list[Span]:
        if not len(self._doc):
            return []
        return list(self._doc.sents)

    def has_question(self) -> bool:
        return any(_is_question(sent) for sent in self._sentences())

    def has_imperative(self) -> bool:
        return any(_is_imperative(sent) for sent in self._sentences())

    def first_verb(self) -> Optional[str]:
        """Lemma of the first main verb, skipping helpers like "do" in "do not"."""
        for tok in self._doc:
            if tok.pos_ not in ("VERB", "AUX") or tok.tag_ == "MD":
                continue
            if tok.dep_ in _HELPER_DEPS:
                continue
            return tok.lemma_.lower()
        return None

    def has_negation(self) -> bool:
        return any(t.dep_ == "neg" or t.lower_ in NEGATIVE_WORDS for t in self._doc)

    def matched_phrases(self, phrases: Iterable[str]) -> set[str]:
        """Return the subset of *phrases* occurring as whole tokens, ignoring case."""
        matcher = PhraseMatcher(self._doc.vocab, attr="LOWER")
        for phrase in phrases:
            matcher.add(phrase, [self._make_doc(phrase)])
        strings = self._doc.vocab.strings
        return {strings[match_id] for match_id, _, _ in matcher(self._doc)}

    def has(self, phrase: str) -> bool:
        return bool(self.matched_phrases([phrase]))

    def contains(self, pattern: str) -> bool:
        return re.search(pattern, self._doc.text, re.I) is not None


class Parser:
    """Turns text into a SpacyDocument using a loaded pipeline."""

    def __init__(self, nlp: Language):
        self.nlp = nlp

    def __call__(self, text: str) -> SpacyDocument:
        return SpacyDocument(self.nlp(text or ""), self.nlp.make_doc)


@lru_cache(maxsize=None)
def load_parser(model: Optional[str] = None) -> Parser:
    """Load (once) the spaCy pipeline and wrap it in a Parser.

    Raises:
        NLPUnavailableError: If the pipeline is not installed.
    """
    name = model or os.getenv(MODEL_ENV, DEFAULT_MODEL)
    try:
        nlp = spacy.load(name)
    except OSError as e:
        raise NLPUnavailableError(
            f"spaCy pipeline '{name}' is not installed. "
            f"Install it with: python -m spacy download {name}"
        ) from e
    logger.debug("Loaded spaCy pipeline %s (%s)", name, ", ".join(nlp.pipe_names))
    return Parser(nlp)
