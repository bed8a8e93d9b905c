"""Shared fixtures.

Rule and engine tests run against FakeDocument, a hand-built stand-in for
the spaCy-backed Document, so they do not need an English pipeline. Tests
that need the real parser use the ``spacy_parser`` fixture, which skips
when ``en_core_web_sm`` is not installed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional

import pytest

from promptlint.nlp import NLPUnavailableError, load_parser

COMMAND_WORDS = {"write", "summarize", "generate", "list", "tell", "make", "do", "give", "rewrite"}
VERB_WORDS = COMMAND_WORDS | {"is", "be", "get", "have"}
NEGATIVE_WORDS = {"not", "don't", "never", "no"}


@dataclass
class FakeDocument:
    text: str = ""
    question: bool = False
    imperative: bool = False
    verb: Optional[str] = None
    negation: bool = False

    def has_question(self) -> bool:
        return self.question

    def has_imperative(self) -> bool:
        return self.imperative

    def first_verb(self) -> Optional[str]:
        return self.verb

    def has_negation(self) -> bool:
        return self.negation

    def matched_phrases(self, phrases: Iterable[str]) -> set[str]:
        lowered = self.text.lower()
        return {
            p for p in phrases
            if re.search(r"\b" + re.escape(p.lower()) + r"\b", lowered)
        }

    def has(self, phrase: str) -> bool:
        return bool(self.matched_phrases([phrase]))

    def contains(self, pattern: str) -> bool:
        return re.search(pattern, self.text, re.I) is not None


def fake_parse(text: str) -> FakeDocument:
    """Word-list approximation of the spaCy parser, good enough for engine tests."""
    words = [w.strip(".,!?;:").lower() for w in text.split()]
    first = words[0] if words else ""
    verbs = [w for w in words if w in VERB_WORDS]
    return FakeDocument(
        text=text,
        question=text.rstrip().endswith("?"),
        imperative=first in COMMAND_WORDS,
        verb=("be" if verbs[0] == "is" else verbs[0]) if verbs else None,
        negation=any(w in NEGATIVE_WORDS for w in words),
    )


@pytest.fixture(scope="session")
def spacy_parser():
    try:
        return load_parser()
    except NLPUnavailableError as e:
        pytest.skip(str(e))
