"""Detection of vague, hedging language in any prompt field."""

from __future__ import annotations

from typing import Iterable

from promptlint.nlp import Document
from promptlint.vocabulary import HEDGING, HEDGING_PHRASES


def detect_hedging(
    doc: Document,
    phrases: Iterable[str] = HEDGING_PHRASES,
) -> list[str]:
    """Return one message per hedging phrase present in *doc*.

    Messages follow catalog order and each phrase is reported at most once,
    however often it occurs.
    """
    phrases = tuple(phrases)
    found = doc.matched_phrases(phrases)
    return [HEDGING.format(phrase=p) for p in phrases if p in found]
