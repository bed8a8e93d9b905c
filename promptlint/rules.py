"""Per-field linting rules.

Each rule takes the raw field text (code included), the Document parsed
from the code-stripped text, and a random source, and returns a list of
issue messages. Literal checks such as the "you are" prefix use the raw
text; grammatical checks go through the Document.
"""

from __future__ import annotations

import random
from typing import Callable

from promptlint.models import Field
from promptlint.nlp import Document
from promptlint.vocabulary import (
    CONSTRAINTS_NEGATIVE,
    CONTEXT_COMMAND,
    EXAMPLE_INTRO_PATTERN,
    EXAMPLES_INTRO,
    GENERIC_VERBS,
    OBJECTIVE_GENERIC_VERB,
    OBJECTIVE_MISSING,
    OBJECTIVE_NOT_COMMAND,
    OUTPUT_FORMAT_KEYWORDS,
    OUTPUT_FORMAT_UNSPECIFIED,
    ROLE_PERSONA,
    ROLE_QUESTION,
    STRONG_ACTION_VERBS,
)

Rule = Callable[[str, Document, random.Random], list[str]]

SUGGESTED_VERB_COUNT = 3


def check_role(text: str, doc: Document, rng: random.Random) -> list[str]:
    issues: list[str] = []
    if text and not text.lower().startswith("you are"):
        issues.append(ROLE_PERSONA)
    if doc.has_question():
        issues.append(ROLE_QUESTION)
    return issues


def check_context(text: str, doc: Document, rng: random.Random) -> list[str]:
    """Commands belong in the Objective, not the background."""
    if doc.has_imperative():
        return [CONTEXT_COMMAND]
    return []


def suggest_verbs(rng: random.Random, k: int = SUGGESTED_VERB_COUNT) -> list[str]:
    return rng.sample(STRONG_ACTION_VERBS, k)


def check_objective(text: str, doc: Document, rng: random.Random) -> list[str]:
    """The Objective must exist, be a command, and lead with a specific verb."""
    if not text:
        return [OBJECTIVE_MISSING]

    issues: list[str] = []
    if not doc.has_imperative():
        issues.append(OBJECTIVE_NOT_COMMAND)

    verb = doc.first_verb()
    if verb in GENERIC_VERBS:
        issues.append(
            OBJECTIVE_GENERIC_VERB.format(
                verb=verb, suggestions=", ".join(suggest_verbs(rng))
            )
        )
    return issues


def check_constraints(text: str, doc: Document, rng: random.Random) -> list[str]:
    if doc.has_negation():
        return [CONSTRAINTS_NEGATIVE]
    return []


def check_examples(text: str, doc: Document, rng: random.Random) -> list[str]:
    if text and not EXAMPLE_INTRO_PATTERN.search(text):
        return [EXAMPLES_INTRO]
    return []


def check_output_format(text: str, doc: Document, rng: random.Random) -> list[str]:
    text_lower = text.lower()
    if text and not any(kw in text_lower for kw in OUTPUT_FORMAT_KEYWORDS):
        return [OUTPUT_FORMAT_UNSPECIFIED]
    return []


# One rule per field, in display order
RULES: dict[Field, Rule] = {
    Field.ROLE: check_role,
    Field.CONTEXT: check_context,
    Field.OBJECTIVE: check_objective,
    Field.CONSTRAINTS: check_constraints,
    Field.EXAMPLES: check_examples,
    Field.OUTPUT_FORMAT: check_output_format,
}
