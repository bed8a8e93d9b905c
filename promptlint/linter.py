"""Core prompt linting engine.

Runs every field of a draft through the same pipeline:

    raw text -> strip fenced code -> parse -> field rule + hedging check

and collects the messages into an issue report keyed by field label.
Everything is recomputed from scratch on each call; nothing is cached
between drafts apart from the loaded spaCy pipeline.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, Optional

from promptlint.codeblocks import strip_code
from promptlint.composer import compose_prompt, count_tokens
from promptlint.hedging import detect_hedging
from promptlint.models import Field, PromptDraft
from promptlint.nlp import Document, load_parser
from promptlint.rules import RULES


# ---------------------------------------------------------------------------
# Result data structures
# ---------------------------------------------------------------------------

@dataclass
class LintResult:
    """Issues for every field of a draft, plus the composed prompt."""

    draft: PromptDraft
    issues: dict[str, list[str]] = field(default_factory=dict)

    @property
    def final_prompt(self) -> str:
        return compose_prompt(self.draft)

    @property
    def token_count(self) -> int:
        return count_tokens(self.final_prompt)

    @property
    def char_count(self) -> int:
        return len(self.final_prompt)

    @property
    def issue_count(self) -> int:
        return sum(len(msgs) for msgs in self.issues.values())

    @property
    def is_clean(self) -> bool:
        return self.issue_count == 0

    def for_field(self, f: Field) -> list[str]:
        return self.issues.get(f.label, [])


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def lint_field(
    f: Field,
    text: str,
    parse: Callable[[str], Document],
    rng: random.Random,
) -> list[str]:
    """Lint one field. Duplicate messages are dropped, first occurrence kept."""
    doc = parse(strip_code(text))
    issues = RULES[f](text, doc, rng) + detect_hedging(doc)
    return list(dict.fromkeys(issues))


def lint(
    draft: PromptDraft,
    parse: Optional[Callable[[str], Document]] = None,
    rng: Optional[random.Random] = None,
) -> LintResult:
    """Lint all six fields of a draft.

    Args:
        draft: The prompt to check. Its context must already include any
            code blocks (see ``compose_context``).
        parse: Text-to-Document function. Defaults to the spaCy parser.
        rng: Random source for verb suggestions.

    Returns:
        A LintResult whose ``issues`` has an entry for every field label.

    Raises:
        NLPUnavailableError: If no parser is given and spaCy's English
            pipeline is not installed.
    """
    parse = parse or load_parser()
    rng = rng or random.Random()

    issues = {f.label: lint_field(f, text, parse, rng) for f, text in draft.items()}
    return LintResult(draft=draft, issues=issues)
