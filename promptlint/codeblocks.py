"""Fenced code handling for prompt fields.

Three operations share one fence pattern:

    strip_code      remove fenced code so linting only sees prose
    split_context   pull fenced code out of Context into CodeBlocks
    compose_context put CodeBlocks back after the prose, in order

A fence is three backticks, an optional word-character language tag, a
newline, the body, a newline and three closing backticks. Anything that
does not fit this shape (no closing fence, a tag like ``c++``) is left as
plain text.
"""

from __future__ import annotations

import random
import re
import string
from typing import Iterable, Optional

from promptlint.models import CodeBlock

FENCE_PATTERN = re.compile(r"\n*```(\w*)\n(.*?)\n```", re.S)

DEFAULT_LANGUAGE = "text"

_ID_ALPHABET = string.ascii_lowercase + string.digits


def new_block_id(
    taken: Iterable[str] = (),
    rng: Optional[random.Random] = None,
) -> str:
    """Return a ``codeblock-xxxxxxx`` id not present in *taken*."""
    rng = rng or random.Random()
    taken = set(taken)
    while True:
        block_id = "codeblock-" + "".join(rng.choices(_ID_ALPHABET, k=7))
        if block_id not in taken:
            return block_id


def strip_code(text: str) -> str:
    """Remove every fenced code segment (and the blank lines before it)."""
    if not text:
        return ""
    return FENCE_PATTERN.sub("", text)


def split_context(
    text: str,
    rng: Optional[random.Random] = None,
) -> tuple[str, list[CodeBlock]]:
    """Separate Context text into prose and an ordered list of CodeBlocks.

    Each block gets a fresh id. Fences without a language tag are given
    ``DEFAULT_LANGUAGE``.
    """
    text = text or ""
    blocks: list[CodeBlock] = []
    for match in FENCE_PATTERN.finditer(text):
        block_id = new_block_id((b.id for b in blocks), rng)
        blocks.append(
            CodeBlock(
                id=block_id,
                language=match.group(1) or DEFAULT_LANGUAGE,
                content=match.group(2),
            )
        )
    prose = FENCE_PATTERN.sub("", text).strip()
    return prose, blocks


def render_block(block: CodeBlock) -> str:
    return f"```{block.language}\n{block.content}\n```"


def compose_context(prose: str, blocks: Iterable[CodeBlock]) -> str:
    """Append each block as a fenced segment after *prose*, blank-line separated."""
    rendered = "".join(f"\n\n{render_block(b)}" for b in blocks)
    return ((prose or "") + rendered).strip()
