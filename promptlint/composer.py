"""Turning a draft into text and back.

    compose_prompt     "Role: ...\\n\\nContext: ..." in fixed field order
    count_tokens       whitespace-delimited word count
    to_markdown        "## Role\\n..." sections for pasting into docs
    parse_structured   recover the six fields from composed prompt text
"""

from __future__ import annotations

import re
from typing import Optional

from promptlint.models import Field, PromptDraft

_LABEL_LINE = re.compile(
    r"^(" + "|".join(re.escape(f.label) for f in Field) + r"):[ \t]?(.*)$"
)


def compose_prompt(draft: PromptDraft) -> str:
    """Join ``"<Label>: <value>"`` sections with blank lines."""
    return "\n\n".join(f"{f.label}: {value}" for f, value in draft.items()).strip()


def count_tokens(text: str) -> int:
    return len(text.split())


def to_markdown(draft: PromptDraft) -> str:
    return "\n\n".join(f"## {f.heading}\n{value}" for f, value in draft.items()).strip()


def _label_matches(lines: list[str]) -> list[Optional[re.Match]]:
    """Label match per line, with lines inside fenced code never matching."""
    matches: list[Optional[re.Match]] = []
    in_fence = False
    for line in lines:
        if line.lstrip().startswith("```"):
            in_fence = not in_fence
            matches.append(None)
        else:
            matches.append(None if in_fence else _LABEL_LINE.match(line))
    return matches


def _opens_section(
    field: Field,
    current: Optional[Field],
    opened: dict[Field, list[str]],
    last_label: dict[Field, int],
    lineno: int,
) -> bool:
    """Whether a label for *field* at *lineno* starts its section.

    Sections are expected in field order after the current one. A label is
    content while a nearer unopened field still has a label further down.
    """
    if field in opened:
        return False
    if current is None:
        return True

    order = list(Field)

    def distance(f: Field) -> int:
        return (order.index(f) - order.index(current)) % len(order)

    return not any(
        last_label[other] > lineno
        for other in last_label
        if other not in opened and distance(other) < distance(field)
    )


def parse_structured(text: str) -> PromptDraft:
    """Re-derive the six fields from labeled-section text.

    Works line by line. A line starting with a known label and a colon
    opens that section; following lines belong to it until the next label.
    Labels are matched in field order: "Objective:" inside the Role text
    stays there as long as a "Context:" label follows. Out-of-order labels
    are accepted when no nearer one remains. Each label opens a section
    only once, so a repeated label is kept as content. Lines inside a
    fenced code block are never treated as labels. Text before the first
    label is dropped and missing sections are empty.
    """
    lines = (text or "").splitlines()
    matches = _label_matches(lines)
    last_label = {
        Field.from_label(m.group(1)): lineno
        for lineno, m in enumerate(matches)
        if m
    }

    sections: dict[Field, list[str]] = {}
    current: Optional[Field] = None

    for lineno, (line, match) in enumerate(zip(lines, matches)):
        if match:
            field = Field.from_label(match.group(1))
            if _opens_section(field, current, sections, last_label, lineno):
                current = field
                sections[field] = [match.group(2)]
                continue

        if current is not None:
            sections[current].append(line)

    draft = PromptDraft()
    for field, body in sections.items():
        draft.set(field, "\n".join(body).strip())
    return draft
