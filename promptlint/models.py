"""Data structures for a prompt under edit.

A prompt is made of six free-text fields that always appear in the same
order. Code snippets embedded in the Context field are tracked separately
as CodeBlocks so they can be edited on their own and kept out of linting.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from enum import Enum


class Field(Enum):
    """The six sections of a structured prompt, in display order."""

    ROLE = "role"
    CONTEXT = "context"
    OBJECTIVE = "objective"
    CONSTRAINTS = "constraints"
    EXAMPLES = "examples"
    OUTPUT_FORMAT = "output_format"

    @property
    def label(self) -> str:
        """Human-readable name used in the final prompt and issue reports."""
        return self.value.replace("_", " ").title()

    @property
    def heading(self) -> str:
        """Name used for Markdown export headings (e.g. ``OutputFormat``)."""
        return "".join(part.capitalize() for part in self.value.split("_"))

    @classmethod
    def from_label(cls, label: str) -> "Field":
        for f in cls:
            if f.label.lower() == label.strip().lower():
                return f
        raise ValueError(f"Unknown field label: {label!r}")


@dataclass
class PromptDraft:
    """The working prompt. Every field is a string, never None."""

    role: str = ""
    context: str = ""
    objective: str = ""
    constraints: str = ""
    examples: str = ""
    output_format: str = ""

    def __post_init__(self) -> None:
        for f in fields(self):
            if getattr(self, f.name) is None:
                setattr(self, f.name, "")

    def get(self, field: Field) -> str:
        return getattr(self, field.value)

    def set(self, field: Field, value: str) -> None:
        setattr(self, field.value, value or "")

    def items(self) -> list[tuple[Field, str]]:
        return [(f, self.get(f)) for f in Field]

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "PromptDraft":
        return cls(**{f.value: str(data.get(f.value) or "") for f in Field})


@dataclass
class CodeBlock:
    """A fenced code snippet extracted from the Context field."""

    id: str
    language: str
    content: str


@dataclass(frozen=True)
class PromptConfig:
    """A named, complete prompt snapshot (saved prompt or built-in example)."""

    name: str
    role: str = ""
    context: str = ""
    objective: str = ""
    constraints: str = ""
    examples: str = ""
    output_format: str = ""

    def to_draft(self) -> PromptDraft:
        return PromptDraft(**{f.value: getattr(self, f.value) for f in Field})

    @classmethod
    def from_draft(cls, name: str, draft: PromptDraft) -> "PromptConfig":
        return cls(name=name, **draft.to_dict())

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "PromptConfig":
        draft = PromptDraft.from_dict(data)
        return cls.from_draft(str(data.get("name") or ""), draft)
