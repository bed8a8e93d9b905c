"""Word lists and issue messages used by the linting rules.

Every catalog is a lowercase tuple so rules can compare against normalised
text directly. Messages live here too, so tests and renderers can refer to
the exact wording without duplicating it.
"""

from __future__ import annotations

import re


# ---------------------------------------------------------------------------
# Catalogs
# ---------------------------------------------------------------------------

HEDGING_PHRASES: tuple[str, ...] = (
    "a bit",
    "a little",
    "almost",
    "apparently",
    "appear",
    "around",
    "basically",
    "can",
    "could",
    "essentially",
    "fairly",
    "hopefully",
    "in a sense",
    "in my opinion",
    "just",
    "kind of",
    "largely",
    "likely",
    "mainly",
    "may",
    "maybe",
    "might",
    "mostly",
    "often",
    "overall",
    "perhaps",
    "possibly",
    "pretty",
    "probably",
    "quite",
    "rather",
    "really",
    "relatively",
    "roughly",
    "seems",
    "should",
    "sometimes",
    "somewhat",
    "sort of",
    "suggests",
    "supposedly",
    "tend to",
    "typically",
)

GENERIC_VERBS: tuple[str, ...] = (
    "be",
    "do",
    "get",
    "give",
    "go",
    "have",
    "make",
    "put",
    "say",
    "see",
    "take",
)

STRONG_ACTION_VERBS: tuple[str, ...] = (
    "act as",
    "analyze",
    "assess",
    "brainstorm",
    "build",
    "classify",
    "compare",
    "compose",
    "contrast",
    "convert",
    "create",
    "critique",
    "debug",
    "define",
    "design",
    "develop",
    "diagnose",
    "draft",
    "edit",
    "evaluate",
    "explain",
    "extract",
    "format",
    "generate",
    "identify",
    "illustrate",
    "improve",
    "interpret",
    "invent",
    "list",
    "optimize",
    "outline",
    "paraphrase",
    "predict",
    "proofread",
    "propose",
    "rank",
    "rate",
    "refactor",
    "refine",
    "rephrase",
    "restate",
    "rewrite",
    "simplify",
    "solve",
    "structure",
    "suggest",
    "summarize",
    "synthesize",
    "trace",
    "transcribe",
    "transform",
    "translate",
)

OUTPUT_FORMAT_KEYWORDS: tuple[str, ...] = (
    "array",
    "article",
    "blog post",
    "bullet points",
    "chart",
    "code block",
    "csv",
    "email",
    "essay",
    "html",
    "javascript",
    "json",
    "json object",
    "list",
    "markdown",
    "numbered list",
    "object",
    "paragraph",
    "poem",
    "python",
    "report",
    "script",
    "sql",
    "table",
    "text",
    "typescript",
    "xml",
    "yaml",
)

# Matched against the raw Examples text, case-insensitively
EXAMPLE_INTRO_PATTERN = re.compile(r"e\.g\.|i\.e\.|for example", re.I)

NEGATIVE_WORDS: frozenset[str] = frozenset({
    "not",
    "n't",
    "never",
    "no",
    "none",
    "nothing",
    "nobody",
    "nowhere",
    "neither",
    "nor",
})

QUESTION_WORDS: frozenset[str] = frozenset({
    "who",
    "whom",
    "whose",
    "what",
    "which",
    "when",
    "where",
    "why",
    "how",
})


# ---------------------------------------------------------------------------
# Issue messages
# ---------------------------------------------------------------------------

ROLE_PERSONA = 'Good roles often start with "You are..." to set a clear persona.'
ROLE_QUESTION = "The role should be a statement, not a question."
CONTEXT_COMMAND = "Avoid commands in the Context. They belong in the Objective."
OBJECTIVE_MISSING = "The Objective is crucial. Please define a clear goal."
OBJECTIVE_NOT_COMMAND = (
    "The objective should be a clear command (e.g., 'Generate a list...')."
)
OBJECTIVE_GENERIC_VERB = 'Use a more specific verb than "{verb}". Try: {suggestions}.'
CONSTRAINTS_NEGATIVE = (
    "Consider rephrasing negative constraints ('don't do X') as positive ones "
    "('only do Y')."
)
EXAMPLES_INTRO = 'Good examples often start with "e.g.," or "For example,".'
OUTPUT_FORMAT_UNSPECIFIED = (
    'Specify a clear format like "JSON," "Markdown," "bullet points," etc.'
)
HEDGING = 'Avoid vague language like "{phrase}".'
