"""PromptLint - Section-by-section linting for structured LLM prompts.

Checks the Role, Context, Objective, Constraints, Examples and Output
Format of a prompt with rule-based natural-language analysis and flags
vague, hedging language -- all locally, without any API calls.
"""

__version__ = "0.1.0"
