"""An editing session over one prompt draft.

The session keeps the Context prose and its code blocks apart so blocks
can be edited individually, and recombines them whenever the full draft
is needed (linting, export, persistence). Every change writes the full
draft to storage.
"""

from __future__ import annotations

import logging
import random
from dataclasses import replace
from typing import Callable, Optional, Union

from promptlint.codeblocks import compose_context, new_block_id, split_context
from promptlint.composer import compose_prompt, parse_structured, to_markdown
from promptlint.examples import find_example
from promptlint.linter import LintResult, lint
from promptlint.models import CodeBlock, Field, PromptConfig, PromptDraft
from promptlint.nlp import Document
from promptlint.storage import MemoryStorage, Storage

logger = logging.getLogger(__name__)

NEW_BLOCK_LANGUAGE = "javascript"

# Asks the user for a name; None or "" cancels
Namer = Callable[[], Optional[str]]


class UnknownCodeBlockError(KeyError):
    """No code block with the given id exists in the session."""


class UnknownPromptError(LookupError):
    """No saved or built-in prompt has the given name."""


class Workspace:
    """Holds the draft being edited and talks to the storage port."""

    def __init__(
        self,
        storage: Optional[Storage] = None,
        namer: Optional[Namer] = None,
        rng: Optional[random.Random] = None,
    ):
        self.storage = storage if storage is not None else MemoryStorage()
        self.namer = namer
        self.rng = rng or random.Random()
        self.draft = PromptDraft()
        self.code_blocks: list[CodeBlock] = []
        self.saved: list[PromptConfig] = self.storage.load_configs()

        stored = self.storage.load_draft()
        if stored is not None:
            self._apply(stored)

    # -- composition -------------------------------------------------------

    def full_context(self) -> str:
        return compose_context(self.draft.context, self.code_blocks)

    def full_draft(self) -> PromptDraft:
        """The draft with code blocks folded back into Context."""
        return replace(self.draft, context=self.full_context())

    def final_prompt(self) -> str:
        return compose_prompt(self.full_draft())

    def markdown(self) -> str:
        return to_markdown(self.full_draft())

    def lint(self, parse: Optional[Callable[[str], Document]] = None) -> LintResult:
        return lint(self.full_draft(), parse=parse, rng=self.rng)

    # -- editing -----------------------------------------------------------

    def _apply(self, draft: PromptDraft) -> None:
        prose, blocks = split_context(draft.context, self.rng)
        self.draft = replace(draft, context=prose)
        self.code_blocks = blocks

    def _changed(self) -> None:
        self.storage.save_draft(self.full_draft())

    def set_field(self, field: Field, value: str) -> None:
        """Set a field. For Context this is the prose only, blocks are kept."""
        self.draft.set(field, value)
        self._changed()

    def _find_block(self, block_id: str) -> CodeBlock:
        for block in self.code_blocks:
            if block.id == block_id:
                return block
        raise UnknownCodeBlockError(block_id)

    def add_code_block(
        self,
        content: str = "",
        language: str = NEW_BLOCK_LANGUAGE,
    ) -> CodeBlock:
        block = CodeBlock(
            id=new_block_id((b.id for b in self.code_blocks), self.rng),
            language=language,
            content=content,
        )
        self.code_blocks.append(block)
        logger.debug("Added code block %s", block.id)
        self._changed()
        return block

    def edit_code_block(
        self,
        block_id: str,
        content: Optional[str] = None,
        language: Optional[str] = None,
    ) -> CodeBlock:
        block = self._find_block(block_id)
        if content is not None:
            block.content = content
        if language:
            block.language = language
        self._changed()
        return block

    def delete_code_block(self, block_id: str) -> None:
        block = self._find_block(block_id)
        self.code_blocks.remove(block)
        logger.debug("Deleted code block %s", block_id)
        self._changed()

    def apply_structured(self, text: str) -> None:
        """Replace the whole draft with the sections found in *text*."""
        self._apply(parse_structured(text))
        self._changed()

    # -- saved prompts -----------------------------------------------------

    def load(self, config: Union[PromptConfig, str]) -> PromptConfig:
        """Overwrite the draft with a config, or a saved/built-in one by name."""
        if isinstance(config, str):
            config = self.find(config)
        self._apply(config.to_draft())
        self._changed()
        logger.debug("Loaded prompt %r", config.name)
        return config

    def find(self, name: str) -> PromptConfig:
        """Case-insensitive lookup, newest saved prompt first, then examples."""
        wanted = name.strip().lower()
        for config in reversed(self.saved):
            if config.name.lower() == wanted:
                return config
        example = find_example(name)
        if example is None:
            raise UnknownPromptError(name)
        return example

    def save(self, name: Optional[str] = None) -> Optional[PromptConfig]:
        """Save the full draft under *name*, asking the namer if none is given.

        Returns None when no name is supplied.
        """
        if not name and self.namer is not None:
            name = self.namer()
        if not name:
            return None
        config = PromptConfig.from_draft(name, self.full_draft())
        self.saved.append(config)
        self.storage.save_configs(self.saved)
        return config
