"""Where drafts and saved prompts live between sessions.

The workspace only talks to the Storage protocol. MemoryStorage is used in
tests and one-off runs; JsonFileStorage keeps a single JSON file under
PROMPTLINT_HOME (default ``~/.promptlint``).
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional, Protocol

from promptlint.models import PromptConfig, PromptDraft

logger = logging.getLogger(__name__)

HOME_ENV = "PROMPTLINT_HOME"
STORE_FILENAME = "prompts.json"


class StorageError(Exception):
    """Raised when the store cannot be written."""


class Storage(Protocol):
    def load_draft(self) -> Optional[PromptDraft]: ...

    def save_draft(self, draft: PromptDraft) -> None: ...

    def load_configs(self) -> list[PromptConfig]: ...

    def save_configs(self, configs: list[PromptConfig]) -> None: ...


class MemoryStorage:
    """Keeps everything in process memory."""

    def __init__(
        self,
        draft: Optional[PromptDraft] = None,
        configs: Optional[list[PromptConfig]] = None,
    ):
        self.draft = draft
        self.configs = list(configs or [])

    def load_draft(self) -> Optional[PromptDraft]:
        return PromptDraft.from_dict(self.draft.to_dict()) if self.draft else None

    def save_draft(self, draft: PromptDraft) -> None:
        self.draft = PromptDraft.from_dict(draft.to_dict())

    def load_configs(self) -> list[PromptConfig]:
        return list(self.configs)

    def save_configs(self, configs: list[PromptConfig]) -> None:
        self.configs = list(configs)


def default_store_path() -> Path:
    home = os.getenv(HOME_ENV, "").strip()
    base = Path(home).expanduser() if home else Path.home() / ".promptlint"
    return base / STORE_FILENAME


class JsonFileStorage:
    """A JSON file with ``draft`` and ``prompts`` keys."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else default_store_path()

    def _read(self) -> dict:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable prompt store %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring malformed prompt store %s", self.path)
            return {}
        return data

    def _write(self, data: dict) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            raise StorageError(f"Could not write {self.path}: {e}") from e

    def load_draft(self) -> Optional[PromptDraft]:
        draft = self._read().get("draft")
        return PromptDraft.from_dict(draft) if isinstance(draft, dict) else None

    def save_draft(self, draft: PromptDraft) -> None:
        data = self._read()
        data["draft"] = draft.to_dict()
        self._write(data)

    def load_configs(self) -> list[PromptConfig]:
        prompts = self._read().get("prompts") or []
        return [PromptConfig.from_dict(p) for p in prompts if isinstance(p, dict)]

    def save_configs(self, configs: list[PromptConfig]) -> None:
        data = self._read()
        data["prompts"] = [c.to_dict() for c in configs]
        self._write(data)
        logger.debug("Saved %d prompt(s) to %s", len(configs), self.path)
