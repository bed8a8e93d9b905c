"""Tests for the editing session and the storage it persists to."""

from __future__ import annotations

import json
import random

import pytest

from promptlint.examples import DEFAULT_EXAMPLES
from promptlint.models import Field, PromptConfig, PromptDraft
from promptlint.storage import JsonFileStorage, MemoryStorage
from promptlint.workspace import UnknownCodeBlockError, UnknownPromptError, Workspace

from conftest import fake_parse

CONTEXT = "Schema below.\n\n```sql\nSELECT 1;\n```"


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def workspace(storage):
    return Workspace(storage=storage, rng=random.Random(0))


class TestStartup:
    def test_empty_store(self, workspace):
        assert workspace.draft == PromptDraft()
        assert workspace.code_blocks == []

    def test_restores_draft_and_blocks(self):
        store = MemoryStorage(draft=PromptDraft(role="You are X.", context=CONTEXT))
        ws = Workspace(storage=store)
        assert ws.draft.role == "You are X."
        assert ws.draft.context == "Schema below."
        assert [b.content for b in ws.code_blocks] == ["SELECT 1;"]
        assert ws.full_context() == CONTEXT

    def test_restores_saved_prompts(self):
        store = MemoryStorage(configs=[PromptConfig(name="mine")])
        assert [c.name for c in Workspace(storage=store).saved] == ["mine"]


class TestEditing:
    def test_set_field_persists(self, workspace, storage):
        workspace.set_field(Field.OBJECTIVE, "Summarize the text.")
        assert storage.load_draft().objective == "Summarize the text."

    def test_context_prose_keeps_blocks(self, workspace, storage):
        workspace.apply_structured(f"Context: {CONTEXT}")
        workspace.set_field(Field.CONTEXT, "New schema.")
        assert storage.load_draft().context == "New schema.\n\n```sql\nSELECT 1;\n```"

    def test_add_code_block(self, workspace, storage):
        block = workspace.add_code_block("x = 1", language="python")
        assert block.id.startswith("codeblock-")
        assert storage.load_draft().context == "```python\nx = 1\n```"

    def test_new_block_defaults(self, workspace):
        block = workspace.add_code_block()
        assert block.language == "javascript"
        assert block.content == ""

    def test_block_ids_unique(self, workspace):
        ids = {workspace.add_code_block().id for _ in range(20)}
        assert len(ids) == 20

    def test_edit_code_block(self, workspace, storage):
        block = workspace.add_code_block("a")
        workspace.edit_code_block(block.id, "b", language="ts")
        assert storage.load_draft().context == "```ts\nb\n```"

    def test_edit_language_only(self, workspace):
        block = workspace.add_code_block("keep me")
        workspace.edit_code_block(block.id, language="go")
        assert workspace.code_blocks[0].content == "keep me"
        assert workspace.code_blocks[0].language == "go"

    def test_delete_code_block(self, workspace, storage):
        first = workspace.add_code_block("1")
        workspace.add_code_block("2")
        workspace.delete_code_block(first.id)
        assert [b.content for b in workspace.code_blocks] == ["2"]
        assert "```javascript\n1\n```" not in storage.load_draft().context

    def test_unknown_block(self, workspace):
        with pytest.raises(UnknownCodeBlockError):
            workspace.delete_code_block("codeblock-missing")
        with pytest.raises(UnknownCodeBlockError):
            workspace.edit_code_block("codeblock-missing", "x")

    def test_apply_structured_replaces_draft(self, workspace):
        workspace.set_field(Field.EXAMPLES, "old")
        workspace.apply_structured(f"Role: You are Y.\nContext: {CONTEXT}")
        assert workspace.draft.role == "You are Y."
        assert workspace.draft.examples == ""
        assert len(workspace.code_blocks) == 1


class TestSavedPrompts:
    def test_load_builtin_example(self, workspace):
        example = DEFAULT_EXAMPLES[0]
        workspace.load(example.name)
        assert workspace.draft.role == example.role
        assert workspace.code_blocks[0].language == "javascript"
        assert workspace.full_context() == example.context.replace(
            "data.\n```", "data.\n\n```"
        )

    def test_load_overwrites_everything(self, workspace):
        workspace.add_code_block("stale")
        workspace.load(PromptConfig(name="bare", objective="List fruit."))
        assert workspace.code_blocks == []
        assert workspace.draft == PromptDraft(objective="List fruit.")

    def test_unknown_name(self, workspace):
        with pytest.raises(UnknownPromptError):
            workspace.load("nope")

    def test_save_with_name(self, workspace, storage):
        workspace.set_field(Field.ROLE, "You are Z.")
        workspace.add_code_block("code")
        config = workspace.save("z")
        assert config.name == "z"
        assert config.context == "```javascript\ncode\n```"
        assert storage.load_configs() == [config]

    def test_save_asks_namer(self, storage):
        ws = Workspace(storage=storage, namer=lambda: "asked")
        assert ws.save().name == "asked"

    def test_save_cancelled(self, storage):
        ws = Workspace(storage=storage, namer=lambda: "")
        assert ws.save() is None
        assert storage.load_configs() == []

    def test_saved_prompt_shadows_example(self, workspace):
        name = DEFAULT_EXAMPLES[0].name
        workspace.set_field(Field.ROLE, "You are custom.")
        workspace.save(name)
        workspace.set_field(Field.ROLE, "")
        workspace.load(name)
        assert workspace.draft.role == "You are custom."

    def test_lookup_ignores_case(self, workspace):
        workspace.set_field(Field.ROLE, "You are a pirate.")
        workspace.save("Pirate Bot")
        assert workspace.find("pirate bot").name == "Pirate Bot"
        assert workspace.find("  PIRATE BOT ").role == "You are a pirate."
        assert workspace.find("sql query generator").name == "SQL Query Generator"


class TestWorkspaceOutput:
    def test_lint_uses_full_context(self, workspace):
        workspace.apply_structured(f"Objective: Summarize.\nContext: {CONTEXT}")
        result = workspace.lint(parse=fake_parse)
        assert result.draft.context == CONTEXT
        assert "```sql" in result.final_prompt

    def test_markdown(self, workspace):
        workspace.set_field(Field.OUTPUT_FORMAT, "JSON")
        assert workspace.markdown().endswith("## OutputFormat\nJSON")


class TestJsonFileStorage:
    def test_missing_file_is_empty(self, tmp_path):
        store = JsonFileStorage(tmp_path / "prompts.json")
        assert store.load_draft() is None
        assert store.load_configs() == []

    def test_round_trip(self, tmp_path):
        path = tmp_path / "nested" / "prompts.json"
        store = JsonFileStorage(path)
        store.save_draft(PromptDraft(role="R"))
        store.save_configs([PromptConfig(name="n", objective="O")])
        fresh = JsonFileStorage(path)
        assert fresh.load_draft() == PromptDraft(role="R")
        assert fresh.load_configs() == [PromptConfig(name="n", objective="O")]
        assert set(json.loads(path.read_text())) == {"draft", "prompts"}

    def test_corrupt_file_is_ignored(self, tmp_path):
        path = tmp_path / "prompts.json"
        path.write_text("{not json")
        assert JsonFileStorage(path).load_draft() is None

    def test_home_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PROMPTLINT_HOME", str(tmp_path))
        assert JsonFileStorage().path == tmp_path / "prompts.json"

    def test_workspace_persists_across_sessions(self, tmp_path):
        path = tmp_path / "prompts.json"
        ws = Workspace(storage=JsonFileStorage(path))
        ws.apply_structured(f"Context: {CONTEXT}")
        again = Workspace(storage=JsonFileStorage(path))
        assert again.full_context() == CONTEXT
