"""Click CLI entry point for PromptLint.

Lints structured prompts given on the command line, in a file, or on
stdin, and manages a persistent current draft plus saved prompts.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from promptlint import __version__
from promptlint.composer import count_tokens, parse_structured
from promptlint.examples import DEFAULT_EXAMPLES
from promptlint.linter import LintResult, lint
from promptlint.models import Field
from promptlint.nlp import NLPUnavailableError
from promptlint.reporter import render_json, render_markdown, render_text
from promptlint.storage import JsonFileStorage, StorageError
from promptlint.workspace import UnknownPromptError, Workspace

console = Console()
err_console = Console(stderr=True)

DEBUG_ENV = "PROMPTLINT_DEBUG"

FIELD_NAMES = [f.value for f in Field]


def _fail(message: str) -> None:
    err_console.print(f"[red]Error:[/] {message}")
    raise SystemExit(1)


def _read_prompt(prompt_text: Optional[str], file: Optional[str]) -> Optional[str]:
    """Resolve the prompt from the argument, a file, or stdin."""
    if prompt_text:
        return prompt_text

    if file:
        try:
            with open(file, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError:
            _fail(f"File not found: {file}")
        except OSError as e:
            _fail(f"Could not read file: {e}")

    # Try reading from stdin (piped input)
    if not sys.stdin.isatty():
        data = sys.stdin.read()
        return data or None

    return None


def _lint_or_fail(run) -> LintResult:
    try:
        return run()
    except NLPUnavailableError as e:
        _fail(str(e))


def _render(result: LintResult, output_json: bool, output_md: bool) -> None:
    if output_json:
        click.echo(render_json(result))
    elif output_md:
        click.echo(render_markdown(result))
    else:
        render_text(result, console=console)


def _configure_logging(verbose: bool) -> None:
    debug = verbose or bool(os.getenv(DEBUG_ENV))
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _ask_name() -> str:
    return click.prompt("Enter a name for this prompt", default="", show_default=False)


@click.group()
@click.version_option(version=__version__, prog_name="promptlint")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option(
    "--store",
    type=click.Path(dir_okay=False),
    default=None,
    help="Prompt store file (default: $PROMPTLINT_HOME/prompts.json).",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, store: Optional[str]) -> None:
    """PromptLint -- Lint structured prompts section by section."""
    _configure_logging(verbose)
    storage = JsonFileStorage(Path(store) if store else None)
    ctx.obj = Workspace(storage=storage, namer=_ask_name)


@cli.command("lint")
@click.argument("prompt_text", required=False, default=None)
@click.option("--file", "-f", type=str, help="Read the prompt from a file.")
@click.option("--json", "output_json", is_flag=True, help="Output results as JSON.")
@click.option("--markdown", "output_md", is_flag=True, help="Output results as Markdown.")
@click.pass_obj
def lint_cmd(
    workspace: Workspace,
    prompt_text: Optional[str],
    file: Optional[str],
    output_json: bool,
    output_md: bool,
) -> None:
    """Lint a structured prompt, or the current draft if none is given.

    The prompt uses labeled sections ("Role:", "Context:", "Objective:",
    "Constraints:", "Examples:", "Output Format:"), each starting a line.

    \b
    Examples:
        promptlint lint "Objective: Summarize the attached article."
        promptlint lint --file prompt.txt --json
        cat prompt.txt | promptlint lint --markdown
    """
    text = _read_prompt(prompt_text, file)
    if text is None:
        result = _lint_or_fail(workspace.lint)
    else:
        draft = parse_structured(text)
        result = _lint_or_fail(lambda: lint(draft, rng=workspace.rng))
    _render(result, output_json, output_md)


@cli.command("examples")
def examples_cmd() -> None:
    """List the built-in example prompts."""
    for example in DEFAULT_EXAMPLES:
        click.echo(example.name)


@cli.command("saved")
@click.pass_obj
def saved_cmd(workspace: Workspace) -> None:
    """List saved prompts."""
    if not workspace.saved:
        err_console.print("[dim]No saved prompts.[/]")
    for config in workspace.saved:
        click.echo(config.name)


@cli.command("load")
@click.argument("name")
@click.option("--json", "output_json", is_flag=True, help="Output results as JSON.")
@click.option("--markdown", "output_md", is_flag=True, help="Output results as Markdown.")
@click.pass_obj
def load_cmd(workspace: Workspace, name: str, output_json: bool, output_md: bool) -> None:
    """Make a saved or built-in prompt the current draft and lint it."""
    try:
        workspace.load(name)
    except UnknownPromptError:
        _fail(f"No saved or built-in prompt named {name!r}")
    except StorageError as e:
        _fail(str(e))
    _render(_lint_or_fail(workspace.lint), output_json, output_md)


@cli.command("save")
@click.argument("name", required=False, default=None)
@click.pass_obj
def save_cmd(workspace: Workspace, name: Optional[str]) -> None:
    """Save the current draft under NAME."""
    try:
        config = workspace.save(name)
    except StorageError as e:
        _fail(str(e))
    if config is None:
        err_console.print("[yellow]Save cancelled:[/] no name given.")
        return
    console.print(f"Saved [bold]{config.name}[/]")


@cli.command("set")
@click.argument("field", type=click.Choice(FIELD_NAMES))
@click.argument("value")
@click.pass_obj
def set_cmd(workspace: Workspace, field: str, value: str) -> None:
    """Set one field of the current draft."""
    try:
        workspace.set_field(Field(field), value)
    except StorageError as e:
        _fail(str(e))


@cli.command("paste")
@click.option("--file", "-f", type=str, help="Read the prompt from a file.")
@click.pass_obj
def paste_cmd(workspace: Workspace, file: Optional[str]) -> None:
    """Replace the current draft with a structured prompt from a file or stdin."""
    text = _read_prompt(None, file)
    if text is None:
        _fail("No prompt provided. Use --file or pipe via stdin.")
    try:
        workspace.apply_structured(text)
    except StorageError as e:
        _fail(str(e))


@cli.command("export")
@click.option("--markdown", "output_md", is_flag=True, help="Export as Markdown sections.")
@click.pass_obj
def export_cmd(workspace: Workspace, output_md: bool) -> None:
    """Print the current draft as a final prompt (or Markdown)."""
    if output_md:
        click.echo(workspace.markdown())
        return
    prompt = workspace.final_prompt()
    click.echo(prompt)
    err_console.print(f"[dim]Tokens: {count_tokens(prompt)}  Characters: {len(prompt)}[/]")


@cli.group("code")
def code_group() -> None:
    """Manage code blocks attached to the Context field.

    Blocks are addressed by their 1-based position, as shown by ``code list``.
    """


def _block_id(workspace: Workspace, number: int) -> str:
    if not 1 <= number <= len(workspace.code_blocks):
        _fail(f"No code block #{number} (the draft has {len(workspace.code_blocks)})")
    return workspace.code_blocks[number - 1].id


@code_group.command("list")
@click.pass_obj
def code_list_cmd(workspace: Workspace) -> None:
    for number, block in enumerate(workspace.code_blocks, 1):
        first_line = block.content.splitlines()[0] if block.content else ""
        click.echo(f"{number}\t{block.language}\t{first_line}")


@code_group.command("add")
@click.option("--language", "-l", default="javascript", show_default=True)
@click.option("--file", "-f", type=str, help="Read the code from a file.")
@click.pass_obj
def code_add_cmd(workspace: Workspace, language: str, file: Optional[str]) -> None:
    content = _read_prompt(None, file) or ""
    try:
        workspace.add_code_block(content.rstrip("\n"), language=language)
    except StorageError as e:
        _fail(str(e))
    click.echo(len(workspace.code_blocks))


@code_group.command("edit")
@click.argument("number", type=int)
@click.option("--language", "-l", default=None)
@click.option("--file", "-f", type=str, help="Read the code from a file.")
@click.pass_obj
def code_edit_cmd(
    workspace: Workspace, number: int, language: Optional[str], file: Optional[str]
) -> None:
    content = _read_prompt(None, file)
    if content is not None:
        content = content.rstrip("\n")
    try:
        workspace.edit_code_block(_block_id(workspace, number), content, language=language)
    except StorageError as e:
        _fail(str(e))


@code_group.command("delete")
@click.argument("number", type=int)
@click.pass_obj
def code_delete_cmd(workspace: Workspace, number: int) -> None:
    try:
        workspace.delete_code_block(_block_id(workspace, number))
    except StorageError as e:
        _fail(str(e))


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
