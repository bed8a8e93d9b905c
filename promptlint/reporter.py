"""Output formatting for lint results.

Supports three output modes:
    - text     Rich terminal output with colors and a per-field table
    - json     Machine-readable JSON
    - markdown Markdown-formatted report (good for pasting into docs)
"""

from __future__ import annotations

import json
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from promptlint.linter import LintResult


def _count_color(count: int) -> str:
    """Return a Rich color name for a field's issue count."""
    if count == 0:
        return "green"
    if count == 1:
        return "yellow"
    return "red"


# ---------------------------------------------------------------------------
# Rich (text) output
# ---------------------------------------------------------------------------

def render_text(result: LintResult, console: Optional[Console] = None) -> None:
    """Print a fully formatted lint report to the terminal using Rich."""
    if console is None:
        console = Console()

    console.print()
    console.print(
        Panel(
            Text("PromptLint Report", style="bold cyan", justify="center"),
            border_style="cyan",
        )
    )
    console.print()

    # Prompt preview (truncated if long)
    preview = result.final_prompt[:400]
    if len(result.final_prompt) > 400:
        preview += "..."
    console.print(Panel(Text(preview), title="Prompt", border_style="dim"))
    console.print()

    console.print(f"  [dim]Tokens:[/] {result.token_count}    [dim]Characters:[/] {result.char_count}")
    console.print()

    table = Table(title="Issues by Field", show_header=True, header_style="bold cyan")
    table.add_column("Field", style="bold", min_width=13)
    table.add_column("Issues", justify="center", min_width=6)
    for label, messages in result.issues.items():
        color = _count_color(len(messages))
        table.add_row(label, f"[{color}]{len(messages)}[/]")
    console.print(table)
    console.print()

    if result.is_clean:
        console.print("[bold green]No issues found. This prompt looks solid.[/]")
        console.print()
        return

    for label, messages in result.issues.items():
        if not messages:
            continue
        console.print(f"[bold]{label}[/]")
        for message in messages:
            console.print(Text(f"  - {message}"))
        console.print()


# ---------------------------------------------------------------------------
# JSON output
# ---------------------------------------------------------------------------

def render_json(result: LintResult) -> str:
    """Return the lint result as a JSON string."""
    data = {
        "prompt": result.final_prompt,
        "token_count": result.token_count,
        "char_count": result.char_count,
        "issue_count": result.issue_count,
        "fields": result.draft.to_dict(),
        "issues": result.issues,
    }
    return json.dumps(data, indent=2)


# ---------------------------------------------------------------------------
# Markdown output
# ---------------------------------------------------------------------------

def render_markdown(result: LintResult) -> str:
    """Return the lint result as a Markdown-formatted string."""
    lines: list[str] = []

    lines.append("# PromptLint Report")
    lines.append("")
    lines.append(f"**Tokens:** {result.token_count} | **Characters:** {result.char_count}")
    lines.append("")

    lines.append("## Issues by Field")
    lines.append("")
    lines.append("| Field | Issues |")
    lines.append("|-------|--------|")
    for label, messages in result.issues.items():
        lines.append(f"| {label} | {len(messages)} |")
    lines.append("")

    for label, messages in result.issues.items():
        if not messages:
            continue
        lines.append(f"### {label}")
        lines.append("")
        for message in messages:
            lines.append(f"- {message}")
        lines.append("")

    return "\n".join(lines)
