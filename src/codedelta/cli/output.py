"""Terminal rendering for CLI commands.

Results go to stdout; status lines go to stderr so ``--json`` output stays
pipeable.
"""

from __future__ import annotations

import json
from typing import Any

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from codedelta.compare.models import ChangeAnalysis, ComparisonResult, Significance
from codedelta.refactor.models import RefactoringResult

_console = Console()
_err_console = Console(stderr=True)

# Style prefixes
_STYLES = {
    "success": "[green]✓[/green] ",
    "error": "[red]✗[/red] ",
    "warning": "[yellow]![/yellow] ",
    "info": "  ",
}

_SIGNIFICANCE_COLORS = {
    Significance.HIGH: "red",
    Significance.MEDIUM: "yellow",
    Significance.LOW: "dim",
}


def get_console() -> Console:
    return _console


def status(message: str, *, style: str = "info") -> None:
    """Print a one-line status message to stderr."""
    _err_console.print(f"{_STYLES.get(style, '')}{message}", highlight=False)


def echo_json(data: dict[str, Any]) -> None:
    click.echo(json.dumps(data, indent=2))


def render_comparison(result: ComparisonResult) -> None:
    console = get_console()

    if result.changes:
        table = Table(title="Changes", title_justify="left")
        table.add_column("#", justify="right")
        table.add_column("Type")
        table.add_column("Significance")
        table.add_column("Content", overflow="fold")
        for change in result.changes:
            color = _SIGNIFICANCE_COLORS[change.significance]
            table.add_row(
                str(change.line_number),
                change.kind.value,
                f"[{color}]{change.significance.value}[/{color}]",
                escape(change.content),
            )
        console.print(table)
    else:
        console.print("No line changes.")

    if result.relationships:
        table = Table(title="Relationships", title_justify="left")
        table.add_column("Type")
        table.add_column("Old")
        table.add_column("New")
        table.add_column("Confidence", justify="right")
        for rel in result.relationships:
            table.add_row(
                rel.kind.value,
                escape(rel.old_reference),
                escape(rel.new_reference),
                f"{rel.confidence:.2f}",
            )
        console.print(table)

    metrics = result.metrics
    console.print(
        f"Total changes: {metrics.total_changes}  "
        f"Significant: {metrics.significant_changes}  "
        f"Complexity: {metrics.complexity_score:.1f}/10  "
        f"Impact: {metrics.maintainability_impact.value}",
        highlight=False,
    )
    for recommendation in result.recommendations:
        console.print(f"- {recommendation}", highlight=False)


def render_analysis(analysis: ChangeAnalysis) -> None:
    console = get_console()
    for record in [*analysis.method_changes, *analysis.logic_changes]:
        console.print(escape(f"[{record.kind.value}] {record.description}"), highlight=False)
    console.print(analysis.summary.rstrip("\n"), highlight=False)


def render_refactoring(result: RefactoringResult) -> None:
    console = get_console()
    if not result.changes:
        console.print("No changes.")
    else:
        table = Table(title="Refactoring changes", title_justify="left")
        table.add_column("File", overflow="fold")
        table.add_column("Type")
        table.add_column("Description")
        table.add_column("Lines")
        for change in result.changes:
            table.add_row(
                change.file,
                change.kind.value,
                escape(change.description),
                ", ".join(str(n) for n in change.line_numbers),
            )
        console.print(table)

    verb = "Would modify" if result.dry_run else "Modified"
    status(f"{verb} {len(result.files)} file(s)", style="success")
    if result.backup_path:
        status(f"Backup: {result.backup_path}")
