"""cdelta refactor command - apply refactoring rules to a file or directory."""

from pathlib import Path

import click

from codedelta.cli.output import echo_json, render_refactoring
from codedelta.cli.utils import load_cli_config, raise_for_error
from codedelta.core.errors import CodeDeltaError
from codedelta.refactor.ops import RefactorOps
from codedelta.refactor.rules import RULES


@click.command()
@click.argument("target", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--rule",
    "rules",
    multiple=True,
    help=f"Rule to apply, repeatable, in order. Known: {', '.join(RULES)}",
)
@click.option(
    "--preserve-logic/--no-preserve-logic",
    default=None,
    help="Reject rewrites that fail the logic-preservation guard",
)
@click.option("--backup/--no-backup", default=None, help="Snapshot TARGET before writing")
@click.option("--dry-run", is_flag=True, help="Show changes without writing")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def refactor_command(
    target: Path,
    rules: tuple[str, ...],
    preserve_logic: bool | None,
    backup: bool | None,
    dry_run: bool,
    as_json: bool,
) -> None:
    """Apply refactoring rules to TARGET.

    TARGET is a file, or a directory whose code files are all refactored.
    If any file fails the logic-preservation guard nothing is written.
    """
    config = load_cli_config()
    try:
        result = RefactorOps(config).refactor(
            target,
            rules=list(rules) or None,
            preserve_logic=preserve_logic,
            create_backup=backup,
            dry_run=dry_run,
        )
    except CodeDeltaError as e:
        raise_for_error(e)

    if as_json:
        echo_json(result.to_dict())
    else:
        render_refactoring(result)
