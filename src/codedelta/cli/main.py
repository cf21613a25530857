"""codedelta CLI - cdelta command."""

import click

from codedelta.cli.compare import analyze_command, compare_command
from codedelta.cli.init import init_command
from codedelta.cli.refactor import refactor_command
from codedelta.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="cdelta")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """codedelta - compare file versions and apply guarded refactorings."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    # Commands switch to the configured outputs once their config is loaded
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(init_command, name="init")
cli.add_command(compare_command, name="compare")
cli.add_command(analyze_command, name="analyze")
cli.add_command(refactor_command, name="refactor")


if __name__ == "__main__":
    cli()
