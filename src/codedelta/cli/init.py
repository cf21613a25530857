"""cdelta init command - write a repo config file."""

from pathlib import Path

import click

from codedelta.cli.output import status
from codedelta.config.loader import repo_config_path
from codedelta.config.user_config import write_default_config


@click.command()
@click.argument("path", default=".", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
def init_command(path: Path, force: bool) -> None:
    """Write .codedelta/config.yaml under PATH (default: current directory)."""
    config_path = repo_config_path(path.resolve())
    if config_path.exists() and not force:
        status(f"Already initialized: {config_path}", style="info")
        status("Use --force to overwrite", style="info")
        return

    write_default_config(config_path)
    status(f"Wrote {config_path}", style="success")
