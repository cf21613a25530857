"""CLI utilities."""

from pathlib import Path
from typing import NoReturn

import click

from codedelta.config.loader import load_config
from codedelta.config.models import CodeDeltaConfig, LoggingConfig
from codedelta.core.errors import CodeDeltaError
from codedelta.core.logging import configure_logging


def load_cli_config(root: Path | None = None) -> CodeDeltaConfig:
    """Load config for a command and switch logging over to its settings.

    ``cdelta -v`` forces DEBUG on top of whatever the config says.

    Raises:
        click.ClickException: On invalid config files or env vars
    """
    try:
        config = load_config(root)
    except CodeDeltaError as e:
        raise_for_error(e)

    configure_logging(config=_cli_logging(config.logging))
    return config


def _cli_logging(logging_config: LoggingConfig) -> LoggingConfig:
    ctx = click.get_current_context(silent=True)
    verbose = bool(ctx and (ctx.find_root().obj or {}).get("verbose"))
    if verbose:
        return logging_config.model_copy(update={"level": "DEBUG"})
    return logging_config


def raise_for_error(error: CodeDeltaError) -> NoReturn:
    raise click.ClickException(str(error)) from error
