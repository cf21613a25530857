"""cdelta compare / analyze commands - diff a local file against a baseline."""

from pathlib import Path

import click

from codedelta.cli.output import echo_json, render_analysis, render_comparison
from codedelta.cli.utils import load_cli_config, raise_for_error
from codedelta.compare.ops import CompareOps
from codedelta.core.errors import CodeDeltaError
from codedelta.files.ops import FileOps

_FILE = click.Path(exists=True, dir_okay=False, path_type=Path)


@click.command()
@click.argument("local", type=_FILE)
@click.argument("baseline", type=_FILE)
@click.option(
    "--depth",
    type=click.Choice(["basic", "detailed", "comprehensive"]),
    default=None,
    help="Analysis depth (default: from config)",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def compare_command(local: Path, baseline: Path, depth: str | None, as_json: bool) -> None:
    """Compare LOCAL against BASELINE.

    Reports changed lines with their significance, inferred renames,
    change metrics and recommendations.
    """
    config = load_cli_config()
    files = FileOps()
    try:
        result = CompareOps(config, file_ops=files).compare_file(
            local, files.read_text(baseline), depth
        )
    except CodeDeltaError as e:
        raise_for_error(e)

    if as_json:
        echo_json(result.to_dict())
    else:
        render_comparison(result)


@click.command()
@click.argument("local", type=_FILE)
@click.argument("baseline", type=_FILE)
@click.option("--methods/--no-methods", default=None, help="Track method renames")
@click.option("--logic/--no-logic", default=None, help="Track control-flow changes")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def analyze_command(
    local: Path,
    baseline: Path,
    methods: bool | None,
    logic: bool | None,
    as_json: bool,
) -> None:
    """Summarize method and logic changes between BASELINE and LOCAL."""
    config = load_cli_config()
    files = FileOps()
    try:
        analysis = CompareOps(config, file_ops=files).analyze_file(
            local,
            files.read_text(baseline),
            method_tracking=methods,
            logic_analysis=logic,
        )
    except CodeDeltaError as e:
        raise_for_error(e)

    if as_json:
        echo_json(analysis.to_dict())
    else:
        render_analysis(analysis)
