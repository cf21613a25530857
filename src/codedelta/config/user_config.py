"""Repo config template.

The repo config lives in .codedelta/config.yaml. ``cdelta init`` writes it with
every option present but commented out unless it differs from the default, so
the file documents itself.
"""

from pathlib import Path

import yaml

from codedelta.config.models import CodeDeltaConfig


def write_default_config(path: Path, config: CodeDeltaConfig | None = None) -> None:
    """Write repo config file with helpful comments.

    Args:
        path: Path to write config.yaml
        config: Config values (uses defaults if None)
    """
    cfg = config or CodeDeltaConfig()
    defaults = CodeDeltaConfig()

    lines = [
        "# codedelta configuration",
        "# Environment variables override this file: CODEDELTA__<SECTION>__<KEY>",
        "",
    ]

    lines.append("analysis:")
    lines.append("  # basic skips rename/move inference; detailed and comprehensive run it")
    lines.extend(
        _option("default_depth", cfg.analysis.default_depth, defaults.analysis.default_depth)
    )
    lines.append("  # Similarity above which a changed identifier is reported as a rename")
    lines.extend(
        _option(
            "rename_threshold",
            cfg.analysis.rename_threshold,
            defaults.analysis.rename_threshold,
        )
    )
    lines.extend(
        _option(
            "enable_method_tracking",
            cfg.analysis.enable_method_tracking,
            defaults.analysis.enable_method_tracking,
        )
    )
    lines.extend(
        _option(
            "enable_logic_analysis",
            cfg.analysis.enable_logic_analysis,
            defaults.analysis.enable_logic_analysis,
        )
    )
    lines.append("")

    lines.append("refactoring:")
    lines.append("  # Reject rewrites that change the file's shape too much")
    lines.extend(
        _option(
            "preserve_logic",
            cfg.refactoring.preserve_logic,
            defaults.refactoring.preserve_logic,
        )
    )
    lines.append("  # Backups are written next to the target and never deleted")
    lines.extend(
        _option(
            "create_backups",
            cfg.refactoring.create_backups,
            defaults.refactoring.create_backups,
        )
    )
    lines.append("  # Rules applied in order when none are named on the command line")
    lines.extend(_option("rules", cfg.refactoring.rules, defaults.refactoring.rules))
    lines.append("")

    lines.append("logging:")
    lines.append("  # DEBUG, INFO, WARNING, ERROR, CRITICAL")
    lines.extend(_option("level", cfg.logging.level, defaults.logging.level))
    lines.append("")

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines))


def _option(key: str, value: object, default: object) -> list[str]:
    """Render one indented option, commented out when it equals the default."""
    dumped = yaml.safe_dump({key: value}, default_flow_style=False, sort_keys=False)
    prefix = "  " if value != default else "  # "
    return [prefix + line for line in dumped.rstrip("\n").splitlines()]
