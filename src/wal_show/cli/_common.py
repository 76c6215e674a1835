"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import WalShowConfig, load_config

# stdout carries the rendered timelines; messages go to stderr
console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    output_type: Optional[str] = None,
    detailed_json: bool = False,
    without_backups: bool = False,
    width: Optional[int] = None,
    indent: Optional[int] = None,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[str] = None,
) -> WalShowConfig:
    """Build config from CLI options."""
    overrides = {
        "output_type": "json" if detailed_json else output_type,
        "table_width": width,
        "json_indent": indent,
        "verbose": verbose,
        "quiet": quiet,
        "log_file": log_file,
    }
    if without_backups:
        overrides["include_backups"] = False
    return load_config(config_file=config, **overrides)
