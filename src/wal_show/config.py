"""Configuration loading and management for wal-show.

Configuration sources are merged in priority order:
    1. Defaults (defined in WalShowConfig)
    2. Global config (~/.wal-show.toml)
    3. Project config (./wal-show.toml)
    4. Explicit config file
    5. Environment variables (WAL_SHOW_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(output_type="json", include_backups=False)
    >>> config.output_type
    'json'
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "WAL_SHOW_"
MIN_TABLE_WIDTH = 20


@dataclass(frozen=True)
class WalShowConfig:
    """Settings for one ``wal-show`` run.

    Attributes:
        output_type: Requested format name; unknown names render as a table
        include_backups: Add the backups count column to the table
        table_width: Fixed table width in characters (None = natural width)
        json_indent: Pretty-print JSON with this indent (None = compact)
        verbosity: Logging verbosity level
        log_file: Also append log records to this file
    """

    output_type: str = "table"
    include_backups: bool = True
    table_width: Optional[int] = None
    json_indent: Optional[int] = None
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate types (TOML values arrive unchecked), then ranges."""
        for name, expected in _FIELD_TYPES.items():
            value = getattr(self, name)
            if value is None and name in _OPTIONAL_FIELDS:
                continue
            # bool is an int subclass; only include_backups takes one
            if not isinstance(value, expected) or (isinstance(value, bool) and expected is not bool):
                raise InvalidConfigError(name, value, f"expected {expected.__name__}")

        if self.table_width is not None and self.table_width < MIN_TABLE_WIDTH:
            raise InvalidConfigError(
                "table_width", self.table_width, f"must be at least {MIN_TABLE_WIDTH}"
            )
        if self.json_indent is not None and self.json_indent < 0:
            raise InvalidConfigError("json_indent", self.json_indent, "must be non-negative")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected one of quiet, normal, verbose"
            )


_FIELD_TYPES: dict[str, type] = {
    "output_type": str,
    "include_backups": bool,
    "table_width": int,
    "json_indent": int,
    "verbosity": str,
    "log_file": str,
}
_OPTIONAL_FIELDS = {"table_width", "json_indent", "log_file"}


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> WalShowConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are treated as "not given".

    Returns:
        Validated WalShowConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
        InvalidConfigError: If a value fails validation
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / ".wal-show.toml"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / "wal-show.toml"
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(
                f"Config file not found: {config_file}", details={"path": str(config_file)}
            )
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    # verbose/quiet flags collapse into verbosity
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return WalShowConfig(**merged)
    except TypeError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from WAL_SHOW_* environment variables.

    Supported environment variables:
        WAL_SHOW_OUTPUT_TYPE: str
        WAL_SHOW_INCLUDE_BACKUPS: bool (true/false/1/0)
        WAL_SHOW_TABLE_WIDTH: int
        WAL_SHOW_JSON_INDENT: int
        WAL_SHOW_VERBOSITY: quiet/normal/verbose
        WAL_SHOW_LOG_FILE: str
    """
    type_hints = get_type_hints(WalShowConfig)

    result: dict[str, Any] = {}
    for config_field in fields(WalShowConfig):
        env_key = f"{ENV_PREFIX}{config_field.name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        try:
            result[config_field.name] = _parse_env_value(env_value, type_hints[config_field.name])
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e)) from e

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the type of the config field."""
    # Optional[X] -> X
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        type_hint = next(t for t in args if t is not type(None))

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    return value


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load TOML file and return parsed dict."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}", details={"path": str(path)}) from e
