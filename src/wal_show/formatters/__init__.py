"""Output writers for wal-show."""

from typing import Optional, TextIO, Union

from .base import OutputType, TimelineWriter
from .json_formatter import JsonWriter
from .table_formatter import TableWriter


def get_writer(
    output_type: Union[OutputType, str, int, None],
    output: TextIO,
    include_backups: bool = True,
    *,
    width: Optional[int] = None,
    indent: Optional[int] = None,
) -> TimelineWriter:
    """Build a writer for the requested format.

    Args:
        output_type: Requested format; anything unrecognized renders as a table
        output: Destination stream, owned by the caller
        include_backups: Add the backups count column (table only)
        width: Fixed table width (table only)
        indent: JSON indent (JSON only)

    Returns:
        A fresh writer instance
    """
    resolved = OutputType.parse(output_type)
    if resolved is OutputType.JSON:
        return JsonWriter(output, indent=indent)
    return TableWriter(output, include_backups=include_backups, width=width)


__all__ = [
    "OutputType",
    "TimelineWriter",
    "TableWriter",
    "JsonWriter",
    "get_writer",
]
