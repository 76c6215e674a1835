"""Rich table writer for wal-show."""

from typing import List, Optional, Sequence, TextIO

from rich.console import Console
from rich.table import Table

from ..exceptions import OutputWriteError
from ..logging_config import get_logger
from ..models import TimelineInfo
from .base import TimelineWriter

logger = get_logger(__name__)

HEADER = [
    "TLI",
    "Parent TLI",
    "Switchpoint LSN",
    "Start segment",
    "End segment",
    "Segment range",
    "Segments count",
    "Status",
]
BACKUPS_HEADER = "Backups count"

_NUMERIC = {"TLI", "Parent TLI", "Switchpoint LSN", "Segment range", "Segments count", BACKUPS_HEADER}

# Upper bound used to measure a table at its natural width
_UNBOUNDED_WIDTH = 1_000_000


class TableWriter(TimelineWriter):
    """Compact table, one row per timeline.

    Without a fixed ``width`` the table is rendered at its natural width,
    whatever the terminal size. With one, cells that do not fit are folded
    onto extra lines; cell text is never cut short.
    """

    def __init__(self, output: TextIO, include_backups: bool = True, width: Optional[int] = None):
        self._output = output
        self._include_backups = include_backups
        self._width = width

    @property
    def columns(self) -> List[str]:
        if self._include_backups:
            return HEADER + [BACKUPS_HEADER]
        return list(HEADER)

    def build_table(self, timelines: Sequence[TimelineInfo]) -> Table:
        """Assemble header and rows without rendering them."""
        table = Table()
        for label in self.columns:
            table.add_column(
                label,
                justify="right" if label in _NUMERIC else "left",
                overflow="fold",
            )

        for tl in timelines:
            row = [
                str(tl.id),
                str(tl.parent_id),
                str(tl.switch_point_lsn),
                tl.start_segment,
                tl.end_segment,
                str(tl.segment_range_size),
                str(tl.segments_count),
                tl.status,
            ]
            if self._include_backups:
                row.append(str(len(tl.backups)))
            table.add_row(*row)

        return table

    def write(self, timelines: Sequence[TimelineInfo]) -> None:
        table = self.build_table(timelines)
        console = Console(file=self._output, width=self._width, highlight=False)
        if self._width is None:
            console.width = self.natural_width(console, table)

        # Render fully before touching the stream
        with console.capture() as capture:
            console.print(table)
        rendered = capture.get()

        logger.debug("Writing %d timelines as table (width %d)", table.row_count, console.width)
        try:
            self._output.write(rendered)
        except (OSError, ValueError) as e:
            raise OutputWriteError("table", str(e)) from e

    @staticmethod
    def natural_width(console: Console, table: Table) -> int:
        """Width at which no header or cell needs to shrink."""
        options = console.options.update_width(_UNBOUNDED_WIDTH)
        return console.measure(table, options=options).maximum
