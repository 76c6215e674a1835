"""JSON writer for wal-show."""

import json
from typing import Optional, Sequence, TextIO

from ..exceptions import OutputWriteError, SerializationError
from ..logging_config import get_logger
from ..models import TimelineInfo
from .base import TimelineWriter

logger = get_logger(__name__)


class JsonWriter(TimelineWriter):
    """Render timelines as one JSON array, written in a single call."""

    def __init__(self, output: TextIO, indent: Optional[int] = None):
        self._output = output
        self._indent = indent

    def write(self, timelines: Sequence[TimelineInfo]) -> None:
        document = self.format(timelines)
        logger.debug("Writing %d timelines as JSON (%d chars)", len(timelines), len(document))
        try:
            self._output.write(document)
        except (OSError, ValueError) as e:
            raise OutputWriteError("json", str(e)) from e

    def format(self, timelines: Sequence[TimelineInfo]) -> str:
        """Return the JSON document without writing it."""
        data = [t.to_dict() for t in timelines]
        # Compact unless an indent is configured
        separators = (",", ":") if self._indent is None else None
        try:
            return json.dumps(data, indent=self._indent, separators=separators, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(str(e)) from e
