"""Base writer interface for wal-show output rendering."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Sequence, Union

from ..logging_config import get_logger
from ..models import TimelineInfo

logger = get_logger(__name__)


class OutputType(Enum):
    """Output formats understood by ``get_writer``."""

    TABLE = 1
    JSON = 2

    # Alias of TABLE: what an unknown or empty request renders as
    DEFAULT = 1

    @classmethod
    def parse(cls, value: Union["OutputType", str, int, None]) -> "OutputType":
        """Resolve a user supplied format, falling back to ``DEFAULT``.

        Accepts an ``OutputType``, a member name in any case (``"json"``) or
        a member value (``2``).
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.strip().upper() in cls.__members__:
            return cls[value.strip().upper()]
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass
        logger.debug("Unrecognized output type %r, using %s", value, cls.DEFAULT.name.lower())
        return cls.DEFAULT


class TimelineWriter(ABC):
    """Abstract base class for timeline writers.

    A writer renders every record it is given exactly once, in the given
    order, to the stream it was built with. The stream belongs to the caller
    and is never closed here.
    """

    @abstractmethod
    def write(self, timelines: Sequence[TimelineInfo]) -> None:
        """Render timelines to the output stream.

        Raises:
            OutputError: If the timelines cannot be rendered or written
        """

