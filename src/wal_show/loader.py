"""Load timeline records handed to the CLI.

The accepted shape is the one ``JsonWriter`` produces: a JSON array of
timeline objects, each with an optional ``backups`` array.
"""

import json
from pathlib import Path
from typing import List, TextIO, Union

from .exceptions import InputFileError, InvalidInputError
from .logging_config import get_logger
from .models import TimelineInfo

logger = get_logger(__name__)


def load_timelines(source: Union[str, Path, TextIO]) -> List[TimelineInfo]:
    """Parse timelines from a path or an already open text stream.

    Raises:
        InputFileError: If the file cannot be read
        InvalidInputError: If the content is not a list of timeline objects
    """
    if isinstance(source, (str, Path)):
        path = Path(source)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise InputFileError(path, e.strerror or str(e)) from e
    else:
        text = source.read()

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidInputError(f"malformed JSON: {e}") from e

    if not isinstance(data, list):
        raise InvalidInputError(f"expected a JSON array, got {type(data).__name__}")

    timelines = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise InvalidInputError(f"item {index} is not an object")
        try:
            timelines.append(TimelineInfo.from_dict(item))
        except KeyError as e:
            raise InvalidInputError(f"item {index} is missing key {e.args[0]!r}") from e
        except (TypeError, AttributeError) as e:
            raise InvalidInputError(f"item {index} has a malformed backups list") from e

    logger.debug("Loaded %d timelines", len(timelines))
    return timelines
