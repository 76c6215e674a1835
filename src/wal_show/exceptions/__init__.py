"""Exception hierarchy for wal-show."""

from .base import WalShowError
from .config import ConfigurationError, InvalidConfigError
from .input import InputError, InputFileError, InvalidInputError
from .output import OutputError, OutputWriteError, SerializationError

__all__ = [
    "WalShowError",
    "OutputError",
    "SerializationError",
    "OutputWriteError",
    "ConfigurationError",
    "InvalidConfigError",
    "InputError",
    "InputFileError",
    "InvalidInputError",
]
