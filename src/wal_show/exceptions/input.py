"""Input exceptions: reading timeline records handed to the CLI."""

from pathlib import Path

from .base import WalShowError


class InputError(WalShowError):
    """Base class for errors raised while loading timeline records."""
    pass


class InputFileError(InputError):
    """Raised when the input file cannot be opened or read."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot read timelines from: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason


class InvalidInputError(InputError):
    """Raised when the input is not a JSON array of timeline objects."""

    def __init__(self, reason: str):
        super().__init__("Invalid timeline input", details={"reason": reason})
        self.reason = reason
