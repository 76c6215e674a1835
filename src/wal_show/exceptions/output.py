"""Output exceptions: encoding the timelines and writing them out."""

from .base import WalShowError


class OutputError(WalShowError):
    """Base class for errors raised while rendering timelines."""
    pass


class SerializationError(OutputError):
    """Raised when timelines cannot be encoded as JSON."""

    def __init__(self, reason: str):
        super().__init__("Failed to serialize timelines", details={"reason": reason})
        self.reason = reason


class OutputWriteError(OutputError):
    """Raised when the destination stream rejects the rendered output."""

    def __init__(self, output_format: str, reason: str):
        super().__init__(
            f"Failed to write {output_format} output",
            details={"format": output_format, "reason": reason},
        )
        self.output_format = output_format
        self.reason = reason
