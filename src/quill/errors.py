"""Core exceptions for quill operations."""


class QuillError(Exception):
    """Base exception for all quill errors."""

    def __init__(self, message: str, *, details: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidColorError(QuillError, ValueError):
    """Raised when a color value cannot be turned into an escape code."""

    def __init__(self, value: object, reason: str = "Invalid color") -> None:
        super().__init__(f"{reason}: {value!r}", details={"value": value})


class InterruptedWaitError(QuillError):
    """Raised when a pipeline sleep is cancelled before the duration elapsed."""

    def __init__(self, seconds: float) -> None:
        super().__init__(
            f"Sleep interrupted before {seconds}s elapsed",
            details={"seconds": seconds},
        )
