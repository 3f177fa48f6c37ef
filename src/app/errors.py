from __future__ import annotations

USAGE_EXAMPLE = "rps play rock paper scissors"


class RpsError(Exception):
    """Base class for every error raised by the game core."""


class ConfigurationError(RpsError, ValueError):
    """The move list cannot be played: too short, even length or duplicates."""

    def __init__(self, message: str, *, usage: str = USAGE_EXAMPLE) -> None:
        super().__init__(message)
        self.usage = usage

    def __str__(self) -> str:
        return f"{self.args[0]} Example: {self.usage}"


class EntropySourceError(RpsError, RuntimeError):
    """The operating system could not provide secure random bytes."""


class InvalidSelectionError(RpsError, ValueError):
    """A prompt line was neither a command nor an in-range move number."""


class MoveLookupError(RpsError, LookupError):
    """A move was resolved against a move set it does not belong to."""


class ProtocolOrderError(RpsError, RuntimeError):
    """A round step was attempted before the step it depends on."""
