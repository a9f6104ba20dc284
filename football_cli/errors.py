"""Project exception types."""

from typing import Iterable, Optional


class FootballCliError(Exception):
    """Base class for errors raised by football-cli."""


class UnknownCompetitionError(FootballCliError):
    """Raised when a competition alias or name cannot be resolved."""

    def __init__(self, value: str, known: Optional[Iterable[str]] = None):
        self.value = value
        self.known = sorted(known) if known else []
        message = f"Unknown competition '{value}'"
        if self.known:
            message += f" (expected one of: {', '.join(self.known)})"
        super().__init__(message)


class ConfigurationError(FootballCliError):
    """Raised when the settings file cannot be loaded."""
