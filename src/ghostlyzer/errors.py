"""Ghostlyzer exception hierarchy.

Shared across the routing and utility helpers so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class GhostlyzerError(Exception):
    """Base for all ghostlyzer-specific errors."""


class ConfigurationError(GhostlyzerError):
    """Raised when configuration or startup registration is invalid.

    Typically surfaces while routes or types are being registered.
    """


class TypeLookupError(GhostlyzerError):
    """The loaded-module catalog could not be enumerated.

    Not raised for a missing type (lookups return ``None``). This means
    the runtime itself is broken, so callers should let it propagate.
    """


@dataclass(frozen=True, slots=True)
class UrlGenerationError(GhostlyzerError):
    """An outbound URL could not be built for a named route."""

    route: str
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.route}: {self.detail}"
        return self.route
