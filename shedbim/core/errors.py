"""Domain errors raised by the shed generator."""

from __future__ import annotations


class ShedError(Exception):
    """Base class for shed generation errors."""


class ShedGeometryError(ShedError, ValueError):
    """Input that would produce degenerate or undefined frame geometry."""


class ProfileNotFoundError(ShedError, KeyError):
    """A profile name that is not in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown profile '{self.name}'"
