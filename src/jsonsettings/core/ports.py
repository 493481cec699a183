"""Core ports (interfaces) for jsonsettings.

The store talks to logging and home-directory lookup only through these
protocols, so tests can inject fakes instead of capturing process-wide state.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DiagnosticLogger(Protocol):
    """Sink for diagnostic lines (``%``-style arguments)."""

    def info(self, msg: str, *args) -> None:
        """Emit an informational line."""

    def debug(self, msg: str, *args) -> None:
        """Emit a debug line."""


@runtime_checkable
class HomeDirResolver(Protocol):
    """Resolves the current user's home directory."""

    def home(self) -> str:
        """Return the home directory path; raise OSError if unknown."""
