"""Core ports (interfaces) for AutoSaveFile.

These protocols define the boundaries between the decision engine and the
host editor. They are intentionally small and capability-oriented so the
engine never depends on a host runtime.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DocumentHandle(Protocol):
    """An open editable document, owned by the host."""

    path: str | None
    is_saved: bool
    is_read_only: bool

    def save(self) -> None:
        """Persist the document to its backing store."""


@runtime_checkable
class Surface(Protocol):
    """An editor window or pane showing at most one document."""

    document: DocumentHandle | None


@runtime_checkable
class SaveAction(Protocol):
    """Persists a document. Must be idempotent on clean documents."""

    def save(self, doc: DocumentHandle) -> None:
        """Save the document; raise on failure."""


@runtime_checkable
class LogSink(Protocol):
    """User-visible output pane."""

    def log(self, message: str) -> None:
        """Append one line to the output."""
