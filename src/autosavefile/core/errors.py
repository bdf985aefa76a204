"""Error types raised and recovered inside the decision engine."""

from __future__ import annotations


class AutoSaveError(Exception):
    """Base class for all AutoSaveFile errors."""


class MissingDocument(AutoSaveError):
    """No document behind a surface.

    Never raised by the engine; a missing document is a normal no-op outcome.
    Kept so hosts can signal the condition with the same vocabulary.
    """


class ConfigurationError(AutoSaveError):
    """An ignored pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str):
        super().__init__(f"invalid ignore pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class SaveActionFailure(AutoSaveError):
    """The save action reported failure for a document."""

    def __init__(self, path: str, cause: BaseException):
        super().__init__(f"failed to save {path}: {cause}")
        self.path = path
        self.cause = cause


class HostServiceUnavailable(AutoSaveError):
    """A host collaborator (log sink, save action, document) cannot be reached."""

    def __init__(self, service: str):
        super().__init__(f"host service unavailable: {service}")
        self.service = service
