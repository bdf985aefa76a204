"""Ignored-pattern parsing and matching (core domain)."""

from __future__ import annotations

import re
from typing import Callable, Iterable

from .errors import ConfigurationError

# Delimiters accepted in the raw "ignored file types" field.
_DELIMITERS = re.compile(r"[,;:]")


def split_ignored_patterns(raw: str | None) -> tuple[str, ...]:
    """Split the raw delimited field into patterns.

    Empty entries are dropped: an empty pattern would end every path and
    disqualify every save, so ``""`` yields no patterns at all.
    """

    if not raw:
        return ()
    return tuple(part for part in _DELIMITERS.split(raw) if part)


def compile_pattern(pattern: str) -> re.Pattern:
    """Compile a regex pattern, raising ConfigurationError if it is invalid."""

    try:
        return re.compile(pattern)
    except re.error as exc:
        raise ConfigurationError(pattern, str(exc)) from exc


def matches_ignored(path: str | None, pattern: str, use_regex: bool) -> bool:
    """Return True if ``path`` is excluded by ``pattern``.

    Regex mode searches anywhere in the path (unanchored); literal mode is a
    suffix match.
    """

    path = path or ""
    if use_regex:
        return compile_pattern(pattern).search(path) is not None
    return bool(pattern) and path.endswith(pattern)


def first_ignored_match(
    path: str | None,
    patterns: Iterable[str],
    use_regex: bool,
    on_error: Callable[[ConfigurationError], None] | None = None,
) -> str | None:
    """Return the first pattern excluding ``path``, or None.

    Invalid patterns are reported to ``on_error`` and treated as
    non-matching; evaluation continues with the next pattern.
    """

    for pattern in patterns:
        try:
            if matches_ignored(path, pattern, use_regex):
                return pattern
        except ConfigurationError as exc:
            if on_error is not None:
                on_error(exc)
    return None
