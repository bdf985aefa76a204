"""Core configuration model (structured view)."""

from __future__ import annotations

from dataclasses import dataclass

from .patterns import split_ignored_patterns


@dataclass(frozen=True)
class SaveConfig:
    """Immutable configuration snapshot consumed by a single decision.

    ``time_delay_seconds`` is reserved: it is carried through unchanged and
    never enforced by the engine.
    """

    ignored_patterns: tuple[str, ...] = ()
    use_regex: bool = True
    save_on_app_deactivate: bool = True
    time_delay_seconds: int = 5

    @classmethod
    def from_raw(
        cls,
        ignored_file_types: str | None,
        use_regex: bool = True,
        save_on_app_deactivate: bool = True,
        time_delay_seconds: int = 5,
    ) -> "SaveConfig":
        """Build a snapshot from the raw delimited ignored-types field."""
        return cls(
            ignored_patterns=split_ignored_patterns(ignored_file_types),
            use_regex=bool(use_regex),
            save_on_app_deactivate=bool(save_on_app_deactivate),
            time_delay_seconds=time_delay_seconds,
        )
