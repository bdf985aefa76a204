"""Save-decision engine for AutoSaveFile.

Decides, for one document and one configuration snapshot, whether the
document should be saved right now, and performs the save through the
injected SaveAction port. The engine keeps no state between calls and never
lets an exception escape its public methods.
"""

from __future__ import annotations

import logging
import traceback
from typing import Iterable

from .config_model import SaveConfig
from .decision import Decision, DecisionOutcome
from .errors import ConfigurationError, HostServiceUnavailable, SaveActionFailure
from .patterns import first_ignored_match
from .ports import DocumentHandle, LogSink, SaveAction

logger = logging.getLogger(__name__)


def _format_exception(exc: BaseException) -> str:
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)).rstrip()


class SaveDecisionEngine:
    """Applies the auto-save policy to documents handed over by the host."""

    def __init__(self, save_action: SaveAction | None, log_sink: LogSink | None = None):
        self._save_action = save_action
        self._log_sink = log_sink

    def should_save(self, doc: DocumentHandle | None, cfg: SaveConfig) -> Decision:
        """Evaluate one document and save it if no rule disqualifies it.

        Rules, first match wins:
            1. no document         -> MISSING
            2. already saved       -> CLEAN
            3. read-only           -> READ_ONLY (logged)
            4. ignored by pattern  -> IGNORED
            5. otherwise           -> save, SAVED (logged) or FAILED
        """
        if doc is None:
            return Decision(DecisionOutcome.MISSING)
        try:
            return self._evaluate(doc, cfg)
        except Exception as exc:
            # Reading the document failed; the host side is gone or broken.
            detail = self.report_host_failure("document", exc)
            return Decision(DecisionOutcome.FAILED, error=detail)

    def on_focus_transferred(
        self,
        losing: DocumentHandle | None,
        gaining: DocumentHandle | None,
        cfg: SaveConfig,
    ) -> Decision:
        """Save what is being left; ``gaining`` is never inspected."""
        return self.should_save(losing, cfg)

    def on_host_lost_focus(
        self,
        surfaces: Iterable[DocumentHandle | None] | None,
        cfg: SaveConfig,
    ) -> list[Decision]:
        """Sweep every open document when the host application loses focus."""
        if not cfg.save_on_app_deactivate or surfaces is None:
            return []
        snapshot = []
        try:
            for doc in surfaces:
                snapshot.append(doc)
        except Exception as exc:
            # Sweep what the host handed over before its list broke.
            self.report_host_failure("surface list", exc)
        logger.debug("Sweeping %d surface(s)", len(snapshot))
        return [self.should_save(doc, cfg) for doc in snapshot]

    def report_host_failure(self, service: str, exc: BaseException) -> str:
        """Log a host collaborator failure and return its full detail."""
        failure = HostServiceUnavailable(service)
        detail = f"{failure}\n{_format_exception(exc)}"
        logger.warning("%s: %s", failure, exc)
        self._log(detail)
        return detail

    def _evaluate(self, doc: DocumentHandle, cfg: SaveConfig) -> Decision:
        if doc.is_saved:
            return Decision(DecisionOutcome.CLEAN, path=doc.path)

        path = doc.path or ""
        if doc.is_read_only:
            message = f"skipping read-only file {path}"
            self._log(message)
            return Decision(DecisionOutcome.READ_ONLY, path=path, message=message)

        matched = first_ignored_match(
            path, cfg.ignored_patterns, cfg.use_regex, on_error=self._report_bad_pattern
        )
        if matched is not None:
            logger.debug("Ignoring %s (pattern %r)", path, matched)
            return Decision(DecisionOutcome.IGNORED, path=path)

        message = f"saving {path}"
        self._log(message)
        return self._save(doc, path, message)

    def _save(self, doc: DocumentHandle, path: str, message: str) -> Decision:
        if self._save_action is None:
            error = str(HostServiceUnavailable("save action"))
            self._log(error)
            return Decision(DecisionOutcome.FAILED, path=path, message=message, error=error)
        try:
            self._save_action.save(doc)
        except Exception as exc:
            failure = SaveActionFailure(path, exc)
            detail = f"{failure}\n{_format_exception(exc)}"
            logger.warning("%s", failure)
            self._log(detail)
            return Decision(DecisionOutcome.FAILED, path=path, message=message, error=detail)
        return Decision(DecisionOutcome.SAVED, path=path, message=message)

    def _report_bad_pattern(self, error: ConfigurationError) -> None:
        logger.warning("%s", error)
        self._log(str(error))

    def _log(self, message: str) -> None:
        if self._log_sink is None:
            logger.debug("No log sink, dropping: %s", message)
            return
        try:
            self._log_sink.log(message)
        except Exception:
            logger.debug("Log sink failed, dropping: %s", message, exc_info=True)
