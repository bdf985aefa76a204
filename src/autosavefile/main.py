#!/usr/bin/env python3
"""AutoSaveFile: save dirty documents when the editor loses focus"""

import logging

from .adapters.config_env import load_save_config
from .adapters.output_pane import LoggerLogSink
from .adapters.save_action import DocumentSaveAction
from .config import config
from .core.decision import Decision, DecisionOutcome
from .core.engine import SaveDecisionEngine
from .core.ports import Surface


class AutoSaveFile:
    """Host-facing application: turns window events into engine calls"""

    def __init__(self, log_sink=None, save_action=None, settings=None):
        self.settings = settings if settings is not None else config
        self.engine = SaveDecisionEngine(
            save_action if save_action is not None else DocumentSaveAction(),
            log_sink if log_sink is not None else LoggerLogSink(),
        )

    def snapshot(self):
        """Take a consistent copy of the live settings for one event"""
        return load_save_config(self.settings)

    def on_window_activated(self, got_focus, lost_focus):
        """Window focus moved from ``lost_focus`` to ``got_focus``"""
        try:
            cfg = self.snapshot()
        except Exception as e:
            detail = self.engine.report_host_failure("settings", e)
            return Decision(DecisionOutcome.FAILED, error=detail)
        return self.engine.on_focus_transferred(
            self._document_of(lost_focus), self._document_of(got_focus), cfg
        )

    def on_app_deactivated(self, windows):
        """The editor application lost focus; sweep all open windows"""
        try:
            cfg = self.snapshot()
        except Exception as e:
            self.engine.report_host_failure("settings", e)
            return []
        return self.engine.on_host_lost_focus(self._documents_of(windows), cfg)

    def _documents_of(self, windows):
        # Lazy, so a disabled sweep never walks the host windows
        for window in windows or ():
            try:
                if not isinstance(window, Surface):
                    continue
            except Exception as e:
                self.engine.report_host_failure("window", e)
                yield None
                continue
            yield self._document_of(window)

    def _document_of(self, window):
        if window is None:
            return None
        try:
            return window.document
        except Exception as e:
            self.engine.report_host_failure("window", e)
            return None


def main():
    cfg = load_save_config()
    logging.basicConfig(
        level=logging.DEBUG if config.DEBUG else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    print("\n" + "=" * 50)
    print("💾 AutoSaveFile")
    print("=" * 50)
    patterns = ", ".join(cfg.ignored_patterns) or "(none)"
    print(f"Ignored: {patterns}")
    print(f"Matching: {'regex' if cfg.use_regex else 'suffix'}")
    print(f"Save all on app focus lost: {cfg.save_on_app_deactivate}")
    print(f"Time delay: {cfg.time_delay_seconds}s (reserved)")
    print("=" * 50 + "\n")
    return 0


if __name__ == "__main__":
    main()
