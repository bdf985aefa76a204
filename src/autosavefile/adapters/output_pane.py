"""Output pane adapter backed by the standard logging module."""

from __future__ import annotations

import logging

OUTPUT_LOGGER = "autosavefile.output"


class LoggerLogSink:
    def __init__(self, logger: logging.Logger | None = None):
        self._logger = logger or logging.getLogger(OUTPUT_LOGGER)

    def log(self, message: str) -> None:
        self._logger.info(message)
