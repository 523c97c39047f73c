from __future__ import annotations
"""Sink that forwards debug text to the `logging` facade at DEBUG level."""
import logging

from debug_iter.core.interfaces import DiagnosticSink


class LoggingSink(DiagnosticSink):
    def __init__(self, logger_name: str = "debug_iter") -> None:
        self._logger = logging.getLogger(logger_name)

    @property
    def logger_name(self) -> str:
        return self._logger.name

    def write(self, text: str) -> None:
        self._logger.debug("%s", text)
