from __future__ import annotations
"""Sink that writes debug text to standard error.

Each write is flushed immediately so nothing is held back between pulls.
"""
import sys
from typing import Optional, TextIO

from debug_iter.core.interfaces import DiagnosticSink


class StderrSink(DiagnosticSink):
    """Line-oriented error-stream writer.

    With no explicit stream, `sys.stderr` is looked up on every write so
    redirections made after construction are honored.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def write(self, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(text + "\n")
        stream.flush()
