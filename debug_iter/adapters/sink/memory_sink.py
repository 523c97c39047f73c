from __future__ import annotations
"""In-memory sink.

Keeps every emitted text in order. Useful in tests and demos where the output
should be inspected rather than printed.
"""
from typing import List

from debug_iter.core.interfaces import DiagnosticSink


class InMemorySink(DiagnosticSink):
    """List-backed sink; not thread-safe."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def write(self, text: str) -> None:
        self.lines.append(text)

    def clear(self) -> None:
        """Forget everything written so far."""
        self.lines.clear()
