from __future__ import annotations
"""Interface definitions for the printer's swappable collaborators.

These `Protocol`s define boundaries so the destination of the debug text and
the way elements are rendered can change without touching the printer.
"""
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DiagnosticSink(Protocol):
    """Receives one formatted line (or block, in pretty mode) per element."""
    def write(self, text: str) -> None: ...


@runtime_checkable
class Renderer(Protocol):
    """Produces the compact and pretty debug renderings of a value."""
    def compact(self, value: Any) -> str: ...

    def pretty(self, value: Any) -> str: ...
