from __future__ import annotations
"""Renderer backed by the value's own `repr` and rich's pretty printer.

`repr` is the single-line form. `rich.pretty.pretty_repr` with a narrow width
is the multi-line form: dataclasses, dicts, lists and tuples put one field per
indented line, while strings and other leaves keep their plain `repr`.
"""
from typing import Any

from rich.pretty import pretty_repr

from debug_iter.core.interfaces import Renderer


class ReprRenderer(Renderer):
    def __init__(self, width: int = 1, indent: int = 4) -> None:
        self.width = width
        self.indent = indent

    def compact(self, value: Any) -> str:
        return repr(value)

    def pretty(self, value: Any) -> str:
        """Expand containers that do not fit in `width` columns."""
        return pretty_repr(value, max_width=self.width, indent_size=self.indent)
