from __future__ import annotations
"""Debug printer: an iterator adapter that echoes each element to a sink.

Flow per pull:
  pull from source → render (compact or pretty) → prefix caption → write to sink
  → return the element unchanged

The sink and renderer are fixed when the printer is built. Exhaustion of the
source is terminal: the printer stops pulling and never writes again.
"""
from typing import Any, Iterable, Iterator, Optional, TypeVar

from debug_iter import config
from debug_iter.adapters.config.yaml_settings import SettingsError
from debug_iter.adapters.render.repr_renderer import ReprRenderer
from debug_iter.core.interfaces import DiagnosticSink, Renderer
from debug_iter.core.types import PrinterState, PrintPolicy

T = TypeVar("T")


class DebugPrinter(Iterator[T]):
    """Passes elements through from `source`, writing one debug text per element.

    Holds the source iterator exclusively. Not restartable: iterate a
    restartable source again by wrapping it again.
    """

    def __init__(
        self,
        source: Iterable[T],
        policy: PrintPolicy,
        *,
        sink: Optional[DiagnosticSink] = None,
        renderer: Optional[Renderer] = None,
    ) -> None:
        """Build the printer and resolve its collaborators once.

        Missing `sink`/`renderer` come from the active settings. A sink without
        `write` or a renderer without `compact`/`pretty` is rejected here rather
        than on the first pull.
        """
        settings = config.get_settings()
        if sink is None:
            sink = config.build_sink(settings)
        if renderer is None:
            renderer = ReprRenderer(width=settings.pretty_width)
        if not isinstance(sink, DiagnosticSink):
            raise TypeError(f"{type(sink).__name__} does not implement write(text)")
        if not isinstance(renderer, Renderer):
            raise TypeError(f"{type(renderer).__name__} does not implement compact()/pretty()")

        self._source: Iterator[T] = iter(source)
        self._policy = policy
        self._sink = sink
        self._renderer = renderer
        self._state: PrinterState = "active"

    @property
    def policy(self) -> PrintPolicy:
        return self._policy

    @property
    def state(self) -> PrinterState:
        return self._state

    def __iter__(self) -> DebugPrinter[T]:
        return self

    def __next__(self) -> T:
        if self._state == "exhausted":
            raise StopIteration
        try:
            item = next(self._source)
        except StopIteration:
            self._state = "exhausted"
            raise
        self._sink.write(self._format(item))
        return item

    def _format(self, item: Any) -> str:
        """Render `item` per the policy, with the caption prefix if any."""
        if self._policy.pretty:
            text = self._renderer.pretty(item)
        else:
            text = self._renderer.compact(item)
        if self._policy.caption is not None:
            return f"{self._policy.caption}: {text}"
        return text


def debug(
    source: Iterable[T],
    *,
    sink: Optional[DiagnosticSink] = None,
    renderer: Optional[Renderer] = None,
) -> DebugPrinter[T]:
    """Print the compact rendering of each element."""
    return DebugPrinter(source, PrintPolicy(), sink=sink, renderer=renderer)


def debug_pretty(
    source: Iterable[T],
    *,
    sink: Optional[DiagnosticSink] = None,
    renderer: Optional[Renderer] = None,
) -> DebugPrinter[T]:
    """Print the pretty (multi-line) rendering of each element."""
    return DebugPrinter(source, PrintPolicy(pretty=True), sink=sink, renderer=renderer)


def debug_with_caption(
    source: Iterable[T],
    caption: str,
    *,
    sink: Optional[DiagnosticSink] = None,
    renderer: Optional[Renderer] = None,
) -> DebugPrinter[T]:
    """Print `"<caption>: <compact rendering>"` for each element."""
    return DebugPrinter(source, PrintPolicy(caption=caption), sink=sink, renderer=renderer)


def debug_with_caption_pretty(
    source: Iterable[T],
    caption: str,
    *,
    sink: Optional[DiagnosticSink] = None,
    renderer: Optional[Renderer] = None,
) -> DebugPrinter[T]:
    """Print `"<caption>: <pretty rendering>"` for each element."""
    return DebugPrinter(
        source, PrintPolicy(pretty=True, caption=caption), sink=sink, renderer=renderer
    )


def debug_with_policy(
    source: Iterable[T],
    name: str,
    *,
    sink: Optional[DiagnosticSink] = None,
    renderer: Optional[Renderer] = None,
) -> DebugPrinter[T]:
    """Use a named policy from the active settings."""
    policies = config.get_settings().policies
    if name not in policies:
        raise SettingsError(f"unknown print policy {name!r}")
    return DebugPrinter(source, policies[name], sink=sink, renderer=renderer)
