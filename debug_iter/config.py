from __future__ import annotations
"""Process-wide default settings and the sink factory.

Printers built without an explicit sink resolve one from the settings active
at construction time. Changing the settings later does not affect printers
that already exist.
"""
from pathlib import Path
from typing import Optional

from debug_iter.adapters.config.yaml_settings import load_settings
from debug_iter.adapters.sink.logging_sink import LoggingSink
from debug_iter.adapters.sink.stderr_sink import StderrSink
from debug_iter.core.interfaces import DiagnosticSink
from debug_iter.core.types import Settings

_settings: Settings = Settings()


def get_settings() -> Settings:
    return _settings


def configure(settings: Optional[Settings] = None) -> Settings:
    """Install `settings` as the process default; `None` restores defaults."""
    global _settings
    _settings = settings if settings is not None else Settings()
    return _settings


def configure_from_file(path: str | Path) -> Settings:
    """Load a YAML settings file and install it as the process default."""
    return configure(load_settings(path))


def build_sink(settings: Optional[Settings] = None) -> DiagnosticSink:
    """Return the single sink the settings select."""
    settings = settings or _settings
    if settings.sink == "logging":
        return LoggingSink(settings.logger_name)
    return StderrSink()
