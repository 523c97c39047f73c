from __future__ import annotations
"""Settings backed by YAML.

Reads a small YAML document that picks the diagnostic sink, the logger name,
the pretty-print width and any named print policies. Keeping these in config
lets a project switch from stderr to logging without code changes.
"""
import logging
from pathlib import Path

import yaml

from debug_iter.core.types import Settings

logger = logging.getLogger(__name__)


class SettingsError(ValueError):
    """Raised when a named print policy is not in the active settings."""


def load_settings(path: str | Path) -> Settings:
    """Load settings from a YAML file; missing keys take their defaults.

    Invalid documents raise `pydantic.ValidationError`.
    """
    path = Path(path)
    data = yaml.safe_load(path.read_text()) or {}
    settings = Settings.model_validate(data)
    logger.debug(
        "Loaded settings from %s: sink=%s, policies=%s",
        path,
        settings.sink,
        sorted(settings.policies),
    )
    return settings
