from __future__ import annotations
"""Shared type definitions used across the printer and its adapters.

Policies and settings are frozen pydantic models so they cannot be
reconfigured once a printer holds them, and settings loaded from YAML are
validated on construction.
"""
from types import MappingProxyType
from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, field_validator


PrinterState = Literal["active", "exhausted"]

SinkKind = Literal["stderr", "logging"]


class PrintPolicy(BaseModel):
    """How each element is rendered.

    - pretty: multi-line indented rendering instead of the single-line one
    - caption: emitted before the rendering, separated by ": "
    """

    model_config = ConfigDict(frozen=True)

    pretty: StrictBool = False
    caption: Optional[StrictStr] = None


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    sink: SinkKind = "stderr"
    logger_name: StrictStr = Field(default="debug_iter", min_length=1)
    pretty_width: StrictInt = Field(default=1, ge=1)
    policies: Mapping[str, PrintPolicy] = Field(default_factory=dict, validate_default=True)

    @field_validator("policies", mode="before")
    @classmethod
    def fill_empty_policies(cls, v: Any) -> Any:
        """Treat a null section or a null entry as empty."""
        if v is None:
            return {}
        if isinstance(v, dict):
            return {name: entry if entry is not None else {} for name, entry in v.items()}
        return v

    @field_validator("policies")
    @classmethod
    def freeze_policies(cls, v: Mapping[str, PrintPolicy]) -> Mapping[str, PrintPolicy]:
        return MappingProxyType(dict(v))
