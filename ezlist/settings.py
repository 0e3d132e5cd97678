"""Typed ezlist settings with Pydantic validation."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import tomllib
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .core.model import DEFAULT_REUSE_IDENTIFIER


class SourceSettings(BaseModel):
    """Settings controlling how a :class:`ListSource` reacts to stale queries."""

    model_config = ConfigDict(validate_assignment=True)

    debug_assertions: bool = False
    default_reuse_identifier: str = DEFAULT_REUSE_IDENTIFIER
    diagnostics_level: int = Field(default=logging.WARNING)

    @field_validator("default_reuse_identifier", mode="before")
    @classmethod
    def _normalise_reuse_identifier(cls, value: str | None) -> str:
        """Fall back to the stock identifier for blank values."""
        if value is None:
            return DEFAULT_REUSE_IDENTIFIER
        text = str(value).strip()
        return text or DEFAULT_REUSE_IDENTIFIER

    @field_validator("diagnostics_level", mode="before")
    @classmethod
    def _normalise_diagnostics_level(cls, value: int | str | None) -> int:
        """Accept level names such as ``"warning"`` as well as numbers."""
        if value is None:
            return logging.WARNING
        if isinstance(value, bool):
            raise TypeError("Boolean is not a valid logging level")
        if isinstance(value, str):
            raw = value.strip()
            if not raw:
                return logging.WARNING
            if raw.isdigit():
                return int(raw)
            level = logging.getLevelName(raw.upper())
            if not isinstance(level, int):
                raise ValueError(f"Unknown logging level: {value}")
            return level
        return int(value)


class UISettings(BaseModel):
    """Settings related to the demo window."""

    model_config = ConfigDict(validate_assignment=True)

    column_title: str = "Title"
    detail_column_title: str = "Detail"
    window_width: int = 480
    window_height: int = 640
    log_level: int = Field(default=logging.INFO)


class EzListSettings(BaseModel):
    """Aggregate settings for ezlist."""

    model_config = ConfigDict(validate_assignment=True)

    source: SourceSettings = Field(default_factory=SourceSettings)
    ui: UISettings = Field(default_factory=UISettings)

    def to_dict(self) -> dict:
        """Return settings as a plain dictionary."""
        return self.model_dump()


def load_settings(path: str | Path) -> EzListSettings:
    """Load :class:`EzListSettings` from *path* with validation.

    Format is detected by file extension: ``.toml`` uses :mod:`tomllib`,
    everything else is treated as JSON.  Validation errors are wrapped into
    :class:`ValueError`.
    """
    p = Path(path)
    with p.open("rb") as fh:
        data = tomllib.load(fh) if p.suffix.lower() == ".toml" else json.load(fh)
    try:
        return EzListSettings.model_validate(data)
    except ValidationError as exc:
        raise ValueError(str(exc)) from exc
