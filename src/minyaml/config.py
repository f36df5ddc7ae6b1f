"""Settings for the interactive minyaml shell."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

_ENV_PREFIX = "MINYAML_"


class ReplSettings(BaseModel):
    """Presentation and logging preferences for ``minyaml-repl``."""

    prompt: str = Field(default="YAML> ", description="Input prompt.")
    log_level: str = Field(default="WARNING", description="Root logger level name.")
    show_banner: bool = Field(default=True)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        name = value.upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level '{value}'")
        return name


def load_settings(overrides: Optional[Dict[str, Any]] = None) -> ReplSettings:
    """Build ReplSettings from ``MINYAML_*`` environment variables and overrides.

    Overrides win over the environment; ``None`` values are ignored.
    """
    merged: Dict[str, Any] = {}
    for name in ("prompt", "log_level"):
        env_value = os.environ.get(_ENV_PREFIX + name.upper())
        if env_value:
            merged[name] = env_value

    if overrides:
        for key, value in overrides.items():
            if value is None:
                continue
            merged[key] = value

    return ReplSettings.model_validate(merged)
