from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, field_validator


class FormattingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    null_token: str = "<null>"
    quote_strings: bool = True

    @field_validator("null_token")
    @classmethod
    def null_token_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("null_token must not be empty")
        return v


class AssertionConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    formatting: FormattingConfig = FormattingConfig()
    default_precision_ms: int = 20
    log_failures: bool = True

    @field_validator("default_precision_ms")
    @classmethod
    def precision_must_not_be_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("default_precision_ms must not be negative")
        return v


_active = AssertionConfig()


def get_config() -> AssertionConfig:
    """Return the configuration the engine is currently using."""
    return _active


def configure(config: AssertionConfig | None = None) -> AssertionConfig:
    """Install *config* as the active configuration, or reset to defaults."""
    global _active
    _active = config if config is not None else AssertionConfig()
    return _active


def load_config(path: Path) -> AssertionConfig:
    """Load and validate an assertion config from a YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f)

    # An empty file means "all defaults"
    return AssertionConfig(**(raw or {}))
