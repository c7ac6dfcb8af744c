"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, berlinclock.toml only holds
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class RealtimeConfig(BaseModel):
    """[realtime] section."""

    model_config = {"frozen": True}

    interval_seconds: float = Field(default=1.0, ge=0)


class ConvertConfig(BaseModel):
    """[convert] section — selection used before anything was saved."""

    model_config = {"frozen": True}

    default_hours: int = Field(default=12, ge=0, le=23)
    default_minutes: int = Field(default=30, ge=0, le=59)
    default_seconds: int = Field(default=45, ge=0, le=59)


class EditConfig(BaseModel):
    """[edit] section."""

    model_config = {"frozen": True}

    history_limit: int = Field(default=50, ge=0)


class StateConfig(BaseModel):
    """[state] section. A relative directory resolves against the project root."""

    model_config = {"frozen": True}

    directory: str = ".berlinclock"
    filename: str = "state.json"
