"""Pydantic model for per-token pricing."""

from __future__ import annotations

from pydantic import Field

from agent_models.models.config_base import ConfigModel


class ModelCost(ConfigModel):
    input: float = Field(default=0.0, ge=0)
    output: float = Field(default=0.0, ge=0)
    cache_read: float = Field(default=0.0, ge=0)
    cache_write: float = Field(default=0.0, ge=0)
