"""Pydantic model for Bedrock discovery settings."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from agent_models.models.config_base import ConfigModel


class BedrockDiscoveryConfig(ConfigModel):
    enabled: Optional[bool] = None
    region: Optional[str] = None
    provider_filter: Optional[list[str]] = None
    refresh_interval: Optional[int] = Field(default=None, ge=0)  # seconds
    default_context_window: Optional[int] = Field(default=None, gt=0)
    default_max_tokens: Optional[int] = Field(default=None, gt=0)
