"""Pydantic model for OpenAI-compatible request quirks."""

from __future__ import annotations

from typing import Literal, Optional

from agent_models.models.config_base import ConfigModel


class ModelCompatConfig(ConfigModel):
    supports_store: Optional[bool] = None
    supports_developer_role: Optional[bool] = None
    supports_reasoning_effort: Optional[bool] = None
    max_tokens_field: Optional[Literal["max_completion_tokens", "max_tokens"]] = None
