"""Pydantic model for the outcome of a model lookup."""

from __future__ import annotations

from typing import Literal, Optional

from agent_models.models.config_base import ConfigModel
from agent_models.models.provider_config import ProviderConfig
from agent_models.models.resolved_model import ResolvedModel


class ModelResolution(ConfigModel):
    model: Optional[ResolvedModel] = None
    source: Optional[Literal["inline", "catalog", "fallback"]] = None
    error: Optional[str] = None
    provider_config: Optional[ProviderConfig] = None
    agent_dir: Optional[str] = None  # opaque; used by auth storage discovery
