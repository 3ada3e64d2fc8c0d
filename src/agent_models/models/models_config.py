"""Pydantic models for the root model configuration."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from agent_models.models.bedrock_discovery_config import BedrockDiscoveryConfig
from agent_models.models.config_base import ConfigModel
from agent_models.models.provider_config import ProviderConfig


class ModelsConfig(ConfigModel):
    mode: Literal["merge", "replace"] = "merge"
    providers: dict[str, ProviderConfig] = Field(default_factory=dict)
    bedrock_discovery: Optional[BedrockDiscoveryConfig] = None


class AgentConfig(ConfigModel):
    models: ModelsConfig = Field(default_factory=ModelsConfig)
