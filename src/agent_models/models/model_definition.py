"""Pydantic model for a model declared under a provider."""

from __future__ import annotations

from typing import Optional

from pydantic import ConfigDict, Field

from agent_models.models.config_base import ConfigModel
from agent_models.models.model_api import ModelApi, ModelInput
from agent_models.models.model_compat_config import ModelCompatConfig
from agent_models.models.model_cost import ModelCost


class ModelDefinition(ConfigModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    api: Optional[ModelApi] = None
    reasoning: bool = False
    input: list[ModelInput] = Field(default_factory=lambda: ["text"])
    cost: ModelCost = Field(default_factory=ModelCost)
    context_window: int = Field(gt=0)
    max_tokens: int = Field(gt=0)
    headers: Optional[dict[str, str]] = None
    compat: Optional[ModelCompatConfig] = None
    azure_deployment_name: Optional[str] = None
    base_url: Optional[str] = None  # inherits the provider endpoint when unset
