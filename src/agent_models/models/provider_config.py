"""Pydantic model for a configured provider endpoint."""

from __future__ import annotations

from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from agent_models.models.config_base import ConfigModel
from agent_models.models.model_api import ModelApi, ModelProviderAuthMode
from agent_models.models.model_definition import ModelDefinition


class ProviderConfig(ConfigModel):
    model_config = ConfigDict(frozen=True)

    base_url: str
    api_key: Optional[str] = None
    auth: Optional[ModelProviderAuthMode] = None
    api: Optional[ModelApi] = None
    headers: Optional[dict[str, str]] = None
    auth_header: Optional[bool] = None
    azure_deployment_name: Optional[str] = None
    azure_api_version: Optional[str] = None
    models: list[ModelDefinition] = Field(default_factory=list)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        cleaned = v.strip()
        if not cleaned:
            raise ValueError("baseUrl must not be empty.")
        return cleaned
