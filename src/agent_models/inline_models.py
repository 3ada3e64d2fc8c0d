"""Expansion of configured providers into fully-qualified model descriptors."""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

from agent_models.models.model_definition import ModelDefinition
from agent_models.models.provider_config import ProviderConfig
from agent_models.models.resolved_model import ResolvedModel

T = TypeVar("T")

# Fields a model may set for itself or inherit from its provider.
INHERITED_FIELDS = ("base_url", "api", "azure_deployment_name", "azure_api_version")


def inherit(model_value: T | None, provider_value: T | None, default: T | None = None) -> T | None:
    """
    Three-tier lookup: the model's own value, else the provider's, else the default.
    """
    if model_value is not None:
        return model_value
    if provider_value is not None:
        return provider_value
    return default


def coerce_provider(provider: ProviderConfig | Mapping[str, Any]) -> ProviderConfig:
    if isinstance(provider, ProviderConfig):
        return provider
    return ProviderConfig.model_validate(provider)


def resolve_inline_model(provider_key: str, model: ModelDefinition, provider: ProviderConfig) -> ResolvedModel:
    fields = model.model_dump(exclude=set(INHERITED_FIELDS))
    for name in INHERITED_FIELDS:
        fields[name] = inherit(getattr(model, name, None), getattr(provider, name, None))
    fields["provider"] = provider_key.strip()
    return ResolvedModel.model_validate(fields)


def build_inline_provider_models(
    providers: Mapping[str, ProviderConfig | Mapping[str, Any]] | None,
) -> list[ResolvedModel]:
    """
    Flatten provider -> model declarations into resolved descriptors.

    Providers are visited in mapping order and models in declared order. Keys are
    trimmed but never rejected, so a blank key yields models with provider "".
    """
    if not providers:
        return []
    out: list[ResolvedModel] = []
    for raw_key, raw_provider in providers.items():
        provider = coerce_provider(raw_provider)
        for model in provider.models:
            out.append(resolve_inline_model(raw_key, model, provider))
    return out
