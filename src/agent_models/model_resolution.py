"""Model lookup with a best-effort fallback for unknown (provider, model) pairs."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Protocol, TypeAlias

from agent_models.inline_models import build_inline_provider_models, inherit
from agent_models.models.model_api import AZURE_OPENAI_API, AZURE_OPENAI_PROVIDER, ModelApi
from agent_models.models.model_cost import ModelCost
from agent_models.models.model_resolution import ModelResolution
from agent_models.models.models_config import AgentConfig, ModelsConfig
from agent_models.models.provider_config import ProviderConfig
from agent_models.models.resolved_model import ResolvedModel

logger = logging.getLogger(__name__)

FALLBACK_CONTEXT_WINDOW = 32000
FALLBACK_MAX_TOKENS = 4096


class ModelCatalog(Protocol):
    def get(self, provider: str) -> Optional[ProviderConfig]: ...

    def find(self, provider: str, model_id: str) -> Optional[ResolvedModel]: ...


ConfigSource: TypeAlias = AgentConfig | ModelsConfig | Mapping[str, Any] | None


def coerce_models_config(config: ConfigSource) -> ModelsConfig | None:
    """
    Accept the root config, its ``models`` section, or a raw mapping of either.
    """
    if config is None:
        return None
    if isinstance(config, AgentConfig):
        return config.models
    if isinstance(config, ModelsConfig):
        return config
    if "models" not in config and "providers" in config:
        return ModelsConfig.model_validate(config)
    return AgentConfig.model_validate(config).models


def configured_providers(config: ConfigSource) -> dict[str, ProviderConfig]:
    models_config = coerce_models_config(config)
    if models_config is None:
        return {}
    return models_config.providers


def find_provider_config(
    providers: Mapping[str, ProviderConfig],
    provider_id: str,
) -> tuple[str, ProviderConfig] | None:
    """Exact key match first, then a key that matches once trimmed."""
    if provider_id in providers:
        return provider_id, providers[provider_id]
    wanted = provider_id.strip()
    for key, provider in providers.items():
        if key.strip() == wanted:
            return key, provider
    return None


def find_inline_model(
    providers: Mapping[str, ProviderConfig],
    provider_id: str,
    model_id: str,
) -> ResolvedModel | None:
    found = find_provider_config(providers, provider_id)
    if found is None:
        return None
    key, provider = found
    for model in build_inline_provider_models({key: provider}):
        if model.id == model_id:
            return model
    return None


def is_azure_provider(provider_id: str, provider: ProviderConfig | None) -> bool:
    if provider_id == AZURE_OPENAI_PROVIDER:
        return True
    if provider is None:
        return False
    return bool(provider.azure_deployment_name or provider.azure_api_version)


def fallback_api(provider_id: str, provider: ProviderConfig | None) -> ModelApi | None:
    provider_api = provider.api if provider is not None else None
    default: ModelApi | None = AZURE_OPENAI_API if is_azure_provider(provider_id, provider) else None
    return inherit(None, provider_api, default)


def build_fallback_model(
    provider_id: str,
    model_id: str,
    provider: ProviderConfig | None,
) -> ResolvedModel:
    """
    Synthesize a descriptor for a model nothing in configuration declares.

    The provider id is kept verbatim. Endpoint, dialect and Azure routing come from
    the provider when it is configured; capabilities and cost use conservative defaults.
    """
    return ResolvedModel(
        id=model_id,
        name=model_id,
        provider=provider_id,
        base_url=provider.base_url if provider is not None else None,
        api=fallback_api(provider_id, provider),
        reasoning=False,
        input=["text"],
        cost=ModelCost(),
        context_window=FALLBACK_CONTEXT_WINDOW,
        max_tokens=FALLBACK_MAX_TOKENS,
        azure_deployment_name=provider.azure_deployment_name if provider is not None else None,
        azure_api_version=provider.azure_api_version if provider is not None else None,
    )


def resolve_model(
    provider_id: str,
    model_id: str,
    agent_dir: str | None,
    config: ConfigSource,
    *,
    catalog: ModelCatalog | None = None,
) -> ModelResolution:
    if not provider_id or not provider_id.strip():
        return ModelResolution(error="Provider id is required to resolve a model.", agent_dir=agent_dir)
    if not model_id or not model_id.strip():
        return ModelResolution(
            error=f"Model id is required to resolve a model for provider {provider_id!r}.",
            agent_dir=agent_dir,
        )

    providers = configured_providers(config)
    found = find_provider_config(providers, provider_id)
    provider = found[1] if found is not None else None
    if catalog is not None:
        # The catalog entry is the merged view and wins over the raw config entry.
        merged = catalog.get(provider_id)
        if merged is not None:
            provider = merged

    inline = find_inline_model(providers, provider_id, model_id)
    if inline is not None:
        logger.debug("Resolved %s/%s from inline provider config", provider_id, model_id)
        return ModelResolution(model=inline, source="inline", provider_config=provider, agent_dir=agent_dir)

    if catalog is not None:
        known = catalog.find(provider_id, model_id)
        if known is not None:
            logger.debug("Resolved %s/%s from provider catalog", provider_id, model_id)
            return ModelResolution(model=known, source="catalog", provider_config=provider, agent_dir=agent_dir)

    if provider is None:
        logger.warning("Unknown provider %r; using fallback descriptor for model %r", provider_id, model_id)
    else:
        logger.warning("Unknown model %r for provider %r; using fallback descriptor", model_id, provider_id)
    return ModelResolution(
        model=build_fallback_model(provider_id, model_id, provider),
        source="fallback",
        provider_config=provider,
        agent_dir=agent_dir,
    )
