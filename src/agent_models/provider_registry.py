"""Provider precedence and the published provider snapshot."""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Literal, Mapping, Optional

from agent_models.bedrock_discovery import BedrockModelLister, discover_bedrock_providers
from agent_models.builtin_providers import builtin_providers
from agent_models.inline_models import build_inline_provider_models
from agent_models.model_resolution import ConfigSource, coerce_models_config, find_inline_model, find_provider_config
from agent_models.models.model_definition import ModelDefinition
from agent_models.models.provider_config import ProviderConfig
from agent_models.models.resolved_model import ResolvedModel

logger = logging.getLogger(__name__)

MergeMode = Literal["merge", "replace"]


def merge_models(base: list[ModelDefinition], override: list[ModelDefinition]) -> list[ModelDefinition]:
    """Same-id override entries replace base entries in place; new ids append."""
    merged = list(base)
    positions = {model.id: index for index, model in enumerate(merged)}
    for model in override:
        if model.id in positions:
            merged[positions[model.id]] = model
        else:
            positions[model.id] = len(merged)
            merged.append(model)
    return merged


def merge_provider_config(base: ProviderConfig, override: ProviderConfig) -> ProviderConfig:
    """
    Field-by-field merge. Only fields explicitly set on ``override`` replace the base.
    """
    fields = base.model_dump()
    fields.update(override.model_dump(include=override.model_fields_set - {"models"}))
    fields["models"] = [model.model_dump() for model in merge_models(base.models, override.models)]
    return ProviderConfig.model_validate(fields)


def merge_providers(
    base: Mapping[str, ProviderConfig],
    override: Mapping[str, ProviderConfig],
    mode: MergeMode = "merge",
) -> dict[str, ProviderConfig]:
    merged: dict[str, ProviderConfig] = dict(base)
    for key, provider in override.items():
        existing = merged.get(key)
        if existing is None or mode == "replace":
            merged[key] = provider
        else:
            merged[key] = merge_provider_config(existing, provider)
    return merged


def build_provider_snapshot(
    config: ConfigSource,
    discovered: Mapping[str, ProviderConfig] | None = None,
    builtins: Mapping[str, ProviderConfig] | None = None,
) -> dict[str, ProviderConfig]:
    """
    Built-in catalog < discovered providers < user configuration.

    Every provider in the result is a deep copy, so later edits to any source leave it untouched.
    """
    models_config = coerce_models_config(config)
    mode: MergeMode = models_config.mode if models_config is not None else "merge"
    configured = models_config.providers if models_config is not None else {}
    base = dict(builtins) if builtins is not None else builtin_providers()
    providers = merge_providers(base, discovered or {}, mode)
    providers = merge_providers(providers, configured, mode)
    return {key: provider.model_copy(deep=True) for key, provider in providers.items()}


class ProviderRegistry:
    def __init__(self, builtins: Mapping[str, ProviderConfig] | None = None) -> None:
        self._builtins: Mapping[str, ProviderConfig] | None = builtins
        self._lock = threading.Lock()
        self._snapshot: Mapping[str, ProviderConfig] = MappingProxyType(
            build_provider_snapshot(None, builtins=self._builtins)
        )

    @property
    def providers(self) -> Mapping[str, ProviderConfig]:
        return self._snapshot

    def publish(
        self,
        config: ConfigSource,
        discovered: Mapping[str, ProviderConfig] | None = None,
    ) -> Mapping[str, ProviderConfig]:
        snapshot = MappingProxyType(build_provider_snapshot(config, discovered, self._builtins))
        with self._lock:
            self._snapshot = snapshot
        logger.debug("Published provider snapshot with %d providers", len(snapshot))
        return snapshot

    def refresh(self, config: ConfigSource, lister: BedrockModelLister) -> Mapping[str, ProviderConfig]:
        """Run Bedrock discovery for ``config`` and publish its providers at the discovered tier."""
        models_config = coerce_models_config(config)
        settings = models_config.bedrock_discovery if models_config is not None else None
        return self.publish(config, discover_bedrock_providers(lister, settings))

    def get(self, provider: str) -> Optional[ProviderConfig]:
        found = find_provider_config(self._snapshot, provider)
        if found is None:
            return None
        return found[1]

    def models(self) -> list[ResolvedModel]:
        return build_inline_provider_models(self._snapshot)

    def find(self, provider: str, model_id: str) -> Optional[ResolvedModel]:
        return find_inline_model(self._snapshot, provider, model_id)
