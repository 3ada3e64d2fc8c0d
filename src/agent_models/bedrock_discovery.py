"""Conversion of discovered Bedrock foundation models into a provider config."""

from __future__ import annotations

import logging
from typing import Protocol

from pydantic import BaseModel, Field

from agent_models.models.bedrock_discovery_config import BedrockDiscoveryConfig
from agent_models.models.model_api import ModelInput
from agent_models.models.model_definition import ModelDefinition
from agent_models.models.provider_config import ProviderConfig

logger = logging.getLogger(__name__)

BEDROCK_PROVIDER = "amazon-bedrock"
DEFAULT_REGION = "us-east-1"
DEFAULT_CONTEXT_WINDOW = 32000
DEFAULT_MAX_TOKENS = 4096

MODALITY_INPUTS: dict[str, ModelInput] = {"TEXT": "text", "IMAGE": "image"}


class BedrockModelSummary(BaseModel):
    model_id: str
    model_name: str | None = None
    provider_name: str | None = None
    input_modalities: list[str] = Field(default_factory=list)
    output_modalities: list[str] = Field(default_factory=list)
    response_streaming_supported: bool = False


class BedrockModelLister(Protocol):
    def list_foundation_models(self, region: str) -> list[BedrockModelSummary]: ...


def bedrock_base_url(region: str) -> str:
    return f"https://bedrock-runtime.{region}.amazonaws.com"


def matches_provider_filter(summary: BedrockModelSummary, provider_filter: list[str] | None) -> bool:
    if not provider_filter:
        return True
    name = (summary.provider_name or "").strip().lower()
    return name in {entry.strip().lower() for entry in provider_filter}


def is_text_streaming_model(summary: BedrockModelSummary) -> bool:
    outputs = {modality.upper() for modality in summary.output_modalities}
    return "TEXT" in outputs and summary.response_streaming_supported


def map_input_modalities(modalities: list[str]) -> list[ModelInput]:
    mapped: list[ModelInput] = []
    for modality in modalities:
        value = MODALITY_INPUTS.get(modality.upper())
        if value is not None and value not in mapped:
            mapped.append(value)
    return mapped or ["text"]


def build_bedrock_provider(
    summaries: list[BedrockModelSummary],
    settings: BedrockDiscoveryConfig | None,
) -> ProviderConfig:
    settings = settings or BedrockDiscoveryConfig()
    region = settings.region or DEFAULT_REGION
    context_window = settings.default_context_window or DEFAULT_CONTEXT_WINDOW
    max_tokens = settings.default_max_tokens or DEFAULT_MAX_TOKENS
    models: list[ModelDefinition] = []
    for summary in summaries:
        if not matches_provider_filter(summary, settings.provider_filter):
            continue
        if not is_text_streaming_model(summary):
            logger.debug("Skipping Bedrock model %s: no streaming text output", summary.model_id)
            continue
        models.append(
            ModelDefinition(
                id=summary.model_id,
                name=summary.model_name or summary.model_id,
                reasoning=False,
                input=map_input_modalities(summary.input_modalities),
                context_window=context_window,
                max_tokens=max_tokens,
            )
        )
    return ProviderConfig(
        base_url=bedrock_base_url(region),
        api="bedrock-converse-stream",
        auth="aws-sdk",
        models=models,
    )


def discover_bedrock_providers(
    lister: BedrockModelLister,
    settings: BedrockDiscoveryConfig | None,
) -> dict[str, ProviderConfig]:
    if settings is None or not settings.enabled:
        return {}
    region = settings.region or DEFAULT_REGION
    summaries = lister.list_foundation_models(region)
    provider = build_bedrock_provider(summaries, settings)
    logger.debug("Discovered %d Bedrock models in %s", len(provider.models), region)
    return {BEDROCK_PROVIDER: provider}
