"""Turning a resolved model descriptor into a pydantic-ai chat model."""

from __future__ import annotations

import os

import httpx
from pydantic_ai.models import Model
from pydantic_ai.models.anthropic import AnthropicModel
from pydantic_ai.models.openai import OpenAIChatModel, OpenAIResponsesModel
from pydantic_ai.providers.anthropic import AnthropicProvider
from pydantic_ai.providers.azure import AzureProvider
from pydantic_ai.providers.openai import OpenAIProvider

from agent_models.models.provider_config import ProviderConfig
from agent_models.models.resolved_model import ResolvedModel

DEFAULT_AZURE_API_VERSION = "2024-12-01-preview"


def provider_api_key(provider: ProviderConfig | None) -> str:
    """
    ``apiKey`` may name an environment variable or hold the key itself.
    """
    if provider is None or not provider.api_key:
        return "noop"
    return os.environ.get(provider.api_key, provider.api_key)


def build_http_client(model: ResolvedModel) -> httpx.AsyncClient | None:
    if not model.headers:
        return None
    return httpx.AsyncClient(headers=model.headers)


def build_chat_model(
    model: ResolvedModel,
    *,
    api_key: str,
    http_client: httpx.AsyncClient | None = None,
) -> Model:
    """
    Build the pydantic-ai model for ``model.api``.

    An injected ``http_client`` is used as-is and stays owned by the caller, who also
    supplies any model headers on it. Without one, a client carrying the model headers
    is created here and lives as long as the returned model; callers that need to close
    it deterministically should pass their own.
    """
    if http_client is None:
        http_client = build_http_client(model)
    if model.api is None or model.api == "openai-completions":
        provider = OpenAIProvider(base_url=model.base_url, api_key=api_key, http_client=http_client)
        return OpenAIChatModel(model.id, provider=provider)
    if model.api == "openai-responses":
        provider = OpenAIProvider(base_url=model.base_url, api_key=api_key, http_client=http_client)
        return OpenAIResponsesModel(model.id, provider=provider)
    if model.api == "azure-openai-responses":
        azure = AzureProvider(
            azure_endpoint=model.base_url,
            api_version=model.azure_api_version or DEFAULT_AZURE_API_VERSION,
            api_key=api_key,
            http_client=http_client,
        )
        return OpenAIResponsesModel(model.azure_deployment_name or model.id, provider=azure)
    if model.api == "anthropic-messages":
        anthropic = AnthropicProvider(api_key=api_key, base_url=model.base_url, http_client=http_client)
        return AnthropicModel(model.id, provider=anthropic)
    raise NotImplementedError(f"Unsupported model api: {model.api}")
