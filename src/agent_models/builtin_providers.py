"""Built-in provider catalog that user configuration merges over."""

from __future__ import annotations

from agent_models.models.provider_config import ProviderConfig

BUILTIN_PROVIDERS: dict[str, ProviderConfig] = {
    "openai": ProviderConfig(
        base_url="https://api.openai.com/v1",
        api="openai-responses",
        auth="api-key",
        api_key="OPENAI_API_KEY",
    ),
    "anthropic": ProviderConfig(
        base_url="https://api.anthropic.com",
        api="anthropic-messages",
        auth="api-key",
        api_key="ANTHROPIC_API_KEY",
    ),
    "google": ProviderConfig(
        base_url="https://generativelanguage.googleapis.com/v1beta",
        api="google-generative-ai",
        auth="api-key",
        api_key="GEMINI_API_KEY",
    ),
}


def builtin_providers() -> dict[str, ProviderConfig]:
    return {key: provider.model_copy(deep=True) for key, provider in BUILTIN_PROVIDERS.items()}
