import logging
from typing import Any, Optional

import pytest

from agent_models.model_resolution import build_fallback_model
from agent_models.model_resolution import find_inline_model
from agent_models.model_resolution import resolve_model
from agent_models.models import AgentConfig
from agent_models.models import ModelsConfig
from agent_models.models import ProviderConfig
from agent_models.models import ResolvedModel
from agent_models.provider_registry import ProviderRegistry


def make_model(model_id: str, **extra: Any) -> dict[str, Any]:
    model: dict[str, Any] = {
        "id": model_id,
        "name": model_id,
        "contextWindow": 1000,
        "maxTokens": 100,
    }
    model.update(extra)
    return model


def make_config(providers: dict[str, Any]) -> AgentConfig:
    return AgentConfig.model_validate({"models": {"providers": providers}})


class RecordingCatalog:
    def __init__(self, model: Optional[ResolvedModel], provider: Optional[ProviderConfig] = None) -> None:
        self.model = model
        self.provider = provider
        self.calls: list[tuple[str, str]] = []

    def get(self, provider: str) -> Optional[ProviderConfig]:
        return self.provider

    def find(self, provider: str, model_id: str) -> Optional[ResolvedModel]:
        self.calls.append((provider, model_id))
        return self.model


def test_fallback_includes_provider_base_url() -> None:
    cfg = make_config({"custom": {"baseUrl": "http://localhost:9000", "models": []}})

    result = resolve_model("custom", "missing-model", "/tmp/agent", cfg)

    assert result.model is not None
    assert result.model.base_url == "http://localhost:9000"
    assert result.model.provider == "custom"
    assert result.model.id == "missing-model"
    assert result.source == "fallback"
    assert result.agent_dir == "/tmp/agent"


def test_azure_openai_defaults_to_responses_api() -> None:
    cfg = make_config({"azure-openai": {"baseUrl": "https://myresource.openai.azure.com", "models": []}})

    result = resolve_model("azure-openai", "gpt-4o", "/tmp/agent", cfg)

    assert result.model is not None
    assert result.model.api == "azure-openai-responses"
    assert result.model.base_url == "https://myresource.openai.azure.com"
    assert result.model.provider == "azure-openai"


def test_azure_openai_explicit_api_wins() -> None:
    cfg = make_config(
        {"azure-openai": {"baseUrl": "https://myresource.openai.azure.com", "api": "openai-completions"}}
    )

    result = resolve_model("azure-openai", "gpt-4o", "/tmp/agent", cfg)

    assert result.model is not None
    assert result.model.api == "openai-completions"


def test_azure_fields_carried_into_fallback() -> None:
    cfg = make_config(
        {
            "my-azure": {
                "baseUrl": "https://myresource.openai.azure.com",
                "azureDeploymentName": "gpt-4o-prod",
                "azureApiVersion": "2024-10-21",
                "models": [],
            }
        }
    )

    result = resolve_model("my-azure", "gpt-4o", "/tmp/agent", cfg)

    assert result.model is not None
    assert result.model.azure_deployment_name == "gpt-4o-prod"
    assert result.model.azure_api_version == "2024-10-21"
    assert result.model.api == "azure-openai-responses"


def test_known_model_returns_inline_descriptor() -> None:
    cfg = make_config(
        {
            "custom": {
                "baseUrl": "http://localhost:8000",
                "api": "anthropic-messages",
                "models": [make_model("other"), make_model("claude", reasoning=True)],
            }
        }
    )

    first = resolve_model("custom", "claude", "/tmp/agent", cfg)
    second = resolve_model("custom", "claude", "/tmp/agent", cfg)

    assert first.source == "inline"
    assert first.model is not None
    assert first.model.id == "claude"
    assert first.model.reasoning is True
    assert first.model.api == "anthropic-messages"
    assert first.model.base_url == "http://localhost:8000"
    assert first.model == second.model
    assert first.provider_config is not None
    assert first.provider_config.base_url == "http://localhost:8000"


def test_model_match_is_case_sensitive() -> None:
    cfg = make_config({"custom": {"baseUrl": "http://x", "models": [make_model("Model-A")]}})

    result = resolve_model("custom", "model-a", None, cfg)

    assert result.source == "fallback"
    assert result.model is not None
    assert result.model.id == "model-a"


def test_provider_key_with_whitespace_is_found() -> None:
    cfg = make_config({" custom ": {"baseUrl": "http://x", "models": [make_model("m")]}})

    result = resolve_model("custom", "m", None, cfg)

    assert result.source == "inline"
    assert result.model is not None
    assert result.model.provider == "custom"


def test_fallback_keeps_provider_id_verbatim() -> None:
    cfg = make_config({"custom": {"baseUrl": "http://x"}})

    result = resolve_model(" custom ", "missing", None, cfg)

    assert result.model is not None
    assert result.model.provider == " custom "
    assert result.model.base_url == "http://x"


def test_unknown_provider_falls_back_without_base_url(caplog: pytest.LogCaptureFixture) -> None:
    cfg = make_config({"custom": {"baseUrl": "http://x"}})

    with caplog.at_level(logging.WARNING, logger="agent_models.model_resolution"):
        result = resolve_model("nowhere", "some-model", "/tmp/agent", cfg)

    assert result.model is not None
    assert result.model.base_url is None
    assert result.model.api is None
    assert result.model.provider == "nowhere"
    assert result.provider_config is None
    assert "nowhere" in caplog.text


def test_fallback_uses_conservative_defaults() -> None:
    model = build_fallback_model("p", "m", ProviderConfig(base_url="http://p"))

    assert model.name == "m"
    assert model.reasoning is False
    assert model.input == ["text"]
    assert model.cost.input == 0
    assert model.cost.output == 0
    assert model.context_window > 0
    assert model.max_tokens > 0


def test_fallback_inherits_provider_api() -> None:
    cfg = make_config({"custom": {"baseUrl": "http://x", "api": "openai-responses"}})

    result = resolve_model("custom", "missing", None, cfg)

    assert result.model is not None
    assert result.model.api == "openai-responses"


def test_missing_ids_return_no_model() -> None:
    cfg = make_config({"custom": {"baseUrl": "http://x"}})

    no_provider = resolve_model("", "m", None, cfg)
    no_model = resolve_model("custom", "  ", None, cfg)

    assert no_provider.model is None
    assert no_provider.error
    assert no_model.model is None
    assert no_model.error


def test_accepts_models_config_and_none() -> None:
    models_config = ModelsConfig.model_validate({"providers": {"custom": {"baseUrl": "http://x"}}})

    from_models = resolve_model("custom", "m", None, models_config)
    from_none = resolve_model("custom", "m", None, None)

    assert from_models.model is not None
    assert from_models.model.base_url == "http://x"
    assert from_none.model is not None
    assert from_none.model.base_url is None


def test_catalog_consulted_after_inline_miss() -> None:
    known = ResolvedModel(
        id="gpt-5",
        name="GPT-5",
        provider="openai",
        base_url="https://api.openai.com/v1",
        context_window=400000,
        max_tokens=128000,
    )
    catalog = RecordingCatalog(known)

    result = resolve_model("openai", "gpt-5", None, make_config({}), catalog=catalog)

    assert result.source == "catalog"
    assert result.model == known
    assert catalog.calls == [("openai", "gpt-5")]


def test_inline_match_skips_catalog() -> None:
    catalog = RecordingCatalog(None)
    cfg = make_config({"custom": {"baseUrl": "http://x", "models": [make_model("m")]}})

    result = resolve_model("custom", "m", None, cfg, catalog=catalog)

    assert result.source == "inline"
    assert catalog.calls == []


def test_catalog_miss_still_falls_back() -> None:
    catalog = RecordingCatalog(None)

    result = resolve_model("custom", "m", None, make_config({}), catalog=catalog)

    assert result.source == "fallback"
    assert result.model is not None


def test_find_inline_model_scopes_by_provider() -> None:
    providers = {
        "a": ProviderConfig.model_validate({"baseUrl": "http://a", "models": [make_model("shared")]}),
        "b": ProviderConfig.model_validate({"baseUrl": "http://b", "models": [make_model("shared")]}),
    }

    found = find_inline_model(providers, "b", "shared")

    assert found is not None
    assert found.base_url == "http://b"
    assert find_inline_model(providers, "c", "shared") is None


def test_catalog_provider_fills_fallback_when_config_lacks_it() -> None:
    registry = ProviderRegistry()
    registry.publish(None)

    result = resolve_model("openai", "gpt-new", None, None, catalog=registry)

    assert result.source == "fallback"
    assert result.model is not None
    assert result.model.base_url == "https://api.openai.com/v1"
    assert result.model.api == "openai-responses"
    assert result.provider_config is not None
    assert result.provider_config.base_url == "https://api.openai.com/v1"


def test_catalog_provider_is_merged_view_of_config() -> None:
    cfg = make_config({"openai": {"baseUrl": "http://proxy.local"}})
    registry = ProviderRegistry()
    registry.publish(cfg)

    result = resolve_model("openai", "gpt-new", None, cfg, catalog=registry)

    assert result.model is not None
    assert result.model.base_url == "http://proxy.local"
    assert result.model.api == "openai-responses"


def test_accepts_plain_mapping_config() -> None:
    nested = {"models": {"providers": {"custom": {"baseUrl": "http://localhost:9000", "models": []}}}}
    bare = {"providers": {"custom": {"baseUrl": "http://localhost:9000", "models": [make_model("m")]}}}

    from_nested = resolve_model("custom", "missing-model", "/tmp/agent", nested)
    from_bare = resolve_model("custom", "m", "/tmp/agent", bare)

    assert from_nested.model is not None
    assert from_nested.model.base_url == "http://localhost:9000"
    assert from_nested.model.provider == "custom"
    assert from_nested.model.id == "missing-model"
    assert from_bare.source == "inline"
