"""Public package exports."""

from agent_models.bedrock_discovery import discover_bedrock_providers
from agent_models.chat_models import build_chat_model
from agent_models.chat_models import provider_api_key
from agent_models.compaction_bridge import BridgeSession
from agent_models.compaction_bridge import PluginCompactionBridge
from agent_models.inline_models import build_inline_provider_models
from agent_models.model_resolution import resolve_model
from agent_models.provider_registry import ProviderRegistry

__all__ = [
    "BridgeSession",
    "PluginCompactionBridge",
    "ProviderRegistry",
    "build_chat_model",
    "build_inline_provider_models",
    "discover_bedrock_providers",
    "provider_api_key",
    "resolve_model",
]
