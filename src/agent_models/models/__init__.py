"""Model types for provider configuration and resolution."""

from agent_models.models.bedrock_discovery_config import BedrockDiscoveryConfig
from agent_models.models.compaction_events import AfterCompactionHookEvent
from agent_models.models.compaction_events import BeforeCompactEvent
from agent_models.models.compaction_events import BeforeCompactionHookEvent
from agent_models.models.compaction_events import CompactEvent
from agent_models.models.compaction_events import CompactionPreparation
from agent_models.models.compaction_events import HookContext
from agent_models.models.model_api import ModelApi
from agent_models.models.model_api import ModelInput
from agent_models.models.model_api import ModelProviderAuthMode
from agent_models.models.model_compat_config import ModelCompatConfig
from agent_models.models.model_cost import ModelCost
from agent_models.models.model_definition import ModelDefinition
from agent_models.models.model_resolution import ModelResolution
from agent_models.models.models_config import AgentConfig
from agent_models.models.models_config import ModelsConfig
from agent_models.models.provider_config import ProviderConfig
from agent_models.models.resolved_model import ResolvedModel

__all__ = [
    "AfterCompactionHookEvent",
    "AgentConfig",
    "BedrockDiscoveryConfig",
    "BeforeCompactEvent",
    "BeforeCompactionHookEvent",
    "CompactEvent",
    "CompactionPreparation",
    "HookContext",
    "ModelApi",
    "ModelCompatConfig",
    "ModelCost",
    "ModelDefinition",
    "ModelInput",
    "ModelProviderAuthMode",
    "ModelResolution",
    "ModelsConfig",
    "ProviderConfig",
    "ResolvedModel",
]
