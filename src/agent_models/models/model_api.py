"""Literal tags shared by provider and model configuration."""

from __future__ import annotations

from typing import Literal, TypeAlias

ModelApi: TypeAlias = Literal[
    "openai-completions",
    "openai-responses",
    "azure-openai-responses",
    "anthropic-messages",
    "google-generative-ai",
    "github-copilot",
    "bedrock-converse-stream",
]

ModelProviderAuthMode: TypeAlias = Literal["api-key", "aws-sdk", "oauth", "token"]

ModelInput: TypeAlias = Literal["text", "image"]

AZURE_OPENAI_PROVIDER = "azure-openai"
AZURE_OPENAI_API: ModelApi = "azure-openai-responses"
