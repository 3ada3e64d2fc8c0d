"""Pydantic models for host compaction lifecycle events."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field

from agent_models.models.config_base import ConfigModel


class CompactionPreparation(ConfigModel):
    messages_to_summarize: list[Any] = Field(default_factory=list)
    tokens_before: int = 0


class BeforeCompactEvent(ConfigModel):
    preparation: CompactionPreparation = Field(default_factory=CompactionPreparation)


class CompactEvent(ConfigModel):
    # Hosts that track post-compaction sizes may report them here.
    message_count: Optional[int] = None
    compacted_count: Optional[int] = None


class BeforeCompactionHookEvent(BaseModel):
    message_count: int
    token_count: int
    messages: list[Any] = Field(default_factory=list)


class AfterCompactionHookEvent(BaseModel):
    message_count: int
    compacted_count: int


class HookContext(BaseModel):
    session_key: Optional[str] = None
