"""Forwards host compaction lifecycle events to plugin compaction hooks."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Protocol

from agent_models.models.compaction_events import AfterCompactionHookEvent
from agent_models.models.compaction_events import BeforeCompactEvent
from agent_models.models.compaction_events import BeforeCompactionHookEvent
from agent_models.models.compaction_events import CompactEvent
from agent_models.models.compaction_events import HookContext

logger = logging.getLogger(__name__)

BEFORE_COMPACTION_HOOK = "before_compaction"
AFTER_COMPACTION_HOOK = "after_compaction"
SESSION_BEFORE_COMPACT = "session_before_compact"
SESSION_COMPACT = "session_compact"


class HookRunner(Protocol):
    def has_hooks(self, name: str) -> bool: ...

    async def run_before_compaction(self, event: BeforeCompactionHookEvent, ctx: HookContext) -> Any: ...

    async def run_after_compaction(self, event: AfterCompactionHookEvent, ctx: HookContext) -> Any: ...


class ExtensionAPI(Protocol):
    def on(self, event_name: str, handler: Callable[..., Awaitable[Any]]) -> None: ...


@dataclass(frozen=True)
class BridgeSession:
    session_key: Optional[str] = None


def is_cancelled(result: Any) -> bool:
    if result is None:
        return False
    if isinstance(result, dict):
        return bool(result.get("cancel"))
    return bool(getattr(result, "cancel", False))


class PluginCompactionBridge:
    def __init__(self, hook_runner: HookRunner | None, session: BridgeSession | None = None) -> None:
        self._hook_runner: HookRunner | None = hook_runner
        self._session: BridgeSession = session or BridgeSession()

    def _context(self) -> HookContext:
        return HookContext(session_key=self._session.session_key)

    def _runner_for(self, name: str) -> HookRunner | None:
        if self._hook_runner is None or not self._hook_runner.has_hooks(name):
            return None
        return self._hook_runner

    async def before_compact(self, event: BeforeCompactEvent | dict[str, Any], ctx: Any = None) -> dict[str, bool] | None:
        runner = self._runner_for(BEFORE_COMPACTION_HOOK)
        if runner is None:
            return None
        if not isinstance(event, BeforeCompactEvent):
            event = BeforeCompactEvent.model_validate(event)
        messages = event.preparation.messages_to_summarize
        hook_event = BeforeCompactionHookEvent(
            message_count=len(messages),
            token_count=event.preparation.tokens_before,
            messages=messages,
        )
        result = await runner.run_before_compaction(hook_event, self._context())
        if is_cancelled(result):
            logger.info("Compaction cancelled by plugin hook (session=%s)", self._session.session_key)
            return {"cancel": True}
        return None

    async def after_compact(self, event: CompactEvent | dict[str, Any] | None = None, ctx: Any = None) -> None:
        runner = self._runner_for(AFTER_COMPACTION_HOOK)
        if runner is None:
            return
        if event is None:
            event = CompactEvent()
        elif not isinstance(event, CompactEvent):
            event = CompactEvent.model_validate(event)
        if event.message_count is None or event.compacted_count is None:
            logger.debug("Host did not report post-compaction counts; notifying hooks with zero")
        hook_event = AfterCompactionHookEvent(
            message_count=event.message_count or 0,
            compacted_count=event.compacted_count or 0,
        )
        await runner.run_after_compaction(hook_event, self._context())

    def register(self, api: ExtensionAPI) -> None:
        api.on(SESSION_BEFORE_COMPACT, self.before_compact)
        api.on(SESSION_COMPACT, self.after_compact)
