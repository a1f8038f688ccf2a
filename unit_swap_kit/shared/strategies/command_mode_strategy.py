from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

from unit_swap_kit.shared.configuration import AgentMode, Context
from unit_swap_kit.shared.models import (
    AppliedCommandsToolResponse,
    ReturnCommandsToolResponse,
    ToolResponse,
    TransactionDraft,
    UnitSwapCommand,
    UnitSwapResult,
)
from unit_swap_kit.shared.transaction_meta_reducer import apply_commands


class CommandModeStrategy(ABC):
    @abstractmethod
    async def handle(
        self,
        commands: List[UnitSwapCommand],
        result: UnitSwapResult,
        draft: TransactionDraft,
        context: Context,
        post_process: Optional[Callable[[UnitSwapResult], Any]] = None,
    ) -> ToolResponse:
        pass


class ApplyStrategy(CommandModeStrategy):
    def default_post_process(self, result: UnitSwapResult) -> str:
        if result.command is None:
            return "Nothing to synchronize."
        return f"Applied {result.command.type}."

    async def handle(
        self,
        commands: List[UnitSwapCommand],
        result: UnitSwapResult,
        draft: TransactionDraft,
        context: Context,
        post_process: Optional[Callable[[UnitSwapResult], Any]] = None,
    ) -> AppliedCommandsToolResponse:
        post_process = post_process or self.default_post_process
        return AppliedCommandsToolResponse(
            draft=apply_commands(commands, draft),
            commands=commands,
            human_message=post_process(result),
        )


class ReturnCommandsStrategy(CommandModeStrategy):
    async def handle(
        self,
        commands: List[UnitSwapCommand],
        result: UnitSwapResult,
        draft: TransactionDraft,
        context: Context,
        post_process: Optional[Callable[[UnitSwapResult], Any]] = None,
    ) -> ReturnCommandsToolResponse:
        return ReturnCommandsToolResponse(commands=commands)


def get_strategy_from_context(context: Context) -> CommandModeStrategy:
    if context.mode == AgentMode.RETURN_COMMANDS:
        return ReturnCommandsStrategy()
    return ApplyStrategy()


async def handle_commands(
    commands: List[UnitSwapCommand],
    result: UnitSwapResult,
    draft: TransactionDraft,
    context: Context,
    post_process: Optional[Callable[[UnitSwapResult], Any]] = None,
) -> ToolResponse:
    """Apply `commands` to `draft` or hand them back, depending on the context mode.

    `commands` is everything the draft needs, in order; `result` is the
    coordinator output the human message is built from.
    """
    strategy = get_strategy_from_context(context)
    return await strategy.handle(commands, result, draft, context, post_process)
