"""Utilities for handling a change of the amount unit on a transaction draft.

This module exposes:
- set_unit_meta_prompt: Generate a description for the unit change tool.
- set_unit_meta: Record the unit change and synchronise the draft's monetary fields.
- SetUnitMetaTool: Tool wrapper exposing the operation to the runtime.
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError

from unit_swap_kit.shared.configuration import Context
from unit_swap_kit.shared.models import (
    AppliedCommandsToolResponse,
    SetUnitMetaCommand,
    ToolResponse,
    TransactionDraft,
    UnitSwapResult,
)
from unit_swap_kit.shared.parameter_schemas import SetUnitMetaParameters
from unit_swap_kit.shared.strategies.command_mode_strategy import handle_commands
from unit_swap_kit.shared.tool import Tool
from unit_swap_kit.shared.transaction_meta_reducer import apply_command
from unit_swap_kit.shared.unit_utils.unit_change_coordinator import (
    UnitChangeCoordinator,
)


def set_unit_meta_prompt(context: Optional[Context] = None) -> str:
    network_unit = context.network.unit if context else "the network unit"
    return f"""
This tool changes the unit the transaction amount is entered in and keeps the
recipient, amount and call data of the draft consistent.

Parameters:
- unit (str, required): {network_unit} or the symbol of a token from the wallet registry.

Switching to a token turns the draft into an ERC20 transfer call; switching back
to {network_unit} restores a plain value transfer to the token recipient.
"""


def parse_params(params: object) -> SetUnitMetaParameters:
    try:
        return SetUnitMetaParameters.model_validate(params)
    except ValidationError as e:
        issues = "; ".join(
            f'Field "{err["loc"][0]}" - {err["msg"]}' for err in e.errors()
        )
        raise ValueError(f"Invalid parameters: {issues}") from e


def post_process(result: UnitSwapResult) -> str:
    if result.command is None:
        return "Unit changed. Amount not synchronised: nothing valid to convert yet."
    return (
        f"Unit changed. Draft updated with {result.command.type} "
        f"at {result.command.decimal} decimals."
    )


async def set_unit_meta(
    draft: TransactionDraft,
    context: Context,
    params: SetUnitMetaParameters,
) -> ToolResponse:
    """
    Record a unit change on the draft and synchronise its monetary fields.
    """
    try:
        parsed_params: SetUnitMetaParameters = parse_params(params)

        # the unit change is always the first command, ahead of any swap
        unit_command = SetUnitMetaCommand(unit=parsed_params.unit)
        updated_draft: TransactionDraft = apply_command(unit_command, draft)
        result: UnitSwapResult = UnitChangeCoordinator.handle_set_unit_meta(
            parsed_params.unit, updated_draft, context
        )

        return await handle_commands(
            [unit_command, *result.commands], result, draft, context, post_process
        )

    except Exception as e:
        message: str = f"Failed to change unit: {str(e)}"
        logging.error("[set_unit_meta_tool] %s", message)
        return AppliedCommandsToolResponse(
            draft=draft,
            commands=[],
            human_message=message,
            error=message,
        )


SET_UNIT_META_TOOL: str = "set_unit_meta_tool"


class SetUnitMetaTool(Tool):
    def __init__(self, context: Context):
        self.method: str = SET_UNIT_META_TOOL
        self.name: str = "Set Unit Meta"
        self.description: str = set_unit_meta_prompt(context)
        self.parameters: type[SetUnitMetaParameters] = SetUnitMetaParameters

    async def execute(
        self, draft: TransactionDraft, context: Context, params: SetUnitMetaParameters
    ) -> ToolResponse:
        return await set_unit_meta(draft, context, params)
