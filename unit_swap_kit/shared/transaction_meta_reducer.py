"""Applies unit swap commands to a transaction draft.

Every function returns a new `TransactionDraft`; the input draft is never
mutated, so a command is applied as one atomic replacement of the fields it
names.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from unit_swap_kit.shared.models import (
    AddressField,
    AmountField,
    BufferField,
    SetSchedulingToggleCommand,
    SetUnitMetaCommand,
    SwapEtherToTokenCommand,
    SwapTokenToEtherCommand,
    SwapTokenToTokenCommand,
    TransactionDraft,
    TransactionMeta,
    UnitSwapCommand,
)


def reset_draft(network_unit: str, decimal: int = 18) -> TransactionDraft:
    return TransactionDraft(meta=TransactionMeta(decimal=decimal), unit=network_unit)


def set_unit_meta(draft: TransactionDraft, unit: str) -> TransactionDraft:
    """Record a unit change; the unit in effect until now becomes `previous_unit`."""
    return replace(draft, unit=unit, previous_unit=draft.unit)


def apply_command(command: UnitSwapCommand, draft: TransactionDraft) -> TransactionDraft:
    if isinstance(command, SetSchedulingToggleCommand):
        return replace(draft, scheduling_toggle=command.enabled)

    if isinstance(command, SetUnitMetaCommand):
        return set_unit_meta(draft, command.unit)

    if isinstance(command, SwapTokenToEtherCommand):
        meta = TransactionMeta(
            to=command.to,
            value=command.value,
            data=BufferField(),
            token_value=AmountField(),
            token_to=AddressField(),
            decimal=command.decimal,
        )
    elif isinstance(command, SwapEtherToTokenCommand):
        # the recipient typed while in ether becomes the token recipient
        meta = TransactionMeta(
            to=command.to,
            value=AmountField(raw="", value=0),
            data=command.data,
            token_value=command.token_value,
            token_to=replace(draft.meta.to),
            decimal=command.decimal,
        )
    elif isinstance(command, SwapTokenToTokenCommand):
        meta = TransactionMeta(
            to=command.to,
            value=AmountField(raw="", value=0),
            data=command.data,
            token_value=command.token_value,
            token_to=command.token_to,
            decimal=command.decimal,
        )
    else:
        raise ValueError(f"Unsupported command {type(command).__name__}")

    return replace(draft, meta=meta)


def apply_commands(
    commands: Iterable[UnitSwapCommand], draft: TransactionDraft
) -> TransactionDraft:
    for command in commands:
        draft = apply_command(command, draft)
    return draft
