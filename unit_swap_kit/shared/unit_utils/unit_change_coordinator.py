"""Keeps the monetary fields of a transaction draft consistent across unit changes.

This module exposes:
- UnitTransition / classify_transition: the four possible unit transitions.
- UnitChangeCoordinator: turns a "unit changed" event into at most one swap
  command plus side effects, reading the draft and the token registry through
  plain accessors.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from unit_swap_kit.shared.configuration import Context
from unit_swap_kit.shared.models import (
    AddressField,
    AmountField,
    BufferField,
    SetSchedulingToggleCommand,
    SwapEtherToTokenCommand,
    SwapTokenToEtherCommand,
    SwapTokenToTokenCommand,
    TransactionDraft,
    UnitSwapResult,
)
from unit_swap_kit.shared.parameter_schemas import TokenMetadata
from unit_swap_kit.shared.unit_utils.amount_validator import validate_input
from unit_swap_kit.shared.unit_utils.decimals_utils import rebase_user_input
from unit_swap_kit.shared.unit_utils.token_resolver import (
    TokenNotFoundError,
    TokenResolver,
)
from unit_swap_kit.shared.unit_utils.transfer_encoder import encode_transfer

logger = logging.getLogger(__name__)


class UnitTransition(str, Enum):
    NATIVE_TO_NATIVE = "native_to_native"
    TOKEN_TO_NATIVE = "token_to_native"
    NATIVE_TO_TOKEN = "native_to_token"
    TOKEN_TO_TOKEN = "token_to_token"


# keyed by (previous unit is network unit, current unit is network unit)
_TRANSITIONS: Dict[Tuple[bool, bool], UnitTransition] = {
    (True, True): UnitTransition.NATIVE_TO_NATIVE,
    (False, True): UnitTransition.TOKEN_TO_NATIVE,
    (True, False): UnitTransition.NATIVE_TO_TOKEN,
    (False, False): UnitTransition.TOKEN_TO_TOKEN,
}


def classify_transition(prev_is_network: bool, curr_is_network: bool) -> UnitTransition:
    return _TRANSITIONS[(prev_is_network, curr_is_network)]


TransitionHandler = Callable[[str, TransactionDraft, Context, TokenResolver], UnitSwapResult]


class UnitChangeCoordinator:
    """Synchronises `to`, `value`, `data`, `token_value`, `token_to` and `decimal`.

    The coordinator never mutates the draft. It returns a `UnitSwapResult`
    which the caller applies as a single update. Two outcomes emit nothing:
    a native to native change, and an amount rejected by `validate_input`.
    A token unit missing from the registry raises `TokenNotFoundError`.
    """

    @staticmethod
    def handle_set_unit_meta(
            current_unit: str,
            draft: TransactionDraft,
            context: Context,
            resolver: Optional[TokenResolver] = None,
    ) -> UnitSwapResult:
        """Compute the commands for a switch to `current_unit`.

        Args:
            current_unit: The unit symbol just selected.
            draft: Snapshot of the draft; `previous_unit` is the unit the
                amount was entered in before this change.
            context: Wallet state (network, token registry, balances).
            resolver: Token lookup, built from `context` when omitted.

        Returns:
            UnitSwapResult: Empty, or one swap command with its side effects.

        Raises:
            TokenNotFoundError: If `current_unit` is a token without a registry entry.
        """
        resolver = resolver or TokenResolver(context)

        # a draft that never changed unit was entered in the network unit
        previous_unit: str = draft.get_previous_unit() or context.network.unit

        transition = classify_transition(
            resolver.is_network_unit(previous_unit),
            resolver.is_network_unit(current_unit),
        )
        logger.debug(
            "Unit change %s -> %s classified as %s",
            previous_unit,
            current_unit,
            transition.value,
        )

        handler: TransitionHandler = _HANDLERS[transition]
        return handler(current_unit, draft, context, resolver)

    @staticmethod
    def native_to_native(
            current_unit: str,
            draft: TransactionDraft,
            context: Context,
            resolver: TokenResolver,
    ) -> UnitSwapResult:
        return UnitSwapResult()

    @staticmethod
    def token_to_native(
            current_unit: str,
            draft: TransactionDraft,
            context: Context,
            resolver: TokenResolver,
    ) -> UnitSwapResult:
        decimal: int = resolver.get_decimal_from_unit(current_unit)
        token_to: AddressField = draft.get_token_to()
        token_value: AmountField = draft.get_token_value()

        rebased: AmountField = rebase_user_input(token_value, decimal)
        if not validate_input(rebased.value, current_unit, context):
            logger.debug("Amount %r is not valid in %s, skipping swap", rebased.raw, current_unit)
            return UnitSwapResult()

        return UnitSwapResult(
            command=SwapTokenToEtherCommand(
                to=replace(token_to),
                value=rebased,
                decimal=decimal,
            )
        )

    @staticmethod
    def native_to_token(
            current_unit: str,
            draft: TransactionDraft,
            context: Context,
            resolver: TokenResolver,
    ) -> UnitSwapResult:
        token: TokenMetadata = UnitChangeCoordinator.resolve_token(current_unit, resolver)

        # the amount was typed in ether terms
        value: AmountField = draft.get_value()
        rebased: AmountField = rebase_user_input(value, token.decimal)
        if not validate_input(rebased.value, current_unit, context):
            logger.debug("Amount %r is not valid in %s, skipping swap", rebased.raw, current_unit)
            return UnitSwapResult()

        to: AddressField = draft.get_to()
        side_effects = [SetSchedulingToggleCommand(enabled=False)]
        data: bytes = encode_transfer(to.value, rebased.value)

        return UnitSwapResult(
            command=SwapEtherToTokenCommand(
                data=BufferField.from_bytes(data),
                to=AddressField(raw="", value=token.address),
                token_value=rebased,
                decimal=token.decimal,
            ),
            side_effects=side_effects,
        )

    @staticmethod
    def token_to_token(
            current_unit: str,
            draft: TransactionDraft,
            context: Context,
            resolver: TokenResolver,
    ) -> UnitSwapResult:
        token: TokenMetadata = UnitChangeCoordinator.resolve_token(current_unit, resolver)

        token_value: AmountField = draft.get_token_value()
        rebased: AmountField = rebase_user_input(token_value, token.decimal)
        if not validate_input(rebased.value, current_unit, context):
            logger.debug("Amount %r is not valid in %s, skipping swap", rebased.raw, current_unit)
            return UnitSwapResult()

        # `to` holds the previous token contract, the recipient lives in token_to
        to: AddressField = draft.get_to()
        logger.debug("Replacing token contract %s with %s", to.value, token.address)
        token_to: AddressField = draft.get_token_to()
        data: bytes = encode_transfer(token_to.value, rebased.value)

        return UnitSwapResult(
            command=SwapTokenToTokenCommand(
                data=BufferField.from_bytes(data),
                to=AddressField(raw="", value=token.address),
                token_value=rebased,
                token_to=replace(token_to),
                decimal=token.decimal,
            )
        )

    @staticmethod
    def resolve_token(unit: str, resolver: TokenResolver) -> TokenMetadata:
        token: Optional[TokenMetadata] = resolver.resolve(unit)
        if token is None:
            raise TokenNotFoundError(unit)
        return token


_HANDLERS: Dict[UnitTransition, TransitionHandler] = {
    UnitTransition.NATIVE_TO_NATIVE: UnitChangeCoordinator.native_to_native,
    UnitTransition.TOKEN_TO_NATIVE: UnitChangeCoordinator.token_to_native,
    UnitTransition.NATIVE_TO_TOKEN: UnitChangeCoordinator.native_to_token,
    UnitTransition.TOKEN_TO_TOKEN: UnitChangeCoordinator.token_to_token,
}
