__all__ = [
    "to_base_unit",
    "to_display_unit",
    "is_valid_number",
    "rebase_user_input",
    "validate_input",
    "TokenResolver",
    "TokenNotFoundError",
    "encode_transfer",
    "decode_transfer",
    "UnitChangeCoordinator",
    "UnitTransition",
    "classify_transition",
]

from .amount_validator import validate_input
from .decimals_utils import (
    is_valid_number,
    rebase_user_input,
    to_base_unit,
    to_display_unit,
)
from .token_resolver import TokenNotFoundError, TokenResolver
from .transfer_encoder import decode_transfer, encode_transfer
from .unit_change_coordinator import (
    UnitChangeCoordinator,
    UnitTransition,
    classify_transition,
)
