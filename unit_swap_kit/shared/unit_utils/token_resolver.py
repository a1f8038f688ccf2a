from typing import Dict, Optional

from unit_swap_kit.shared.configuration import Context
from unit_swap_kit.shared.parameter_schemas import TokenMetadata


class TokenNotFoundError(ValueError):
    """Raised when a unit that must be a token has no registry entry."""

    def __init__(self, unit: str):
        self.unit = unit
        super().__init__(f"Could not find token during unit swap: {unit}")


class TokenResolver:
    """Read-only view over the network unit and the token registry of a Context."""

    def __init__(self, context: Context):
        self.context = context

    def is_network_unit(self, unit: str) -> bool:
        return unit == self.context.network.unit

    def get_tokens(self) -> Dict[str, TokenMetadata]:
        # custom tokens shadow network tokens with the same symbol
        tokens: Dict[str, TokenMetadata] = {t.symbol: t for t in self.context.tokens}
        tokens.update({t.symbol: t for t in self.context.custom_tokens})
        return tokens

    def resolve(self, unit: str) -> Optional[TokenMetadata]:
        return self.get_tokens().get(unit)

    def get_decimal_from_unit(self, unit: str) -> int:
        if self.is_network_unit(unit):
            return self.context.network.decimal
        token = self.resolve(unit)
        if token is None:
            raise TokenNotFoundError(unit)
        return token.decimal
