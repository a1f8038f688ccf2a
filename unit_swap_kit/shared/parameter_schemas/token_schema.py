from typing import Annotated, Optional

from pydantic import BaseModel, Field


class TokenMetadata(BaseModel):
    """Registry entry for a fungible token, looked up by its symbol."""

    symbol: Annotated[str, Field(description="The token symbol (e.g., DAI).")]
    address: Annotated[
        str, Field(description="EVM address of the token contract (0x-prefixed).")
    ]
    decimal: Annotated[
        int, Field(ge=0, description="Number of decimal places of the token.")
    ]
    name: Annotated[
        Optional[str], Field(description="Optional human-readable token name.")
    ] = None
