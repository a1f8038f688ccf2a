from typing import Annotated, Literal, Optional

from pydantic import BaseModel, Field


class NetworkConfig(BaseModel):
    id: Annotated[str, Field(description="Unique network identifier.")]
    name: Annotated[str, Field(description="Human-readable network name.")]
    chain_id: Annotated[int, Field(ge=0, description="EIP-155 chain id.")]
    unit: Annotated[
        str, Field(description="Symbol of the network's native currency.")
    ]
    decimal: Annotated[
        int,
        Field(ge=0, description="Decimals of the native currency (18 for ether)."),
    ] = 18
    is_custom: Annotated[
        bool, Field(description="True for networks added by the user.")
    ] = False


class CustomNetworkConfig(NetworkConfig):
    is_custom: Literal[True] = True
    d_path_formats: Annotated[
        Optional[dict[str, str]],
        Field(description="Derivation path formats keyed by wallet type."),
    ] = None
