from typing import Annotated

from pydantic import BaseModel, Field


class SetUnitMetaParameters(BaseModel):
    """Payload of the "unit changed" event."""

    unit: Annotated[
        str,
        Field(
            min_length=1,
            description=(
                "The unit symbol the amount is now entered in. Either the "
                "network unit (e.g. ETH) or a token symbol from the registry."
            ),
        ),
    ]
