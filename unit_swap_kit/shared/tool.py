from abc import ABC, abstractmethod
from typing import Any, Type

from pydantic import BaseModel

from .configuration import Context
from .models import ToolResponse, TransactionDraft


class Tool(ABC):
    """
    An operation on a transaction draft, addressed by `method`.

    `parameters` is the pydantic schema the raw arguments are validated against.
    """

    method: str
    name: str
    description: str
    parameters: Type[BaseModel]

    @abstractmethod
    async def execute(
        self, draft: TransactionDraft, context: Context, params: Any
    ) -> ToolResponse:
        """
        Run the operation against `draft`. Implementations return a new draft
        inside the response instead of mutating the one passed in.
        """
        pass
