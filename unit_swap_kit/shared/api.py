from __future__ import annotations

from typing import Any, List, Optional

from .configuration import Context
from .models import ReturnCommandsToolResponse, ToolResponse, TransactionDraft
from .tool import Tool
from .transaction_meta_reducer import apply_commands


class UnitSwapAPI:
    """
    A wrapper for executing tools against a transaction draft within a given context.
    """

    def __init__(
        self,
        draft: TransactionDraft,
        context: Optional[Context] = None,
        tools: Optional[List[Tool]] = None,
    ):
        self.draft = draft
        self.context = context or Context()
        self.tools = tools or []

    async def run(self, method: str, arg: Any) -> ToolResponse:
        """
        Executes the specified tool by method name with the given argument.
        The current draft follows the response: an updated draft replaces it,
        returned commands are applied to it.
        """
        tool = next((t for t in self.tools if t.method == method), None)
        if tool is None:
            raise ValueError(f"Invalid method {method}")

        response = await tool.execute(self.draft, self.context, arg)
        if isinstance(response, ReturnCommandsToolResponse):
            self.draft = apply_commands(response.commands, self.draft)
            return response

        updated_draft: TransactionDraft | None = getattr(response, "draft", None)
        if updated_draft is not None:
            self.draft = updated_draft
        return response
