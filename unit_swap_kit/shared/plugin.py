from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from .configuration import Context
from .tool import Tool


@dataclass
class Plugin:
    """A named bundle of tools, built lazily for a given Context."""

    name: str
    tools: Callable[[Context], List[Tool]]
    version: Optional[str] = None
    description: Optional[str] = None

    def load_tools(self, context: Context) -> List[Tool]:
        return list(self.tools(context))
