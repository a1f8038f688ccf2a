__all__ = [
    "Configuration",
    "Context",
    "AgentMode",
    "PluginRegistry",
    "Tool",
    "UnitSwapAPI",
]

from .api import UnitSwapAPI
from .configuration import AgentMode, Configuration, Context
from .plugin_registry import PluginRegistry
from .tool import Tool
