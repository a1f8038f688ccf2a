__all__ = [
    "Configuration",
    "Context",
    "AgentMode",
    "PluginRegistry",
    "Tool",
    "UnitSwapAPI",
]

# Re-export key primitives from the shared package
from .shared import (
    AgentMode,
    Configuration,
    Context,
    PluginRegistry,
    Tool,
    UnitSwapAPI,
)
