__all__ = [
    "core_transaction_plugin",
    "core_transaction_plugin_tool_names",
    "CORE_PLUGINS",
]

# Re-export available core plugins
from .core_transaction_plugin import (
    core_transaction_plugin,
    core_transaction_plugin_tool_names,
)

# Convenience collection of core plugins that can be registered if desired
CORE_PLUGINS = (
    core_transaction_plugin,
)
