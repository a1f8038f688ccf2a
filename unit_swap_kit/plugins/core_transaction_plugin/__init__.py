from unit_swap_kit.plugins.core_transaction_plugin.set_unit_meta import (
    SetUnitMetaTool,
    SET_UNIT_META_TOOL,
)
from unit_swap_kit.shared.plugin import Plugin

core_transaction_plugin = Plugin(
    name="core-transaction-plugin",
    version="1.0.0",
    description="A plugin for editing transaction drafts",
    tools=lambda context: [
        SetUnitMetaTool(context),
    ],
)

core_transaction_plugin_tool_names = {
    "SET_UNIT_META_TOOL": SET_UNIT_META_TOOL,
}

__all__ = [
    "SetUnitMetaTool",
    "core_transaction_plugin",
    "core_transaction_plugin_tool_names",
]
