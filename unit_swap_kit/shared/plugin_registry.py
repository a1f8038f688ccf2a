import logging
from typing import Dict, List, Optional

from .configuration import Configuration, Context
from .plugin import Plugin
from .tool import Tool
from ..plugins.core_transaction_plugin import core_transaction_plugin

CORE_PLUGINS: List[Plugin] = [core_transaction_plugin]


class PluginRegistry:
    def __init__(self, plugins: Optional[List[Plugin]] = None):
        self.plugins: Dict[str, Plugin] = {}
        for plugin in plugins or []:
            self.register(plugin)

    def register(self, plugin: Plugin) -> None:
        if plugin.name in self.plugins:
            logging.warning(
                'Plugin "%s" is already registered. Overwriting.', plugin.name
            )
        self.plugins[plugin.name] = plugin

    def get_plugins(self) -> List[Plugin]:
        return list(self.plugins.values())

    def _load_tools(self, plugins: List[Plugin], context: Context) -> List[Tool]:
        plugin_tools: List[Tool] = []
        for plugin in plugins:
            try:
                plugin_tools.extend(plugin.load_tools(context))
            except Exception as error:
                logging.error('Error loading tools from plugin "%s": %s', plugin.name, error)
        return plugin_tools

    def get_tools(
        self, context: Context, configuration: Optional[Configuration] = None
    ) -> List[Tool]:
        plugins = self.get_plugins() or CORE_PLUGINS
        tools: List[Tool] = []
        methods: set[str] = set()
        for tool in self._load_tools(plugins, context):
            if tool.method in methods:
                logging.warning('Tool "%s" is provided twice. Using the first one.', tool.method)
                continue
            tools.append(tool)
            methods.add(tool.method)

        # Apply tool filtering if specified in the configuration
        if configuration and configuration.tools:
            return [tool for tool in tools if tool.method in configuration.tools]
        return tools

    def clear(self) -> None:
        self.plugins.clear()

    @staticmethod
    def create_from_configuration(configuration: Configuration) -> "PluginRegistry":
        return PluginRegistry(configuration.plugins)
