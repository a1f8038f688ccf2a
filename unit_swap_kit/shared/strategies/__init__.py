__all__ = [
    "CommandModeStrategy",
    "ApplyStrategy",
    "ReturnCommandsStrategy",
    "handle_commands",
]

from unit_swap_kit.shared.strategies.command_mode_strategy import (
    ApplyStrategy,
    CommandModeStrategy,
    ReturnCommandsStrategy,
    handle_commands,
)
