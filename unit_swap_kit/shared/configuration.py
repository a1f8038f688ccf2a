from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional

from .networks import get_network_config
from .parameter_schemas import NetworkConfig, TokenMetadata

if TYPE_CHECKING:
    from .plugin import Plugin


class AgentMode(str, Enum):
    AUTONOMOUS = "autonomous"
    RETURN_COMMANDS = "returnCommands"


class Context:
    def __init__(
            self,
            network: Optional[NetworkConfig] = None,
            tokens: Optional[List[TokenMetadata]] = None,
            custom_tokens: Optional[List[TokenMetadata]] = None,
            ether_balance: Optional[int] = None,
            token_balances: Optional[Dict[str, int]] = None,
            gas_cost: Optional[int] = None,
            offline: bool = False,
            mode: Optional[AgentMode] = None,
    ):
        # Active network; its unit is the network unit, everything else is a token
        self.network = network or get_network_config("ETH")

        # Tokens shipped for the network and tokens added by the user
        self.tokens = tokens or []
        self.custom_tokens = custom_tokens or []

        # Balances in the smallest denomination, None when not fetched yet
        self.ether_balance = ether_balance
        self.token_balances = token_balances or {}

        # Gas limit * gas price of the draft in wei, None when unknown
        self.gas_cost = gas_cost

        self.offline = offline

        # defines if emitted commands are applied to the draft or returned to the caller
        self.mode = mode


class Configuration:
    def __init__(
            self,
            tools: Optional[List[str]] = None,
            plugins: Optional[List[Plugin]] = None,
            context: Optional[Context] = None,
    ):
        self.tools = tools  # if empty, all tools will be used.
        self.plugins = plugins  # external plugins to load
        self.context = context
