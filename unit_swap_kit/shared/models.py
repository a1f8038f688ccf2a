from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, Type


def _int_to_json(value: Optional[int]) -> Optional[str]:
    # uint256 amounts overflow JSON numbers in most consumers
    return str(value) if value is not None else None


def _int_from_json(value: Any) -> Optional[int]:
    return int(value) if value is not None else None


@dataclass
class AmountField:
    """User-visible decimal string plus its integer value in the unit's smallest denomination."""

    raw: str = ""
    value: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return {"raw": self.raw, "value": _int_to_json(self.value)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AmountField:
        return cls(raw=data.get("raw", ""), value=_int_from_json(data.get("value")))


@dataclass
class AddressField:
    raw: str = ""
    value: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {"raw": self.raw, "value": self.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AddressField:
        return cls(raw=data.get("raw", ""), value=data.get("value"))


@dataclass
class BufferField:
    """Call data; `raw` is the 0x-prefixed hex form of `value`."""

    raw: str = ""
    value: bytes = b""

    @classmethod
    def from_bytes(cls, data: bytes) -> BufferField:
        return cls(raw="0x" + data.hex(), value=data)

    def to_dict(self) -> dict[str, Any]:
        return {"raw": self.raw, "value": "0x" + self.value.hex()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BufferField:
        hex_value: str = data.get("value") or ""
        return cls(
            raw=data.get("raw", ""),
            value=bytes.fromhex(hex_value.removeprefix("0x")),
        )


@dataclass
class TransactionMeta:
    """The monetary fields of a transaction draft.

    `to` / `value` / `data` describe the literal on-chain call. `token_value` /
    `token_to` describe the logical token transfer when a token is involved.
    """

    to: AddressField = field(default_factory=AddressField)
    value: AmountField = field(default_factory=AmountField)
    data: BufferField = field(default_factory=BufferField)
    token_value: AmountField = field(default_factory=AmountField)
    token_to: AddressField = field(default_factory=AddressField)
    decimal: int = 18

    def to_dict(self) -> dict[str, Any]:
        return {
            "to": self.to.to_dict(),
            "value": self.value.to_dict(),
            "data": self.data.to_dict(),
            "token_value": self.token_value.to_dict(),
            "token_to": self.token_to.to_dict(),
            "decimal": self.decimal,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TransactionMeta:
        return cls(
            to=AddressField.from_dict(data.get("to", {})),
            value=AmountField.from_dict(data.get("value", {})),
            data=BufferField.from_dict(data.get("data", {})),
            token_value=AmountField.from_dict(data.get("token_value", {})),
            token_to=AddressField.from_dict(data.get("token_to", {})),
            decimal=data.get("decimal", 18),
        )


@dataclass
class TransactionDraft:
    """Snapshot of the draft being edited, as read by the unit swap coordinator."""

    meta: TransactionMeta = field(default_factory=TransactionMeta)
    unit: str = "ETH"
    previous_unit: Optional[str] = None
    scheduling_toggle: bool = False

    def get_previous_unit(self) -> Optional[str]:
        return self.previous_unit

    def get_to(self) -> AddressField:
        return self.meta.to

    def get_value(self) -> AmountField:
        return self.meta.value

    def get_token_value(self) -> AmountField:
        return self.meta.token_value

    def get_token_to(self) -> AddressField:
        return self.meta.token_to

    def to_dict(self) -> dict[str, Any]:
        return {
            "meta": self.meta.to_dict(),
            "unit": self.unit,
            "previous_unit": self.previous_unit,
            "scheduling_toggle": self.scheduling_toggle,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TransactionDraft:
        return cls(
            meta=TransactionMeta.from_dict(data.get("meta", {})),
            unit=data.get("unit", "ETH"),
            previous_unit=data.get("previous_unit"),
            scheduling_toggle=bool(data.get("scheduling_toggle", False)),
        )


class UnitSwapCommand(ABC):
    """Base class for every command the unit swap coordinator can emit."""

    type: ClassVar[str]

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a dictionary."""
        pass

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Dict[str, Any]) -> UnitSwapCommand:
        """Deserialize from a dictionary."""
        pass


@dataclass
class SwapTokenToEtherCommand(UnitSwapCommand):
    type: ClassVar[str] = "swap_token_to_ether"

    to: AddressField
    value: AmountField
    decimal: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "to": self.to.to_dict(),
            "value": self.value.to_dict(),
            "decimal": self.decimal,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SwapTokenToEtherCommand:
        return cls(
            to=AddressField.from_dict(data["to"]),
            value=AmountField.from_dict(data["value"]),
            decimal=data["decimal"],
        )


@dataclass
class SwapEtherToTokenCommand(UnitSwapCommand):
    """Switch from the network unit to a token.

    Carries no `token_to`: the recipient typed in `to` is only reflected in
    the encoded transfer held by `data`.
    """

    type: ClassVar[str] = "swap_ether_to_token"

    data: BufferField
    to: AddressField
    token_value: AmountField
    decimal: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "data": self.data.to_dict(),
            "to": self.to.to_dict(),
            "token_value": self.token_value.to_dict(),
            "decimal": self.decimal,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SwapEtherToTokenCommand:
        return cls(
            data=BufferField.from_dict(data["data"]),
            to=AddressField.from_dict(data["to"]),
            token_value=AmountField.from_dict(data["token_value"]),
            decimal=data["decimal"],
        )


@dataclass
class SwapTokenToTokenCommand(UnitSwapCommand):
    type: ClassVar[str] = "swap_token_to_token"

    data: BufferField
    to: AddressField
    token_value: AmountField
    token_to: AddressField
    decimal: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "data": self.data.to_dict(),
            "to": self.to.to_dict(),
            "token_value": self.token_value.to_dict(),
            "token_to": self.token_to.to_dict(),
            "decimal": self.decimal,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SwapTokenToTokenCommand:
        return cls(
            data=BufferField.from_dict(data["data"]),
            to=AddressField.from_dict(data["to"]),
            token_value=AmountField.from_dict(data["token_value"]),
            token_to=AddressField.from_dict(data["token_to"]),
            decimal=data["decimal"],
        )


@dataclass
class SetSchedulingToggleCommand(UnitSwapCommand):
    type: ClassVar[str] = "set_scheduling_toggle"

    enabled: bool

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "enabled": self.enabled}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SetSchedulingToggleCommand:
        return cls(enabled=bool(data["enabled"]))


@dataclass
class SetUnitMetaCommand(UnitSwapCommand):
    """Record `unit` as the unit in effect; the one it replaces becomes `previous_unit`."""

    type: ClassVar[str] = "set_unit_meta"

    unit: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "unit": self.unit}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SetUnitMetaCommand:
        return cls(unit=data["unit"])


SwapCommand = SwapTokenToEtherCommand | SwapEtherToTokenCommand | SwapTokenToTokenCommand

COMMAND_TYPES: dict[str, Type[UnitSwapCommand]] = {
    command_cls.type: command_cls
    for command_cls in (
        SwapTokenToEtherCommand,
        SwapEtherToTokenCommand,
        SwapTokenToTokenCommand,
        SetSchedulingToggleCommand,
        SetUnitMetaCommand,
    )
}


def command_from_dict(data: dict[str, Any]) -> UnitSwapCommand:
    command_cls = COMMAND_TYPES.get(data.get("type", ""))
    if command_cls is None:
        raise ValueError(f"Unknown command type {data.get('type')}")
    return command_cls.from_dict(data)


@dataclass
class UnitSwapResult:
    """Output of one unit change: at most one swap command plus its side effects."""

    command: Optional[SwapCommand] = None
    side_effects: List[SetSchedulingToggleCommand] = field(default_factory=list)

    @property
    def commands(self) -> List[UnitSwapCommand]:
        """Commands in emission order: side effects precede the swap command."""
        emitted: List[UnitSwapCommand] = list(self.side_effects)
        if self.command is not None:
            emitted.append(self.command)
        return emitted

    @property
    def is_empty(self) -> bool:
        return self.command is None and not self.side_effects


class ToolResponse(ABC):
    """Base class for all tool responses."""

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a dictionary."""
        pass

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Dict[str, Any]) -> ToolResponse:
        """Deserialize from a dictionary."""
        pass


@dataclass
class AppliedCommandsToolResponse(ToolResponse):
    """A tool response for commands that were applied to the draft."""

    draft: TransactionDraft
    commands: List[UnitSwapCommand]
    human_message: str
    error: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "applied_commands",
            "draft": self.draft.to_dict(),
            "commands": [command.to_dict() for command in self.commands],
            "human_message": self.human_message,
            "error": self.error,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AppliedCommandsToolResponse:
        return cls(
            draft=TransactionDraft.from_dict(data["draft"]),
            commands=[command_from_dict(c) for c in data.get("commands", [])],
            human_message=data.get("human_message", ""),
            error=data.get("error"),
        )


@dataclass
class ReturnCommandsToolResponse(ToolResponse):
    """A tool response carrying the emitted commands for the caller to apply."""

    commands: List[UnitSwapCommand]

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "return_commands",
            "commands": [command.to_dict() for command in self.commands],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ReturnCommandsToolResponse:
        return cls(commands=[command_from_dict(c) for c in data.get("commands", [])])
