"""Argument list data models."""

from dataclasses import dataclass, field
from enum import IntEnum
from ipaddress import IPv4Address, IPv6Address
from typing import Any, List, Union


class ArgType(IntEnum):
    """Argument type tags.

    Values are the 4-bit codes used in packed type descriptors.
    """

    STOP = 0
    UINT = 1
    SINT = 2
    STR = 3
    IPV4 = 4
    MSK4 = 5
    IPV6 = 6
    MSK6 = 7
    TIME = 8
    SIZE = 9
    FE = 10
    BE = 11
    TAB = 12
    SRV = 13
    USR = 14

    @property
    def label(self) -> str:
        """Human-readable type name used in error messages."""
        return _TYPE_LABELS[self]

    @property
    def is_deferred(self) -> bool:
        """True for names resolved into live objects after parsing."""
        return self in _DEFERRED_TYPES

    @property
    def is_string(self) -> bool:
        """True for types stored as the raw field text."""
        return self == ArgType.STR or self.is_deferred


_TYPE_LABELS = {
    ArgType.STOP: "end of arguments",
    ArgType.UINT: "unsigned integer",
    ArgType.SINT: "signed integer",
    ArgType.STR: "string",
    ArgType.IPV4: "IPv4 address",
    ArgType.MSK4: "IPv4 mask",
    ArgType.IPV6: "IPv6 address",
    ArgType.MSK6: "IPv6 mask",
    ArgType.TIME: "delay",
    ArgType.SIZE: "size",
    ArgType.FE: "frontend",
    ArgType.BE: "backend",
    ArgType.TAB: "table",
    ArgType.SRV: "server",
    ArgType.USR: "user list",
}

_DEFERRED_TYPES = frozenset(
    {ArgType.FE, ArgType.BE, ArgType.TAB, ArgType.SRV, ArgType.USR}
)


def type_name(code: int) -> str:
    """Human-readable name for any type code, known or not."""
    try:
        return ArgType(code).label
    except ValueError:
        return f"unknown type {code}"


ArgValue = Union[int, str, IPv4Address, IPv6Address]


@dataclass(frozen=True)
class Argument:
    """One parsed argument.

    Attributes:
        type: ArgType of the stored value, after any downgrade
        value: int for UINT/SINT, str for string-like types,
            IPv4Address for IPV4, IPv6Address for IPV6

    The default Argument() is the zero value: it terminates every argument
    list and fills optional positions that were not supplied.
    """

    type: ArgType = ArgType.STOP
    value: ArgValue = 0

    @property
    def is_stop(self) -> bool:
        return self.type == ArgType.STOP


@dataclass
class ParsedArguments:
    """Successful parse payload.

    Attributes:
        arguments: max positions + 1 entries, terminated by Argument();
            empty when the descriptor declares no position or the input
            was empty with nothing mandatory
        count: Number of leading positions actually filled
        end_pos: Input offset where parsing stopped
    """

    arguments: List[Argument] = field(default_factory=list)
    count: int = 0
    end_pos: int = 0

    def present(self) -> List[Argument]:
        """Arguments for the positions actually filled."""
        return self.arguments[: self.count]

    def values(self) -> List[Any]:
        """Payloads of the positions actually filled."""
        return [arg.value for arg in self.present()]
