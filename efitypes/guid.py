"""Globally unique identifiers in the firmware's mixed-endian layout."""

from __future__ import annotations

import re
from abc import ABC
from collections.abc import Callable
from dataclasses import dataclass
from typing import ClassVar, TypeVar

_GUID_PATTERN = re.compile(
    r"([0-9a-fA-F]{8})-([0-9a-fA-F]{4})-([0-9a-fA-F]{4})-"
    r"([0-9a-fA-F]{4})-([0-9a-fA-F]{12})"
)

T = TypeVar("T", bound=type)


def _check_range(name: str, value: int, bits: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an integer")
    if not 0 <= value < 1 << bits:
        raise ValueError(f"{name} must be a {bits}-bit integer")


@dataclass(frozen=True)
class Guid:
    """A globally unique identifier.

    Mostly like an RFC 4122 UUID, except that the first three fields are
    stored little endian. ``str()`` gives the canonical textual form.
    """

    a: int = 0
    b: int = 0
    c: int = 0
    d: bytes = bytes(8)

    def __post_init__(self) -> None:
        _check_range("a", self.a, 32)
        _check_range("b", self.b, 16)
        _check_range("c", self.c, 16)
        d = bytes(self.d)
        if len(d) != 8:
            raise ValueError("d must hold exactly 8 bytes")
        object.__setattr__(self, "d", d)

    @classmethod
    def from_values(
        cls,
        time_low: int,
        time_mid: int,
        time_high_and_version: int,
        clock_seq_and_variant: int,
        node: int,
    ) -> Guid:
        """Build a GUID from the fields of its canonical representation."""
        _check_range("clock_seq_and_variant", clock_seq_and_variant, 16)
        _check_range("node", node, 48)
        return cls(
            time_low,
            time_mid,
            time_high_and_version,
            clock_seq_and_variant.to_bytes(2, "big") + node.to_bytes(6, "big"),
        )

    @classmethod
    def parse(cls, text: str) -> Guid:
        """Parse the canonical ``xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx`` form."""
        match = _GUID_PATTERN.fullmatch(text)
        if match is None:
            raise ValueError(f"malformed GUID: {text!r}")
        fields = [int(group, 16) for group in match.groups()]
        return cls.from_values(*fields)

    def __str__(self) -> str:
        clock = int.from_bytes(self.d[:2], "big")
        node = int.from_bytes(self.d[2:], "big")
        return f"{self.a:08x}-{self.b:04x}-{self.c:04x}-{clock:04x}-{node:012x}"

    def __bytes__(self) -> bytes:
        return (
            self.a.to_bytes(4, "little")
            + self.b.to_bytes(2, "little")
            + self.c.to_bytes(2, "little")
            + self.d
        )


class Identify(ABC):
    """Marks a type that is identified by a GUID held in ``GUID``."""

    GUID: ClassVar[Guid]


def unsafe_guid(text: str) -> Callable[[T], T]:
    """Class decorator attaching the GUID given in canonical form."""
    guid = Guid.parse(text)

    def decorate(cls: T) -> T:
        cls.GUID = guid
        Identify.register(cls)
        return cls

    return decorate