"""Owned UCS-2 null-terminated strings."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .chars import NUL_16, Char16, CharConversionError
from .strs import CStr16, StrErrorKind


class FromStrError(ValueError):
    """Raised when a ``str`` cannot become a CString16."""

    def __init__(self, kind: StrErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


def _encode_utf16(text: str) -> Iterator[int]:
    data = text.encode("utf-16-le", "surrogatepass")
    return (unit for (unit,) in struct.iter_unpack("<H", data))


@dataclass(frozen=True, order=True)
class CString16:
    """An owned UCS-2 string; ``chars`` includes the trailing null."""

    chars: tuple[Char16, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "chars", tuple(self.chars))

    @classmethod
    def from_str(cls, input: str) -> CString16:
        """Convert a ``str``, rejecting characters outside UCS-2 and nulls."""
        output: list[Char16] = []
        for unit in _encode_utf16(input):
            try:
                char = Char16.from_code(unit)
            except CharConversionError:
                raise FromStrError(StrErrorKind.INVALID_CHAR) from None
            if char == NUL_16:
                raise FromStrError(StrErrorKind.INTERIOR_NUL)
            output.append(char)
        output.append(NUL_16)
        return cls(output)

    def as_cstr16(self) -> CStr16:
        """View this string as a CStr16."""
        return CStr16(tuple(char.value for char in self.chars))

    def as_string(self) -> str:
        """The string as a Python ``str``."""
        return self.as_cstr16().as_string()

    def __iter__(self) -> Iterator[Char16]:
        return iter(self.chars[:-1])

    def __str__(self) -> str:
        return str(self.as_cstr16())


def _chars(items: Iterable[Char16]) -> tuple[Char16, ...]:
    return tuple(items)