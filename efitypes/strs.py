"""Null-terminated Latin-1 and UCS-2 strings."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Iterator, MutableSequence
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from .chars import NUL_16, Char8, Char16, CharConversionError


class StrErrorKind(Enum):
    """What went wrong while building a null-terminated string."""

    INVALID_CHAR = "invalid character"
    INTERIOR_NUL = "interior null character"
    NOT_NUL_TERMINATED = "not null-terminated"
    BUFFER_TOO_SMALL = "buffer too small"


class _PositionedError(ValueError):
    def __init__(self, kind: StrErrorKind, position: int | None = None) -> None:
        message = kind.value if position is None else f"{kind.value} at position {position}"
        super().__init__(message)
        self.kind = kind
        self.position = position


class FromSliceWithNulError(_PositionedError):
    """Raised when a code sequence is not a valid null-terminated string."""


class FromStrWithBufError(_PositionedError):
    """Raised when a string cannot be stored in the given buffer."""


class _TextSink(Protocol):
    def write(self, text: str, /) -> object: ...


def _encode_utf16(text: str) -> Iterator[int]:
    data = text.encode("utf-16-le", "surrogatepass")
    return (unit for (unit,) in struct.iter_unpack("<H", data))


@dataclass(frozen=True)
class CStr8:
    """A Latin-1 null-terminated string; ``data`` includes the trailing null."""

    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def from_bytes_with_nul(cls, chars: bytes | Iterable[int]) -> CStr8:
        """Wrap bytes that end with their only null byte."""
        data = bytes(chars)
        nul_pos = data.find(0)
        if nul_pos < 0:
            raise FromSliceWithNulError(StrErrorKind.NOT_NUL_TERMINATED)
        if nul_pos + 1 != len(data):
            raise FromSliceWithNulError(StrErrorKind.INTERIOR_NUL, nul_pos)
        return cls(data)

    def to_bytes(self) -> bytes:
        """The bytes without the trailing null."""
        return self.data[:-1]

    def to_bytes_with_nul(self) -> bytes:
        """The bytes including the trailing null."""
        return self.data

    def __iter__(self) -> Iterator[Char8]:
        return (Char8(byte) for byte in self.to_bytes())

    def __str__(self) -> str:
        return self.to_bytes().decode("latin-1")


@dataclass(frozen=True, repr=False)
class CStr16:
    """A UCS-2 null-terminated string; ``codes`` includes the trailing null."""

    codes: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "codes", tuple(self.codes))

    @classmethod
    def from_u16_with_nul(cls, codes: Iterable[int]) -> CStr16:
        """Validate UCS-2 codes ending with their only null character."""
        units = tuple(codes)
        last = len(units) - 1
        for pos, code in enumerate(units):
            try:
                char = Char16.from_code(code)
            except CharConversionError:
                raise FromSliceWithNulError(StrErrorKind.INVALID_CHAR, pos) from None
            if char == NUL_16:
                if pos != last:
                    raise FromSliceWithNulError(StrErrorKind.INTERIOR_NUL, pos)
                return cls(units)
        raise FromSliceWithNulError(StrErrorKind.NOT_NUL_TERMINATED)

    @classmethod
    def from_str_with_buf(cls, input: str, buf: MutableSequence[int]) -> CStr16:
        """Encode ``input`` into ``buf`` with a trailing null and wrap the result.

        The buffer must hold the encoded string plus the null terminator.
        """
        index = 0
        for unit in _encode_utf16(input):
            if index >= len(buf):
                raise FromStrWithBufError(StrErrorKind.BUFFER_TOO_SMALL)
            buf[index] = unit
            index += 1
        if index >= len(buf):
            raise FromStrWithBufError(StrErrorKind.BUFFER_TOO_SMALL)
        buf[index] = 0
        try:
            return cls.from_u16_with_nul(buf[: index + 1])
        except FromSliceWithNulError as err:
            raise FromStrWithBufError(err.kind, err.position) from None

    def to_u16_slice(self) -> list[int]:
        """The codes without the trailing null."""
        return list(self.codes[:-1])

    def to_u16_slice_with_nul(self) -> list[int]:
        """The codes including the trailing null."""
        return list(self.codes)

    def __iter__(self) -> Iterator[Char16]:
        return (Char16(code) for code in self.codes[:-1])

    def num_bytes(self) -> int:
        """Size in bytes, counting the trailing null."""
        return len(self.codes) * 2

    def as_str_in_buf(self, buf: _TextSink) -> None:
        """Write each character to a text sink such as an open text stream."""
        for char in self:
            buf.write(chr(char.value))

    def as_string(self) -> str:
        """The string as a Python ``str``."""
        return "".join(chr(char.value) for char in self)

    def __str__(self) -> str:
        return "".join(str(char) for char in self)

    def __repr__(self) -> str:
        chars = ", ".join(repr(Char16(code)) for code in self.codes)
        return f"CStr16([{chars}])"