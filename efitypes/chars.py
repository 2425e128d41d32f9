"""Latin-1 and UCS-2 character types."""

from __future__ import annotations

import operator
from dataclasses import dataclass

REPLACEMENT_CHARACTER = "\ufffd"


class CharConversionError(ValueError):
    """Raised when a value cannot be represented in the target character type."""


def _index(value: object) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"character code must be an integer, not {type(value).__name__}"
        ) from None


def _code_point(value: object) -> int:
    if not isinstance(value, str) or len(value) != 1:
        raise TypeError("expected a single-character string")
    code = ord(value)
    if _is_surrogate(code):
        raise CharConversionError(f"lone surrogate U+{code:04X} is not a character")
    return code


def _is_surrogate(code: int) -> bool:
    return 0xD800 <= code <= 0xDFFF


@dataclass(frozen=True, order=True, repr=False)
class Char8:
    """A Latin-1 character."""

    value: int = 0

    def __post_init__(self) -> None:
        code = _index(self.value)
        if not 0 <= code <= 0xFF:
            raise CharConversionError(f"{code} does not fit in a Latin-1 character")
        object.__setattr__(self, "value", code)

    @classmethod
    def from_char(cls, value: str) -> Char8:
        """Convert a one-character string, failing above U+00FF."""
        code = _code_point(value)
        if code > 0xFF:
            raise CharConversionError(f"U+{code:04X} is not a Latin-1 character")
        return cls(code)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return chr(self.value)

    def __repr__(self) -> str:
        return repr(chr(self.value))


@dataclass(frozen=True, order=True, repr=False)
class Char16:
    """A UCS-2 code point."""

    value: int = 0

    def __post_init__(self) -> None:
        code = _index(self.value)
        if not 0 <= code <= 0xFFFF:
            raise CharConversionError(f"{code} does not fit in a UCS-2 code unit")
        object.__setattr__(self, "value", code)

    @classmethod
    def from_char(cls, value: str) -> Char16:
        """Convert a one-character string, failing outside the basic plane."""
        code = _code_point(value)
        if code > 0xFFFF:
            raise CharConversionError(f"U+{code:04X} is outside the basic plane")
        return cls(code)

    @classmethod
    def from_code(cls, value: int) -> Char16:
        """Convert a 16-bit code, rejecting values that are not Unicode scalars."""
        code = _index(value)
        if not 0 <= code <= 0xFFFF or _is_surrogate(code):
            raise CharConversionError(f"{code} is not a valid UCS-2 character")
        return cls(code)

    @property
    def is_valid(self) -> bool:
        """Whether the code is a Unicode scalar value."""
        return not _is_surrogate(self.value)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __str__(self) -> str:
        if self.is_valid:
            return chr(self.value)
        return REPLACEMENT_CHARACTER

    def __repr__(self) -> str:
        if self.is_valid:
            return repr(chr(self.value))
        return f"Char16({self.value})"


NUL_8 = Char8(0)
NUL_16 = Char16(0)