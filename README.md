# efitypes

Python models of the basic data types used in UEFI work. The package has no
dependencies outside the standard library.

| Module                 | Contents |
| ---------------------- | -------- |
| `efitypes.chars`       | `Char8`, `Char16`, `CharConversionError`, `NUL_8`, `NUL_16` |
| `efitypes.strs`        | `CStr8`, `CStr16`, `StrErrorKind`, `FromSliceWithNulError`, `FromStrWithBufError` |
| `efitypes.owned_strs`  | `CString16`, `FromStrError` |
| `efitypes.guid`        | `Guid`, `Identify`, `unsafe_guid` |
| `efitypes.enums`       | `NewtypeEnum`, `newtype_enum` |
| `efitypes.logger`      | `Logger`, a `logging.Handler` |

## Installation

```
pip install .
```

## Characters

`Char8` holds a Latin-1 code from 0 to 0xFF. `Char16` holds a UCS-2 code from
0 to 0xFFFF. Both are frozen, ordered dataclasses, and a value out of range
raises `CharConversionError`, which is a `ValueError`.

- `Char8.from_char("é")` and `Char16.from_char("Ω")` convert a one-character
  string. They fail when the character does not fit in the type.
- `Char16.from_code(n)` also rejects surrogate codes (0xD800–0xDFFF), because
  those are not Unicode scalar values. The plain constructor `Char16(n)`
  accepts them. For such a value `str()` gives U+FFFD and `repr()` gives
  `Char16(n)`.
- `int(c)` and `operator.index(c)` return the code.

## Null-terminated strings

```python
from efitypes.strs import CStr8, CStr16, FromStrWithBufError, StrErrorKind

s = CStr16.from_u16_with_nul([65, 66, 67, 0])
print(s.num_bytes())              # 8
print(s.as_string())              # ABC
print(s.to_u16_slice())           # [65, 66, 67]

buf = [0] * 4
s = CStr16.from_str_with_buf("ABC", buf)
print(s.to_u16_slice_with_nul())  # [65, 66, 67, 0]
print(buf)                        # [65, 66, 67, 0]

try:
    CStr16.from_str_with_buf("a\0b", buf)
except FromStrWithBufError as err:
    print(err.kind is StrErrorKind.INTERIOR_NUL, err.position)  # True 1

b = CStr8.from_bytes_with_nul(b"hi\0")
print(b.to_bytes())               # b'hi'
```

`CStr16` iterates over its `Char16` characters, leaving out the trailing
null. `as_str_in_buf(stream)` writes each character to any object that has a
`write(str)` method. `CStr8` iterates over `Char8` values, and `str()` decodes
it as Latin-1.

The conversion errors are `ValueError` subclasses. They carry `kind`, a
`StrErrorKind` (`INVALID_CHAR`, `INTERIOR_NUL`, `NOT_NUL_TERMINATED`,
`BUFFER_TOO_SMALL`), and `position`, which is `None` where no position
applies.

## Owned strings

```python
from efitypes.owned_strs import CString16, FromStrError

owned = CString16.from_str("abc")
print(owned.as_string())   # abc
view = owned.as_cstr16()   # a CStr16 with the same codes

CString16.from_str("😀")   # raises FromStrError (kind INVALID_CHAR)
CString16.from_str("x\0")  # raises FromStrError (kind INTERIOR_NUL)
```

## GUIDs

```python
from efitypes.guid import Guid, Identify, unsafe_guid

guid = Guid.from_values(0x12345678, 0x9ABC, 0xDEF0, 0x1234, 0x56789ABCDEF0)
print(guid)  # 12345678-9abc-def0-1234-56789abcdef0
assert Guid.parse("12345678-9abc-def0-1234-56789abcdef0") == guid

@unsafe_guid("12345678-9abc-def0-1234-56789abcdef0")
class Emptiness:
    pass

assert Emptiness.GUID == guid
assert issubclass(Emptiness, Identify)
```

`bytes(guid)` gives the 16-byte in-memory layout: the first three fields are
little endian, followed by the eight remaining bytes. `from_values` raises
`ValueError` when `node` does not fit in 48 bits. `parse` raises `ValueError`
on malformed text.

## C-style enums

A `NewtypeEnum` accepts any integer. A value that matches a named constant
is shown by that name; any other value is shown as `Type(value)`.

```python
from efitypes.enums import NewtypeEnum, newtype_enum

UnixBool = newtype_enum("UnixBool", {"FALSE": 0, "TRUE": 1, "FILE_NOT_FOUND": -1})
print(repr(UnixBool.TRUE))   # TRUE
print(repr(UnixBool(42)))    # UnixBool(42)
print(UnixBool(1) == UnixBool.TRUE, UnixBool(1).name())  # True TRUE

class Color(NewtypeEnum):
    RED = 0
    GREEN = 1
```

Values are immutable and hashable. Two values are equal only when they have
the same type and the same integer.

## Logging

```python
import io
import logging
from efitypes.logger import Logger

out = io.StringIO()
handler = Logger(out, ignore_errors=False)
log = logging.getLogger("boot")
log.addHandler(handler)
log.warning("first line\nsecond line")
```

The first line of each record is prefixed with
`[LEVEL]: <file>@<line>: `. The level is right-aligned to 5 characters, the
file (the record's path) to 12, and the line number is zero-padded to 3
digits. Each following line of the same record is prefixed with `LEVEL: `.
Level names are `ERROR`, `WARN`, `INFO`, `DEBUG` and `TRACE`.

`disable()` stops all output, and `enabled()` reports whether the handler
still writes. Errors raised by the output propagate unless
`ignore_errors=True`.

## What this package does not do

It only models data. It does not call into firmware. It has no system
tables, no boot or runtime services, no protocols and no memory allocation.

## Running the tests

```
pip install .[test]
pytest
```