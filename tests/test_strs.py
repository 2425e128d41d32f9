import io

import pytest

from efitypes.chars import Char8, Char16
from efitypes.strs import (
    CStr8,
    CStr16,
    FromSliceWithNulError,
    FromStrWithBufError,
    StrErrorKind,
)


def test_cstr16_num_bytes():
    s = CStr16.from_u16_with_nul([65, 66, 67, 0])
    assert s.num_bytes() == 8


def test_cstr16_from_str_with_buf():
    buf = [0] * 4

    s = CStr16.from_str_with_buf("ABC", buf)
    assert s.to_u16_slice_with_nul() == [65, 66, 67, 0]

    s = CStr16.from_str_with_buf("A", buf)
    assert s.to_u16_slice_with_nul() == [65, 0]

    with pytest.raises(FromStrWithBufError) as info:
        CStr16.from_str_with_buf("ABCD", buf)
    assert info.value.kind is StrErrorKind.BUFFER_TOO_SMALL

    with pytest.raises(FromStrWithBufError) as info:
        CStr16.from_str_with_buf("a\U0001F600", buf)
    assert info.value.kind is StrErrorKind.INVALID_CHAR
    assert info.value.position == 1

    with pytest.raises(FromStrWithBufError) as info:
        CStr16.from_str_with_buf("a\0b", buf)
    assert info.value.kind is StrErrorKind.INTERIOR_NUL
    assert info.value.position == 1


def test_from_str_with_buf_writes_buffer():
    buf = [9] * 6
    CStr16.from_str_with_buf("AB", buf)
    assert buf == [65, 66, 0, 9, 9, 9]


def test_from_str_with_buf_no_room_for_nul():
    with pytest.raises(FromStrWithBufError) as info:
        CStr16.from_str_with_buf("AB", [0, 0])
    assert info.value.kind is StrErrorKind.BUFFER_TOO_SMALL


def test_from_u16_with_nul_interior_nul():
    with pytest.raises(FromSliceWithNulError) as info:
        CStr16.from_u16_with_nul([65, 0, 66, 0])
    assert info.value.kind is StrErrorKind.INTERIOR_NUL
    assert info.value.position == 1


def test_from_u16_with_nul_not_terminated():
    with pytest.raises(FromSliceWithNulError) as info:
        CStr16.from_u16_with_nul([65, 66])
    assert info.value.kind is StrErrorKind.NOT_NUL_TERMINATED
    assert info.value.position is None


def test_from_u16_with_nul_invalid_char():
    with pytest.raises(FromSliceWithNulError) as info:
        CStr16.from_u16_with_nul([65, 0xD800, 0])
    assert info.value.kind is StrErrorKind.INVALID_CHAR
    assert info.value.position == 1


def test_cstr16_slices_and_iteration():
    s = CStr16.from_u16_with_nul([65, 66, 67, 0])
    assert s.to_u16_slice() == [65, 66, 67]
    assert list(s) == [Char16(65), Char16(66), Char16(67)]


def test_cstr16_as_string_round_trip():
    buf = [0] * 8
    s = CStr16.from_str_with_buf("h\u00e9llo", buf)
    assert s.as_string() == "h\u00e9llo"
    assert str(s) == "h\u00e9llo"


def test_cstr16_as_str_in_buf():
    s = CStr16.from_u16_with_nul([65, 66, 67, 0])
    out = io.StringIO()
    s.as_str_in_buf(out)
    assert out.getvalue() == "ABC"


def test_cstr16_repr():
    s = CStr16.from_u16_with_nul([65, 0])
    assert repr(s) == "CStr16(['A', '\\x00'])"


def test_cstr16_empty():
    s = CStr16.from_u16_with_nul([0])
    assert s.as_string() == ""
    assert s.num_bytes() == 2


def test_cstr8_from_bytes_with_nul():
    s = CStr8.from_bytes_with_nul(b"ab\0")
    assert s.to_bytes() == b"ab"
    assert s.to_bytes_with_nul() == b"ab\0"
    assert list(s) == [Char8(97), Char8(98)]


def test_cstr8_interior_nul():
    with pytest.raises(FromSliceWithNulError) as info:
        CStr8.from_bytes_with_nul(b"a\0b\0")
    assert info.value.kind is StrErrorKind.INTERIOR_NUL
    assert info.value.position == 1


def test_cstr8_not_terminated():
    with pytest.raises(FromSliceWithNulError) as info:
        CStr8.from_bytes_with_nul(b"abc")
    assert info.value.kind is StrErrorKind.NOT_NUL_TERMINATED


def test_cstr8_latin1_str():
    s = CStr8.from_bytes_with_nul(bytes([0x63, 0xE9, 0]))
    assert str(s) == "c\u00e9"