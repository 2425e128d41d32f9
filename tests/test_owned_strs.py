import pytest

from efitypes.chars import NUL_16, Char16
from efitypes.owned_strs import CString16, FromStrError
from efitypes.strs import CStr16, StrErrorKind


def test_cstring16_from_str():
    assert CString16.from_str("x") == CString16([Char16.from_char("x"), NUL_16])

    with pytest.raises(FromStrError) as info:
        CString16.from_str("\U0001F600")
    assert info.value.kind is StrErrorKind.INVALID_CHAR

    with pytest.raises(FromStrError) as info:
        CString16.from_str("x\0")
    assert info.value.kind is StrErrorKind.INTERIOR_NUL


def test_round_trip():
    s = CString16.from_str("abc")
    assert s.as_string() == "abc"
    assert str(s) == "abc"


def test_as_cstr16():
    s = CString16.from_str("AB")
    assert s.as_cstr16() == CStr16.from_u16_with_nul([65, 66, 0])
    assert s.as_cstr16().num_bytes() == 6


def test_empty_string_holds_only_nul():
    s = CString16.from_str("")
    assert s.chars == (NUL_16,)
    assert s.as_string() == ""


def test_iteration_skips_nul():
    s = CString16.from_str("hi")
    assert list(s) == [Char16.from_char("h"), Char16.from_char("i")]


def test_ordering():
    assert CString16.from_str("a") < CString16.from_str("b")