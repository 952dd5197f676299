"""Code point tests — pure tests for classification predicates.

Tests cover:
    - ASCII whitespace is exactly five code points (U+000B excluded)
    - Alpha/digit/hex ranges, int and one-character str inputs
    - C0 control vs control (U+007F), surrogates, scalar values
    - Noncharacters in every plane
    - as_code_point / format_code_point boundary validation
"""

import pytest

from whatwg_infra.core.code_points import (
    as_code_point,
    format_code_point,
    is_ascii_alpha,
    is_ascii_alphanumeric,
    is_ascii_byte,
    is_ascii_code_point,
    is_ascii_digit,
    is_ascii_hex_digit,
    is_ascii_lower_alpha,
    is_ascii_lower_hex_digit,
    is_ascii_tab_or_newline,
    is_ascii_upper_alpha,
    is_ascii_upper_hex_digit,
    is_ascii_whitespace,
    is_c0_control,
    is_c0_control_or_space,
    is_control,
    is_leading_surrogate,
    is_noncharacter,
    is_scalar_value,
    is_surrogate,
    is_trailing_surrogate,
)
from whatwg_infra.core.errors import ErrorCategory, InvalidCodePointError


# ─── ASCII whitespace ────────────────────────────────────────────

def test_ascii_whitespace_is_exactly_five_code_points():
    matches = {c for c in range(0x80) if is_ascii_whitespace(c)}
    assert matches == {0x09, 0x0A, 0x0C, 0x0D, 0x20}


def test_vertical_tab_is_not_ascii_whitespace():
    assert is_ascii_whitespace(0x0B) is False
    assert is_ascii_whitespace("\x0b") is False


def test_unicode_spaces_are_not_ascii_whitespace():
    assert not is_ascii_whitespace("\u00a0")
    assert not is_ascii_whitespace("\u3000")
    assert not is_ascii_whitespace(0x2028)


def test_tab_or_newline_excludes_form_feed_and_space():
    assert is_ascii_tab_or_newline("\t")
    assert is_ascii_tab_or_newline("\n")
    assert is_ascii_tab_or_newline("\r")
    assert not is_ascii_tab_or_newline("\x0c")
    assert not is_ascii_tab_or_newline(" ")


# ─── ASCII ranges ────────────────────────────────────────────────

def test_ascii_byte_bounds():
    assert is_ascii_byte(0x00)
    assert is_ascii_byte(0x7F)
    assert not is_ascii_byte(0x80)
    assert not is_ascii_byte(0xFF)
    assert not is_ascii_byte(-1)


def test_ascii_code_point_accepts_str():
    assert is_ascii_code_point("a")
    assert not is_ascii_code_point("é")


def test_alpha_ranges():
    assert {chr(c) for c in range(0x80) if is_ascii_upper_alpha(c)} == set(
        "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    )
    assert {chr(c) for c in range(0x80) if is_ascii_lower_alpha(c)} == set(
        "abcdefghijklmnopqrstuvwxyz"
    )
    assert is_ascii_alpha("Q")
    assert is_ascii_alpha("q")
    assert not is_ascii_alpha("@")
    assert not is_ascii_alpha("[")
    assert not is_ascii_alpha("é")


def test_digits_and_alphanumeric():
    assert all(is_ascii_digit(c) for c in "0123456789")
    assert not is_ascii_digit("\u0663")  # ARABIC-INDIC DIGIT THREE
    assert is_ascii_alphanumeric("7")
    assert is_ascii_alphanumeric("z")
    assert not is_ascii_alphanumeric("_")


def test_hex_digits():
    assert is_ascii_upper_hex_digit("F")
    assert not is_ascii_upper_hex_digit("f")
    assert is_ascii_lower_hex_digit("f")
    assert not is_ascii_lower_hex_digit("F")
    assert is_ascii_hex_digit("9")
    assert not is_ascii_hex_digit("g")
    assert not is_ascii_hex_digit("G")


def test_out_of_range_ints_fail_range_tests():
    assert not is_ascii_alpha(0x41 + 0x110000)
    assert not is_ascii_digit(-0x30)


# ─── Controls ────────────────────────────────────────────────────

def test_c0_control_excludes_delete():
    assert is_c0_control(0x00)
    assert is_c0_control(0x1E)
    assert is_c0_control(0x1F)
    assert not is_c0_control(0x20)
    assert not is_c0_control(0x7F)


def test_c0_control_or_space():
    assert is_c0_control_or_space(" ")
    assert is_c0_control_or_space("\x00")
    assert not is_c0_control_or_space("!")


def test_control_includes_delete_and_c1():
    assert is_control(0x7F)
    assert is_control(0x80)
    assert is_control(0x9F)
    assert is_control(0x01)
    assert not is_control(0xA0)


# ─── Surrogates, scalar values, noncharacters ────────────────────

def test_surrogate_ranges():
    assert is_leading_surrogate(0xD800)
    assert is_leading_surrogate(0xDBFF)
    assert not is_leading_surrogate(0xDC00)
    assert is_trailing_surrogate(0xDC00)
    assert is_trailing_surrogate(0xDFFF)
    assert is_surrogate("\ud83d")
    assert not is_surrogate(0xE000)


def test_scalar_value_excludes_surrogates_and_out_of_range():
    assert is_scalar_value(0x0)
    assert is_scalar_value(0x10FFFF)
    assert not is_scalar_value(0xDABC)
    assert not is_scalar_value(0x110000)


def test_noncharacters():
    assert is_noncharacter("\ufdd0")
    assert is_noncharacter("\ufdd1")
    assert is_noncharacter("\ufdef")
    assert is_noncharacter("\ufffe")
    assert is_noncharacter("\U0010ffff")
    for plane in range(17):
        assert is_noncharacter(plane * 0x10000 + 0xFFFE)
        assert is_noncharacter(plane * 0x10000 + 0xFFFF)


def test_characters_next_to_noncharacters():
    assert not is_noncharacter(0xFDCF)
    assert not is_noncharacter(0xFDF0)
    assert not is_noncharacter(0xFFFD)
    assert not is_noncharacter(0x1FFFD)
    assert not is_noncharacter(0x11FFFE)


# ─── Boundary ────────────────────────────────────────────────────

def test_predicate_rejects_multi_character_str():
    with pytest.raises(InvalidCodePointError) as excinfo:
        is_ascii_alpha("ab")
    assert excinfo.value.code == "INVALID_CODE_POINT"
    assert excinfo.value.category == ErrorCategory.VALIDATION


def test_predicate_rejects_empty_str_and_other_types():
    with pytest.raises(InvalidCodePointError):
        is_ascii_digit("")
    with pytest.raises(InvalidCodePointError):
        is_ascii_digit(4.0)
    with pytest.raises(InvalidCodePointError):
        is_ascii_digit(b"4")


def test_as_code_point_accepts_int_and_char():
    assert as_code_point(0x41) == 0x41
    assert as_code_point("A") == 0x41
    assert as_code_point(0x10FFFF) == 0x10FFFF


def test_as_code_point_rejects_out_of_range():
    with pytest.raises(InvalidCodePointError):
        as_code_point(-1)
    with pytest.raises(InvalidCodePointError):
        as_code_point(0x110000)


def test_as_code_point_does_not_coerce_numeric_strings():
    with pytest.raises(InvalidCodePointError):
        as_code_point("65")
    with pytest.raises(InvalidCodePointError):
        as_code_point(65.0)


def test_format_code_point():
    assert format_code_point(0x41) == "U+0041"
    assert format_code_point("\x00") == "U+0000"
    assert format_code_point(0x1F600) == "U+1F600"
    assert format_code_point(0x10FFFF) == "U+10FFFF"
