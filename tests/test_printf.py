import io

import pytest

from ftlib.printf import printf, sprintf, uitoa, uitoa_hex


@pytest.mark.parametrize("n", [0, 1, 9, 10, 123456, 2**31, 2**32 - 1])
def test_uitoa_round_trip(n):
    assert int(uitoa(n)) == n
    assert uitoa(n) == str(n)


def test_uitoa_max():
    assert uitoa(4294967295) == "4294967295"


@pytest.mark.parametrize("n", [-1, 2**32])
def test_uitoa_out_of_range(n):
    with pytest.raises(OverflowError):
        uitoa(n)


@pytest.mark.parametrize("n", [0, 1, 15, 16, 255, 48879, 2**32 - 1])
def test_uitoa_hex_round_trip(n):
    lower = uitoa_hex(n, "x")
    upper = uitoa_hex(n, "X")
    assert int(lower, 16) == n
    assert int(upper, 16) == n
    assert lower == lower.lower()
    assert upper == upper.upper()
    assert upper == lower.upper()


def test_uitoa_hex_zero():
    assert uitoa_hex(0, "x") == "0"


def test_uitoa_hex_bad_case():
    with pytest.raises(ValueError):
        uitoa_hex(10, "q")


def test_uitoa_hex_out_of_range():
    with pytest.raises(OverflowError):
        uitoa_hex(2**32, "x")


def test_plain_text_passes_through():
    assert sprintf("hello world") == "hello world"


def test_format_stops_at_nul():
    assert sprintf("abc\0def") == "abc"


def test_char_conversion():
    assert sprintf("%c", ord("A")) == "A"
    assert sprintf("[%c]", "z") == "[z]"


def test_string_conversion():
    assert sprintf("say %s!", "hi") == "say hi!"


def test_null_string():
    assert sprintf("%s", None) == "(null)"


def test_string_cut_at_nul():
    assert sprintf("%s", "ab\0cd") == "ab"


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648])
def test_signed_conversions(n):
    assert int(sprintf("%d", n)) == n
    assert sprintf("%i", n) == sprintf("%d", n)


def test_signed_wraps_to_32_bits():
    assert int(sprintf("%d", 2**32 + 5)) == 5
    assert int(sprintf("%d", 2**31)) == -(2**31)


def test_unsigned_of_negative_wraps():
    assert sprintf("%u", -1) == "4294967295"


@pytest.mark.parametrize("n", [0, 10, 3735928559])
def test_hex_conversions(n):
    assert int(sprintf("%x", n), 16) == n
    assert sprintf("%X", n) == sprintf("%x", n).upper()


def test_pointer_conversion():
    assert sprintf("%p", None) == "0x0"
    out = sprintf("%p", 4096)
    assert out.startswith("0x")
    assert int(out, 16) == 4096


def test_pointer_of_object_uses_identity():
    obj = object()
    assert int(sprintf("%p", obj), 16) == id(obj)


def test_percent_literal():
    assert sprintf("100%%") == "100%"


def test_unknown_conversion_drops_percent():
    assert sprintf("a%qb") == "aqb"


def test_trailing_percent_dropped():
    assert sprintf("end%") == "end"
    assert sprintf("%%%") == "%"


def test_consecutive_conversions_consume_args_in_order():
    assert sprintf("%s%s%s", "a", "b", "c") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d %d", 1)


def test_wrong_string_type_raises():
    with pytest.raises(TypeError):
        sprintf("%s", 5)


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("x=%d s=%s%%", 12, "ok", stream=stream)
    written = stream.getvalue()
    assert written == sprintf("x=%d s=%s%%", 12, "ok")
    assert count == len(written)


def test_printf_counts_nul_char():
    stream = io.StringIO()
    assert printf("%c", 0, stream=stream) == 1
    assert stream.getvalue() == "\0"


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s-%u", "v", 3)
    captured = capsys.readouterr().out
    assert captured == "v-3"
    assert count == len(captured)