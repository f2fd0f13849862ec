import pytest

from libftx.numfmt import (
    FormatSpec,
    Modifier,
    adjusted_length,
    signed_itoa,
    unsigned_itoa,
)


@pytest.mark.parametrize("n", [0, 7, 42, -5, -2147483648, 9223372036854775807])
def test_signed_plain_matches_str(n):
    assert signed_itoa(n, FormatSpec(type="d")) == str(n)


@pytest.mark.parametrize("n", [1000, 12345, 123456, 1234567, 2147483647])
def test_signed_grouping_matches_comma_format(n):
    spec = FormatSpec(type="d", group=True)
    assert signed_itoa(n, spec) == f"{n:,}"
    assert spec.group is True


def test_signed_grouping_cleared_when_no_comma_needed():
    spec = FormatSpec(type="d", group=True)
    assert signed_itoa(123, spec) == "123"
    assert spec.group is False


def test_signed_grouping_cleared_for_negative():
    spec = FormatSpec(type="d", group=True)
    assert signed_itoa(-1234, spec) == "-1234"
    assert spec.group is False


def test_signed_precision_zero_pads():
    assert signed_itoa(7, FormatSpec(type="d", precision=3)) == "007"


def test_signed_negative_precision_keeps_length():
    text = signed_itoa(-5, FormatSpec(type="d", precision=4))
    assert text.startswith("-")
    assert len(text) == 4
    assert int(text) == -5


@pytest.mark.parametrize("n", [0, 1, 255, 4096, 2**64 - 1])
def test_unsigned_hex_lower(n):
    assert unsigned_itoa(n, FormatSpec(type="x"), 16) == format(n, "x")


@pytest.mark.parametrize("n", [10, 255, 48879])
def test_unsigned_hex_upper(n):
    assert unsigned_itoa(n, FormatSpec(type="X"), 16) == format(n, "X")


@pytest.mark.parametrize("n", [0, 9, 4294967295])
def test_unsigned_decimal(n):
    assert unsigned_itoa(n, FormatSpec(type="u"), 10) == str(n)


@pytest.mark.parametrize("n", [1000, 999999, 4294967295])
def test_unsigned_grouping(n):
    spec = FormatSpec(type="u", group=True)
    assert unsigned_itoa(n, spec, 10) == f"{n:,}"


def test_unsigned_hex_ignores_grouping():
    spec = FormatSpec(type="x", group=True)
    assert unsigned_itoa(65535, spec, 16) == format(65535, "x")


def test_unsigned_precision_pads():
    assert unsigned_itoa(255, FormatSpec(type="x", precision=6), 16) == format(255, "06x")


def test_unsigned_zero_ignores_precision():
    assert unsigned_itoa(0, FormatSpec(type="x", precision=5), 16) == "0"


def test_unsigned_rejects_negative():
    with pytest.raises(ValueError):
        unsigned_itoa(-1, FormatSpec(type="u"), 10)


def test_adjusted_length_uses_width():
    assert adjusted_length(FormatSpec(type="d", width=10), 3) == 10


def test_adjusted_length_string_precision_truncates():
    assert adjusted_length(FormatSpec(type="s", precision=2), 5) == 2


def test_adjusted_length_number_precision_extends():
    assert adjusted_length(FormatSpec(type="d", precision=6), 3) == 6


def test_adjusted_length_unset_precision_and_matching_width():
    assert adjusted_length(FormatSpec(type="d", width=4), 4) == 4


def test_modifier_values_follow_declaration():
    assert [m.value for m in (Modifier.L, Modifier.LL, Modifier.H, Modifier.HH)] == [1, 2, 3, 4]
    assert FormatSpec().modifier is Modifier.NONE