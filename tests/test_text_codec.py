import pytest

from textrsa.text_codec import (
    CharsToText,
    CharsToUnits,
    TextToChars,
    TextToUnits,
    UnitsToBinary,
    UnitsToChars,
    UnitsToText,
)


def test_text_to_units_preserves_order():
    assert TextToUnits("Hi!") == [72, 105, 33]
    assert TextToUnits("") == []


def test_units_to_text_inverts():
    for text in ("Hello", "ünïcödé", "\U0001F600 emoji", " spaced  out "):
        assert UnitsToText(TextToUnits(text)) == text


def test_step_by_step_pipeline():
    chars = TextToChars("abc")
    assert chars == ["a", "b", "c"]
    units = CharsToUnits(chars)
    assert units == [97, 98, 99]
    assert UnitsToChars(units) == chars
    assert CharsToText(chars) == "abc"


@pytest.mark.parametrize("unit", [-1, 0x110000])
def test_units_outside_code_point_range(unit):
    with pytest.raises(ValueError):
        UnitsToText([65, unit])


def test_units_to_binary():
    assert UnitsToBinary([72, 5, 0]) == ["1001000", "101", "0"]
