import pytest

from envbind.utils import INT_MAX, INT_MIN, ConversionError, ErrorCode, parse_int


def test_parse_int_accepts_signed_decimal():
    assert parse_int("8080") == 8080
    assert parse_int("-12") == -12
    assert parse_int("+7") == 7
    assert parse_int("007") == 7
    assert parse_int(str(INT_MAX)) == INT_MAX
    assert parse_int(str(INT_MIN)) == INT_MIN


@pytest.mark.parametrize("text", ["", None, " 1", "1 ", "1_000", "0x10", "1.5", "+", "abc", "١٢"])
def test_parse_int_rejects_non_literals(text):
    with pytest.raises(ConversionError) as e:
        parse_int(text)
    assert e.value.reason == "invalid syntax"
    assert e.value.code is ErrorCode.CONVERSION_ERROR


def test_parse_int_out_of_range():
    with pytest.raises(ConversionError) as e:
        parse_int(str(INT_MAX + 1))
    assert e.value.reason == "value out of range"


def test_conversion_error_message_includes_key():
    with pytest.raises(ConversionError) as e:
        parse_int("x", key="PORT")
    assert str(e.value) == "PORT: parsing 'x': invalid syntax"

