import pytest

from pushswap.errors import PushSwapError


def test_default_message_is_error():
    assert str(PushSwapError()) == "Error"


def test_custom_message_is_kept():
    err = PushSwapError("bad input")
    assert str(err) == "bad input"
    assert err.message == "bad input"


def test_can_be_caught_as_value_error():
    err = PushSwapError()
    with pytest.raises(ValueError) as info:
        raise err
    assert info.value is err
    assert err.message == "Error"
    assert str(info.value) == "Error"