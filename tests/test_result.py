import logging

import pytest

from microparsec import Denial, Error, Ok, ParseError
from microparsec.text import digits


def test_ok_equality_is_structural() -> None:
    assert Ok(1, "a1b", 2) == Ok(1, "b", 0)
    assert Ok(1, "a1b", 2) != Ok(2, "a1b", 2)
    assert Ok(1, "a1b", 2) != Ok(1, "a1b", 1)
    assert hash(Ok(1, "a1b", 2)) == hash(Ok(1, "b", 0))


def test_error_equality() -> None:
    assert Error() == Error(Denial.DENY)
    assert hash(Error()) == hash(Error(Denial.DENY))
    assert Error() != Ok(None, "", 0)
    assert Ok(None, "", 0) != Error()


def test_rest_is_a_suffix_of_the_input() -> None:
    data = "12.3"
    r = digits(data)
    assert type(r) is Ok
    assert r.rest == ".3"
    assert data[:r.pos] + r.rest == data


def test_is_ok() -> None:
    assert digits("1").is_ok
    assert not digits("x").is_ok


def test_repr() -> None:
    assert repr(digits("12.3")) == "Ok(value=12, rest='.3')"
    assert repr(Error()) == "Error(reason=<Denial.DENY: 'deny'>)"


def test_result_fmap() -> None:
    assert Ok(1, "ab", 1).fmap(str) == Ok("1", "b", 0)
    err = Error()
    assert err.fmap(str) is err


def test_unwrap() -> None:
    assert digits("42").unwrap() == 42


def test_unwrap_error(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="microparsec"):
        with pytest.raises(ParseError) as err:
            digits("x").unwrap()
    assert err.value.reason is Denial.DENY
    assert str(err.value) == "input rejected (DENY)"
    assert "DENY" in caplog.text
