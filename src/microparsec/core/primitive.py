import re

from .chars import ASCII_DIGITS
from .parser import ParseFn
from .result import Error, Ok, Result

_DIGITS_RE = re.compile("[0-9]+")


def digit(stream: str, pos: int) -> Result[int]:
    if pos < len(stream):
        c = stream[pos]
        if c in ASCII_DIGITS:
            return Ok(ord(c) - ord("0"), stream, pos + 1)
    return Error()


def digits(stream: str, pos: int) -> Result[int]:
    r = _DIGITS_RE.match(stream, pos)
    if r is None:
        return Error()
    try:
        value = int(r.group())
    except ValueError:
        # Run is longer than sys.get_int_max_str_digits() allows.
        return Error()
    return Ok(value, stream, r.end())


def character(c: str) -> ParseFn[None]:
    if len(c) != 1:
        raise ValueError("Expected a single character, got {!r}".format(c))

    def character(stream: str, pos: int) -> Result[None]:
        if stream.startswith(c, pos):
            return Ok(None, stream, pos + 1)
        return Error()

    return character


def string(s: str) -> ParseFn[None]:
    ls = len(s)

    def string(stream: str, pos: int) -> Result[None]:
        if stream.startswith(s, pos):
            return Ok(None, stream, pos + ls)
        return Error()

    return string
