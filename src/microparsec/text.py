"""
Primitive parsers over Unicode text.

Input is addressed by codepoint, so a multi-byte character such as an
ideograph or an emoji is a single unit of input.
"""

from .core import primitive
from .parser import FnParser, Parser

__all__ = ("digit", "digits", "character", "string")


digit: Parser[int] = FnParser(primitive.digit)
"""
Parses a single ASCII digit and returns its integer value.

>>> from microparsec.text import digit

>>> digit("123")
Ok(value=1, rest='23')
>>> digit("五")
Error(reason=<Denial.DENY: 'deny'>)
"""

digits: Parser[int] = FnParser(primitive.digits)
"""
Parses the longest run of ASCII digits and returns its integer value.

>>> from microparsec.text import digits

>>> digits("12.3")
Ok(value=12, rest='.3')
>>> digits("010")
Ok(value=10, rest='')
"""


def character(c: str) -> Parser[None]:
    """
    Parses exactly the codepoint ``c``.

    >>> from microparsec.text import character

    >>> parser = character("A")

    >>> parser("Abcd")
    Ok(value=None, rest='bcd')
    >>> parser("abcd")
    Error(reason=<Denial.DENY: 'deny'>)

    :param c: Codepoint to match
    :raise: :exc:`ValueError` if ``c`` is not a single codepoint
    """

    return FnParser(primitive.character(c))


def string(s: str) -> Parser[None]:
    """
    Parses the literal ``s`` as an exact prefix of the input. An empty
    literal always succeeds and consumes nothing.

    >>> from microparsec.text import string

    >>> parser = string("abc")

    >>> parser("abcabc")
    Ok(value=None, rest='abc')
    >>> parser("ab")
    Error(reason=<Denial.DENY: 'deny'>)

    :param s: Literal to match
    """

    return FnParser(primitive.string(s))
