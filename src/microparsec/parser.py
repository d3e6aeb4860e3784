"""
Core parser API.
"""

from typing import Callable, TypeVar

from .core import combinators
from .core.parser import ParseFn, ParseObj, ParserLike, to_fn
from .core.result import Result

__all__ = ("Parser", "FnParser", "fmap", "lexeme")

A = TypeVar("A")
A_co = TypeVar("A_co", covariant=True)
B = TypeVar("B")


class Parser(ParseObj[A_co]):
    def parse(self, stream: str, pos: int = 0) -> Result[A_co]:
        """
        Parses the input starting at ``pos``.

        The remainder of a successful result is a view into ``stream``: it is
        not copied until :attr:`Ok.rest <microparsec.core.result.Ok.rest>` is
        read.

        :param stream: Input to parse
        :param pos: Offset of the first codepoint to parse
        :raise: :exc:`ValueError` if ``pos`` is outside ``0..len(stream)``
        """

        if not 0 <= pos <= len(stream):
            raise ValueError(
                "Offset {!r} is outside of the input".format(pos)
            )
        return self.parse_fn(stream, pos)

    def __call__(self, stream: str) -> Result[A_co]:
        return self.parse_fn(stream, 0)

    def fmap(self, fn: Callable[[A_co], B]) -> "Parser[B]":
        """
        Transforms the result of the parser by applying ``fn`` to it.

        >>> from microparsec.text import digits

        >>> digits.fmap(lambda x: x + 1)("123")
        Ok(value=124, rest='')

        :param fn: Function to produce new value from the result of the parser
        """

        return fmap(self, fn)

    def lexeme(self) -> "Parser[A_co]":
        """
        Skips leading whitespace before applying the parser.

        >>> from microparsec.text import digits

        >>> digits.lexeme()("  42 ")
        Ok(value=42, rest=' ')
        """

        return lexeme(self)


class FnParser(Parser[A_co]):
    def __init__(self, fn: ParseFn[A_co]):
        self._fn = fn

    def to_fn(self) -> ParseFn[A_co]:
        return self._fn

    def parse_fn(self, stream: str, pos: int) -> Result[A_co]:
        return self._fn(stream, pos)


def fmap(parser: ParserLike[A], fn: Callable[[A], B]) -> Parser[B]:
    """
    Returns a parser that applies ``fn`` to the value of a successful parse.
    The remainder is left as is and failures are passed through unchanged.

    >>> from microparsec.parser import fmap
    >>> from microparsec.text import digit

    >>> parser = fmap(digit, str)

    >>> parser("7a")
    Ok(value='7', rest='a')
    >>> parser("a7")
    Error(reason=<Denial.DENY: 'deny'>)

    :param parser: Parser to run
    :param fn: Function to produce new value from the result of the parser
    """

    return FnParser(combinators.fmap(to_fn(parser), fn))


def lexeme(parser: ParserLike[A]) -> Parser[A]:
    """
    Returns a parser that discards the leading run of Unicode whitespace and
    then applies ``parser``. Whitespace after the token is left in the
    remainder.

    >>> from microparsec.parser import lexeme
    >>> from microparsec.text import digits

    >>> lexeme(digits)("\\t 123 abc")
    Ok(value=123, rest=' abc')
    >>> lexeme(digits)("   ")
    Error(reason=<Denial.DENY: 'deny'>)

    :param parser: Parser to apply after the whitespace
    """

    return FnParser(combinators.lexeme(to_fn(parser)))
