from typing import Callable, TypeVar

from .chars import WHITE_SPACE
from .parser import ParseFn
from .result import Result

A = TypeVar("A")
B = TypeVar("B")


def lexeme(parse_fn: ParseFn[A]) -> ParseFn[A]:
    def lexeme(stream: str, pos: int) -> Result[A]:
        end = len(stream)
        while pos < end and stream[pos] in WHITE_SPACE:
            pos += 1
        return parse_fn(stream, pos)

    return lexeme


def fmap(parse_fn: ParseFn[A], fn: Callable[[A], B]) -> ParseFn[B]:
    def fmap(stream: str, pos: int) -> Result[B]:
        return parse_fn(stream, pos).fmap(fn)

    return fmap
