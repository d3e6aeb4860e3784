from abc import abstractmethod
from typing import Callable, Generic, TypeVar, Union

from .result import Result

A = TypeVar("A")
A_co = TypeVar("A_co", covariant=True)


ParseFn = Callable[[str, int], Result[A_co]]


class ParseObj(Generic[A_co]):
    @abstractmethod
    def parse_fn(self, stream: str, pos: int) -> Result[A_co]:
        ...

    def to_fn(self) -> ParseFn[A_co]:
        return self.parse_fn


ParserLike = Union[ParseObj[A], ParseFn[A]]


def to_fn(parser: ParserLike[A]) -> ParseFn[A]:
    if isinstance(parser, ParseObj):
        return parser.to_fn()
    return parser
