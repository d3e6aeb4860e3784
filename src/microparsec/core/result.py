import logging
from enum import Enum
from typing import Callable, Generic, NoReturn, TypeVar, Union

from typing_extensions import Literal, final

from ..types import ParseError

A = TypeVar("A")
A_co = TypeVar("A_co", covariant=True)
B = TypeVar("B")

logger = logging.getLogger(__name__)


class Denial(Enum):
    DENY = "deny"


@final
class Ok(Generic[A_co]):
    __slots__ = "value", "stream", "pos"

    is_ok: Literal[True] = True

    def __init__(self, value: A_co, stream: str, pos: int):
        self.value = value
        self.stream = stream
        self.pos = pos

    @property
    def rest(self) -> str:
        return self.stream[self.pos:]

    def __repr__(self) -> str:
        return "Ok(value={!r}, rest={!r})".format(self.value, self.rest)

    def __eq__(self, other: object) -> bool:
        if type(other) is not Ok:
            return NotImplemented
        if self.value != other.value:
            return False
        if self.stream is other.stream:
            return self.pos == other.pos
        return self.rest == other.rest

    def __hash__(self) -> int:
        return hash((self.value, self.rest))

    def fmap(self, fn: Callable[[A_co], B]) -> "Ok[B]":
        return Ok(fn(self.value), self.stream, self.pos)

    def unwrap(self) -> A_co:
        return self.value


@final
class Error:
    __slots__ = "reason",

    is_ok: Literal[False] = False

    def __init__(self, reason: Denial = Denial.DENY):
        self.reason = reason

    def __repr__(self) -> str:
        return "Error(reason={!r})".format(self.reason)

    def __eq__(self, other: object) -> bool:
        if type(other) is not Error:
            return NotImplemented
        return self.reason is other.reason

    def __hash__(self) -> int:
        return hash(self.reason)

    def fmap(self, fn: object) -> "Error":
        return self

    def unwrap(self) -> NoReturn:
        logger.debug("Unwrapping failed parse: %s", self.reason.name)
        raise ParseError(self.reason)


Result = Union[Ok[A], Error]
