from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .core.result import Denial


class ParseError(Exception):
    """
    Exception that is raised by :meth:`Error.unwrap
    <microparsec.core.result.Error.unwrap>` when a caller asks for the value
    of a failed parse.

    Parsers themselves never raise it.

    :param reason: Reason carried by the failed result
    """

    def __init__(self, reason: "Denial"):
        super().__init__(reason)
        self.reason = reason

    def __str__(self) -> str:
        return "input rejected ({})".format(self.reason.name)
