"""
Public API.
"""

import logging

from . import text
from .core.parser import ParseFn
from .core.result import Denial, Error, Ok, Result
from .parser import FnParser, Parser, fmap, lexeme
from .text import character, digit, digits, string
from .types import ParseError

__all__ = (
    "text",
    "ParseFn",
    "Denial", "Error", "Ok", "Result",
    "ParseError",

    "FnParser", "Parser", "fmap", "lexeme",
    "character", "digit", "digits", "string"
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
