from .address import resolve_address
from .code_types import CodeType
from .dispatcher import convert_gecko_code
from .errors import (
    CodeParseError,
    EmptyCodeError,
    GeckoCodeError,
    InvalidCodeTypeError,
    MalformedCodeError,
    TruncatedCodeError,
)
from .reader import WordCursor
from .text import parse_code_text

__all__ = [
    "CodeParseError",
    "CodeType",
    "EmptyCodeError",
    "GeckoCodeError",
    "InvalidCodeTypeError",
    "MalformedCodeError",
    "TruncatedCodeError",
    "WordCursor",
    "convert_gecko_code",
    "parse_code_text",
    "resolve_address",
]
