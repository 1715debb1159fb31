import pytest

from .errors import CodeParseError
from .text import parse_code_text


def test_parses_code_lines() -> None:
    text = """
$Infinite Health [someone]
*Keeps the player alive.
04001040 00000001  # health
C6000100 80001234
"""
    assert parse_code_text(text) == [0x04001040, 0x00000001, 0xC6000100, 0x80001234]


def test_lowercase_hex() -> None:
    assert parse_code_text("c2001000 0000000a") == [0xC2001000, 0x0000000A]


def test_empty_text() -> None:
    assert parse_code_text("\n  \n# nothing\n") == []


@pytest.mark.parametrize("text", ["0400104 00000001", "0400104Z 00000001", "040010400 1"])
def test_invalid_tokens(text: str) -> None:
    with pytest.raises(CodeParseError):
        parse_code_text(text)
