from typing import Iterable, List

from .errors import CodeParseError

# Gecko code lists put a code's title on a line starting with one of these
TITLE_MARKERS = ("$", "*")


def _code_lines(lines: Iterable[str]) -> Iterable[str]:
    for line in lines:
        line = line.split("#", 1)[0].strip()
        if not line or line.startswith(TITLE_MARKERS):
            continue
        yield line


def parse_code_text(text: str) -> List[int]:
    """Turn code text such as ``04001040 00000001`` into its 32-bit words."""
    words: List[int] = []
    for line in _code_lines(text.splitlines()):
        for token in line.split():
            if len(token) != 8:
                raise CodeParseError(f"Expected 8 hex digits, found {token!r}")
            try:
                words.append(int(token, 16))
            except ValueError:
                raise CodeParseError(f"Invalid hex value {token!r}") from None
    return words
