from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from .errors import TruncatedCodeError


@dataclass
class WordCursor:
    """
    Sequential reader over the 32-bit words of one Gecko code.

    The cursor only moves forward. Every read is bounds checked and raises
    TruncatedCodeError instead of indexing past the end.
    """

    words: Tuple[int, ...]
    idx: int = 0

    @classmethod
    def over(cls, words: Sequence[int]) -> "WordCursor":
        return cls(tuple(words))

    def _require(self, count: int) -> None:
        if self.idx + count > len(self.words):
            raise TruncatedCodeError(self.idx + count - 1, len(self.words))

    def peek(self) -> int:
        self._require(1)
        return self.words[self.idx]

    def read_and_advance(self) -> int:
        self._require(1)
        value = self.words[self.idx]
        self.idx += 1
        return value

    def read_pair(self) -> Tuple[int, int]:
        self._require(2)
        first = self.read_and_advance()
        return first, self.read_and_advance()

    def read_words(self, count: int) -> Tuple[int, ...]:
        self._require(count)
        chunk = self.words[self.idx : self.idx + count]
        self.idx += count
        return chunk

    def position(self) -> int:
        return self.idx

    def remaining(self) -> int:
        return len(self.words) - self.idx

    def at_end(self) -> bool:
        return self.idx >= len(self.words)
