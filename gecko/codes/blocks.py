"""
Termination rules for the embedded assembly blocks of 0xC0 and 0xC2 codes.

Neither block has a trustworthy length. Each one is read as a stream of
instruction-word pairs fed into a small state machine that starts ACTIVE and
ends CLOSED once one of its rules fires. The machine remembers which rule
closed it (or that none did) so each rule can be checked on its own.
"""

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

BLR = 0x4E800020
NOP = 0x60000000


class BlockState(enum.Enum):
    ACTIVE = "active"
    CLOSED = "closed"


class Closure(enum.Enum):
    # 0xC0: either word of a pair is blr
    BLR = "blr"
    # 0xC2: a nop followed by a zero word
    NOP_ZERO_PAIR = "nop+zero"
    # 0xC2: a nop in the second slot of a pair
    TRAILING_NOP = "trailing nop"
    # the input ran out first
    END_OF_INPUT = "end of input"
    # 0xC0: the declared line count ran out first
    LINE_COUNT = "line count"


@dataclass
class AssemblyBlock(ABC):
    """Instruction words accepted so far, plus where the block stands."""

    words: List[int] = field(default_factory=list)
    state: BlockState = BlockState.ACTIVE
    closure: Optional[Closure] = None
    pairs_read: int = 0

    @property
    def closed(self) -> bool:
        return self.state is BlockState.CLOSED

    def close(self, closure: Closure) -> None:
        assert not self.closed, "block already closed"
        self.state = BlockState.CLOSED
        self.closure = closure

    @abstractmethod
    def feed(self, left: int, right: int) -> None:
        """Accept one pair of instruction words."""

    def finish(self, closure: Closure) -> None:
        if not self.closed:
            self.close(closure)


class ExecuteBlock(AssemblyBlock):
    """0xC0: closes on ``blr`` in either slot; the ``blr`` itself is kept."""

    def feed(self, left: int, right: int) -> None:
        assert not self.closed
        self.pairs_read += 1
        for word in (left, right):
            self.words.append(word)
            if word == BLR:
                self.close(Closure.BLR)
                return


class InsertBlock(AssemblyBlock):
    """0xC2: closes on ``nop, 0`` or on a ``nop`` in the second slot."""

    def feed(self, left: int, right: int) -> None:
        assert not self.closed
        self.pairs_read += 1
        if (left, right) == (NOP, 0):
            self.close(Closure.NOP_ZERO_PAIR)
            return
        self.words.append(left)
        if right == NOP:
            self.close(Closure.TRAILING_NOP)
            return
        self.words.append(right)
