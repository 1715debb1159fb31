"""Operand variants and the instruction text value shared by both codec directions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .tokens import TBegMem, TEndMem, TInstr, TInt, TReg, TSep, Token, asm_str

# An instruction never carries more than five logical operands (psq_l,
# rlwinm, ...); unused slots are reported as ABSENT.
MAX_OPERANDS = 5

REGISTER_KINDS = ("r", "f", "cr")


@dataclass(frozen=True)
class Register:
    kind: str
    index: int

    @property
    def value(self) -> int:
        return self.index

    def render(self) -> List[Token]:
        return [TReg(f"{self.kind}{self.index}")]


@dataclass(frozen=True)
class Immediate:
    value: int

    @property
    def u16(self) -> int:
        """The value reinterpreted as an unsigned 16-bit field."""
        return self.value & 0xFFFF

    def render(self) -> List[Token]:
        return [TInt(self.value)]


class _Absent:
    _instance: Optional["_Absent"] = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()

Operand = Union[Register, Immediate]
Slot = Union[Register, Immediate, _Absent]


@dataclass(frozen=True)
class InstructionText:
    mnemonic: str
    operands: Tuple[Operand, ...] = ()
    # index of the displacement rendered as ``imm(reg)``; the base register
    # is the operand right after it
    offset_at: Optional[int] = None

    def slots(self) -> Tuple[Slot, ...]:
        padded: List[Slot] = list(self.operands)
        padded += [ABSENT] * (MAX_OPERANDS - len(padded))
        return tuple(padded)

    def render(self) -> List[Token]:
        tokens: List[Token] = [TInstr(self.mnemonic)]
        if self.operands:
            tokens.append(TSep(" "))

        index = 0
        while index < len(self.operands):
            if index > 0:
                tokens.append(TSep(", "))
            operand = self.operands[index]
            tokens += operand.render()
            if index == self.offset_at and index + 1 < len(self.operands):
                tokens.append(TBegMem())
                tokens += self.operands[index + 1].render()
                tokens.append(TEndMem())
                index += 1
            index += 1
        return tokens

    def __str__(self) -> str:
        return asm_str(self.render())
