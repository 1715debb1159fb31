import logging
import os
from typing import List, NamedTuple, Optional, Sequence, Tuple, Union, cast

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from .opcodes import ARITY, BY_MNEMONIC, Alias, Field, Opcode
from .operands import Immediate, Operand, Register

logger = logging.getLogger(__name__)

grammar_path = os.path.join(os.path.dirname(__file__), "asm.lark")
with open(grammar_path, "r") as f:
    asm_grammar = f.read()

asm_parser = Lark(asm_grammar, parser="earley", lexer="basic", maybe_placeholders=False)

# every immediate token is a 16-bit field, written signed or unsigned
IMM_MIN = -0x8000
IMM_MAX = 0xFFFF


class Offset(NamedTuple):
    """``d(rA)``: one token carrying two logical operands."""

    displacement: Immediate
    base: Register


ParsedOperand = Union[Register, Immediate, Offset]


def parse_number(text: str) -> int:
    negative = text.startswith("-")
    body = text[1:] if negative else text
    if body.lower().startswith("0x"):
        value = int(body[2:], 16)
    else:
        value = int(body, 10)
    return -value if negative else value


class InstructionTransformer(Transformer):
    def start(self, items: List[Union[Token, ParsedOperand]]) -> Tuple[str, List[ParsedOperand]]:
        mnemonic, *operands = items
        return str(mnemonic), operands  # type: ignore[return-value]

    def register(self, items: List[Token]) -> Register:
        text = str(items[0]).lower()
        kind = text.rstrip("0123456789")
        return Register(kind, int(text[len(kind):]))

    def number(self, items: List[Token]) -> Immediate:
        return Immediate(parse_number(str(items[0])))

    def offset(self, items: List[Token]) -> Offset:
        return Offset(self.number([items[0]]), self.register([items[1]]))


def normalize_mnemonic(mnemonic: str) -> str:
    """``andi_`` and ``andi.`` name the same instruction."""
    mnemonic = mnemonic.lower()
    if mnemonic.endswith("_"):
        mnemonic = mnemonic[:-1] + "."
    return mnemonic


def _flatten(operands: Sequence[ParsedOperand]) -> List[Operand]:
    flat: List[Operand] = []
    for operand in operands:
        if isinstance(operand, Offset):
            flat.extend(operand)
        else:
            flat.append(operand)
    return flat


def _field_value(field: Field, operand: Operand) -> Optional[int]:
    if field.kind in ("r", "f"):
        if isinstance(operand, Register) and operand.kind == field.kind:
            return operand.index
        return None
    if field.kind == "cr":
        # condition register fields are commonly written as bare numbers
        if isinstance(operand, Register) and operand.kind != "cr":
            return None
        return operand.value
    if isinstance(operand, Immediate):
        return operand.value
    return None


def assemble(line: str) -> Optional[int]:
    """Assemble one line such as ``lwz r3, 0x4(r3)`` into an instruction word.

    Every failure (unknown mnemonic, operand count mismatch, malformed operand,
    value out of range) is reported as None.
    """
    try:
        tree = asm_parser.parse(line.strip())
        mnemonic, operands = InstructionTransformer().transform(tree)
    except (LarkError, ValueError) as e:
        logger.debug("rejecting %r: %s", line, e)
        return None

    mnemonic = normalize_mnemonic(mnemonic)
    entry = BY_MNEMONIC.get(mnemonic)
    if entry is None:
        logger.debug("rejecting %r: unknown mnemonic %s", line, mnemonic)
        return None

    found = len(operands) + sum(1 for op in operands if isinstance(op, Offset))
    if found != ARITY[mnemonic]:
        logger.debug(
            "rejecting %r: %s takes %d operands, found %d", line, mnemonic, ARITY[mnemonic], found
        )
        return None

    values: List[int] = []
    for field, operand in zip(entry.fields, _flatten(operands)):
        if isinstance(operand, Immediate) and not IMM_MIN <= operand.value <= IMM_MAX:
            logger.debug("rejecting %r: immediate %d does not fit 16 bits", line, operand.value)
            return None
        value = _field_value(field, operand)
        if value is None:
            logger.debug("rejecting %r: %s cannot be used as %s", line, operand, field.name)
            return None
        values.append(value)

    try:
        if isinstance(entry, Alias):
            for field, value in zip(entry.fields, values):
                field.insert(value)
            base = cast(Opcode, BY_MNEMONIC[entry.base])
            return base.encode(entry.to_base(tuple(values)))
        return entry.encode(values)
    except ValueError as e:
        logger.debug("rejecting %r: %s", line, e)
        return None
