from typing import Optional, Sequence, Tuple

from .opcodes import Field, aliases_for, find_opcode
from .operands import InstructionText, Operand


def _operands(fields: Sequence[Field], values: Sequence[int]) -> Tuple[Operand, ...]:
    return tuple(field.operand(value) for field, value in zip(fields, values))


def disassemble(word: int) -> Optional[InstructionText]:
    """Decode one instruction word, preferring a simplified mnemonic when one applies.

    Returns None for words that match no table entry, including words with
    reserved bits set.
    """
    opcode = find_opcode(word)
    if opcode is None:
        return None

    values = opcode.decode(word)
    for alias in aliases_for(opcode.mnemonic):
        if alias.from_base is None:
            continue
        simplified = alias.from_base(values)
        if simplified is not None:
            return InstructionText(
                alias.mnemonic, _operands(alias.fields, simplified), alias.offset_at
            )

    return InstructionText(opcode.mnemonic, _operands(opcode.fields, values), opcode.offset_at)


def code_to_instruction(word: int) -> str:
    text = disassemble(word)
    if text is None:
        return f".long 0x{word:08X}"
    return str(text)
