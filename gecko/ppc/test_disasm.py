import pytest

from .disasm import code_to_instruction, disassemble
from .operands import Immediate, Register


def test_lwz_offset_form() -> None:
    text = disassemble(0x80630004)
    assert text is not None
    assert text.mnemonic == "lwz"
    assert text.operands == (Register("r", 3), Immediate(4), Register("r", 3))
    assert text.offset_at == 1
    assert str(text) == "lwz r3, 0x4(r3)"


@pytest.mark.parametrize(
    "word, expected",
    [
        (0x60000000, "nop"),
        (0x4E800020, "blr"),
        (0x4E800420, "bctr"),
        (0x38600001, "li r3, 0x1"),
        (0x3860FFFF, "li r3, -0x1"),
        (0x38630004, "addi r3, r3, 0x4"),
        (0x3C608000, "lis r3, -0x8000"),
        (0x7C0802A6, "mflr r0"),
        (0x7C0803A6, "mtlr r0"),
        (0x7C641B78, "mr r4, r3"),
        (0x7C631A14, "add r3, r3, r3"),
        (0x9001FFF8, "stw r0, -0x8(r1)"),
        (0x9421FFE0, "stwu r1, -0x20(r1)"),
        (0x706300FF, "andi. r3, r3, 0xFF"),
        (0x5463103A, "slwi r3, r3, 0x2"),
        (0x2C030000, "cmpwi cr0, r3, 0x0"),
        (0x48000010, "b 0x10"),
        (0x4BFFFFFD, "bl -0x4"),
        (0x41820008, "beq 0x8"),
        (0x7C0004AC, "sync"),
        (0x4C00012C, "isync"),
        (0xE0230008, "psq_l f1, 0x8(r3), 0x0, 0x0"),
    ],
)
def test_known_words(word: int, expected: str) -> None:
    assert code_to_instruction(word) == expected


def test_unknown_primary_opcode() -> None:
    assert disassemble(0x00000000) is None
    assert code_to_instruction(0x00000000) == ".long 0x00000000"


def test_reserved_bits_must_be_clear() -> None:
    # lwzx r3, r3, r4 with the record bit set
    assert code_to_instruction(0x7C63202E) == "lwzx r3, r3, r4"
    assert disassemble(0x7C63202F) is None
