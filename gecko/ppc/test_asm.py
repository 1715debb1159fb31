import logging

import pytest

from .asm import InstructionTransformer, Offset, asm_parser, assemble, normalize_mnemonic, parse_number
from .opcodes import ARITY
from .operands import Immediate, Register


def test_offset_operand() -> None:
    assert assemble("lwz r3, 0x4(r3)") == 0x80630004
    assert assemble("lwz r3,0x4(r3)") == 0x80630004
    assert assemble("  lwz   r3 0x4(r3)  ") == 0x80630004


def test_offset_token_splits_into_displacement_and_base() -> None:
    mnemonic, operands = InstructionTransformer().transform(asm_parser.parse("stw r31, -0x8(r1)"))
    assert mnemonic == "stw"
    assert operands == [Register("r", 31), Offset(Immediate(-8), Register("r", 1))]
    assert assemble("stw r31, -0x8(r1)") == 0x93E1FFF8


@pytest.mark.parametrize(
    "line, word",
    [
        ("nop", 0x60000000),
        ("blr", 0x4E800020),
        ("sync", 0x7C0004AC),
        ("li r3, 1", 0x38600001),
        ("li r3, -1", 0x3860FFFF),
        ("li r3, 0xFFFF", 0x3860FFFF),
        ("addi r3, r3, 0x4", 0x38630004),
        ("subi r3, r3, 4", 0x3863FFFC),
        ("mr r4, r3", 0x7C641B78),
        ("mflr r0", 0x7C0802A6),
        ("mtlr r0", 0x7C0803A6),
        ("add r3, r3, r3", 0x7C631A14),
        ("stw r0, -0x8(r1)", 0x9001FFF8),
        ("stwu r1, -0x20(r1)", 0x9421FFE0),
        ("andi. r3, r3, 0xFF", 0x706300FF),
        ("slwi r3, r3, 2", 0x5463103A),
        ("cmpwi cr0, r3, 0", 0x2C030000),
        ("cmpwi 0, r3, 0", 0x2C030000),
        ("b 0x10", 0x48000010),
        ("bl -0x4", 0x4BFFFFFD),
        ("beq 0x8", 0x41820008),
        ("psq_l f1, 0x8(r3), 0, 0", 0xE0230008),
        ("LWZ R3, 0X4(R3)", 0x80630004),
    ],
)
def test_known_lines(line: str, word: int) -> None:
    assert assemble(line) == word


def test_underscore_record_suffix() -> None:
    assert normalize_mnemonic("andi_") == "andi."
    assert assemble("andi_ r3, r3, 0xFF") == assemble("andi. r3, r3, 0xFF")


@pytest.mark.parametrize(
    "line",
    [
        "",
        "foo r3",
        "lwz r3, r4",
        "add r3, r3",
        "blr r3",
        "lwz r3, zz(r3)",
        "li r3, 0x10000",
        "li r3, -0x8001",
        "lwz f3, 0x4(r3)",
        "lfs r1, 0x0(r3)",
        "addi r3, r3, r4",
        "b 0x3",
        "slwi r3, r3, 40",
        "mtsprg 4, r3",
    ],
)
def test_rejected_lines(line: str) -> None:
    assert assemble(line) is None


def test_rejection_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="gecko.ppc.asm"):
        assert assemble("foo r3") is None
    assert "unknown mnemonic" in caplog.text


def test_parse_number() -> None:
    assert parse_number("0x10") == 16
    assert parse_number("-0x10") == -16
    assert parse_number("010") == 10
    assert parse_number("-7") == -7


def test_arity_table_is_read_only() -> None:
    assert ARITY["lwz"] == 3
    assert ARITY["li"] == 2
    assert ARITY["nop"] == 0
    assert ARITY["psq_l"] == 5
    with pytest.raises(TypeError):
        ARITY["lwz"] = 2  # type: ignore[index]
