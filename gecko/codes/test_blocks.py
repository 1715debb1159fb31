import pytest

from .blocks import BLR, NOP, AssemblyBlock, BlockState, Closure, ExecuteBlock, InsertBlock

LI = 0x38600001
STW = 0x90640000


def test_execute_block_closes_on_left_blr() -> None:
    block = ExecuteBlock()
    block.feed(BLR, LI)
    assert block.state is BlockState.CLOSED
    assert block.closure is Closure.BLR
    assert block.words == [BLR]


def test_execute_block_closes_on_right_blr() -> None:
    block = ExecuteBlock()
    block.feed(LI, STW)
    assert block.state is BlockState.ACTIVE
    block.feed(LI, BLR)
    assert block.closed
    assert block.words == [LI, STW, LI, BLR]
    assert block.pairs_read == 2


def test_insert_block_nop_zero_pair() -> None:
    block = InsertBlock()
    block.feed(LI, STW)
    block.feed(NOP, 0)
    assert block.closure is Closure.NOP_ZERO_PAIR
    assert block.words == [LI, STW]


def test_insert_block_zero_nop_pair_keeps_the_zero() -> None:
    block = InsertBlock()
    block.feed(LI, STW)
    block.feed(0, NOP)
    assert block.closure is Closure.TRAILING_NOP
    assert block.words == [LI, STW, 0]


def test_assembly_block_is_abstract() -> None:
    with pytest.raises(TypeError):
        AssemblyBlock()  # type: ignore[abstract]


def test_insert_block_trailing_nop_keeps_first_word() -> None:
    block = InsertBlock()
    block.feed(LI, NOP)
    assert block.closure is Closure.TRAILING_NOP
    assert block.words == [LI]


def test_insert_block_nop_in_first_slot_is_an_instruction() -> None:
    block = InsertBlock()
    block.feed(NOP, LI)
    assert not block.closed
    assert block.words == [NOP, LI]


def test_finish_records_fallback_closure() -> None:
    block = InsertBlock()
    block.feed(LI, STW)
    block.finish(Closure.END_OF_INPUT)
    assert block.closure is Closure.END_OF_INPUT

    # finishing an already closed block keeps the rule that closed it
    closed = ExecuteBlock()
    closed.feed(BLR, 0)
    closed.finish(Closure.LINE_COUNT)
    assert closed.closure is Closure.BLR
