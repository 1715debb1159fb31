import pytest

from .errors import TruncatedCodeError
from .reader import WordCursor


def test_reads_in_order() -> None:
    cursor = WordCursor.over([0x04001040, 0x00000001, 0xC6000100, 0x80001234])
    assert cursor.position() == 0
    assert cursor.remaining() == 4
    assert cursor.peek() == 0x04001040
    assert cursor.position() == 0

    assert cursor.read_and_advance() == 0x04001040
    assert cursor.read_and_advance() == 0x00000001
    assert cursor.read_pair() == (0xC6000100, 0x80001234)
    assert cursor.position() == 4
    assert cursor.remaining() == 0
    assert cursor.at_end()


def test_read_past_end_raises() -> None:
    cursor = WordCursor.over([0x04001040])
    cursor.read_and_advance()
    with pytest.raises(TruncatedCodeError) as excinfo:
        cursor.read_and_advance()
    assert excinfo.value.position == 1
    assert excinfo.value.length == 1
    # a failed read does not move the cursor
    assert cursor.position() == 1


def test_peek_at_end_raises() -> None:
    with pytest.raises(TruncatedCodeError):
        WordCursor.over([]).peek()


def test_read_words_checks_the_whole_run() -> None:
    cursor = WordCursor.over([1, 2, 3])
    with pytest.raises(TruncatedCodeError):
        cursor.read_words(4)
    assert cursor.position() == 0
    assert cursor.read_words(2) == (1, 2)
    assert cursor.read_words(0) == ()
    assert cursor.remaining() == 1


def test_source_sequence_is_not_shared() -> None:
    words = [1, 2]
    cursor = WordCursor.over(words)
    words[0] = 99
    assert cursor.read_and_advance() == 1
    assert isinstance(cursor.words, tuple)
