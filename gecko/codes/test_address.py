import pytest

from .address import larger_address_flag, resolve_address


@pytest.mark.parametrize(
    "raw, larger, expected",
    [
        (0x04001040, False, 0x80001040),
        (0x05001040, True, 0x81001040),
        (0xC6000100, False, 0x80000100),
        (0x02FFFFFF, False, 0x80FFFFFF),
        (0x03FFFFFF, True, 0x81FFFFFF),
        (0x00000000, False, 0x80000000),
    ],
)
def test_resolve_address(raw: int, larger: bool, expected: int) -> None:
    assert resolve_address(raw, larger) == expected


def test_flag_comes_from_tag_parity() -> None:
    assert not larger_address_flag(0x04)
    assert larger_address_flag(0x05)
    assert larger_address_flag(0xC3)
