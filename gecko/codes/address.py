RAM_BASE = 0x80000000
ADDRESS_MASK = 0x00FFFFFF
LARGER_ADDRESS_OFFSET = 0x01000000


def resolve_address(raw_word: int, larger_address: bool) -> int:
    """Map a tag/address word to its cached RAM address.

    The low 24 bits are an offset into 0x80000000; an odd tag byte moves the
    result up by 0x01000000.
    """
    address = RAM_BASE | (raw_word & ADDRESS_MASK)
    if larger_address:
        address += LARGER_ADDRESS_OFFSET
    return address


def larger_address_flag(tag: int) -> bool:
    return bool(tag & 1)
