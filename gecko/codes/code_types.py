import enum
from typing import Dict, Tuple


class CodeType(enum.Enum):
    """Supported code families, each listing the tag bytes that select it."""

    FILL16 = (0x02, 0x03)
    WRITE32 = (0x04, 0x05)
    STRING_WRITE = (0x06,)
    SET_REGISTER = (0x80,)
    LOAD_REGISTER = (0x82,)
    STORE_REGISTER = (0x84, 0x94)
    EXECUTE_ASM = (0xC0,)
    INSERT_ASM = (0xC2, 0xC3)
    CREATE_BRANCH = (0xC6, 0xC7)
    UNSUPPORTED = ()

    @property
    def tags(self) -> Tuple[int, ...]:
        return self.value

    @classmethod
    def from_tag(cls, tag: int) -> "CodeType":
        return _BY_TAG.get(tag, cls.UNSUPPORTED)


def tag_of(word: int) -> int:
    return (word >> 24) & 0xFF


_BY_TAG: Dict[int, CodeType] = {tag: member for member in CodeType for tag in member.tags}
