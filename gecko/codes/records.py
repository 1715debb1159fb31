"""
Decoders for the individual Gecko code types.

Each decoder is handed the cursor positioned on the record's first word and
the larger-address flag taken from the tag's low bit. It consumes exactly the
words of its record and returns the annotation text for it.
"""

import logging
from typing import Callable, Dict, List, Optional

from ..config import GeckoConfig
from ..ppc import code_to_instruction
from .address import resolve_address
from .blocks import AssemblyBlock, Closure, ExecuteBlock, InsertBlock
from .code_types import CodeType, tag_of
from .errors import CodeParseError, TruncatedCodeError
from .reader import WordCursor

logger = logging.getLogger(__name__)

RecordDecoder = Callable[[WordCursor, bool, GeckoConfig], str]

STORE_SIZES = {0: 1, 1: 2, 2: 4}
# offset register added to the address when the mode nibble is 1
STORE_OFFSET_REGISTERS = {0x84: "ba", 0x94: "po"}


def decode_fill16(cursor: WordCursor, larger_address: bool, config: GeckoConfig) -> str:
    address = resolve_address(cursor.read_and_advance(), larger_address)
    packed = cursor.read_and_advance()
    count = packed >> 16
    value = packed & 0xFFFF
    return (
        "// - Constant 16-bit RAM Fill -\n"
        f"// Range: 0x{address:08X} to 0x{address + count + 1:08X}\n"
        f"// Value: 0x{value:04X}"
    )


def decode_write32(cursor: WordCursor, larger_address: bool, config: GeckoConfig) -> str:
    address = resolve_address(cursor.read_and_advance(), larger_address)
    value = cursor.read_and_advance()
    return (
        "// - Constant 32-bit RAM Write -\n"
        f"// Target address: 0x{address:08X}\n"
        f"// Value: 0x{value:08X}"
    )


def _as_text(data: bytes) -> Optional[str]:
    """Printable text when the only zero byte is the last one, else None."""
    if not data or data.find(0) != len(data) - 1:
        return None
    try:
        text = data[:-1].decode("utf-8")
    except UnicodeDecodeError:
        return None
    return text if text.isprintable() else None


def format_byte_list(data: bytes, bytes_per_line: int = 8) -> str:
    entries = [f"0x{byte:02X}" for byte in data]
    lines = [
        ", ".join(entries[start : start + bytes_per_line])
        for start in range(0, len(entries), bytes_per_line)
    ]
    return "// Byte contents:\n// [" + ",\n// ".join(lines) + "]"


def decode_string_write(cursor: WordCursor, larger_address: bool, config: GeckoConfig) -> str:
    address = resolve_address(cursor.read_and_advance(), larger_address)
    byte_count = cursor.read_and_advance()
    words = cursor.read_words((byte_count + 3) // 4)
    data = b"".join(word.to_bytes(4, "big") for word in words)[:byte_count]

    out = ["// - String RAM Write -", f"// Target address: 0x{address:08X}"]
    text = _as_text(data)
    if text is not None:
        quoted = text.replace("\\", "\\\\").replace('"', '\\"')
        out.append(f'// String contents: "{quoted}"')
    else:
        out.append(format_byte_list(data, config.bytes_per_line))
    return "\n".join(out)


def decode_set_register(cursor: WordCursor, larger_address: bool, config: GeckoConfig) -> str:
    register = cursor.read_and_advance() & 0xFF
    value = cursor.read_and_advance()
    return f"// gr{register} = 0x{value:08X}"


def decode_load_register(cursor: WordCursor, larger_address: bool, config: GeckoConfig) -> str:
    register = cursor.read_and_advance() & 0xFF
    value = cursor.read_and_advance()
    return f"// - Load value 0x{value:08X} into register {register}"


def decode_store_register(cursor: WordCursor, larger_address: bool, config: GeckoConfig) -> str:
    # first word is TTUYZZZN: size U, address mode Y, count ZZZ + 1, register N
    code, address = cursor.read_pair()
    tag = tag_of(code)
    size_selector = (code >> 20) & 0xF
    mode = (code >> 16) & 0xF
    count = ((code >> 4) & 0xFFF) + 1
    register = code & 0xF

    size = STORE_SIZES.get(size_selector)
    if size is None:
        raise CodeParseError(
            f"Invalid size selector {size_selector}. "
            "Must be 0 (1 byte), 1 (2 bytes), or 2 (4 bytes)."
        )
    if mode == 0:
        target = f"0x{address:08X}"
    elif mode == 1:
        target = f"0x{address:08X} + {STORE_OFFSET_REGISTERS[tag]}"
    else:
        raise CodeParseError(
            f"Invalid address mode {mode}. "
            f"Must be 0 (address) or 1 (address + {STORE_OFFSET_REGISTERS[tag]})."
        )

    return (
        f"// - Store register {register} starting at address {target} "
        f"with {count} consecutive written {size}-byte values -"
    )


def _render_block(header: str, address: int, block: AssemblyBlock) -> str:
    lines = [header, f"// Target address: 0x{address:08X}", ""]
    lines += [code_to_instruction(word) for word in block.words]
    return "\n".join(lines) + "\n"


def decode_execute_assembly(cursor: WordCursor, larger_address: bool, config: GeckoConfig) -> str:
    # the tag byte is fixed at 0xC0, so the address never takes the larger offset
    address = resolve_address(cursor.read_and_advance(), False)
    line_count = cursor.read_and_advance()
    block = ExecuteBlock()
    while block.pairs_read < line_count and not block.closed:
        block.feed(*cursor.read_pair())
    if not block.closed:
        logger.warning(
            "execute assembly block at 0x%08X ran out of its %d lines before blr",
            address,
            line_count,
        )
        block.finish(Closure.LINE_COUNT)
    return _render_block("// - Execute Assembly -", address, block)


def decode_insert_assembly(cursor: WordCursor, larger_address: bool, config: GeckoConfig) -> str:
    address = resolve_address(cursor.read_and_advance(), larger_address)
    # real codes get this count wrong often enough that only the terminators
    # decide where the block ends
    declared_lines = cursor.read_and_advance()

    block = InsertBlock()
    while not cursor.at_end() and not block.closed:
        block.feed(*cursor.read_pair())
    if not block.closed:
        if config.strict_terminators:
            raise TruncatedCodeError(cursor.position(), len(cursor.words))
        logger.warning("insert assembly block at 0x%08X has no terminator", address)
        block.finish(Closure.END_OF_INPUT)

    if block.pairs_read != declared_lines:
        logger.debug(
            "insert assembly block at 0x%08X declares %d lines, read %d",
            address,
            declared_lines,
            block.pairs_read,
        )
    return _render_block("// - Insert Assembly -", address, block)


def decode_create_branch(cursor: WordCursor, larger_address: bool, config: GeckoConfig) -> str:
    address = resolve_address(cursor.read_and_advance(), larger_address)
    target = cursor.read_and_advance()
    return (
        "// - Create a Branch -\n"
        f"// Target address: 0x{address:08X}\n"
        f"// Branch to: 0x{target:08X}"
    )


DECODERS: Dict[CodeType, RecordDecoder] = {
    CodeType.FILL16: decode_fill16,
    CodeType.WRITE32: decode_write32,
    CodeType.STRING_WRITE: decode_string_write,
    CodeType.SET_REGISTER: decode_set_register,
    CodeType.LOAD_REGISTER: decode_load_register,
    CodeType.STORE_REGISTER: decode_store_register,
    CodeType.EXECUTE_ASM: decode_execute_assembly,
    CodeType.INSERT_ASM: decode_insert_assembly,
    CodeType.CREATE_BRANCH: decode_create_branch,
}

_missing: List[CodeType] = [
    member for member in CodeType if member is not CodeType.UNSUPPORTED and member not in DECODERS
]
assert not _missing, f"code types without a decoder: {_missing}"
