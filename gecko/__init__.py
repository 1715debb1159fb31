"""Gecko code annotator and PowerPC (Gekko/750CL) instruction codec."""

from .codes import convert_gecko_code, resolve_address
from .ppc import assemble, code_to_instruction, disassemble

__all__ = [
    "assemble",
    "code_to_instruction",
    "convert_gecko_code",
    "disassemble",
    "resolve_address",
]
