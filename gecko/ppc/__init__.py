"""
Text codec for single PowerPC instruction words.

Both directions are driven by the static table in :mod:`.opcodes`; the table
and the derived :data:`ARITY` map are read-only once imported.
"""

from .asm import assemble  # noqa: F401
from .disasm import code_to_instruction, disassemble  # noqa: F401
from .opcodes import ARITY  # noqa: F401
from .operands import ABSENT, Immediate, InstructionText, Register  # noqa: F401

__all__ = [
    "ABSENT",
    "ARITY",
    "Immediate",
    "InstructionText",
    "Register",
    "assemble",
    "code_to_instruction",
    "disassemble",
]
