"""
Static instruction table for the Gekko/Broadway (PowerPC 750CL) core.

Every entry is a fixed bit pattern plus the operand fields cut out of it. The
mask of an entry is everything its fields do not cover, so reserved bits must
be zero for a word to match. Simplified mnemonics (``li``, ``mr``, ``blr``,
...) are described as :class:`Alias` entries that translate their operands to
and from a base entry.

Field positions below use shift counts from the least significant bit, not
the IBM big-endian bit numbering used by the manuals.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from .operands import Immediate, Operand, Register

WORD_MASK = 0xFFFFFFFF

Values = Tuple[int, ...]


def _sign_extend(value: int, bits: int) -> int:
    sign = 1 << (bits - 1)
    return (value ^ sign) - sign


@dataclass(frozen=True)
class Field:
    name: str
    shift: int
    width: int
    # "r"/"f"/"cr" render as registers; "u"/"s" are plain numbers; "bd" and
    # "li" are word-aligned branch displacements; "spr" stores its two 5-bit
    # halves swapped
    kind: str = "u"

    @property
    def mask(self) -> int:
        return ((1 << self.width) - 1) << self.shift

    def extract(self, word: int) -> int:
        raw = (word >> self.shift) & ((1 << self.width) - 1)
        if self.kind == "s":
            return _sign_extend(raw, self.width)
        if self.kind in ("bd", "li"):
            return _sign_extend(raw << 2, self.width + 2)
        if self.kind == "spr":
            return ((raw & 0x1F) << 5) | (raw >> 5)
        return raw

    def insert(self, value: int) -> int:
        if self.kind in ("s", "bd", "li"):
            bits = 16 if self.kind == "s" else self.width + 2
            # 16-bit immediates arrive either signed or as their unsigned
            # reinterpretation
            if bits <= 16 and 0x8000 <= value <= 0xFFFF:
                value -= 0x10000
            if not -(1 << (bits - 1)) <= value < (1 << (bits - 1)):
                raise ValueError(f"{self.name} out of range: {value}")
            if self.kind == "s":
                if self.width < 16 and not -(1 << (self.width - 1)) <= value < (1 << (self.width - 1)):
                    raise ValueError(f"{self.name} out of range: {value}")
                return (value & ((1 << self.width) - 1)) << self.shift
            if value & 3:
                raise ValueError(f"{self.name} is not word aligned: {value}")
            return value & self.mask

        if self.width == 16 and -0x8000 <= value < 0:
            value &= 0xFFFF
        if not 0 <= value < (1 << self.width):
            raise ValueError(f"{self.name} out of range: {value}")
        if self.kind == "spr":
            value = ((value & 0x1F) << 5) | (value >> 5)
        return value << self.shift

    def operand(self, value: int) -> Operand:
        if self.kind in ("r", "f", "cr"):
            return Register(self.kind, value)
        return Immediate(value)


# register fields
RD = Field("rD", 21, 5, "r")
RS = Field("rS", 21, 5, "r")
RA = Field("rA", 16, 5, "r")
RB = Field("rB", 11, 5, "r")
FD = Field("frD", 21, 5, "f")
FS = Field("frS", 21, 5, "f")
FA = Field("frA", 16, 5, "f")
FB = Field("frB", 11, 5, "f")
FC = Field("frC", 6, 5, "f")
CRFD = Field("crfD", 23, 3, "cr")
CRFS = Field("crfS", 18, 3, "cr")

# immediates
SIMM = Field("SIMM", 0, 16, "s")
UIMM = Field("UIMM", 0, 16, "u")
D = Field("d", 0, 16, "s")
L = Field("L", 21, 1)
TO = Field("TO", 21, 5)
SH = Field("SH", 11, 5)
MB = Field("MB", 6, 5)
ME = Field("ME", 1, 5)
NB = Field("NB", 11, 5)
CRBD = Field("crbD", 21, 5)
CRBA = Field("crbA", 16, 5)
CRBB = Field("crbB", 11, 5)
CRM = Field("CRM", 12, 8)
FM = Field("FM", 17, 8)
IMM = Field("IMM", 12, 4)
SR = Field("SR", 16, 4)
SPR = Field("spr", 11, 10, "spr")
TBR = Field("tbr", 11, 10, "spr")

# branches
BO = Field("BO", 21, 5)
BI = Field("BI", 16, 5)
BD = Field("BD", 2, 14, "bd")
LI = Field("LI", 2, 24, "li")

# paired-single quantized load/store
PS_D = Field("d", 0, 12, "s")
PS_W = Field("W", 15, 1)
PS_I = Field("I", 12, 3)
PSX_W = Field("W", 10, 1)
PSX_I = Field("I", 7, 3)

# alias-only operands
N5 = Field("n", 11, 5)
B5 = Field("b", 6, 5)
BX = Field("crbD", 21, 5)
BY = Field("crbA", 16, 5)
SPR_N = Field("n", 11, 2)


@dataclass(frozen=True)
class Opcode:
    mnemonic: str
    pattern: int
    fields: Tuple[Field, ...] = ()
    offset_at: Optional[int] = None

    @property
    def mask(self) -> int:
        covered = 0
        for field in self.fields:
            covered |= field.mask
        return WORD_MASK & ~covered

    def matches(self, word: int) -> bool:
        return word & self.mask == self.pattern

    def decode(self, word: int) -> Values:
        return tuple(field.extract(word) for field in self.fields)

    def encode(self, values: Sequence[int]) -> int:
        if len(values) != len(self.fields):
            raise ValueError(
                f"{self.mnemonic} expects {len(self.fields)} operands, got {len(values)}"
            )
        word = self.pattern
        for field, value in zip(self.fields, values):
            word |= field.insert(value)
        return word


@dataclass(frozen=True)
class Alias:
    mnemonic: str
    base: str
    fields: Tuple[Field, ...]
    to_base: Callable[[Values], Values]
    # None means the alias is accepted by the assembler but never produced
    # by the disassembler
    from_base: Optional[Callable[[Values], Optional[Values]]] = None
    offset_at: Optional[int] = None


Entry = Union[Opcode, Alias]


def _form(primary: int, xo: int = 0) -> int:
    return (primary << 26) | (xo << 1)


def _rc(mnemonic: str, pattern: int, fields: Tuple[Field, ...]) -> Iterator[Opcode]:
    yield Opcode(mnemonic, pattern, fields)
    yield Opcode(mnemonic + ".", pattern | 1, fields)


def _oe_rc(mnemonic: str, pattern: int, fields: Tuple[Field, ...]) -> Iterator[Opcode]:
    yield from _rc(mnemonic, pattern, fields)
    yield from _rc(mnemonic + "o", pattern | 0x400, fields)


def _opcodes() -> Iterator[Opcode]:
    # D-form loads and stores, written as ``rD, d(rA)``
    for mnemonic, primary, reg in (
        ("lwz", 32, RD), ("lwzu", 33, RD), ("lbz", 34, RD), ("lbzu", 35, RD),
        ("stw", 36, RS), ("stwu", 37, RS), ("stb", 38, RS), ("stbu", 39, RS),
        ("lhz", 40, RD), ("lhzu", 41, RD), ("lha", 42, RD), ("lhau", 43, RD),
        ("sth", 44, RS), ("sthu", 45, RS), ("lmw", 46, RD), ("stmw", 47, RS),
        ("lfs", 48, FD), ("lfsu", 49, FD), ("lfd", 50, FD), ("lfdu", 51, FD),
        ("stfs", 52, FS), ("stfsu", 53, FS), ("stfd", 54, FS), ("stfdu", 55, FS),
    ):
        yield Opcode(mnemonic, _form(primary), (reg, D, RA), offset_at=1)

    for mnemonic, primary in (("psq_l", 56), ("psq_lu", 57)):
        yield Opcode(mnemonic, _form(primary), (FD, PS_D, RA, PS_W, PS_I), offset_at=1)
    for mnemonic, primary in (("psq_st", 60), ("psq_stu", 61)):
        yield Opcode(mnemonic, _form(primary), (FS, PS_D, RA, PS_W, PS_I), offset_at=1)

    # D-form arithmetic, logical and compare
    yield Opcode("twi", _form(3), (TO, RA, SIMM))
    yield Opcode("mulli", _form(7), (RD, RA, SIMM))
    yield Opcode("subfic", _form(8), (RD, RA, SIMM))
    yield Opcode("cmpli", _form(10), (CRFD, L, RA, UIMM))
    yield Opcode("cmpi", _form(11), (CRFD, L, RA, SIMM))
    yield Opcode("addic", _form(12), (RD, RA, SIMM))
    yield Opcode("addic.", _form(13), (RD, RA, SIMM))
    yield Opcode("addi", _form(14), (RD, RA, SIMM))
    yield Opcode("addis", _form(15), (RD, RA, SIMM))
    yield Opcode("ori", _form(24), (RA, RS, UIMM))
    yield Opcode("oris", _form(25), (RA, RS, UIMM))
    yield Opcode("xori", _form(26), (RA, RS, UIMM))
    yield Opcode("xoris", _form(27), (RA, RS, UIMM))
    yield Opcode("andi.", _form(28), (RA, RS, UIMM))
    yield Opcode("andis.", _form(29), (RA, RS, UIMM))

    # branches
    for suffix, bits in (("", 0), ("l", 1), ("a", 2), ("la", 3)):
        yield Opcode("b" + suffix, _form(18) | bits, (LI,))
        yield Opcode("bc" + suffix, _form(16) | bits, (BO, BI, BD))
    yield Opcode("sc", _form(17) | 2)

    # opcode 19: condition register and branch-to-register
    yield Opcode("mcrf", _form(19, 0), (CRFD, CRFS))
    yield Opcode("bclr", _form(19, 16), (BO, BI))
    yield Opcode("bclrl", _form(19, 16) | 1, (BO, BI))
    yield Opcode("bcctr", _form(19, 528), (BO, BI))
    yield Opcode("bcctrl", _form(19, 528) | 1, (BO, BI))
    yield Opcode("rfi", _form(19, 50))
    yield Opcode("isync", _form(19, 150))
    for mnemonic, xo in (
        ("crnor", 33), ("crandc", 129), ("crxor", 193), ("crnand", 225),
        ("crand", 257), ("creqv", 289), ("crorc", 417), ("cror", 449),
    ):
        yield Opcode(mnemonic, _form(19, xo), (CRBD, CRBA, CRBB))

    # rotates
    yield from _rc("rlwimi", _form(20), (RA, RS, SH, MB, ME))
    yield from _rc("rlwinm", _form(21), (RA, RS, SH, MB, ME))
    yield from _rc("rlwnm", _form(23), (RA, RS, RB, MB, ME))

    # opcode 31: integer arithmetic with overflow and record variants
    for mnemonic, xo in (
        ("add", 266), ("addc", 10), ("adde", 138), ("divw", 491), ("divwu", 459),
        ("mullw", 235), ("subf", 40), ("subfc", 8), ("subfe", 136),
    ):
        yield from _oe_rc(mnemonic, _form(31, xo), (RD, RA, RB))
    for mnemonic, xo in (
        ("addme", 234), ("addze", 202), ("neg", 104), ("subfme", 232), ("subfze", 200),
    ):
        yield from _oe_rc(mnemonic, _form(31, xo), (RD, RA))
    yield from _rc("mulhw", _form(31, 75), (RD, RA, RB))
    yield from _rc("mulhwu", _form(31, 11), (RD, RA, RB))

    # opcode 31: logical and shifts, written as ``rA, rS, rB``
    for mnemonic, xo in (
        ("and", 28), ("andc", 60), ("eqv", 284), ("nand", 476), ("nor", 124),
        ("or", 444), ("orc", 412), ("slw", 24), ("sraw", 792), ("srw", 536),
        ("xor", 316),
    ):
        yield from _rc(mnemonic, _form(31, xo), (RA, RS, RB))
    yield from _rc("srawi", _form(31, 824), (RA, RS, SH))
    for mnemonic, xo in (("cntlzw", 26), ("extsb", 954), ("extsh", 922)):
        yield from _rc(mnemonic, _form(31, xo), (RA, RS))

    yield Opcode("cmp", _form(31, 0), (CRFD, L, RA, RB))
    yield Opcode("cmpl", _form(31, 32), (CRFD, L, RA, RB))
    yield Opcode("tw", _form(31, 4), (TO, RA, RB))

    # opcode 31: indexed loads and stores
    for mnemonic, xo, reg in (
        ("lwarx", 20, RD), ("lwzx", 23, RD), ("lwzux", 55, RD), ("lbzx", 87, RD),
        ("lbzux", 119, RD), ("stwx", 151, RS), ("stwux", 183, RS), ("stbx", 215, RS),
        ("stbux", 247, RS), ("lhzx", 279, RD), ("lhzux", 311, RD), ("lhax", 343, RD),
        ("lhaux", 375, RD), ("sthx", 407, RS), ("sthux", 439, RS), ("lswx", 533, RD),
        ("lwbrx", 534, RD), ("stswx", 661, RS), ("stwbrx", 662, RS), ("lhbrx", 790, RD),
        ("sthbrx", 918, RS), ("eciwx", 310, RD), ("ecowx", 438, RS),
        ("lfsx", 535, FD), ("lfsux", 567, FD), ("lfdx", 599, FD), ("lfdux", 631, FD),
        ("stfsx", 663, FS), ("stfsux", 695, FS), ("stfdx", 727, FS), ("stfdux", 759, FS),
        ("stfiwx", 983, FS),
    ):
        yield Opcode(mnemonic, _form(31, xo), (reg, RA, RB))
    yield Opcode("stwcx.", _form(31, 150) | 1, (RS, RA, RB))
    yield Opcode("lswi", _form(31, 597), (RD, RA, NB))
    yield Opcode("stswi", _form(31, 725), (RS, RA, NB))

    # opcode 31: cache, sync and system registers
    for mnemonic, xo in (
        ("dcbst", 54), ("dcbf", 86), ("dcbtst", 246), ("dcbt", 278),
        ("dcbi", 470), ("icbi", 982), ("dcbz", 1014),
    ):
        yield Opcode(mnemonic, _form(31, xo), (RA, RB))
    yield Opcode("sync", _form(31, 598))
    yield Opcode("eieio", _form(31, 854))
    yield Opcode("tlbsync", _form(31, 566))
    yield Opcode("tlbie", _form(31, 306), (RB,))
    yield Opcode("mfcr", _form(31, 19), (RD,))
    yield Opcode("mfmsr", _form(31, 83), (RD,))
    yield Opcode("mtmsr", _form(31, 146), (RS,))
    yield Opcode("mtcrf", _form(31, 144), (CRM, RS))
    yield Opcode("mcrxr", _form(31, 512), (CRFD,))
    yield Opcode("mfspr", _form(31, 339), (RD, SPR))
    yield Opcode("mtspr", _form(31, 467), (SPR, RS))
    yield Opcode("mftb", _form(31, 371), (RD, TBR))
    yield Opcode("mfsr", _form(31, 595), (RD, SR))
    yield Opcode("mtsr", _form(31, 210), (SR, RS))
    yield Opcode("mfsrin", _form(31, 659), (RD, RB))
    yield Opcode("mtsrin", _form(31, 242), (RS, RB))

    # opcodes 59 and 63: floating point
    for primary, suffix in ((63, ""), (59, "s")):
        yield from _rc("fdiv" + suffix, _form(primary, 18), (FD, FA, FB))
        yield from _rc("fsub" + suffix, _form(primary, 20), (FD, FA, FB))
        yield from _rc("fadd" + suffix, _form(primary, 21), (FD, FA, FB))
        yield from _rc("fmul" + suffix, _form(primary, 25), (FD, FA, FC))
        for mnemonic, xo in (("fmsub", 28), ("fmadd", 29), ("fnmsub", 30), ("fnmadd", 31)):
            yield from _rc(mnemonic + suffix, _form(primary, xo), (FD, FA, FC, FB))
    yield from _rc("fres", _form(59, 24), (FD, FB))
    yield from _rc("fsel", _form(63, 23), (FD, FA, FC, FB))
    yield from _rc("frsqrte", _form(63, 26), (FD, FB))
    for mnemonic, xo in (
        ("frsp", 12), ("fctiw", 14), ("fctiwz", 15), ("fneg", 40),
        ("fmr", 72), ("fnabs", 136), ("fabs", 264),
    ):
        yield from _rc(mnemonic, _form(63, xo), (FD, FB))
    yield Opcode("fcmpu", _form(63, 0), (CRFD, FA, FB))
    yield Opcode("fcmpo", _form(63, 32), (CRFD, FA, FB))
    yield Opcode("mcrfs", _form(63, 64), (CRFD, CRFS))
    yield from _rc("mffs", _form(63, 583), (FD,))
    yield from _rc("mtfsb0", _form(63, 70), (CRBD,))
    yield from _rc("mtfsb1", _form(63, 38), (CRBD,))
    yield from _rc("mtfsf", _form(63, 711), (FM, FB))
    yield from _rc("mtfsfi", _form(63, 134), (CRFD, IMM))

    # opcode 4: paired singles
    for mnemonic, xo in (("ps_sum0", 10), ("ps_sum1", 11), ("ps_madds0", 14), ("ps_madds1", 15)):
        yield from _rc(mnemonic, _form(4, xo), (FD, FA, FC, FB))
    for mnemonic, xo in (("ps_msub", 28), ("ps_madd", 29), ("ps_nmsub", 30), ("ps_nmadd", 31)):
        yield from _rc(mnemonic, _form(4, xo), (FD, FA, FC, FB))
    yield from _rc("ps_sel", _form(4, 23), (FD, FA, FC, FB))
    for mnemonic, xo in (("ps_muls0", 12), ("ps_muls1", 13), ("ps_mul", 25)):
        yield from _rc(mnemonic, _form(4, xo), (FD, FA, FC))
    for mnemonic, xo in (("ps_div", 18), ("ps_sub", 20), ("ps_add", 21)):
        yield from _rc(mnemonic, _form(4, xo), (FD, FA, FB))
    for mnemonic, xo in (("ps_res", 24), ("ps_rsqrte", 26)):
        yield from _rc(mnemonic, _form(4, xo), (FD, FB))
    for mnemonic, xo in (("ps_neg", 40), ("ps_mr", 72), ("ps_nabs", 136), ("ps_abs", 264)):
        yield from _rc(mnemonic, _form(4, xo), (FD, FB))
    for mnemonic, xo in (
        ("ps_merge00", 528), ("ps_merge01", 560), ("ps_merge10", 592), ("ps_merge11", 624),
    ):
        yield from _rc(mnemonic, _form(4, xo), (FD, FA, FB))
    for mnemonic, xo in (("ps_cmpu0", 0), ("ps_cmpo0", 32), ("ps_cmpu1", 64), ("ps_cmpo1", 96)):
        yield Opcode(mnemonic, _form(4, xo), (CRFD, FA, FB))
    yield Opcode("dcbz_l", _form(4, 1014), (RA, RB))
    yield Opcode("psq_lx", _form(4, 6), (FD, RA, RB, PSX_W, PSX_I))
    yield Opcode("psq_stx", _form(4, 7), (FS, RA, RB, PSX_W, PSX_I))
    yield Opcode("psq_lux", _form(4, 38), (FD, RA, RB, PSX_W, PSX_I))
    yield Opcode("psq_stux", _form(4, 39), (FS, RA, RB, PSX_W, PSX_I))


def _negate16(value: int) -> int:
    if 0x8000 <= value <= 0xFFFF:
        value -= 0x10000
    return -value


def _require(value: int, limit: int) -> int:
    if not 0 <= value < limit:
        raise ValueError(f"operand out of range: {value}")
    return value


def _when(predicate: Callable[[Values], bool], build: Callable[[Values], Values]):
    def from_base(values: Values) -> Optional[Values]:
        return build(values) if predicate(values) else None

    return from_base


def _aliases() -> Iterator[Alias]:
    yield Alias("nop", "ori", (), lambda v: (0, 0, 0), _when(lambda v: v == (0, 0, 0), lambda v: ()))
    yield Alias("li", "addi", (RD, SIMM), lambda v: (v[0], 0, v[1]),
                _when(lambda v: v[1] == 0, lambda v: (v[0], v[2])))
    yield Alias("lis", "addis", (RD, SIMM), lambda v: (v[0], 0, v[1]),
                _when(lambda v: v[1] == 0, lambda v: (v[0], v[2])))
    for mnemonic, base in (("subi", "addi"), ("subis", "addis"), ("subic", "addic"), ("subic.", "addic.")):
        yield Alias(mnemonic, base, (RD, RA, SIMM), lambda v: (v[0], v[1], _negate16(v[2])))

    for suffix in ("", "."):
        yield Alias("mr" + suffix, "or" + suffix, (RA, RS), lambda v: (v[0], v[1], v[1]),
                    _when(lambda v: v[1] == v[2], lambda v: (v[0], v[1])))

        rlwinm = "rlwinm" + suffix
        yield Alias("rotlwi" + suffix, rlwinm, (RA, RS, N5), lambda v: (v[0], v[1], v[2], 0, 31),
                    _when(lambda v: v[3] == 0 and v[4] == 31, lambda v: (v[0], v[1], v[2])))
        yield Alias("clrlwi" + suffix, rlwinm, (RA, RS, N5), lambda v: (v[0], v[1], 0, v[2], 31),
                    _when(lambda v: v[2] == 0 and v[4] == 31, lambda v: (v[0], v[1], v[3])))
        yield Alias("clrrwi" + suffix, rlwinm, (RA, RS, N5), lambda v: (v[0], v[1], 0, 0, 31 - v[2]),
                    _when(lambda v: v[2] == 0 and v[3] == 0, lambda v: (v[0], v[1], 31 - v[4])))
        yield Alias("slwi" + suffix, rlwinm, (RA, RS, N5), lambda v: (v[0], v[1], v[2], 0, 31 - v[2]),
                    _when(lambda v: v[3] == 0 and v[4] == 31 - v[2], lambda v: (v[0], v[1], v[2])))
        yield Alias("srwi" + suffix, rlwinm, (RA, RS, N5),
                    lambda v: (v[0], v[1], (32 - v[2]) % 32, v[2], 31),
                    _when(lambda v: v[4] == 31 and v[2] == 32 - v[3], lambda v: (v[0], v[1], v[3])))
        yield Alias("extlwi" + suffix, rlwinm, (RA, RS, N5, B5),
                    lambda v: (v[0], v[1], v[3], 0, v[2] - 1),
                    _when(lambda v: v[3] == 0, lambda v: (v[0], v[1], v[4] + 1, v[2])))
        yield Alias("extrwi" + suffix, rlwinm, (RA, RS, N5, B5),
                    lambda v: (v[0], v[1], (v[3] + v[2]) % 32, 32 - v[2], 31),
                    _when(lambda v: v[4] == 31 and v[2] >= 32 - v[3],
                          lambda v: (v[0], v[1], 32 - v[3], v[2] - (32 - v[3]))))
        yield Alias("rotrwi" + suffix, rlwinm, (RA, RS, N5), lambda v: (v[0], v[1], (32 - v[2]) % 32, 0, 31))
        yield Alias("rotlw" + suffix, "rlwnm" + suffix, (RA, RS, RB), lambda v: (v[0], v[1], v[2], 0, 31),
                    _when(lambda v: v[3] == 0 and v[4] == 31, lambda v: (v[0], v[1], v[2])))

    yield Alias("crset", "creqv", (BX,), lambda v: (v[0], v[0], v[0]),
                _when(lambda v: v[0] == v[1] == v[2], lambda v: (v[0],)))
    yield Alias("crclr", "crxor", (BX,), lambda v: (v[0], v[0], v[0]),
                _when(lambda v: v[0] == v[1] == v[2], lambda v: (v[0],)))
    yield Alias("crnot", "crnor", (BX, BY), lambda v: (v[0], v[1], v[1]),
                _when(lambda v: v[1] == v[2], lambda v: (v[0], v[1])))
    yield Alias("crmove", "cror", (BX, BY), lambda v: (v[0], v[1], v[1]),
                _when(lambda v: v[1] == v[2], lambda v: (v[0], v[1])))

    for mnemonic, base, imm in (
        ("cmpw", "cmp", RB), ("cmplw", "cmpl", RB), ("cmpwi", "cmpi", SIMM), ("cmplwi", "cmpli", UIMM),
    ):
        yield Alias(mnemonic, base, (CRFD, RA, imm), lambda v: (v[0], 0, v[1], v[2]),
                    _when(lambda v: v[1] == 0, lambda v: (v[0], v[2], v[3])))

    # branch to link/count register, BO=20 means "always"
    for mnemonic, base in (("blr", "bclr"), ("blrl", "bclrl"), ("bctr", "bcctr"), ("bctrl", "bcctrl")):
        yield Alias(mnemonic, base, (), lambda v: (20, 0), _when(lambda v: v == (20, 0), lambda v: ()))

    for mnemonic, bo in (("bdnz", 16), ("bdz", 18)):
        yield Alias(mnemonic, "bc", (BD,), lambda v, bo=bo: (bo, 0, v[0]),
                    _when(lambda v, bo=bo: v[0] == bo and v[1] == 0, lambda v: (v[2],)))
        yield Alias(mnemonic + "lr", "bclr", (), lambda v, bo=bo: (bo, 0),
                    _when(lambda v, bo=bo: v == (bo, 0), lambda v: ()))
    for mnemonic, bo in (("bdnzt", 8), ("bdnzf", 0), ("bdzt", 10), ("bdzf", 2)):
        yield Alias(mnemonic, "bc", (BI, BD), lambda v, bo=bo: (bo, v[0], v[1]),
                    _when(lambda v, bo=bo: v[0] == bo, lambda v: (v[1], v[2])))
        yield Alias(mnemonic + "lr", "bclr", (BI,), lambda v, bo=bo: (bo, v[0]),
                    _when(lambda v, bo=bo: v[0] == bo, lambda v: (v[1],)))

    # conditional branches on cr0
    for mnemonic, bo, bi in (
        ("blt", 12, 0), ("bge", 4, 0), ("bgt", 12, 1), ("ble", 4, 1), ("beq", 12, 2), ("bne", 4, 2),
    ):
        yield Alias(mnemonic, "bc", (BD,), lambda v, bo=bo, bi=bi: (bo, bi, v[0]),
                    _when(lambda v, bo=bo, bi=bi: v[0] == bo and v[1] == bi, lambda v: (v[2],)))
        yield Alias(mnemonic + "lr", "bclr", (), lambda v, bo=bo, bi=bi: (bo, bi),
                    _when(lambda v, bo=bo, bi=bi: v == (bo, bi), lambda v: ()))

    yield Alias("trap", "tw", (), lambda v: (31, 0, 0), _when(lambda v: v == (31, 0, 0), lambda v: ()))
    for mnemonic, base, to, imm in (
        ("tweq", "tw", 4, RB), ("twlge", "tw", 5, RB),
        ("twgti", "twi", 8, SIMM), ("twllei", "twi", 6, SIMM), ("twui", "twi", 31, SIMM),
    ):
        yield Alias(mnemonic, base, (RA, imm), lambda v, to=to: (to, v[0], v[1]),
                    _when(lambda v, to=to: v[0] == to, lambda v: (v[1], v[2])))

    for name, spr in (
        ("xer", 1), ("lr", 8), ("ctr", 9), ("dsisr", 18), ("dar", 19), ("dec", 22),
        ("sdr1", 25), ("srr0", 26), ("srr1", 27), ("ear", 282),
    ):
        yield Alias("mf" + name, "mfspr", (RD,), lambda v, spr=spr: (v[0], spr),
                    _when(lambda v, spr=spr: v[1] == spr, lambda v: (v[0],)))
        yield Alias("mt" + name, "mtspr", (RS,), lambda v, spr=spr: (spr, v[0]),
                    _when(lambda v, spr=spr: v[0] == spr, lambda v: (v[1],)))
    for name, spr in (("tbl", 284), ("tbu", 285)):
        yield Alias("mt" + name, "mtspr", (RS,), lambda v, spr=spr: (spr, v[0]),
                    _when(lambda v, spr=spr: v[0] == spr, lambda v: (v[1],)))

    # numbered SPR banks: (name, first spr, stride)
    for name, first, stride in (
        ("sprg", 272, 1), ("ibatu", 528, 2), ("ibatl", 529, 2), ("dbatu", 536, 2), ("dbatl", 537, 2),
    ):
        bank = [first + stride * n for n in range(4)]
        yield Alias("mf" + name, "mfspr", (RD, SPR_N),
                    lambda v, first=first, stride=stride: (v[0], first + stride * _require(v[1], 4)),
                    _when(lambda v, bank=bank: v[1] in bank,
                          lambda v, first=first, stride=stride: (v[0], (v[1] - first) // stride)))
        yield Alias("mt" + name, "mtspr", (SPR_N, RS),
                    lambda v, first=first, stride=stride: (first + stride * _require(v[0], 4), v[1]),
                    _when(lambda v, bank=bank: v[0] in bank,
                          lambda v, first=first, stride=stride: ((v[0] - first) // stride, v[1])))


OPCODES: Tuple[Opcode, ...] = tuple(_opcodes())
ALIASES: Tuple[Alias, ...] = tuple(_aliases())


def _index() -> Tuple[Mapping[str, Entry], Mapping[int, Tuple[Opcode, ...]], Mapping[str, Tuple[Alias, ...]]]:
    by_name: Dict[str, Entry] = {}
    by_primary: Dict[int, List[Opcode]] = {}
    by_base: Dict[str, List[Alias]] = {}

    for opcode in OPCODES:
        assert opcode.mnemonic not in by_name, f"duplicate mnemonic {opcode.mnemonic}"
        assert opcode.pattern & ~opcode.mask == 0, f"{opcode.mnemonic} pattern overlaps its fields"
        by_name[opcode.mnemonic] = opcode
        by_primary.setdefault(opcode.pattern >> 26, []).append(opcode)

    for alias in ALIASES:
        assert alias.mnemonic not in by_name, f"duplicate mnemonic {alias.mnemonic}"
        assert isinstance(by_name.get(alias.base), Opcode), f"{alias.mnemonic}: unknown base {alias.base}"
        by_name[alias.mnemonic] = alias
        by_base.setdefault(alias.base, []).append(alias)

    return (
        MappingProxyType(by_name),
        MappingProxyType({k: tuple(v) for k, v in by_primary.items()}),
        MappingProxyType({k: tuple(v) for k, v in by_base.items()}),
    )


BY_MNEMONIC, _BY_PRIMARY, _ALIASES_BY_BASE = _index()

# mnemonic -> number of logical operands; an offset operand ``d(rA)``
# counts as two
ARITY: Mapping[str, int] = MappingProxyType(
    {mnemonic: len(entry.fields) for mnemonic, entry in BY_MNEMONIC.items()}
)


def find_opcode(word: int) -> Optional[Opcode]:
    for opcode in _BY_PRIMARY.get((word & WORD_MASK) >> 26, ()):
        if opcode.matches(word):
            return opcode
    return None


def aliases_for(base: str) -> Tuple[Alias, ...]:
    return _ALIASES_BY_BASE.get(base, ())
