from __future__ import annotations

from dataclasses import dataclass
import os


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().casefold()
    return normalized not in {"0", "false", "off", ""}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = int(raw.strip(), 0)
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


@dataclass(frozen=True)
class GeckoConfig:
    # line written between records
    separator: str = "// ---"
    # bytes per line in a String RAM Write hex dump
    bytes_per_line: int = 8
    log_level: str = "WARNING"
    # raise instead of warning when an Insert Assembly block has no terminator
    strict_terminators: bool = False

    @property
    def record_separator(self) -> str:
        return f"\n\n{self.separator}\n\n"


def load_gecko_config() -> GeckoConfig:
    return GeckoConfig(
        separator=os.getenv("GECKO_SEPARATOR", "// ---"),
        bytes_per_line=_env_int("GECKO_BYTES_PER_LINE", 8),
        log_level=os.getenv("GECKO_LOG_LEVEL", "WARNING").strip().upper(),
        strict_terminators=_env_flag("GECKO_STRICT_TERMINATORS", default=False),
    )


__all__ = ["GeckoConfig", "load_gecko_config"]
