#!/usr/bin/env python3
import logging
import sys
from typing import Optional

from plumbum import cli  # type: ignore[import-untyped]

from .codes import GeckoCodeError, convert_gecko_code, parse_code_text
from .config import load_gecko_config
from .ppc import assemble, code_to_instruction


class GeckoCLI(cli.Application):
    """Annotates Gecko codes and converts single PowerPC instructions."""

    PROGNAME = "gecko-annotate"
    VERSION = "0.1.0"

    verbose = cli.Flag(["-v", "--verbose"], help="Log record decoding at DEBUG level")

    def main(self, *args: str) -> Optional[int]:
        config = load_gecko_config()
        level = logging.DEBUG if self.verbose else getattr(logging, config.log_level, logging.WARNING)
        logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

        if args:
            print(f"Unknown command: {args[0]}", file=sys.stderr)
            return 1
        if not self.nested_command:
            self.help()
            return 1
        return None


@GeckoCLI.subcommand("decode")
class DecodeCommand(cli.Application):
    """Print the annotated report for a code read from FILE (default: stdin)."""

    def main(self, code_file: cli.ExistingFile = None) -> int:  # type: ignore[assignment]
        if code_file is None:
            text = sys.stdin.read()
        else:
            with open(code_file, "r") as f:
                text = f.read()

        try:
            report = convert_gecko_code(parse_code_text(text), load_gecko_config())
        except GeckoCodeError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(report, end="")
        return 0


@GeckoCLI.subcommand("asm")
class AsmCommand(cli.Application):
    """Assemble one instruction, e.g. ``asm lwz r3, 0x4(r3)``."""

    def main(self, *line: str) -> int:
        text = " ".join(line)
        word = assemble(text)
        if word is None:
            print(f"Cannot assemble: {text}", file=sys.stderr)
            return 1
        print(f"{word:08X}")
        return 0


@GeckoCLI.subcommand("disasm")
class DisasmCommand(cli.Application):
    """Disassemble one or more hex instruction words."""

    def main(self, *words: str) -> int:
        for token in words:
            try:
                word = int(token, 16)
            except ValueError:
                print(f"Invalid instruction word: {token}", file=sys.stderr)
                return 1
            if not 0 <= word <= 0xFFFFFFFF:
                print(f"Invalid instruction word: {token}", file=sys.stderr)
                return 1
            print(code_to_instruction(word))
        return 0


if __name__ == "__main__":
    GeckoCLI.run()
