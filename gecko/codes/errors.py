class GeckoCodeError(Exception):
    pass


class EmptyCodeError(GeckoCodeError):
    def __init__(self) -> None:
        super().__init__("Empty gecko code")


class MalformedCodeError(GeckoCodeError):
    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        message = "Malformed gecko code"
        if detail:
            message += f". {detail}"
        super().__init__(message)


class InvalidCodeTypeError(GeckoCodeError):
    def __init__(self, line_number: int, value: int) -> None:
        self.line_number = line_number
        self.value = value
        super().__init__(
            f"Invalid gecko code type. Line number: {line_number}, found value: 0x{value:08X}"
        )


class CodeParseError(GeckoCodeError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to parse gecko code. {reason}")


class TruncatedCodeError(GeckoCodeError):
    """A record needed more words than the code has left."""

    def __init__(self, position: int, length: int) -> None:
        self.position = position
        self.length = length
        super().__init__(
            f"Truncated gecko code: read at word {position} but the code has {length} words"
        )
