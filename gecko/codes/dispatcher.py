import logging
from typing import List, Optional, Sequence

from ..config import GeckoConfig
from .address import larger_address_flag
from .code_types import CodeType, tag_of
from .errors import EmptyCodeError, InvalidCodeTypeError, MalformedCodeError
from .reader import WordCursor
from .records import DECODERS

logger = logging.getLogger(__name__)


def convert_gecko_code(words: Sequence[int], config: Optional[GeckoConfig] = None) -> str:
    """Annotate a whole Gecko code, record by record.

    Raises a GeckoCodeError subclass on the first problem; nothing decoded
    before the failure is returned.
    """
    if config is None:
        config = GeckoConfig()
    if not words:
        raise EmptyCodeError()
    if len(words) % 2 != 0:
        raise MalformedCodeError(f"odd number of words ({len(words)})")

    cursor = WordCursor.over(words)
    out: List[str] = []
    while not cursor.at_end():
        start = cursor.position()
        word = cursor.peek()
        tag = tag_of(word)
        code_type = CodeType.from_tag(tag)
        if code_type is CodeType.UNSUPPORTED:
            raise InvalidCodeTypeError(start // 2 + 1, word)

        out.append(DECODERS[code_type](cursor, larger_address_flag(tag), config))
        out.append(config.record_separator)
        logger.debug(
            "record %d: tag 0x%02X (%s), %d words",
            start // 2 + 1,
            tag,
            code_type.name,
            cursor.position() - start,
        )
    return "".join(out)
