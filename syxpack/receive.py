"""
Assemble SysEx messages from ReceiveMIDI text output.

ReceiveMIDI prints one line per message, for example:

    system-exclusive hex 43 10 4C 00 00 7E 00
    system-exclusive dec 67 16 76 0 0 126 0

The data bytes exclude F0/F7, so the assembler adds them back. Tokens that
are not a valid byte in the given base are skipped instead of discarding
the whole message.
"""

import logging
import re
from enum import IntEnum
from typing import Iterable, Iterator, List, Optional

from syxpack.message import SYSEX_END, SYSEX_START

logger = logging.getLogger(__name__)

SYSEX_KEYWORD = "system-exclusive"

_DIGITS = {
    16: re.compile(r"[0-9A-Fa-f]+"),
    10: re.compile(r"[0-9]+"),
}


class ReceiveBase(IntEnum):
    """Numeric base of the byte tokens."""

    HEX = 16
    DEC = 10

    @classmethod
    def from_token(cls, token: str) -> "ReceiveBase":
        return cls.HEX if token == "hex" else cls.DEC


def parse_byte_token(token: str, base: ReceiveBase) -> Optional[int]:
    """Parse one byte token, or return None if it is not a byte in ``base``."""
    if not _DIGITS[base].fullmatch(token):
        return None
    value = int(token, base)
    return value if value <= 0xFF else None


def assemble_message(base: ReceiveBase, tokens: Iterable[str]) -> bytes:
    """
    Build a framed message from byte tokens.

    Args:
        base: Base the tokens are written in
        tokens: Data byte tokens, without F0/F7

    Returns:
        F0 + decoded bytes + F7

    Example:
        >>> assemble_message(ReceiveBase.HEX, ["30", "ZZ", "28"]).hex()
        'f03028f7'
    """
    data: List[int] = [SYSEX_START]
    for token in tokens:
        value = parse_byte_token(token, base)
        if value is None:
            logger.debug("Skipped invalid byte token %r (base %d)", token, int(base))
            continue
        data.append(value)
    data.append(SYSEX_END)
    return bytes(data)


def parse_receive_line(line: str) -> Optional[bytes]:
    """
    Assemble a message from one ReceiveMIDI line.

    Returns:
        Message bytes, or None if the line is not a SysEx line with at
        least one data token
    """
    parts = line.split()
    if len(parts) < 3 or parts[0] != SYSEX_KEYWORD:
        return None
    return assemble_message(ReceiveBase.from_token(parts[1]), parts[2:])


def receive_stream(lines: Iterable[str]) -> Iterator[bytes]:
    """Yield one assembled message per SysEx line, ignoring all other lines."""
    for line in lines:
        data = parse_receive_line(line)
        if data is not None:
            yield data
