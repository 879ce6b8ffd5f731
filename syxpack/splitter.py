"""
Locate and split concatenated SysEx messages in a byte buffer.

A .syx file is usually a plain concatenation of F0 ... F7 messages, but
captures from real devices can carry stray bytes between them or end in
the middle of a message. Stray bytes are always skipped. What happens to
an initiator that never sees its terminator is set by DanglingPolicy.
"""

import logging
from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union

from syxpack.errors import UnterminatedMessageError
from syxpack.message import SYSEX_END, SYSEX_START

logger = logging.getLogger(__name__)

BufferLike = Union[bytes, bytearray, memoryview, Iterable[int]]


class DanglingPolicy(str, Enum):
    """What to do with an F0 that has no matching F7."""

    DROP = "drop"
    ERROR = "error"


def _as_bytes(buffer: BufferLike) -> bytes:
    if isinstance(buffer, bytes):
        return buffer
    return bytes(buffer)


def message_spans(
    buffer: BufferLike, policy: DanglingPolicy = DanglingPolicy.DROP
) -> List[Tuple[int, int]]:
    """
    Find every complete F0 ... F7 span in the buffer.

    A span starts at the most recent unterminated F0 and ends at the next
    F7, inclusive. An F0 followed by another F0 before any F7 is abandoned
    in favour of the newer one, just like one left open at end-of-buffer.

    Args:
        buffer: Raw bytes
        policy: DROP to skip dangling initiators, ERROR to raise

    Returns:
        List of (offset, length) tuples, in buffer order

    Raises:
        UnterminatedMessageError: A dangling initiator under DanglingPolicy.ERROR
    """
    data = _as_bytes(buffer)
    spans: List[Tuple[int, int]] = []
    start: Optional[int] = None
    stray = 0

    for i, byte in enumerate(data):
        if byte == SYSEX_START:
            if start is not None:
                _dangling(start, policy)
            start = i
        elif byte == SYSEX_END and start is not None:
            spans.append((start, i - start + 1))
            start = None
        elif start is None:
            stray += 1

    if start is not None:
        _dangling(start, policy)

    if stray:
        logger.debug("Skipped %d stray bytes outside any message", stray)

    return spans


def _dangling(offset: int, policy: DanglingPolicy) -> None:
    if policy == DanglingPolicy.ERROR:
        raise UnterminatedMessageError(offset)
    logger.debug("Dropped unterminated message at offset 0x%06X", offset)


def message_count(buffer: BufferLike) -> int:
    """Number of complete messages in the buffer."""
    return len(message_spans(buffer))


def split_messages(
    buffer: BufferLike, policy: DanglingPolicy = DanglingPolicy.DROP
) -> List[bytes]:
    """
    Split a buffer into individual messages.

    Each element includes its F0 and F7 delimiters.

    Example:
        >>> split_messages(bytes.fromhex("F04201F7F04302F7"))
        [b'\\xf0B\\x01\\xf7', b'\\xf0C\\x02\\xf7']
    """
    data = _as_bytes(buffer)
    return [data[offset : offset + length] for offset, length in message_spans(data, policy)]
