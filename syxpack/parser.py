"""
SysEx message parser.

Classifies one framed message (F0 ... F7 inclusive) into a
ManufacturerSpecific or Universal message. The ID length is
self-describing from the first byte after F0, so parsing is a single
forward pass:

    7E / 7F   -> universal: kind, target, sub-ID #1, sub-ID #2
    00        -> extended manufacturer ID, two more bytes
    01 - 7D   -> standard manufacturer ID
"""

import logging
from typing import List, Optional

from syxpack.errors import MalformedFramingError, TruncatedHeaderError
from syxpack.manufacturer import EXTENDED_MARKER, Manufacturer
from syxpack.message import (
    SYSEX_END,
    SYSEX_START,
    ManufacturerSpecific,
    Message,
    Universal,
    UniversalKind,
)
from syxpack.registry import ManufacturerRegistry
from syxpack.splitter import BufferLike, DanglingPolicy, split_messages

logger = logging.getLogger(__name__)

UNIVERSAL_HEADER_SIZE = 4
EXTENDED_ID_SIZE = 3


def parse_message(buffer: BufferLike, registry: Optional[ManufacturerRegistry] = None) -> Message:
    """
    Parse a single SysEx message.

    Args:
        buffer: Message bytes including the F0 and F7 delimiters
        registry: Registry attached to the parsed Manufacturer for name lookup

    Returns:
        ManufacturerSpecific or Universal message

    Raises:
        MalformedFramingError: Missing F0 / F7
        TruncatedHeaderError: Message ends inside the header
        InvalidManufacturerError: Manufacturer ID fails validation
    """
    data = bytes(buffer)

    if len(data) < 2:
        raise MalformedFramingError(f"Message too short: {len(data)} bytes")
    if data[0] != SYSEX_START:
        raise MalformedFramingError(f"Expected F0 at offset 0, got {data[0]:02X}")
    if data[-1] != SYSEX_END:
        raise MalformedFramingError(f"Expected F7 at offset {len(data) - 1}, got {data[-1]:02X}")

    body = data[1:-1]
    if not body:
        raise TruncatedHeaderError("Message has no identifier")

    first = body[0]

    if first in (UniversalKind.NON_REALTIME, UniversalKind.REALTIME):
        if len(body) < UNIVERSAL_HEADER_SIZE:
            raise TruncatedHeaderError(
                f"Universal header needs {UNIVERSAL_HEADER_SIZE} bytes, got {len(body)}"
            )
        return Universal(
            kind=UniversalKind(first),
            target=body[1],
            sub_id1=body[2],
            sub_id2=body[3],
            payload=body[UNIVERSAL_HEADER_SIZE:],
        )

    id_size = EXTENDED_ID_SIZE if first == EXTENDED_MARKER else 1
    if len(body) < id_size:
        raise TruncatedHeaderError(
            f"Extended manufacturer ID needs {EXTENDED_ID_SIZE} bytes, got {len(body)}"
        )

    return ManufacturerSpecific(
        manufacturer=Manufacturer(body[:id_size], registry=registry),
        payload=body[id_size:],
    )


def parse_messages(
    buffer: BufferLike,
    policy: DanglingPolicy = DanglingPolicy.DROP,
    registry: Optional[ManufacturerRegistry] = None,
) -> List[Message]:
    """
    Split a buffer and parse every message in it.

    Unlike splitting, a message that fails to parse is not skipped: the
    first error propagates.
    """
    messages = [parse_message(raw, registry) for raw in split_messages(buffer, policy)]
    logger.debug("Parsed %d messages", len(messages))
    return messages
