"""
Section analysis: break a parsed message into labeled byte ranges.

The sections always tile the message exactly:

    +00  Initiator     1 byte    F0
    +01  Identifier    1/3/4     manufacturer ID or universal header
    ...  Payload       0..N
    -01  Terminator    1 byte    F7
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from syxpack.message import ManufacturerSpecific, Message


class SectionKind(Enum):
    """Kind of a message section."""

    INITIATOR = "Message initiator"
    MANUFACTURER_ID = "Manufacturer identifier"
    UNIVERSAL_ID = "Universal message identifier"
    PAYLOAD = "Message payload"
    TERMINATOR = "Message terminator"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MessageSection:
    """
    A labeled byte range within a message.

    Attributes:
        kind: Section kind
        name: Display name
        offset: Offset from message start (inclusive)
        length: Size in bytes
    """

    kind: SectionKind
    name: str
    offset: int
    length: int

    @property
    def end(self) -> int:
        """Offset one past the last byte."""
        return self.offset + self.length


def analyze_sections(message: Message, buffer_length: Optional[int] = None) -> List[MessageSection]:
    """
    Compute the sections of a parsed message.

    Args:
        message: Parsed message
        buffer_length: Length of the original buffer; defaults to the
            serialized length of ``message``

    Returns:
        Initiator, identifier, payload and terminator sections, in order

    Raises:
        ValueError: ``buffer_length`` does not match the message
    """
    header_size = len(message.header)
    expected = 1 + header_size + len(message.payload) + 1
    if buffer_length is None:
        buffer_length = expected
    elif buffer_length != expected:
        raise ValueError(f"Buffer length {buffer_length} does not match message length {expected}")

    if isinstance(message, ManufacturerSpecific):
        identifier = MessageSection(SectionKind.MANUFACTURER_ID, "Manufacturer", 1, header_size)
    else:
        identifier = MessageSection(SectionKind.UNIVERSAL_ID, "Universal", 1, header_size)

    return [
        MessageSection(SectionKind.INITIATOR, "System Exclusive Initiator", 0, 1),
        identifier,
        MessageSection(
            SectionKind.PAYLOAD, "Message Payload", identifier.end, len(message.payload)
        ),
        MessageSection(
            SectionKind.TERMINATOR, "System Exclusive Terminator", buffer_length - 1, 1
        ),
    ]
