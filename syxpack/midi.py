"""
Conversion between syxpack messages and mido ``sysex`` messages.

mido keeps SysEx data without the F0/F7 delimiters and only accepts
7-bit data bytes, so a message with 8-bit payload bytes cannot be
converted.
"""

from typing import Optional

import mido

from syxpack.errors import MalformedFramingError
from syxpack.message import Message
from syxpack.parser import parse_message
from syxpack.registry import ManufacturerRegistry


def to_mido(message: Message) -> mido.Message:
    """
    Convert to a mido sysex message.

    Raises:
        ValueError: Payload contains bytes above 0x7F
    """
    return mido.Message("sysex", data=message.to_bytes()[1:-1])


def from_mido(msg: mido.Message, registry: Optional[ManufacturerRegistry] = None) -> Message:
    """
    Convert a mido sysex message.

    Raises:
        MalformedFramingError: ``msg`` is not a sysex message
    """
    if msg.type != "sysex":
        raise MalformedFramingError(f"Expected a sysex message, got {msg.type}")
    return parse_message(msg.bytes(), registry)
