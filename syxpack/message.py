"""
SysEx message model and wire encoding.

Wire format:
    F0 <header> <payload...> F7

Where the header is one of:
    - nn            Standard manufacturer ID (01-7F, except 7E/7F)
    - 00 nn nn      Extended manufacturer ID
    - 7E/7F tt s1 s2  Universal message: kind, target device, sub-ID #1, sub-ID #2

Messages never store the F0/F7 delimiters; ``to_bytes()`` adds them back.
"""

import hashlib
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union

from syxpack.errors import InvalidHeaderByteError, InvalidManufacturerByteError
from syxpack.manufacturer import Manufacturer, parse_manufacturer_arg
from syxpack.registry import ManufacturerRegistry
from syxpack.utils.hexstr import decode_hex

SYSEX_START = 0xF0
SYSEX_END = 0xF7


class UniversalKind(IntEnum):
    """Universal SysEx message kinds."""

    NON_REALTIME = 0x7E
    REALTIME = 0x7F

    def __str__(self) -> str:
        return "Real-time" if self is UniversalKind.REALTIME else "Non-Real-time"


@dataclass(frozen=True)
class ManufacturerSpecific:
    """
    Manufacturer-specific SysEx message.

    Attributes:
        manufacturer: Originating manufacturer
        payload: Everything between the manufacturer ID and F7
    """

    manufacturer: Manufacturer
    payload: bytes = b""

    def __post_init__(self):
        object.__setattr__(self, "payload", bytes(self.payload))
        if not self.manufacturer.is_extended and self.manufacturer.code[0] in tuple(UniversalKind):
            raise InvalidManufacturerByteError(
                f"{self.manufacturer.code[0]:02X} is a universal ID, not a manufacturer"
            )

    @property
    def header(self) -> bytes:
        return self.manufacturer.to_bytes()

    def to_bytes(self) -> bytes:
        return bytes([SYSEX_START]) + self.header + self.payload + bytes([SYSEX_END])

    def digest(self) -> str:
        return hashlib.md5(self.to_bytes()).hexdigest()


@dataclass(frozen=True)
class Universal:
    """
    Universal (non-manufacturer) SysEx message.

    Attributes:
        kind: Real-time or non-real-time
        target: Device ID / channel (7F = all call)
        sub_id1: Sub-ID #1, e.g. 06 = General Information
        sub_id2: Sub-ID #2, e.g. 02 = Identity Reply
        payload: Everything after sub-ID #2 up to F7
    """

    kind: UniversalKind
    target: int
    sub_id1: int
    sub_id2: int
    payload: bytes = b""

    def __post_init__(self):
        try:
            object.__setattr__(self, "kind", UniversalKind(self.kind))
        except ValueError as e:
            raise InvalidHeaderByteError(
                f"Universal kind must be 7E or 7F, got {self.kind!r}"
            ) from e
        object.__setattr__(self, "payload", bytes(self.payload))

        fields = (("target", self.target), ("sub_id1", self.sub_id1), ("sub_id2", self.sub_id2))
        for label, value in fields:
            if not 0 <= value <= 0x7F:
                raise InvalidHeaderByteError(f"Universal {label} must be 00-7F, got {value}")

    @property
    def header(self) -> bytes:
        return bytes([self.kind, self.target, self.sub_id1, self.sub_id2])

    @property
    def is_realtime(self) -> bool:
        return self.kind == UniversalKind.REALTIME

    def to_bytes(self) -> bytes:
        return bytes([SYSEX_START]) + self.header + self.payload + bytes([SYSEX_END])

    def digest(self) -> str:
        return hashlib.md5(self.to_bytes()).hexdigest()


Message = Union[ManufacturerSpecific, Universal]


def encode_message(message: Message) -> bytes:
    """Serialize a message to wire bytes, delimiters included."""
    return message.to_bytes()


def make_message(
    manufacturer: str,
    payload: str,
    registry: Optional[ManufacturerRegistry] = None,
) -> ManufacturerSpecific:
    """
    Build a manufacturer-specific message from text arguments.

    Args:
        manufacturer: Hex ID (``42``, ``002109``) or manufacturer name prefix
        payload: Payload as a hex string
        registry: Registry for name lookup

    Example:
        >>> make_message("Korg", "3028").to_bytes().hex()
        'f0423028f7'
    """
    return ManufacturerSpecific(
        manufacturer=parse_manufacturer_arg(manufacturer, registry),
        payload=decode_hex(payload),
    )
