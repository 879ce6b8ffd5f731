"""
Error types for SysEx parsing and construction.

Every failure raised by syxpack is a SysExError carrying an ErrorKind,
so callers can dispatch on ``exc.kind`` instead of matching on messages.
"""

from enum import Enum


class ErrorKind(Enum):
    """Closed set of failure kinds."""

    MALFORMED_FRAMING = "malformed framing"
    TRUNCATED_HEADER = "truncated header"
    INVALID_MANUFACTURER_LENGTH = "invalid manufacturer length"
    INVALID_MANUFACTURER_PREFIX = "invalid manufacturer prefix"
    INVALID_MANUFACTURER_BYTE = "invalid manufacturer byte"
    INVALID_HEADER_BYTE = "invalid header byte"
    MANUFACTURER_NOT_FOUND = "manufacturer not found"
    DECODE_ERROR = "decode error"
    UNTERMINATED_MESSAGE = "unterminated message"


class SysExError(ValueError):
    """Base class for all SysEx errors."""

    kind: ErrorKind


class MalformedFramingError(SysExError):
    """Missing or misplaced 0xF0 / 0xF7 delimiter."""

    kind = ErrorKind.MALFORMED_FRAMING


class UnterminatedMessageError(MalformedFramingError):
    """An 0xF0 initiator without a matching 0xF7 terminator."""

    kind = ErrorKind.UNTERMINATED_MESSAGE

    def __init__(self, offset: int):
        super().__init__(f"Unterminated message starting at offset 0x{offset:06X}")
        self.offset = offset


class TruncatedHeaderError(SysExError):
    """Message ends before its header bytes are complete."""

    kind = ErrorKind.TRUNCATED_HEADER


class InvalidHeaderByteError(SysExError):
    """A universal header byte is outside the 7-bit data range."""

    kind = ErrorKind.INVALID_HEADER_BYTE


class InvalidManufacturerError(SysExError):
    """Manufacturer identifier failed validation."""


class InvalidManufacturerLengthError(InvalidManufacturerError):
    kind = ErrorKind.INVALID_MANUFACTURER_LENGTH


class InvalidManufacturerPrefixError(InvalidManufacturerError):
    kind = ErrorKind.INVALID_MANUFACTURER_PREFIX


class InvalidManufacturerByteError(InvalidManufacturerError):
    kind = ErrorKind.INVALID_MANUFACTURER_BYTE


class ManufacturerNotFoundError(SysExError):
    """Name lookup found no matching manufacturer."""

    kind = ErrorKind.MANUFACTURER_NOT_FOUND


class DecodeError(SysExError):
    """Text could not be decoded into bytes."""

    kind = ErrorKind.DECODE_ERROR
