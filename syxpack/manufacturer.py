"""
Manufacturer identifier value type.

A manufacturer ID is either one byte (standard, 0x01-0x7F) or three bytes
(extended, 0x00 followed by two 7-bit bytes). The 0x00 marker is what tells
a parser to read two more bytes.
"""

from dataclasses import dataclass, field
from typing import Optional

from syxpack.errors import (
    DecodeError,
    InvalidManufacturerByteError,
    InvalidManufacturerLengthError,
    InvalidManufacturerPrefixError,
)
from syxpack.registry import (
    ManufacturerGroup,
    ManufacturerRegistry,
    default_registry,
    group_for_code,
)
from syxpack.utils.hexstr import decode_hex

EXTENDED_MARKER = 0x00


@dataclass(frozen=True)
class Manufacturer:
    """
    Validated manufacturer identifier.

    Attributes:
        code: Raw ID bytes (1 or 3)
        registry: Registry used for name lookup; the shared default if None.
            Not part of equality.

    Example:
        >>> Manufacturer(bytes([0x00, 0x21, 0x09])).name
        'Native Instruments'
    """

    code: bytes
    registry: Optional[ManufacturerRegistry] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        code = bytes(self.code)
        object.__setattr__(self, "code", code)

        if len(code) == 1:
            if code[0] == EXTENDED_MARKER:
                raise InvalidManufacturerLengthError(
                    "Extended manufacturer ID 00 needs two more bytes"
                )
            if code[0] > 0x7F:
                raise InvalidManufacturerByteError(
                    f"Manufacturer ID must be 01-7F, got {code[0]:02X}"
                )
        elif len(code) == 3:
            if code[0] != EXTENDED_MARKER:
                raise InvalidManufacturerPrefixError(
                    f"Extended manufacturer ID must start with 00, got {code.hex().upper()}"
                )
            if code[1] > 0x7F or code[2] > 0x7F:
                raise InvalidManufacturerByteError(
                    f"Extended manufacturer ID bytes must be 00-7F, got {code.hex().upper()}"
                )
        else:
            raise InvalidManufacturerLengthError(
                f"Manufacturer ID must be 1 or 3 bytes, got {len(code)}"
            )

    @property
    def is_extended(self) -> bool:
        return len(self.code) == 3

    @property
    def name(self) -> str:
        registry = self.registry if self.registry is not None else default_registry()
        return registry.name_for(self.code)

    @property
    def group(self) -> ManufacturerGroup:
        return group_for_code(self.code)

    @property
    def hex(self) -> str:
        """ID as lowercase hex digits, e.g. ``002109``."""
        return self.code.hex()

    def to_bytes(self) -> bytes:
        return self.code

    def __len__(self) -> int:
        return len(self.code)

    def __str__(self) -> str:
        return self.name


def parse_manufacturer_arg(
    text: str, registry: Optional[ManufacturerRegistry] = None
) -> Manufacturer:
    """
    Resolve a command-line manufacturer argument.

    Text starting with a digit 0-7 is taken as a hex ID: six digits when it
    starts with ``00`` (extended), two otherwise. Anything else is looked up
    as a name or name prefix.

    Args:
        text: Hex ID like ``42`` / ``002109``, or a name like ``Korg``
        registry: Registry for name lookup (default registry if None)

    Returns:
        Validated Manufacturer

    Raises:
        InvalidManufacturerLengthError: Wrong number of hex digits
        DecodeError: Not valid hex
        ManufacturerNotFoundError: No name match
    """
    registry = registry if registry is not None else default_registry()
    text = text.strip()
    if not text:
        raise DecodeError("Empty manufacturer identifier")

    if text[0] in "01234567":
        if text.startswith("00"):
            if len(text) != 6:
                raise InvalidManufacturerLengthError(
                    "Extended manufacturer ID must have six digits, like '002109'"
                )
        elif len(text) != 2:
            raise InvalidManufacturerLengthError(
                "Standard manufacturer ID must have two digits, like '42'"
            )
        return Manufacturer(decode_hex(text), registry=registry)

    return registry.lookup_by_name(text)
