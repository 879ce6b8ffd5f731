"""
Hex string helpers for command-line arguments and display.
"""

from typing import Union

from syxpack.errors import DecodeError


def decode_hex(text: str) -> bytes:
    """
    Decode a hex string to bytes.

    Whitespace between digits is ignored, so both ``"4230"`` and ``"42 30"``
    are accepted.

    Raises:
        DecodeError: Odd number of digits or a non-hex character
    """
    digits = "".join(text.split())
    try:
        return bytes.fromhex(digits)
    except ValueError as e:
        raise DecodeError(f"Invalid hex string '{text}': {e}") from e


def format_hex(data: Union[bytes, bytearray], sep: str = " ") -> str:
    """Format bytes as uppercase hex pairs, e.g. ``F0 43 10 F7``."""
    return sep.join(f"{b:02X}" for b in data)
