"""Utility functions for syxpack."""

from syxpack.utils.hexstr import decode_hex, format_hex
from syxpack.utils.manufacturer_ids import MANUFACTURER_IDS

__all__ = [
    "decode_hex",
    "format_hex",
    "MANUFACTURER_IDS",
]
