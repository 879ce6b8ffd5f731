"""
Display formatting utilities for CLI output.
"""

from syxpack.message import ManufacturerSpecific, Message


def byte_count(count: int) -> str:
    """
    Format a byte count with the right noun.

    Returns:
        "1 byte" or "12 bytes"
    """
    return f"{count} {'byte' if count == 1 else 'bytes'}"


def format_offset(offset: int) -> str:
    """Six-digit hex offset, e.g. ``000004``."""
    return f"{offset:06X}"


def message_summary(message: Message) -> str:
    """
    One-line description of a message.

    Returns:
        "Korg (42), 2 bytes" or "Universal Non-Real-time, target 7F, 06 01, 0 bytes"
    """
    if isinstance(message, ManufacturerSpecific):
        manufacturer = message.manufacturer
        size = byte_count(len(message.payload))
        return f"{manufacturer.name} ({manufacturer.hex.upper()}), {size}"

    return (
        f"Universal {message.kind}, target {message.target:02X}, "
        f"{message.sub_id1:02X} {message.sub_id2:02X}, {byte_count(len(message.payload))}"
    )
