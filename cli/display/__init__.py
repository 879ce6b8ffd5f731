"""
CLI display modules.
"""

from cli.display.tables import (
    display_message_info,
    display_sections_table,
)
from cli.display.hex_view import display_hex_dump

__all__ = [
    "display_message_info",
    "display_sections_table",
    "display_hex_dump",
]
