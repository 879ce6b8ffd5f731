"""
Hex dump display utilities.
"""

from typing import Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from syxpack.sections import MessageSection, SectionKind

console = Console()

SECTION_STYLES: Dict[SectionKind, str] = {
    SectionKind.INITIATOR: "bright_blue",
    SectionKind.MANUFACTURER_ID: "green",
    SectionKind.UNIVERSAL_ID: "magenta",
    SectionKind.PAYLOAD: "white",
    SectionKind.TERMINATOR: "bright_blue",
}


def _style_for_offset(sections: List[MessageSection], offset: int) -> Optional[str]:
    for section in sections:
        if section.offset <= offset < section.end:
            return SECTION_STYLES[section.kind]
    return None


def display_hex_dump(
    data: bytes,
    title: str = "Hex Dump",
    sections: Optional[List[MessageSection]] = None,
    bytes_per_line: int = 16,
    max_lines: int = 32,
) -> None:
    """Display formatted hex dump with Rich, coloring bytes by section."""

    sections = sections or []
    lines = []
    end = min(len(data), max_lines * bytes_per_line)

    for offset in range(0, end, bytes_per_line):
        chunk = data[offset : offset + bytes_per_line]

        # Hex part
        hex_parts = []
        for i, b in enumerate(chunk):
            if i == 8:
                hex_parts.append(" ")  # Extra space at midpoint
            style = _style_for_offset(sections, offset + i)
            hex_parts.append(f"[{style}]{b:02X}[/{style}]" if style else f"{b:02X}")
        hex_str = " ".join(hex_parts)

        # Pad to full width; markup does not count toward the visible length
        missing = bytes_per_line - len(chunk)
        if missing:
            hex_str += "   " * missing + ("  " if len(chunk) <= 8 else "")

        # ASCII part
        ascii_str = "".join(chr(b) if 32 <= b < 127 else "." for b in chunk)

        lines.append(f"[dim]{offset:06X}[/dim]  {hex_str}  [cyan]{escape(ascii_str)}[/cyan]")

    if len(data) > end:
        remaining = len(data) - end
        lines.append(f"[dim]... {remaining} more bytes ...[/dim]")

    content = "\n".join(lines)
    console.print(Panel(content, title=title, border_style="blue", expand=False))
