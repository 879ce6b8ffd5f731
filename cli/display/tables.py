"""
Rich table displays for SysEx message information.
"""

from typing import List

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from cli.display.formatters import byte_count, format_offset
from cli.display.hex_view import SECTION_STYLES
from syxpack.message import ManufacturerSpecific, Message
from syxpack.sections import MessageSection

console = Console()


def display_message_info(message: Message, number: int = 1, count: int = 1) -> None:
    """Display identification of a single message."""

    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    table.add_column("Property", style="cyan", width=14)
    table.add_column("Value")

    if isinstance(message, ManufacturerSpecific):
        manufacturer = message.manufacturer
        kind = "Manufacturer-specific"
        table.add_row("Identifier", manufacturer.hex)
        table.add_row("Name", escape(manufacturer.name))
        table.add_row("Group", str(manufacturer.group))
    else:
        kind = "Universal"
        table.add_row("Kind", str(message.kind))
        table.add_row("Target", f"{message.target:02X}")
        table.add_row("Sub ID1", f"{message.sub_id1:02X}")
        table.add_row("Sub ID2", f"{message.sub_id2:02X}")

    table.add_row("Payload", byte_count(len(message.payload)))
    table.add_row("MD5 digest", message.digest())

    title = f"Message {number} of {count}" if count > 1 else "System Exclusive Message"
    console.print(
        Panel(
            table,
            title=f"[bold]{title}[/bold]",
            subtitle=kind,
            border_style="blue",
            expand=False,
        )
    )


def display_sections_table(sections: List[MessageSection]) -> None:
    """Display the section layout of a message."""

    table = Table(
        title="Message Sections",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Offset", style="dim", width=8)
    table.add_column("Name", width=30)
    table.add_column("Kind", width=30)
    table.add_column("Length", justify="right", width=10)

    for section in sections:
        style = SECTION_STYLES[section.kind]
        table.add_row(
            format_offset(section.offset),
            f"[{style}]{section.name}[/{style}]",
            str(section.kind),
            byte_count(section.length),
        )

    console.print(table)
