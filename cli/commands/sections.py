"""
Sections command - show the byte layout of a SysEx message.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.context import get_settings, load_single_message
from cli.display.formatters import message_summary
from cli.display.hex_view import display_hex_dump
from cli.display.tables import display_sections_table
from syxpack.sections import analyze_sections

console = Console()
app = typer.Typer()


@app.command()
def sections(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="SysEx file with a single message"),
    no_hex: bool = typer.Option(False, "--no-hex", help="Hide the hex dump"),
    max_lines: int = typer.Option(32, "--lines", "-n", help="Maximum hex dump lines"),
) -> None:
    """
    Display the sections of a SysEx message.

    Shows the offset and length of:
    - the F0 initiator
    - the manufacturer identifier or universal header
    - the payload
    - the F7 terminator

    Examples:

        syx sections patch.syx

        syx sections patch.syx --no-hex
    """
    message, raw = load_single_message(file, get_settings(ctx))
    layout = analyze_sections(message, len(raw))

    console.print(message_summary(message))
    console.print()
    display_sections_table(layout)

    if not no_hex:
        console.print()
        display_hex_dump(raw, title=str(file.name), sections=layout, max_lines=max_lines)


if __name__ == "__main__":
    app()
