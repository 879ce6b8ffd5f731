"""
Identify command - classify every message in a SysEx file.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from cli.context import get_settings, load_file, sysex_errors
from cli.display.tables import display_message_info
from syxpack.errors import SysExError
from syxpack.parser import parse_message
from syxpack.splitter import split_messages

console = Console()
app = typer.Typer()


@app.command()
def identify(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="SysEx file to identify"),
) -> None:
    """
    Identify the messages in a SysEx file.

    For each message shows the manufacturer (identifier, name and group)
    or the universal message header, the payload size and an MD5 digest.

    Examples:

        syx identify dump.syx
    """
    settings = get_settings(ctx)
    data = load_file(file)

    with sysex_errors():
        raws = split_messages(data, settings.dangling)
        if not raws:
            # Report why the buffer is not a message
            parse_message(data)

    failed = 0
    for number, raw in enumerate(raws, start=1):
        try:
            message = parse_message(raw)
        except SysExError as e:
            console.print(f"[red]Message {number}: {e.kind.value}: {escape(str(e))}[/red]")
            failed += 1
            continue
        display_message_info(message, number, len(raws))

    if failed:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
