"""
Make command - build a manufacturer-specific SysEx message.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from cli.context import sysex_errors
from cli.display.formatters import byte_count
from syxpack.files import write_syx_file
from syxpack.message import make_message

console = Console()
app = typer.Typer()


@app.command()
def make(
    manufacturer: str = typer.Option(
        ..., "--manufacturer", "-m", help="Hex ID (42, 002109) or manufacturer name"
    ),
    payload: str = typer.Option(..., "--payload", "-p", help="Payload as a hex string"),
    outfile: Path = typer.Option(..., "--outfile", "-o", help="Output .syx file"),
) -> None:
    """
    Make a manufacturer-specific SysEx message.

    The manufacturer is either a hex identifier (two digits, or six digits
    starting with 00) or a name, which may be abbreviated to a prefix.

    Examples:

        syx make -m 42 -p 3028 -o korg.syx

        syx make -m Roland -p 411042 -o roland.syx

        syx make -m 002109 -p 3028 -o ni.syx
    """
    with sysex_errors():
        message = make_message(manufacturer, payload)

    data = message.to_bytes()
    write_syx_file(outfile, data)
    console.print(
        f"Wrote {byte_count(len(data))} to {outfile} "
        f"({escape(message.manufacturer.name)}, {message.manufacturer.hex})"
    )


if __name__ == "__main__":
    app()
