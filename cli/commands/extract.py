"""
Extract command - write the payload of a message to a file.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.context import get_settings, load_single_message
from cli.display.formatters import byte_count
from syxpack.files import write_syx_file

console = Console()
app = typer.Typer()


@app.command()
def extract(
    ctx: typer.Context,
    infile: Path = typer.Argument(..., help="SysEx file with a single message"),
    outfile: Path = typer.Argument(..., help="File to write the payload to"),
) -> None:
    """
    Extract the payload from a single-message SysEx file.

    The delimiters and the manufacturer or universal header are stripped;
    for "F0 42 30 28 54 02 ... 5C F7" the payload is "30 28 54 02 ... 5C".

    Examples:

        syx extract patch.syx patch.bin
    """
    message, _ = load_single_message(infile, get_settings(ctx))
    write_syx_file(outfile, message.payload)
    console.print(f"Wrote {byte_count(len(message.payload))} of payload to {outfile}")


if __name__ == "__main__":
    app()
