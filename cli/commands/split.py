"""
Split command - write each message of a SysEx file to its own file.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from cli.context import get_settings, load_file, sysex_errors
from syxpack.files import split_output_path, write_syx_file
from syxpack.splitter import split_messages

console = Console()
app = typer.Typer()


@app.command()
def split(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="SysEx file to split"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Report what is written"),
    outdir: Optional[Path] = typer.Option(
        None, "--outdir", "-d", help="Output directory (default: current directory)"
    ),
) -> None:
    """
    Split the messages of a SysEx file into separate files.

    Output files are named after the input with a running number,
    e.g. dump.syx -> dump-001.syx, dump-002.syx, ...
    A file holding a single message is left alone.

    Examples:

        syx split dump.syx --verbose

        syx split dump.syx --outdir patches/
    """
    settings = get_settings(ctx)
    data = load_file(file)

    with sysex_errors():
        messages = split_messages(data, settings.dangling)

    count = len(messages)
    if verbose:
        console.print("Found one message" if count == 1 else f"Found {count} messages")

    if count <= 1:
        return

    directory = outdir or settings.split_dir or Path(".")
    directory.mkdir(parents=True, exist_ok=True)

    for index, message in enumerate(messages, start=1):
        output = split_output_path(file, index, directory)
        if verbose:
            console.print(f"Writing {output}")
        write_syx_file(output, message)


if __name__ == "__main__":
    app()
