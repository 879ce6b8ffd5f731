"""
Receive command - capture SysEx messages from ReceiveMIDI output.
"""

import sys
import time
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from cli.context import get_settings
from syxpack.files import receive_output_path, write_syx_file
from syxpack.receive import receive_stream

console = Console()
app = typer.Typer()


@app.command()
def receive(
    ctx: typer.Context,
    outdir: Optional[Path] = typer.Option(
        None, "--outdir", "-d", help="Output directory (default: SYX_RECEIVE_DIR or current)"
    ),
) -> None:
    """
    Receive SysEx messages from stdin in the ReceiveMIDI format.

    Each "system-exclusive hex ..." or "system-exclusive dec ..." line is
    written to a file named after the current Unix time. Other lines are
    ignored, as are byte tokens that cannot be parsed.

    Examples:

        receivemidi dev "USB MIDI" | syx receive

        receivemidi dev "USB MIDI" | syx receive --outdir captures/
    """
    settings = get_settings(ctx)
    directory = outdir or settings.receive_dir
    directory.mkdir(parents=True, exist_ok=True)

    for data in receive_stream(sys.stdin):
        console.print(f"Received {len(data)} bytes of System Exclusive data")
        output = write_syx_file(receive_output_path(directory, time.time()), data)
        console.print(f"[dim]Wrote {output}[/dim]")


if __name__ == "__main__":
    app()
