"""
syx - Inspect, split and build MIDI System Exclusive files.

A modern CLI tool for working with .syx files.
"""

from typing import Optional

import typer
from rich.console import Console

from cli.commands.extract import extract
from cli.commands.identify import identify
from cli.commands.make import make
from cli.commands.receive import receive
from cli.commands.sections import sections
from cli.commands.split import split
from syxpack import __version__
from syxpack.config.logging import configure_logging
from syxpack.config.settings import SyxSettings
from syxpack.splitter import DanglingPolicy

console = Console()

# Main app
app = typer.Typer(
    name="syx",
    help="Inspect, split and build MIDI System Exclusive files.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="identify")(identify)
app.command(name="extract")(extract)
app.command(name="split")(split)
app.command(name="sections")(sections)
app.command(name="receive")(receive)
app.command(name="make")(make)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]syx[/bold] version {__version__}")
    console.print("[dim]MIDI System Exclusive message tool[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    debug: bool = typer.Option(False, "--debug", help="Debug logging to stderr"),
    log_json: bool = typer.Option(False, "--log-json", help="Structured JSON log output"),
    dangling: Optional[DanglingPolicy] = typer.Option(
        None, "--dangling", help="Unterminated messages: drop them or fail"
    ),
) -> None:
    """
    syx - MIDI System Exclusive file tool.

    Works with [cyan]manufacturer-specific[/cyan] and [cyan]universal[/cyan]
    SysEx messages stored in .syx files.

    [bold]Inspection Commands:[/bold]

        syx identify dump.syx         # Manufacturer, payload size, digest
        syx sections patch.syx        # Byte layout of a message

    [bold]File Commands:[/bold]

        syx split dump.syx            # One file per message
        syx extract patch.syx out.bin # Payload only
        syx make -m 42 -p 3028 -o korg.syx
        syx receive < capture.txt     # ReceiveMIDI text to .syx

    Use --help with any command for more details.
    """
    if version_flag:
        version()
        raise typer.Exit()

    settings = SyxSettings.from_cli(
        debug=debug or None,
        log_json=log_json or None,
        dangling=dangling,
    )
    configure_logging(debug=settings.debug, log_json=settings.log_json)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
