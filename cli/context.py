"""
Shared helpers for CLI commands: settings access, file loading and error
reporting.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Tuple

import typer
from rich.console import Console
from rich.markup import escape

from syxpack.config.settings import SyxSettings
from syxpack.errors import SysExError
from syxpack.files import read_syx_file
from syxpack.message import Message
from syxpack.parser import parse_message
from syxpack.splitter import split_messages

console = Console()

MULTIPLE_MESSAGES_HINT = (
    "More than one System Exclusive message found in file. "
    "Please use `syx split` to separate them."
)


def get_settings(ctx: Optional[typer.Context]) -> SyxSettings:
    """Settings stored by the root callback, or fresh defaults."""
    if ctx is not None and isinstance(ctx.obj, SyxSettings):
        return ctx.obj
    return SyxSettings()


def fail(message: str) -> None:
    """Print an error and exit with status 1."""
    console.print(f"[red]Error: {escape(message)}[/red]")
    raise typer.Exit(1)


@contextmanager
def sysex_errors() -> Iterator[None]:
    """Turn SysExError into an error message and exit status 1."""
    try:
        yield
    except SysExError as e:
        console.print(f"[red]Error ({e.kind.value}): {escape(str(e))}[/red]")
        raise typer.Exit(1)


def load_file(file: Path) -> bytes:
    """Read a .syx file, exiting with an error if it does not exist."""
    if not file.exists():
        fail(f"File not found: {file}")
    return read_syx_file(file)


def load_single_message(file: Path, settings: SyxSettings) -> Tuple[Message, bytes]:
    """
    Load a file expected to hold exactly one message.

    Stray bytes around the message are ignored. A buffer without any complete
    message is parsed as-is so the framing error is reported.

    Returns:
        (parsed message, raw message bytes)
    """
    data = load_file(file)
    with sysex_errors():
        raws = split_messages(data, settings.dangling)
        if len(raws) > 1:
            console.print(MULTIPLE_MESSAGES_HINT)
            raise typer.Exit(1)
        raw = raws[0] if raws else data
        return parse_message(raw), raw
