"""
File helpers for .syx files.

The core never touches the filesystem; these are the loader and writer the
CLI plugs in.
"""

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


def read_syx_file(path: PathLike) -> bytes:
    """Read a whole .syx file."""
    with open(path, "rb") as f:
        return f.read()


def write_syx_file(path: PathLike, data: bytes) -> Path:
    """Write bytes to ``path`` and return it as a Path."""
    path = Path(path)
    with open(path, "wb") as f:
        f.write(data)
    return path


def split_output_path(path: PathLike, index: int, directory: Optional[PathLike] = None) -> Path:
    """
    Output path for the ``index``-th (1-based) message split from ``path``.

    Example:
        >>> split_output_path("dump.syx", 3)
        PosixPath('dump-003.syx')
    """
    path = Path(path)
    directory = Path(directory) if directory is not None else Path(".")
    return directory / f"{path.stem}-{index:03d}{path.suffix}"


def receive_output_path(directory: PathLike, timestamp: float) -> Path:
    """
    Unused ``<epoch-seconds>.syx`` path in ``directory``.

    Several messages can arrive within the same second, so a ``-N`` suffix
    is added until the name is free.
    """
    directory = Path(directory)
    stem = str(int(timestamp))
    candidate = directory / f"{stem}.syx"
    n = 1
    while candidate.exists():
        candidate = directory / f"{stem}-{n}.syx"
        n += 1
    return candidate
