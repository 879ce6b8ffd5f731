"""Test configuration and fixtures."""

import logging

import pytest
from typer.testing import CliRunner

# F0 42 30 28 F7 - Korg, standard ID
KORG_MESSAGE = bytes([0xF0, 0x42, 0x30, 0x28, 0xF7])

# F0 00 21 09 30 28 F7 - Native Instruments, extended ID
NI_MESSAGE = bytes([0xF0, 0x00, 0x21, 0x09, 0x30, 0x28, 0xF7])

# F0 7E 7F 06 01 F7 - Universal Identity Request, all-call
IDENTITY_REQUEST = bytes([0xF0, 0x7E, 0x7F, 0x06, 0x01, 0xF7])


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo root logger changes made by configure_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name in ("syxpack", "cli"):
        logging.getLogger(name).setLevel(logging.NOTSET)


@pytest.fixture
def cli_runner():
    """Return a Typer CLI runner."""
    return CliRunner()


@pytest.fixture
def korg_message():
    return KORG_MESSAGE


@pytest.fixture
def ni_message():
    return NI_MESSAGE


@pytest.fixture
def identity_request():
    return IDENTITY_REQUEST


@pytest.fixture
def multi_message_data():
    """Three messages with stray bytes between them."""
    return KORG_MESSAGE + b"\x00\x01" + NI_MESSAGE + IDENTITY_REQUEST


@pytest.fixture
def single_syx_file(tmp_path):
    """Return path to a .syx file holding one extended-ID message."""
    path = tmp_path / "patch.syx"
    path.write_bytes(NI_MESSAGE)
    return path


@pytest.fixture
def universal_syx_file(tmp_path):
    """Return path to a .syx file holding one universal message."""
    path = tmp_path / "identity.syx"
    path.write_bytes(IDENTITY_REQUEST)
    return path


@pytest.fixture
def multi_syx_file(tmp_path, multi_message_data):
    """Return path to a .syx file holding three messages."""
    path = tmp_path / "dump.syx"
    path.write_bytes(multi_message_data)
    return path
