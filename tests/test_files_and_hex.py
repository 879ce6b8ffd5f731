"""Tests for .syx file helpers and hex strings."""

from pathlib import Path

import pytest

from syxpack.errors import DecodeError
from syxpack.files import (
    read_syx_file,
    receive_output_path,
    split_output_path,
    write_syx_file,
)
from syxpack.utils.hexstr import decode_hex, format_hex


class TestHex:
    def test_decode(self):
        assert decode_hex("4230") == b"\x42\x30"
        assert decode_hex("42 30\n28") == b"\x42\x30\x28"
        assert decode_hex("") == b""

    @pytest.mark.parametrize("text", ["423", "4G", "0x42"])
    def test_decode_invalid(self, text):
        with pytest.raises(DecodeError):
            decode_hex(text)

    def test_format(self):
        assert format_hex(b"\xF0\x43\x10\xF7") == "F0 43 10 F7"
        assert format_hex(b"\x01\x02", sep="") == "0102"


class TestFiles:
    def test_write_then_read(self, tmp_path, korg_message):
        path = write_syx_file(tmp_path / "out.syx", korg_message)
        assert isinstance(path, Path)
        assert read_syx_file(path) == korg_message

    def test_read_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_syx_file(tmp_path / "missing.syx")

    def test_split_output_path(self, tmp_path):
        assert split_output_path("dump.syx", 3) == Path("dump-003.syx")
        assert split_output_path(Path("in/dump.syx"), 12, tmp_path) == tmp_path / "dump-012.syx"

    def test_receive_output_path(self, tmp_path):
        first = receive_output_path(tmp_path, 1700000000.75)
        assert first == tmp_path / "1700000000.syx"
        first.write_bytes(b"")

        second = receive_output_path(tmp_path, 1700000000.9)
        assert second == tmp_path / "1700000000-1.syx"
        second.write_bytes(b"")

        assert receive_output_path(tmp_path, 1700000000) == tmp_path / "1700000000-2.syx"
