"""Tests for the syx command-line interface."""

import pytest

from cli.app import app
from syxpack import __version__


def _write(tmp_path, name, data):
    path = tmp_path / name
    path.write_bytes(data)
    return path


class TestRoot:
    def test_help(self, cli_runner):
        result = cli_runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "identify" in result.output
        assert "receive" in result.output

    def test_no_command_shows_help(self, cli_runner):
        result = cli_runner.invoke(app, [])
        assert result.exit_code == 0
        assert "identify" in result.output

    def test_version_flag(self, cli_runner):
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_version_command(self, cli_runner):
        result = cli_runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestIdentify:
    def test_single(self, cli_runner, single_syx_file):
        result = cli_runner.invoke(app, ["identify", str(single_syx_file)])
        assert result.exit_code == 0
        assert "Native Instruments" in result.output
        assert "002109" in result.output
        assert "European" in result.output

    def test_universal(self, cli_runner, universal_syx_file):
        result = cli_runner.invoke(app, ["identify", str(universal_syx_file)])
        assert result.exit_code == 0
        assert "Non-Real-time" in result.output
        assert "Universal" in result.output

    def test_multiple(self, cli_runner, multi_syx_file):
        result = cli_runner.invoke(app, ["identify", str(multi_syx_file)])
        assert result.exit_code == 0
        assert "Message 1 of 3" in result.output
        assert "Korg" in result.output

    def test_missing_file(self, cli_runner, tmp_path):
        result = cli_runner.invoke(app, ["identify", str(tmp_path / "nope.syx")])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_not_a_message(self, cli_runner, tmp_path):
        path = _write(tmp_path, "junk.syx", b"\x42\x30")
        result = cli_runner.invoke(app, ["identify", str(path)])
        assert result.exit_code == 1
        assert "malformed framing" in result.output

    def test_bad_message_reported(self, cli_runner, tmp_path, korg_message):
        path = _write(tmp_path, "bad.syx", korg_message + b"\xF0\xF7")
        result = cli_runner.invoke(app, ["identify", str(path)])
        assert result.exit_code == 1
        assert "Message 2: truncated header" in result.output
        assert "Korg" in result.output

    def test_dangling_error(self, cli_runner, tmp_path, korg_message):
        path = _write(tmp_path, "cut.syx", korg_message + b"\xF0\x42")
        assert cli_runner.invoke(app, ["identify", str(path)]).exit_code == 0

        result = cli_runner.invoke(app, ["--dangling", "error", "identify", str(path)])
        assert result.exit_code == 1
        assert "unterminated message" in result.output

    def test_dangling_from_env(self, cli_runner, tmp_path, korg_message):
        path = _write(tmp_path, "cut.syx", korg_message + b"\xF0\x42")
        result = cli_runner.invoke(app, ["identify", str(path)], env={"SYX_DANGLING": "error"})
        assert result.exit_code == 1


class TestExtract:
    def test_payload_written(self, cli_runner, single_syx_file, tmp_path):
        outfile = tmp_path / "payload.bin"
        result = cli_runner.invoke(app, ["extract", str(single_syx_file), str(outfile)])
        assert result.exit_code == 0
        assert "Wrote 2 bytes" in result.output
        assert outfile.read_bytes() == b"\x30\x28"

    def test_multiple_messages_rejected(self, cli_runner, multi_syx_file, tmp_path):
        outfile = tmp_path / "payload.bin"
        result = cli_runner.invoke(app, ["extract", str(multi_syx_file), str(outfile)])
        assert result.exit_code == 1
        assert "syx split" in result.output
        assert not outfile.exists()


class TestSplit:
    def test_split_to_outdir(self, cli_runner, multi_syx_file, tmp_path, korg_message):
        outdir = tmp_path / "parts"
        result = cli_runner.invoke(
            app, ["split", str(multi_syx_file), "--outdir", str(outdir), "-v"]
        )
        assert result.exit_code == 0
        assert "Found 3 messages" in result.output
        assert sorted(p.name for p in outdir.iterdir()) == [
            "dump-001.syx",
            "dump-002.syx",
            "dump-003.syx",
        ]
        assert (outdir / "dump-001.syx").read_bytes() == korg_message

    def test_split_dir_from_env(self, cli_runner, multi_syx_file, tmp_path):
        outdir = tmp_path / "env-parts"
        result = cli_runner.invoke(
            app, ["split", str(multi_syx_file)], env={"SYX_SPLIT_DIR": str(outdir)}
        )
        assert result.exit_code == 0
        assert len(list(outdir.iterdir())) == 3

    def test_single_message_not_split(self, cli_runner, single_syx_file, tmp_path):
        outdir = tmp_path / "parts"
        result = cli_runner.invoke(
            app, ["split", str(single_syx_file), "-d", str(outdir), "--verbose"]
        )
        assert result.exit_code == 0
        assert "Found one message" in result.output
        assert not outdir.exists()


class TestSections:
    def test_extended(self, cli_runner, single_syx_file):
        result = cli_runner.invoke(app, ["sections", str(single_syx_file)])
        assert result.exit_code == 0
        assert "Native Instruments (002109), 2 bytes" in result.output
        assert "Message Sections" in result.output
        assert "F0" in result.output

    def test_universal_no_hex(self, cli_runner, universal_syx_file):
        result = cli_runner.invoke(app, ["sections", str(universal_syx_file), "--no-hex"])
        assert result.exit_code == 0
        assert "Universal Non-Real-time, target 7F, 06 01, 0 bytes" in result.output

    def test_multiple_messages_rejected(self, cli_runner, multi_syx_file):
        result = cli_runner.invoke(app, ["sections", str(multi_syx_file)])
        assert result.exit_code == 1
        assert "syx split" in result.output


class TestReceive:
    def test_writes_one_file_per_message(self, cli_runner, tmp_path):
        lines = (
            "system-exclusive hex 43 10 4C\n"
            "note-on 1 60 100\n"
            "system-exclusive dec 65 16\n"
        )
        result = cli_runner.invoke(app, ["receive", "--outdir", str(tmp_path)], input=lines)
        assert result.exit_code == 0
        assert "Received 5 bytes" in result.output
        assert "Received 4 bytes" in result.output

        contents = sorted(p.read_bytes() for p in tmp_path.glob("*.syx"))
        assert contents == sorted(
            [bytes([0xF0, 0x43, 0x10, 0x4C, 0xF7]), bytes([0xF0, 0x41, 0x10, 0xF7])]
        )

    def test_no_sysex_lines(self, cli_runner, tmp_path):
        result = cli_runner.invoke(
            app, ["receive", "-d", str(tmp_path)], input="note-on 1 60 100\n"
        )
        assert result.exit_code == 0
        assert list(tmp_path.glob("*.syx")) == []


class TestMake:
    @pytest.mark.parametrize(
        "manufacturer,expected",
        [
            ("42", bytes([0xF0, 0x42, 0x30, 0x28, 0xF7])),
            ("Korg", bytes([0xF0, 0x42, 0x30, 0x28, 0xF7])),
            ("002109", bytes([0xF0, 0x00, 0x21, 0x09, 0x30, 0x28, 0xF7])),
        ],
    )
    def test_make(self, cli_runner, tmp_path, manufacturer, expected):
        outfile = tmp_path / "out.syx"
        result = cli_runner.invoke(
            app, ["make", "-m", manufacturer, "-p", "3028", "-o", str(outfile)]
        )
        assert result.exit_code == 0
        assert f"Wrote {len(expected)} bytes" in result.output
        assert outfile.read_bytes() == expected

    def test_bad_length(self, cli_runner, tmp_path):
        outfile = tmp_path / "out.syx"
        result = cli_runner.invoke(app, ["make", "-m", "0021", "-p", "30", "-o", str(outfile)])
        assert result.exit_code == 1
        assert "invalid manufacturer length" in result.output
        assert not outfile.exists()

    def test_name_not_found(self, cli_runner, tmp_path):
        outfile = tmp_path / "out.syx"
        result = cli_runner.invoke(app, ["make", "-m", "Zzyzx", "-p", "30", "-o", str(outfile)])
        assert result.exit_code == 1
        assert "manufacturer not found" in result.output

    def test_bad_payload(self, cli_runner, tmp_path):
        outfile = tmp_path / "out.syx"
        result = cli_runner.invoke(app, ["make", "-m", "42", "-p", "3G", "-o", str(outfile)])
        assert result.exit_code == 1
        assert "decode error" in result.output
