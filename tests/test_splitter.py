"""Tests for splitting concatenated SysEx buffers."""

import logging

import pytest

from syxpack.errors import ErrorKind, MalformedFramingError, UnterminatedMessageError
from syxpack.splitter import DanglingPolicy, message_count, message_spans, split_messages


class TestSplitMessages:
    def test_two_messages(self):
        data = bytes([0xF0, 0x42, 0x01, 0xF7, 0xF0, 0x43, 0x02, 0xF7])
        assert split_messages(data) == [
            bytes([0xF0, 0x42, 0x01, 0xF7]),
            bytes([0xF0, 0x43, 0x02, 0xF7]),
        ]

    def test_stray_bytes_skipped(self, multi_message_data, korg_message, ni_message):
        messages = split_messages(multi_message_data)
        assert len(messages) == 3
        assert messages[0] == korg_message
        assert messages[1] == ni_message

    def test_leading_and_trailing_garbage(self, korg_message):
        assert split_messages(b"\x01\x02" + korg_message + b"\xF7\x03") == [korg_message]

    def test_empty_buffer(self):
        assert split_messages(b"") == []
        assert message_spans(b"") == []

    def test_no_messages(self):
        assert split_messages(bytes([0x42, 0x30, 0xF7])) == []

    def test_list_input(self, korg_message):
        assert split_messages(list(korg_message)) == [korg_message]

    def test_elements_are_framed(self, multi_message_data):
        for raw in split_messages(multi_message_data):
            assert raw[0] == 0xF0
            assert raw[-1] == 0xF7

    def test_count_matches_split(self, multi_message_data):
        assert message_count(multi_message_data) == len(split_messages(multi_message_data))
        assert message_count(b"") == 0


class TestMessageSpans:
    def test_offsets(self, multi_message_data):
        assert message_spans(multi_message_data) == [(0, 5), (7, 7), (14, 6)]


class TestDanglingPolicy:
    def test_trailing_initiator_dropped(self, korg_message):
        assert split_messages(korg_message + bytes([0xF0, 0x42, 0x30])) == [korg_message]

    def test_trailing_initiator_error(self, korg_message):
        with pytest.raises(UnterminatedMessageError) as exc_info:
            split_messages(korg_message + bytes([0xF0, 0x42, 0x30]), DanglingPolicy.ERROR)
        assert exc_info.value.offset == 5
        assert exc_info.value.kind == ErrorKind.UNTERMINATED_MESSAGE
        assert "000005" in str(exc_info.value)

    def test_unterminated_is_framing_error(self):
        with pytest.raises(MalformedFramingError):
            split_messages(bytes([0xF0, 0x42]), DanglingPolicy.ERROR)

    def test_superseded_initiator_dropped(self):
        assert split_messages(bytes([0xF0, 0xF0, 0x42, 0xF7])) == [bytes([0xF0, 0x42, 0xF7])]

    def test_superseded_initiator_error(self):
        with pytest.raises(UnterminatedMessageError) as exc_info:
            split_messages(bytes([0xF0, 0xF0, 0x42, 0xF7]), DanglingPolicy.ERROR)
        assert exc_info.value.offset == 0

    def test_policy_from_string(self):
        assert DanglingPolicy("error") is DanglingPolicy.ERROR


class TestLogging:
    def test_stray_bytes_logged(self, caplog, multi_message_data):
        caplog.set_level(logging.DEBUG, logger="syxpack")
        split_messages(multi_message_data)
        assert "Skipped 2 stray bytes" in caplog.text

    def test_dropped_initiator_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="syxpack")
        split_messages(bytes([0xF0, 0x42]))
        assert "Dropped unterminated message at offset 0x000000" in caplog.text
