"""
syxpack - Parse, inspect and build MIDI System Exclusive messages.

This library provides tools to:
- Split .syx files into individual SysEx messages
- Classify messages as manufacturer-specific or universal
- Resolve manufacturer IDs to names and groups
- Build manufacturer-specific messages and write them back out

Example usage:
    from syxpack import parse_message, split_messages, read_syx_file

    data = read_syx_file("dump.syx")
    for raw in split_messages(data):
        message = parse_message(raw)
        print(message.manufacturer.name, len(message.payload))
"""

__version__ = "0.4.0"
__author__ = "syxpack Contributors"

from syxpack.errors import ErrorKind, SysExError
from syxpack.files import read_syx_file, write_syx_file
from syxpack.manufacturer import Manufacturer, parse_manufacturer_arg
from syxpack.message import (
    ManufacturerSpecific,
    Message,
    Universal,
    UniversalKind,
    encode_message,
    make_message,
)
from syxpack.parser import parse_message, parse_messages
from syxpack.receive import ReceiveBase, assemble_message, parse_receive_line
from syxpack.registry import ManufacturerGroup, ManufacturerRegistry, default_registry
from syxpack.sections import MessageSection, SectionKind, analyze_sections
from syxpack.splitter import DanglingPolicy, message_count, message_spans, split_messages

__all__ = [
    "ErrorKind",
    "SysExError",
    "read_syx_file",
    "write_syx_file",
    "Manufacturer",
    "parse_manufacturer_arg",
    "ManufacturerSpecific",
    "Message",
    "Universal",
    "UniversalKind",
    "encode_message",
    "make_message",
    "parse_message",
    "parse_messages",
    "ReceiveBase",
    "assemble_message",
    "parse_receive_line",
    "ManufacturerGroup",
    "ManufacturerRegistry",
    "default_registry",
    "MessageSection",
    "SectionKind",
    "analyze_sections",
    "DanglingPolicy",
    "message_count",
    "message_spans",
    "split_messages",
]
