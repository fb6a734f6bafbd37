"""
Unit tests for the bounds-checked byte reader.
"""

import struct

import pytest

from multiflow.errors import Truncated
from multiflow.reader import ByteReader


def test_unpack_is_big_endian():
    """Test that values are read in network byte order."""
    reader = ByteReader(struct.pack("!HI", 0x0102, 0x03040506))
    assert reader.u16() == 0x0102
    assert reader.u32() == 0x03040506
    assert reader.remaining == 0


def test_truncated_read_reports_sizes():
    """Test that reading past the end raises Truncated with context."""
    reader = ByteReader(b"\x00\x01\x02")
    with pytest.raises(Truncated) as exc_info:
        reader.u32("header")
    assert exc_info.value.needed == 4
    assert exc_info.value.available == 3
    assert "header" in str(exc_info.value)
    # Nothing consumed on failure
    assert reader.offset == 0


def test_sub_reader_is_bounded():
    """Test that a sub-reader cannot read beyond its slice."""
    reader = ByteReader(b"\x00\x01\x02\x03\x04\x05")
    sub = reader.sub_reader(2)
    assert reader.offset == 2
    assert sub.u16() == 0x0001
    with pytest.raises(Truncated):
        sub.u8()


def test_odd_width_integers():
    """Test unsigned and signed reads of non-native widths."""
    reader = ByteReader(b"\x01\x02\x03\xff\xff\xfe")
    assert reader.uint(3) == 0x010203
    assert reader.sint(3) == -2


def test_rest_does_not_consume():
    """Test rest() returns the unread tail without advancing."""
    reader = ByteReader(b"abcdef", offset=4)
    assert reader.rest() == b"ef"
    assert reader.remaining == 2
