"""
Unit tests for the field decoder.
"""

import ipaddress
import struct

import pytest

from multiflow.errors import Truncated
from multiflow.netflow.fields import ValueKind, decode_field, format_mac
from multiflow.netflow.ipfix_types import IPFIX_FIELD_TYPES
from multiflow.netflow.templates import TemplateField
from multiflow.netflow.v9_types import NETFLOW_V9_FIELD_TYPES


def ipfix_field(type_id: int, length: int) -> TemplateField:
    return TemplateField(type_id, length, IPFIX_FIELD_TYPES[type_id])


def v9_field(type_id: int, length: int) -> TemplateField:
    return TemplateField(type_id, length, NETFLOW_V9_FIELD_TYPES[type_id])


class TestNumberFields:
    """Tests for unsigned number decoding."""

    @pytest.mark.parametrize("width", [1, 2, 3, 4, 8])
    def test_supported_widths(self, width):
        """Test every supported width decodes big-endian and consumes exactly N bytes."""
        data = bytes(range(0xF1, 0xF1 + width)) + b"\xaa\xbb"
        field, consumed = decode_field(data, v9_field(1, width))

        assert consumed == width
        assert field.kind == ValueKind.NUMBER
        assert field.value == int.from_bytes(data[:width], "big")
        assert field.name == "IN_BYTES"
        assert field.type_id == 1

    def test_unsupported_width_is_opaque(self):
        """Test a 6-byte counter is kept as raw bytes."""
        data = b"\x00\x00\x00\x00\x01\x00"
        field, consumed = decode_field(data, v9_field(1, 6))

        assert consumed == 6
        assert field.kind == ValueKind.BYTES
        assert field.value == data
        assert field.name == "IN_BYTES"

    def test_signed_number(self):
        """Test signed numbers are sign-extended."""
        field, consumed = decode_field(b"\xff\xfe", ipfix_field(434, 2))
        assert consumed == 2
        assert field.kind == ValueKind.SIGNED_NUMBER
        assert field.value == -2

    def test_truncated_number(self):
        """Test a field longer than the remaining bytes fails."""
        with pytest.raises(Truncated):
            decode_field(b"\x00\x01", v9_field(1, 4))


class TestAddressFields:
    """Tests for IPv4, IPv6 and MAC decoding."""

    def test_ipv4(self):
        field, consumed = decode_field(bytes([192, 168, 1, 1]), v9_field(8, 4))
        assert consumed == 4
        assert field.kind == ValueKind.IPV4
        assert field.value == ipaddress.IPv4Address("192.168.1.1")

    def test_ipv4_wrong_width_is_opaque(self):
        field, consumed = decode_field(b"\x0a\x00", v9_field(8, 2))
        assert consumed == 2
        assert field.kind == ValueKind.BYTES

    def test_ipv6(self):
        addr = ipaddress.IPv6Address("2001:db8::1")
        field, consumed = decode_field(addr.packed, v9_field(27, 16))
        assert consumed == 16
        assert field.kind == ValueKind.IPV6
        assert field.value == addr

    def test_mac_is_uppercase_colon_hex(self):
        field, consumed = decode_field(bytes.fromhex("001a2b3c4d5e"), v9_field(56, 6))
        assert consumed == 6
        assert field.kind == ValueKind.MAC
        assert field.value == "00:1A:2B:3C:4D:5E"

    def test_format_mac(self):
        assert format_mac(b"\xaa\xbb\xcc\xdd\xee\xff") == "AA:BB:CC:DD:EE:FF"


class TestIpfixKinds:
    """Tests for the encodings only IPFIX uses."""

    def test_float_single_precision(self):
        field, consumed = decode_field(struct.pack("!f", 0.5), ipfix_field(311, 4))
        assert consumed == 4
        assert field.kind == ValueKind.FLOAT
        assert field.value == 0.5

    def test_float_double_precision(self):
        field, consumed = decode_field(struct.pack("!d", 2.25), ipfix_field(320, 8))
        assert consumed == 8
        assert field.value == 2.25

    def test_float_bad_width_is_opaque(self):
        field, consumed = decode_field(b"\x00\x00", ipfix_field(336, 2))
        assert consumed == 2
        assert field.kind == ValueKind.BYTES

    def test_boolean(self):
        true_field, _ = decode_field(b"\x01", ipfix_field(276, 1))
        false_field, _ = decode_field(b"\x02", ipfix_field(276, 1))
        assert true_field.kind == ValueKind.BOOLEAN
        assert true_field.value is True
        assert false_field.value is False

    def test_datetime_seconds(self):
        field, consumed = decode_field(struct.pack("!I", 1700000000), ipfix_field(150, 4))
        assert consumed == 4
        assert field.kind == ValueKind.DATETIME_SECONDS
        assert field.value == 1700000000

    def test_datetime_millis(self):
        field, consumed = decode_field(struct.pack("!Q", 1700000000123), ipfix_field(152, 8))
        assert consumed == 8
        assert field.kind == ValueKind.DATETIME_MILLIS
        assert field.value == 1700000000123

    @pytest.mark.parametrize("type_id,kind", [
        (154, ValueKind.DATETIME_MICROS),
        (156, ValueKind.DATETIME_NANOS),
    ])
    def test_ntp_timestamps_stay_raw_pairs(self, type_id, kind):
        field, consumed = decode_field(struct.pack("!II", 3900000000, 2147483648), ipfix_field(type_id, 8))
        assert consumed == 8
        assert field.kind == kind
        assert field.value == (3900000000, 2147483648)

    def test_octet_array_is_opaque(self):
        field, consumed = decode_field(b"\x00\x00\x00", ipfix_field(210, 3))
        assert consumed == 3
        assert field.kind == ValueKind.BYTES
        assert field.name == "paddingOctets"


class TestStringFields:
    """Tests for string decoding."""

    def test_string(self):
        field, consumed = decode_field(b"Gi0/1\x00\x00\x00", v9_field(82, 5))
        assert consumed == 5
        assert field.kind == ValueKind.STRING
        assert field.value == "Gi0/1"

    def test_invalid_utf8_is_replaced(self):
        """Test string decoding never fails on bad UTF-8."""
        field, consumed = decode_field(b"eth\xff0", v9_field(82, 5))
        assert consumed == 5
        assert field.value == "eth\ufffd0"


class TestVariableLengthFields:
    """Tests for IPFIX variable-length encoding."""

    def test_short_length_prefix(self):
        """Test a one-byte length prefix followed by the payload."""
        data = b"\x05hello" + b"trailing"
        field, consumed = decode_field(data, ipfix_field(82, 0xFFFF), variable_length=True)

        assert consumed == 6
        assert field.kind == ValueKind.BYTES
        assert field.value == b"hello"
        assert field.name == "IF_NAME"
        assert field.type_id == 82

    def test_long_length_prefix(self):
        """Test the 255 escape followed by a 16-bit length."""
        payload = b"x" * 300
        data = b"\xff" + struct.pack("!H", len(payload)) + payload
        field, consumed = decode_field(data, ipfix_field(147, 0xFFFF), variable_length=True)

        assert consumed == 303
        assert field.value == payload

    def test_zero_length(self):
        field, consumed = decode_field(b"\x00", ipfix_field(82, 0xFFFF), variable_length=True)
        assert consumed == 1
        assert field.value == b""


class TestUnknownFields:
    """Tests for unresolved and enterprise-private fields."""

    def test_enterprise_field_passthrough(self):
        """Test an enterprise field decodes as opaque bytes named UNKNOWN."""
        field_spec = TemplateField(0x8000 | 12, 3, None, 9)
        field, consumed = decode_field(b"\x01\x02\x03\x04", field_spec)

        assert consumed == 3
        assert field.name == "UNKNOWN"
        assert field.kind == ValueKind.BYTES
        assert field.value == b"\x01\x02\x03"
        assert field.enterprise_id == 9

    def test_unknown_type_uses_raw_id(self):
        field, consumed = decode_field(b"\xde\xad", TemplateField(40000, 2))
        assert consumed == 2
        assert field.name == "UNKNOWN"
        assert field.type_id == 40000
        assert field.value == b"\xde\xad"


def test_to_dict_is_json_friendly():
    """Test DataField.to_dict renders addresses and bytes as strings."""
    address, _ = decode_field(bytes([10, 0, 0, 1]), v9_field(8, 4))
    raw, _ = decode_field(b"\xde\xad", TemplateField(40000, 2))

    assert address.to_dict() == {
        "name": "IPV4_SRC_ADDR",
        "type_id": 8,
        "kind": "ipv4",
        "value": "10.0.0.1",
    }
    assert raw.to_dict()["value"] == "dead"
