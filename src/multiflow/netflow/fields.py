"""
Field decoder: turns the bytes of one data-record field into a typed value.

The declared length from the template is authoritative. When the declared
length does not fit the encoding kind (a 6-byte counter, a 2-byte address),
the bytes are kept as an opaque value so the record stays correctly framed.
"""

import ipaddress
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

from ..reader import ByteReader
from .templates import TemplateField
from .v9_types import EncodingKind


class ValueKind(Enum):
    """Shape of a decoded field value."""

    NUMBER = "number"                        # int, unsigned
    SIGNED_NUMBER = "signed_number"          # int
    FLOAT = "float"                          # float (double precision)
    IPV4 = "ipv4"                            # ipaddress.IPv4Address
    IPV6 = "ipv6"                            # ipaddress.IPv6Address
    MAC = "mac"                              # str, AA:BB:CC:DD:EE:FF
    STRING = "string"                        # str
    BOOLEAN = "boolean"                      # bool
    DATETIME_SECONDS = "datetime_seconds"    # int
    DATETIME_MILLIS = "datetime_millis"      # int
    DATETIME_MICROS = "datetime_micros"      # (seconds, fraction)
    DATETIME_NANOS = "datetime_nanos"        # (seconds, fraction)
    BYTES = "bytes"                          # bytes, unknown or nonstandard


@dataclass(frozen=True)
class DataField:
    """A single decoded field of a data record."""

    name: str
    type_id: int
    kind: ValueKind
    value: Any
    enterprise_id: Optional[int] = None

    def to_dict(self) -> Dict:
        value = self.value
        if self.kind == ValueKind.BYTES:
            value = value.hex()
        elif self.kind in (ValueKind.IPV4, ValueKind.IPV6):
            value = str(value)
        elif isinstance(value, tuple):
            value = list(value)
        result = {
            "name": self.name,
            "type_id": self.type_id,
            "kind": self.kind.value,
            "value": value,
        }
        if self.enterprise_id is not None:
            result["enterprise_id"] = self.enterprise_id
        return result


INTEGER_WIDTHS = (1, 2, 3, 4, 8)

# Each decoder reads a value of the given declared length, or returns None
# when that length is not valid for the kind.
_Decoder = Callable[[ByteReader, int], Optional[Tuple[ValueKind, Any]]]


def _number(reader: ByteReader, length: int):
    if length not in INTEGER_WIDTHS:
        return None
    return ValueKind.NUMBER, reader.uint(length, "number field")


def _signed_number(reader: ByteReader, length: int):
    if length not in INTEGER_WIDTHS:
        return None
    return ValueKind.SIGNED_NUMBER, reader.sint(length, "signed number field")


def _float(reader: ByteReader, length: int):
    if length == 4:
        return ValueKind.FLOAT, reader.f32("float field")
    if length == 8:
        return ValueKind.FLOAT, reader.f64("float field")
    return None


def _ipv4(reader: ByteReader, length: int):
    if length != 4:
        return None
    return ValueKind.IPV4, ipaddress.IPv4Address(reader.take(4, "IPv4 field"))


def _ipv6(reader: ByteReader, length: int):
    if length != 16:
        return None
    return ValueKind.IPV6, ipaddress.IPv6Address(reader.take(16, "IPv6 field"))


def _mac(reader: ByteReader, length: int):
    if length != 6:
        return None
    return ValueKind.MAC, format_mac(reader.take(6, "MAC field"))


def _string(reader: ByteReader, length: int):
    raw = reader.take(length, "string field")
    return ValueKind.STRING, raw.decode("utf-8", errors="replace")


def _boolean(reader: ByteReader, length: int):
    if length != 1:
        return None
    return ValueKind.BOOLEAN, reader.u8("boolean field") == 1


def _datetime_seconds(reader: ByteReader, length: int):
    if length != 4:
        return None
    return ValueKind.DATETIME_SECONDS, reader.u32("dateTimeSeconds field")


def _datetime_millis(reader: ByteReader, length: int):
    if length != 8:
        return None
    return ValueKind.DATETIME_MILLIS, reader.u64("dateTimeMilliseconds field")


def _ntp_pair(value_kind: ValueKind) -> _Decoder:
    def decode(reader: ByteReader, length: int):
        if length != 8:
            return None
        return value_kind, reader.unpack("II", "NTP timestamp field")
    return decode


_DECODERS: Dict[EncodingKind, _Decoder] = {
    EncodingKind.NUMBER: _number,
    EncodingKind.SIGNED_NUMBER: _signed_number,
    EncodingKind.FLOAT: _float,
    EncodingKind.IPV4: _ipv4,
    EncodingKind.IPV6: _ipv6,
    EncodingKind.MAC: _mac,
    EncodingKind.STRING: _string,
    EncodingKind.BOOLEAN: _boolean,
    EncodingKind.DATETIME_SECONDS: _datetime_seconds,
    EncodingKind.DATETIME_MILLIS: _datetime_millis,
    EncodingKind.DATETIME_MICROS: _ntp_pair(ValueKind.DATETIME_MICROS),
    EncodingKind.DATETIME_NANOS: _ntp_pair(ValueKind.DATETIME_NANOS),
}


def format_mac(raw: bytes) -> str:
    return ":".join(f"{b:02X}" for b in raw)


def read_variable_length(reader: ByteReader) -> int:
    """IPFIX variable-length prefix: one byte, or 255 followed by a u16."""
    length = reader.u8("variable-length prefix")
    if length == 255:
        length = reader.u16("variable-length prefix")
    return length


def parse_field(reader: ByteReader, field: TemplateField, variable_length: bool = False) -> DataField:
    """
    Decode one field at the reader's position and advance past it.

    Args:
        reader: Cursor positioned at the field
        field: Template field specifier
        variable_length: Honour the IPFIX 0xFFFF variable-length marker

    Returns:
        DataField with the decoded value
    """
    if variable_length and field.is_variable_length:
        length = read_variable_length(reader)
        payload = reader.take(length, "variable-length field")
        return DataField(field.name, field.type_id, ValueKind.BYTES, payload, field.enterprise_id)

    decoder = _DECODERS.get(field.kind) if field.kind else None
    if decoder is not None:
        decoded = decoder(reader, field.length)
        if decoded is not None:
            value_kind, value = decoded
            return DataField(field.name, field.type_id, value_kind, value, field.enterprise_id)

    payload = reader.take(field.length, "field")
    return DataField(field.name, field.type_id, ValueKind.BYTES, payload, field.enterprise_id)


def decode_field(data: bytes, field: TemplateField, variable_length: bool = False) -> Tuple[DataField, int]:
    """Decode one field from the start of `data`; return it and the bytes consumed."""
    reader = ByteReader(data)
    decoded = parse_field(reader, field, variable_length)
    return decoded, reader.offset
