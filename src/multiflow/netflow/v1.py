"""
NetFlow v1 datagram decoder (fixed 48-byte records, no templates).
"""

import ipaddress
from dataclasses import asdict, dataclass
from typing import ClassVar, Dict, Tuple

from ..reader import ByteReader

# Header after the version field: count, sys_uptime, unix_secs, unix_nsecs
HEADER_FORMAT = "HIII"
HEADER_SIZE = 16

# src_addr, dst_addr, nexthop, input, output, dPkts, dOctets, first, last,
# srcport, dstport, pad(1), prot, tos, tcp_flags, reserved(8)
RECORD_FORMAT = "IIIHHIIIIHHxBBB8x"
RECORD_SIZE = 48


@dataclass(frozen=True)
class V1Header:
    version: ClassVar[int] = 1

    count: int
    sys_uptime: int
    unix_secs: int
    unix_nsecs: int

    def to_dict(self) -> Dict:
        return {"version": self.version, **asdict(self)}


@dataclass(frozen=True)
class V1Record:
    src_addr: ipaddress.IPv4Address
    dst_addr: ipaddress.IPv4Address
    next_hop: ipaddress.IPv4Address
    input_interface: int
    output_interface: int
    packets: int
    octets: int
    first: int
    last: int
    src_port: int
    dst_port: int
    protocol: int
    tos: int
    tcp_flags: int

    def to_dict(self) -> Dict:
        result = asdict(self)
        for key in ("src_addr", "dst_addr", "next_hop"):
            result[key] = str(result[key])
        return result


@dataclass(frozen=True)
class V1Datagram:
    header: V1Header
    records: Tuple[V1Record, ...]

    @property
    def version(self) -> int:
        return self.header.version

    def to_dict(self) -> Dict:
        return {
            "version": self.version,
            "header": self.header.to_dict(),
            "records": [r.to_dict() for r in self.records],
        }


def parse_header(reader: ByteReader) -> V1Header:
    return V1Header(*reader.unpack(HEADER_FORMAT, "NetFlow v1 header"))


def parse_record(reader: ByteReader) -> V1Record:
    (src, dst, nexthop, input_if, output_if, packets, octets, first, last,
     src_port, dst_port, protocol, tos, tcp_flags) = reader.unpack(RECORD_FORMAT, "NetFlow v1 record")
    return V1Record(
        src_addr=ipaddress.IPv4Address(src),
        dst_addr=ipaddress.IPv4Address(dst),
        next_hop=ipaddress.IPv4Address(nexthop),
        input_interface=input_if,
        output_interface=output_if,
        packets=packets,
        octets=octets,
        first=first,
        last=last,
        src_port=src_port,
        dst_port=dst_port,
        protocol=protocol,
        tos=tos,
        tcp_flags=tcp_flags,
    )


def parse(reader: ByteReader) -> V1Datagram:
    """Decode a v1 datagram; the reader is positioned just past the version."""
    header = parse_header(reader)
    records = tuple(parse_record(reader) for _ in range(header.count))
    return V1Datagram(header, records)
