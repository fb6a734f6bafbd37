"""
NetFlow v5 datagram decoder.

v5 is fixed format: a 24-byte header followed by `count` 48-byte records.
"""

import ipaddress
from dataclasses import asdict, dataclass
from typing import ClassVar, Dict, Tuple

from ..reader import ByteReader

# Header after the version field: count, sys_uptime, unix_secs, unix_nsecs,
# flow_sequence, engine_type, engine_id, sampling_interval
HEADER_FORMAT = "HIIIIBBH"
HEADER_SIZE = 24

# src_addr, dst_addr, nexthop, input, output, dPkts, dOctets, first, last,
# srcport, dstport, pad1, tcp_flags, prot, tos, src_as, dst_as,
# src_mask, dst_mask, pad2
RECORD_FORMAT = "IIIHHIIIIHHxBBBHHBB2x"
RECORD_SIZE = 48


@dataclass(frozen=True)
class V5Header:
    version: ClassVar[int] = 5

    count: int
    sys_uptime: int
    unix_secs: int
    unix_nsecs: int
    flow_sequence: int
    engine_type: int
    engine_id: int
    sampling_interval: int

    def to_dict(self) -> Dict:
        return {"version": self.version, **asdict(self)}


@dataclass(frozen=True)
class V5Record:
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
    tcp_flags: int
    protocol: int
    tos: int
    src_as: int
    dst_as: int
    src_mask: int
    dst_mask: int

    def flow_start(self, header: V5Header) -> int:
        """Unix time (seconds) the flow started, from its uptime offset."""
        return header.unix_secs - header.sys_uptime // 1000 + self.first // 1000

    def flow_end(self, header: V5Header) -> int:
        return header.unix_secs - header.sys_uptime // 1000 + self.last // 1000

    def to_dict(self) -> Dict:
        result = asdict(self)
        for key in ("src_addr", "dst_addr", "next_hop"):
            result[key] = str(result[key])
        return result


@dataclass(frozen=True)
class V5Datagram:
    header: V5Header
    records: Tuple[V5Record, ...]

    @property
    def version(self) -> int:
        return self.header.version

    def to_dict(self) -> Dict:
        return {
            "version": self.version,
            "header": self.header.to_dict(),
            "records": [r.to_dict() for r in self.records],
        }


def parse_header(reader: ByteReader) -> V5Header:
    return V5Header(*reader.unpack(HEADER_FORMAT, "NetFlow v5 header"))


def parse_record(reader: ByteReader) -> V5Record:
    (src, dst, nexthop, input_if, output_if, packets, octets, first, last,
     src_port, dst_port, tcp_flags, protocol, tos, src_as, dst_as,
     src_mask, dst_mask) = reader.unpack(RECORD_FORMAT, "NetFlow v5 record")
    return V5Record(
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
        tcp_flags=tcp_flags,
        protocol=protocol,
        tos=tos,
        src_as=src_as,
        dst_as=dst_as,
        src_mask=src_mask,
        dst_mask=dst_mask,
    )


def parse(reader: ByteReader) -> V5Datagram:
    """
    Decode a v5 datagram; the reader is positioned just past the version.

    Raises:
        Truncated: fewer than `count` records follow the header
    """
    header = parse_header(reader)
    records = tuple(parse_record(reader) for _ in range(header.count))
    return V5Datagram(header, records)
