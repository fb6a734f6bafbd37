"""
sFlow flow samples and their flow records.

Only raw packet header records are decoded. The other standard record
formats are recognised and kept as undecoded bytes.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Dict, Tuple, Union

from ..errors import InvalidLength, UnsupportedFlowRecordType
from ..reader import ByteReader

RAW_HEADER_FIXED_SIZE = 16


class FlowRecordType(IntEnum):
    RAW_PACKET_HEADER = 1
    ETHERNET_FRAME = 2
    IPV4 = 3
    IPV6 = 4
    EXTENDED_SWITCH = 1001
    EXTENDED_ROUTER = 1002
    EXTENDED_GATEWAY = 1003
    EXTENDED_USER = 1004
    EXTENDED_URL = 1005
    EXTENDED_MPLS = 1006
    EXTENDED_NAT = 1007
    EXTENDED_MPLS_TUNNEL = 1008
    EXTENDED_MPLS_VC = 1009
    EXTENDED_MPLS_FEC = 1010
    EXTENDED_MPLS_LVP_FEC = 1011
    EXTENDED_VLAN_TUNNEL = 1012


@dataclass(frozen=True)
class RawPacketHeader:
    """Leading bytes of a sampled packet, as captured by the agent."""

    protocol: int
    frame_length: int
    stripped: int
    header: bytes

    @property
    def header_size(self) -> int:
        return len(self.header)

    def to_dict(self) -> Dict:
        return {
            "type": FlowRecordType.RAW_PACKET_HEADER.name.lower(),
            "protocol": self.protocol,
            "frame_length": self.frame_length,
            "stripped": self.stripped,
            "header_size": self.header_size,
            "header": self.header.hex(),
        }


@dataclass(frozen=True)
class UndecodedFlowRecord:
    record_type: FlowRecordType
    data: bytes

    def to_dict(self) -> Dict:
        return {"type": self.record_type.name.lower(), "data": self.data.hex()}


FlowRecord = Union[RawPacketHeader, UndecodedFlowRecord]


@dataclass(frozen=True)
class FlowSample:
    sample_type: ClassVar[int] = 1

    sequence_number: int
    source_id: int
    sampling_rate: int
    sample_pool: int
    drops: int
    input_interface: int
    output_interface: int
    records: Tuple[FlowRecord, ...]

    def to_dict(self) -> Dict:
        return {
            "type": "flow",
            "sequence_number": self.sequence_number,
            "source_id": self.source_id,
            "sampling_rate": self.sampling_rate,
            "sample_pool": self.sample_pool,
            "drops": self.drops,
            "input_interface": self.input_interface,
            "output_interface": self.output_interface,
            "records": [r.to_dict() for r in self.records],
        }


def _parse_raw_packet_header(reader: ByteReader, record_size: int) -> RawPacketHeader:
    protocol, frame_length, stripped, header_size = reader.unpack("IIII", "raw packet header")
    header = reader.take(header_size, "raw packet header bytes")
    consumed = RAW_HEADER_FIXED_SIZE + header_size
    if record_size < consumed:
        raise InvalidLength("raw packet header record", record_size, consumed)
    # Header bytes are padded to a 4-byte boundary
    if record_size > consumed:
        reader.skip(record_size - consumed, "raw packet header padding")
    return RawPacketHeader(protocol, frame_length, stripped, header)


def parse_flow_record(reader: ByteReader) -> FlowRecord:
    """
    Decode one flow record.

    Raises:
        UnsupportedFlowRecordType: not a standard flow record format
        InvalidLength: raw header record shorter than its header bytes
    """
    record_type, record_size = reader.unpack("II", "flow record header")
    try:
        kind = FlowRecordType(record_type)
    except ValueError:
        raise UnsupportedFlowRecordType(record_type) from None

    if kind is FlowRecordType.RAW_PACKET_HEADER:
        return _parse_raw_packet_header(reader, record_size)
    return UndecodedFlowRecord(kind, reader.take(record_size, f"{kind.name.lower()} record"))


def parse_flow_sample(reader: ByteReader) -> FlowSample:
    (sequence_number, source_id, sampling_rate, sample_pool, drops,
     input_interface, output_interface, record_count) = reader.unpack("8I", "flow sample header")
    records = tuple(parse_flow_record(reader) for _ in range(record_count))
    return FlowSample(
        sequence_number,
        source_id,
        sampling_rate,
        sample_pool,
        drops,
        input_interface,
        output_interface,
        records,
    )
