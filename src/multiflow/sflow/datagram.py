"""
sFlow v5 datagram decoder.

sFlow is self-describing and stateless: every datagram decodes on its own.
"""

import ipaddress
import logging
from dataclasses import dataclass
from typing import Dict, Tuple, Union

from ..errors import UnsupportedSampleType
from ..reader import ByteReader
from .counter import CounterSample, parse_counter_sample
from .flow import FlowSample, parse_flow_sample

logger = logging.getLogger(__name__)

ADDRESS_TYPE_IPV4 = 1

Sample = Union[FlowSample, CounterSample]
AgentAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

_SAMPLE_PARSERS = {
    FlowSample.sample_type: parse_flow_sample,
    CounterSample.sample_type: parse_counter_sample,
}


@dataclass(frozen=True)
class SflowDatagram:
    version: int
    agent_address: AgentAddress
    sub_agent_id: int
    sequence_number: int
    uptime: int
    samples: Tuple[Sample, ...]

    @property
    def flow_samples(self) -> Tuple[FlowSample, ...]:
        return tuple(s for s in self.samples if isinstance(s, FlowSample))

    @property
    def counter_samples(self) -> Tuple[CounterSample, ...]:
        return tuple(s for s in self.samples if isinstance(s, CounterSample))

    def to_dict(self) -> Dict:
        return {
            "version": self.version,
            "agent_address": str(self.agent_address),
            "sub_agent_id": self.sub_agent_id,
            "sequence_number": self.sequence_number,
            "uptime": self.uptime,
            "samples": [s.to_dict() for s in self.samples],
        }


def _parse_agent_address(reader: ByteReader) -> AgentAddress:
    address_type = reader.u32("agent address type")
    if address_type == ADDRESS_TYPE_IPV4:
        return ipaddress.IPv4Address(reader.take(4, "agent IPv4 address"))
    return ipaddress.IPv6Address(reader.take(16, "agent IPv6 address"))


def _parse_sample(reader: ByteReader) -> Sample:
    sample_type, _size = reader.unpack("II", "sample header")
    parse_sample = _SAMPLE_PARSERS.get(sample_type)
    if parse_sample is None:
        raise UnsupportedSampleType(sample_type)
    return parse_sample(reader)


def decode_sflow_partial(data: bytes) -> Tuple[SflowDatagram, bytes]:
    """Decode one sFlow datagram and also return the bytes it did not consume."""
    reader = ByteReader(data)
    version = reader.u32("sFlow version")
    agent_address = _parse_agent_address(reader)
    sub_agent_id, sequence_number, uptime, sample_count = reader.unpack("IIII", "sFlow header")
    samples = tuple(_parse_sample(reader) for _ in range(sample_count))

    logger.debug(
        f"Decoded sFlow datagram from agent {agent_address}: "
        f"sequence {sequence_number}, {len(samples)} samples"
    )
    datagram = SflowDatagram(version, agent_address, sub_agent_id, sequence_number, uptime, samples)
    return datagram, reader.rest()


def decode_sflow(data: bytes) -> SflowDatagram:
    """
    Decode one sFlow datagram.

    Raises:
        UnsupportedSampleType: sample other than flow (1) or counter (2)
        UnsupportedCounterRecordType: counter record without a decoder
        UnsupportedFlowRecordType: flow record that is not a standard format
        Truncated: buffer ends inside the datagram
    """
    datagram, _ = decode_sflow_partial(data)
    return datagram
