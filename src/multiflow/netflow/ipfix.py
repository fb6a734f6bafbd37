"""
IPFIX message decoder (RFC 7011 framing, NetFlow v9 style flow sets).

Unlike v9, the IPFIX header carries the total message length; bytes past
it are not part of the message and are left to the caller.
"""

import logging
from dataclasses import asdict, dataclass
from typing import ClassVar, Dict, Tuple

from ..errors import InvalidLength, Truncated
from ..reader import ByteReader
from .flowsets import IPFIX, DataFlowSet, FlowSet, parse_flowsets
from .templates import Address, TemplateRegistry

logger = logging.getLogger(__name__)

# Header after the version field: length, export_time,
# sequence_number, observation_domain_id
HEADER_FORMAT = "HIII"
HEADER_SIZE = 16


@dataclass(frozen=True)
class IpfixHeader:
    version: ClassVar[int] = 10

    length: int
    export_time: int
    sequence_number: int
    observation_domain_id: int

    def to_dict(self) -> Dict:
        return {"version": self.version, **asdict(self)}


@dataclass(frozen=True)
class IpfixDatagram:
    header: IpfixHeader
    flowsets: Tuple[FlowSet, ...]

    @property
    def version(self) -> int:
        return self.header.version

    @property
    def data_flowsets(self) -> Tuple[DataFlowSet, ...]:
        return tuple(fs for fs in self.flowsets if isinstance(fs, DataFlowSet))

    def to_dict(self) -> Dict:
        return {
            "version": self.version,
            "header": self.header.to_dict(),
            "flowsets": [fs.to_dict() for fs in self.flowsets],
        }


def parse_header(reader: ByteReader) -> IpfixHeader:
    return IpfixHeader(*reader.unpack(HEADER_FORMAT, "IPFIX header"))


def parse(
    reader: ByteReader,
    address: Address,
    registry: TemplateRegistry,
    max_flowsets: int,
) -> IpfixDatagram:
    """
    Decode an IPFIX message; the reader is positioned just past the version.

    Raises:
        InvalidLength: message length shorter than the header
        Truncated: message length exceeds the received bytes
    """
    header = parse_header(reader)
    if header.length < HEADER_SIZE:
        raise InvalidLength("IPFIX message", header.length, HEADER_SIZE)
    body_length = header.length - HEADER_SIZE
    if body_length > reader.remaining:
        raise Truncated(header.length, reader.remaining + HEADER_SIZE, "IPFIX message")

    body = reader.sub_reader(body_length, "IPFIX message")
    flowsets = parse_flowsets(body, address, registry, IPFIX, max_flowsets)
    logger.debug(
        f"Decoded IPFIX message from {address}: "
        f"sequence {header.sequence_number}, {len(flowsets)} sets"
    )
    return IpfixDatagram(header, flowsets)
