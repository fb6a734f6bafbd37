"""
NetFlow v9 datagram decoder (RFC 3954).

The header is followed by flow sets; templates are remembered in the
caller's registry so data sets in later datagrams can be decoded.
"""

import logging
from dataclasses import asdict, dataclass
from typing import ClassVar, Dict, Tuple

from ..reader import ByteReader
from .flowsets import NETFLOW_V9, DataFlowSet, FlowSet, parse_flowsets
from .templates import Address, TemplateRegistry

logger = logging.getLogger(__name__)

# Header after the version field: count, sys_uptime, unix_secs,
# sequence_number, source_id
HEADER_FORMAT = "HIIII"
HEADER_SIZE = 20


@dataclass(frozen=True)
class V9Header:
    version: ClassVar[int] = 9

    count: int
    sys_uptime: int
    unix_secs: int
    sequence_number: int
    source_id: int

    def to_dict(self) -> Dict:
        return {"version": self.version, **asdict(self)}


@dataclass(frozen=True)
class V9Datagram:
    header: V9Header
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


def parse_header(reader: ByteReader) -> V9Header:
    return V9Header(*reader.unpack(HEADER_FORMAT, "NetFlow v9 header"))


def parse(
    reader: ByteReader,
    address: Address,
    registry: TemplateRegistry,
    max_flowsets: int,
) -> V9Datagram:
    """Decode a v9 datagram; the reader is positioned just past the version."""
    header = parse_header(reader)
    flowsets = parse_flowsets(reader, address, registry, NETFLOW_V9, max_flowsets)
    logger.debug(
        f"Decoded NetFlow v9 datagram from {address}: "
        f"sequence {header.sequence_number}, {len(flowsets)} flow sets"
    )
    return V9Datagram(header, flowsets)
