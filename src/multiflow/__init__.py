"""
Multiflow - NetFlow, IPFIX and sFlow datagram decoding

Turns raw UDP payloads from routers and switches into typed records.

Modules:
- netflow: NetFlow v1/v5/v9 and IPFIX, with per-exporter template tracking
- sflow: sFlow v5 flow and counter samples
- errors: decode failures, all derived from FlowDecodeError
"""

__version__ = "0.1.0"

from multiflow.errors import (
    FlowDecodeError,
    InvalidLength,
    InvalidSetId,
    TooManyFlowSets,
    Truncated,
    UnknownTemplate,
    UnsupportedCounterRecordType,
    UnsupportedFlowRecordType,
    UnsupportedSampleType,
    UnsupportedVersion,
)
from multiflow.netflow import NetflowDecoder, TemplateRegistry, peek_header
from multiflow.sflow import SflowDatagram, decode_sflow, decode_sflow_partial

__all__ = [
    # Version
    "__version__",
    # NetFlow / IPFIX
    "NetflowDecoder",
    "TemplateRegistry",
    "peek_header",
    # sFlow
    "SflowDatagram",
    "decode_sflow",
    "decode_sflow_partial",
    # Errors
    "FlowDecodeError",
    "UnsupportedVersion",
    "Truncated",
    "InvalidSetId",
    "InvalidLength",
    "UnknownTemplate",
    "TooManyFlowSets",
    "UnsupportedSampleType",
    "UnsupportedCounterRecordType",
    "UnsupportedFlowRecordType",
]
