"""
sFlow Module

Stateless decoding of sFlow v5 datagrams into flow and counter samples.
"""

from multiflow.sflow.counter import (
    BaseVgCounters,
    CounterRecord,
    CounterSample,
    EthernetCounters,
    GenericInterfaceCounters,
    ProcessorCounters,
    TokenRingCounters,
    VlanCounters,
)
from multiflow.sflow.datagram import SflowDatagram, decode_sflow, decode_sflow_partial
from multiflow.sflow.flow import FlowRecordType, FlowSample, RawPacketHeader, UndecodedFlowRecord

__all__ = [
    "SflowDatagram",
    "decode_sflow",
    "decode_sflow_partial",
    "FlowSample",
    "FlowRecordType",
    "RawPacketHeader",
    "UndecodedFlowRecord",
    "CounterSample",
    "CounterRecord",
    "GenericInterfaceCounters",
    "EthernetCounters",
    "TokenRingCounters",
    "BaseVgCounters",
    "VlanCounters",
    "ProcessorCounters",
]
