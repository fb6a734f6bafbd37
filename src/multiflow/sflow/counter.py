"""
sFlow counter samples and their counter records.

Each counter record kind is a fixed XDR structure, so every record class
declares its struct format and is built straight from the unpacked tuple.
"""

from dataclasses import asdict, dataclass
from typing import ClassVar, Dict, Tuple, Type

from ..errors import UnsupportedCounterRecordType
from ..reader import ByteReader


class CounterRecord:
    """Base for decoded counter records."""

    record_type: ClassVar[int]
    record_name: ClassVar[str]
    FORMAT: ClassVar[str]

    @classmethod
    def parse(cls, reader: ByteReader) -> "CounterRecord":
        return cls(*reader.unpack(cls.FORMAT, f"{cls.record_name} counters"))

    def to_dict(self) -> Dict:
        return {"type": self.record_name, **asdict(self)}


@dataclass(frozen=True)
class GenericInterfaceCounters(CounterRecord):
    record_type: ClassVar[int] = 1
    record_name: ClassVar[str] = "generic"
    FORMAT: ClassVar[str] = "IIQIIQIIIIIIQIIIIII"

    index: int
    interface_type: int
    speed: int
    direction: int
    status: int
    in_octets: int
    in_ucast: int
    in_multicast: int
    in_broadcast: int
    in_discarded: int
    in_errors: int
    in_unknown_protos: int
    out_octets: int
    out_ucast: int
    out_multicast: int
    out_broadcast: int
    out_discarded: int
    out_errors: int
    out_promiscuous: int


@dataclass(frozen=True)
class EthernetCounters(CounterRecord):
    record_type: ClassVar[int] = 2
    record_name: ClassVar[str] = "ethernet"
    FORMAT: ClassVar[str] = "13I"

    alignment_errors: int
    fcs_errors: int
    single_collision_frames: int
    multiple_collision_frames: int
    sqe_test_errors: int
    deferred_transmissions: int
    late_collisions: int
    excessive_collisions: int
    internal_mac_transmit_errors: int
    carrier_sense_errors: int
    frame_too_longs: int
    internal_mac_receive_errors: int
    symbol_errors: int


@dataclass(frozen=True)
class TokenRingCounters(CounterRecord):
    record_type: ClassVar[int] = 3
    record_name: ClassVar[str] = "token_ring"
    FORMAT: ClassVar[str] = "18I"

    line_errors: int
    burst_errors: int
    ac_errors: int
    abort_trans_errors: int
    internal_errors: int
    lost_frame_errors: int
    receive_congestions: int
    frame_copied_errors: int
    token_errors: int
    soft_errors: int
    hard_errors: int
    signal_loss: int
    transmit_beacons: int
    recoverys: int
    lobe_wires: int
    removes: int
    singles: int
    freq_errors: int


@dataclass(frozen=True)
class BaseVgCounters(CounterRecord):
    """100BaseVG interface counters."""

    record_type: ClassVar[int] = 4
    record_name: ClassVar[str] = "base_vg"
    FORMAT: ClassVar[str] = "IQIQIIIIIQIQQQ"

    in_high_priority_frames: int
    in_high_priority_octets: int
    in_norm_priority_frames: int
    in_norm_priority_octets: int
    in_ipm_errors: int
    in_oversize_frame_errors: int
    in_data_errors: int
    in_null_addressed_frames: int
    out_high_priority_frames: int
    out_high_priority_octets: int
    transition_into_trainings: int
    hc_in_high_priority_octets: int
    hc_in_norm_priority_octets: int
    hc_out_high_priority_octets: int


@dataclass(frozen=True)
class VlanCounters(CounterRecord):
    record_type: ClassVar[int] = 5
    record_name: ClassVar[str] = "vlan"
    FORMAT: ClassVar[str] = "IQIIII"

    vlan_id: int
    octets: int
    ucast: int
    multicast: int
    broadcast: int
    discards: int


@dataclass(frozen=True)
class ProcessorCounters(CounterRecord):
    record_type: ClassVar[int] = 1001
    record_name: ClassVar[str] = "processor"
    FORMAT: ClassVar[str] = "IIIQQ"

    cpu_5s: int
    cpu_1m: int
    cpu_5m: int
    total_memory: int
    free_memory: int


COUNTER_RECORD_TYPES: Dict[int, Type[CounterRecord]] = {
    cls.record_type: cls
    for cls in (
        GenericInterfaceCounters,
        EthernetCounters,
        TokenRingCounters,
        BaseVgCounters,
        VlanCounters,
        ProcessorCounters,
    )
}


@dataclass(frozen=True)
class CounterSample:
    sample_type: ClassVar[int] = 2

    sequence_number: int
    source_id: int
    records: Tuple[CounterRecord, ...]

    def to_dict(self) -> Dict:
        return {
            "type": "counter",
            "sequence_number": self.sequence_number,
            "source_id": self.source_id,
            "records": [r.to_dict() for r in self.records],
        }


def parse_counter_record(reader: ByteReader) -> CounterRecord:
    """
    Decode one counter record.

    The declared size is read but not used; records are laid end to end.

    Raises:
        UnsupportedCounterRecordType: no decoder for the record type
    """
    record_type, _size = reader.unpack("II", "counter record header")
    record_cls = COUNTER_RECORD_TYPES.get(record_type)
    if record_cls is None:
        raise UnsupportedCounterRecordType(record_type)
    return record_cls.parse(reader)


def parse_counter_sample(reader: ByteReader) -> CounterSample:
    sequence_number, source_id, record_count = reader.unpack("III", "counter sample header")
    records = tuple(parse_counter_record(reader) for _ in range(record_count))
    return CounterSample(sequence_number, source_id, records)
