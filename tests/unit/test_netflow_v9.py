"""
Tests for NetFlow v9 template and data decoding.
"""

import ipaddress
import json
import struct

import pytest

from multiflow.errors import (
    InvalidLength,
    InvalidSetId,
    TooManyFlowSets,
    Truncated,
    UnknownTemplate,
)
from multiflow.netflow import (
    DataFlowSet,
    NetflowDecoder,
    OptionsTemplateFlowSet,
    Template,
    TemplateField,
    TemplateFlowSet,
    TemplateKind,
    V9Datagram,
    ValueKind,
)
from multiflow.netflow.v9_types import NETFLOW_V9_FIELD_TYPES, ScopeType

EXPORTER = ("1.2.3.4", 2055)
OTHER_EXPORTER = ("5.6.7.8", 2055)

IPV4_SRC_ADDR = 8
IPV4_DST_ADDR = 12
IN_BYTES = 1
L4_SRC_PORT = 7
L4_DST_PORT = 11
PROTOCOL = 4
SAMPLING_INTERVAL = 34


def v9_packet(*flowsets: bytes, sequence: int = 1) -> bytes:
    header = struct.pack("!HHIIII",
        9,              # version
        len(flowsets),  # count
        1000,           # sys_uptime
        1234567890,     # unix_secs
        sequence,       # sequence
        0,              # source_id
    )
    return header + b"".join(flowsets)


def field_specs(fields) -> bytes:
    return b"".join(struct.pack("!HH", type_id, length) for type_id, length in fields)


def template_flowset(*templates) -> bytes:
    """Template flow set (ID 0) holding (template_id, [(type, length), ...]) entries."""
    body = b"".join(
        struct.pack("!HH", template_id, len(fields)) + field_specs(fields)
        for template_id, fields in templates
    )
    return struct.pack("!HH", 0, 4 + len(body)) + body


def options_template_flowset(template_id, scopes, options, padding: int = 0) -> bytes:
    body = struct.pack("!HHH", template_id, 4 * len(scopes), 4 * len(options))
    body += field_specs(scopes) + field_specs(options) + b"\x00" * padding
    return struct.pack("!HH", 1, 4 + len(body)) + body


def data_flowset(set_id: int, *records: bytes, padding: int = 0) -> bytes:
    body = b"".join(records) + b"\x00" * padding
    return struct.pack("!HH", set_id, 4 + len(body)) + body


def src_bytes_record(src: str, octets: int) -> bytes:
    return ipaddress.IPv4Address(src).packed + struct.pack("!I", octets)


SRC_BYTES_TEMPLATE = (256, [(IPV4_SRC_ADDR, 4), (IN_BYTES, 4)])


def test_netflow_v9_template_parsing():
    """Test NetFlow v9 template parsing."""
    template_id = 256
    fields = [
        (IPV4_SRC_ADDR, 4),
        (IPV4_DST_ADDR, 4),
        (L4_SRC_PORT, 2),
        (L4_DST_PORT, 2),
        (PROTOCOL, 1),
    ]
    packet = v9_packet(template_flowset((template_id, fields)))

    decoder = NetflowDecoder()
    datagram = decoder.decode(packet, EXPORTER)

    # Template only, no data flow set
    assert isinstance(datagram, V9Datagram)
    assert datagram.data_flowsets == ()
    flowset = datagram.flowsets[0]
    assert isinstance(flowset, TemplateFlowSet)
    assert flowset.template.template_id == template_id
    assert [f.name for f in flowset.template.fields] == [
        "IPV4_SRC_ADDR", "IPV4_DST_ADDR", "L4_SRC_PORT", "L4_DST_PORT", "PROTOCOL",
    ]

    # Check that template was stored
    template = decoder.registry.get_template(EXPORTER, template_id)
    assert template is not None
    assert template.record_width == 13


def test_v5_discriminant_is_not_decoded_as_v9():
    """Test a v9-sized header carrying version 5 goes to the v5 decoder, whose longer header is truncated."""
    packet = struct.pack("!HHIIII", 5, 1, 1000, 1234567890, 1, 0)
    with pytest.raises(Truncated):
        NetflowDecoder().decode(packet, EXPORTER)


class TestTemplateThenData:
    """Tests for templates and data arriving in separate datagrams."""

    def test_data_after_template(self):
        """Test data decodes once its template has been seen."""
        decoder = NetflowDecoder()
        decoder.decode(v9_packet(template_flowset(SRC_BYTES_TEMPLATE)), EXPORTER)

        datagram = decoder.decode(
            v9_packet(data_flowset(256, src_bytes_record("192.168.1.1", 1000)), sequence=2),
            EXPORTER,
        )

        flowset = datagram.flowsets[0]
        assert isinstance(flowset, DataFlowSet)
        assert flowset.template_kind == TemplateKind.REGULAR
        assert len(flowset.records) == 1

        src, octets = flowset.records[0]
        assert src.kind == ValueKind.IPV4
        assert src.value == ipaddress.IPv4Address("192.168.1.1")
        assert octets.kind == ValueKind.NUMBER
        assert octets.name == "IN_BYTES"
        assert octets.value == 1000

    def test_data_without_template(self):
        """Test data fails with UnknownTemplate on a fresh decoder."""
        packet = v9_packet(data_flowset(256, src_bytes_record("192.168.1.1", 1000)))

        with pytest.raises(UnknownTemplate) as exc_info:
            NetflowDecoder().decode(packet, EXPORTER)

        assert exc_info.value.address == EXPORTER
        assert exc_info.value.template_id == 256

    def test_template_and_data_in_one_datagram(self):
        packet = v9_packet(
            template_flowset(SRC_BYTES_TEMPLATE),
            data_flowset(256, src_bytes_record("10.0.0.1", 1), src_bytes_record("10.0.0.2", 2)),
        )
        datagram = NetflowDecoder().decode(packet, EXPORTER)

        records = datagram.data_flowsets[0].records
        assert [r[1].value for r in records] == [1, 2]

    def test_templates_are_scoped_by_address(self):
        """Test a template from one exporter does not decode another's data."""
        decoder = NetflowDecoder()
        decoder.decode(v9_packet(template_flowset(SRC_BYTES_TEMPLATE)), EXPORTER)

        with pytest.raises(UnknownTemplate):
            decoder.decode(
                v9_packet(data_flowset(256, src_bytes_record("10.0.0.1", 1))),
                OTHER_EXPORTER,
            )

    def test_same_port_different_host_is_another_exporter(self):
        decoder = NetflowDecoder()
        decoder.decode(v9_packet(template_flowset(SRC_BYTES_TEMPLATE)), ("1.2.3.4", 2055))
        with pytest.raises(UnknownTemplate):
            decoder.decode(
                v9_packet(data_flowset(256, src_bytes_record("10.0.0.1", 1))),
                ("1.2.3.4", 2056),
            )

    def test_decoders_do_not_share_templates(self):
        first = NetflowDecoder()
        first.decode(v9_packet(template_flowset(SRC_BYTES_TEMPLATE)), EXPORTER)

        with pytest.raises(UnknownTemplate):
            NetflowDecoder().decode(
                v9_packet(data_flowset(256, src_bytes_record("10.0.0.1", 1))),
                EXPORTER,
            )

    def test_template_overwrite_uses_latest_layout(self):
        """Test re-registration replaces the earlier layout."""
        decoder = NetflowDecoder()
        decoder.decode(v9_packet(template_flowset(SRC_BYTES_TEMPLATE)), EXPORTER)
        decoder.decode(
            v9_packet(template_flowset((256, [(IN_BYTES, 4), (IPV4_DST_ADDR, 4)]))),
            EXPORTER,
        )

        record = struct.pack("!I", 77) + ipaddress.IPv4Address("172.16.0.1").packed
        datagram = decoder.decode(v9_packet(data_flowset(256, record)), EXPORTER)

        octets, dst = datagram.data_flowsets[0].records[0]
        assert octets.name == "IN_BYTES"
        assert octets.value == 77
        assert dst.name == "IPV4_DST_ADDR"
        assert str(dst.value) == "172.16.0.1"

    def test_manual_template_injection(self):
        """Test a pre-seeded template decodes data without a template set."""
        decoder = NetflowDecoder()
        decoder.register_template(
            EXPORTER,
            Template(300, (TemplateField(IN_BYTES, 8, NETFLOW_V9_FIELD_TYPES[IN_BYTES]),)),
        )
        datagram = decoder.decode(v9_packet(data_flowset(300, struct.pack("!Q", 2 ** 40))), EXPORTER)

        assert datagram.data_flowsets[0].records[0][0].value == 2 ** 40
        assert decoder.ipfix_registry.get_template(EXPORTER, 300) is None

    def test_multiple_templates_in_one_set(self):
        decoder = NetflowDecoder()
        datagram = decoder.decode(
            v9_packet(template_flowset(SRC_BYTES_TEMPLATE, (257, [(PROTOCOL, 1)]))),
            EXPORTER,
        )

        assert [t.template_id for t in datagram.flowsets[0].templates] == [256, 257]
        assert decoder.registry.get_template(EXPORTER, 257) is not None


class TestDataPadding:
    """Tests for data set length and padding arithmetic."""

    def test_padding_is_skipped(self):
        """Test the next flow set starts right after a padded data set."""
        decoder = NetflowDecoder()
        decoder.decode(v9_packet(template_flowset(SRC_BYTES_TEMPLATE)), EXPORTER)

        packet = v9_packet(
            data_flowset(256, src_bytes_record("10.0.0.1", 1), src_bytes_record("10.0.0.2", 2), padding=3),
            data_flowset(256, src_bytes_record("10.0.0.3", 3)),
        )
        datagram, remainder = decoder.decode_partial(packet, EXPORTER)

        first, second = datagram.flowsets
        assert first.length == 4 + 16 + 3
        assert len(first.records) == 2
        assert first.padding == 3
        assert second.records[0][1].value == 3
        assert remainder == b""

    def test_padding_smaller_than_record(self):
        """Test padding shorter than one record yields no extra record."""
        decoder = NetflowDecoder()
        decoder.decode(v9_packet(template_flowset(SRC_BYTES_TEMPLATE)), EXPORTER)

        packet = v9_packet(data_flowset(256, src_bytes_record("10.0.0.1", 1), padding=7))
        flowset = decoder.decode(packet, EXPORTER).flowsets[0]

        assert len(flowset.records) == 1
        assert flowset.padding == 7

    def test_data_set_longer_than_datagram(self):
        decoder = NetflowDecoder()
        decoder.decode(v9_packet(template_flowset(SRC_BYTES_TEMPLATE)), EXPORTER)

        packet = v9_packet(data_flowset(256, src_bytes_record("10.0.0.1", 1)))[:-2]
        with pytest.raises(Truncated):
            decoder.decode(packet, EXPORTER)

    def test_data_set_length_below_header(self):
        decoder = NetflowDecoder()
        decoder.decode(v9_packet(template_flowset(SRC_BYTES_TEMPLATE)), EXPORTER)

        with pytest.raises(InvalidLength):
            decoder.decode(v9_packet(struct.pack("!HH", 256, 2)), EXPORTER)

    def test_trailing_bytes_are_returned(self):
        decoder = NetflowDecoder()
        packet = v9_packet(template_flowset(SRC_BYTES_TEMPLATE)) + b"\x00\x00"
        datagram, remainder = decoder.decode_partial(packet, EXPORTER)

        assert len(datagram.flowsets) == 1
        assert remainder == b"\x00\x00"


class TestOptionsTemplates:
    """Tests for options templates and options data."""

    def test_options_template_with_padding(self):
        """Test padding after the descriptors is skipped."""
        decoder = NetflowDecoder()
        packet = v9_packet(
            options_template_flowset(
                400,
                scopes=[(ScopeType.SYSTEM.value, 4)],
                options=[(SAMPLING_INTERVAL, 4)],
                padding=2,
            ),
            template_flowset(SRC_BYTES_TEMPLATE),
        )
        datagram = decoder.decode(packet, EXPORTER)

        options_set, template_set = datagram.flowsets
        assert isinstance(options_set, OptionsTemplateFlowSet)
        assert options_set.padding == 2
        assert options_set.template.scope_fields[0].scope_type == ScopeType.SYSTEM
        assert options_set.template.option_fields[0].name == "SAMPLING_INTERVAL"
        assert isinstance(template_set, TemplateFlowSet)
        assert decoder.registry.get_options_template(EXPORTER, 400) is not None

    def test_unknown_scope_type_is_kept_as_none(self):
        packet = v9_packet(options_template_flowset(400, scopes=[(42, 2)], options=[]))
        flowset = NetflowDecoder().decode(packet, EXPORTER).flowsets[0]
        assert flowset.template.scope_fields[0].scope_type is None

    def test_options_data(self):
        """Test options data records carry scope values, then option values."""
        decoder = NetflowDecoder()
        decoder.decode(
            v9_packet(options_template_flowset(
                400,
                scopes=[(ScopeType.INTERFACE.value, 4)],
                options=[(SAMPLING_INTERVAL, 4)],
            )),
            EXPORTER,
        )
        datagram = decoder.decode(v9_packet(data_flowset(400, struct.pack("!II", 7, 100))), EXPORTER)

        flowset = datagram.flowsets[0]
        assert flowset.template_kind == TemplateKind.OPTIONS
        scope, interval = flowset.records[0]
        assert scope.name == "SCOPE_INTERFACE"
        assert scope.value == 7
        assert interval.name == "SAMPLING_INTERVAL"
        assert interval.value == 100

    def test_options_length_shorter_than_descriptors(self):
        body = struct.pack("!HHH", 400, 4, 4) + field_specs([(1, 4), (SAMPLING_INTERVAL, 4)])
        flowset = struct.pack("!HH", 1, 12) + body
        with pytest.raises(InvalidLength):
            NetflowDecoder().decode(v9_packet(flowset), EXPORTER)


class TestFlowSetErrors:
    """Tests for malformed flow sets."""

    @pytest.mark.parametrize("set_id", [2, 3, 100, 255])
    def test_reserved_set_ids(self, set_id):
        packet = v9_packet(struct.pack("!HH", set_id, 4))
        with pytest.raises(InvalidSetId) as exc_info:
            NetflowDecoder().decode(packet, EXPORTER)
        assert exc_info.value.set_id == set_id

    @pytest.mark.parametrize("flowset", [
        struct.pack("!HH", 0, 4),
        struct.pack("!HH", 0, 6) + b"\x00\x00",
    ])
    def test_template_set_with_only_padding(self, flowset):
        """Test a template set too short for a template header yields no templates."""
        datagram = NetflowDecoder().decode(v9_packet(flowset), EXPORTER)

        template_set = datagram.flowsets[0]
        assert isinstance(template_set, TemplateFlowSet)
        assert template_set.templates == ()
        assert template_set.template is None

    def test_templates_survive_later_failure(self):
        """Test templates registered before a failing flow set stay registered."""
        decoder = NetflowDecoder()
        packet = v9_packet(template_flowset(SRC_BYTES_TEMPLATE), struct.pack("!HH", 7, 4))

        with pytest.raises(InvalidSetId):
            decoder.decode(packet, EXPORTER)
        assert decoder.registry.get_template(EXPORTER, 256) is not None

    def test_flowset_limit(self):
        decoder = NetflowDecoder(max_flowsets=2)
        packet = v9_packet(*(template_flowset((256 + i, [(PROTOCOL, 1)])) for i in range(3)))

        with pytest.raises(TooManyFlowSets) as exc_info:
            decoder.decode(packet, EXPORTER)
        assert exc_info.value.limit == 2


def test_datagram_to_dict_is_json_serialisable():
    packet = v9_packet(
        template_flowset(SRC_BYTES_TEMPLATE),
        data_flowset(256, src_bytes_record("192.168.1.1", 1000)),
    )
    result = NetflowDecoder().decode(packet, EXPORTER).to_dict()

    assert json.loads(json.dumps(result)) == result
    assert result["header"]["sequence_number"] == 1
    record = result["flowsets"][1]["records"][0]
    assert record[0]["value"] == "192.168.1.1"
    assert record[1]["value"] == 1000
