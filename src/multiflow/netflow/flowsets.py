"""
FlowSet decoding shared by NetFlow v9 and IPFIX.

A flow set starts with a 16-bit set id and a 16-bit length (which counts
the 4 header bytes). Template and options-template sets update the
registry; data sets (id >= 256) are decoded against it.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from ..errors import InvalidLength, InvalidSetId, TooManyFlowSets, UnknownTemplate
from ..reader import ByteReader
from .fields import DataField, parse_field
from .ipfix_types import IPFIX_FIELD_TYPES
from .templates import (
    ENTERPRISE_BIT,
    Address,
    OptionsTemplate,
    ScopeField,
    Template,
    TemplateField,
    TemplateRegistry,
)
from .v9_types import NETFLOW_V9_FIELD_TYPES, FieldTypeInfo, ScopeType

logger = logging.getLogger(__name__)

SET_HEADER_SIZE = 4
OPTIONS_HEADER_SIZE = 10
FIELD_SPECIFIER_SIZE = 4
MIN_DATA_SET_ID = 256


@dataclass(frozen=True)
class FlowSetDialect:
    """Framing differences between NetFlow v9 and IPFIX."""

    name: str
    template_set_id: int
    options_template_set_id: int
    type_map: Dict[int, FieldTypeInfo]
    enterprise_fields: bool
    variable_length_fields: bool


NETFLOW_V9 = FlowSetDialect(
    name="NetFlow v9",
    template_set_id=0,
    options_template_set_id=1,
    type_map=NETFLOW_V9_FIELD_TYPES,
    enterprise_fields=False,
    variable_length_fields=False,
)

IPFIX = FlowSetDialect(
    name="IPFIX",
    template_set_id=2,
    options_template_set_id=3,
    type_map=IPFIX_FIELD_TYPES,
    enterprise_fields=True,
    variable_length_fields=True,
)


class TemplateKind(Enum):
    """Which kind of template a data set was decoded against."""

    REGULAR = "regular"
    OPTIONS = "options"


DataRecord = Tuple[DataField, ...]


@dataclass(frozen=True)
class TemplateFlowSet:
    set_id: int
    length: int
    templates: Tuple[Template, ...]

    @property
    def template(self) -> Optional[Template]:
        """First template of the set; None when the set holds only padding."""
        return self.templates[0] if self.templates else None

    def to_dict(self) -> Dict:
        return {
            "type": "template",
            "set_id": self.set_id,
            "length": self.length,
            "templates": [t.to_dict() for t in self.templates],
        }


@dataclass(frozen=True)
class OptionsTemplateFlowSet:
    set_id: int
    length: int
    template: OptionsTemplate
    padding: int = 0

    def to_dict(self) -> Dict:
        return {
            "type": "options_template",
            "set_id": self.set_id,
            "length": self.length,
            "template": self.template.to_dict(),
        }


@dataclass(frozen=True)
class DataFlowSet:
    set_id: int
    length: int
    template_kind: TemplateKind
    records: Tuple[DataRecord, ...]
    padding: int = 0

    @property
    def template_id(self) -> int:
        return self.set_id

    def to_dict(self) -> Dict:
        return {
            "type": "data",
            "set_id": self.set_id,
            "length": self.length,
            "template_kind": self.template_kind.value,
            "records": [[f.to_dict() for f in record] for record in self.records],
        }


FlowSet = Union[TemplateFlowSet, OptionsTemplateFlowSet, DataFlowSet]


def parse_template_field(reader: ByteReader, dialect: FlowSetDialect) -> TemplateField:
    """Parse a (type, length) specifier, plus the enterprise number if flagged."""
    type_id, length = reader.unpack("HH", "field specifier")
    if dialect.enterprise_fields and type_id & ENTERPRISE_BIT:
        enterprise_id = reader.u32("enterprise number")
        return TemplateField(type_id, length, None, enterprise_id)
    return TemplateField(type_id, length, dialect.type_map.get(type_id))


def parse_flowset(
    reader: ByteReader,
    address: Address,
    registry: TemplateRegistry,
    dialect: FlowSetDialect,
) -> FlowSet:
    """
    Decode the flow set at the reader's position.

    Template registrations commit immediately, so they survive a failure
    in a later flow set of the same datagram.

    Raises:
        InvalidSetId: set id in the reserved range
        UnknownTemplate: data set without a registered template
        Truncated: the buffer ends inside the flow set
    """
    set_id = reader.u16("flow set id")

    if set_id == dialect.template_set_id:
        return _parse_template_set(reader, set_id, address, registry, dialect)
    if set_id == dialect.options_template_set_id:
        return _parse_options_template_set(reader, set_id, address, registry, dialect)
    if set_id < MIN_DATA_SET_ID:
        raise InvalidSetId(set_id)
    return _parse_data_set(reader, set_id, address, registry, dialect)


def _parse_template_set(reader, set_id, address, registry, dialect) -> TemplateFlowSet:
    length = reader.u16("template set length")
    if length < SET_HEADER_SIZE:
        raise InvalidLength("template set", length, SET_HEADER_SIZE)
    body = reader.sub_reader(length - SET_HEADER_SIZE, "template set")

    templates: List[Template] = []
    # Anything shorter than a template header is padding
    while body.remaining >= 4:
        template_id, field_count = body.unpack("HH", "template header")
        fields = tuple(parse_template_field(body, dialect) for _ in range(field_count))
        template = Template(template_id, fields)
        registry.register_template(address, template)
        templates.append(template)

    return TemplateFlowSet(set_id, length, tuple(templates))


def _parse_options_template_set(reader, set_id, address, registry, dialect) -> OptionsTemplateFlowSet:
    length, template_id, scope_length, option_length = reader.unpack("HHHH", "options template header")
    start = reader.offset

    scope_fields = []
    for _ in range(scope_length // FIELD_SPECIFIER_SIZE):
        type_id, field_length = reader.unpack("HH", "scope field specifier")
        scope_fields.append(ScopeField(type_id, field_length, ScopeType.lookup(type_id)))

    # Option lengths count bytes; an enterprise specifier takes 8 of them
    option_fields = []
    option_end = reader.offset + option_length
    while option_end - reader.offset >= FIELD_SPECIFIER_SIZE:
        option_fields.append(parse_template_field(reader, dialect))

    consumed = OPTIONS_HEADER_SIZE + (reader.offset - start)
    padding = length - consumed
    if padding < 0:
        raise InvalidLength("options template set", length, consumed)
    reader.skip(padding, "options template padding")

    template = OptionsTemplate(template_id, tuple(scope_fields), tuple(option_fields))
    registry.register_options_template(address, template)
    return OptionsTemplateFlowSet(set_id, length, template, padding)


def _parse_data_set(reader, set_id, address, registry, dialect) -> DataFlowSet:
    length = reader.u16("data set length")
    if length < SET_HEADER_SIZE:
        raise InvalidLength("data set", length, SET_HEADER_SIZE)

    template = registry.lookup(address, set_id)
    if template is None:
        raise UnknownTemplate(address, set_id)

    body_length = length - SET_HEADER_SIZE
    body = reader.sub_reader(body_length, "data set")
    fields = template.record_fields
    records: List[DataRecord] = []

    if dialect.variable_length_fields and template.has_variable_length_fields:
        minimum = template.min_record_width
        while minimum and body.remaining >= minimum:
            records.append(tuple(parse_field(body, f, variable_length=True) for f in fields))
        padding = body.remaining
    else:
        width = template.record_width
        record_count = body_length // width if width else 0
        for _ in range(record_count):
            records.append(tuple(parse_field(body, f) for f in fields))
        padding = body_length - width * record_count

    body.skip(padding, "data set padding")

    kind = TemplateKind.REGULAR if isinstance(template, Template) else TemplateKind.OPTIONS
    return DataFlowSet(set_id, length, kind, tuple(records), padding)


def parse_flowsets(
    reader: ByteReader,
    address: Address,
    registry: TemplateRegistry,
    dialect: FlowSetDialect,
    max_flowsets: int,
) -> Tuple[FlowSet, ...]:
    """
    Decode flow sets until fewer bytes remain than a set header.

    Raises:
        TooManyFlowSets: more than `max_flowsets` sets in one datagram
    """
    flowsets: List[FlowSet] = []
    while reader.remaining >= SET_HEADER_SIZE:
        if len(flowsets) >= max_flowsets:
            raise TooManyFlowSets(max_flowsets)
        flowsets.append(parse_flowset(reader, address, registry, dialect))
    return tuple(flowsets)
