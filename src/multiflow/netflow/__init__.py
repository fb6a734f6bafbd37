"""
NetFlow Module

Decoders for NetFlow v1, v5, v9 and IPFIX datagrams.

Key structures:
- NetflowDecoder: version dispatch, owns the v9 and IPFIX template registries
- TemplateRegistry: templates per (exporter address, template id)
- parse_field / decode_field: typed decoding of one data-record field
"""

from multiflow.netflow.decoder import NetflowDecoder, peek_header
from multiflow.netflow.fields import DataField, ValueKind, decode_field, parse_field
from multiflow.netflow.flowsets import (
    DataFlowSet,
    OptionsTemplateFlowSet,
    TemplateFlowSet,
    TemplateKind,
)
from multiflow.netflow.ipfix import IpfixDatagram, IpfixHeader
from multiflow.netflow.templates import (
    OptionsTemplate,
    ScopeField,
    Template,
    TemplateField,
    TemplateRegistry,
)
from multiflow.netflow.v1 import V1Datagram, V1Header, V1Record
from multiflow.netflow.v5 import V5Datagram, V5Header, V5Record
from multiflow.netflow.v9 import V9Datagram, V9Header
from multiflow.netflow.v9_types import EncodingKind, FieldTypeInfo, ScopeType

__all__ = [
    "NetflowDecoder",
    "peek_header",
    "DataField",
    "ValueKind",
    "decode_field",
    "parse_field",
    "DataFlowSet",
    "OptionsTemplateFlowSet",
    "TemplateFlowSet",
    "TemplateKind",
    "OptionsTemplate",
    "ScopeField",
    "Template",
    "TemplateField",
    "TemplateRegistry",
    "EncodingKind",
    "FieldTypeInfo",
    "ScopeType",
    "V1Datagram",
    "V1Header",
    "V1Record",
    "V5Datagram",
    "V5Header",
    "V5Record",
    "V9Datagram",
    "V9Header",
    "IpfixDatagram",
    "IpfixHeader",
]
