"""
NetFlow / IPFIX dispatcher.

Reads the 16-bit version at the start of a datagram and hands the rest to
the matching decoder. The decoder instance owns the template registries,
so independent instances never share templates.
"""

import logging
from typing import Optional, Tuple, Union

from ..errors import UnsupportedVersion
from ..reader import ByteReader
from . import ipfix, v1, v5, v9
from .templates import Address, OptionsTemplate, Template, TemplateRegistry

logger = logging.getLogger(__name__)

DEFAULT_MAX_FLOWSETS = 256

NetflowDatagram = Union[v1.V1Datagram, v5.V5Datagram, v9.V9Datagram, ipfix.IpfixDatagram]
NetflowHeader = Union[v1.V1Header, v5.V5Header, v9.V9Header, ipfix.IpfixHeader]

_HEADER_PARSERS = {
    1: v1.parse_header,
    5: v5.parse_header,
    9: v9.parse_header,
    10: ipfix.parse_header,
}


def peek_header(data: bytes) -> NetflowHeader:
    """
    Decode only the datagram header, without touching flow sets or any
    template state. Useful for ordering datagrams by sequence number
    before decoding them.

    Raises:
        UnsupportedVersion: version is not 1, 5, 9 or 10
        Truncated: buffer shorter than the header
    """
    reader = ByteReader(data)
    version = reader.u16("version")
    parse_header = _HEADER_PARSERS.get(version)
    if parse_header is None:
        raise UnsupportedVersion(version)
    return parse_header(reader)


class NetflowDecoder:
    """
    Stateful decoder for NetFlow v1, v5, v9 and IPFIX datagrams.

    v9 and IPFIX templates are kept in separate registries because their
    fields resolve against different type tables. Both are keyed by
    (exporter address, template id).
    """

    def __init__(
        self,
        max_flowsets: int = DEFAULT_MAX_FLOWSETS,
        registry: Optional[TemplateRegistry] = None,
        ipfix_registry: Optional[TemplateRegistry] = None,
    ):
        """
        Args:
            max_flowsets: Upper bound on flow sets decoded from one datagram
            registry: NetFlow v9 template registry (new one if omitted)
            ipfix_registry: IPFIX template registry (new one if omitted)
        """
        self.max_flowsets = max_flowsets
        self.registry = registry if registry is not None else TemplateRegistry()
        self.ipfix_registry = ipfix_registry if ipfix_registry is not None else TemplateRegistry()

    def decode(self, data: bytes, address: Address) -> NetflowDatagram:
        """
        Decode one datagram received from `address`.

        Raises:
            FlowDecodeError: any decode failure; templates registered by
                earlier flow sets of the datagram stay registered
        """
        datagram, _ = self.decode_partial(data, address)
        return datagram

    def decode_partial(self, data: bytes, address: Address) -> Tuple[NetflowDatagram, bytes]:
        """Decode one datagram and also return the bytes it did not consume."""
        reader = ByteReader(data)
        version = reader.u16("version")

        if version == 1:
            datagram = v1.parse(reader)
        elif version == 5:
            datagram = v5.parse(reader)
        elif version == 9:
            datagram = v9.parse(reader, address, self.registry, self.max_flowsets)
        elif version == 10:
            datagram = ipfix.parse(reader, address, self.ipfix_registry, self.max_flowsets)
        else:
            raise UnsupportedVersion(version)

        return datagram, reader.rest()

    def register_template(self, address: Address, template: Template, ipfix: bool = False):
        """Pre-seed a template, as if a template set had been received."""
        self._registry_for(ipfix).register_template(address, template)

    def register_options_template(self, address: Address, template: OptionsTemplate, ipfix: bool = False):
        self._registry_for(ipfix).register_options_template(address, template)

    def _registry_for(self, ipfix: bool) -> TemplateRegistry:
        return self.ipfix_registry if ipfix else self.registry
