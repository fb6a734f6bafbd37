"""
NetFlow v9 field types (RFC 3954) and the encoding kinds shared with IPFIX.

The tables map a numeric field type to (name, description, encoding kind).
They are static data consulted by the field decoder.
"""

from enum import Enum
from typing import Dict, NamedTuple, Optional


class EncodingKind(Enum):
    """How the bytes of a data field are interpreted."""

    NUMBER = "number"
    IPV4 = "ipv4"
    IPV6 = "ipv6"
    MAC = "mac"
    STRING = "string"
    # IPFIX only
    SIGNED_NUMBER = "signed_number"
    FLOAT = "float"
    OCTET_ARRAY = "octet_array"
    BOOLEAN = "boolean"
    DATETIME_SECONDS = "datetime_seconds"
    DATETIME_MILLIS = "datetime_millis"
    DATETIME_MICROS = "datetime_micros"
    DATETIME_NANOS = "datetime_nanos"


class ScopeType(Enum):
    """Scope of an options template scope field."""

    SYSTEM = 1
    INTERFACE = 2
    LINE_CARD = 3
    NETFLOW_CACHE = 4
    TEMPLATE = 5

    @classmethod
    def lookup(cls, value: int) -> Optional["ScopeType"]:
        try:
            return cls(value)
        except ValueError:
            return None


class FieldTypeInfo(NamedTuple):
    """Resolved field type: canonical name, description, encoding and id."""

    name: str
    description: str
    kind: EncodingKind
    type_id: int


def build_type_map(entries: Dict[int, tuple]) -> Dict[int, FieldTypeInfo]:
    return {
        type_id: FieldTypeInfo(name, description, kind, type_id)
        for type_id, (name, description, kind) in entries.items()
    }


_K = EncodingKind

NETFLOW_V9_FIELD_TYPES = build_type_map({
    1: ("IN_BYTES", "Incoming counter with length N x 8 bits for number of bytes associated with an IP Flow.", _K.NUMBER),
    2: ("IN_PKTS", "Incoming counter with length N x 8 bits for the number of packets associated with an IP Flow", _K.NUMBER),
    3: ("FLOWS", "Number of flows that were aggregated; default for N is 4", _K.NUMBER),
    4: ("PROTOCOL", "IP protocol byte", _K.NUMBER),
    5: ("SRC_TOS", "Type of Service byte setting when entering incoming interface", _K.NUMBER),
    6: ("TCP_FLAGS", "Cumulative of all the TCP flags seen for this flow", _K.NUMBER),
    7: ("L4_SRC_PORT", "TCP/UDP source port number i.e.: FTP, Telnet, or equivalent", _K.NUMBER),
    8: ("IPV4_SRC_ADDR", "IPv4 source address", _K.IPV4),
    9: ("SRC_MASK", "The number of contiguous bits in the source address subnet mask i.e.: the submask in slash notation", _K.NUMBER),
    10: ("INPUT_SNMP", "Input interface index; default for N is 2 but higher values could be used", _K.NUMBER),
    11: ("L4_DST_PORT", "TCP/UDP destination port number i.e.: FTP, Telnet, or equivalent", _K.NUMBER),
    12: ("IPV4_DST_ADDR", "IPv4 destination address", _K.IPV4),
    13: ("DST_MASK", "The number of contiguous bits in the destination address subnet mask i.e.: the submask in slash notation", _K.NUMBER),
    14: ("OUTPUT_SNMP", "Output interface index; default for N is 2 but higher values could be used", _K.NUMBER),
    15: ("IPV4_NEXT_HOP", "IPv4 address of next-hop router", _K.IPV4),
    16: ("SRC_AS", "Source BGP autonomous system number where N could be 2 or 4", _K.NUMBER),
    17: ("DST_AS", "Destination BGP autonomous system number where N could be 2 or 4", _K.NUMBER),
    18: ("BGP_IPV4_NEXT_HOP", "Next-hop router's IP in the BGP domain", _K.IPV4),
    19: ("MUL_DST_PKTS", "IP multicast outgoing packet counter with length N x 8 bits for packets associated with the IP Flow", _K.NUMBER),
    20: ("MUL_DST_BYTES", "IP multicast outgoing byte counter with length N x 8 bits for bytes associated with the IP Flow", _K.NUMBER),
    21: ("LAST_SWITCHED", "System uptime at which the last packet of this flow was switched", _K.NUMBER),
    22: ("FIRST_SWITCHED", "System uptime at which the first packet of this flow was switched", _K.NUMBER),
    23: ("OUT_BYTES", "Outgoing counter with length N x 8 bits for the number of bytes associated with an IP Flow", _K.NUMBER),
    24: ("OUT_PKTS", "Outgoing counter with length N x 8 bits for the number of packets associated with an IP Flow.", _K.NUMBER),
    25: ("MIN_PKT_LNGTH", "Minimum IP packet length on incoming packets of the flow", _K.NUMBER),
    26: ("MAX_PKT_LNGTH", "Maximum IP packet length on incoming packets of the flow", _K.NUMBER),
    27: ("IPV6_SRC_ADDR", "IPv6 Source Address", _K.IPV6),
    28: ("IPV6_DST_ADDR", "IPv6 Destination Address", _K.IPV6),
    29: ("IPV6_SRC_MASK", "Length of the IPv6 source mask in contiguous bits", _K.NUMBER),
    30: ("IPV6_DST_MASK", "Length of the IPv6 destination mask in contiguous bits", _K.NUMBER),
    31: ("IPV6_FLOW_LABEL", "IPv6 flow label as per RFC 2460 definition", _K.NUMBER),
    32: ("ICMP_TYPE", "Internet Control Message Protocol (ICMP) packet type; reported as ((ICMP Type*256) + ICMP code)", _K.NUMBER),
    33: ("MUL_IGMP_TYPE", "Internet Group Management Protocol (IGMP) packet type", _K.NUMBER),
    34: ("SAMPLING_INTERVAL", "When using sampled NetFlow, the rate at which packets are sampled i.e.: a value of 100 indicates that one of every 100 packets is sampled", _K.NUMBER),
    35: ("SAMPLING_ALGORITHM", "The type of algorithm used for sampled NetFlow: 0x01 Deterministic Sampling ,0x02 Random Sampling", _K.NUMBER),
    36: ("FLOW_ACTIVE_TIMEOUT", "Timeout value (in seconds) for active flow entries in the NetFlow cache", _K.NUMBER),
    37: ("FLOW_INACTIVE_TIMEOUT", "Timeout value (in seconds) for inactive flow entries in the NetFlow cache", _K.NUMBER),
    38: ("ENGINE_TYPE", "Type of flow switching engine: RP = 0, VIP/Linecard = 1", _K.NUMBER),
    39: ("ENGINE_ID", "ID number of the flow switching engine", _K.NUMBER),
    40: ("TOTAL_BYTES_EXP", "Counter with length N x 8 bits for bytes for the number of bytes exported by the Observation Domain", _K.NUMBER),
    41: ("TOTAL_PKTS_EXP", "Counter with length N x 8 bits for bytes for the number of packets exported by the Observation Domain", _K.NUMBER),
    42: ("TOTAL_FLOWS_EXP", "Counter with length N x 8 bits for bytes for the number of flows exported by the Observation Domain", _K.NUMBER),
    44: ("IPV4_SRC_PREFIX", "IPv4 source address prefix (specific for Catalyst architecture)", _K.NUMBER),
    45: ("IPV4_DST_PREFIX", "IPv4 destination address prefix (specific for Catalyst architecture)", _K.NUMBER),
    46: ("MPLS_TOP_LABEL_TYPE", "MPLS Top Label Type: 0x00 UNKNOWN 0x01 TE-MIDPT 0x02 ATOM 0x03 VPN 0x04 BGP 0x05 LDP", _K.NUMBER),
    47: ("MPLS_TOP_LABEL_IP_ADDR", "Forwarding Equivalent Class corresponding to the MPLS Top Label", _K.NUMBER),
    48: ("FLOW_SAMPLER_ID", "Identifier shown in 'show flow-sampler'", _K.NUMBER),
    49: ("FLOW_SAMPLER_MODE", "The type of algorithm used for sampling data: 0x02 random sampling. Use in connection with FLOW_SAMPLER_MODE", _K.NUMBER),
    50: ("FLOW_SAMPLER_RANDOM_INTERVAL", "Packet interval at which to sample. Use in connection with FLOW_SAMPLER_MODE", _K.NUMBER),
    52: ("MIN_TTL", "Minimum TTL on incoming packets of the flow", _K.NUMBER),
    53: ("MAX_TTL", "Maximum TTL on incoming packets of the flow", _K.NUMBER),
    54: ("IPV4_IDENT", "The IP v4 identification field", _K.NUMBER),
    55: ("DST_TOS", "Type of Service byte setting when exiting outgoing interface", _K.NUMBER),
    56: ("IN_SRC_MAC", "Incoming source MAC address", _K.MAC),
    57: ("OUT_DST_MAC", "Outgoing destination MAC address", _K.MAC),
    58: ("SRC_VLAN", "Virtual LAN identifier associated with ingress interface", _K.NUMBER),
    59: ("DST_VLAN", "Virtual LAN identifier associated with egress interface", _K.NUMBER),
    60: ("IP_PROTOCOL_VERSION", "Internet Protocol Version Set to 4 for IPv4, set to 6 for IPv6. If not present in the template, then version 4 is assumed.", _K.NUMBER),
    61: ("DIRECTION", "Flow direction: 0 - ingress flow, 1 - egress flow", _K.NUMBER),
    62: ("IPV6_NEXT_HOP", "IPv6 address of the next-hop router", _K.IPV6),
    63: ("BPG_IPV6_NEXT_HOP", "Next-hop router in the BGP domain", _K.IPV6),
    64: ("IPV6_OPTION_HEADERS", "Bit-encoded field identifying IPv6 option headers found in the flow", _K.NUMBER),
    70: ("MPLS_LABEL_1", "MPLS label at position 1 in the stack. This comprises 20 bits of MPLS label, 3 EXP (experimental) bits and 1 S (end-of-stack) bit.", _K.NUMBER),
    71: ("MPLS_LABEL_2", "MPLS label at position 2 in the stack. This comprises 20 bits of MPLS label, 3 EXP (experimental) bits and 1 S (end-of-stack) bit.", _K.NUMBER),
    72: ("MPLS_LABEL_3", "MPLS label at position 3 in the stack. This comprises 20 bits of MPLS label, 3 EXP (experimental) bits and 1 S (end-of-stack) bit.", _K.NUMBER),
    73: ("MPLS_LABEL_4", "MPLS label at position 4 in the stack. This comprises 20 bits of MPLS label, 3 EXP (experimental) bits and 1 S (end-of-stack) bit.", _K.NUMBER),
    74: ("MPLS_LABEL_5", "MPLS label at position 5 in the stack. This comprises 20 bits of MPLS label, 3 EXP (experimental) bits and 1 S (end-of-stack) bit.", _K.NUMBER),
    75: ("MPLS_LABEL_6", "MPLS label at position 6 in the stack. This comprises 20 bits of MPLS label, 3 EXP (experimental) bits and 1 S (end-of-stack) bit.", _K.NUMBER),
    76: ("MPLS_LABEL_7", "MPLS label at position 7 in the stack. This comprises 20 bits of MPLS label, 3 EXP (experimental) bits and 1 S (end-of-stack) bit.", _K.NUMBER),
    77: ("MPLS_LABEL_8", "MPLS label at position 8 in the stack. This comprises 20 bits of MPLS label, 3 EXP (experimental) bits and 1 S (end-of-stack) bit.", _K.NUMBER),
    78: ("MPLS_LABEL_9", "MPLS label at position 9 in the stack. This comprises 20 bits of MPLS label, 3 EXP (experimental) bits and 1 S (end-of-stack) bit.", _K.NUMBER),
    79: ("MPLS_LABEL_10", "MPLS label at position 10 in the stack. This comprises 20 bits of MPLS label, 3 EXP (experimental) bits and 1 S (end-of-stack) bit.", _K.NUMBER),
    80: ("IN_DST_MAC", "Incoming destination MAC address", _K.MAC),
    81: ("OUT_SRC_MAC", "Outgoing source MAC address", _K.MAC),
    82: ("IF_NAME", "Shortened interface name i.e.: 'FE1/0'", _K.STRING),
    83: ("IF_DESC", "Full interface name i.e.: 'FastEthernet 1/0'", _K.STRING),
    84: ("SAMPLER_NAME", "Name of the flow sampler", _K.STRING),
    85: ("IN_PERMANENT_BYTES", "Running byte counter for a permanent flow", _K.NUMBER),
    86: ("IN_PERMANENT_PKTS", "Running packet counter for a permanent flow", _K.NUMBER),
    88: ("FRAGMENT_OFFSET", "The fragment-offset value from fragmented IP packets", _K.NUMBER),
    89: ("FORWARDING STATUS", "Forwarding status is encoded on 1 byte with the 2 left bits giving the status and the 6 remaining bits giving the reason code. Status is either unknown (00), Forwarded (10), Dropped (10) or Consumed (11). Below is the list of forwarding status values with their means. Unknown • 0 Forwarded • Unknown 64 • Forwarded Fragmented 65 • Forwarded not Fragmented 66 Dropped • Unknown 128, • Drop ACL Deny 129, • Drop ACL drop 130, • Drop Unroutable 131, • Drop Adjacency 132, • Drop Fragmentation & DF set 133, • Drop Bad header checksum 134, • Drop Bad total Length 135, • Drop Bad Header Length 136, • Drop bad TTL 137, • Drop Policer 138, • Drop WRED 139, • Drop RPF 140, • Drop For us 141, • Drop Bad output interface 142, • Drop Hardware 143, Consumed • Unknown 192, • Terminate Punt Adjacency 193, • Terminate Incomplete Adjacency 194, • Terminate For us 195", _K.NUMBER),
    90: ("MPLS PAL RD", "MPLS PAL Route Distinguisher.", _K.NUMBER),
    91: ("MPLS PREFIX LEN", "Number of consecutive bits in the MPLS prefix length.", _K.NUMBER),
    92: ("SRC TRAFFIC INDEX", "BGP Policy Accounting Source Traffic Index", _K.NUMBER),
    93: ("DST TRAFFIC INDEX", "BGP Policy Accounting Destination Traffic Index", _K.NUMBER),
    94: ("APPLICATION DESCRIPTION", "Application description.", _K.STRING),
    95: ("APPLICATION TAG", "8 bits of engine ID, followed by n bits of classification.", _K.NUMBER),
    96: ("APPLICATION NAME", "Name associated with a classification.", _K.STRING),
    98: ("postipDiffServCodePoint", "The value of a Differentiated Services Code Point (DSCP) encoded in the Differentiated Services Field, after modification.", _K.NUMBER),
    99: ("replication factor", "Multicast replication factor.", _K.NUMBER),
    102: ("layer2packetSectionOffset", "Layer 2 packet section offset. Potentially a generic offset.", _K.NUMBER),
    103: ("layer2packetSectionSize", "Layer 2 packet section size. Potentially a generic size.", _K.NUMBER),
    104: ("layer2packetSectionData", "Layer 2 packet section data.", _K.NUMBER),
})
