"""
IPFIX information elements (RFC 5102 / IANA registry).

Enterprise-specific elements are never resolved here; the template parser
leaves them without an encoding kind so they decode as raw bytes.
"""

from .v9_types import EncodingKind, build_type_map

_K = EncodingKind

IPFIX_FIELD_TYPES = build_type_map({
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
    128: ("bgpNextAdjacentAsNumber", "", _K.NUMBER),
    129: ("bgpPrevAdjacentAsNumber", "", _K.NUMBER),
    130: ("exporterIPv4Address", "", _K.IPV4),
    131: ("exporterIPv6Address", "", _K.IPV6),
    132: ("droppedOctetDeltaCount", "", _K.NUMBER),
    133: ("droppedPacketDeltaCount", "", _K.NUMBER),
    134: ("droppedOctetTotalCount", "", _K.NUMBER),
    135: ("droppedPacketTotalCount", "", _K.NUMBER),
    136: ("flowEndReason", "", _K.NUMBER),
    137: ("commonPropertiesId", "", _K.NUMBER),
    138: ("observationPointId", "", _K.NUMBER),
    139: ("icmpTypeCodeIPv6", "", _K.NUMBER),
    140: ("mplsTopLabelIPv6Address", "", _K.IPV6),
    141: ("lineCardId", "", _K.NUMBER),
    142: ("portId", "", _K.NUMBER),
    143: ("meteringProcessId", "", _K.NUMBER),
    144: ("exportingProcessId", "", _K.NUMBER),
    145: ("templateId", "", _K.NUMBER),
    146: ("wlanChannelId", "", _K.NUMBER),
    147: ("wlanSSID", "", _K.STRING),
    148: ("flowId", "", _K.NUMBER),
    149: ("observationDomainId", "", _K.NUMBER),
    150: ("flowStartSeconds", "", _K.DATETIME_SECONDS),
    151: ("flowEndSeconds", "", _K.DATETIME_SECONDS),
    152: ("flowStartMilliseconds", "", _K.DATETIME_MILLIS),
    153: ("flowEndMilliseconds", "", _K.DATETIME_MILLIS),
    154: ("flowStartMicroseconds", "", _K.DATETIME_MICROS),
    155: ("flowEndMicroseconds", "", _K.DATETIME_MICROS),
    156: ("flowStartNanoseconds", "", _K.DATETIME_NANOS),
    157: ("flowEndNanoseconds", "", _K.DATETIME_NANOS),
    158: ("flowStartDeltaMicroseconds", "", _K.NUMBER),
    159: ("flowEndDeltaMicroseconds", "", _K.NUMBER),
    160: ("systemInitTimeMilliseconds", "", _K.DATETIME_MILLIS),
    161: ("flowDurationMilliseconds", "", _K.NUMBER),
    162: ("flowDurationMicroseconds", "", _K.NUMBER),
    163: ("observedFlowTotalCount", "", _K.NUMBER),
    164: ("ignoredPacketTotalCount", "", _K.NUMBER),
    165: ("ignoredOctetTotalCount", "", _K.NUMBER),
    166: ("notSentFlowTotalCount", "", _K.NUMBER),
    167: ("notSentPacketTotalCount", "", _K.NUMBER),
    168: ("notSentOctetTotalCount", "", _K.NUMBER),
    169: ("destinationIPv6Prefix", "", _K.IPV6),
    170: ("sourceIPv6Prefix", "", _K.IPV6),
    171: ("postOctetTotalCount", "", _K.NUMBER),
    172: ("postPacketTotalCount", "", _K.NUMBER),
    173: ("flowKeyIndicator", "", _K.NUMBER),
    174: ("postMCastPacketTotalCount", "", _K.NUMBER),
    175: ("postMCastOctetTotalCount", "", _K.NUMBER),
    176: ("icmpTypeIPv4", "", _K.NUMBER),
    177: ("icmpCodeIPv4", "", _K.NUMBER),
    178: ("icmpTypeIPv6", "", _K.NUMBER),
    179: ("icmpCodeIPv6", "", _K.NUMBER),
    180: ("udpSourcePort", "", _K.NUMBER),
    181: ("udpDestinationPort", "", _K.NUMBER),
    182: ("tcpSourcePort", "", _K.NUMBER),
    183: ("tcpDestinationPort", "", _K.NUMBER),
    184: ("tcpSequenceNumber", "", _K.NUMBER),
    185: ("tcpAcknowledgementNumber", "", _K.NUMBER),
    186: ("tcpWindowSize", "", _K.NUMBER),
    187: ("tcpUrgentPointer", "", _K.NUMBER),
    188: ("tcpHeaderLength", "", _K.NUMBER),
    189: ("ipHeaderLength", "", _K.NUMBER),
    190: ("totalLengthIPv4", "", _K.NUMBER),
    191: ("payloadLengthIPv6", "", _K.NUMBER),
    192: ("ipTTL", "", _K.NUMBER),
    193: ("nextHeaderIPv6", "", _K.NUMBER),
    194: ("mplsPayloadLength", "", _K.NUMBER),
    195: ("ipDiffServCodePoint", "", _K.NUMBER),
    196: ("ipPrecedence", "", _K.NUMBER),
    197: ("fragmentFlags", "", _K.NUMBER),
    198: ("octetDeltaSumOfSquares", "", _K.NUMBER),
    199: ("octetTotalSumOfSquares", "", _K.NUMBER),
    200: ("mplsTopLabelTTL", "", _K.NUMBER),
    201: ("mplsLabelStackLength", "", _K.NUMBER),
    202: ("mplsLabelStackDepth", "", _K.NUMBER),
    203: ("mplsTopLabelExp", "", _K.NUMBER),
    204: ("ipPayloadLength", "", _K.NUMBER),
    205: ("udpMessageLength", "", _K.NUMBER),
    206: ("isMulticast", "", _K.NUMBER),
    207: ("ipv4IHL", "", _K.NUMBER),
    208: ("ipv4Options", "", _K.NUMBER),
    209: ("tcpOptions", "", _K.NUMBER),
    210: ("paddingOctets", "", _K.OCTET_ARRAY),
    211: ("collectorIPv4Address", "", _K.IPV4),
    212: ("collectorIPv6Address", "", _K.IPV6),
    213: ("exportInterface", "", _K.NUMBER),
    214: ("exportProtocolVersion", "", _K.NUMBER),
    215: ("exportTransportProtocol", "", _K.NUMBER),
    216: ("collectorTransportPort", "", _K.NUMBER),
    217: ("exporterTransportPort", "", _K.NUMBER),
    218: ("tcpSynTotalCount", "", _K.NUMBER),
    219: ("tcpFinTotalCount", "", _K.NUMBER),
    220: ("tcpRstTotalCount", "", _K.NUMBER),
    221: ("tcpPshTotalCount", "", _K.NUMBER),
    222: ("tcpAckTotalCount", "", _K.NUMBER),
    223: ("tcpUrgTotalCount", "", _K.NUMBER),
    224: ("ipTotalLength", "", _K.NUMBER),
    225: ("postNATSourceIPv4Address", "", _K.IPV4),
    226: ("postNATDestinationIPv4Address", "", _K.IPV4),
    227: ("postNAPTSourceTransportPort", "", _K.NUMBER),
    228: ("postNAPTDestinationTransportPort", "", _K.NUMBER),
    229: ("natOriginatingAddressRealm", "", _K.NUMBER),
    230: ("natEvent", "", _K.NUMBER),
    231: ("initiatorOctets", "", _K.NUMBER),
    232: ("responderOctets", "", _K.NUMBER),
    233: ("firewallEvent", "", _K.NUMBER),
    234: ("ingressVRFID", "", _K.NUMBER),
    235: ("egressVRFID", "", _K.NUMBER),
    236: ("VRFname", "", _K.STRING),
    237: ("postMplsTopLabelExp", "", _K.NUMBER),
    238: ("tcpWindowScale", "", _K.NUMBER),
    239: ("biflowDirection", "", _K.NUMBER),
    240: ("ethernetHeaderLength", "", _K.NUMBER),
    241: ("ethernetPayloadLength", "", _K.NUMBER),
    242: ("ethernetTotalLength", "", _K.NUMBER),
    243: ("dot1qVlanId", "", _K.NUMBER),
    244: ("dot1qPriority", "", _K.NUMBER),
    245: ("dot1qCustomerVlanId", "", _K.NUMBER),
    246: ("dot1qCustomerPriority", "", _K.NUMBER),
    247: ("metroEvcId", "", _K.STRING),
    248: ("metroEvcType", "", _K.NUMBER),
    249: ("pseudoWireId", "", _K.NUMBER),
    250: ("pseudoWireType", "", _K.NUMBER),
    251: ("pseudoWireControlWord", "", _K.NUMBER),
    252: ("ingressPhysicalInterface", "", _K.NUMBER),
    253: ("egressPhysicalInterface", "", _K.NUMBER),
    254: ("postDot1qVlanId", "", _K.NUMBER),
    255: ("postDot1qCustomerVlanId", "", _K.NUMBER),
    256: ("ethernetType", "", _K.NUMBER),
    257: ("postIpPrecedence", "", _K.NUMBER),
    258: ("collectionTimeMilliseconds", "", _K.DATETIME_MILLIS),
    259: ("exportSctpStreamId", "", _K.NUMBER),
    260: ("maxExportSeconds", "", _K.DATETIME_SECONDS),
    261: ("maxFlowEndSeconds", "", _K.DATETIME_SECONDS),
    262: ("messageMD5Checksum", "", _K.OCTET_ARRAY),
    263: ("messageScope", "", _K.NUMBER),
    264: ("minExportSeconds", "", _K.DATETIME_SECONDS),
    265: ("minFlowStartSeconds", "", _K.DATETIME_SECONDS),
    266: ("opaqueOctets", "", _K.OCTET_ARRAY),
    267: ("sessionScope", "", _K.NUMBER),
    268: ("maxFlowEndMicroseconds", "", _K.DATETIME_MICROS),
    269: ("maxFlowEndMilliseconds", "", _K.DATETIME_MILLIS),
    270: ("maxFlowEndNanoseconds", "", _K.DATETIME_NANOS),
    271: ("minFlowStartMicroseconds", "", _K.DATETIME_MICROS),
    272: ("minFlowStartMilliseconds", "", _K.DATETIME_MILLIS),
    273: ("minFlowStartNanoseconds", "", _K.DATETIME_NANOS),
    274: ("collectorCertificate", "", _K.OCTET_ARRAY),
    275: ("exporterCertificate", "", _K.OCTET_ARRAY),
    276: ("dataRecordsReliability", "", _K.BOOLEAN),
    277: ("observationPointType", "", _K.NUMBER),
    278: ("newConnectionDeltaCount", "", _K.NUMBER),
    279: ("connectionSumDurationSeconds", "", _K.NUMBER),
    280: ("connectionTransactionId", "", _K.NUMBER),
    281: ("postNATSourceIPv6Address", "", _K.IPV6),
    282: ("postNATDestinationIPv6Address", "", _K.IPV6),
    283: ("natPoolId", "", _K.NUMBER),
    284: ("natPoolName", "", _K.STRING),
    285: ("anonymizationFlags", "", _K.NUMBER),
    286: ("anonymizationTechnique", "", _K.NUMBER),
    287: ("informationElementIndex", "", _K.NUMBER),
    288: ("p2pTechnology", "", _K.STRING),
    289: ("tunnelTechnology", "", _K.STRING),
    290: ("encryptedTechnology", "", _K.STRING),
    291: ("basicList", "", _K.OCTET_ARRAY),
    292: ("subTemplateList", "", _K.OCTET_ARRAY),
    293: ("subTemplateMultiList", "", _K.OCTET_ARRAY),
    294: ("bgpValidityState", "", _K.NUMBER),
    295: ("IPSecSPI", "", _K.NUMBER),
    296: ("greKey", "", _K.NUMBER),
    297: ("natType", "", _K.NUMBER),
    298: ("initiatorPackets", "", _K.NUMBER),
    299: ("responderPackets", "", _K.NUMBER),
    300: ("observationDomainName", "", _K.STRING),
    301: ("selectionSequenceId", "", _K.NUMBER),
    302: ("selectorId", "", _K.NUMBER),
    303: ("informationElementId", "", _K.NUMBER),
    304: ("selectorAlgorithm", "", _K.NUMBER),
    305: ("samplingPacketInterval", "", _K.NUMBER),
    306: ("samplingPacketSpace", "", _K.NUMBER),
    307: ("samplingTimeInterval", "", _K.NUMBER),
    308: ("samplingTimeSpace", "", _K.NUMBER),
    309: ("samplingSize", "", _K.NUMBER),
    310: ("samplingPopulation", "", _K.NUMBER),
    311: ("samplingProbability", "", _K.FLOAT),
    312: ("dataLinkFrameSize", "", _K.NUMBER),
    313: ("ipHeaderPacketSection", "", _K.OCTET_ARRAY),
    314: ("ipPayloadPacketSection", "", _K.OCTET_ARRAY),
    315: ("dataLinkFrameSection", "", _K.OCTET_ARRAY),
    316: ("mplsLabelStackSection", "", _K.OCTET_ARRAY),
    317: ("mplsPayloadPacketSection", "", _K.OCTET_ARRAY),
    318: ("selectorIdTotalPktsObserved", "", _K.NUMBER),
    319: ("selectorIdTotalPktsSelected", "", _K.NUMBER),
    320: ("absoluteError", "", _K.FLOAT),
    321: ("relativeError", "", _K.FLOAT),
    322: ("observationTimeSeconds", "", _K.DATETIME_SECONDS),
    323: ("observationTimeMilliseconds", "", _K.DATETIME_MILLIS),
    324: ("observationTimeMicroseconds", "", _K.DATETIME_MICROS),
    325: ("observationTimeNanoseconds", "", _K.DATETIME_NANOS),
    326: ("digestHashValue", "", _K.NUMBER),
    327: ("hashIPPayloadOffset", "", _K.NUMBER),
    328: ("hashIPPayloadSize", "", _K.NUMBER),
    329: ("hashOutputRangeMin", "", _K.NUMBER),
    330: ("hashOutputRangeMax", "", _K.NUMBER),
    331: ("hashSelectedRangeMin", "", _K.NUMBER),
    332: ("hashSelectedRangeMax", "", _K.NUMBER),
    333: ("hashDigestOutput", "", _K.BOOLEAN),
    334: ("hashInitialiserValue", "", _K.NUMBER),
    335: ("selectorName", "", _K.STRING),
    336: ("upperCILimit", "", _K.FLOAT),
    337: ("lowerCILimit", "", _K.FLOAT),
    338: ("confidenceLevel", "", _K.FLOAT),
    339: ("informationElementDataType", "", _K.NUMBER),
    340: ("informationElementDescription", "", _K.STRING),
    341: ("informationElementName", "", _K.STRING),
    342: ("informationElementRangeBegin", "", _K.NUMBER),
    343: ("informationElementRangeEnd", "", _K.NUMBER),
    344: ("informationElementSemantics", "", _K.NUMBER),
    345: ("informationElementUnits", "", _K.NUMBER),
    346: ("privateEnterpriseNumber", "", _K.NUMBER),
    347: ("virtualStationInterfaceId", "", _K.OCTET_ARRAY),
    348: ("virtualStationInterfaceName", "", _K.STRING),
    349: ("virtualStationUUID", "", _K.OCTET_ARRAY),
    350: ("virtualStationName", "", _K.STRING),
    351: ("layer2SegmentId", "", _K.NUMBER),
    352: ("layer2OctetDeltaCount", "", _K.NUMBER),
    353: ("layer2OctetTotalCount", "", _K.NUMBER),
    354: ("ingressUnicastPacketTotalCount", "", _K.NUMBER),
    355: ("ingressMulticastPacketTotalCount", "", _K.NUMBER),
    356: ("ingressBroadcastPacketTotalCount", "", _K.NUMBER),
    357: ("egressUnicastPacketTotalCount", "", _K.NUMBER),
    358: ("egressBroadcastPacketTotalCount", "", _K.NUMBER),
    359: ("monitoringIntervalStartMilliSeconds", "", _K.DATETIME_MILLIS),
    360: ("monitoringIntervalEndMilliSeconds", "", _K.DATETIME_MILLIS),
    361: ("portRangeStart", "", _K.NUMBER),
    362: ("portRangeEnd", "", _K.NUMBER),
    363: ("portRangeStepSize", "", _K.NUMBER),
    364: ("portRangeNumPorts", "", _K.NUMBER),
    365: ("staMacAddress", "", _K.MAC),
    366: ("staIPv4Address", "", _K.IPV4),
    367: ("wtpMacAddress", "", _K.MAC),
    368: ("ingressInterfaceType", "", _K.NUMBER),
    369: ("egressInterfaceType", "", _K.NUMBER),
    370: ("rtpSequenceNumber", "", _K.NUMBER),
    371: ("userName", "", _K.STRING),
    372: ("applicationCategoryName", "", _K.STRING),
    373: ("applicationSubCategoryName", "", _K.STRING),
    374: ("applicationGroupName", "", _K.STRING),
    375: ("originalFlowsPresent", "", _K.NUMBER),
    376: ("originalFlowsInitiated", "", _K.NUMBER),
    377: ("originalFlowsCompleted", "", _K.NUMBER),
    378: ("distinctCountOfSourceIPAddress", "", _K.NUMBER),
    379: ("distinctCountOfDestinationIPAddress", "", _K.NUMBER),
    380: ("distinctCountOfSourceIPv4Address", "", _K.NUMBER),
    381: ("distinctCountOfDestinationIPv4Address", "", _K.NUMBER),
    382: ("distinctCountOfSourceIPv6Address", "", _K.NUMBER),
    383: ("distinctCountOfDestinationIPv6Address", "", _K.NUMBER),
    384: ("valueDistributionMethod", "", _K.NUMBER),
    385: ("rfc3550JitterMilliseconds", "", _K.NUMBER),
    386: ("rfc3550JitterMicroseconds", "", _K.NUMBER),
    387: ("rfc3550JitterNanoseconds", "", _K.NUMBER),
    388: ("dot1qDEI", "", _K.BOOLEAN),
    389: ("dot1qCustomerDEI", "", _K.BOOLEAN),
    390: ("flowSelectorAlgorithm", "", _K.NUMBER),
    391: ("flowSelectedOctetDeltaCount", "", _K.NUMBER),
    392: ("flowSelectedPacketDeltaCount", "", _K.NUMBER),
    393: ("flowSelectedFlowDeltaCount", "", _K.NUMBER),
    394: ("selectorIDTotalFlowsObserved", "", _K.NUMBER),
    395: ("selectorIDTotalFlowsSelected", "", _K.NUMBER),
    396: ("samplingFlowInterval", "", _K.NUMBER),
    397: ("samplingFlowSpacing", "", _K.NUMBER),
    398: ("flowSamplingTimeInterval", "", _K.NUMBER),
    399: ("flowSamplingTimeSpacing", "", _K.NUMBER),
    400: ("hashFlowDomain", "", _K.NUMBER),
    401: ("transportOctetDeltaCount", "", _K.NUMBER),
    402: ("transportPacketDeltaCount", "", _K.NUMBER),
    403: ("originalExporterIPv4Address", "", _K.IPV4),
    404: ("originalExporterIPv6Address", "", _K.IPV6),
    405: ("originalObservationDomainId", "", _K.NUMBER),
    406: ("intermediateProcessId", "", _K.NUMBER),
    407: ("ignoredDataRecordTotalCount", "", _K.NUMBER),
    408: ("dataLinkFrameType", "", _K.NUMBER),
    409: ("sectionOffset", "", _K.NUMBER),
    410: ("sectionExportedOctets", "", _K.NUMBER),
    411: ("dot1qServiceInstanceTag", "", _K.OCTET_ARRAY),
    412: ("dot1qServiceInstanceId", "", _K.NUMBER),
    413: ("dot1qServiceInstancePriority", "", _K.NUMBER),
    414: ("dot1qCustomerSourceMacAddress", "", _K.MAC),
    415: ("dot1qCustomerDestinationMacAddress", "", _K.MAC),
    416: ("layer2OctetDeltaCount", "", _K.NUMBER),
    417: ("postLayer2OctetDeltaCount", "", _K.NUMBER),
    418: ("postMCastLayer2OctetDeltaCount", "", _K.NUMBER),
    419: ("layer2OctetTotalCount", "", _K.NUMBER),
    420: ("postLayer2OctetTotalCount", "", _K.NUMBER),
    421: ("postMCastLayer2OctetTotalCount", "", _K.NUMBER),
    422: ("minimumLayer2TotalLength", "", _K.NUMBER),
    423: ("maximumLayer2TotalLength", "", _K.NUMBER),
    424: ("droppedLayer2OctetDeltaCount", "", _K.NUMBER),
    425: ("droppedLayer2OctetTotalCount", "", _K.NUMBER),
    426: ("ignoredLayer2OctetTotalCount", "", _K.NUMBER),
    427: ("notSentLayer2OctetTotalCount", "", _K.NUMBER),
    428: ("layer2OctetDeltaSumOfSquares", "", _K.NUMBER),
    429: ("layer2OctetTotalSumOfSquares", "", _K.NUMBER),
    430: ("layer2FrameDeltaCount", "", _K.NUMBER),
    431: ("layer2FrameTotalCount", "", _K.NUMBER),
    432: ("pseudoWireDestinationIPv4Address", "", _K.IPV4),
    433: ("ignoredLayer2FrameTotalCount", "", _K.NUMBER),
    434: ("mibObjectValueInteger", "", _K.SIGNED_NUMBER),
    435: ("mibObjectValueOctetString", "", _K.OCTET_ARRAY),
    436: ("mibObjectValueOID", "", _K.OCTET_ARRAY),
    437: ("mibObjectValueBits", "", _K.OCTET_ARRAY),
    438: ("mibObjectValueIPAddress", "", _K.IPV4),
    439: ("mibObjectValueCounter", "", _K.NUMBER),
    440: ("mibObjectValueGauge", "", _K.NUMBER),
    441: ("mibObjectValueTimeTicks", "", _K.NUMBER),
    442: ("mibObjectValueUnsigned", "", _K.NUMBER),
    443: ("mibObjectValueTable", "", _K.OCTET_ARRAY),
    444: ("mibObjectValueRow", "", _K.OCTET_ARRAY),
    445: ("mibObjectIdentifier", "", _K.OCTET_ARRAY),
    446: ("mibSubIdentifier", "", _K.NUMBER),
    447: ("mibIndexIndicator", "", _K.NUMBER),
    448: ("mibCaptureTimeSemantics", "", _K.NUMBER),
    449: ("mibContextEngineID", "", _K.OCTET_ARRAY),
    450: ("mibContextName", "", _K.STRING),
    451: ("mibObjectName", "", _K.STRING),
    452: ("mibObjectDescription", "", _K.STRING),
    453: ("mibObjectSyntax", "", _K.STRING),
    454: ("mibModuleName", "", _K.STRING),
    455: ("mobileIMSI", "", _K.STRING),
    456: ("mobileMSISDN", "", _K.STRING),
    457: ("httpStatusCode", "", _K.NUMBER),
    458: ("sourceTransportPortsLimit", "", _K.NUMBER),
    459: ("httpRequestMethod", "", _K.STRING),
    460: ("httpRequestHost", "", _K.STRING),
    461: ("httpRequestTarget", "", _K.STRING),
    462: ("httpMessageVersion", "", _K.STRING),
    463: ("natInstanceID", "", _K.NUMBER),
    464: ("internalAddressRealm", "", _K.OCTET_ARRAY),
    465: ("externalAddressRealm", "", _K.OCTET_ARRAY),
    466: ("natQuotaExceededEvent", "", _K.NUMBER),
    467: ("natThresholdEvent", "", _K.NUMBER),
    468: ("httpUserAgent", "", _K.STRING),
    469: ("httpContentType", "", _K.STRING),
    470: ("httpReasonPhrase", "", _K.STRING),
    471: ("maxSessionEntries", "", _K.NUMBER),
    472: ("maxBIBEntries", "", _K.NUMBER),
    473: ("maxEntriesPerUser", "", _K.NUMBER),
    474: ("maxSubscribers", "", _K.NUMBER),
    475: ("maxFragmentsPendingReassembly", "", _K.NUMBER),
    476: ("addressPoolHighThreshold", "", _K.NUMBER),
    477: ("addressPoolLowThreshold", "", _K.NUMBER),
    478: ("addressPortMappingHighThreshold", "", _K.NUMBER),
    479: ("addressPortMappingLowThreshold", "", _K.NUMBER),
    480: ("addressPortMappingPerUserHighThreshold", "", _K.NUMBER),
    481: ("globalAddressMappingHighThreshold", "", _K.NUMBER),
    482: ("vpnIdentifier", "", _K.OCTET_ARRAY),
    483: ("bgpCommunity", "", _K.NUMBER),
    484: ("bgpSourceCommunityList", "", _K.OCTET_ARRAY),
    485: ("bgpDestinationCommunityList", "", _K.OCTET_ARRAY),
    486: ("bgpExtendedCommunity", "", _K.OCTET_ARRAY),
    487: ("bgpSourceExtendedCommunityList", "", _K.OCTET_ARRAY),
    488: ("bgpDestinationExtendedCommunityList", "", _K.OCTET_ARRAY),
    489: ("bgpLargeCommunity", "", _K.OCTET_ARRAY),
    490: ("bgpSourceLargeCommunityList", "", _K.OCTET_ARRAY),
    491: ("bgpDestinationLargeCommunityList", "", _K.OCTET_ARRAY),
})
