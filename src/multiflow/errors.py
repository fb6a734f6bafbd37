"""
Decode errors.

Every failure raised by the decoders is a FlowDecodeError. Failures are
local to one datagram: nothing here is fatal to a collector, and none of
them roll back templates registered earlier in the same datagram.
"""

from typing import Optional, Tuple


class FlowDecodeError(Exception):
    """Base class for all datagram decode failures."""


class UnsupportedVersion(FlowDecodeError):
    """The version discriminant is not a supported NetFlow/IPFIX version."""

    def __init__(self, version: int):
        self.version = version
        super().__init__(f"Unsupported NetFlow version {version}")


class Truncated(FlowDecodeError):
    """Fewer bytes remain than a field, record or count requires."""

    def __init__(self, needed: int, available: int, what: str = "data"):
        self.needed = needed
        self.available = available
        self.what = what
        super().__init__(f"Truncated {what}: needed {needed} bytes, {available} available")


class InvalidSetId(FlowDecodeError):
    """A flow set id falls in the reserved but undefined range."""

    def __init__(self, set_id: int):
        self.set_id = set_id
        super().__init__(f"Got set id {set_id}. This is an invalid set")


class InvalidLength(FlowDecodeError):
    """A length field is inconsistent with the structure it describes."""

    def __init__(self, what: str, length: int, minimum: int):
        self.what = what
        self.length = length
        self.minimum = minimum
        super().__init__(f"Invalid {what} length {length} (minimum {minimum})")


class UnknownTemplate(FlowDecodeError):
    """
    A data set references a template that has not been registered.

    The datagram will decode once the exporter has sent the template.
    """

    def __init__(self, address: Optional[Tuple], template_id: int):
        self.address = address
        self.template_id = template_id
        super().__init__(f"Could not find template with ID {template_id} for address {address}")


class TooManyFlowSets(FlowDecodeError):
    """A datagram carries more flow sets than the configured upper bound."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Datagram exceeds the limit of {limit} flow sets")


class UnsupportedSampleType(FlowDecodeError):
    """An sFlow sample type other than flow (1) or counter (2)."""

    def __init__(self, sample_type: int):
        self.sample_type = sample_type
        super().__init__(f"Unsupported sFlow sample type {sample_type}")


class UnsupportedCounterRecordType(FlowDecodeError):
    """An sFlow counter record type that has no decoder."""

    def __init__(self, record_type: int):
        self.record_type = record_type
        super().__init__(f"Unsupported sFlow counter record type {record_type}")


class UnsupportedFlowRecordType(FlowDecodeError):
    """An sFlow flow record type that is not a known record format."""

    def __init__(self, record_type: int):
        self.record_type = record_type
        super().__init__(f"Unsupported sFlow flow record type {record_type}")
