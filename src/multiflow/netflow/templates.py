"""
NetFlow v9 / IPFIX templates and the per-decoder template registry.

Templates arrive in template flow sets, possibly in an earlier datagram than
the data they describe. The registry keys them by (exporter address,
template id) so identical ids from different exporters never collide.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Dict, Hashable, List, Optional, Tuple, Union

from .v9_types import EncodingKind, FieldTypeInfo, ScopeType

logger = logging.getLogger(__name__)

# Exporter address, normally the (host, port) tuple returned by recvfrom()
Address = Hashable

VARIABLE_LENGTH = 0xFFFF
ENTERPRISE_BIT = 0x8000


@dataclass(frozen=True)
class TemplateField:
    """One field specifier of a template: type, declared length, encoding."""

    type_id: int
    length: int
    info: Optional[FieldTypeInfo] = None
    enterprise_id: Optional[int] = None

    @property
    def kind(self) -> Optional[EncodingKind]:
        return self.info.kind if self.info else None

    @property
    def name(self) -> str:
        return self.info.name if self.info else "UNKNOWN"

    @property
    def is_variable_length(self) -> bool:
        return self.length == VARIABLE_LENGTH

    def to_dict(self) -> Dict:
        return {
            "type_id": self.type_id,
            "name": self.name,
            "kind": self.kind.value if self.kind else None,
            "length": self.length,
            "enterprise_id": self.enterprise_id,
        }


def _record_width(fields: Tuple[TemplateField, ...]) -> int:
    return sum(f.length for f in fields)


def _min_record_width(fields: Tuple[TemplateField, ...]) -> int:
    # A variable-length field occupies at least its one-byte length prefix
    return sum(1 if f.is_variable_length else f.length for f in fields)


@dataclass(frozen=True)
class Template:
    """Regular template: the schema of one kind of data record."""

    template_id: int
    fields: Tuple[TemplateField, ...]

    @property
    def record_fields(self) -> Tuple[TemplateField, ...]:
        return self.fields

    @property
    def record_width(self) -> int:
        """Sum of the declared field lengths."""
        return _record_width(self.fields)

    @property
    def min_record_width(self) -> int:
        return _min_record_width(self.fields)

    @property
    def has_variable_length_fields(self) -> bool:
        return any(f.is_variable_length for f in self.fields)

    def to_dict(self) -> Dict:
        return {
            "template_id": self.template_id,
            "fields": [f.to_dict() for f in self.fields],
        }


@dataclass(frozen=True)
class ScopeField:
    """Scope field specifier of an options template."""

    type_id: int
    length: int
    scope_type: Optional[ScopeType] = None

    def as_template_field(self) -> TemplateField:
        """Scope values decode as unsigned numbers named after their scope."""
        if self.scope_type is None:
            return TemplateField(self.type_id, self.length)
        info = FieldTypeInfo(
            f"SCOPE_{self.scope_type.name}",
            f"{self.scope_type.name.replace('_', ' ').title()} scope",
            EncodingKind.NUMBER,
            self.type_id,
        )
        return TemplateField(self.type_id, self.length, info)

    def to_dict(self) -> Dict:
        return {
            "type_id": self.type_id,
            "scope": self.scope_type.name if self.scope_type else None,
            "length": self.length,
        }


@dataclass(frozen=True)
class OptionsTemplate:
    """
    Options template: describes metadata records (sampler settings,
    interface tables...). Data records carry the scope values first,
    followed by the option values.
    """

    template_id: int
    scope_fields: Tuple[ScopeField, ...]
    option_fields: Tuple[TemplateField, ...]

    @property
    def record_fields(self) -> Tuple[TemplateField, ...]:
        return tuple(s.as_template_field() for s in self.scope_fields) + self.option_fields

    @property
    def record_width(self) -> int:
        return _record_width(self.record_fields)

    @property
    def min_record_width(self) -> int:
        return _min_record_width(self.record_fields)

    @property
    def has_variable_length_fields(self) -> bool:
        return any(f.is_variable_length for f in self.record_fields)

    def to_dict(self) -> Dict:
        return {
            "template_id": self.template_id,
            "scope_fields": [s.to_dict() for s in self.scope_fields],
            "option_fields": [f.to_dict() for f in self.option_fields],
        }


AnyTemplate = Union[Template, OptionsTemplate]


class TemplateRegistry:
    """
    Templates and options templates seen per exporter.

    Registration overwrites any previous definition for the same
    (address, template_id), whichever kind it was. Entries live as long as
    the registry; nothing expires them.

    Safe to share between threads: each registration is a single locked
    dictionary update of an immutable template.
    """

    def __init__(self):
        self._templates: Dict[Tuple[Address, int], Template] = {}
        self._options_templates: Dict[Tuple[Address, int], OptionsTemplate] = {}
        self._lock = threading.Lock()

    def register_template(self, address: Address, template: Template):
        """Add or replace a regular template."""
        key = (address, template.template_id)
        with self._lock:
            self._options_templates.pop(key, None)
            self._templates[key] = template
        logger.debug(
            f"Registered template {template.template_id} from {address} "
            f"with {len(template.fields)} fields"
        )

    def register_options_template(self, address: Address, template: OptionsTemplate):
        """Add or replace an options template."""
        key = (address, template.template_id)
        with self._lock:
            self._templates.pop(key, None)
            self._options_templates[key] = template
        logger.debug(
            f"Registered options template {template.template_id} from {address} "
            f"with {len(template.scope_fields)} scope and "
            f"{len(template.option_fields)} option fields"
        )

    def get_template(self, address: Address, template_id: int) -> Optional[Template]:
        with self._lock:
            return self._templates.get((address, template_id))

    def get_options_template(self, address: Address, template_id: int) -> Optional[OptionsTemplate]:
        with self._lock:
            return self._options_templates.get((address, template_id))

    def lookup(self, address: Address, template_id: int) -> Optional[AnyTemplate]:
        """Find the schema for a data set: regular templates first."""
        key = (address, template_id)
        with self._lock:
            return self._templates.get(key) or self._options_templates.get(key)

    def keys(self) -> List[Tuple[Address, int]]:
        with self._lock:
            return list(self._templates) + list(self._options_templates)

    def snapshot(self) -> Dict[str, int]:
        """Registry sizes, for metrics."""
        with self._lock:
            return {
                "templates": len(self._templates),
                "options_templates": len(self._options_templates),
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._templates) + len(self._options_templates)

    def __contains__(self, key) -> bool:
        with self._lock:
            return key in self._templates or key in self._options_templates
