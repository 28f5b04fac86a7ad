"""
Domain records - typed DNS records and their factories

Every record pushed to the registrar is built through one of the
factory functions below, which apply the registrar defaults and
validate the record data for its type.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Union

from ..errors import ValidationError
from ..utils.validators import (
    validate_hostname,
    validate_ip,
    validate_ipv6,
    validate_record_name,
)

logger = logging.getLogger(__name__)

DEFAULT_TTL = 3600
DEFAULT_PRIORITY = 0
APEX = "@"


class RecordType(str, Enum):
    """Record types accepted by the registrar."""

    A = "A"
    AAAA = "AAAA"
    CAA = "CAA"
    CNAME = "CNAME"
    MX = "MX"
    NS = "NS"
    SOA = "SOA"
    SRV = "SRV"
    TXT = "TXT"

    @classmethod
    def parse(cls, value) -> "RecordType":
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValidationError(f"Record type must be a string, got {value!r}")
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise ValidationError(f"Unknown record type: {value}") from None


@dataclass(frozen=True)
class DomainRecord:
    """A single DNS record as stored by the registrar."""

    name: str
    type: Union[RecordType, str]
    data: str
    ttl: int = DEFAULT_TTL
    priority: int = DEFAULT_PRIORITY

    @property
    def type_name(self) -> str:
        if isinstance(self.type, RecordType):
            return self.type.value
        return self.type

    def to_dict(self) -> Dict:
        return {
            "type": self.type_name,
            "name": self.name,
            "data": self.data,
            "ttl": self.ttl,
            "priority": self.priority,
        }

    @classmethod
    def from_dict(cls, payload: Dict) -> "DomainRecord":
        """
        Build a record from a registrar response entry, without validation.

        Types the registrar supports but RecordType does not list are kept
        as plain strings so the record can still be read back.
        """
        try:
            record_type = RecordType.parse(payload["type"])
        except ValidationError:
            record_type = str(payload["type"])

        return cls(
            name=payload["name"],
            type=record_type,
            data=payload["data"],
            ttl=payload.get("ttl", DEFAULT_TTL),
            priority=payload.get("priority", DEFAULT_PRIORITY),
        )

    def __str__(self) -> str:
        return f"{self.type_name} {self.name} -> {self.data}"


def _require_any_text(data: str) -> bool:
    return bool(data)


def _validate_cname_target(data: str) -> bool:
    return data == APEX or validate_hostname(data)


_DATA_VALIDATORS = {
    RecordType.A: validate_ip,
    RecordType.AAAA: validate_ipv6,
    RecordType.CAA: _require_any_text,
    RecordType.CNAME: _validate_cname_target,
    RecordType.MX: validate_hostname,
    RecordType.NS: validate_hostname,
    RecordType.SOA: _require_any_text,
    RecordType.SRV: _require_any_text,
    RecordType.TXT: _require_any_text,
}


def validate_record_data(record_type, data: str) -> RecordType:
    """
    Check that ``data`` is valid for ``record_type``.

    Returns:
        The parsed record type

    Raises:
        ValidationError: If the type is unknown or the data is malformed
    """
    parsed_type = RecordType.parse(record_type)

    if not isinstance(data, str) or not _DATA_VALIDATORS[parsed_type](data):
        raise ValidationError(f"Invalid data for {parsed_type.value} record: {data!r}")

    return parsed_type


def _validate_number(field: str, value) -> int:
    # bool is an int subclass but never a meaningful TTL or priority
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValidationError(f"Record {field} must be a non-negative integer, got {value!r}")
    return value


def new_domain_record(
    name: str,
    record_type,
    data: str,
    ttl: int = DEFAULT_TTL,
    priority: int = DEFAULT_PRIORITY,
) -> DomainRecord:
    """
    Create a validated domain record.

    Args:
        name: Record name relative to the domain (``@`` for the apex)
        record_type: Record type, as a RecordType or its string form
        data: Record data
        ttl: Time to live in seconds
        priority: Record priority (MX, SRV)

    Returns:
        The new DomainRecord

    Raises:
        ValidationError: If any field is invalid
    """
    if not validate_record_name(name):
        raise ValidationError(f"Invalid record name: {name!r}")

    parsed_type = validate_record_data(record_type, data)

    return DomainRecord(
        name=name,
        type=parsed_type,
        data=data,
        ttl=_validate_number("ttl", ttl),
        priority=_validate_number("priority", priority),
    )


def new_a_record(address: str) -> DomainRecord:
    """Create an apex A record for ``address``."""
    return new_domain_record(APEX, RecordType.A, address)


def new_ns_record(hostname: str) -> DomainRecord:
    """Create an apex NS record for ``hostname``."""
    return new_domain_record(APEX, RecordType.NS, hostname)


def is_default_a_record(record: DomainRecord) -> bool:
    return record.type == RecordType.A and record.name == APEX


def is_default_ns_record(record: DomainRecord) -> bool:
    return record.type == RecordType.NS and record.name == APEX


class RecordKind(Enum):
    """Shorthand list kinds and the factory that expands each of them."""

    ADDRESS = "addresses"
    NAMESERVER = "nameservers"

    @property
    def record_type(self) -> RecordType:
        return RecordType.A if self is RecordKind.ADDRESS else RecordType.NS

    def build(self, value: str) -> DomainRecord:
        if self is RecordKind.ADDRESS:
            return new_a_record(value)
        return new_ns_record(value)

    def validate(self, value: str) -> None:
        validate_record_data(self.record_type, value)


# Never empty: the registrar refuses to store a domain with no records.
DEFAULT_RECORDS: List[DomainRecord] = [
    DomainRecord(
        name=APEX,
        type=RecordType.TXT,
        data="Domain Deleted :)",
        ttl=DEFAULT_TTL,
        priority=0,
    ),
]
