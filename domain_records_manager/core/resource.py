"""
Domain record resource - desired record set of one managed domain

This module turns the declarative description of a domain into a
DomainRecordResource and folds the ``addresses`` and ``nameservers``
shorthand lists into the canonical record list.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

from ..errors import ValidationError
from .records import (
    DEFAULT_PRIORITY,
    DEFAULT_TTL,
    DomainRecord,
    RecordKind,
    new_domain_record,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordSpec:
    """An explicit record description from the declarative input."""

    name: str
    type: str
    data: str
    ttl: int = DEFAULT_TTL
    priority: int = DEFAULT_PRIORITY


def _get_str(fields: Mapping[str, Any], key: str) -> str:
    value = fields.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"Field '{key}' must be a string, got {type(value).__name__}")
    return value


def _get_int(fields: Mapping[str, Any], key: str, default: int) -> int:
    value = fields.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"Field '{key}' must be an integer, got {type(value).__name__}")
    return value


def _get_str_list(fields: Mapping[str, Any], key: str) -> List[str]:
    value = fields.get(key)
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise ValidationError(f"Field '{key}' must be a list, got {type(value).__name__}")

    for item in value:
        if not isinstance(item, str):
            raise ValidationError(f"Field '{key}' must only contain strings, got {item!r}")
    return list(value)


def _get_record_list(fields: Mapping[str, Any], key: str) -> List[RecordSpec]:
    value = fields.get(key)
    if value is None:
        return []
    if not isinstance(value, (list, tuple, set, frozenset)):
        raise ValidationError(f"Field '{key}' must be a list, got {type(value).__name__}")

    specs = []
    for item in value:
        if not isinstance(item, Mapping):
            raise ValidationError(f"Each '{key}' entry must be a mapping, got {item!r}")
        specs.append(
            RecordSpec(
                name=_get_str(item, "name"),
                type=_get_str(item, "type"),
                data=_get_str(item, "data"),
                ttl=_get_int(item, "ttl", DEFAULT_TTL),
                priority=_get_int(item, "priority", DEFAULT_PRIORITY),
            )
        )
    return specs


@dataclass(frozen=True)
class DomainRecordConfig:
    """Typed view of the declarative fields of one managed domain."""

    domain: str
    customer: str = ""
    records: List[RecordSpec] = field(default_factory=list)
    addresses: List[str] = field(default_factory=list)
    nameservers: List[str] = field(default_factory=list)

    @classmethod
    def from_mapping(cls, fields: Mapping[str, Any]) -> "DomainRecordConfig":
        """
        Build the configuration from raw declarative fields.

        Raises:
            ValidationError: If a field has the wrong type
        """
        return cls(
            domain=_get_str(fields, "domain"),
            customer=_get_str(fields, "customer"),
            records=_get_record_list(fields, "record"),
            addresses=_get_str_list(fields, "addresses"),
            nameservers=_get_str_list(fields, "nameservers"),
        )


class DomainRecordResource:
    """Desired record set of a domain, built fresh for every lifecycle call."""

    def __init__(
        self,
        domain: str,
        customer: str = "",
        records: Optional[List[DomainRecord]] = None,
        addresses: Optional[List[str]] = None,
        nameservers: Optional[List[str]] = None,
    ):
        self.domain = domain
        self.customer = customer
        self.records = list(records or [])
        self.addresses = list(addresses or [])
        self.nameservers = list(nameservers or [])

    @classmethod
    def build(cls, config: DomainRecordConfig) -> "DomainRecordResource":
        """
        Build a resource from its declarative configuration.

        Explicit records are created through the record factory; the
        shorthand addresses and nameservers are only validated here and
        expanded into records by converge().

        Raises:
            ValidationError: On the first invalid record, address or nameserver
        """
        records = [
            new_domain_record(spec.name, spec.type, spec.data, spec.ttl, spec.priority)
            for spec in config.records
        ]

        for kind, values in (
            (RecordKind.NAMESERVER, config.nameservers),
            (RecordKind.ADDRESS, config.addresses),
        ):
            for value in values:
                kind.validate(value)

        return cls(
            domain=config.domain,
            customer=config.customer,
            records=records,
            addresses=config.addresses,
            nameservers=config.nameservers,
        )

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any]) -> "DomainRecordResource":
        return cls.build(DomainRecordConfig.from_mapping(fields))

    def converge(self):
        """
        Append the shorthand addresses and nameservers to the record list.

        Call once per instance: a second call appends the records again.
        """
        self.merge_records(self.addresses, RecordKind.ADDRESS)
        self.merge_records(self.nameservers, RecordKind.NAMESERVER)
        logger.debug(f"Converged {len(self.records)} records for {self.domain}")

    def merge_records(self, values: List[str], kind: RecordKind):
        for value in values:
            self.records.append(kind.build(value))

    def __repr__(self) -> str:
        return (
            f"DomainRecordResource(domain={self.domain!r}, customer={self.customer!r}, "
            f"records={len(self.records)}, addresses={self.addresses!r}, "
            f"nameservers={self.nameservers!r})"
        )
