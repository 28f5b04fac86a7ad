"""
Response classifier - split a registrar record list back into the
declarative ``addresses``, ``nameservers`` and ``record`` fields.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from .records import DomainRecord, is_default_a_record, is_default_ns_record


@dataclass
class ClassifiedRecords:
    addresses: List[str] = field(default_factory=list)
    nameservers: List[str] = field(default_factory=list)
    records: List[DomainRecord] = field(default_factory=list)


def classify_records(records: List[DomainRecord]) -> ClassifiedRecords:
    """
    Classify remote records into apex addresses, apex nameservers and
    all other records, keeping the input order within each bucket.
    """
    result = ClassifiedRecords()

    for record in records:
        if is_default_ns_record(record):
            result.nameservers.append(record.data)
        elif is_default_a_record(record):
            result.addresses.append(record.data)
        else:
            result.records.append(record)

    return result


def extract_nameservers(records: List[DomainRecord]) -> List[str]:
    """Return the apex nameservers of a remote record list."""
    return [record.data for record in records if is_default_ns_record(record)]


def flatten_records(records: List[DomainRecord]) -> List[Dict]:
    """Render records in the declarative ``record`` field shape."""
    return [
        {
            "name": record.name,
            "type": record.type_name,
            "data": record.data,
            "ttl": record.ttl,
            "priority": record.priority,
        }
        for record in records
    ]
