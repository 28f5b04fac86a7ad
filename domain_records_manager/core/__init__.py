"""
Core record management functionality.

This package contains the record model, the desired-state builder,
the response classifier and the record lifecycle.
"""

from .record_manager import DomainRecordManager
from .records import DEFAULT_RECORDS, DomainRecord, RecordType
from .resource import DomainRecordResource

__all__ = [
    "DomainRecordManager",
    "DEFAULT_RECORDS",
    "DomainRecord",
    "RecordType",
    "DomainRecordResource",
]
