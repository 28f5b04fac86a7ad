"""
Utility functions and helpers.

This package contains the syntax validators shared by the record
factories and the desired-state builder.
"""

from .validators import (
    validate_hostname,
    validate_ip,
    validate_ipv6,
    validate_record_name,
)

__all__ = [
    "validate_hostname",
    "validate_ip",
    "validate_ipv6",
    "validate_record_name",
]
