"""
Mock registrar provider for testing and demonstration.

This module provides a mock registrar that stores domains and their
records in memory for safe testing and demonstration purposes.
"""

import logging
from typing import Dict, List, Optional

from ..core.records import DomainRecord
from ..errors import RegistrarAPIError
from .base_provider import Domain, RegistrarProvider

logger = logging.getLogger(__name__)


class MockRegistrarProvider(RegistrarProvider):
    """Mock registrar provider for testing and demonstration purposes."""

    def __init__(self, config: Dict = None):
        """Initialize mock provider."""
        config = config or {}
        self.domains: Dict[str, Domain] = {}
        self.records: Dict[str, List[DomainRecord]] = {}
        self.writes: List[List[DomainRecord]] = []
        self._next_write_error: Optional[RegistrarAPIError] = None

        for index, name in enumerate(config.get("domains", []), start=1):
            self.add_domain(name, 1000 + index)

        logger.info("Mock registrar provider initialized")

    def add_domain(self, name: str, domain_id: int, records: List[DomainRecord] = None):
        self.domains[name] = Domain(id=domain_id, name=name)
        self.records[name] = list(records or [])

    def fail_next_write(self, error: RegistrarAPIError):
        """Raise ``error`` from the next update_domain_records call."""
        self._next_write_error = error

    def _lookup(self, domain: str) -> Domain:
        if domain not in self.domains:
            raise RegistrarAPIError(
                f"Domain {domain} not found", status_code=404, code="NOT_FOUND"
            )
        return self.domains[domain]

    def get_domain(self, customer: str, domain: str) -> Domain:
        return self._lookup(domain)

    def get_domain_records(self, customer: str, domain: str) -> List[DomainRecord]:
        self._lookup(domain)
        logger.info(f"Mock: Retrieved {len(self.records[domain])} records for {domain}")
        return list(self.records[domain])

    def update_domain_records(
        self, customer: str, domain: str, records: List[DomainRecord]
    ) -> None:
        self._lookup(domain)
        self.writes.append(list(records))

        if self._next_write_error is not None:
            error, self._next_write_error = self._next_write_error, None
            raise error

        self.records[domain] = list(records)
        logger.info(f"Mock: Replaced {len(records)} records for {domain}")
