"""
Base registrar provider interface.

This module defines the abstract base class that all registrar providers must implement.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from ..core.records import DomainRecord


@dataclass(frozen=True)
class Domain:
    """A domain as known to the registrar."""

    id: int
    name: str


class RegistrarProvider(ABC):
    """Abstract base class for registrar providers."""

    @abstractmethod
    def get_domain(self, customer: str, domain: str) -> Domain:
        """Resolve a domain to its registrar identity."""
        pass

    @abstractmethod
    def get_domain_records(self, customer: str, domain: str) -> List[DomainRecord]:
        """Get all DNS records of a domain."""
        pass

    @abstractmethod
    def update_domain_records(
        self, customer: str, domain: str, records: List[DomainRecord]
    ) -> None:
        """Replace all DNS records of a domain."""
        pass
