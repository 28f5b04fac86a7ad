"""
Registrar Client - Unified interface for registrar APIs

This module selects the configured registrar provider, currently
GoDaddy or an in-memory mock, and delegates record operations to it.
"""

import logging
from typing import Dict, List

from ..core.records import DomainRecord
from .base_provider import Domain, RegistrarProvider
from .godaddy_provider import GoDaddyProvider
from .mock_provider import MockRegistrarProvider

logger = logging.getLogger(__name__)


class RegistrarClient:
    """Unified registrar client, constructed once and shared by all lifecycle calls."""

    def __init__(self, config: Dict):
        """Initialize registrar client with configuration."""
        self.config = config
        self.provider = self._get_provider()

    def _get_provider(self) -> RegistrarProvider:
        """Get registrar provider based on configuration."""
        provider_name = self.config.get("default_provider", "godaddy")
        provider_config = self.config.get("providers", {}).get(provider_name) or {}

        if provider_name == "godaddy":
            return GoDaddyProvider(provider_config)
        elif provider_name == "mock":
            return MockRegistrarProvider(provider_config)
        else:
            logger.warning(f"Unknown provider '{provider_name}', using mock provider")
            return MockRegistrarProvider()

    def get_domain(self, customer: str, domain: str) -> Domain:
        """Resolve a domain to its registrar identity."""
        return self.provider.get_domain(customer, domain)

    def get_domain_records(self, customer: str, domain: str) -> List[DomainRecord]:
        """Get all DNS records of a domain."""
        return self.provider.get_domain_records(customer, domain)

    def update_domain_records(
        self, customer: str, domain: str, records: List[DomainRecord]
    ) -> None:
        """Replace all DNS records of a domain."""
        self.provider.update_domain_records(customer, domain, records)
