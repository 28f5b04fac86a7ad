"""
Domain info resolver - maps a domain name to the registrar's numeric
domain identity, which becomes the persisted resource identifier.
"""

import logging

from ..errors import DomainRecordsError, NotFoundError
from ..providers.base_provider import Domain
from .resource import DomainRecordResource
from .resource_data import ResourceData

logger = logging.getLogger(__name__)


class DomainInfoResolver:
    """Resolves domains through the registrar client."""

    def __init__(self, client):
        self.client = client

    def resolve(self, customer: str, domain: str) -> Domain:
        """
        Resolve ``domain`` within the ``customer`` sub-account.

        Raises:
            NotFoundError: If the registrar cannot find the domain
        """
        logger.info(f"Fetching {domain} info...")
        try:
            return self.client.get_domain(customer, domain)
        except DomainRecordsError as e:
            raise NotFoundError(domain, e) from e

    def populate(self, resource: DomainRecordResource, data: ResourceData) -> Domain:
        """Resolve the resource's domain and record its ID on ``data``."""
        domain = self.resolve(resource.customer, resource.domain)
        data.set_id(str(domain.id))
        logger.debug(f"Domain {domain.name} resolved to ID {domain.id}")
        return domain
