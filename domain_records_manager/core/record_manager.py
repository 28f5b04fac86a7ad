"""
Record Manager - Lifecycle of a managed domain's record set

This module drives create, read, update and delete of a domain's DNS
records against the registrar. Every call builds a fresh resource from
the declarative data, resolves the domain identity and replaces the
whole record set in a single write.
"""

import logging
from typing import List

from ..errors import DomainRecordsError, NotFoundError, RemoteWriteError, ValidationError
from .classifier import classify_records, extract_nameservers, flatten_records
from .records import DEFAULT_RECORDS, DomainRecord, RecordKind
from .resolver import DomainInfoResolver
from .resource import DomainRecordResource
from .resource_data import ResourceData

logger = logging.getLogger(__name__)


class DomainRecordManager:
    """Manages the record set lifecycle of registrar domains."""

    def __init__(self, client):
        """Initialize record manager with a registrar client."""
        self.client = client
        self.resolver = DomainInfoResolver(client)

    def create(self, data: ResourceData):
        """Create the record set; identical to an update."""
        self.update(data)

    def read(self, data: ResourceData):
        """
        Refresh ``data`` from the registrar's current record set.

        When the ``domain`` field is empty the persisted identifier is used
        as the domain name (import), and the domain is resolved so the
        identifier becomes the registrar's numeric ID.

        Raises:
            NotFoundError: If the domain or its records cannot be found
        """
        customer = data.get("customer") or ""

        if data.get_ok("domain"):
            domain = data.get("domain")
            if not data.id:
                data.set_id(str(self.resolver.resolve(customer, domain).id))
        elif data.id:
            domain = data.id
            resolved = self.resolver.resolve(customer, domain)
            data.set_id(str(resolved.id))
            data.set("domain", resolved.name)
        else:
            raise ValidationError("A domain name or a persisted identifier is required")

        records = self._fetch_records(customer, domain)
        classified = classify_records(records)

        data.set("addresses", classified.addresses)
        data.set("nameservers", classified.nameservers)
        data.set("record", flatten_records(classified.records))

    def update(self, data: ResourceData):
        """
        Push the desired record set of ``data`` to the registrar.

        The input is validated before any registrar call. Nameservers
        missing from ``data`` are then taken from the registrar so that
        the update does not remove them.
        """
        resource = DomainRecordResource.from_fields(data.to_dict())
        self._preserve_nameservers(resource)
        data.set("nameservers", list(resource.nameservers))

        self.resolver.populate(resource, data)

        logger.info(f"Updating {resource.domain} domain records...")
        resource.converge()
        self._push(resource)

    def delete(self, data: ResourceData):
        """
        Restore the domain to the default record set.

        The registrar does not allow a domain without records, so the
        records are replaced by DEFAULT_RECORDS plus the declared
        nameservers instead of being removed.
        """
        resource = DomainRecordResource.from_fields(data.to_dict())
        self.resolver.populate(resource, data)

        resource.records = list(DEFAULT_RECORDS)
        resource.merge_records(resource.nameservers, RecordKind.NAMESERVER)

        logger.info(f"Restoring {resource.domain} domain records...")
        self._push(resource)

    def import_state(self, identifier: str, customer: str = "") -> ResourceData:
        """Reconstruct the state of a domain known only by its identifier."""
        fields = {"customer": customer} if customer else {}
        data = ResourceData(fields, resource_id=identifier)
        self.read(data)
        return data

    def plan(self, data: ResourceData) -> List[DomainRecord]:
        """
        Return the record set an update would push, without writing it.

        The current nameservers are still read from the registrar when
        ``data`` declares none; ``data`` itself is left unchanged.
        """
        resource = DomainRecordResource.from_fields(data.to_dict())
        self._preserve_nameservers(resource)
        resource.converge()
        return resource.records

    def current_nameservers(self, customer: str, domain: str) -> List[str]:
        """Return the apex nameservers the registrar currently holds for ``domain``."""
        return extract_nameservers(self._fetch_records(customer, domain))

    def _preserve_nameservers(self, resource: DomainRecordResource):
        if not resource.nameservers:
            resource.nameservers = self.current_nameservers(resource.customer, resource.domain)

    def _fetch_records(self, customer: str, domain: str) -> List[DomainRecord]:
        logger.info(f"Fetching {domain} records...")
        try:
            return self.client.get_domain_records(customer, domain)
        except DomainRecordsError as e:
            raise NotFoundError(domain, e, subject="domain record") from e

    def _push(self, resource: DomainRecordResource):
        try:
            self.client.update_domain_records(
                resource.customer, resource.domain, resource.records
            )
        except RemoteWriteError as e:
            # Only the nameserver validation rejection is downgraded to a warning.
            if not e.is_nameserver_validation_failure:
                raise
            logger.warning(f"Nameservers were not changed: {e}")
