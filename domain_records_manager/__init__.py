"""
Domain Records Manager - Declarative registrar DNS record management

Keeps the DNS records of registrar-hosted domains in line with a
declarative description of explicit records, apex addresses and
nameservers.
"""

__version__ = "1.0.0"
__author__ = "Domain Records Manager Team"
__description__ = "Declarative DNS record management through the GoDaddy API"

from .core.dns_manager import DNSManager
from .core.record_manager import DomainRecordManager
from .core.resource_data import ResourceData
from .providers.registrar_client import RegistrarClient

__all__ = [
    "DNSManager",
    "DomainRecordManager",
    "ResourceData",
    "RegistrarClient",
]
