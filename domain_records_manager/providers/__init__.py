"""
Registrar provider implementations.

This package contains the GoDaddy API provider and an in-memory
mock provider, behind the RegistrarClient facade.
"""

from .base_provider import Domain, RegistrarProvider
from .registrar_client import RegistrarClient
from .godaddy_provider import GoDaddyProvider
from .mock_provider import MockRegistrarProvider

__all__ = [
    "Domain",
    "RegistrarProvider",
    "RegistrarClient",
    "GoDaddyProvider",
    "MockRegistrarProvider",
]
