"""
Validators - Syntax checks for DNS record data

This module provides validation functions for hostnames, IP addresses
and record names so that bad input is rejected before the registrar
is contacted.
"""

import ipaddress
import logging
import re

import dns.exception
import dns.name

logger = logging.getLogger(__name__)

_LABEL_PATTERN = re.compile(r"^[a-zA-Z0-9]([a-zA-Z0-9-]*[a-zA-Z0-9])?$")


def validate_hostname(hostname: str) -> bool:
    """
    Validate a hostname such as a nameserver or CNAME target.

    A single trailing dot (absolute name) is accepted.

    Args:
        hostname: The hostname to validate

    Returns:
        True if valid, False otherwise
    """
    if not hostname or not isinstance(hostname, str):
        return False

    if hostname.strip() != hostname:
        logger.warning(f"Hostname has surrounding whitespace: {hostname!r}")
        return False

    try:
        dns.name.from_text(hostname)
    except dns.exception.DNSException as e:
        logger.warning(f"Invalid hostname {hostname}: {e}")
        return False

    relative = hostname[:-1] if hostname.endswith(".") else hostname
    if not relative:
        logger.warning(f"Hostname is the root name: {hostname}")
        return False

    for label in relative.split("."):
        if not _validate_label(label):
            logger.warning(f"Invalid label '{label}' in hostname: {hostname}")
            return False

    return True


def _validate_label(label: str) -> bool:
    """
    Validate a single hostname label.

    Labels can contain letters, digits and hyphens, but cannot
    start or end with a hyphen.
    """
    if len(label) == 0 or len(label) > 63:
        return False

    return bool(_LABEL_PATTERN.match(label))


def validate_ip(address: str) -> bool:
    """
    Validate an IPv4 or IPv6 address literal.

    Args:
        address: The address to validate

    Returns:
        True if valid, False otherwise
    """
    if not address or not isinstance(address, str):
        return False

    try:
        ipaddress.ip_address(address)
        return True
    except ValueError:
        logger.warning(f"Invalid IP address: {address}")
        return False


def validate_ipv6(address: str) -> bool:
    """Validate an IPv6 address literal."""
    if not address or not isinstance(address, str):
        return False

    try:
        ipaddress.IPv6Address(address)
        return True
    except ValueError:
        logger.warning(f"Invalid IPv6 address: {address}")
        return False


def validate_record_name(name: str) -> bool:
    """Validate a record name relative to the domain (``@``, ``www``, ``_dmarc``...)."""
    if not name or not isinstance(name, str):
        return False

    return not any(char.isspace() for char in name)
