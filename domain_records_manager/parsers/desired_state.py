"""
Desired state parser - reads the declarative domains file

The file is a YAML mapping with a ``domains`` list; each entry carries
the fields of one managed domain (domain, customer, record, addresses,
nameservers). Field types are checked later by the record builder.
"""

import logging
from typing import Dict, List

import yaml

from ..errors import ValidationError

logger = logging.getLogger(__name__)


class DesiredStateParser:
    """Parser for desired-state YAML files."""

    def __init__(self, path: str):
        self.path = path

    def parse(self) -> List[Dict]:
        """Parse a desired-state YAML file into per-domain field mappings."""
        try:
            with open(self.path, "r") as f:
                document = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Desired state file not found: {self.path}")
        except yaml.YAMLError as e:
            raise ValidationError(f"Error parsing desired state file: {e}") from e

        if not isinstance(document, dict) or not isinstance(document.get("domains"), list):
            raise ValidationError("Desired state file must contain a 'domains' list")

        domains = []
        for index, entry in enumerate(document["domains"], start=1):
            if not isinstance(entry, dict) or not entry.get("domain"):
                raise ValidationError(f"Entry {index} must be a mapping with a 'domain' field")
            domains.append(entry)

        logger.info(f"Successfully parsed {len(domains)} domains from {self.path}")
        return domains
