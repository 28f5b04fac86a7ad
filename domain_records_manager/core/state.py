"""
State store - persisted identifiers of managed domains.

The registrar owns the records themselves; this file only remembers the
registrar domain ID and customer of every domain the manager has applied.
"""

import logging
from pathlib import Path
from typing import Dict, Optional

import yaml

logger = logging.getLogger(__name__)


class StateStore:
    """YAML file mapping domain names to their persisted identifiers."""

    def __init__(self, path: str):
        self.path = Path(path)
        self.entries: Dict[str, Dict[str, str]] = self._load()

    def _load(self) -> Dict[str, Dict[str, str]]:
        if not self.path.exists():
            logger.debug(f"State file {self.path} not found, starting empty")
            return {}

        with open(self.path, "r") as f:
            entries = yaml.safe_load(f) or {}

        if not isinstance(entries, dict):
            raise ValueError(f"State file {self.path} must contain a mapping")
        return entries

    def get_id(self, domain: str) -> str:
        return self.entries.get(domain, {}).get("id", "")

    def get_customer(self, domain: str) -> str:
        return self.entries.get(domain, {}).get("customer", "")

    def set(self, domain: str, resource_id: str, customer: Optional[str] = None):
        entry = {"id": resource_id}
        if customer:
            entry["customer"] = customer
        self.entries[domain] = entry

    def remove(self, domain: str):
        self.entries.pop(domain, None)

    def save(self):
        with open(self.path, "w") as f:
            yaml.safe_dump(self.entries, f, default_flow_style=False)
        logger.info(f"State saved to {self.path}")
