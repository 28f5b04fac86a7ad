"""
Declarative resource data: the desired-state fields of one managed
domain together with its persisted identifier.
"""

import copy
from typing import Any, Dict, Optional


class ResourceData:
    """Field values plus the persisted identifier of a managed domain."""

    def __init__(self, fields: Optional[Dict[str, Any]] = None, resource_id: str = ""):
        self._fields = copy.deepcopy(fields) if fields else {}
        self._id = resource_id

    @property
    def id(self) -> str:
        return self._id

    def set_id(self, resource_id: str):
        self._id = resource_id

    def get(self, key: str, default: Any = None) -> Any:
        return self._fields.get(key, default)

    def get_ok(self, key: str) -> bool:
        """True when ``key`` is set to a non-empty value."""
        value = self._fields.get(key)
        return value is not None and value != "" and value != [] and value != {}

    def set(self, key: str, value: Any):
        self._fields[key] = value

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self._fields)

    def __repr__(self) -> str:
        return f"ResourceData(id={self._id!r}, fields={self._fields!r})"
