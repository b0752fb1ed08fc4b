"""
In-memory console state.

One ResourceState per resource type holds the displayed records, the busy
flag and the form draft. The whole console shares one lock; callers never
hold it across a backend call.
"""

import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from console.models import DebugRecord
from console.resources import ResourceType


@dataclass
class Notification:
    message: str
    level: str = "info"  # success | error | info

    @property
    def category(self) -> str:
        """Flash category used by the templates."""
        return "danger" if self.level == "error" else self.level


@dataclass
class ResourceState:
    records: List[DebugRecord] = field(default_factory=list)
    loading: bool = False
    draft: Dict[str, Any] = field(default_factory=dict)


class ConsoleState:
    def __init__(self):
        self._lock = threading.Lock()
        self._resources: Dict[ResourceType, ResourceState] = {
            resource: ResourceState() for resource in ResourceType
        }
        self.loaded_once = False

    # Busy flag

    def try_begin(self, resource: ResourceType) -> bool:
        """Set the busy flag; False if it was already set."""
        with self._lock:
            state = self._resources[resource]
            if state.loading:
                return False
            state.loading = True
            return True

    def end(self, resource: ResourceType):
        with self._lock:
            self._resources[resource].loading = False

    def is_loading(self, resource: ResourceType) -> bool:
        with self._lock:
            return self._resources[resource].loading

    # Records

    def records(self, resource: ResourceType) -> List[DebugRecord]:
        with self._lock:
            return list(self._resources[resource].records)

    def replace_records(self, resource: ResourceType, records: List[DebugRecord]):
        with self._lock:
            self._resources[resource].records = list(records)

    def append_record(self, resource: ResourceType, record: DebugRecord):
        with self._lock:
            self._resources[resource].records.append(record)

    def clear_records(self, resource: ResourceType):
        with self._lock:
            self._resources[resource].records = []

    # Draft

    def draft(self, resource: ResourceType) -> Dict[str, Any]:
        with self._lock:
            return dict(self._resources[resource].draft)

    def set_draft_value(self, resource: ResourceType, name: str, value: Any):
        with self._lock:
            draft = self._resources[resource].draft
            if value is None:
                draft.pop(name, None)
            else:
                draft[name] = value

    def clear_draft(self, resource: ResourceType):
        with self._lock:
            self._resources[resource].draft = {}

    def snapshot(self, resource: Optional[ResourceType] = None) -> Dict[str, Any]:
        """JSON-ready view of one resource, or of all of them."""
        with self._lock:
            targets = [resource] if resource is not None else list(ResourceType)
            return {
                r.value: {
                    "count": len(self._resources[r].records),
                    "loading": self._resources[r].loading,
                    "draft": dict(self._resources[r].draft),
                    "records": [rec.as_row() for rec in self._resources[r].records],
                }
                for r in targets
            }
