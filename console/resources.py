"""
Resource catalog for the debug console.

One ResourceSpec per resource type replaces the six near-identical code paths
of a per-resource switch: display name, form fields, record model and the
payload renaming applied before a create request.
"""

import enum
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Type

from console.models import DebugRecord, Device, Lesson, Organization, Room, Subject, User


class ResourceType(str, enum.Enum):
    ORGANIZATIONS = "organizations"
    USERS = "users"
    ROOMS = "rooms"
    DEVICES = "devices"
    SUBJECTS = "subjects"
    LESSONS = "lessons"


@dataclass(frozen=True)
class FormField:
    name: str
    label: str
    type: str = "text"
    required: bool = False


def _rename(mapping: Mapping[str, str]) -> Callable[[Dict[str, Any]], Dict[str, Any]]:
    def transform(draft: Dict[str, Any]) -> Dict[str, Any]:
        payload = dict(draft)
        for old, new in mapping.items():
            if old in payload:
                payload[new] = payload.pop(old)
        return payload
    return transform


def _passthrough(draft: Dict[str, Any]) -> Dict[str, Any]:
    return dict(draft)


@dataclass(frozen=True)
class ResourceSpec:
    type: ResourceType
    display_name: str
    model: Type[DebugRecord]
    fields: Tuple[FormField, ...]
    to_payload: Callable[[Dict[str, Any]], Dict[str, Any]] = field(default=_passthrough)

    @property
    def name(self) -> str:
        return self.type.value

    def get_field(self, name: str) -> Optional[FormField]:
        for form_field in self.fields:
            if form_field.name == name:
                return form_field
        return None

    def build_payload(self, draft: Mapping[str, Any]) -> Dict[str, Any]:
        return self.to_payload(dict(draft))

    def parse_record(self, data: Mapping[str, Any]) -> DebugRecord:
        return self.model.model_validate(data)

    def parse_records(self, items: List[Mapping[str, Any]]) -> List[DebugRecord]:
        return [self.parse_record(item) for item in items]


RESOURCE_SPECS: Dict[ResourceType, ResourceSpec] = {
    ResourceType.ORGANIZATIONS: ResourceSpec(
        type=ResourceType.ORGANIZATIONS,
        display_name="Organizations",
        model=Organization,
        fields=(
            FormField("name", "Organization name", "text", True),
            FormField("mail", "Email address", "email", True),
        ),
    ),
    ResourceType.USERS: ResourceSpec(
        type=ResourceType.USERS,
        display_name="Users",
        model=User,
        fields=(
            FormField("email", "Email address", "email", True),
            FormField("organization_id", "Organization ID", "text", True),
        ),
    ),
    ResourceType.ROOMS: ResourceSpec(
        type=ResourceType.ROOMS,
        display_name="Rooms",
        model=Room,
        fields=(
            FormField("name", "Room name", "text", True),
            FormField("org_room_id", "Organization room ID", "text", True),
            FormField("caption", "Caption", "textarea", False),
            FormField("mist_zone_id", "Mist zone ID", "text", False),
            FormField("organization_id", "Organization ID", "text", True),
        ),
    ),
    ResourceType.DEVICES: ResourceSpec(
        type=ResourceType.DEVICES,
        display_name="Devices",
        model=Device,
        fields=(
            FormField("user_id", "User ID", "text", True),
            FormField("device_id", "Device ID", "text", True),
        ),
    ),
    ResourceType.SUBJECTS: ResourceSpec(
        type=ResourceType.SUBJECTS,
        display_name="Subjects",
        model=Subject,
        fields=(
            FormField("name", "Subject name", "text", True),
            FormField("year", "Year", "number", True),
            FormField("organization_id", "Organization ID", "text", True),
        ),
    ),
    ResourceType.LESSONS: ResourceSpec(
        type=ResourceType.LESSONS,
        display_name="Lessons",
        model=Lesson,
        fields=(
            FormField("subject_id", "Subject ID", "text", True),
            FormField("room_id", "Room ID", "text", True),
            FormField("organization_id", "Organization ID", "text", True),
            FormField("start_time", "Start time", "datetime-local", True),
            FormField("end_time", "End time", "datetime-local", True),
        ),
        # lessons are keyed by org_id on the backend
        to_payload=_rename({"organization_id": "org_id"}),
    ),
}


def get_spec(resource) -> ResourceSpec:
    """Look up a spec by ResourceType or its string value; ValueError if unknown."""
    return RESOURCE_SPECS[ResourceType(resource)]


def coerce_form_value(form_field: Optional[FormField], raw: Any) -> Any:
    """
    Turn one submitted form value into a draft value.

    Empty input means "not set" and returns None. Number fields become ints
    when they parse; anything else is passed through for the backend to judge.
    """
    if raw is None:
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if raw == "":
            return None
    if form_field is not None and form_field.type == "number" and isinstance(raw, str):
        try:
            return int(raw)
        except ValueError:
            return raw
    return raw
