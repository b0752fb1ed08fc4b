"""
Record shapes returned by the backend's /debug endpoints.

The backend owns validation, so every declared field is optional and unknown
fields are kept. Timestamps stay strings and are displayed as received.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class DebugRecord(BaseModel):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def as_row(self) -> dict:
        """Only the fields the server sent, for table rendering."""
        return self.model_dump(exclude_unset=True)


class Organization(DebugRecord):
    mail: Optional[str] = None
    name: Optional[str] = None


class User(DebugRecord):
    org_id: Optional[str] = None
    mail: Optional[str] = None


class Room(DebugRecord):
    org_id: Optional[str] = None
    org_room_id: Optional[str] = None
    name: Optional[str] = None
    caption: Optional[str] = None
    mist_zone_id: Optional[str] = None


class Device(DebugRecord):
    user_id: Optional[str] = None
    device_id: Optional[str] = None
    is_active: Optional[bool] = None
    last_authenticated: Optional[str] = None


class Subject(DebugRecord):
    org_id: Optional[str] = None
    name: Optional[str] = None
    year: Optional[int] = None


class Lesson(DebugRecord):
    subject_id: Optional[str] = None
    room_id: Optional[str] = None
    org_id: Optional[str] = None
    day_of_week: Optional[int] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    period: Optional[int] = None
