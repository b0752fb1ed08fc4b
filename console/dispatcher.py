"""
Resource action dispatcher.

Turns operator actions into debug API calls and applies the results to the
console state. Every action catches API failures at its boundary and returns
a Notification instead of raising; prior state is left untouched on failure.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, List, Mapping, Optional

from pydantic import ValidationError

from console.resources import ResourceType, coerce_form_value, get_spec
from console.state import ConsoleState, Notification
from shared.debug_api_client import ApiError

logger = logging.getLogger(__name__)

ConfirmFn = Callable[[str], bool]

ACTION_ERRORS = (ApiError, ValidationError)


def _error_text(exc: Exception) -> str:
    if isinstance(exc, ApiError):
        return exc.message
    return f"unexpected response ({exc.error_count()} validation errors)"


class ResourceDispatcher:
    def __init__(self, client, state: Optional[ConsoleState] = None, max_workers: int = len(ResourceType)):
        self.client = client
        self.state = state or ConsoleState()
        self.max_workers = max_workers

    def _busy(self, resource: ResourceType) -> Notification:
        name = get_spec(resource).display_name
        logger.info("%s: request ignored, an operation is already in progress", resource.value)
        return Notification(f"{name}: an operation is already in progress", "info")

    def list(self, resource: ResourceType) -> Optional[Notification]:
        resource = ResourceType(resource)
        spec = get_spec(resource)
        if not self.state.try_begin(resource):
            return self._busy(resource)
        try:
            records = spec.parse_records(self.client.list_records(spec.name))
            self.state.replace_records(resource, records)
            logger.info("Loaded %d %s", len(records), spec.name)
            return None
        except ACTION_ERRORS as exc:
            logger.warning("Loading %s failed: %s", spec.name, exc)
            return Notification(f"Failed to load data: {_error_text(exc)}", "error")
        finally:
            self.state.end(resource)

    def create(self, resource: ResourceType, fields: Optional[Mapping[str, Any]] = None) -> Notification:
        """
        Post a draft and append the created record.

        When ``fields`` is given it is used as the draft; otherwise the stored
        draft is submitted. The draft is cleared only on success.
        """
        resource = ResourceType(resource)
        spec = get_spec(resource)
        if not self.state.try_begin(resource):
            return self._busy(resource)
        try:
            draft = dict(fields) if fields is not None else self.state.draft(resource)
            payload = spec.build_payload(draft)
            record = spec.parse_record(self.client.create_record(spec.name, payload))
            self.state.append_record(resource, record)
            self.state.clear_draft(resource)
            logger.info("Created %s record id=%s", spec.name, record.id)
            return Notification(f"{spec.display_name} created", "success")
        except ACTION_ERRORS as exc:
            logger.warning("Creating %s failed: %s", spec.name, exc)
            return Notification(f"Failed to create: {_error_text(exc)}", "error")
        finally:
            self.state.end(resource)

    def delete_all(self, resource: ResourceType, confirm: ConfirmFn) -> Optional[Notification]:
        resource = ResourceType(resource)
        spec = get_spec(resource)
        if not confirm(f"Delete all {spec.display_name.lower()}?"):
            return None
        if not self.state.try_begin(resource):
            return self._busy(resource)
        try:
            self.client.delete_records(spec.name)
            self.state.clear_records(resource)
            logger.info("Deleted all %s", spec.name)
            return Notification(f"{spec.display_name} deleted", "success")
        except ACTION_ERRORS as exc:
            logger.warning("Deleting %s failed: %s", spec.name, exc)
            return Notification(f"Failed to delete: {_error_text(exc)}", "error")
        finally:
            self.state.end(resource)

    # Draft handling

    def update_draft(self, resource: ResourceType, name: str, value: Any):
        resource = ResourceType(resource)
        form_field = get_spec(resource).get_field(name)
        self.state.set_draft_value(resource, name, coerce_form_value(form_field, value))

    def update_draft_from_form(self, resource: ResourceType, form: Mapping[str, Any]):
        resource = ResourceType(resource)
        for form_field in get_spec(resource).fields:
            self.update_draft(resource, form_field.name, form.get(form_field.name))

    def clear_draft(self, resource: ResourceType):
        self.state.clear_draft(ResourceType(resource))

    # Global actions

    def load_all(self) -> List[Notification]:
        """Issue the six list calls concurrently; returns failure notifications."""
        # set first so an overlapping first view does not start a second load
        self.state.loaded_once = True
        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            results = list(pool.map(self.list, list(ResourceType)))
        return [note for note in results if note is not None and note.level == "error"]

    def seed(self, confirm: ConfirmFn) -> List[Notification]:
        return self._global_action(
            confirm,
            prompt="Create seed data?",
            call=self.client.create_seed_data,
            done="Seed data created",
            failed="Failed to create seed data",
        )

    def reset(self, confirm: ConfirmFn) -> List[Notification]:
        return self._global_action(
            confirm,
            prompt="Reset the database? All data will be deleted.",
            call=self.client.reset_database,
            done="Database reset",
            failed="Failed to reset the database",
        )

    def _global_action(self, confirm: ConfirmFn, prompt: str, call, done: str, failed: str) -> List[Notification]:
        if not confirm(prompt):
            return []
        try:
            call()
        except ApiError as exc:
            logger.warning("%s: %s", failed, exc)
            return [Notification(f"{failed}: {exc.message}", "error")]
        logger.info(done)
        return [Notification(done, "success")] + self.load_all()
