"""Pytest fixtures for the debug console.

This module provides:
- FakeDebugClient: in-memory stand-in for the backend's /debug API
- FakeSession: requests.Session replacement returning prepared responses
- Flask app and test client wired to the fake backend
"""

import itertools
import json
import threading
from typing import Any, Dict, List, Optional

import pytest
import requests

from console import service
from console.dispatcher import ResourceDispatcher
from shared.debug_api_client import DEBUG_RESOURCES, ApiError

TIMESTAMP = "2024-04-01T09:00:00Z"


class FakeDebugClient:
    """Mimics the backend: assigns ids and timestamps, keeps records per resource."""

    __test__ = False

    base_url = "http://backend.test"

    def __init__(self):
        self.records: Dict[str, List[Dict[str, Any]]] = {name: [] for name in DEBUG_RESOURCES}
        self.failures: Dict[str, ApiError] = {}
        self.calls: List[tuple] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def fail(self, operation: str, message: str = "boom", status_code: Optional[int] = 500):
        self.failures[operation] = ApiError(message, status_code=status_code)

    def _check(self, operation: str, *args):
        with self._lock:
            self.calls.append((operation,) + args)
        if operation in self.failures:
            raise self.failures[operation]

    def list_records(self, resource: str):
        self._check("list", resource)
        return [dict(r) for r in self.records[resource]]

    def create_record(self, resource: str, data: Dict[str, Any]):
        self._check("create", resource, dict(data))
        record = {"id": f"{resource[:3]}-{next(self._ids)}"}
        record.update(data)
        record.update({"created_at": TIMESTAMP, "updated_at": TIMESTAMP})
        self.records[resource].append(record)
        return dict(record)

    def delete_records(self, resource: str):
        self._check("delete", resource)
        self.records[resource] = []
        return {"message": f"deleted all {resource}"}

    def create_seed_data(self):
        self._check("seed")
        org = self.create_record("organizations", {"name": "Seed Org", "mail": "seed@example.com"})
        self.create_record("subjects", {"name": "Math", "year": 2024, "org_id": org["id"]})
        return {"message": "seeded"}

    def reset_database(self):
        self._check("reset")
        for name in DEBUG_RESOURCES:
            self.records[name] = []
        return {"message": "reset"}

    def count(self, operation: str) -> int:
        return sum(1 for call in self.calls if call[0] == operation)


def make_response(status_code: int = 200, body: Any = None, text: Optional[str] = None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    if text is not None:
        resp._content = text.encode("utf-8")
    elif body is not None:
        resp._content = json.dumps(body).encode("utf-8")
    else:
        resp._content = b""
    resp.headers["Content-Type"] = "application/json"
    return resp


class FakeSession(requests.Session):
    """Session that records requests and replays queued responses or errors."""

    __test__ = False

    def __init__(self):
        super().__init__()
        self.queue: List[Any] = []
        self.sent: List[Dict[str, Any]] = []

    def respond(self, status_code: int = 200, body: Any = None, text: Optional[str] = None):
        self.queue.append(make_response(status_code, body, text))

    def raise_error(self, exc: Exception):
        self.queue.append(exc)

    def request(self, method, url, **kwargs):
        self.sent.append({"method": method, "url": url, **kwargs})
        item = self.queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


@pytest.fixture
def fake_client():
    return FakeDebugClient()


@pytest.fixture
def dispatcher(fake_client):
    return ResourceDispatcher(fake_client)


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def app(dispatcher, monkeypatch):
    monkeypatch.setattr(service, "dispatcher", dispatcher)
    monkeypatch.setitem(service.app.config, "TESTING", True)
    return service.app


@pytest.fixture
def client(app):
    return app.test_client()
