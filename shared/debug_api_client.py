"""
Debug API Client

HTTP client for the Mist ED backend's debug REST API. Every resource type
exposes the same three operations under /debug/<resource>:

    GET    -> list of records
    POST   -> create one record, returns the created record
    DELETE -> delete all records, returns {"message": ...}

plus two global operations, POST /debug/seed and DELETE /debug/reset.

Usage:
    client = DebugApiClient("http://localhost:8081")
    orgs = client.list_records("organizations")
    org = client.create_record("organizations", {"name": "Demo", "mail": "a@b.c"})
    client.delete_records("organizations")

Any failure (transport error, non-2xx status, body that is not JSON or not the
expected shape) is raised as ApiError. There is no retry and no caching.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests

logger = logging.getLogger(__name__)

DEBUG_PREFIX = "/debug"
DEBUG_RESOURCES = ("organizations", "users", "rooms", "devices", "subjects", "lessons")


class ApiError(Exception):
    """A debug API call that did not succeed."""

    def __init__(self, message: str, status_code: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload


MAX_ERROR_LENGTH = 300


def _shorten(text: str, limit: int = MAX_ERROR_LENGTH) -> str:
    text = " ".join(text.split())
    if len(text) <= limit:
        return text
    return text[:limit] + "…"


def extract_error_message(status_code: int, payload: Any) -> str:
    """
    Pick the backend's own error text, falling back to the HTTP status.

    The text ends up in a flashed (cookie) message, so it is capped at
    MAX_ERROR_LENGTH and markup bodies from proxies collapse to the status.
    """
    if isinstance(payload, dict):
        raw = payload.get("raw")
        if raw and str(raw).lstrip().startswith("<"):
            return f"HTTP {status_code}"
        for key in ("error", "detail", "message", "raw"):
            value = payload.get(key)
            if value:
                return _shorten(str(value))
    elif payload:
        return _shorten(str(payload))
    return f"HTTP {status_code}"


class DebugApiClient:
    def __init__(
        self,
        base_url: str = "http://localhost:8081",
        timeout: Optional[float] = 10,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"Content-Type": "application/json"})

    def _send(self, method: str, path: str, **kwargs) -> Tuple[int, Any, bool]:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s", method, url)
        resp = self._session.request(method, url, timeout=self.timeout, **kwargs)
        if not resp.content:
            return resp.status_code, None, True
        try:
            return resp.status_code, resp.json(), True
        except ValueError:
            return resp.status_code, {"raw": resp.text}, False

    def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            status_code, payload, decoded = self._send(method, path, **kwargs)
        except requests.RequestException as exc:
            raise ApiError(_shorten(str(exc)) or exc.__class__.__name__) from exc

        if not 200 <= status_code < 300:
            raise ApiError(
                extract_error_message(status_code, payload),
                status_code=status_code,
                payload=payload,
            )
        if not decoded:
            raise ApiError(
                f"Unexpected non-JSON response from {path}",
                status_code=status_code,
                payload=payload,
            )
        return payload

    @staticmethod
    def _resource_path(resource: str) -> str:
        if resource not in DEBUG_RESOURCES:
            raise ValueError(f"Unknown debug resource: {resource!r}")
        return f"{DEBUG_PREFIX}/{resource}"

    # Per-resource operations

    def list_records(self, resource: str) -> List[Dict[str, Any]]:
        path = self._resource_path(resource)
        payload = self._request("GET", path)
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise ApiError(f"Expected a list from {path}, got {type(payload).__name__}", payload=payload)
        return payload

    def create_record(self, resource: str, data: Dict[str, Any]) -> Dict[str, Any]:
        path = self._resource_path(resource)
        payload = self._request("POST", path, json=data)
        if not isinstance(payload, dict):
            raise ApiError(f"Expected an object from {path}, got {type(payload).__name__}", payload=payload)
        return payload

    def delete_records(self, resource: str) -> Dict[str, Any]:
        return self._message(self._request("DELETE", self._resource_path(resource)))

    # Global operations

    def create_seed_data(self) -> Dict[str, Any]:
        return self._message(self._request("POST", f"{DEBUG_PREFIX}/seed"))

    def reset_database(self) -> Dict[str, Any]:
        return self._message(self._request("DELETE", f"{DEBUG_PREFIX}/reset"))

    @staticmethod
    def _message(payload: Any) -> Dict[str, Any]:
        if isinstance(payload, dict):
            return payload
        return {"message": "" if payload is None else str(payload)}
