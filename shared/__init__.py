"""
Shared utilities for the Mist ED debug console.

This package contains functionality that does not depend on Flask:
- debug_api_client: HTTP client for the backend's /debug REST API
- logging_config: logging setup used by the launcher
"""
