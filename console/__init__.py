"""
Mist ED Backend debug console.

Flask web UI over the backend's /debug REST API.
"""
