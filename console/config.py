import os
from typing import Optional


def _int_env(name: str, default: int) -> int:
    raw = str(os.getenv(name, str(default))).strip()
    try:
        return int(raw)
    except Exception:
        return default


def _float_env(name: str, default: Optional[float]) -> Optional[float]:
    raw = str(os.getenv(name, "")).strip()
    if not raw:
        return default
    if raw.lower() in {"none", "off", "0"}:
        return None
    try:
        value = float(raw)
    except Exception:
        return default
    # requests rejects non-positive timeouts with a plain ValueError
    return value if value > 0 else default


def _bool_env(name: str, default: bool) -> bool:
    raw = str(os.getenv(name, "")).strip().lower()
    if not raw:
        return default
    return raw in {"true", "1", "yes"}


API_BASE_URL = str(os.getenv("MIST_DEBUG_API_URL", "http://localhost:8081")).strip()
CONSOLE_PORT = _int_env("MIST_DEBUG_CONSOLE_PORT", 5000)
CONSOLE_BIND_HOST = str(os.getenv("MIST_DEBUG_CONSOLE_BIND_HOST", "127.0.0.1")).strip()
CONSOLE_DEBUG = _bool_env("MIST_DEBUG_CONSOLE_DEBUG", False)
REQUEST_TIMEOUT = _float_env("MIST_DEBUG_REQUEST_TIMEOUT", 10.0)
NOTIFICATION_TTL_MS = _int_env("MIST_DEBUG_NOTIFICATION_TTL_MS", 3000)
LOG_LEVEL = str(os.getenv("MIST_DEBUG_LOG_LEVEL", "INFO")).strip().upper()
SECRET_KEY = str(os.getenv("MIST_DEBUG_SECRET_KEY", "mist-ed-debug-console-secret"))
