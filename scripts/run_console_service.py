"""
Debug Console Launcher

Starts the Mist ED Backend debug console.

This service provides:
- Web page listing organizations, users, rooms, devices, subjects and lessons
- Per-resource create and delete-all actions
- Seed data and database reset actions

Architecture:
-------------
- Flask web server (port 5000)
- In-memory console state, reloaded from the backend on first page view
- No database of its own; every change goes through the backend's /debug API

Usage:
------
python scripts/run_console_service.py

Environment Variables:
----------------------
MIST_DEBUG_API_URL: backend debug API base URL (default: http://localhost:8081)
MIST_DEBUG_CONSOLE_PORT: Flask server port (default: 5000)
MIST_DEBUG_CONSOLE_BIND_HOST: Flask bind address (default: 127.0.0.1)
MIST_DEBUG_CONSOLE_DEBUG: Enable Flask debug mode (default: false)
MIST_DEBUG_REQUEST_TIMEOUT: Backend request timeout in seconds (default: 10)
MIST_DEBUG_LOG_LEVEL: Log level (default: INFO)
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from console import config
from shared.logging_config import setup_logging


def main():
    """Main entrypoint for the debug console."""

    print("=" * 60)
    print("Mist ED Backend Debug Console")
    print("=" * 60)

    print(f"Debug API: {config.API_BASE_URL}")
    print(f"Bind Address: {config.CONSOLE_BIND_HOST}:{config.CONSOLE_PORT}")
    print(f"Debug Mode: {config.CONSOLE_DEBUG}")
    print(f"Request Timeout: {config.REQUEST_TIMEOUT}")

    setup_logging("console", level=config.LOG_LEVEL)

    # Imported after logging setup so the app's startup log line is emitted.
    from console.service import app

    print("\n" + "=" * 60)
    print(f"Console available at: http://{config.CONSOLE_BIND_HOST}:{config.CONSOLE_PORT}")
    print("=" * 60)
    print("\nPress Ctrl+C to stop\n")

    try:
        app.run(
            host=config.CONSOLE_BIND_HOST,
            port=config.CONSOLE_PORT,
            debug=config.CONSOLE_DEBUG,
            use_reloader=False
        )
    except KeyboardInterrupt:
        print("\n\nShutting down debug console...")
        return 0
    except Exception as e:
        print(f"\n\nError running debug console: {e}")
        import traceback
        traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
