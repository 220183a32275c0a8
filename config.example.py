# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.

See src/taskpad/config.py for parsing rules: invalid numbers fall back to the defaults,
and the base URL always gets a trailing slash.
"""

ENV_VARS = {
    # App / logging
    "TASKPAD_APP_NAME": "App display name (default: taskpad).",
    "TASKPAD_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Connectors
    "TASKPAD_CONSOLE_ENABLED": (
        "Run the interactive console (default: true). When false, print the task list once and exit."
    ),
    # Task API
    "TASKPAD_API_BASE_URL": "Backend base URL; tasks live at <base>/tasks (default: http://localhost:8080/api/).",
    "TASKPAD_HTTP_CONNECT_TIMEOUT_SECONDS": "HTTP connect timeout in seconds (default: 5).",
    "TASKPAD_HTTP_READ_TIMEOUT_SECONDS": "HTTP read timeout in seconds (default: 15).",
    # Paths (gitignored)
    "TASKPAD_DATA_DIR": "Local data directory holding taskpad.log (default: .local/taskpad).",
}
