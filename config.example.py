# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TERMTODO_APP_NAME": "App display name (default: termtodo).",
    "TERMTODO_LOG_LEVEL": "Logging level for the console handler (default: INFO).",
    "TERMTODO_LOG_TO_CONSOLE": "Also log to stderr (true/false, default: false; it draws over the UI).",
    # Paths
    "TERMTODO_CONFIG_DIR": "Per-user directory (default: $XDG_CONFIG_HOME/termtodo or ~/.config/termtodo).",
    "TERMTODO_TASKS_PATH": "Task file (default: <config_dir>/tasks.json).",
    "TERMTODO_LOG_DIR": "Log directory (default: <config_dir>/logs).",
}
