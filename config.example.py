# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    # Storage
    "TASKLIST_DATA_DIR": "Local data directory for the store and logs (default: .local/tasklist).",
    "TASKLIST_BACKEND": "Persistence backend: json | sqlite | memory (default: json).",
    "TASKLIST_STORE_PATH": (
        "Store file (default: <data_dir>/tasks.json, or <data_dir>/tasks.sqlite3 for sqlite)."
    ),
    # Behaviour
    "TASKLIST_CONFIRM_CLEAR": "Ask before /clear removes completed tasks (default: true).",
}
