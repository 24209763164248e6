# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Every variable is optional; with none set the app keeps todos.json in the working directory.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name used in logs (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TODO_LOG_DIR": "Directory of the debug log file todo.log (default: .local/todo).",
    "TODO_LOG_TO_FILE": "Write the debug log file (true/false, default: true).",
    # Storage
    "TODO_STORAGE": "Storage strategy: json (durable) or memory (volatile). Default: json.",
    "TODO_FILE": "File name of the JSON store (default: todos.json).",
    "TODO_DATA_DIR": "Directory of the JSON store (default: the working directory).",
}
