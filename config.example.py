# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Command-line options (--file) override the environment for a single invocation.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKBOOK_APP_NAME": "App name, also the log file name (default: taskbook).",
    "TASKBOOK_LOG_LEVEL": "Console (stderr) logging level (default: WARNING).",
    "TASKBOOK_LOG_TO_FILE": "Write a DEBUG log to <data_dir>/<app_name>.log (true/false, default: true).",
    # Paths
    "TASKBOOK_DATA_DIR": "Local data directory for logs (default: .local/taskbook).",
    "TASKBOOK_TASKS_PATH": "Task file (default: tasks.json in the working directory).",
}
