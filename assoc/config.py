"""
Runtime settings for the association-list engine.

Values are read once from the environment at import time:
- ``ASSOC_CHECK_UNIQUE``: run the duplicate-key check on merge inputs.
- ``ASSOC_LOG_LEVEL``: default log level used by the CLI.
- ``ASSOC_CSV_DELIMITER``: delimiter for pair files.
"""

import os

_TRUE_WORDS = {"1", "true", "yes", "on"}


def env_flag(name: str, default: bool = False) -> bool:
    """Interpret environment variable `name` as a boolean flag."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_WORDS


# Debug-only misuse detection; off by default (first match wins otherwise).
CHECK_UNIQUE = env_flag("ASSOC_CHECK_UNIQUE")

LOG_LEVEL = os.environ.get("ASSOC_LOG_LEVEL", "WARNING").upper()

CSV_DELIMITER = os.environ.get("ASSOC_CSV_DELIMITER", ",")
