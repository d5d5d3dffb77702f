"""
slack-api shared configuration and constants.
Standalone module, no imports from other project files.
"""

import os

# ---------------------------------------------------------------------------
# .env path and helpers
# ---------------------------------------------------------------------------

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_PROJECT_ROOT = os.path.dirname(_PACKAGE_DIR)

ENV_PATH = os.path.join(_PROJECT_ROOT, ".env")


def load_env(path=None):
    """Read KEY=VALUE pairs from the .env file.

    SLACK_* keys missing from the file fall back to os.environ.
    """
    env = {}
    path = path or ENV_PATH
    if os.path.exists(path):
        with open(path) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, val = line.split("=", 1)
                    env[key.strip()] = val.strip().strip("'\"")
    for key, val in os.environ.items():
        if key.startswith("SLACK_"):
            env.setdefault(key, val)
    return env


def _env_bool(key, default=False):
    """Parse common boolean env formats."""
    raw = env.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(key, default):
    """Parse integer env values with fallback."""
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(key, default):
    """Parse float env values with fallback."""
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "0.3.0"

DEFAULT_BASE_URL = "https://slack.com/api/"
USER_AGENT = f"slack-api-python/{VERSION}"

# Longest accepted "seconds.fraction" timestamp string.
TIMESTAMP_MAX_LEN = 17
MICROS_MAX = 999_999
MICROS_DIGITS = 6
# Seconds travel as an unsigned 64-bit integer.
SECONDS_MAX = 2**64 - 1

# ---------------------------------------------------------------------------
# Module-level state (loaded from .env / environment)
# ---------------------------------------------------------------------------

env = load_env()

BASE_URL = env.get("SLACK_API_BASE_URL", "") or DEFAULT_BASE_URL
API_TOKEN = env.get("SLACK_API_TOKEN", "")
HTTP_TIMEOUT_SECONDS = _env_int("SLACK_HTTP_TIMEOUT_SECONDS", 30)
HTTP_MAX_RESPONSE_BYTES = _env_int("SLACK_HTTP_MAX_RESPONSE_BYTES", 5_000_000)
HTTP_LOG_ENABLED = _env_bool("SLACK_HTTP_LOG", False)
HTTP_LOG_SAMPLE_RATE = min(1.0, max(0.0, _env_float("SLACK_HTTP_LOG_SAMPLE_RATE", 1.0)))
