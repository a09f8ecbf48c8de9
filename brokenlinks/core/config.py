import os
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from dotenv import dotenv_values

ROOT = Path(__file__).resolve().parents[2]
ENV = dotenv_values(ROOT / ".env") if (ROOT / ".env").exists() else {}

try:
    VERSION = version("brokenlinks")
except PackageNotFoundError:
    VERSION = "0.0.0"

DEFAULTS = {
    "BROKENLINKS_TIMEOUT": "10",
    "BROKENLINKS_WORKERS": "4",
    "BROKENLINKS_REQUEST_TIMEOUT": "30",
    "BROKENLINKS_USER_AGENT": f"brokenlinks/{VERSION}",
}

def get(key: str, default=None):
    """Process environment first, then the project ``.env``, then built-ins."""
    if key in os.environ:
        return os.environ[key]
    value = ENV.get(key)
    if value is not None:
        return value
    return DEFAULTS.get(key, default)

def get_int(key: str, default: int = 0) -> int:
    try:
        return int(get(key, default))
    except (TypeError, ValueError):
        return default

def get_float(key: str, default: float = 0.0) -> float:
    try:
        return float(get(key, default))
    except (TypeError, ValueError):
        return default
