import os
from pathlib import Path
from dotenv import dotenv_values

ROOT = Path(__file__).resolve().parents[2]
ENV = dotenv_values(ROOT / ".env") if (ROOT / ".env").exists() else {}

def get(key: str, default=None):
    """Process environment first, then the project's .env file."""
    value = os.environ.get(key)
    if value is None:
        value = ENV.get(key)
    return default if value in (None, "") else value

def get_float(key: str, default: float) -> float:
    value = get(key)
    return float(value) if value is not None else default

def get_int(key: str, default=None):
    value = get(key)
    return int(value) if value is not None else default
