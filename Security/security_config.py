"""
SECURITY CONFIG
===============
Centralized server and security settings loaded from environment.
"""

# FLOW:
# - Load the active env file once, then expose SECURITY_SETTINGS.
# WHY:
# - Lets each environment tune port, log location and feature toggles.
# HOW:
# - Reads env vars (optionally from a dotenv file) and stores them in a dict.

from __future__ import annotations

import os
import logging
import dotenv


def get_bool(name: str, default: bool = False) -> bool:
    return os.getenv(name, str(default)).strip().lower() == "true"


def get_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def get_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _root() -> str:
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def _env_name() -> str:
    env = os.getenv("APP_ENV", "").strip().lower()
    if env in {"prod", "production"}:
        return ".env.production"
    if os.path.exists(os.path.join(_root(), ".env.localhost")):
        return ".env.localhost"
    return ".env"


def _env_path() -> str:
    return os.path.join(_root(), _env_name())


dotenv.load_dotenv(_env_path())

if get_bool("APP_ENV_LOG", False):
    logging.getLogger("security.env").info("Active env file: %s", _env_path())


def load_settings() -> dict:
    return {
        "HOST": get_str("HOST", "0.0.0.0"),
        "PORT": get_int("PORT", 3000),
        "LOG_DIR": get_str("LOG_DIR", "logs"),
        "ACTIVITY_LOG_ENABLED": get_bool("ACTIVITY_LOG_ENABLED", True),
        "AUDIT_LOG_ENABLED": get_bool("AUDIT_LOG_ENABLED", True),
        "PROMETHEUS_ENABLED": get_bool("PROMETHEUS_ENABLED", True),
    }


SECURITY_SETTINGS = load_settings()


def feature_enabled(feature: str, default: bool = True) -> bool:
    """Per-feature toggle, e.g. FEATURE_AUDIT_TRAIL=false disables audit()."""
    env_name = "FEATURE_" + feature.upper().replace("-", "_")
    return get_bool(env_name, default)
