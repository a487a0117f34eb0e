"""Environment-driven transport defaults."""
from __future__ import annotations

import os
from typing import Any, Dict, Optional

DEFAULT_TIMEOUT = 30


def _env_bool(key: str, fallback: bool = False) -> bool:
    value = os.getenv(key)
    if value is None:
        return fallback
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(key: str, fallback: Optional[int] = None) -> Optional[int]:
    value = os.getenv(key)
    if value is None:
        return fallback
    try:
        return int(value)
    except (TypeError, ValueError):
        return fallback


def build_http_options_from_env() -> Dict[str, Any]:
    timeout = _env_int("NHTSA_VIN_TIMEOUT", DEFAULT_TIMEOUT)
    if timeout is None or timeout <= 0:
        timeout = DEFAULT_TIMEOUT
    return {
        "timeout": timeout,
        "verify": _env_bool("NHTSA_VIN_VERIFY_TLS", True),
    }


def merge_http_options(overrides: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Env defaults, replaced key by key with whatever the caller passed."""
    options = build_http_options_from_env()
    if overrides:
        options.update(overrides)
    return options
