"""
Settings — read once from the environment (and `.env` at the project root).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]

# Placeholder until orders carry the signed-in customer's number.
PLACEHOLDER_MOBILE = "9672281491"


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_float(*keys: str, default: float | None = None) -> float | None:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    try:
        return float(v)
    except ValueError:
        raise ValueError(f"{keys[0]} must be a number, got {v!r}") from None


@dataclass(frozen=True, slots=True)
class Settings:
    api_base_url: str
    mobile: str
    timeout: float | None  # seconds; None waits indefinitely
    currency: str
    log_level: str


def load_settings(env_file: Path | None = None) -> Settings:
    load_dotenv(dotenv_path=env_file or ROOT_DIR / ".env")
    return Settings(
        api_base_url=(
            _get_env("STORECART_API_BASE_URL", "API_BASE_URL", default="http://localhost:3000/api")
            or "http://localhost:3000/api"
        ).rstrip("/"),
        mobile=_get_env("STORECART_MOBILE", default=PLACEHOLDER_MOBILE) or PLACEHOLDER_MOBILE,
        timeout=_get_float("STORECART_TIMEOUT", default=None),
        currency=_get_env("STORECART_CURRENCY", default="₹") or "₹",
        log_level=(_get_env("STORECART_LOG_LEVEL", default="INFO") or "INFO").upper(),
    )


__all__ = (
    "ROOT_DIR",
    "PLACEHOLDER_MOBILE",
    "Settings",
    "load_settings",
)
