# services/config.py
from __future__ import annotations
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional
import os

from dotenv import load_dotenv

load_dotenv()

_BOOL = {"1", "true", "yes", "on", "y", "t"}


class Environment(str, Enum):
    QAT = "QAT"
    UAT = "UAT"
    PROD = "PROD"


DEFAULT_ENVIRONMENT = Environment.QAT

ENV: Mapping[str, str] = MappingProxyType({
    Environment.QAT.value: "https://portal.qat.anddone.com/#/login",
    Environment.UAT.value: "https://portal.uat.anddone.com/#/login",
    Environment.PROD.value: "https://portal.anddone.com/#/login",
})

API_ENDPOINTS: Mapping[str, str] = MappingProxyType({
    "login": "/api/auth/login",
    "logout": "/api/auth/logout",
    "payments": "/api/payments",
})


def resolve_environment_url(override: Optional[str]) -> str:
    """
    QAT / UAT / PROD (any case) -> mapped login URL.
    Anything starting with http -> used verbatim.
    Otherwise the QAT URL; unknown names (padded ones included) fall back silently.
    """
    raw = override or ""
    key = raw.upper()
    if key in ENV:
        return ENV[key]
    if raw.lower().startswith("http"):
        return raw
    return ENV[DEFAULT_ENVIRONMENT.value]


def _as_bool(v: str, default=False) -> bool:
    if v is None:
        return default
    return v.strip().lower() in _BOOL


def _as_int(v: str, default: int) -> int:
    try:
        return int(v)
    except Exception:
        return default


def config():
    test_env = os.getenv("TEST_ENV", "")
    return {
        # Target portal
        "TEST_ENV": test_env,
        "BASE_URL": resolve_environment_url(test_env),

        # Browser
        "HEADLESS": _as_bool(os.getenv("HEADLESS", "false")),
        "EXPLICIT_WAIT_SECONDS": _as_int(os.getenv("EXPLICIT_WAIT_SECONDS", "30"), 30),
        "PAGELOAD_TIMEOUT_SECONDS": _as_int(os.getenv("PAGELOAD_TIMEOUT_SECONDS", "90"), 90),
        "KEEP_BROWSER": _as_bool(os.getenv("KEEP_BROWSER", "false")),

        # Page-object behaviour
        "HIGHLIGHT": _as_bool(os.getenv("HIGHLIGHT", "true")),
        "SETTLE_MS": _as_int(os.getenv("SETTLE_MS", "2000"), 2000),

        # Artifacts / data
        "SCREENSHOTS_DIR": os.getenv("SCREENSHOTS_DIR", "screenshots"),
        "TEST_DATA_PATH": os.getenv("TEST_DATA_PATH", "testData/LoginTestData.json"),

        "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO"),
    }


# Resolved once per process; hand it to whatever builds the page objects
CURRENT_ENV = config()["BASE_URL"]
