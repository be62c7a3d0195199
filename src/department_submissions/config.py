"""Runtime configuration read from the environment."""

import os
from collections.abc import Mapping

DEFAULT_API_BASE = "https://cdn.tcioe.edu.np"
DEFAULT_PORTAL_URL = "http://127.0.0.1:5000"
DEFAULT_TIMEOUT = 30.0
USER_AGENT = "department-submissions/0.1"


def load_config(environ: Mapping[str, str] | None = None) -> dict:
    """Collect settings, falling back to defaults for anything unset.

    Keys:
        api_base: Upstream content API (``API_BASE``)
        portal_url: Where the submission proxy is served (``SUBMISSIONS_PORTAL_URL``)
        timeout: Request timeout in seconds (``SUBMISSIONS_TIMEOUT``)
    """
    environ = os.environ if environ is None else environ
    return {
        "api_base": environ.get("API_BASE") or DEFAULT_API_BASE,
        "portal_url": environ.get("SUBMISSIONS_PORTAL_URL") or DEFAULT_PORTAL_URL,
        "timeout": float(environ.get("SUBMISSIONS_TIMEOUT") or DEFAULT_TIMEOUT),
    }


def client_config(base_url: str, timeout: float = DEFAULT_TIMEOUT, **extra) -> dict:
    """Config dict for one of the network clients."""
    return {
        "base_url": base_url,
        "timeout": timeout,
        "headers": {"User-Agent": USER_AGENT},
        **extra,
    }
