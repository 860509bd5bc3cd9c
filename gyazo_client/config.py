from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional
from urllib.parse import urlsplit

DEFAULT_BASE_URL = "https://api.gyazo.com"
DEFAULT_UPLOAD_URL = "https://upload.gyazo.com"


@dataclass(frozen=True, slots=True)
class GyazoClientOptions:
    """Client configuration.

    Security notes:
    - access_token is excluded from repr so it never lands in logs or tracebacks.
    - timeout=None leaves the transport default in place.

    """

    access_token: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    upload_url: str = DEFAULT_UPLOAD_URL
    timeout: Optional[float] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "GyazoClientOptions":
        """Load options from the environment.

        Variables:
          GYAZO_ACCESS_TOKEN, GYAZO_BASE_URL, GYAZO_UPLOAD_URL, GYAZO_TIMEOUT

        Blank or unparsable values fall back to the defaults.
        """

        env = os.environ if environ is None else environ
        return cls(
            access_token=env.get("GYAZO_ACCESS_TOKEN", "").strip(),
            base_url=env.get("GYAZO_BASE_URL", "").strip() or DEFAULT_BASE_URL,
            upload_url=env.get("GYAZO_UPLOAD_URL", "").strip() or DEFAULT_UPLOAD_URL,
            timeout=_env_timeout(env.get("GYAZO_TIMEOUT", "")),
        )


def _env_timeout(raw: str) -> Optional[float]:
    raw = raw.strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) and value > 0 else None


def validate_base_url(name: str, url: str) -> str:
    """Return `url` with a trailing slash, or raise ValueError if it is not http(s)."""

    parts = urlsplit(url)
    if parts.scheme not in {"http", "https"} or not parts.netloc:
        raise ValueError(f"{name} must be a valid http(s) URL: {url!r}")
    return url.rstrip("/") + "/"
