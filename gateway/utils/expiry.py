"""Expiry timestamp extraction from signed media URLs."""
import re
from datetime import datetime, timezone
from urllib.parse import urlparse, parse_qs

from gateway.core.exceptions import InvalidURLError, MissingExpiryError, MalformedExpiryError

_UNIX_SECONDS = re.compile(r"[+-]?\d+")

def extract_expiry(url: str) -> str:
    """Read the `expire` query parameter of ``url`` as an RFC3339 UTC timestamp.

    ``https://cdn.example/v?expire=1700000000`` gives ``2023-11-14T22:13:20Z``.
    """
    try:
        parsed = urlparse(url)
    except ValueError as e:
        raise InvalidURLError(url, str(e))

    values = parse_qs(parsed.query, keep_blank_values=True).get("expire")
    raw = values[0] if values else ""
    if not raw:
        raise MissingExpiryError(url)

    if not _UNIX_SECONDS.fullmatch(raw):
        raise MalformedExpiryError(url, raw)

    try:
        expires_at = datetime.fromtimestamp(int(raw), tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        raise MalformedExpiryError(url, raw)

    return expires_at.isoformat().replace("+00:00", "Z")
