"""URL utilities.

Helpers to construct absolute, canonical and parameterized URLs. The site
base URL comes from the explicit ``base_url`` argument, falling back to the
process settings.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from urllib.parse import SplitResult, parse_qsl, quote, urlencode, urlsplit, urlunsplit

from seokit.core.config import Settings, get_settings

QueryValue = str | int | float | bool | None

# Stripped from canonical URLs; every utm_* key is removed as well
TRACKING_PARAMS = frozenset({"gclid", "fbclid"})

_ABSOLUTE_HTTP_RE = re.compile(r"^https?://", re.IGNORECASE)
_PATH_SAFE = "/%:@!$&'()*+,;=-._~"


class UrlConstructionError(ValueError):
    """Raised when a base URL and path cannot form a valid absolute URL."""

    def __init__(self, message: str, url: str = ""):
        super().__init__(message)
        self.url = url


def parse_url(value: str) -> SplitResult:
    """Parse an absolute URL, raising ValueError when it is not one."""
    if not isinstance(value, str) or not value or value != value.strip():
        raise ValueError(f"Invalid URL: {value!r}")
    parts = urlsplit(value)
    if not parts.scheme or not parts.netloc or not parts.hostname:
        raise ValueError(f"URL must include a scheme and host: {value!r}")
    _ = parts.port  # raises ValueError for a non-numeric or out-of-range port
    return parts


def is_valid_url(value: str) -> bool:
    try:
        parse_url(value)
    except ValueError:
        return False
    return True


def is_absolute_http_url(value: str) -> bool:
    return bool(_ABSOLUTE_HTTP_RE.match(value))


def join_paths(*segments: str | None) -> str:
    """Join path segments ensuring single slashes between them."""
    parts = [s for s in segments if s]
    joined: list[str] = []
    for i, segment in enumerate(parts):
        if i == 0:
            segment = segment.rstrip("/")
        else:
            segment = segment.strip("/")
        if segment or i == 0:
            joined.append(segment)
    return "/".join(joined)


def _stringify(value: QueryValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _resolve_base(base_url: str | None, settings: Settings | None) -> str:
    if base_url is not None:
        return base_url
    return (settings or get_settings()).site_url


def _unsplit(parts: SplitResult, pairs: list[tuple[str, str]]) -> str:
    return urlunsplit(
        (
            parts.scheme.lower(),
            parts.netloc,
            quote(parts.path, safe=_PATH_SAFE) or "/",
            urlencode(pairs) if pairs else "",
            parts.fragment,
        )
    )


def build_url(
    base_url: str | None = None,
    path: str | None = None,
    locale: str | None = None,
    query: Mapping[str, QueryValue] | None = None,
    *,
    settings: Settings | None = None,
) -> str:
    """Build an absolute URL from a base, an optional locale segment and a path.

    Query values of ``None`` are skipped. A key already present in the path's
    query string is replaced rather than duplicated.

    Raises:
        UrlConstructionError: the parts do not form a valid absolute URL.
    """
    base = _resolve_base(base_url, settings)
    joined = join_paths(base, locale, path)

    try:
        parts = parse_url(joined)
    except ValueError as e:
        raise UrlConstructionError(f"Cannot build URL from base={base!r} path={path!r}: {e}", joined) from e

    pairs = parse_qsl(parts.query, keep_blank_values=True)
    for key, value in (query or {}).items():
        if value is None:
            continue
        pairs = [(k, v) for k, v in pairs if k != key]
        pairs.append((key, _stringify(value)))

    return _unsplit(parts, pairs)


def get_absolute_url(
    path_or_url: str,
    base_url: str | None = None,
    *,
    settings: Settings | None = None,
) -> str:
    """Return ``path_or_url`` as-is when already absolute, else resolve it against the base."""
    if is_absolute_http_url(path_or_url):
        return path_or_url
    return build_url(base_url, path=path_or_url, settings=settings)


def strip_tracking_params(url: str) -> str:
    """Remove utm_*, gclid and fbclid parameters, keeping the rest in order."""
    try:
        parts = parse_url(url)
    except ValueError as e:
        raise UrlConstructionError(str(e), url) from e

    pairs = [
        (k, v)
        for k, v in parse_qsl(parts.query, keep_blank_values=True)
        if not k.startswith("utm_") and k not in TRACKING_PARAMS
    ]
    return _unsplit(parts, pairs)


def get_canonical_url(
    path_or_url: str,
    base_url: str | None = None,
    *,
    settings: Settings | None = None,
) -> str:
    """Build the canonical URL for a path or URL, removing tracking query params."""
    return strip_tracking_params(get_absolute_url(path_or_url, base_url, settings=settings))
