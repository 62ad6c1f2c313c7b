"""Sitemap generator.

Pipeline:
  1. Collect    every route descriptor is invoked concurrently; a failing
                descriptor is logged and skipped
  2. Normalize  absolute URLs, default change frequency / priority / lastmod
  3. Validate   URL, priority, date, alternate and frequency checks (report only)
  4. Chunk      at most ``max_urls_per_sitemap`` entries per sitemap file
  5. Index      one sitemap-index entry per chunk
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import re
from collections.abc import Mapping
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any

from seokit.seo.urls import is_absolute_http_url, is_valid_url
from seokit.sitemap.types import (
    ChangeFrequency,
    SitemapBuild,
    SitemapConfig,
    SitemapEntry,
    SitemapIndexEntry,
    SitemapRoute,
)

logger = logging.getLogger(__name__)

MAX_URLS_PER_SITEMAP = 50000

# W3C datetime reduced precision forms: YYYY and YYYY-MM
_W3C_REDUCED_DATE = re.compile(r"^\d{4}(-(0[1-9]|1[0-2]))?$")


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _as_entry(item: SitemapEntry | Mapping[str, Any]) -> SitemapEntry:
    if isinstance(item, SitemapEntry):
        return item
    return SitemapEntry.from_record(item)


# ---------------------------------------------------------------------------
# Collect
# ---------------------------------------------------------------------------


async def _collect_route(route: SitemapRoute) -> list[SitemapEntry]:
    result = route.get_entries()
    if inspect.isawaitable(result):
        result = await result
    return [_as_entry(item) for item in result]


async def generate_sitemap_entries(routes: list[SitemapRoute], config: SitemapConfig) -> list[SitemapEntry]:
    """Collect and normalize entries from every route descriptor.

    Output order follows descriptor order, then the order each producer
    returned. A descriptor that raises an ``Exception`` contributes nothing;
    cancellation is re-raised.
    """
    outcomes = await asyncio.gather(*(_collect_route(r) for r in routes), return_exceptions=True)

    now = _utc_now_iso()
    entries: list[SitemapEntry] = []
    for route, outcome in zip(routes, outcomes):
        # Cancellation and interpreter exits are not producer failures
        if isinstance(outcome, BaseException) and not isinstance(outcome, Exception):
            raise outcome
        if isinstance(outcome, Exception):
            logger.error(
                "Error generating sitemap entries for route %s: %s", route.path, outcome, extra={"route": route.path}
            )
            continue
        entries.extend(normalize_sitemap_entry(e, config, now=now) for e in outcome)

    logger.info("Collected %d sitemap entries from %d routes", len(entries), len(routes))
    return entries


# ---------------------------------------------------------------------------
# Normalize
# ---------------------------------------------------------------------------


def _absolute(url: str, base_url: str) -> str:
    if is_absolute_http_url(url):
        return url
    base = base_url.rstrip("/")
    return f"{base}{url}" if url.startswith("/") else f"{base}/{url}"


def normalize_sitemap_entry(
    entry: SitemapEntry,
    config: SitemapConfig,
    now: str | None = None,
) -> SitemapEntry:
    """Return a copy of ``entry`` with an absolute URL and every default filled in."""
    applied: list[str] = []

    change_frequency = entry.change_frequency
    if not change_frequency:
        change_frequency = config.default_change_frequency or ChangeFrequency.WEEKLY
        applied.append("change_frequency")

    priority = entry.priority
    if priority is None:
        priority = config.default_priority
        applied.append("priority")

    last_modified = entry.last_modified
    if not last_modified:
        last_modified = now or _utc_now_iso()
        applied.append("last_modified")

    url = _absolute(entry.url, config.base_url)
    if applied:
        logger.debug("Sitemap entry %s: defaults applied for %s", url, ", ".join(applied))

    return replace(
        entry,
        url=url,
        change_frequency=change_frequency,
        priority=priority,
        last_modified=last_modified,
        alternates=list(entry.alternates),
        defaults_applied=applied,
    )


# ---------------------------------------------------------------------------
# Validate
# ---------------------------------------------------------------------------


def _is_valid_date(value: str | datetime) -> bool:
    if isinstance(value, datetime):
        return True
    try:
        datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return isinstance(value, str) and _W3C_REDUCED_DATE.fullmatch(value) is not None
    return True


def _is_valid_frequency(value: ChangeFrequency | str) -> bool:
    try:
        ChangeFrequency(value)
    except ValueError:
        return False
    return True


def validate_sitemap_entries(entries: list[SitemapEntry]) -> list[str]:
    """Report problems in normalized entries; never raises."""
    errors: list[str] = []

    for index, entry in enumerate(entries):
        if not is_valid_url(entry.url):
            errors.append(f"Entry {index}: Invalid URL format: {entry.url}")

        if entry.priority is not None and not 0 <= entry.priority <= 1:
            errors.append(f"Entry {index}: Priority must be between 0 and 1, got: {entry.priority}")

        if entry.last_modified and not _is_valid_date(entry.last_modified):
            errors.append(f"Entry {index}: Invalid lastModified date format: {entry.last_modified}")

        for alt in entry.alternates:
            if not is_valid_url(alt.href):
                errors.append(f"Entry {index}: Invalid alternate URL: {alt.href}")

        if entry.change_frequency and not _is_valid_frequency(entry.change_frequency):
            errors.append(f"Entry {index}: Invalid changeFrequency: {entry.change_frequency}")

    return errors


# ---------------------------------------------------------------------------
# Chunk / index
# ---------------------------------------------------------------------------


def split_sitemap_entries(
    entries: list[SitemapEntry],
    max_urls_per_sitemap: int = MAX_URLS_PER_SITEMAP,
) -> list[list[SitemapEntry]]:
    """Split entries into ordered chunks of at most ``max_urls_per_sitemap``.

    An input that fits (the empty list included) comes back as one chunk.
    """
    if max_urls_per_sitemap <= 0:
        raise ValueError(f"max_urls_per_sitemap must be positive, got: {max_urls_per_sitemap}")
    if len(entries) <= max_urls_per_sitemap:
        return [list(entries)]
    return [entries[i : i + max_urls_per_sitemap] for i in range(0, len(entries), max_urls_per_sitemap)]


def generate_sitemap_index(base_url: str, sitemap_count: int, now: str | None = None) -> list[SitemapIndexEntry]:
    """One index entry per chunk, all sharing the same timestamp."""
    stamp = now or _utc_now_iso()
    base = base_url.rstrip("/")
    return [SitemapIndexEntry(url=f"{base}/sitemap-{i}.xml", last_modified=stamp) for i in range(sitemap_count)]


# ---------------------------------------------------------------------------
# Orchestration
# ---------------------------------------------------------------------------


async def build_sitemap(routes: list[SitemapRoute], config: SitemapConfig) -> SitemapBuild:
    entries = await generate_sitemap_entries(routes, config)

    issues = validate_sitemap_entries(entries)
    for issue in issues:
        logger.warning("Sitemap validation: %s", issue)

    chunks = split_sitemap_entries(entries, config.max_urls_per_sitemap)
    index = generate_sitemap_index(config.base_url, len(chunks)) if len(chunks) > 1 else []

    logger.info(
        "Sitemap built: %d entries, %d chunk(s), %d issue(s)",
        len(entries),
        len(chunks),
        len(issues),
    )
    return SitemapBuild(entries=entries, chunks=chunks, index=index, issues=issues)


# ---------------------------------------------------------------------------
# Format conversion / presets
# ---------------------------------------------------------------------------


def _frequency_value(value: ChangeFrequency | str | None) -> str | None:
    return value.value if isinstance(value, ChangeFrequency) else value


def _date_value(value: str | datetime | None) -> str | None:
    return value.isoformat() if isinstance(value, datetime) else value


def to_sitemap_records(entries: list[SitemapEntry]) -> list[dict[str, Any]]:
    """camelCase records in the hosting-framework sitemap shape."""
    records = []
    for entry in entries:
        record: dict[str, Any] = {
            "url": entry.url,
            "lastModified": _date_value(entry.last_modified) or _utc_now_iso(),
            "changeFrequency": _frequency_value(entry.change_frequency),
            "priority": entry.priority,
        }
        if entry.alternates:
            record["alternates"] = {"languages": {a.hreflang: a.href for a in entry.alternates}}
        records.append(record)
    return records


def create_static_routes(config: SitemapConfig) -> list[SitemapRoute]:
    """Home and about pages."""

    def home() -> list[SitemapEntry]:
        return [SitemapEntry(url="/", change_frequency=ChangeFrequency.DAILY, priority=1.0, last_modified=_utc_now_iso())]

    def about() -> list[SitemapEntry]:
        return [
            SitemapEntry(url="/about", change_frequency=ChangeFrequency.MONTHLY, priority=0.8, last_modified=_utc_now_iso())
        ]

    return [SitemapRoute(path="/", get_entries=home), SitemapRoute(path="/about", get_entries=about)]
