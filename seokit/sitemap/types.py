"""Sitemap entries, route descriptors and generator configuration."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class ChangeFrequency(str, Enum):
    """sitemaps.org <changefreq> values."""

    ALWAYS = "always"
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    NEVER = "never"


# ---------------------------------------------------------------------------
# Entries
# ---------------------------------------------------------------------------


@dataclass
class SitemapAlternate:
    """Language alternate of a page (hreflang)."""

    hreflang: str
    href: str


@dataclass
class SitemapEntry:
    url: str
    last_modified: str | datetime | None = None
    change_frequency: ChangeFrequency | str | None = None
    priority: float | None = None  # 0.0 - 1.0
    alternates: list[SitemapAlternate] = field(default_factory=list)
    defaults_applied: list[str] = field(default_factory=list)  # Filled in by normalization

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> SitemapEntry:
        """Build an entry from a camelCase record (url, lastModified, changeFrequency, ...)."""
        alternates = [
            a if isinstance(a, SitemapAlternate) else SitemapAlternate(hreflang=a["hreflang"], href=a["href"])
            for a in record.get("alternates") or []
        ]
        return cls(
            url=record["url"],
            last_modified=record.get("lastModified"),
            change_frequency=record.get("changeFrequency"),
            priority=record.get("priority"),
            alternates=alternates,
        )


@dataclass
class SitemapIndexEntry:
    url: str
    last_modified: str


# ---------------------------------------------------------------------------
# Routes / config / result
# ---------------------------------------------------------------------------

EntryRecords = Iterable[SitemapEntry | Mapping[str, Any]]
EntryProducer = Callable[[], EntryRecords | Awaitable[EntryRecords]]


@dataclass
class SitemapRoute:
    """A section of the site and the callable producing its entries.

    ``get_entries`` may be a plain function or a coroutine function.
    """

    path: str
    get_entries: EntryProducer


@dataclass
class SitemapConfig:
    base_url: str
    max_urls_per_sitemap: int = 50000
    default_change_frequency: ChangeFrequency = ChangeFrequency.WEEKLY
    default_priority: float = 0.5


@dataclass
class SitemapBuild:
    """Output of the full collect → normalize → validate → chunk → index run."""

    entries: list[SitemapEntry]
    chunks: list[list[SitemapEntry]]
    index: list[SitemapIndexEntry]  # Empty when everything fits in one sitemap
    issues: list[str]

    @property
    def needs_index(self) -> bool:
        return len(self.chunks) > 1
