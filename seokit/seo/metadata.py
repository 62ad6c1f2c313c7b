"""Page-level metadata records derived from the site SEO configuration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from seokit.seo.config import ImageMetadata, RobotsConfig, SEOConfig
from seokit.seo.images import generate_image_metadata
from seokit.seo.urls import get_canonical_url


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


def robots_meta_content(robots: RobotsConfig) -> str:
    """Content of a ``<meta name="robots">`` tag, e.g. ``index, follow, max-snippet:160``."""
    tokens = [
        "index" if robots.index else "noindex",
        "follow" if robots.follow else "nofollow",
    ]
    for flag in ("noarchive", "nosnippet", "noimageindex", "notranslate"):
        if getattr(robots, flag):
            tokens.append(flag)
    if robots.max_image_preview is not None:
        tokens.append(f"max-image-preview:{robots.max_image_preview}")
    if robots.max_snippet is not None:
        tokens.append(f"max-snippet:{robots.max_snippet}")
    if robots.max_video_preview is not None:
        tokens.append(f"max-video-preview:{robots.max_video_preview}")
    return ", ".join(tokens)


def _robots_record(robots: RobotsConfig | None) -> dict[str, Any] | None:
    if robots is None:
        return None
    directives = _compact(
        {
            "index": robots.index,
            "follow": robots.follow,
            "noarchive": robots.noarchive,
            "nosnippet": robots.nosnippet,
            "noimageindex": robots.noimageindex,
            "notranslate": robots.notranslate,
        }
    )
    google_bot = {k: v for k, v in directives.items() if k != "notranslate"}
    return {**directives, "googleBot": google_bot}


def _images(images: list[ImageMetadata] | None, base_url: str) -> list[dict[str, Any]] | None:
    if not images:
        return None
    return [generate_image_metadata(img, base_url).model_dump(exclude_none=True) for img in images]


def _merge_robots(base: Any, override: Any) -> Any:
    if override is None:
        return base
    if isinstance(base, Mapping) and isinstance(override, Mapping):
        return {**base, **override}
    return override


def build_page_metadata(
    config: SEOConfig,
    overrides: Mapping[str, Any] | None = None,
    *,
    canonical: str | None = None,
) -> dict[str, Any]:
    """Build the metadata record a page head is rendered from.

    ``overrides`` replaces top-level keys; ``openGraph`` and ``twitter`` are
    merged shallowly, ``robots`` is merged when both sides are mappings.
    ``canonical`` (path or URL) is resolved and stripped of tracking params.
    """
    site_url = config.environment.site_url if config.environment else config.site_url
    locale = config.locale or config.default_metadata.locale

    open_graph = None
    if config.open_graph:
        open_graph = _compact(
            {
                "type": config.open_graph.type,
                "siteName": config.open_graph.site_name,
                "locale": config.open_graph.locale or locale,
                "images": _images(config.open_graph.images, site_url),
            }
        )

    twitter = None
    if config.twitter:
        twitter = _compact(
            {
                "card": config.twitter.card_type,
                "site": config.twitter.site,
                "creator": config.twitter.creator or config.twitter.handle,
            }
        )

    base = _compact(
        {
            "title": config.default_metadata.title,
            "description": config.default_metadata.description,
            "keywords": config.default_metadata.keywords,
            "alternates": {"canonical": get_canonical_url("/", site_url)},
            "openGraph": open_graph,
            "twitter": twitter,
            "robots": _robots_record(config.robots),
            "metadataBase": site_url,
        }
    )

    overrides = dict(overrides or {})
    merged = {**base, **overrides}
    merged["openGraph"] = {**(base.get("openGraph") or {}), **(overrides.get("openGraph") or {})}
    merged["twitter"] = {**(base.get("twitter") or {}), **(overrides.get("twitter") or {})}
    robots = _merge_robots(base.get("robots"), overrides.get("robots"))
    if robots is None:
        merged.pop("robots", None)
    else:
        merged["robots"] = robots

    if canonical:
        merged["alternates"] = {**merged.get("alternates", {}), "canonical": get_canonical_url(canonical, site_url)}

    return merged
