"""SEO artifact routes: robots.txt and sitemap XML.

Sitemap descriptors are read from ``app.state.sitemap_routes``; applications
register their own there, otherwise the static home/about routes are served.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse, Response

from seokit.core.config import Settings, get_settings
from seokit.robots.generator import (
    create_common_robots_rules,
    detect_environment,
    generate_robots,
    robots_to_text,
    validate_robots_config,
)
from seokit.robots.types import RobotsGeneratorConfig, RobotsPolicy, RobotsRule
from seokit.sitemap.generator import build_sitemap, create_static_routes
from seokit.sitemap.render import render_sitemap_index_xml, render_sitemap_xml
from seokit.sitemap.types import SitemapBuild, SitemapConfig, SitemapRoute

logger = logging.getLogger(__name__)

seo_router = APIRouter(tags=["seo"])

XML_MEDIA_TYPE = "application/xml"

# Application paths blocked on top of the baseline disallows
APP_DISALLOWS = [
    "/dashboard/*",
    "/user/*",
    "/temp/*",
    "*.pdf",
    "/downloads/*",
    "/uploads/*",
]


# ---------------------------------------------------------------------------
# robots.txt
# ---------------------------------------------------------------------------


def _fallback_robots(production: bool, base_url: str) -> RobotsPolicy:
    return RobotsPolicy(
        rules=[RobotsRule(user_agent="*", disallow=["/api/*", "/admin/*"] if production else ["/"])],
        sitemap=f"{base_url}/sitemap.xml" if production else None,
    )


@seo_router.get("/robots.txt", response_class=PlainTextResponse)
async def robots_txt(settings: Settings = Depends(get_settings)):
    environment = detect_environment(settings)
    production = environment == "production"
    config = RobotsGeneratorConfig(
        environment=environment,
        base_url=settings.site_url,
        sitemap_url="/sitemap.xml",
        crawl_delay=1 if production else None,
        custom_rules=create_common_robots_rules() if production else [],
        additional_disallows=APP_DISALLOWS,
    )

    for issue in validate_robots_config(config):
        logger.warning("robots.txt config: %s", issue)

    try:
        policy = generate_robots(config)
    except Exception as e:
        logger.error("Error generating robots.txt, serving fallback: %s", e, exc_info=True)
        policy = _fallback_robots(production, settings.site_url)

    logger.info("Serving robots.txt (env=%s, rules=%d)", environment, len(policy.rules), extra={"artifact": "robots.txt"})
    return PlainTextResponse(robots_to_text(policy))


# ---------------------------------------------------------------------------
# Sitemaps
# ---------------------------------------------------------------------------


async def _build(request: Request, settings: Settings) -> SitemapBuild:
    config = SitemapConfig(base_url=settings.site_url)
    routes: list[SitemapRoute] | None = getattr(request.app.state, "sitemap_routes", None)
    return await build_sitemap(routes or create_static_routes(config), config)


@seo_router.get("/sitemap.xml")
async def sitemap_xml(request: Request, settings: Settings = Depends(get_settings)):
    """A single <urlset>, or a <sitemapindex> once entries span several files."""
    result = await _build(request, settings)
    if result.needs_index:
        body = render_sitemap_index_xml(result.index)
    else:
        body = render_sitemap_xml(result.chunks[0])
    logger.info("Serving sitemap.xml (%d entries)", len(result.entries), extra={"artifact": "sitemap.xml"})
    return Response(content=body, media_type=XML_MEDIA_TYPE)


@seo_router.get("/sitemap-{index}.xml")
async def sitemap_chunk(index: int, request: Request, settings: Settings = Depends(get_settings)):
    result = await _build(request, settings)
    if index < 0 or index >= len(result.chunks):
        raise HTTPException(status_code=404, detail=f"Sitemap {index} not found")
    return Response(content=render_sitemap_xml(result.chunks[index]), media_type=XML_MEDIA_TYPE)


@seo_router.get("/health")
async def health():
    return {"status": "ok"}
