"""Tests for the robots.txt and sitemap HTTP routes."""

import xml.etree.ElementTree as ET
from unittest.mock import patch

from seokit.sitemap.render import SITEMAP_NS
from seokit.sitemap.types import SitemapEntry, SitemapRoute
from seokit.main import app


def _locs(body: str) -> list[str]:
    root = ET.fromstring(body.split("\n", 1)[1])
    return [el.text for el in root.iter(f"{{{SITEMAP_NS}}}loc")]


class TestHealth:
    async def test_health(self, client):
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestRobotsRoute:
    async def test_development_blocks_all(self, client, use_settings, settings):
        use_settings(settings)
        resp = await client.get("/robots.txt")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/plain")
        assert resp.text == "User-agent: *\nDisallow: /\n"

    async def test_production_rules(self, client, use_settings, production_settings):
        use_settings(production_settings)
        resp = await client.get("/robots.txt")
        text = resp.text
        assert text.startswith("User-agent: *\nAllow: /\n")
        assert "Disallow: /dashboard/*" in text
        assert "User-agent: Googlebot" in text
        assert "Crawl-delay: 2" in text
        assert text.endswith("Sitemap: https://example.com/sitemap.xml\nHost: https://example.com")

    async def test_fallback_on_error(self, client, use_settings, production_settings):
        use_settings(production_settings)
        with patch("seokit.web.router.generate_robots", side_effect=RuntimeError("boom")):
            resp = await client.get("/robots.txt")
        assert resp.status_code == 200
        assert resp.text == (
            "User-agent: *\nDisallow: /api/*\nDisallow: /admin/*\n\nSitemap: https://example.com/sitemap.xml"
        )


class TestSitemapRoutes:
    async def test_default_static_routes(self, client, use_settings, settings):
        use_settings(settings)
        resp = await client.get("/sitemap.xml")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("application/xml")
        assert _locs(resp.text) == ["https://example.com/", "https://example.com/about"]

    async def test_registered_routes_with_index(self, client, use_settings, settings):
        use_settings(settings)
        pages = [SitemapEntry(url=f"/p/{i}") for i in range(50001)]
        app.state.sitemap_routes = [SitemapRoute(path="/p", get_entries=lambda: pages)]

        index = await client.get("/sitemap.xml")
        assert "<sitemapindex" in index.text
        assert _locs(index.text) == ["https://example.com/sitemap-0.xml", "https://example.com/sitemap-1.xml"]

        second = await client.get("/sitemap-1.xml")
        assert second.status_code == 200
        assert _locs(second.text) == ["https://example.com/p/50000"]

    async def test_chunk_out_of_range(self, client, use_settings, settings):
        use_settings(settings)
        resp = await client.get("/sitemap-3.xml")
        assert resp.status_code == 404

    async def test_first_chunk_of_single_sitemap(self, client, use_settings, settings):
        use_settings(settings)
        resp = await client.get("/sitemap-0.xml")
        assert resp.status_code == 200
        assert len(_locs(resp.text)) == 2
