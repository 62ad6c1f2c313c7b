"""sitemaps.org XML serialization (urlset and sitemapindex)."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import datetime

from seokit.sitemap.types import ChangeFrequency, SitemapEntry, SitemapIndexEntry

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
XHTML_NS = "http://www.w3.org/1999/xhtml"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


def _text(value: str | datetime | ChangeFrequency | float) -> str:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, ChangeFrequency):
        return value.value
    return str(value)


def _serialize(root: ET.Element) -> str:
    return XML_DECLARATION + ET.tostring(root, encoding="unicode")


def render_sitemap_xml(entries: list[SitemapEntry]) -> str:
    """Render a <urlset>; alternates become xhtml:link rel="alternate" elements."""
    # Namespaces are declared as plain attributes; tag names are written verbatim
    urlset = ET.Element("urlset", {"xmlns": SITEMAP_NS, "xmlns:xhtml": XHTML_NS})
    for entry in entries:
        url = ET.SubElement(urlset, "url")
        ET.SubElement(url, "loc").text = entry.url
        if entry.last_modified:
            ET.SubElement(url, "lastmod").text = _text(entry.last_modified)
        if entry.change_frequency:
            ET.SubElement(url, "changefreq").text = _text(entry.change_frequency)
        if entry.priority is not None:
            ET.SubElement(url, "priority").text = _text(float(entry.priority))
        for alt in entry.alternates:
            ET.SubElement(url, "xhtml:link", {"rel": "alternate", "hreflang": alt.hreflang, "href": alt.href})
    return _serialize(urlset)


def render_sitemap_index_xml(index: list[SitemapIndexEntry]) -> str:
    root = ET.Element("sitemapindex", {"xmlns": SITEMAP_NS})
    for item in index:
        sitemap = ET.SubElement(root, "sitemap")
        ET.SubElement(sitemap, "loc").text = item.url
        ET.SubElement(sitemap, "lastmod").text = item.last_modified
    return _serialize(root)
