"""Sitemap generation: route descriptors in, validated and chunked entries out.

  - types.py      SitemapEntry, SitemapRoute, SitemapConfig, SitemapBuild
  - generator.py  collect / normalize / validate / chunk / index pipeline
  - render.py     sitemaps.org XML output
"""
