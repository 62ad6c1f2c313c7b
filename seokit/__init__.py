"""seokit: schema.org JSON-LD, robots.txt and sitemap generation."""

__version__ = "0.1.0"
