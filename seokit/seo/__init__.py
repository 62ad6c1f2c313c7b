"""Site-level SEO primitives.

  - URL utilities (absolute / canonical URL construction)
  - JSON-LD sanitization for HTML embedding
  - SEO configuration resolution and merging
  - Image and page metadata helpers
"""
