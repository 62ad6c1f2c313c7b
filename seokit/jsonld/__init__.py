"""Schema.org JSON-LD builders.

Every builder returns a plain dict with ``@context`` set on the root entity
only, ready for ``seokit.seo.sanitize.json_ld_script``.

  - site.py      Organization, WebSite, WebPage, BreadcrumbList
  - content.py   Article / BlogPosting / NewsArticle, FAQPage, Review
  - commerce.py  Product, LocalBusiness
"""
