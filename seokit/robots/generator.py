"""robots.txt generation.

Production sites get a permissive baseline rule plus per-crawler rules; every
other environment is locked down to ``Disallow: /`` with no sitemap or host
so staging and preview deployments never get indexed.
"""

from __future__ import annotations

import logging

from seokit.core.config import Settings, get_settings
from seokit.robots.types import RobotsEnvironment, RobotsGeneratorConfig, RobotsPolicy, RobotsRule
from seokit.seo.urls import is_absolute_http_url, is_valid_url

logger = logging.getLogger(__name__)

PRODUCTION = "production"

BASE_DISALLOWS = (
    "/api/*",
    "/admin/*",
    "/_next/*",
    "/private/*",
    "*.json",
    "*.xml",
    "/search?*",
)

CUSTOM_RULES_IGNORED = "Custom rules will be ignored in non-production environments"


def _sitemap_url(base_url: str, sitemap_url: str | None) -> str:
    base = base_url.rstrip("/")
    if not sitemap_url:
        return f"{base}/sitemap.xml"
    if is_absolute_http_url(sitemap_url):
        return sitemap_url
    return f"{base}{sitemap_url}" if sitemap_url.startswith("/") else f"{base}/{sitemap_url}"


def generate_robots(config: RobotsGeneratorConfig) -> RobotsPolicy:
    """Build the robots policy for ``config.environment``."""
    if config.environment != PRODUCTION:
        if config.custom_rules:
            logger.warning(
                "robots: %d custom rule(s) ignored in %s environment",
                len(config.custom_rules),
                config.environment,
            )
        return RobotsPolicy(rules=[RobotsRule(user_agent="*", disallow="/")])

    base_disallows = [*BASE_DISALLOWS, *config.additional_disallows]

    rules = [
        RobotsRule(
            user_agent="*",
            allow="/",
            disallow=list(base_disallows),
            crawl_delay=config.crawl_delay,
        )
    ]
    for rule in config.custom_rules:
        own = rule.disallow if isinstance(rule.disallow, list) else [rule.disallow] if rule.disallow else []
        rules.append(
            RobotsRule(
                user_agent=rule.user_agent,
                allow=rule.allow,
                disallow=[*own, *base_disallows],
                crawl_delay=rule.crawl_delay if rule.crawl_delay is not None else config.crawl_delay,
            )
        )

    return RobotsPolicy(
        rules=rules,
        sitemap=_sitemap_url(config.base_url, config.sitemap_url),
        host=config.base_url,
    )


def generate_robots_for_environment(environment: RobotsEnvironment, base_url: str) -> RobotsPolicy:
    """Sensible defaults: crawl delay 1 in production, nothing else configured."""
    return generate_robots(
        RobotsGeneratorConfig(
            environment=environment,
            base_url=base_url,
            crawl_delay=1 if environment == PRODUCTION else None,
        )
    )


def create_common_robots_rules() -> list[RobotsRule]:
    return [
        # Search engines
        RobotsRule(user_agent="Googlebot", allow=["/"], disallow=["/search", "/admin"], crawl_delay=1),
        RobotsRule(user_agent="Bingbot", allow=["/"], disallow=["/search", "/admin"], crawl_delay=2),
        # Aggressive SEO crawlers
        RobotsRule(user_agent="AhrefsBot", disallow=["/"]),
        RobotsRule(user_agent="MJ12bot", disallow=["/"]),
        # Social previews
        RobotsRule(user_agent="facebookexternalhit", allow=["/"], disallow=["/admin", "/api"]),
        RobotsRule(user_agent="Twitterbot", allow=["/"], disallow=["/admin", "/api"]),
    ]


def validate_robots_config(config: RobotsGeneratorConfig) -> list[str]:
    """Report configuration problems; never raises."""
    issues: list[str] = []

    if not is_valid_url(config.base_url):
        issues.append(f"Invalid baseUrl format: {config.base_url}")

    if config.sitemap_url:
        candidate = config.sitemap_url
        if candidate.startswith("/"):
            candidate = config.base_url.rstrip("/") + candidate
        if not is_valid_url(candidate):
            issues.append(f"Invalid sitemapUrl format: {config.sitemap_url}")

    if config.crawl_delay is not None and config.crawl_delay < 0:
        issues.append(f"Crawl delay must be non-negative, got: {_number(config.crawl_delay)}")

    for index, rule in enumerate(config.custom_rules):
        agents = rule.user_agent if isinstance(rule.user_agent, list) else [rule.user_agent]
        if not agents or any(not a or not a.strip() for a in agents):
            issues.append(f"Custom rule {index}: userAgent is required")
        if rule.crawl_delay is not None and rule.crawl_delay < 0:
            issues.append(f"Custom rule {index}: crawlDelay must be non-negative")

    if config.environment != PRODUCTION and config.custom_rules:
        issues.append(CUSTOM_RULES_IGNORED)

    return issues


# ---------------------------------------------------------------------------
# Text serialization
# ---------------------------------------------------------------------------


def _number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def _as_list(value: str | list[str] | None) -> list[str]:
    if value is None:
        return []
    return value if isinstance(value, list) else [value]


def robots_to_text(policy: RobotsPolicy) -> str:
    """Serialize a policy to robots.txt text, one blank line after each rule block."""
    lines: list[str] = []

    for rule in policy.rules:
        lines.extend(f"User-agent: {ua}" for ua in _as_list(rule.user_agent) if ua)
        lines.extend(f"Allow: {p}" for p in _as_list(rule.allow) if p)
        lines.extend(f"Disallow: {p}" for p in _as_list(rule.disallow) if p)
        if rule.crawl_delay:
            lines.append(f"Crawl-delay: {_number(rule.crawl_delay)}")
        lines.append("")

    if policy.sitemap:
        lines.append(f"Sitemap: {policy.sitemap}")
    if policy.host:
        lines.append(f"Host: {policy.host}")

    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Environment detection
# ---------------------------------------------------------------------------


def detect_environment(settings: Settings | None = None) -> RobotsEnvironment:
    """Deployment tag first, then the app environment, then URL heuristics."""
    s = settings or get_settings()
    deploy_env = s.deploy_env.strip().lower()
    app_env = s.app_env.strip().lower()

    if deploy_env == PRODUCTION:
        return "production"
    if deploy_env == "preview":
        return "preview"

    if app_env in (PRODUCTION, "development", "staging"):
        return app_env  # type: ignore[return-value]

    if "staging" in s.site_url or "dev" in s.site_url:
        return "staging"
    return "development"
