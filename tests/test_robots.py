"""Tests for robots.txt policy generation."""

import logging

import pytest

from seokit.robots.generator import (
    BASE_DISALLOWS,
    CUSTOM_RULES_IGNORED,
    create_common_robots_rules,
    detect_environment,
    generate_robots,
    generate_robots_for_environment,
    robots_to_text,
    validate_robots_config,
)
from seokit.robots.types import RobotsGeneratorConfig, RobotsPolicy, RobotsRule

BASE = "https://example.com"


def _config(**overrides) -> RobotsGeneratorConfig:
    values = {"environment": "production", "base_url": BASE}
    values.update(overrides)
    return RobotsGeneratorConfig(**values)


class TestGenerateRobotsProduction:
    def test_baseline_rule(self):
        policy = generate_robots(_config())
        assert len(policy.rules) == 1
        rule = policy.rules[0]
        assert rule.user_agent == "*"
        assert rule.allow == "/"
        assert rule.disallow == list(BASE_DISALLOWS)
        assert rule.crawl_delay is None
        assert policy.sitemap == "https://example.com/sitemap.xml"
        assert policy.host == BASE

    def test_additional_disallows_appended(self):
        policy = generate_robots(_config(additional_disallows=["/tmp/*"]))
        assert policy.rules[0].disallow[-1] == "/tmp/*"

    def test_custom_rules_inherit_baseline(self):
        policy = generate_robots(
            _config(
                crawl_delay=3,
                custom_rules=[
                    RobotsRule(user_agent="Googlebot", allow=["/"], disallow=["/search"], crawl_delay=1),
                    RobotsRule(user_agent="Bingbot", disallow=["/admin"]),
                ],
            )
        )
        google, bing = policy.rules[1], policy.rules[2]
        assert google.disallow == ["/search", *BASE_DISALLOWS]
        assert google.crawl_delay == 1
        assert bing.allow is None
        assert bing.crawl_delay == 3

    def test_custom_rule_zero_delay_kept(self):
        policy = generate_robots(_config(crawl_delay=3, custom_rules=[RobotsRule(user_agent="Slowbot", crawl_delay=0)]))
        assert policy.rules[1].crawl_delay == 0

    @pytest.mark.parametrize(
        "sitemap_url,expected",
        [
            ("/sitemaps/main.xml", "https://example.com/sitemaps/main.xml"),
            ("sitemap-index.xml", "https://example.com/sitemap-index.xml"),
            ("https://cdn.example.com/sitemap.xml", "https://cdn.example.com/sitemap.xml"),
        ],
    )
    def test_sitemap_url(self, sitemap_url, expected):
        assert generate_robots(_config(base_url="https://example.com/", sitemap_url=sitemap_url)).sitemap == expected


class TestGenerateRobotsLockdown:
    @pytest.mark.parametrize("environment", ["staging", "development", "preview"])
    def test_blocks_everything(self, environment):
        policy = generate_robots(_config(environment=environment, crawl_delay=5, additional_disallows=["/x"]))
        assert policy.rules == [RobotsRule(user_agent="*", disallow="/")]
        assert policy.sitemap is None
        assert policy.host is None

    def test_custom_rules_ignored_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="seokit.robots.generator"):
            policy = generate_robots(_config(environment="staging", custom_rules=create_common_robots_rules()))
        assert policy.rules == [RobotsRule(user_agent="*", disallow="/")]
        assert policy.sitemap is None
        assert policy.host is None
        assert "ignored" in caplog.text

    def test_staging_text(self):
        text = robots_to_text(generate_robots(_config(environment="staging")))
        assert text == "User-agent: *\nDisallow: /\n"


class TestForEnvironment:
    def test_production_crawl_delay(self):
        assert generate_robots_for_environment("production", BASE).rules[0].crawl_delay == 1

    def test_development_lockdown(self):
        policy = generate_robots_for_environment("development", "http://localhost:3000")
        assert policy.to_dict() == {"rules": [{"userAgent": "*", "disallow": "/"}]}


class TestCommonRules:
    def test_presets(self):
        rules = {r.user_agent: r for r in create_common_robots_rules()}
        assert list(rules) == ["Googlebot", "Bingbot", "AhrefsBot", "MJ12bot", "facebookexternalhit", "Twitterbot"]
        assert rules["Bingbot"].crawl_delay == 2
        assert rules["AhrefsBot"].disallow == ["/"]


class TestValidateRobotsConfig:
    def test_valid(self):
        assert validate_robots_config(_config(sitemap_url="/sitemap.xml", crawl_delay=1)) == []

    def test_invalid_base_url(self):
        assert validate_robots_config(_config(base_url="example.com")) == ["Invalid baseUrl format: example.com"]

    def test_invalid_sitemap_url(self):
        assert validate_robots_config(_config(sitemap_url="not a url")) == ["Invalid sitemapUrl format: not a url"]

    def test_negative_delays(self):
        issues = validate_robots_config(
            _config(crawl_delay=-1, custom_rules=[RobotsRule(user_agent="Bot", crawl_delay=-2)])
        )
        assert issues == ["Crawl delay must be non-negative, got: -1", "Custom rule 0: crawlDelay must be non-negative"]

    def test_blank_user_agent(self):
        issues = validate_robots_config(_config(custom_rules=[RobotsRule(user_agent="  ")]))
        assert issues == ["Custom rule 0: userAgent is required"]

    def test_custom_rules_outside_production(self):
        issues = validate_robots_config(_config(environment="preview", custom_rules=[RobotsRule(user_agent="Bot")]))
        assert issues == [CUSTOM_RULES_IGNORED]


class TestRobotsToText:
    def test_production_text(self):
        policy = RobotsPolicy(
            rules=[
                RobotsRule(user_agent="*", allow="/", disallow=["/api/*", "/admin/*"], crawl_delay=1.0),
                RobotsRule(user_agent=["AhrefsBot", "MJ12bot"], disallow=["/"], crawl_delay=0),
            ],
            sitemap="https://example.com/sitemap.xml",
            host="https://example.com",
        )
        assert robots_to_text(policy) == (
            "User-agent: *\n"
            "Allow: /\n"
            "Disallow: /api/*\n"
            "Disallow: /admin/*\n"
            "Crawl-delay: 1\n"
            "\n"
            "User-agent: AhrefsBot\n"
            "User-agent: MJ12bot\n"
            "Disallow: /\n"
            "\n"
            "Sitemap: https://example.com/sitemap.xml\n"
            "Host: https://example.com"
        )

    def test_fractional_delay(self):
        policy = RobotsPolicy(rules=[RobotsRule(user_agent="*", crawl_delay=0.5)])
        assert "Crawl-delay: 0.5" in robots_to_text(policy)


class TestDetectEnvironment:
    def test_deploy_env_wins(self, make_settings):
        assert detect_environment(make_settings(deploy_env="preview", app_env="production")) == "preview"
        assert detect_environment(make_settings(deploy_env="production")) == "production"

    def test_app_env(self, make_settings):
        assert detect_environment(make_settings(app_env="production")) == "production"
        assert detect_environment(make_settings(app_env="development")) == "development"

    def test_url_heuristic(self, make_settings):
        assert detect_environment(make_settings(app_env="test", site_url="https://staging.example.com")) == "staging"
        assert detect_environment(make_settings(app_env="test", site_url="https://example.com")) == "development"
