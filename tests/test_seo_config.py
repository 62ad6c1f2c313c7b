"""Tests for settings-derived SEO configuration and merging."""

import pytest
from pydantic import ValidationError

from seokit.seo.config import (
    RobotsConfig,
    SEOConfig,
    TwitterConfig,
    create_default_seo_config,
    get_default_robots_config,
    get_facebook_app_id,
    get_site_url,
    get_twitter_handle,
    merge_seo_config,
    should_enable_indexing,
)


class TestResolvers:
    def test_site_url_trailing_slash_stripped(self, make_settings):
        assert get_site_url(make_settings(site_url="https://example.com/")) == "https://example.com"

    def test_blank_social_values_are_none(self, settings):
        assert get_twitter_handle(settings) is None
        assert get_facebook_app_id(settings) is None

    def test_twitter_handle(self, make_settings):
        assert get_twitter_handle(make_settings(twitter_handle="@acme")) == "@acme"


class TestShouldEnableIndexing:
    def test_production_indexes(self, production_settings):
        assert should_enable_indexing(production_settings) is True

    def test_development_does_not_index(self, settings):
        assert should_enable_indexing(settings) is False

    @pytest.mark.parametrize("value", ["true", "1"])
    def test_override_enables(self, make_settings, value):
        assert should_enable_indexing(make_settings(enable_indexing=value)) is True

    @pytest.mark.parametrize("value", ["false", "0", "yes"])
    def test_override_disables_in_production(self, make_settings, value):
        assert should_enable_indexing(make_settings(app_env="production", enable_indexing=value)) is False


class TestDefaultRobotsConfig:
    def test_enabled(self, production_settings):
        robots = get_default_robots_config(production_settings)
        assert robots == RobotsConfig(index=True, follow=True, max_image_preview="large", max_snippet=160)

    def test_disabled(self, settings):
        robots = get_default_robots_config(settings)
        assert robots.index is False
        assert robots.follow is False
        assert robots.noarchive is True
        assert robots.max_image_preview == "none"
        assert robots.max_snippet == 0


class TestCreateDefaultSeoConfig:
    def test_fields_follow_settings(self, make_settings):
        config = create_default_seo_config(make_settings(app_env="production", twitter_handle="@acme"))
        assert config.site_name == "Example"
        assert config.site_url == "https://example.com"
        assert config.twitter.card_type == "summary_large_image"
        assert config.twitter.site == "@acme"
        assert config.open_graph.type == "website"
        assert config.environment.enable_indexing is True
        assert config.features.enable_sitemap is True

    def test_sitemap_disabled_without_indexing(self, settings):
        assert create_default_seo_config(settings).features.enable_sitemap is False

    def test_frozen(self, settings):
        config = create_default_seo_config(settings)
        with pytest.raises(ValidationError):
            config.site_name = "Other"


class TestMergeSeoConfig:
    def test_nested_siblings_survive(self, production_settings):
        base = create_default_seo_config(production_settings)
        merged = merge_seo_config(base, {"robots": {"index": False}})
        assert merged.robots.index is False
        assert merged.robots.follow is True
        assert merged.robots.max_snippet == 160

    def test_top_level_override(self, settings):
        base = create_default_seo_config(settings)
        merged = merge_seo_config(base, {"site_name": "Other", "locale": "fr-FR"})
        assert merged.site_name == "Other"
        assert merged.locale == "fr-FR"
        assert merged.default_metadata.model_dump() == base.default_metadata.model_dump()

    def test_model_override_counts_only_set_fields(self, settings):
        base = create_default_seo_config(settings)
        merged = merge_seo_config(base, {"twitter": TwitterConfig(creator="@writer")})
        assert merged.twitter.creator == "@writer"
        assert merged.twitter.card_type == base.twitter.card_type

    def test_base_unchanged(self, settings):
        base = create_default_seo_config(settings)
        merge_seo_config(base, {"default_metadata": {"title": "Page"}})
        assert base.default_metadata.title == "Example"

    def test_section_missing_on_base(self):
        base = SEOConfig(site_name="S", site_url="https://s.test/", default_metadata={"title": "S", "description": "d"})
        assert base.site_url == "https://s.test"
        merged = merge_seo_config(base, {"robots": {"index": True, "follow": False}})
        assert merged.robots == RobotsConfig(index=True, follow=False)

    def test_unknown_field_rejected(self, settings):
        with pytest.raises(ValidationError):
            merge_seo_config(create_default_seo_config(settings), {"not_a_field": 1})
