"""SEO configuration.

Site-wide SEO defaults derived from process settings, plus a deep merge that
lets page-level overrides win without discarding unspecified nested fields.
Every resolver takes an explicit ``settings`` argument and falls back to the
cached process settings.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from seokit.core.config import Settings, get_settings
from seokit.seo.constants import DEFAULT_LOCALE, OG_TYPE_WEBSITE, TWITTER_CARD_SUMMARY_LARGE_IMAGE

TwitterCardType = Literal["summary", "summary_large_image", "app", "player"]
Environment = Literal["development", "staging", "production"]
ImagePreview = Literal["none", "standard", "large"]

PRODUCTION = "production"


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


# ---------------------------------------------------------------------------
# Sub-configs
# ---------------------------------------------------------------------------


class ImageMetadata(_FrozenModel):
    """Image used for social sharing previews."""

    url: str
    alt: str = ""
    width: int | None = None
    height: int | None = None
    type: str | None = None


class SocialProfile(_FrozenModel):
    platform: str
    url: str


class ContactInfo(_FrozenModel):
    email: str | None = None
    phone: str | None = None
    contact_type: str | None = None
    area_served: str | None = None
    available_language: list[str] | None = None


class OrganizationAddress(_FrozenModel):
    street_address: str | None = None
    address_locality: str | None = None
    address_region: str | None = None
    postal_code: str | None = None
    address_country: str | None = None


class DefaultMetadata(_FrozenModel):
    """Metadata used by pages that do not specify their own."""

    title: str
    description: str
    keywords: list[str] | None = None
    author: str | None = None
    image: ImageMetadata | None = None
    locale: str | None = None
    alternate_locales: list[str] | None = None


class TwitterConfig(_FrozenModel):
    card_type: TwitterCardType = TWITTER_CARD_SUMMARY_LARGE_IMAGE
    site: str | None = None
    creator: str | None = None
    handle: str | None = None


class OpenGraphConfig(_FrozenModel):
    type: str = OG_TYPE_WEBSITE
    site_name: str
    locale: str | None = None
    images: list[ImageMetadata] | None = None


class OrganizationConfig(_FrozenModel):
    """Organization information for structured data."""

    name: str
    url: str
    legal_name: str | None = None
    logo: str | None = None
    founding_date: str | None = None
    founders: list[str] | None = None
    address: OrganizationAddress | None = None
    contact_info: ContactInfo | None = None
    social_profiles: list[SocialProfile] | None = None


class RobotsConfig(_FrozenModel):
    """Robots meta tag directives."""

    index: bool
    follow: bool
    noarchive: bool | None = None
    nosnippet: bool | None = None
    noimageindex: bool | None = None
    notranslate: bool | None = None
    max_snippet: int | None = None
    max_image_preview: ImagePreview | None = None
    max_video_preview: int | None = None


class EnvironmentConfig(_FrozenModel):
    site_url: str
    environment: str
    enable_indexing: bool

    @field_validator("site_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class FeatureFlags(_FrozenModel):
    enable_json_ld: bool | None = None
    enable_open_graph: bool | None = None
    enable_twitter_cards: bool | None = None
    enable_sitemap: bool | None = None
    enable_robots_txt: bool | None = None


class SEOConfig(_FrozenModel):
    """Complete site-wide SEO configuration."""

    site_name: str
    site_url: str = Field(description="Base URL of the site, without trailing slash")
    default_metadata: DefaultMetadata
    twitter: TwitterConfig | None = None
    open_graph: OpenGraphConfig | None = None
    organization: OrganizationConfig | None = None
    robots: RobotsConfig | None = None
    environment: EnvironmentConfig | None = None
    facebook_app_id: str | None = None
    locale: str | None = None
    alternate_locales: list[str] | None = None
    features: FeatureFlags | None = None

    @field_validator("site_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


# Nested sub-configs merged key-by-key by merge_seo_config
MERGEABLE_SECTIONS = (
    "default_metadata",
    "twitter",
    "open_graph",
    "organization",
    "robots",
    "environment",
    "features",
)


# ---------------------------------------------------------------------------
# Resolvers
# ---------------------------------------------------------------------------


def _settings(settings: Settings | None) -> Settings:
    return settings or get_settings()


def get_site_url(settings: Settings | None = None) -> str:
    """Site URL without trailing slash."""
    return _settings(settings).site_url.rstrip("/")


def get_site_name(settings: Settings | None = None) -> str:
    return _settings(settings).site_name


def get_site_description(settings: Settings | None = None) -> str:
    return _settings(settings).site_description


def get_twitter_handle(settings: Settings | None = None) -> str | None:
    return _settings(settings).twitter_handle.strip() or None


def get_facebook_app_id(settings: Settings | None = None) -> str | None:
    return _settings(settings).facebook_app_id.strip() or None


def get_locale(settings: Settings | None = None) -> str:
    return _settings(settings).locale or DEFAULT_LOCALE


def get_environment(settings: Settings | None = None) -> str:
    """Environment tag (development, staging, production); defaults to development."""
    return _settings(settings).app_env.strip() or "development"


def should_enable_indexing(settings: Settings | None = None) -> bool:
    """Whether search engines may index the site.

    An explicit ENABLE_INDEXING value wins ("true" or "1" enable, anything else
    disables). Without it, indexing is on only in production.
    """
    override = _settings(settings).enable_indexing.strip()
    if override:
        return override in ("true", "1")
    return get_environment(settings) == PRODUCTION


def get_default_robots_config(settings: Settings | None = None) -> RobotsConfig:
    if should_enable_indexing(settings):
        return RobotsConfig(index=True, follow=True, max_image_preview="large", max_snippet=160)
    return RobotsConfig(index=False, follow=False, noarchive=True, max_image_preview="none", max_snippet=0)


def create_default_seo_config(settings: Settings | None = None) -> SEOConfig:
    """Build the site-wide SEO configuration from settings.

    The result is a base value; pages derive their own with merge_seo_config.
    """
    site_url = get_site_url(settings)
    site_name = get_site_name(settings)
    twitter_handle = get_twitter_handle(settings)
    locale = get_locale(settings)
    enable_indexing = should_enable_indexing(settings)

    return SEOConfig(
        site_name=site_name,
        site_url=site_url,
        default_metadata=DefaultMetadata(
            title=site_name,
            description=get_site_description(settings),
            locale=locale,
        ),
        twitter=TwitterConfig(
            card_type=TWITTER_CARD_SUMMARY_LARGE_IMAGE,
            site=twitter_handle,
            creator=twitter_handle,
        ),
        open_graph=OpenGraphConfig(type=OG_TYPE_WEBSITE, site_name=site_name, locale=locale),
        robots=get_default_robots_config(settings),
        environment=EnvironmentConfig(
            site_url=site_url,
            environment=get_environment(settings),
            enable_indexing=enable_indexing,
        ),
        facebook_app_id=get_facebook_app_id(settings),
        locale=locale,
        features=FeatureFlags(
            enable_json_ld=True,
            enable_open_graph=True,
            enable_twitter_cards=True,
            enable_sitemap=enable_indexing,
            enable_robots_txt=True,
        ),
    )


def _explicit_fields(value: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    """Fields the caller actually supplied: set fields of a model, or a mapping as-is."""
    if isinstance(value, BaseModel):
        return {name: getattr(value, name) for name in value.model_fields_set}
    return dict(value)


def merge_seo_config(base: SEOConfig, override: SEOConfig | Mapping[str, Any]) -> SEOConfig:
    """Deep-merge ``override`` onto ``base``; the override wins field by field.

    Top-level fields are replaced. Each of MERGEABLE_SECTIONS is merged
    key-by-key, so an override supplying one nested field keeps its siblings
    from ``base``.

    Example:
        >>> merged = merge_seo_config(base, {"robots": {"index": False}})
        >>> merged.robots.follow == base.robots.follow
        True
    """
    top = _explicit_fields(override)
    merged: dict[str, Any] = {name: getattr(base, name) for name in SEOConfig.model_fields}

    for name, value in top.items():
        if name not in MERGEABLE_SECTIONS:
            merged[name] = value
            continue

        base_section = getattr(base, name)
        if value is None:
            merged[name] = base_section
            continue

        section: dict[str, Any] = {}
        if base_section is not None:
            section.update(_explicit_fields(base_section))
        section.update(_explicit_fields(value))
        merged[name] = section

    return SEOConfig.model_validate(
        {name: value.model_dump() if isinstance(value, BaseModel) else value for name, value in merged.items()}
    )
