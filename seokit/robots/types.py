"""robots.txt policy schemas.

Serialized with camelCase aliases (``userAgent``, ``crawlDelay``), the shape
hosting frameworks expect from a robots route.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

RobotsEnvironment = Literal["production", "staging", "development", "preview"]


class RobotsRule(BaseModel):
    """Directives for one user agent (or a group of them)."""

    model_config = ConfigDict(populate_by_name=True)

    user_agent: str | list[str] = Field(..., alias="userAgent")
    allow: str | list[str] | None = None
    disallow: str | list[str] | None = None
    crawl_delay: float | None = Field(None, alias="crawlDelay")


class RobotsPolicy(BaseModel):
    rules: list[RobotsRule]
    sitemap: str | None = None
    host: str | None = None

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class RobotsGeneratorConfig(BaseModel):
    environment: RobotsEnvironment
    base_url: str
    sitemap_url: str | None = None  # Absolute, or relative to base_url; defaults to /sitemap.xml
    crawl_delay: float | None = None  # Seconds
    custom_rules: list[RobotsRule] = Field(default_factory=list)  # Production only
    additional_disallows: list[str] = Field(default_factory=list)
