"""Image metadata normalization for social previews (Open Graph, Twitter)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from seokit.core.config import Settings
from seokit.seo.config import ImageMetadata
from seokit.seo.urls import get_absolute_url


def generate_image_metadata(
    image: str | ImageMetadata | Mapping[str, Any],
    base_url: str | None = None,
    *,
    settings: Settings | None = None,
) -> ImageMetadata:
    """Normalize an image reference into ImageMetadata with an absolute URL.

    A bare string becomes ``{url, alt: ""}``; structured input keeps its
    width/height/type.
    """
    if isinstance(image, str):
        return ImageMetadata(url=get_absolute_url(image, base_url, settings=settings), alt="")

    data = image.model_dump() if isinstance(image, ImageMetadata) else dict(image)
    data["url"] = get_absolute_url(data["url"], base_url, settings=settings)
    data["alt"] = data.get("alt") or ""
    return ImageMetadata.model_validate(data)
