"""Commerce builders: Product and LocalBusiness."""

from __future__ import annotations

from typing import Any

from seokit.jsonld.context import (
    TYPE_KEY,
    address_node,
    compact,
    format_number,
    require,
    resolve_image,
    resolve_url,
    with_context,
)
from seokit.jsonld.types import (
    LocalBusinessProps,
    OpeningHours,
    ProductAggregateRating,
    ProductOffer,
    ProductProps,
)
from seokit.seo.constants import (
    SCHEMA_TYPE_AGGREGATE_RATING,
    SCHEMA_TYPE_BRAND,
    SCHEMA_TYPE_GEO_COORDINATES,
    SCHEMA_TYPE_OFFER,
    SCHEMA_TYPE_OPENING_HOURS,
    SCHEMA_TYPE_PRODUCT,
)


def _offer_node(offer: ProductOffer, base_url: str | None) -> dict[str, Any]:
    require(SCHEMA_TYPE_OFFER, price_currency=offer.price_currency)
    return compact(
        {
            TYPE_KEY: SCHEMA_TYPE_OFFER,
            "price": format_number(offer.price),
            "priceCurrency": offer.price_currency,
            "availability": offer.availability,
            "url": resolve_url(offer.url, base_url),
            "itemCondition": offer.item_condition,
        }
    )


def _aggregate_rating_node(rating: ProductAggregateRating) -> dict[str, Any]:
    return compact(
        {
            TYPE_KEY: SCHEMA_TYPE_AGGREGATE_RATING,
            "ratingValue": format_number(rating.rating_value),
            "reviewCount": str(rating.review_count) if rating.review_count is not None else None,
        }
    )


def build_product_json_ld(props: ProductProps, *, base_url: str | None = None) -> dict[str, Any]:
    """Product node.

    A single offer stays an object and a list of offers stays a list, so
    consumers see the same shape they passed in.
    """
    require(SCHEMA_TYPE_PRODUCT, name=props.name)

    offers: dict[str, Any] | list[dict[str, Any]] | None = None
    if isinstance(props.offers, list):
        offers = [_offer_node(o, base_url) for o in props.offers]
    elif props.offers is not None:
        offers = _offer_node(props.offers, base_url)

    product = compact(
        {
            TYPE_KEY: SCHEMA_TYPE_PRODUCT,
            "name": props.name,
            "description": props.description,
            "sku": props.sku,
            "brand": {TYPE_KEY: SCHEMA_TYPE_BRAND, "name": props.brand} if props.brand else None,
            "image": resolve_image(props.image, base_url),
            "url": resolve_url(props.url, base_url),
            "offers": offers,
            "aggregateRating": _aggregate_rating_node(props.aggregate_rating) if props.aggregate_rating else None,
        }
    )
    return with_context(product)


def _opening_hours_node(block: OpeningHours) -> dict[str, Any]:
    return {
        TYPE_KEY: SCHEMA_TYPE_OPENING_HOURS,
        "dayOfWeek": list(block.day_of_week),
        "opens": block.opens,
        "closes": block.closes,
    }


def build_local_business_json_ld(props: LocalBusinessProps, *, base_url: str | None = None) -> dict[str, Any]:
    # @type is the concrete subtype (Restaurant, Store, ...)
    require(props.business_type or "LocalBusiness", name=props.name, business_type=props.business_type)

    geo = None
    if props.geo is not None:
        geo = {
            TYPE_KEY: SCHEMA_TYPE_GEO_COORDINATES,
            "latitude": props.geo.latitude,
            "longitude": props.geo.longitude,
        }

    business = compact(
        {
            TYPE_KEY: props.business_type,
            "name": props.name,
            "url": resolve_url(props.url, base_url),
            "telephone": props.telephone,
            "image": resolve_image(props.image, base_url),
            "priceRange": props.price_range,
            "address": address_node(props.address) if props.address else None,
            "geo": geo,
            "openingHoursSpecification": [_opening_hours_node(b) for b in props.opening_hours],
        }
    )
    return with_context(business)
