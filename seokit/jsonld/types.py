"""Input props for the schema.org JSON-LD builders."""

from __future__ import annotations

from dataclasses import dataclass, field

from seokit.seo.constants import SCHEMA_TYPE_ARTICLE, SCHEMA_TYPE_LOCAL_BUSINESS


class SchemaValidationError(ValueError):
    """Raised when a builder is called without a field its schema type requires."""

    def __init__(self, schema_type: str, field_name: str):
        super().__init__(f"{schema_type}: required field '{field_name}' is missing")
        self.schema_type = schema_type
        self.field_name = field_name


# ---------------------------------------------------------------------------
# Shared sub-objects
# ---------------------------------------------------------------------------


@dataclass
class Person:
    name: str
    url: str | None = None


@dataclass
class Publisher:
    """Organization publishing an article."""

    name: str
    logo: str | None = None
    url: str | None = None


@dataclass
class PostalAddress:
    street_address: str | None = None
    address_locality: str | None = None
    address_region: str | None = None
    postal_code: str | None = None
    address_country: str | None = None


@dataclass
class ContactPoint:
    contact_type: str
    telephone: str | None = None
    email: str | None = None
    area_served: str | None = None
    available_language: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Organization / WebSite / WebPage / Breadcrumb
# ---------------------------------------------------------------------------


@dataclass
class OrganizationProps:
    name: str
    url: str
    logo: str | None = None
    legal_name: str | None = None
    founding_date: str | None = None
    founders: list[str | Person] = field(default_factory=list)
    address: PostalAddress | None = None
    contact_points: list[ContactPoint] = field(default_factory=list)
    same_as: list[str] = field(default_factory=list)  # Social profile URLs


@dataclass
class WebSiteProps:
    name: str
    url: str
    search_url_template: str | None = None  # e.g. "https://example.com/search?q={search_term_string}"
    description: str | None = None
    in_language: str | None = None


@dataclass
class WebPageProps:
    name: str
    url: str
    description: str | None = None
    breadcrumb_id: str | None = None  # @id reference to a BreadcrumbList
    in_language: str | None = None


@dataclass
class BreadcrumbItem:
    name: str
    item: str
    position: int | None = None  # None → 1-based index in the list


@dataclass
class BreadcrumbProps:
    items: list[BreadcrumbItem] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Article / FAQ / Review
# ---------------------------------------------------------------------------


@dataclass
class ArticleProps:
    headline: str
    author: str | Person
    date_published: str
    type: str = SCHEMA_TYPE_ARTICLE  # Article | BlogPosting | NewsArticle
    description: str | None = None
    date_modified: str | None = None
    image: str | list[str] | None = None
    main_entity_of_page: str | None = None
    publisher: Publisher | None = None


@dataclass
class FAQItem:
    question: str
    answer: str


@dataclass
class FAQProps:
    items: list[FAQItem] = field(default_factory=list)


@dataclass
class ReviewRating:
    rating_value: float
    best_rating: float | None = None
    worst_rating: float | None = None


@dataclass
class ReviewedItem:
    name: str
    url: str | None = None


@dataclass
class ReviewProps:
    author: str | Person
    date_published: str
    review_body: str | None = None
    item_reviewed: ReviewedItem | None = None
    review_rating: ReviewRating | None = None


# ---------------------------------------------------------------------------
# Product / LocalBusiness
# ---------------------------------------------------------------------------


@dataclass
class ProductOffer:
    price: float | str
    price_currency: str
    availability: str | None = None  # e.g. ITEM_AVAILABILITY_IN_STOCK
    url: str | None = None
    item_condition: str | None = None


@dataclass
class ProductAggregateRating:
    rating_value: float
    review_count: int | None = None


@dataclass
class ProductProps:
    name: str
    description: str | None = None
    sku: str | None = None
    brand: str | None = None
    image: str | list[str] | None = None
    url: str | None = None
    offers: ProductOffer | list[ProductOffer] | None = None
    aggregate_rating: ProductAggregateRating | None = None


@dataclass
class GeoCoordinates:
    latitude: float
    longitude: float


@dataclass
class OpeningHours:
    """One opening-hours block; several days may share it (Mon-Fri 09:00-17:00)."""

    day_of_week: list[str]
    opens: str
    closes: str


@dataclass
class LocalBusinessProps:
    name: str
    business_type: str = SCHEMA_TYPE_LOCAL_BUSINESS  # LocalBusiness subtype, e.g. "Restaurant"
    url: str | None = None
    telephone: str | None = None
    image: str | list[str] | None = None
    price_range: str | None = None
    address: PostalAddress | None = None
    geo: GeoCoordinates | None = None
    opening_hours: list[OpeningHours] = field(default_factory=list)
