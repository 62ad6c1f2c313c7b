"""Content builders: Article / BlogPosting, FAQPage, Review."""

from __future__ import annotations

from typing import Any

from seokit.jsonld.context import (
    TYPE_KEY,
    compact,
    format_number,
    person_node,
    require,
    resolve_image,
    resolve_url,
    with_context,
)
from seokit.jsonld.types import (
    ArticleProps,
    FAQProps,
    Publisher,
    ReviewProps,
    ReviewRating,
    SchemaValidationError,
)
from seokit.seo.constants import (
    ARTICLE_TYPES,
    SCHEMA_TYPE_ANSWER,
    SCHEMA_TYPE_FAQ_PAGE,
    SCHEMA_TYPE_IMAGE_OBJECT,
    SCHEMA_TYPE_ORGANIZATION,
    SCHEMA_TYPE_QUESTION,
    SCHEMA_TYPE_RATING,
    SCHEMA_TYPE_REVIEW,
    SCHEMA_TYPE_THING,
)


def _publisher_node(publisher: Publisher, base_url: str | None) -> dict[str, Any]:
    logo = resolve_url(publisher.logo, base_url)
    return compact(
        {
            TYPE_KEY: SCHEMA_TYPE_ORGANIZATION,
            "name": publisher.name,
            "logo": {TYPE_KEY: SCHEMA_TYPE_IMAGE_OBJECT, "url": logo} if logo else None,
            "url": resolve_url(publisher.url, base_url),
        }
    )


def build_article_json_ld(props: ArticleProps, *, base_url: str | None = None) -> dict[str, Any]:
    """Article, BlogPosting or NewsArticle node.

    The author may be a bare name or a Person; both become a Person node.
    """
    if props.type not in ARTICLE_TYPES:
        raise SchemaValidationError(props.type or "Article", "type")
    require(props.type, headline=props.headline, author=props.author, date_published=props.date_published)

    article = compact(
        {
            TYPE_KEY: props.type,
            "headline": props.headline,
            "description": props.description,
            "author": person_node(props.author, base_url),
            "datePublished": props.date_published,
            "dateModified": props.date_modified,
            "image": resolve_image(props.image, base_url),
            "mainEntityOfPage": resolve_url(props.main_entity_of_page, base_url),
            "publisher": _publisher_node(props.publisher, base_url) if props.publisher else None,
        }
    )
    return with_context(article)


def build_faq_json_ld(props: FAQProps, *, base_url: str | None = None) -> dict[str, Any]:
    """FAQPage; questions keep their input order. FAQ items carry no URLs, so ``base_url`` is unused."""
    main_entity = []
    for it in props.items:
        require(SCHEMA_TYPE_QUESTION, question=it.question, answer=it.answer)
        main_entity.append(
            {
                TYPE_KEY: SCHEMA_TYPE_QUESTION,
                "name": it.question,
                "acceptedAnswer": {TYPE_KEY: SCHEMA_TYPE_ANSWER, "text": it.answer},
            }
        )

    return with_context({TYPE_KEY: SCHEMA_TYPE_FAQ_PAGE, "mainEntity": main_entity})


def _rating_node(rating: ReviewRating) -> dict[str, Any]:
    # Rating values are emitted as strings; best/worst only when supplied
    return compact(
        {
            TYPE_KEY: SCHEMA_TYPE_RATING,
            "ratingValue": format_number(rating.rating_value),
            "bestRating": format_number(rating.best_rating) if rating.best_rating is not None else None,
            "worstRating": format_number(rating.worst_rating) if rating.worst_rating is not None else None,
        }
    )


def build_review_json_ld(props: ReviewProps, *, base_url: str | None = None) -> dict[str, Any]:
    require(SCHEMA_TYPE_REVIEW, author=props.author, date_published=props.date_published)

    item_reviewed = None
    if props.item_reviewed:
        item_reviewed = compact(
            {
                TYPE_KEY: SCHEMA_TYPE_THING,
                "name": props.item_reviewed.name,
                "url": resolve_url(props.item_reviewed.url, base_url),
            }
        )

    review = compact(
        {
            TYPE_KEY: SCHEMA_TYPE_REVIEW,
            "author": person_node(props.author, base_url),
            "datePublished": props.date_published,
            "reviewBody": props.review_body,
            "itemReviewed": item_reviewed,
            "reviewRating": _rating_node(props.review_rating) if props.review_rating else None,
        }
    )
    return with_context(review)
