"""Context injection and shared helpers for JSON-LD documents."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from seokit.jsonld.types import Person, PostalAddress, SchemaValidationError
from seokit.seo.constants import SCHEMA_ORG_CONTEXT, SCHEMA_TYPE_PERSON, SCHEMA_TYPE_POSTAL_ADDRESS
from seokit.seo.urls import get_absolute_url

CONTEXT_KEY = "@context"
TYPE_KEY = "@type"


def with_context(document: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of ``document`` marked as a schema.org root entity.

    Only the top level gets the marker; nested objects are left untouched.
    """
    rest = {k: v for k, v in document.items() if k != CONTEXT_KEY}
    return {CONTEXT_KEY: SCHEMA_ORG_CONTEXT, **rest}


def compact(data: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None, an empty string or an empty list."""
    return {k: v for k, v in data.items() if v is not None and v != "" and v != []}


def format_number(value: float | int | str) -> str:
    """Render a number the way JSON-LD consumers expect it: 5.0 → "5", 4.5 → "4.5"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def require(schema_type: str, **fields: Any) -> None:
    """Raise SchemaValidationError for the first blank required field."""
    for name, value in fields.items():
        if isinstance(value, Person):
            value = value.name
        if value is None or (isinstance(value, str) and not value.strip()):
            raise SchemaValidationError(schema_type, name)


def resolve_url(value: str | None, base_url: str | None) -> str | None:
    """Resolve a relative URL against ``base_url``; pass through when no base is given."""
    if not value or base_url is None:
        return value
    return get_absolute_url(value, base_url)


def resolve_image(value: str | list[str] | None, base_url: str | None) -> str | list[str] | None:
    if isinstance(value, list):
        return [resolve_url(v, base_url) for v in value]
    return resolve_url(value, base_url)


def person_node(person: str | Person, base_url: str | None = None) -> dict[str, Any]:
    """Normalize a bare name or a Person into a Person node."""
    if isinstance(person, str):
        return {TYPE_KEY: SCHEMA_TYPE_PERSON, "name": person}
    return compact({TYPE_KEY: SCHEMA_TYPE_PERSON, "name": person.name, "url": resolve_url(person.url, base_url)})


def address_node(address: PostalAddress) -> dict[str, Any]:
    return compact(
        {
            TYPE_KEY: SCHEMA_TYPE_POSTAL_ADDRESS,
            "streetAddress": address.street_address,
            "addressLocality": address.address_locality,
            "addressRegion": address.address_region,
            "postalCode": address.postal_code,
            "addressCountry": address.address_country,
        }
    )
