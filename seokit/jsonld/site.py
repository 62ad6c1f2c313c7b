"""Site-structure builders: Organization, WebSite, WebPage, BreadcrumbList."""

from __future__ import annotations

from typing import Any

from seokit.jsonld.context import (
    TYPE_KEY,
    address_node,
    compact,
    person_node,
    require,
    resolve_url,
    with_context,
)
from seokit.jsonld.types import (
    BreadcrumbProps,
    ContactPoint,
    OrganizationProps,
    WebPageProps,
    WebSiteProps,
)
from seokit.seo.constants import (
    SCHEMA_TYPE_BREADCRUMB_LIST,
    SCHEMA_TYPE_CONTACT_POINT,
    SCHEMA_TYPE_LIST_ITEM,
    SCHEMA_TYPE_ORGANIZATION,
    SCHEMA_TYPE_SEARCH_ACTION,
    SCHEMA_TYPE_WEBPAGE,
    SCHEMA_TYPE_WEBSITE,
    SEARCH_INPUT_ENCODING,
)
from seokit.seo.urls import is_absolute_http_url, join_paths


def _contact_point_node(cp: ContactPoint) -> dict[str, Any]:
    return compact(
        {
            TYPE_KEY: SCHEMA_TYPE_CONTACT_POINT,
            "contactType": cp.contact_type,
            "telephone": cp.telephone,
            "email": cp.email,
            "areaServed": cp.area_served,
            "availableLanguage": list(cp.available_language),
        }
    )


def build_organization_json_ld(props: OrganizationProps, *, base_url: str | None = None) -> dict[str, Any]:
    require(SCHEMA_TYPE_ORGANIZATION, name=props.name, url=props.url)

    organization = compact(
        {
            TYPE_KEY: SCHEMA_TYPE_ORGANIZATION,
            "name": props.name,
            "url": resolve_url(props.url, base_url),
            "logo": resolve_url(props.logo, base_url),
            "legalName": props.legal_name,
            "foundingDate": props.founding_date,
            "founder": [person_node(f, base_url) for f in props.founders],
            "address": address_node(props.address) if props.address else None,
            "contactPoint": [_contact_point_node(cp) for cp in props.contact_points],
            "sameAs": list(props.same_as),
        }
    )
    return with_context(organization)


def _search_target(template: str, base_url: str | None) -> str:
    # Joined as text so the {search_term_string} placeholder is not percent-encoded
    if base_url is None or is_absolute_http_url(template):
        return template
    return join_paths(base_url, template)


def build_website_json_ld(props: WebSiteProps, *, base_url: str | None = None) -> dict[str, Any]:
    """WebSite node; a search URL template adds the sitelinks SearchAction."""
    require(SCHEMA_TYPE_WEBSITE, name=props.name, url=props.url)

    website = compact(
        {
            TYPE_KEY: SCHEMA_TYPE_WEBSITE,
            "name": props.name,
            "url": resolve_url(props.url, base_url),
            "description": props.description,
            "inLanguage": props.in_language,
        }
    )
    if props.search_url_template:
        website["potentialAction"] = {
            TYPE_KEY: SCHEMA_TYPE_SEARCH_ACTION,
            "target": _search_target(props.search_url_template, base_url),
            "query-input": SEARCH_INPUT_ENCODING,
        }
    return with_context(website)


def build_webpage_json_ld(props: WebPageProps, *, base_url: str | None = None) -> dict[str, Any]:
    require(SCHEMA_TYPE_WEBPAGE, name=props.name, url=props.url)

    webpage = compact(
        {
            TYPE_KEY: SCHEMA_TYPE_WEBPAGE,
            "name": props.name,
            "url": resolve_url(props.url, base_url),
            "description": props.description,
            "breadcrumb": {"@id": props.breadcrumb_id} if props.breadcrumb_id else None,
            "inLanguage": props.in_language,
        }
    )
    return with_context(webpage)


def build_breadcrumb_json_ld(props: BreadcrumbProps, *, base_url: str | None = None) -> dict[str, Any]:
    """BreadcrumbList; items without an explicit position get their 1-based index."""
    item_list = []
    for idx, it in enumerate(props.items, start=1):
        require(SCHEMA_TYPE_LIST_ITEM, name=it.name, item=it.item)
        item_list.append(
            {
                TYPE_KEY: SCHEMA_TYPE_LIST_ITEM,
                "position": it.position if it.position is not None else idx,
                "name": it.name,
                "item": resolve_url(it.item, base_url),
            }
        )

    return with_context({TYPE_KEY: SCHEMA_TYPE_BREADCRUMB_LIST, "itemListElement": item_list})
