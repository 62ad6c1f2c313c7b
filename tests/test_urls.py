"""Tests for URL construction and canonicalization."""

import pytest

from seokit.seo.urls import (
    UrlConstructionError,
    build_url,
    get_absolute_url,
    get_canonical_url,
    is_valid_url,
    join_paths,
    strip_tracking_params,
)

BASE = "https://example.com"


class TestBuildUrl:
    def test_base_and_path(self):
        assert build_url(BASE, "/about") == "https://example.com/about"

    def test_single_slash_between_parts(self):
        assert build_url("https://example.com/", "/about") == "https://example.com/about"
        assert build_url("https://example.com", "about") == "https://example.com/about"

    def test_locale_segment(self):
        assert build_url(BASE, "/blog", locale="fr") == "https://example.com/fr/blog"

    def test_query_params(self):
        url = build_url(BASE, "/search", query={"q": "shoes", "page": 2, "draft": False})
        assert url == "https://example.com/search?q=shoes&page=2&draft=false"

    def test_none_query_values_skipped(self):
        assert build_url(BASE, "/search", query={"q": "x", "tag": None}) == "https://example.com/search?q=x"

    def test_existing_key_replaced(self):
        assert build_url(BASE, "/search?q=old&page=1", query={"q": "new"}) == "https://example.com/search?page=1&q=new"

    def test_root_path(self):
        assert build_url(BASE) == "https://example.com/"

    def test_falls_back_to_settings(self, make_settings):
        s = make_settings(site_url="https://fallback.test/")
        assert build_url(path="/x", settings=s) == "https://fallback.test/x"

    def test_invalid_base_raises(self):
        with pytest.raises(UrlConstructionError) as exc_info:
            build_url("not a url", "/about")
        assert isinstance(exc_info.value, ValueError)

    def test_invalid_port_raises(self):
        with pytest.raises(UrlConstructionError):
            build_url("https://example.com:99999", "/about")


class TestGetAbsoluteUrl:
    def test_absolute_passthrough(self):
        assert get_absolute_url("https://cdn.example.org/a.png", BASE) == "https://cdn.example.org/a.png"

    def test_relative_resolved(self):
        assert get_absolute_url("/images/a.png", BASE) == "https://example.com/images/a.png"

    def test_http_scheme_case_insensitive(self):
        assert get_absolute_url("HTTP://Example.com/x", BASE) == "HTTP://Example.com/x"


class TestCanonicalUrl:
    def test_strips_tracking_params(self):
        url = get_canonical_url("/post?utm_source=x&id=5&gclid=abc&fbclid=def&utm_campaign=y", BASE)
        assert url == "https://example.com/post?id=5"

    def test_idempotent(self):
        once = get_canonical_url("/post?utm_medium=mail&ref=home", BASE)
        assert get_canonical_url(once, BASE) == once

    def test_keeps_fragment(self):
        assert get_canonical_url("/faq#shipping", BASE) == "https://example.com/faq#shipping"

    def test_strip_tracking_invalid_url(self):
        with pytest.raises(UrlConstructionError):
            strip_tracking_params("/relative/only")


class TestHelpers:
    def test_is_valid_url(self):
        assert is_valid_url("https://example.com/a")
        assert not is_valid_url("example.com")
        assert not is_valid_url("")
        assert not is_valid_url(" https://example.com")

    def test_join_paths(self):
        assert join_paths("https://example.com/", "/en/", "/about") == "https://example.com/en/about"
        assert join_paths("https://example.com", None, "") == "https://example.com"
