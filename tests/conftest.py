from collections.abc import AsyncGenerator, Callable

import pytest
from httpx import ASGITransport, AsyncClient

from seokit.core.config import Settings, get_settings
from seokit.main import app

SITE_URL = "https://example.com"


@pytest.fixture
def make_settings() -> Callable[..., Settings]:
    """Build Settings without reading .env, so tests control every value."""

    def _make(**overrides) -> Settings:
        values = {"site_url": SITE_URL, "site_name": "Example", "app_env": "development"}
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def settings(make_settings) -> Settings:
    return make_settings()


@pytest.fixture
def production_settings(make_settings) -> Settings:
    return make_settings(app_env="production")


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
    if hasattr(app.state, "sitemap_routes"):
        del app.state.sitemap_routes


@pytest.fixture
def use_settings() -> Callable[[Settings], None]:
    """Serve requests with the given settings instead of the process ones."""

    def _use(s: Settings) -> None:
        app.dependency_overrides[get_settings] = lambda: s

    return _use
