"""Optional Sentry error tracking; enabled only when SENTRY_DSN is set."""

import logging

from seokit import __version__
from seokit.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


def init_sentry(settings: Settings | None = None) -> bool:
    """Initialize the Sentry SDK for the FastAPI app. Returns True when enabled."""
    settings = settings or get_settings()
    if not settings.sentry_dsn:
        logger.debug("Sentry disabled: no DSN configured")
        return False

    import sentry_sdk
    from sentry_sdk.integrations.fastapi import FastApiIntegration

    production = settings.app_env == "production"
    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.deploy_env or settings.app_env,
        release=f"seokit@{__version__}",
        traces_sample_rate=0.1 if production else 1.0,
        send_default_pii=False,
        integrations=[FastApiIntegration(transaction_style="endpoint")],
    )
    # Several sites can report into one project
    sentry_sdk.set_tag("site", settings.site_url)
    logger.info("Sentry enabled for %s (env=%s)", settings.site_url, settings.app_env)
    return True
