import logging
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from seokit import __version__
from seokit.core.config import get_settings
from seokit.core.logging import setup_logging
from seokit.core.sentry import init_sentry
from seokit.web.router import seo_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    settings = get_settings()
    setup_logging(settings)
    init_sentry(settings)
    logger.info("Starting seokit (site=%s, env=%s)", settings.site_url, settings.app_env)

    yield

    logger.info("seokit shut down")


app = FastAPI(
    title="seokit",
    description="robots.txt and sitemap.xml generation with schema.org JSON-LD builders",
    version=__version__,
    lifespan=lifespan,
)


# Log unhandled exceptions with the full traceback
@app.exception_handler(Exception)
async def _unhandled_exception_handler(request: Request, exc: Exception):
    tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
    logger.error("Unhandled %s on %s %s:\n%s", type(exc).__name__, request.method, request.url.path, "".join(tb))
    return JSONResponse(status_code=500, content={"detail": f"{type(exc).__name__}: {exc}"})


app.include_router(seo_router)
