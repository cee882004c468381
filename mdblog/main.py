import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mdblog.routers import pages
from mdblog.services.markdown_renderer import MarkdownConverter
from mdblog.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.converter = MarkdownConverter.from_settings(settings)
    logger.info(
        f"Serving posts from {settings.posts_path.resolve()} "
        f"(highlight style: {settings.HIGHLIGHT_STYLE})"
    )
    yield


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return PlainTextResponse(
        str(exc.detail), status_code=exc.status_code, headers=exc.headers
    )


app = FastAPI(title=settings.SITE_TITLE, lifespan=lifespan)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.include_router(pages.router)
