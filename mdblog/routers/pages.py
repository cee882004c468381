import logging
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from mdblog import dependencies as deps
from mdblog.errors import (
    InvalidPostFilename,
    PostNotFound,
    PostsDirectoryError,
    RenderError,
)
from mdblog.services.posts_service import PostsService
from mdblog.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()
templates = Jinja2Templates(directory=Path(__file__).parent.parent / "templates")


def _page_context(current_settings: Settings, **extra) -> dict:
    return {
        "page_title": current_settings.SITE_TITLE,
        "mathjax_url": current_settings.MATHJAX_URL,
        **extra,
    }


@router.get("/", response_class=HTMLResponse)
def index(
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(deps.get_settings),
):
    """List all posts."""
    try:
        posts = service.list_posts()
        return templates.TemplateResponse(
            request, "index.html", _page_context(current_settings, posts=posts)
        )
    except HTTPException:
        raise
    except PostsDirectoryError as e:
        logger.error(f"Unable to list posts: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error rendering index: {e}")
        raise HTTPException(status_code=500, detail="Failed to render index")


@router.get("/post/{file_name:path}", response_class=HTMLResponse)
def show_post(
    file_name: str,
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(deps.get_settings),
):
    """Render a single post by its file name."""
    try:
        post = service.render_post(file_name)
        return templates.TemplateResponse(
            request, "post.html", _page_context(current_settings, post=post)
        )
    except HTTPException:
        raise
    except PostNotFound:
        raise HTTPException(status_code=404, detail="Post not found")
    except InvalidPostFilename:
        logger.error(f"Rejected post with invalid filename: {file_name}")
        raise HTTPException(status_code=500, detail="Invalid post filename format")
    except RenderError as e:
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error rendering post {file_name}: {e}")
        raise HTTPException(status_code=500, detail="Failed to render post")
