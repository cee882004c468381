from fastapi import Depends, Request

from mdblog.repos.posts_repo import FilesystemPostsRepo
from mdblog.services.markdown_renderer import MarkdownConverter
from mdblog.services.posts_service import PostsService
from mdblog.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_markdown_converter(request: Request) -> MarkdownConverter:
    return request.app.state.converter


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilesystemPostsRepo(current_settings.posts_path)


def get_posts_service(
    repo=Depends(get_posts_repo),
    converter=Depends(get_markdown_converter),
    current_settings: Settings = Depends(get_settings),
):
    return PostsService(
        repo=repo, converter=converter, newest_first=current_settings.NEWEST_FIRST
    )
