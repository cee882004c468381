import logging
from typing import List

from mdblog.errors import InvalidPostFilename
from mdblog.schemas.blog import Post, PostSummary
from mdblog.services.front_matter import split_front_matter
from mdblog.services.post_filename import parse_post_filename

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, repo, converter, newest_first: bool = False):
        self.repo = repo
        self.converter = converter
        self.newest_first = newest_first

    def list_posts(self) -> List[PostSummary]:
        posts = []
        for file_name in self.repo.list_post_files():
            try:
                date, title = parse_post_filename(file_name)
            except InvalidPostFilename:
                logger.warning(f"Skipping file with invalid format: {file_name}")
                continue
            posts.append(PostSummary(title=title, date=date, fileName=file_name))

        if self.newest_first:
            posts.sort(key=lambda p: p.date, reverse=True)
        return posts

    def render_post(self, file_name: str) -> Post:
        """Read, split and convert a single post.

        Raises InvalidPostFilename, PostNotFound or RenderError.
        """
        date, title = parse_post_filename(file_name)
        raw = self.repo.read_post(file_name)

        front_matter, body = split_front_matter(raw)
        content_html = self.converter.convert(body)

        if front_matter.date and front_matter.date != date:
            logger.debug(
                f"Ignoring front matter date {front_matter.date} for {file_name}, using {date}"
            )

        return Post(
            title=title,
            date=date,
            author=front_matter.author,
            contentHtml=content_html,
            fileName=file_name,
        )
