import textwrap

import pytest

from mdblog.errors import PostNotFound


class FakeRepo:
    """
    Minimal repo stand-in used in service tests.
    Keys are file names, values are raw post text.
    """

    def __init__(self, files: dict[str, str]):
        self.files = files
        self.reads = []

    def list_post_files(self):
        return list(self.files)

    def read_post(self, file_name: str) -> str:
        self.reads.append(file_name)
        if file_name not in self.files:
            raise PostNotFound(file_name)
        return textwrap.dedent(self.files[file_name]).lstrip()


class FakeConverter:
    """
    Markdown converter stand-in that records what it was asked to convert.
    """

    def __init__(self, html: str | None = None):
        self.html = html
        self.calls = []

    def convert(self, text: str) -> str:
        self.calls.append(text)
        return self.html if self.html is not None else f"<p>{text}</p>"


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, render_post_return=None):
        self._list_posts_return = list_posts_return or []
        self._render_post_return = render_post_return

    def list_posts(self):
        return self._list_posts_return

    def render_post(self, file_name: str):
        return self._render_post_return


@pytest.fixture
def posts_dir(tmp_path):
    directory = tmp_path / "posts"
    directory.mkdir()
    return directory


@pytest.fixture
def write_post(posts_dir):
    def _write(name: str, content: str = "") -> str:
        (posts_dir / name).write_text(textwrap.dedent(content).lstrip(), encoding="utf-8")
        return name

    return _write
