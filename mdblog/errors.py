class PostError(Exception):
    """Base class for failures while listing or rendering posts."""


class PostsDirectoryError(PostError):
    """The posts directory could not be read."""


class InvalidPostFilename(PostError):
    """A file name does not follow the YYYY-MM-DD-slug.md layout."""

    def __init__(self, file_name: str):
        super().__init__(f"Invalid post filename format: {file_name!r}")
        self.file_name = file_name


class PostNotFound(PostError):
    """The requested post file is missing or unreadable."""

    def __init__(self, file_name: str):
        super().__init__(f"Post not found: {file_name!r}")
        self.file_name = file_name


class RenderError(PostError):
    """Markdown to HTML conversion failed."""
