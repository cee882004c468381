import os
from pathlib import Path
from typing import List

from mdblog.errors import PostNotFound, PostsDirectoryError

POST_EXTENSION = ".md"


class FilesystemPostsRepo:
    def __init__(self, directory):
        self.directory = Path(directory)

    def list_post_files(self) -> List[str]:
        try:
            with os.scandir(self.directory) as entries:
                names = [
                    entry.name
                    for entry in entries
                    if entry.is_file()
                    and os.path.splitext(entry.name)[1] == POST_EXTENSION
                ]
        except OSError as e:
            raise PostsDirectoryError(
                f"Unable to read posts directory {self.directory}: {e}"
            ) from e
        return sorted(names)

    def read_post(self, file_name: str) -> str:
        try:
            raw = self._path_for(file_name).read_bytes()
        except (OSError, ValueError) as e:
            # ValueError covers names the OS refuses outright, e.g. embedded NUL
            raise PostNotFound(file_name) from e
        return raw.decode("utf-8", errors="replace")

    def _path_for(self, file_name: str) -> Path:
        # Checked lexically; symlinked posts are followed on read
        root = self.directory.absolute()
        path = root / file_name
        if path.parent != root:
            raise PostNotFound(file_name)
        return path
