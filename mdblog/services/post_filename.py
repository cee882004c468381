import os
from typing import Tuple

from mdblog.errors import InvalidPostFilename

# YYYY, MM, DD, slug
FILENAME_SEGMENTS = 4


def parse_post_filename(file_name: str) -> Tuple[str, str]:
    """
    Derive (date, title) from a post file name such as
    ``2024-01-15-my-first-post.md``.

    The extension is stripped and the rest is cut on the first three hyphens,
    so the slug may contain hyphens of its own.
    """
    if not file_name or "/" in file_name or "\\" in file_name:
        raise InvalidPostFilename(file_name)

    base, _ = os.path.splitext(file_name)
    parts = base.split("-", FILENAME_SEGMENTS - 1)
    if len(parts) != FILENAME_SEGMENTS:
        raise InvalidPostFilename(file_name)

    date = "-".join(parts[:3])
    return date, derive_title(parts[3])


def derive_title(slug: str) -> str:
    """Turn ``my-first-post`` into ``My First Post``."""
    words = slug.replace("-", " ").split(" ")
    return " ".join(_title_word(word) for word in words)


def _title_word(word: str) -> str:
    # Leading punctuation is skipped; a leading digit means nothing is upper-cased
    for i, ch in enumerate(word):
        if ch.isalnum():
            head = ch.upper() if ch.isalpha() else ch
            return word[:i] + head + word[i + 1 :].lower()
    return word
