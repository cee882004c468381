import logging
from dataclasses import dataclass, field
from typing import Dict, Tuple

logger = logging.getLogger(__name__)

DELIMITER = "---"


@dataclass
class FrontMatter:
    author: str = ""
    # Captured for completeness; post dates always come from the file name.
    date: str = ""
    fields: Dict[str, str] = field(default_factory=dict)


def split_front_matter(text: str) -> Tuple[FrontMatter, str]:
    """
    Split an optional ``---`` delimited key/value block off the top of a post.

    Returns the parsed front matter and the Markdown body. When the block is
    never closed nothing is extracted and the full text is the body.
    """
    lines = text.split("\n")
    if lines[0].rstrip("\r") != DELIMITER:
        return FrontMatter(), text

    end = next(
        (i for i in range(1, len(lines)) if lines[i].strip() == DELIMITER),
        None,
    )
    if end is None:
        logger.debug("Front matter opened but never closed, treating as body")
        return FrontMatter(), text

    return parse_front_matter_lines(lines[1:end]), "\n".join(lines[end + 1 :])


def parse_front_matter_lines(lines) -> FrontMatter:
    front_matter = FrontMatter()
    for line in lines:
        key, sep, value = line.partition(":")
        if not sep:
            continue
        key = key.strip().lower()
        value = _unquote(value.strip())

        front_matter.fields[key] = value
        if key == "author":
            front_matter.author = value
        elif key == "date":
            front_matter.date = value
    return front_matter


def _unquote(value: str) -> str:
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value
