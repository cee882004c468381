import logging
from dataclasses import dataclass
from typing import Any, Dict, Tuple

import markdown
from pygments.styles import get_style_by_name

from mdblog.errors import RenderError

logger = logging.getLogger(__name__)

# GitHub flavoured Markdown: tables, fenced code, strikethrough, task lists and
# autolinks. Math delimiters are left in place for MathJax.
MD_EXTENSIONS: Tuple[str, ...] = (
    "tables",
    "fenced_code",
    "codehilite",
    "pymdownx.tilde",
    "pymdownx.tasklist",
    "pymdownx.magiclink",
    "pymdownx.arithmatex",
)


@dataclass(frozen=True)
class MarkdownConverter:
    """
    Read-only Markdown configuration shared by every request.

    ``markdown.Markdown`` instances carry per-document state, so a new one is
    built for each conversion and nothing mutable is shared between threads.
    """

    highlight_style: str = "default"
    extensions: Tuple[str, ...] = MD_EXTENSIONS

    @classmethod
    def from_settings(cls, settings) -> "MarkdownConverter":
        # Fail at start-up rather than on the first highlighted code block
        get_style_by_name(settings.HIGHLIGHT_STYLE)
        return cls(highlight_style=settings.HIGHLIGHT_STYLE)

    def extension_configs(self) -> Dict[str, Dict[str, Any]]:
        return {
            "codehilite": {
                "css_class": "highlight",
                "guess_lang": False,
                "noclasses": True,
                "pygments_style": self.highlight_style,
            },
            "pymdownx.tasklist": {"custom_checkbox": False},
            "pymdownx.arithmatex": {
                "generic": True,
                "inline_syntax": ["round"],
                "block_syntax": ["square", "begin"],
            },
        }

    def convert(self, text: str) -> str:
        try:
            md = markdown.Markdown(
                extensions=list(self.extensions),
                extension_configs=self.extension_configs(),
                output_format="html",
            )
            return md.convert(text)
        except Exception as e:
            logger.error(f"Markdown conversion failed: {e}")
            raise RenderError(f"Failed to render markdown: {e}") from e
