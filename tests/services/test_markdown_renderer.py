import dataclasses
from concurrent.futures import ThreadPoolExecutor
from types import SimpleNamespace

import pytest
from pygments.util import ClassNotFound

from mdblog.errors import RenderError
from mdblog.services import markdown_renderer
from mdblog.services.markdown_renderer import MarkdownConverter


@pytest.fixture
def converter():
    return MarkdownConverter()


def test_fenced_code_with_language_is_highlighted(converter):
    html = converter.convert("```python\ndef add(a, b):\n    return a + b\n```\n")

    assert 'class="highlight"' in html
    assert '<span style="' in html
    assert "add" in html


def test_gfm_table_renders_table_element(converter):
    html = converter.convert("| a | b |\n|---|---|\n| 1 | 2 |\n")

    assert "<table>" in html
    assert "<td>1</td>" in html


def test_strikethrough_renders_del(converter):
    assert "<del>gone</del>" in converter.convert("this is ~~gone~~ now")


def test_task_list_renders_checkboxes(converter):
    html = converter.convert("- [x] done\n- [ ] todo\n")

    assert 'class="task-list-item"' in html
    assert 'type="checkbox"' in html


def test_bare_urls_are_autolinked(converter):
    html = converter.convert("Visit https://example.com today")
    assert 'href="https://example.com"' in html


def test_math_delimiters_survive_for_mathjax(converter):
    html = converter.convert(r"Euler: \(e^{i\pi} + 1 = 0\)")

    assert 'class="arithmatex"' in html
    assert r"\(e^{i\pi} + 1 = 0\)" in html


def test_conversion_failure_raises_render_error(monkeypatch, converter):
    def boom(*args, **kwargs):
        raise ValueError("parser exploded")

    monkeypatch.setattr(markdown_renderer.markdown, "Markdown", boom)

    with pytest.raises(RenderError, match="parser exploded"):
        converter.convert("# hi")


def test_converter_is_immutable(converter):
    with pytest.raises(dataclasses.FrozenInstanceError):
        converter.highlight_style = "monokai"


def test_from_settings_uses_highlight_style():
    converter = MarkdownConverter.from_settings(SimpleNamespace(HIGHLIGHT_STYLE="friendly"))

    assert converter.highlight_style == "friendly"
    assert converter.extension_configs()["codehilite"]["pygments_style"] == "friendly"


def test_from_settings_rejects_unknown_style():
    with pytest.raises(ClassNotFound):
        MarkdownConverter.from_settings(SimpleNamespace(HIGHLIGHT_STYLE="no-such-style"))


def test_concurrent_conversions_do_not_share_state(converter):
    docs = [f"# Title {i}\n\nbody {i}" for i in range(20)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(converter.convert, docs))

    for i, html in enumerate(results):
        assert f"Title {i}</h1>" in html
        assert f"body {i}" in html
