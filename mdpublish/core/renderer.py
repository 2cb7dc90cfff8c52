"""Markdown → HTML fragment rendering, delegated to markdown-it-py.

The CommonMark preset is used unchanged.  Whether raw HTML embedded in the
Markdown source passes through is a policy knob (``allow_raw_html``): the
default keeps it verbatim, which means published pages can carry arbitrary
script.  Turn it off to have raw HTML escaped as text instead.
"""

from __future__ import annotations

from markdown_it import MarkdownIt


class MarkdownRenderer:
    """Pure Markdown renderer.

    Parameters
    ----------
    allow_raw_html:
        Pass raw HTML blocks and inline tags through verbatim.
    """

    def __init__(self, allow_raw_html: bool = True) -> None:
        self.allow_raw_html = allow_raw_html
        self._md = MarkdownIt("commonmark", {"html": allow_raw_html})

    def render(self, markdown_text: str) -> str:
        """Render Markdown text to an HTML fragment."""
        return self._md.render(markdown_text)


_default_renderer = MarkdownRenderer()


def render(markdown_text: str) -> str:
    """Render with the default (raw-HTML passthrough) renderer."""
    return _default_renderer.render(markdown_text)
