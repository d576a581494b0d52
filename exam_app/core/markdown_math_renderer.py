"""Markdown + LaTeX rendering for question prompts.

Prompts are converted to HTML with markdown-it; the math itself is left in
``$...$`` / ``$$...$$`` delimiters and typeset by MathJax inside the Qt web
view when the page loads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from html import escape

from markdown_it import MarkdownIt

MATHJAX_URL = "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"
EMPTY_PROMPT_HTML = "<p><em>No content provided.</em></p>"

_PAGE = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>{title}</title>
    <style>
      body {{ font-family: 'Segoe UI', system-ui, sans-serif; margin: 0; padding: 1rem; background: transparent; }}
      .prompt {{ font-size: {font_size}pt; line-height: 1.5; }}
      .prompt pre {{ white-space: pre-wrap; }}
    </style>
    <script>
      window.MathJax = {{ tex: {{ inlineMath: [['$','$']], displayMath: [['$$','$$']] }} }};
    </script>
    <script defer src="{mathjax_url}"></script>
  </head>
  <body>
    <div class="prompt">{body}</div>
  </body>
</html>"""


@dataclass(slots=True)
class MarkdownMathRenderer:
    """Turns prompt markup into an HTML fragment or a standalone page."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = MarkdownIt("commonmark", {"html": self.enable_html}).enable(
            ["table", "strikethrough"]
        )

    def render_fragment(self, markdown_text: str) -> str:
        text = markdown_text.strip()
        if not text:
            return EMPTY_PROMPT_HTML
        return self._markdown.render(text)

    def wrap_with_mathjax(self, body_html: str, title: str = "ExamQt", font_size: int = 14) -> str:
        return _PAGE.format(
            title=escape(title),
            font_size=font_size,
            mathjax_url=MATHJAX_URL,
            body=body_html,
        )

    def render_full_document(self, markdown_text: str, title: str = "ExamQt", font_size: int = 14) -> str:
        """Render the prompt and embed it in a page that loads MathJax."""
        return self.wrap_with_mathjax(
            self.render_fragment(markdown_text), title=title, font_size=font_size
        )


# Shared instance; rendering only happens on the Qt GUI thread.
renderer = MarkdownMathRenderer()
