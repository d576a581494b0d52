from __future__ import annotations

from exam_app.core.markdown_math_renderer import MarkdownMathRenderer


def test_fragment_renders_markdown() -> None:
    html = MarkdownMathRenderer().render_fragment("**Bold** and $x^2$")
    assert "<strong>Bold</strong>" in html
    assert "$x^2$" in html


def test_empty_fragment_has_placeholder() -> None:
    assert "No content provided" in MarkdownMathRenderer().render_fragment("   ")


def test_raw_html_is_escaped_by_default() -> None:
    html = MarkdownMathRenderer().render_fragment("<script>alert(1)</script>")
    assert "<script>alert" not in html


def test_full_document_loads_mathjax_with_font_size() -> None:
    document = MarkdownMathRenderer().render_full_document("Prompt", font_size=18)
    assert "mathjax" in document.lower()
    assert "font-size: 18pt" in document
    assert "<p>Prompt</p>" in document
