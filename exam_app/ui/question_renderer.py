"""Question rendering utilities for displaying exam prompts."""

from __future__ import annotations

from exam_app.core.markdown_math_renderer import renderer


def render_question_prompt(question_text: str, font_size: int = 14) -> str:
    """Render a question prompt as a full HTML document for QWebEngineView.

    Options are shown as native radio buttons, so only the prompt goes
    through the markdown pipeline.
    """
    return renderer.render_full_document(
        question_text.strip() or "(No question text)", font_size=font_size
    )
