"""Scoring and result formatting helpers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from exam_app.constants.exam_constants import FALLBACK_GRADE, GRADE_THRESHOLDS
from exam_app.core.models import Question, QuestionId, QuestionRuntimeState, ScoreSummary


def score(
    questions: Iterable[Question],
    runtime_states: Mapping[QuestionId, QuestionRuntimeState],
) -> ScoreSummary:
    """Count exact matches between selected and correct options.

    Matching is case-sensitive with no normalisation. Review flags play no
    part: only the selected option matters.
    """
    correct = 0
    total = 0
    for question in questions:
        total += 1
        state = runtime_states.get(question.id)
        if state is not None and state.selected_option == question.correct_answer:
            correct += 1

    if total == 0:
        raise ValueError("Cannot score a test without questions.")

    # Integer round-half-up of 100 * correct / total.
    percentage = (200 * correct + total) // (2 * total)
    return ScoreSummary(correct=correct, total=total, percentage=percentage)


def grade_for(percentage: int) -> str:
    for threshold, label in GRADE_THRESHOLDS:
        if percentage >= threshold:
            return label
    return FALLBACK_GRADE


def format_time_left(seconds: int) -> str:
    """Render remaining seconds as MM:SS."""
    seconds = max(0, seconds)
    minutes, remainder = divmod(seconds, 60)
    return f"{minutes:02d}:{remainder:02d}"
