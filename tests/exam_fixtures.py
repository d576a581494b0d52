from __future__ import annotations

from exam_app.core.errors import LoadError
from exam_app.core.models import ExamSnapshot, Question


class RecordingReporter:
    def __init__(self) -> None:
        self.reports: list[ExamSnapshot] = []

    def report(self, snapshot: ExamSnapshot) -> None:
        self.reports.append(snapshot)


class StaticLoader:
    def __init__(self, questions: list[Question]) -> None:
        self.questions = questions
        self.calls = 0

    def load(self) -> list[Question]:
        self.calls += 1
        return list(self.questions)


class FlakyLoader(StaticLoader):
    """Fails the first `failures` calls, then returns the questions."""

    def __init__(self, questions: list[Question], failures: int = 1) -> None:
        super().__init__(questions)
        self.failures = failures

    def load(self) -> list[Question]:
        self.calls += 1
        if self.calls <= self.failures:
            raise LoadError("question bank unavailable")
        return list(self.questions)


def make_questions(*correct_answers: str) -> list[Question]:
    return [
        Question(
            id=f"q{index}",
            text=f"Question {index}?",
            options=("A", "B", "C", "D"),
            correct_answer=answer,
        )
        for index, answer in enumerate(correct_answers, start=1)
    ]


class BrokenLoader:
    """Raises an error that is not a LoadError on every call."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error or RuntimeError("bank client crashed")
        self.calls = 0

    def load(self) -> list[Question]:
        self.calls += 1
        raise self.error
