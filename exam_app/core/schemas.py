"""Wire schemas shared by the HTTP loader, the reporter and the local server."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from exam_app.core.models import ExamSnapshot, Question, QuestionStatus


class QuestionRecord(BaseModel):
    """Question as served by the question bank."""

    model_config = ConfigDict(populate_by_name=True)

    id: int | str
    question: str
    options: list[str]
    correct_answer: str = Field(alias="correctAnswer")

    def to_question(self) -> Question:
        return Question(
            id=self.id,
            text=self.question,
            options=tuple(self.options),
            correct_answer=self.correct_answer,
        )

    @classmethod
    def from_question(cls, question: Question) -> QuestionRecord:
        return cls(
            id=question.id,
            question=question.text,
            options=list(question.options),
            correct_answer=question.correct_answer,
        )


class SubmittedQuestionRecord(QuestionRecord):
    """Question annotated with the final status and the chosen option."""

    status: QuestionStatus
    selected_answers: str | None = Field(default=None, alias="selectedAnswers")


class SubmissionPayload(BaseModel):
    """Body posted to the result collector."""

    questions: list[SubmittedQuestionRecord]

    @classmethod
    def from_snapshot(cls, snapshot: ExamSnapshot) -> SubmissionPayload:
        return cls(
            questions=[
                SubmittedQuestionRecord(
                    id=entry.question.id,
                    question=entry.question.text,
                    options=list(entry.question.options),
                    correct_answer=entry.question.correct_answer,
                    status=entry.status,
                    selected_answers=entry.selected_option,
                )
                for entry in snapshot.questions
            ]
        )

    def to_wire(self) -> dict[str, object]:
        return self.model_dump(mode="json", by_alias=True)


QUESTION_LIST_ADAPTER = TypeAdapter(list[QuestionRecord])
