"""Reader for the plain-text question bank served by the local bank server.

Blocks are separated by blank lines or a line holding only ``---``::

    ID: q1           (optional; defaults to the block's 1-based position)
    Q: Question text, markdown + LaTeX. Following lines belong to the
       question until the next marker.
    A: First option
    B: Second option
    ...              (A to F, consecutive, at least two)
    CORRECT: B

The server turns these into the same JSON records a remote bank returns.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
import re

from exam_app.core.models import Question, QuestionId

OPTION_LETTERS = "ABCDEF"
MIN_OPTIONS = 2

_MARKER = re.compile(r"^(ID|Q|CORRECT|[A-F])\s*:\s*(.*)$", re.IGNORECASE)


class QuestionImportError(Exception):
    """Raised when a question bank file cannot be parsed."""


def load_questions_from_file(file_path: Path) -> list[Question]:
    questions = parse_question_text(file_path.read_text(encoding="utf-8"))
    if not questions:
        raise QuestionImportError(f"{file_path} does not contain any questions.")
    return questions


def parse_question_text(text: str) -> list[Question]:
    questions: list[Question] = []
    seen: set[str] = set()
    for position, block in enumerate(_iter_blocks(text), start=1):
        question = _parse_block(block, default_id=position)
        if str(question.id) in seen:
            raise QuestionImportError(f"Duplicate question id '{question.id}'.")
        seen.add(str(question.id))
        questions.append(question)
    return questions


def _iter_blocks(text: str) -> Iterator[list[str]]:
    block: list[str] = []
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if line and line != "---":
            block.append(line)
        elif block:
            yield block
            block = []
    if block:
        yield block


def _parse_block(lines: list[str], default_id: int) -> Question:
    question_id: QuestionId = default_id
    sections: dict[str, list[str]] = {}
    correct: str | None = None
    open_section: str | None = None

    for line in lines:
        match = _MARKER.match(line)
        if match is None:
            if open_section is None:
                raise QuestionImportError(f"Encountered text outside of a known section: '{line}'.")
            sections[open_section].append(line)
            continue

        key, value = match.group(1).upper(), match.group(2).strip()
        open_section = None
        if key == "ID":
            if not value:
                raise QuestionImportError("ID must include a value.")
            question_id = int(value) if value.isdigit() else value
        elif key == "CORRECT":
            correct = value.upper()
        else:
            sections[key] = [value]
            open_section = key

    prompt = "\n".join(sections.pop("Q", [])).strip()
    if not prompt:
        raise QuestionImportError("Question text missing (Q: ...)")

    letters = OPTION_LETTERS[: len(sections)]
    if len(sections) < MIN_OPTIONS or "".join(sorted(sections)) != letters:
        raise QuestionImportError(
            "Options must be consecutive letters starting at A, with at least two options."
        )
    options = tuple("\n".join(sections[letter]).strip() for letter in letters)
    if not all(options):
        raise QuestionImportError("Option text cannot be empty.")
    if len(set(options)) != len(options):
        raise QuestionImportError("Option texts must be distinct.")

    if correct is None:
        raise QuestionImportError("CORRECT is required for every question.")
    if len(correct) != 1 or correct not in letters:
        raise QuestionImportError(f"CORRECT must be one of {', '.join(letters)}.")

    return Question(
        id=question_id,
        text=prompt,
        options=options,
        correct_answer=options[letters.index(correct)],
    )
