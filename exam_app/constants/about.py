"""Static metadata describing ExamQt."""

APP_NAME = "ExamQt"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "ExamQt presents a timed multiple-choice test, tracks which questions are "
    "answered, skipped or flagged for review, and reports the final result to a collector."
)

HELP_TEXT = (
    "Select an option to answer the current question. Use Next and Previous to move "
    "through the test, or click a number in the question matrix to jump directly.\n\n"
    "Review flags the current question so you can come back to it later. The test is "
    "submitted automatically when the timer reaches 00:00."
)
