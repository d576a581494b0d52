"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "ExamQt"

LOADING_TITLE: str = "Loading Questions..."
LOADING_MESSAGE: str = "Please wait while we prepare your test."
LOAD_ERROR_TITLE: str = "Error"
LOAD_ERROR_MESSAGE: str = "Failed to load questions. Please try again later."
RETRY_BUTTON: str = "Retry"

WELCOME_TITLE: str = "Welcome to the Test"
WELCOME_TEMPLATE: str = (
    "This test contains {count} questions and you have {minutes} minutes to complete it."
)
START_BUTTON: str = "Start Test"

REVIEW_BUTTON: str = "Review"
PREV_BUTTON: str = "Previous"
NEXT_BUTTON: str = "Next"
SUBMIT_BUTTON: str = "Submit Test"
HELP_BUTTON: str = "Help"
QUESTION_MATRIX_TITLE: str = "Question Matrix"
QUESTION_HEADER_TEMPLATE: str = "Question {number} of {total}"
MATRIX_COLUMNS: int = 5

CONFIRM_SUBMIT_TITLE: str = "Submit Test"
CONFIRM_SUBMIT_TEMPLATE: str = (
    "You have answered {answered} of {total} questions. Submit the test now?"
)

RESULT_TITLE: str = "Test Completed!"
RESULT_SCORE_HEADING: str = "Your Score"
RESULT_DETAIL_TEMPLATE: str = "{correct} out of {total} questions correct"
AUTO_SUBMITTED_MESSAGE: str = "Time is up. Your test was submitted automatically."
