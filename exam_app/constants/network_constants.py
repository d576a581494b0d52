"""Network configuration constants for the exam application."""

import os

LOCAL_HOST: str = "127.0.0.1"
LOCAL_PORT: int = 8000

QUESTION_BANK_URL: str = os.environ.get(
    "EXAMQT_QUESTION_BANK_URL", f"http://{LOCAL_HOST}:{LOCAL_PORT}/api/questions"
)
RESULT_SUBMISSION_URL: str = os.environ.get(
    "EXAMQT_RESULT_URL", f"http://{LOCAL_HOST}:{LOCAL_PORT}/api/submit-test"
)
# Hosted banks may be cold-starting, so loading gets a generous bound.
LOAD_TIMEOUT_SECONDS: float = 30.0
REPORT_TIMEOUT_SECONDS: float = 15.0

LOCAL_BANK_FILE: str = os.environ.get("EXAMQT_LOCAL_BANK", "exam_questions.txt")
SERVER_STARTUP_TIMEOUT_SECONDS: float = 5.0
