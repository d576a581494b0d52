"""Exam-related constants shared across UI and core layers."""

TEST_DURATION_SECONDS: int = 60 * 60
TICK_INTERVAL_MS: int = 1000
TIME_WARNING_WINDOW_SECONDS: int = 5 * 60

# Lower bounds (inclusive) checked from the top down.
GRADE_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (90, "EXCELLENT"),
    (75, "VERY GOOD"),
    (60, "GOOD"),
)
FALLBACK_GRADE: str = "NEEDS IMPROVEMENT"
