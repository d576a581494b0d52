from __future__ import annotations

import pytest

from exam_app.core.exam_manager import ExamManager
from exam_app.core.models import ExamPhase
from exam_app.core.services.countdown import Countdown
from exam_fixtures import RecordingReporter, make_questions


def test_countdown_requires_positive_duration() -> None:
    with pytest.raises(ValueError):
        Countdown(0)


def test_countdown_does_not_tick_until_started() -> None:
    countdown = Countdown(3)
    assert countdown.tick() is False
    assert countdown.remaining_seconds == 3


def test_countdown_reports_expiry_once_and_stops() -> None:
    countdown = Countdown(2)
    countdown.start()
    assert countdown.tick() is False
    assert countdown.tick() is True
    assert countdown.is_running() is False
    assert countdown.tick() is False
    assert countdown.remaining_seconds == 0


def test_stopped_countdown_keeps_remaining_time() -> None:
    countdown = Countdown(10)
    countdown.start()
    countdown.tick()
    countdown.stop()
    countdown.tick()
    assert countdown.remaining_seconds == 9


def _started_manager(duration: int, reporter: RecordingReporter) -> ExamManager:
    manager = ExamManager(reporter=reporter, duration_seconds=duration)
    manager.install_questions(make_questions("A", "B"))
    manager.start()
    return manager


def test_ticks_before_start_do_nothing() -> None:
    manager = ExamManager(duration_seconds=5)
    manager.install_questions(make_questions("A"))
    assert manager.tick().time_left_seconds == 5


def test_timer_reaching_zero_submits_exactly_once() -> None:
    reporter = RecordingReporter()
    manager = _started_manager(3, reporter)
    manager.select_answer("q1", "A")

    remaining = [manager.tick().time_left_seconds for _ in range(2)]
    final = manager.tick()

    assert remaining == [2, 1]
    assert final.phase == ExamPhase.SUBMITTED
    assert final.time_left_seconds == 0
    assert final.auto_submitted is True
    assert final.score.correct == 1
    assert len(reporter.reports) == 1


def test_no_ticks_observed_after_auto_submit() -> None:
    reporter = RecordingReporter()
    manager = _started_manager(1, reporter)
    manager.tick()

    received = []
    manager.subscribe(received.append)
    for _ in range(3):
        snapshot = manager.tick()

    assert received == []
    assert snapshot.time_left_seconds == 0
    assert len(reporter.reports) == 1


def test_manual_submit_stops_the_countdown() -> None:
    reporter = RecordingReporter()
    manager = _started_manager(10, reporter)
    manager.tick()
    manager.submit()

    snapshot = manager.tick()

    assert snapshot.time_left_seconds == 9
    assert snapshot.auto_submitted is False
    assert len(reporter.reports) == 1
