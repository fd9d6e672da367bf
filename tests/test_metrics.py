import time

import pytest

from wordgrid.metrics import StageTimer


def test_stages_recorded():
    timer = StageTimer()
    with timer.stage("search"):
        time.sleep(0.01)
    with timer.stage("aggregate"):
        pass
    assert set(timer.timings) == {"search", "aggregate"}
    assert timer.timings["search"] >= 5.0
    assert set(timer.summary()) == {"search", "aggregate", "total"}


def test_repeated_stage_accumulates():
    timer = StageTimer()
    for _ in range(2):
        with timer.stage("search"):
            time.sleep(0.01)
    assert timer.timings["search"] >= 15.0


def test_stage_recorded_when_body_raises():
    timer = StageTimer()
    with pytest.raises(ValueError):
        with timer.stage("validate"):
            raise ValueError("bad grid")
    assert "validate" in timer.timings


def test_stop_fixes_total():
    timer = StageTimer()
    total = timer.stop()
    time.sleep(0.02)
    assert timer.total_ms == total
    assert timer.stop() == total
    assert timer.summary()["total"] == total


def test_total_keeps_running_until_stopped():
    timer = StageTimer()
    first = timer.total_ms
    time.sleep(0.02)
    assert timer.total_ms > first
