import pytest

from pumpy_pills.errors import ConfigError
from pumpy_pills.performance import PerformanceMonitor


def run_frames(monitor, frame_ms, count, start=0.0):
    monitor.start(start)
    t = start
    for _ in range(count):
        t += frame_ms
        monitor.update(t)
    return t


def test_fps_from_frame_times():
    monitor = PerformanceMonitor(update_interval=1000)
    run_frames(monitor, 20, 50)
    assert monitor.fps == 50
    assert monitor.frame_time == 20


def test_fps_waits_for_interval():
    monitor = PerformanceMonitor(update_interval=1000)
    run_frames(monitor, 20, 10)
    assert monitor.fps == 0


def test_steady_frames_have_no_jitter():
    monitor = PerformanceMonitor(history_size=10)
    run_frames(monitor, 16, 30)
    assert monitor.frame_time_variance == pytest.approx(0.0)


def test_uneven_frames_show_jitter():
    monitor = PerformanceMonitor(history_size=10)
    monitor.start(0)
    t = 0
    for i in range(30):
        t += 10 if i % 2 else 30
        monitor.update(t)
    assert monitor.frame_time_variance == pytest.approx(10.0)


def test_disabled_monitor_reports_zero():
    monitor = PerformanceMonitor()
    run_frames(monitor, 20, 60)
    monitor.toggle(False)
    assert monitor.fps == 0
    assert monitor.frame_time == 0.0
    assert monitor.frame_time_variance == 0.0


def test_empty_history_is_rejected():
    with pytest.raises(ConfigError):
        PerformanceMonitor(history_size=0)


def test_zero_interval_needs_elapsed_time():
    monitor = PerformanceMonitor(update_interval=0)
    monitor.start(100)
    monitor.update(100)
    assert monitor.fps == 0
    monitor.update(120)
    assert monitor.fps == 100
