"""
Thread tests for the buffered-mode heartbeat spinner.
"""

from __future__ import annotations

import time

from nonogram.utils.ui.core.heartbeat import SPINNER_FRAMES, Heartbeat

from conftest import FakeDevice


def test_heartbeat_spins_and_erases_on_stop() -> None:
    """Verify frames are written while running and erased on stop."""
    device = FakeDevice(redirected=False)
    heartbeat = Heartbeat(device, interval=0.01)

    heartbeat.start()
    assert heartbeat.running
    time.sleep(0.1)
    heartbeat.stop()

    outputs = [text for _, text in device.writes]
    assert not heartbeat.running
    assert outputs[-1] == " \b"
    frames = outputs[:-1]
    assert frames
    assert all(len(f) == 2 and f[0] in SPINNER_FRAMES and f[1] == "\b" for f in frames)


def test_stop_halts_the_thread() -> None:
    """Verify no frames are written after stop returns."""
    device = FakeDevice(redirected=False)
    heartbeat = Heartbeat(device, interval=0.01)
    heartbeat.start()
    time.sleep(0.05)
    heartbeat.stop()
    written = len(device.writes)
    time.sleep(0.1)

    assert len(device.writes) == written


def test_start_and_stop_are_idempotent() -> None:
    device = FakeDevice(redirected=False)
    heartbeat = Heartbeat(device, interval=0.01)

    heartbeat.stop()
    assert device.writes == []

    heartbeat.start()
    first = heartbeat._thread
    heartbeat.start()
    assert heartbeat._thread is first
    heartbeat.stop()
    heartbeat.stop()
    assert [text for _, text in device.writes].count(" \b") == 1


def test_failing_device_stops_quietly() -> None:
    device = FakeDevice(redirected=False, fail_writes=True)
    heartbeat = Heartbeat(device, interval=0.01)
    heartbeat.start()
    time.sleep(0.05)
    heartbeat.stop()

    assert not heartbeat.running
