# tests/unit/test_shared_state.py
"""
Unit tests for PositionFeedback and SharedState.
"""

import threading

from offboard_control.core.types import ORIGIN, Point3
from offboard_control.utils.shared_state import PositionFeedback, SharedState


class TestPositionFeedback:

    def test_defaults_to_origin(self):
        fb = PositionFeedback()
        assert fb.latest() == ORIGIN
        assert not fb.has_sample

    def test_last_write_wins(self):
        fb = PositionFeedback()
        fb.update(Point3(1.0, 2.0, 3.0))
        fb.update((4.0, 5.0, 6.0))
        assert fb.latest() == Point3(4.0, 5.0, 6.0)
        assert isinstance(fb.latest(), Point3)
        assert fb.has_sample

    def test_reads_are_stable_without_updates(self):
        fb = PositionFeedback()
        fb.update(Point3(1.0, 1.0, 1.0))
        assert fb.latest() == fb.latest()

    def test_update_from_another_thread(self):
        fb = PositionFeedback()
        writer = threading.Thread(target=lambda: [fb.update(Point3(i, i, i)) for i in range(1000)])
        writer.start()
        while writer.is_alive():
            x, y, z = fb.latest()
            assert x == y == z
        writer.join()
        assert fb.latest() == Point3(999, 999, 999)


class TestSharedState:

    def test_request_stop(self):
        state = SharedState()
        assert state.running
        state.request_stop('TEST COMPLETE')
        assert not state.running
        assert state.stop_reason == 'TEST COMPLETE'

    def test_each_state_has_its_own_feedback(self):
        a, b = SharedState(), SharedState()
        a.feedback.update(Point3(1.0, 0.0, 0.0))
        assert b.feedback.latest() == ORIGIN
