"""
Unit tests for the frame scheduler.
"""

import pytest

from world.ticker import Ticker
from world.world import World


class TestTicker:
    def test_runs_requested_number_of_frames(self):
        calls = []
        ticker = Ticker()
        ran = ticker.run(lambda: calls.append(1), max_frames=7)
        assert ran == 7
        assert len(calls) == 7
        assert ticker.frames == 7
        assert not ticker.running

    def test_stop_from_inside_frame_finishes_current_tick(self):
        ticker = Ticker()
        seen = []

        def frame():
            seen.append(ticker.frames)
            if len(seen) == 3:
                ticker.stop()

        assert ticker.run(frame) == 3
        assert seen == [0, 1, 2]

    def test_zero_frames(self):
        ticker = Ticker()
        assert ticker.run(lambda: pytest.fail("should not tick"), max_frames=0) == 0

    def test_frames_accumulate_across_runs(self):
        ticker = Ticker()
        ticker.run(lambda: None, max_frames=2)
        assert ticker.run(lambda: None, max_frames=3) == 3
        assert ticker.frames == 5

    def test_rejects_bad_fps(self):
        with pytest.raises(ValueError):
            Ticker(fps=0)

    def test_drives_world_headless(self):
        world = World.create(640, 480, seed=3)
        world.seed(10)
        Ticker().run(world.step, max_frames=25)
        assert world.frame_count == 25
