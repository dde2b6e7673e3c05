"""
neuron_canvas module: world/ticker.py

Frame scheduler. Calls a frame callback once per tick, paced by a pygame
clock when one is given, back to back otherwise (headless runs, tests).
"""

from __future__ import annotations
from typing import Callable, Optional

import pygame

import config


class Ticker:
    def __init__(self, fps: int = config.TARGET_FPS, clock: Optional[pygame.time.Clock] = None):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.fps = fps
        self.clock = clock
        self.frames = 0
        self.running = False

    def stop(self) -> None:
        self.running = False

    def run(self, frame: Callable[[], None], max_frames: Optional[int] = None) -> int:
        """
        Tick until stop() is called (typically from inside frame) or
        max_frames ticks have run. Returns the number of ticks run by this call.
        """
        start = self.frames
        self.running = True
        while self.running:
            if max_frames is not None and self.frames - start >= max_frames:
                break
            if self.clock is not None:
                self.clock.tick(self.fps)
            frame()
            self.frames += 1
        self.running = False
        return self.frames - start
