"""
neuron_canvas module: neural/axon.py

Growing/retracting polyline from a source neuron toward a target neuron.

State machine:
  GROWING -> COMPLETE                  (terminal, path frozen)
  GROWING -> RETRACTING -> RETRACTED   (terminal, owner drops it)
"""

from __future__ import annotations
import logging
from enum import Enum
from typing import List, Optional, Tuple, TYPE_CHECKING

import config
from world.physics import distance, normalize

if TYPE_CHECKING:
    from neural.neuron import Neuron
    from world.world import World

log = logging.getLogger(__name__)

Point = Tuple[float, float]


class AxonState(Enum):
    GROWING = 0
    COMPLETE = 1
    RETRACTING = 2
    RETRACTED = 3


class Axon:
    def __init__(self, source: "Neuron", target_id: int):
        # source owns this axon; target is only looked up through the world
        self.source = source
        self.target_id = target_id
        self.path: List[Point] = [(source.x, source.y)]
        self.state = AxonState.GROWING

    def __repr__(self) -> str:
        return (
            f"Axon(source={self.source.id}, target={self.target_id}, "
            f"state={self.state.name}, points={len(self.path)})"
        )

    @property
    def is_complete(self) -> bool:
        return self.state == AxonState.COMPLETE

    @property
    def is_retracting(self) -> bool:
        return self.state == AxonState.RETRACTING

    @property
    def is_fully_retracted(self) -> bool:
        return self.state == AxonState.RETRACTED

    def target(self, world: "World") -> Optional["Neuron"]:
        return world.neurons.get(self.target_id)

    def update(self, world: "World") -> None:
        self.path[0] = (self.source.x, self.source.y)

        if self.state == AxonState.RETRACTING:
            if len(self.path) > 1:
                self.path.pop()
            else:
                self.state = AxonState.RETRACTED
            return

        if self.state != AxonState.GROWING:
            return

        target = self.target(world)
        if target is None:
            log.debug("axon %d->%d lost its target, retracting", self.source.id, self.target_id)
            self.state = AxonState.RETRACTING
            return

        self._grow(world, target)

    def _grow(self, world: "World", target: "Neuron") -> None:
        lx, ly = self.path[-1]

        dx_target = target.x - lx
        dy_target = target.y - ly
        dx_mouse = world.mouse_x - lx
        dy_mouse = world.mouse_y - ly

        dist_mouse = distance(world.mouse_x, world.mouse_y, lx, ly)
        influence = max(0.0, 1.0 - dist_mouse / config.AXON_MOUSE_RANGE)
        pull = influence * config.AXON_MOUSE_WEIGHT

        vx, vy = normalize(
            dx_target + dx_mouse * pull,
            dy_target + dy_mouse * pull,
            config.GROWTH_SPEED,
        )
        vx += world.rng.uniform(-config.GROWTH_JITTER, config.GROWTH_JITTER)
        vy += world.rng.uniform(-config.GROWTH_JITTER, config.GROWTH_JITTER)

        nx, ny = lx + vx, ly + vy
        self.path.append((nx, ny))

        if distance(nx, ny, target.x, target.y) < config.AXON_CONNECT_DISTANCE:
            self.state = AxonState.COMPLETE
            target.boost_activity()
            log.debug("axon %d->%d connected after %d points", self.source.id, self.target_id, len(self.path))
        elif len(self.path) > config.AXON_MAX_LENGTH:
            self.state = AxonState.RETRACTING
            log.debug("axon %d->%d ran out of length, retracting", self.source.id, self.target_id)

    def opacity(self, world: "World") -> float:
        """
        Stroke alpha in [0, 0.3]. A target that is gone reads as fully active.
        """
        target = self.target(world)
        target_activity = 1.0 if target is None else target.activity
        return config.AXON_ALPHA * min(self.source.activity, target_activity)

    def points(self) -> List[Point]:
        # start from the live source position, not the pinned copy
        return [(self.source.x, self.source.y)] + self.path[1:]
