"""
neuron_canvas module: neural/neuron.py

Drifting, decaying point neuron that owns its outgoing axons.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import random
from typing import List, Optional, TYPE_CHECKING

import config
from neural.axon import Axon, AxonState
from world.physics import bounce, clamp_speed, distance

if TYPE_CHECKING:
    from world.world import World


@dataclass
class Neuron:
    id: int
    x: float
    y: float
    radius: float = 3.0

    # dynamics
    vx: float = 0.0
    vy: float = 0.0
    max_speed: float = config.NEURON_MAX_SPEED

    activity: float = 1.0
    axons: List[Axon] = field(default_factory=list)

    @staticmethod
    def create(nid: int, x: float, y: float, rng: random.Random) -> "Neuron":
        return Neuron(
            id=nid,
            x=x,
            y=y,
            radius=rng.uniform(*config.NEURON_RADIUS_RANGE),
            vx=rng.uniform(-config.NEURON_START_SPEED, config.NEURON_START_SPEED),
            vy=rng.uniform(-config.NEURON_START_SPEED, config.NEURON_START_SPEED),
        )

    @property
    def opacity(self) -> float:
        return self.activity * config.NEURON_FILL_ALPHA

    @property
    def glow(self) -> float:
        return self.activity

    def boost_activity(self) -> None:
        self.activity = min(1.0, self.activity + config.CONNECT_ACTIVITY_BOOST)

    def targets(self, target_id: int) -> bool:
        return any(a.target_id == target_id for a in self.axons)

    def find_potential_connections(self, world: "World") -> Optional[Axon]:
        """
        Start at most one axon toward the first eligible neuron in world order.
        First match wins, not nearest. Returns the new axon, if any.
        """
        if len(self.axons) > config.MAX_AXONS_FOR_SEARCH:
            return None

        for other in world.neurons.values():
            if other is self or other.activity < config.CONNECTION_MIN_ACTIVITY:
                continue
            d = distance(self.x, self.y, other.x, other.y)
            if config.CONNECTION_MIN_DISTANCE < d < config.CONNECTION_DISTANCE and not self.targets(other.id):
                axon = Axon(self, other.id)
                self.axons.append(axon)
                return axon
        return None

    def update(self, world: "World") -> None:
        rng = world.rng

        # occasional direction change
        if rng.random() < config.VELOCITY_NUDGE_CHANCE:
            self.vx += rng.uniform(-config.VELOCITY_NUDGE, config.VELOCITY_NUDGE)
            self.vy += rng.uniform(-config.VELOCITY_NUDGE, config.VELOCITY_NUDGE)

        self.vx, self.vy = clamp_speed(self.vx, self.vy, self.max_speed)
        self.x += self.vx
        self.y += self.vy
        self.vx, self.vy = bounce(self.x, self.y, self.vx, self.vy, world.w, world.h)

        # mouse proximity replaces decay for this frame
        if distance(self.x, self.y, world.mouse_x, world.mouse_y) < config.MOUSE_INFLUENCE_RADIUS:
            self.activity = min(1.0, self.activity + config.MOUSE_ACTIVITY_BOOST)
        else:
            self.activity -= config.ACTIVITY_DECAY

        self.axons = [a for a in self.axons if a.state != AxonState.RETRACTED]
        for axon in self.axons:
            axon.update(world)

        if rng.random() < config.CONNECTION_SEARCH_CHANCE:
            self.find_potential_connections(world)
