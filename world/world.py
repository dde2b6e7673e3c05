"""
neuron_canvas module: world/world.py

World state container: neurons, pointer, canvas bounds and the shared RNG.
All input handlers mutate state between steps only.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import random
from typing import Dict, Iterator, Optional

import config
from neural.axon import Axon, AxonState
from neural.neuron import Neuron

log = logging.getLogger(__name__)


@dataclass
class World:
    w: int
    h: int
    mouse_x: float
    mouse_y: float
    rng: random.Random
    neurons: Dict[int, Neuron] = field(default_factory=dict)
    next_neuron_id: int = 0

    # bookkeeping
    spawned: int = 0
    culled: int = 0
    frame_count: int = 0

    @staticmethod
    def create(w: int, h: int, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> "World":
        if w <= 0 or h <= 0:
            raise ValueError(f"canvas size must be positive, got {w}x{h}")
        if rng is None:
            rng = random.Random(seed)
        return World(w=w, h=h, mouse_x=w / 2, mouse_y=h / 2, rng=rng)

    def add_neuron(self, x: float, y: float) -> Optional[Neuron]:
        if len(self.neurons) >= config.MAX_NEURONS:
            return None
        n = Neuron.create(self.next_neuron_id, x, y, self.rng)
        self.next_neuron_id += 1
        # scan before insertion so the newcomer never considers itself
        n.find_potential_connections(self)
        self.neurons[n.id] = n
        self.spawned += 1
        return n

    def seed(self, n: int = config.SEED_NEURONS) -> int:
        added = 0
        for _ in range(n):
            x = self.rng.uniform(0, self.w)
            y = self.rng.uniform(0, self.h)
            if self.add_neuron(x, y) is None:
                break
            added += 1
        log.info("seeded %d neurons (%d requested)", added, n)
        return added

    def on_click(self, x: float, y: float) -> int:
        j = config.CLICK_SPAWN_JITTER
        added = 0
        for _ in range(config.CLICK_SPAWN_BATCH):
            if self.add_neuron(x + self.rng.uniform(-j, j), y + self.rng.uniform(-j, j)) is None:
                break
            added += 1
        log.debug("click at (%.0f, %.0f) spawned %d neurons", x, y, added)
        return added

    def on_pointer_move(self, x: float, y: float) -> None:
        self.mouse_x = x
        self.mouse_y = y

    def on_resize(self, w: int, h: int) -> None:
        if w <= 0 or h <= 0:
            log.debug("ignoring resize to %dx%d", w, h)
            return
        self.w = w
        self.h = h
        log.info("canvas resized to %dx%d", w, h)

    def cull(self) -> int:
        floor = config.CULL_ACTIVITY + config.CULL_TOLERANCE
        dead = [nid for nid, n in self.neurons.items() if n.activity <= floor]
        for nid in dead:
            del self.neurons[nid]
        if dead:
            self.culled += len(dead)
            log.debug("culled %d inactive neurons", len(dead))
        return len(dead)

    def step(self) -> None:
        self.cull()
        for n in list(self.neurons.values()):
            n.update(self)
        self.frame_count += 1

    def iter_axons(self) -> Iterator[Axon]:
        for n in self.neurons.values():
            yield from n.axons

    def axon_count(self) -> int:
        return sum(len(n.axons) for n in self.neurons.values())

    def stats(self) -> dict:
        by_state = {s: 0 for s in AxonState}
        for a in self.iter_axons():
            by_state[a.state] += 1
        avg_activity = (
            sum(n.activity for n in self.neurons.values()) / len(self.neurons) if self.neurons else 0.0
        )
        return {
            "neurons": len(self.neurons),
            "axons": sum(by_state.values()),
            "growing": by_state[AxonState.GROWING],
            "complete": by_state[AxonState.COMPLETE],
            "retracting": by_state[AxonState.RETRACTING],
            "avg_activity": avg_activity,
            "spawned": self.spawned,
            "culled": self.culled,
            "frame": self.frame_count,
        }
