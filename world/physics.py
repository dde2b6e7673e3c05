"""
neuron_canvas module: world/physics.py

Top-down 2D helpers shared by neurons and axons:
- euclidean distance
- vector normalisation with a zero-length guard
- scalar clamp + speed clamp
- bounds bounce (velocity reflection, no position correction)
"""

from __future__ import annotations
import math
from typing import Tuple


def distance(ax: float, ay: float, bx: float, by: float) -> float:
    return math.hypot(ax - bx, ay - by)


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def normalize(vx: float, vy: float, length: float = 1.0) -> Tuple[float, float]:
    """
    Rescale (vx, vy) to the given length.
    A zero vector is returned unchanged instead of dividing by zero.
    """
    mag = math.hypot(vx, vy)
    if mag <= 0.0:
        return vx, vy
    return vx / mag * length, vy / mag * length


def clamp_speed(vx: float, vy: float, max_speed: float) -> Tuple[float, float]:
    speed = math.hypot(vx, vy)
    if speed > max_speed:
        return normalize(vx, vy, max_speed)
    return vx, vy


def bounce(x: float, y: float, vx: float, vy: float, w: float, h: float) -> Tuple[float, float]:
    """
    Flip the velocity on any axis where the position left [0, w] x [0, h].
    The position itself is left alone, so a body can sit just outside for a frame.
    """
    if x < 0 or x > w:
        vx = -vx
    if y < 0 or y > h:
        vy = -vy
    return vx, vy
