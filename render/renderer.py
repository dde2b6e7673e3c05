"""
neuron_canvas module: render/renderer.py

Pygame rendering of the neuron field.

Alpha-blended primitives go onto an SRCALPHA layer that is blitted over the
screen, so each frame's drawing blends with the fading trail underneath.
"""

from __future__ import annotations
import pygame

import config
from neural.axon import Axon
from neural.neuron import Neuron
from render import colors
from world.physics import clamp
from world.world import World


def _alpha(a: float) -> int:
    return int(clamp(a, 0.0, 1.0) * 255)


def new_layer(screen: pygame.Surface) -> pygame.Surface:
    return pygame.Surface(screen.get_size(), pygame.SRCALPHA)


def fade(screen: pygame.Surface, alpha: float = config.TRAIL_ALPHA) -> None:
    # translucent black wash instead of a clear, leaving motion trails
    veil = new_layer(screen)
    veil.fill((*colors.BG, _alpha(alpha)))
    screen.blit(veil, (0, 0))


def draw_axon(layer: pygame.Surface, axon: Axon, world: World) -> None:
    if axon.is_fully_retracted:
        return
    pts = axon.points()
    if len(pts) < 2:
        return
    col = (*colors.AXON, _alpha(axon.opacity(world)))
    pygame.draw.lines(layer, col, False, pts, config.AXON_WIDTH)


def draw_neuron(layer: pygame.Surface, n: Neuron) -> None:
    # glow: concentric discs fading outward, intensity follows activity
    steps = config.NEURON_GLOW_LAYERS
    for i in range(steps, 0, -1):
        r = n.radius + config.NEURON_GLOW_RADIUS * i / steps
        a = n.glow * 0.12 * (1.0 - (i - 1) / steps)
        pygame.draw.circle(layer, (*colors.GLOW, _alpha(a)), (n.x, n.y), r)

    pygame.draw.circle(layer, (*colors.NEURON, _alpha(n.opacity)), (n.x, n.y), n.radius)


def draw_world(screen: pygame.Surface, world: World) -> None:
    # axons first so neurons sit on top
    axon_layer = new_layer(screen)
    for axon in world.iter_axons():
        draw_axon(axon_layer, axon, world)
    screen.blit(axon_layer, (0, 0))

    neuron_layer = new_layer(screen)
    for n in world.neurons.values():
        draw_neuron(neuron_layer, n)
    screen.blit(neuron_layer, (0, 0))


def draw_hud(screen: pygame.Surface, stats: dict) -> None:
    font = pygame.font.Font(None, 22)

    lines = [
        f"Neurons: {stats.get('neurons', 0)}/{config.MAX_NEURONS}",
        f"Axons: {stats.get('axons', 0)}  (grow {stats.get('growing', 0)} / "
        f"done {stats.get('complete', 0)} / retract {stats.get('retracting', 0)})",
        f"Spawned: {stats.get('spawned', 0)}  Culled: {stats.get('culled', 0)}",
        f"Avg activity: {stats.get('avg_activity', 0.0):.2f}",
        f"Frame: {stats.get('frame', 0)}  FPS: {stats.get('fps', 0.0):.0f}",
    ]

    y = 10
    for line in lines:
        txt = font.render(line, True, colors.HUD_TEXT)
        screen.blit(txt, (12, y))
        y += 18
