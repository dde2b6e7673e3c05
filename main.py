"""
Live neuron field: neurons drift, grow axons toward active neighbours and fade.

Move the mouse to keep neurons alive and bend growing axons, click to spawn
neurons, Tab toggles the debug HUD.
"""

from __future__ import annotations
import argparse
import logging
from typing import List, Optional

import pygame

import config
from render import colors
from render.renderer import draw_hud, draw_world, fade
from world.ticker import Ticker
from world.world import World

log = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Mouse-reactive neuron field",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument("--width", type=int, default=config.SCREEN_W, help="Window width in pixels")
    p.add_argument("--height", type=int, default=config.SCREEN_H, help="Window height in pixels")
    p.add_argument("--fps", type=int, default=config.TARGET_FPS, help="Target frame rate")
    p.add_argument("--seed", type=int, default=None, help="RNG seed for a reproducible run")
    p.add_argument("--neurons", type=int, default=config.SEED_NEURONS, help="Neurons seeded at start")
    p.add_argument("--headless", action="store_true", help="Simulate without opening a window")
    p.add_argument("--frames", type=int, default=600, help="Frames to simulate in headless mode")
    p.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    return p.parse_args(argv)


def setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def handle_event(e: pygame.event.Event, world: World, ticker: Ticker) -> Optional[pygame.Surface]:
    """
    Feed one pygame event into the world. Returns a new display surface
    when the window was resized.
    """
    if e.type == pygame.QUIT:
        ticker.stop()
    elif e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE:
        ticker.stop()
    elif e.type == pygame.MOUSEMOTION:
        world.on_pointer_move(*e.pos)
    elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
        world.on_click(*e.pos)
    elif e.type == pygame.VIDEORESIZE:
        world.on_resize(e.w, e.h)
        screen = pygame.display.set_mode((world.w, world.h), pygame.RESIZABLE)
        screen.fill(colors.BG)
        return screen
    return None


def run_headless(world: World, frames: int) -> dict:
    ticker = Ticker()
    ran = ticker.run(world.step, max_frames=frames)
    stats = world.stats()
    log.info("headless run finished after %d frames: %s", ran, stats)
    return stats


def run_window(world: World, fps: int) -> None:
    pygame.init()
    screen = pygame.display.set_mode((world.w, world.h), pygame.RESIZABLE)
    pygame.display.set_caption("neuron_canvas")
    screen.fill(colors.BG)

    clock = pygame.time.Clock()
    ticker = Ticker(fps=fps, clock=clock)
    debug = False

    def frame() -> None:
        nonlocal screen, debug
        for e in pygame.event.get():
            if e.type == pygame.KEYDOWN and e.key == pygame.K_TAB:
                debug = not debug
                continue
            resized = handle_event(e, world, ticker)
            if resized is not None:
                screen = resized

        fade(screen)
        world.step()
        draw_world(screen, world)

        if debug:
            stats = world.stats()
            stats["fps"] = clock.get_fps()
            draw_hud(screen, stats)

        pygame.display.flip()

    try:
        ticker.run(frame)
    finally:
        log.info("shutting down: %s", world.stats())
        pygame.quit()


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    setup_logging(args.verbose)

    world = World.create(args.width, args.height, seed=args.seed)
    world.seed(args.neurons)
    log.info("world %dx%d, seed=%s", world.w, world.h, args.seed)

    if args.headless:
        run_headless(world, args.frames)
    else:
        run_window(world, args.fps)


if __name__ == "__main__":
    main()
