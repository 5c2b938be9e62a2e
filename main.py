# main.py

import pygame
import constants
import logging
import logger_setup
import numpy as np
from bokeh_pool import BokehPool
from config import BokehConfig, load_config
from renderer import BokehRenderer

# Get the application's dedicated logger
logger = logging.getLogger("bokeh")

# Window events that hide or reveal the surface. Older pygame builds without
# SDL2 window events only get VIDEORESIZE and ACTIVEEVENT.
HIDE_EVENTS = {getattr(pygame, name) for name in ("WINDOWMINIMIZED", "WINDOWHIDDEN") if hasattr(pygame, name)}
SHOW_EVENTS = {getattr(pygame, name) for name in ("WINDOWRESTORED", "WINDOWSHOWN", "WINDOWEXPOSED") if hasattr(pygame, name)}


def run_loop(pool: BokehPool, renderer: BokehRenderer, screen: pygame.Surface, clock: pygame.time.Clock, padding):
    """
    The host loop: forwards lifecycle and layout events to the pool, advances
    it on pygame's tick clock and draws one frame per iteration.
    """
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode(event.size, pygame.RESIZABLE)
                pool.on_layout(event.w, event.h, padding)
            elif event.type in HIDE_EVENTS:
                logger.info("Window hidden, stopping bokeh.")
                pool.stop()
            elif event.type in SHOW_EVENTS:
                pool.start()

        pool.tick(pygame.time.get_ticks())

        screen.fill(constants.BACKGROUND_COLOR)
        renderer.draw(screen, pool.viewport, pool.particles, origin=padding[:2])
        pygame.display.flip()
        clock.tick(constants.FPS)


def main():
    """
    Main function to open a window and run a bokeh field until it is closed.
    """
    # --- Setup ---
    logger_setup.setup_logging()

    config = load_config()
    window = config.get('window', {})
    width = window.get('width', constants.WIDTH)
    height = window.get('height', constants.HEIGHT)
    padding = tuple(window.get('padding', (0, 0, 0, 0)))

    logger.info("Application starting...")
    logger.info(f"Loaded configuration: {config}")

    rng = np.random.default_rng(config.get('master_seed'))

    # --- Initialization ---
    pygame.init()
    screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
    pygame.display.set_caption(constants.TITLE)
    clock = pygame.time.Clock()

    bokeh_config = BokehConfig.from_dict(config.get('bokeh', {}))
    pool = BokehPool(bokeh_config, rng=rng, time_source=pygame.time.get_ticks)
    pool.on_layout(width, height, padding)
    renderer = BokehRenderer(pool.color)

    pool.start()
    try:
        run_loop(pool, renderer, screen, clock, padding)
    finally:
        pool.destroy()
        logger.info("Application shutting down.")
        pygame.quit()

if __name__ == "__main__":
    main()
