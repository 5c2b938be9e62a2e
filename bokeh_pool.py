# bokeh_pool.py

import logging
from typing import Callable, Optional

import numpy as np

from config import BokehConfig
from motion_planner import RandomMotionPlanner
from scheduler import AnimationScheduler, RunState
from viewport import Viewport

logger = logging.getLogger("bokeh")


class BokehPool:
    """
    Lifecycle API for one bokeh field, as consumed by a host surface.

    The host calls start() when it becomes visible, stop() when it is hidden,
    on_layout() on every size change and tick() once per frame. The renderer
    reads `particles`, `viewport` and `color`.

    Data Contract:
    - Inputs:
        - config (BokehConfig): Validated pool configuration. Defaults when omitted.
        - rng (np.random.Generator): Random source for every planned target.
        - time_source (callable): Shared animation clock in milliseconds.
    - Outputs: None.
    - Side Effects: Builds the pool on construction.
    """
    def __init__(
        self,
        config: Optional[BokehConfig] = None,
        rng: Optional[np.random.Generator] = None,
        time_source: Optional[Callable[[], float]] = None,
    ):
        self.config = config or BokehConfig()
        self.viewport = Viewport()
        self.scheduler = AnimationScheduler(
            self.config,
            self.viewport,
            planner=RandomMotionPlanner(rng),
            time_source=time_source,
        )
        self.scheduler.build()

        logger.info(
            f"BokehPool created: count={self.config.count}, leg_duration={self.config.leg_duration}, "
            f"color={self.config.color}, curve={self.config.curve.name}"
        )

    @property
    def particles(self) -> tuple:
        return self.scheduler.particles

    @property
    def color(self) -> tuple:
        return self.config.color

    @property
    def run_state(self) -> RunState:
        return self.scheduler.state

    @property
    def is_running(self) -> bool:
        return self.scheduler.is_running

    def build(self):
        self.scheduler.build()

    def start(self):
        self.scheduler.start()

    def stop(self):
        self.scheduler.stop()

    def rebuild(self):
        self.scheduler.rebuild()

    def destroy(self):
        """Host detach: cancels every leg and releases the particles."""
        self.scheduler.clear()
        logger.info("BokehPool destroyed.")

    def on_layout(self, width: float, height: float, padding=(0, 0, 0, 0)):
        """
        Recomputes the shared circle geometry. Running legs are left alone;
        the next frame simply draws with the new center and radius.
        """
        self.viewport.update_bounds(width, height, padding)
        logger.debug(
            f"Layout {width}x{height} padding={tuple(padding)} -> center=({self.viewport.center_x}, "
            f"{self.viewport.center_y}), radius={self.viewport.radius}"
        )

    def tick(self, now: Optional[float] = None):
        """Advances every particle to the shared clock time."""
        self.scheduler.advance(now)
