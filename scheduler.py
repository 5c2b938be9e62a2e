# scheduler.py

import enum
import logging
import threading
import time
from collections import deque
from typing import Callable, List, Optional

from config import BokehConfig
from motion_planner import RandomMotionPlanner
from particle import Leg, Particle, Transform
from viewport import Viewport

logger = logging.getLogger("bokeh")


def monotonic_ms() -> float:
    """Default shared clock, in milliseconds."""
    return time.monotonic() * 1000.0


class RunState(enum.Enum):
    IDLE = "idle"          # No particles.
    BUILT = "built"        # Particles exist, no legs issued yet.
    RUNNING = "running"
    STOPPED = "stopped"    # Legs cancelled, particles retained.


class AnimationScheduler:
    """
    Owns the particle pool and drives the stagger and recycle state machine.

    Data Contract:
    - Inputs:
        - config (BokehConfig): Count, leg duration and curve for every leg.
        - viewport (Viewport): Shared, read-only geometry passed to the planner.
        - planner (RandomMotionPlanner): Target source. Built from `rng` when omitted.
        - time_source (callable): Returns the shared clock time in milliseconds.
    - Outputs: None. The pool is exposed read-only through `particles`.
    - Side Effects: Mutates particle transforms and legs.
    - Invariants:
        - The pool holds either 0 or exactly config.count particles.
        - Every particle has at most one active leg.
        - While running, the recycle queue holds each particle index exactly once.
        - build, start, stop, clear, rebuild and the completion handler share
          one lock, so a completion that races a stop() is dropped.
    """
    def __init__(
        self,
        config: BokehConfig,
        viewport: Viewport,
        planner: Optional[RandomMotionPlanner] = None,
        time_source: Optional[Callable[[], float]] = None,
        rng=None,
    ):
        self.config = config
        self.viewport = viewport
        self.planner = planner if planner is not None else RandomMotionPlanner(rng)
        self.time_source = time_source if time_source is not None else monotonic_ms

        self._particles: List[Particle] = []
        self._recycle_queue: deque = deque()
        self._state = RunState.IDLE
        self._lock = threading.RLock()

    # --- Read-only views ---

    @property
    def particles(self) -> tuple:
        return tuple(self._particles)

    @property
    def state(self) -> RunState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is RunState.RUNNING

    @property
    def recycle_order(self) -> tuple:
        """Particle indices in the order they will be recycled."""
        return tuple(self._recycle_queue)

    def start_delay(self, index: int) -> float:
        """Stagger of particle `index` in the initial wave."""
        return index * self.config.leg_duration / self.config.count

    # --- Lifecycle ---

    def build(self):
        """Replaces the pool with config.count freshly seeded particles. Issues no legs."""
        with self._lock:
            self._destroy_particles()

            for i in range(self.config.count):
                start = self.planner.plan(self.viewport)
                transform = Transform(translate_x=start.dx, translate_y=start.dy, opacity=0.0)
                scale = self.planner.plan_initial_scale()
                self._particles.append(Particle(i, transform, scale))

            self._state = RunState.BUILT
            logger.info(f"Bokeh pool built with {len(self._particles)} particles.")

    def start(self):
        """Launches the staggered wave. No-op when already running."""
        with self._lock:
            if self._state is RunState.RUNNING:
                return
            if not self._particles:
                self.build()

            now = self.time_source()
            self._recycle_queue = deque(p.index for p in self._particles)
            for particle in self._particles:
                leg = self._plan_leg(self.start_delay(particle.index))
                particle.apply_leg(leg, now)

            self._state = RunState.RUNNING
            logger.info(
                f"Bokeh pool started: {len(self._particles)} legs of {self.config.leg_duration} ms, "
                f"wave spread over {self.start_delay(len(self._particles) - 1)} ms."
            )

    def stop(self):
        """Cancels every leg, keeping the particles. No-op unless running with a pool."""
        with self._lock:
            if not self._particles or self._state is not RunState.RUNNING:
                return

            for particle in self._particles:
                particle.cancel()
            self._recycle_queue.clear()
            self._state = RunState.STOPPED
            logger.info("Bokeh pool stopped.")

    def clear(self):
        """Cancels every leg and destroys the pool."""
        with self._lock:
            self._destroy_particles()
            self._state = RunState.IDLE

    def rebuild(self):
        """Fresh pool with the same run-state: running pools restart a new wave."""
        with self._lock:
            was_running = self._state is RunState.RUNNING
            self.clear()
            self.build()
            if was_running:
                self.start()
            logger.debug(f"Bokeh pool rebuilt (was_running={was_running}).")

    # --- Clock & completion events ---

    def advance(self, now: Optional[float] = None):
        """
        Moves every particle to the shared clock time and dispatches natural
        leg completions to the recycle handler.
        """
        with self._lock:
            if now is None:
                now = self.time_source()

            for particle in self._particles:
                leg = particle.advance(now)
                # A recycled leg starts when the previous one ended, so it may
                # already be part way through (or done) at this frame.
                while leg is not None and self.on_leg_complete(particle.index, leg, particle.leg_end_time):
                    leg = particle.advance(now)

    def on_leg_complete(self, index: int, leg: Leg, now: Optional[float] = None) -> bool:
        """
        Recycles particle `index` after `leg` completed: the particle leaves the
        recycle queue, gets a new zero-delay leg and rejoins at the back.

        The event is dropped when the pool is not running, or when `leg` is no
        longer that particle's active leg (cancelled, rebuilt or already
        recycled). Returns True when a new leg was issued.
        """
        with self._lock:
            if self._state is not RunState.RUNNING:
                logger.debug(f"Dropped completion for particle {index}: pool is {self._state.value}.")
                return False

            if not 0 <= index < len(self._particles) or self._particles[index].active_leg is not leg:
                logger.debug(f"Dropped stale completion for particle {index}.")
                return False

            particle = self._particles[index]
            if self._recycle_queue and self._recycle_queue[0] != index:
                logger.debug(
                    f"Particle {index} completed out of order (queue front is {self._recycle_queue[0]})."
                )
            self._recycle_queue.remove(index)

            new_leg = self._plan_leg(0.0)
            self._recycle_queue.append(index)
            particle.apply_leg(new_leg, self.time_source() if now is None else now)

            logger.debug(
                f"Recycled particle {index} toward ({new_leg.target.dx:.1f}, {new_leg.target.dy:.1f}), "
                f"opacity {new_leg.target.opacity:.2f}."
            )
            return True

    # --- Helpers ---

    def _plan_leg(self, start_delay: float) -> Leg:
        return Leg(
            target=self.planner.plan(self.viewport),
            start_delay=start_delay,
            duration=self.config.leg_duration,
            curve=self.config.curve,
        )

    def _destroy_particles(self):
        for particle in self._particles:
            particle.cancel()
        self._particles.clear()
        self._recycle_queue.clear()
