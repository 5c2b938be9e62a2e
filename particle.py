# particle.py

import logging
from dataclasses import dataclass, replace
from typing import Optional

import easing
from easing import EasingKind
from motion_planner import MotionTarget

logger = logging.getLogger("bokeh")


@dataclass
class Transform:
    """Animated channels of one particle. Offsets are relative to the viewport center."""
    translate_x: float = 0.0
    translate_y: float = 0.0
    opacity: float = 0.0


@dataclass(eq=False)
class Leg:
    """
    One animation in flight for one particle.

    Legs compare by identity: a completion event carries the leg it belongs
    to, and two legs with equal fields are still different legs.
    """
    target: MotionTarget
    start_delay: float
    duration: float
    curve: EasingKind = EasingKind.LINEAR
    finished: bool = False


class Particle:
    """
    Represents a single bokeh disc in the pool.

    Data Contract:
    - Inputs:
        - index (int): Stable position in the pool, used for its stagger delay.
        - transform (Transform): Initial offset and opacity.
        - scale (float): Fraction of the shared viewport radius. Fixed for life.
    - Outputs: None. The renderer reads transform and scale each frame.
    - Invariants: At most one active leg at a time. Scale is never modified
      by apply_leg() or cancel().
    """
    def __init__(self, index: int, transform: Transform, scale: float):
        self.index = index
        self.transform = transform
        self.scale = scale
        self.active_leg: Optional[Leg] = None

        self._origin = replace(transform)
        self._leg_applied_at = 0.0

        logger.debug(f"Particle created: index={index}, scale={scale:.3f}, transform={transform}")

    @property
    def is_animating(self) -> bool:
        return self.active_leg is not None and not self.active_leg.finished

    @property
    def leg_end_time(self) -> Optional[float]:
        """Shared clock time at which the active leg reaches its target."""
        leg = self.active_leg
        if leg is None:
            return None
        return self._leg_applied_at + leg.start_delay + leg.duration

    def apply_leg(self, leg: Leg, now: float):
        """
        Replaces the active leg. Interpolation starts from the current
        transform once leg.start_delay has elapsed after `now`.
        """
        self.active_leg = leg
        self._origin = replace(self.transform)
        self._leg_applied_at = now

    def cancel(self):
        """Freezes the transform where it is and drops the active leg. Safe when idle."""
        self.active_leg = None

    def advance(self, now: float) -> Optional[Leg]:
        """
        Updates the transform for the shared clock time `now`.

        All channels use the same curve and time base, so they reach the
        target together. Returns the leg the first time it completes
        naturally, otherwise None.
        """
        leg = self.active_leg
        if leg is None or leg.finished:
            return None

        elapsed = now - self._leg_applied_at - leg.start_delay
        if elapsed < 0:
            return None

        fraction = min(elapsed / leg.duration, 1.0)
        target = leg.target

        if fraction >= 1.0:
            self.transform = Transform(target.dx, target.dy, target.opacity)
            leg.finished = True
            return leg

        factor = float(easing.evaluate(leg.curve, fraction))
        origin = self._origin
        self.transform = Transform(
            translate_x=origin.translate_x + (target.dx - origin.translate_x) * factor,
            translate_y=origin.translate_y + (target.dy - origin.translate_y) * factor,
            opacity=origin.opacity + (target.opacity - origin.opacity) * factor,
        )
        return None
