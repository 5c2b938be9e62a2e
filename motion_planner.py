# motion_planner.py

from dataclasses import dataclass
from typing import Optional

import numpy as np

import constants
from viewport import Viewport


@dataclass(frozen=True)
class MotionTarget:
    """Where one leg ends: an offset from the viewport center and an opacity."""
    dx: float
    dy: float
    opacity: float


class RandomMotionPlanner:
    """
    Picks random targets for animation legs.

    Data Contract:
    - Inputs: rng (np.random.Generator) - Source of randomness. Unseeded when omitted.
    - Outputs: MotionTarget instances and initial scales.
    - Side Effects: Consumes values from the generator. Holds no other state.
    """
    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    def _signed_offset(self) -> float:
        magnitude = self.rng.random() * constants.MAX_OFFSET
        sign = 1.0 if self.rng.random() < 0.5 else -1.0
        return float(magnitude * sign)

    def plan(self, viewport: Optional[Viewport] = None) -> MotionTarget:
        """
        Plans the target of one leg. The viewport does not clamp the offset,
        so particles are free to drift past the visible edge.
        """
        dx = self._signed_offset()
        dy = self._signed_offset()
        opacity = float(self.rng.random())
        return MotionTarget(dx=dx, dy=dy, opacity=opacity)

    def plan_initial_scale(self) -> float:
        """Scale is rolled once per particle, at creation, and never again."""
        return float(self.rng.random() * constants.MAX_INITIAL_SCALE)
