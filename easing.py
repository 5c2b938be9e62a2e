# easing.py

import enum
import logging

import numpy as np

logger = logging.getLogger("bokeh")


class EasingKind(enum.IntEnum):
    """Named interpolation curves. Integer codes match the config file values."""
    LINEAR = 0
    ACCELERATE = 1
    DECELERATE = 2
    ACCELERATE_DECELERATE = 3

    @classmethod
    def coerce(cls, value) -> "EasingKind":
        """
        Resolves an enum member, integer code or name to a curve.
        Anything unrecognised falls back to LINEAR.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().upper().replace("-", "_")
            if name in cls.__members__:
                return cls[name]
        elif isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass

        logger.warning(f"Unknown easing curve {value!r}, using LINEAR.")
        return cls.LINEAR


def evaluate(kind, t):
    """
    Maps elapsed fraction to interpolation fraction.

    Data Contract:
    - Inputs:
        - kind: An EasingKind (unknown values are treated as LINEAR).
        - t (float or np.ndarray): Elapsed fraction, clamped into [0, 1].
    - Outputs: Interpolation factor in [0, 1], same shape as t.
    - Invariants: evaluate(kind, 0) == 0 and evaluate(kind, 1) == 1 for every kind.
    """
    t = np.clip(t, 0.0, 1.0)

    if kind == EasingKind.ACCELERATE:
        return t * t
    if kind == EasingKind.DECELERATE:
        return 1.0 - (1.0 - t) * (1.0 - t)
    if kind == EasingKind.ACCELERATE_DECELERATE:
        return np.cos((t + 1.0) * np.pi) / 2.0 + 0.5
    return t
