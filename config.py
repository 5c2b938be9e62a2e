# config.py

import json
import logging
import math
from dataclasses import dataclass, field

import constants
from easing import EasingKind

logger = logging.getLogger("bokeh")


class ConfigurationError(ValueError):
    """Raised when a bokeh configuration cannot produce a valid pool."""


@dataclass(frozen=True)
class BokehConfig:
    """
    Immutable configuration for one bokeh pool.

    Data Contract:
    - count (int): Number of particles in the pool. Must be >= 1.
    - leg_duration (float): Milliseconds per animation leg. Also the span over
      which the initial stagger wave spreads. Must be > 0.
    - color (tuple): Shared RGBA fill, each channel an int in [0, 255].
    - curve (EasingKind): Easing applied to every leg of every particle.
    """
    count: int = constants.DEFAULT_COUNT
    leg_duration: float = constants.DEFAULT_LEG_DURATION
    color: tuple = field(default=constants.DEFAULT_COLOR)
    curve: EasingKind = EasingKind.LINEAR

    def __post_init__(self):
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise ConfigurationError(f"count must be an integer, got {self.count!r}")
        if self.count < 1:
            raise ConfigurationError(f"count must be at least 1, got {self.count}")

        duration = self.leg_duration
        if (
            isinstance(duration, bool)
            or not isinstance(duration, (int, float))
            or not math.isfinite(duration)
            or duration <= 0
        ):
            raise ConfigurationError(f"leg_duration must be a positive number, got {self.leg_duration!r}")

        try:
            color = tuple(self.color)
        except TypeError:
            raise ConfigurationError(f"color must be four integers in [0, 255], got {self.color!r}") from None
        if len(color) != 4 or not all(isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255 for c in color):
            raise ConfigurationError(f"color must be four integers in [0, 255], got {self.color!r}")
        # Frozen dataclass: normalise lists from JSON into tuples.
        object.__setattr__(self, "color", color)
        object.__setattr__(self, "curve", EasingKind.coerce(self.curve))

    @classmethod
    def from_dict(cls, section: dict) -> "BokehConfig":
        """
        Builds a validated config from the 'bokeh' section of config.json.
        Missing keys fall back to the defaults in constants.py.
        """
        if not isinstance(section, dict):
            raise ConfigurationError(f"bokeh section must be an object, got {type(section).__name__}")

        unknown = set(section) - {"count", "leg_duration", "color", "curve"}
        if unknown:
            logger.warning(f"Ignoring unknown bokeh options: {sorted(unknown)}")

        return cls(
            count=section.get("count", constants.DEFAULT_COUNT),
            leg_duration=section.get("leg_duration", constants.DEFAULT_LEG_DURATION),
            color=section.get("color", constants.DEFAULT_COLOR),
            curve=section.get("curve", EasingKind.LINEAR),
        )


def load_config(config_path='config.json') -> dict:
    """
    Reads the application configuration file.

    Data Contract:
    - Inputs: config_path (str) - Path to the JSON configuration file.
    - Outputs: The parsed configuration dictionary.
    - Side Effects: None.
    """
    with open(config_path, 'r') as f:
        config = json.load(f)

    if 'bokeh' in config and not isinstance(config['bokeh'], dict):
        raise ConfigurationError("'bokeh' section of the config file must be an object")
    return config
