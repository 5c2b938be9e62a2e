# viewport.py

from dataclasses import dataclass


@dataclass
class Viewport:
    """
    Shared circle geometry for every particle.

    Recomputed whenever the host reports a size change. Particles never own a
    copy; they only differ by their transform.
    """
    center_x: float = 0.0
    center_y: float = 0.0
    radius: float = 0.0

    def update_bounds(self, width: float, height: float, padding=(0, 0, 0, 0)):
        """
        Recomputes center and radius from host bounds.

        - Inputs:
            - width, height: Outer size reported by the host, in pixels.
            - padding: (left, top, right, bottom) insets.
        """
        left, top, right, bottom = padding
        inner_width = max(width - left - right, 0)
        inner_height = max(height - top - bottom, 0)

        self.center_x = inner_width * 0.5
        self.center_y = inner_height * 0.5
        self.radius = min(inner_width, inner_height) * 0.5

    @classmethod
    def from_bounds(cls, width: float, height: float, padding=(0, 0, 0, 0)) -> "Viewport":
        viewport = cls()
        viewport.update_bounds(width, height, padding)
        return viewport
