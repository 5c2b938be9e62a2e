# renderer.py

import pygame

import constants
from viewport import Viewport


class BokehRenderer:
    """
    Draws a bokeh pool onto a pygame surface.

    Every particle is the same filled circle, shifted by its translate offset,
    sized by its scale and faded by its opacity. An optional glow pass blurs
    the layer by scaling it down and back up, then adds it on top.

    Data Contract:
    - Inputs: color (tuple) - Shared RGBA fill.
    - Outputs: None. Draws onto the surface passed to draw().
    - Side Effects: Caches one SRCALPHA layer per target size.
    """
    def __init__(self, color: tuple, glow: bool = True):
        self.color = color
        self.glow = glow
        self._layer = None

    def _layer_for(self, size: tuple) -> pygame.Surface:
        if self._layer is None or self._layer.get_size() != size:
            self._layer = pygame.Surface(size, pygame.SRCALPHA)
        return self._layer

    def draw(self, screen: pygame.Surface, viewport: Viewport, particles, origin=(0, 0)):
        """
        Draws all particles. `origin` is the top-left padding offset of the
        viewport inside `screen`.
        """
        layer = self._layer_for(screen.get_size())
        layer.fill((0, 0, 0, 0))

        r, g, b, a = self.color
        for particle in particles:
            alpha = int(a * min(max(particle.transform.opacity, 0.0), 1.0))
            radius = int(viewport.radius * particle.scale)
            if alpha <= 0 or radius <= 0:
                continue

            center_x = int(origin[0] + viewport.center_x + particle.transform.translate_x)
            center_y = int(origin[1] + viewport.center_y + particle.transform.translate_y)

            # draw.circle overwrites alpha; blitting composites overlaps.
            disc = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
            pygame.draw.circle(disc, (r, g, b, alpha), (radius, radius), radius)
            layer.blit(disc, (center_x - radius, center_y - radius))

        if self.glow:
            self._draw_glow(screen, layer)
        screen.blit(layer, (0, 0))

    def _draw_glow(self, screen: pygame.Surface, layer: pygame.Surface):
        width, height = layer.get_size()
        scale = constants.GLOW_RADIUS
        scaled_size = (max(width // scale, 1), max(height // scale, 1))
        scaled_surface = pygame.transform.smoothscale(layer, scaled_size)
        blurred_surface = pygame.transform.smoothscale(scaled_surface, (width, height))

        intensity = constants.GLOW_INTENSITY
        blurred_surface.fill((intensity, intensity, intensity), special_flags=pygame.BLEND_RGB_MULT)
        screen.blit(blurred_surface, (0, 0), special_flags=pygame.BLEND_RGB_ADD)
