import pygame
import pytest

from particle import Particle, Transform
from renderer import BokehRenderer
from viewport import Viewport


@pytest.fixture
def screen():
    return pygame.Surface((200, 200))


def test_draws_opaque_particle_at_offset(screen):
    viewport = Viewport.from_bounds(200, 200)
    particle = Particle(0, Transform(translate_x=-50.0, translate_y=0.0, opacity=1.0), scale=0.2)

    BokehRenderer((200, 180, 160, 255), glow=False).draw(screen, viewport, [particle])

    assert tuple(screen.get_at((50, 100)))[:3] == (200, 180, 160)
    assert tuple(screen.get_at((100, 100)))[:3] == (0, 0, 0)


def test_transparent_particle_is_skipped(screen):
    viewport = Viewport.from_bounds(200, 200)
    particle = Particle(0, Transform(opacity=0.0), scale=0.5)

    BokehRenderer((255, 255, 255, 255), glow=False).draw(screen, viewport, [particle])

    assert tuple(screen.get_at((100, 100)))[:3] == (0, 0, 0)


def test_glow_pass_brightens_surroundings(screen):
    viewport = Viewport.from_bounds(200, 200)
    particle = Particle(0, Transform(opacity=1.0), scale=0.3)

    BokehRenderer((255, 255, 255, 255), glow=True).draw(screen, viewport, [particle])

    assert screen.get_at((100, 100))[0] == 255
    assert screen.get_at((100, 132))[0] > 0


def test_faint_disc_blends_over_opaque_one(screen):
    viewport = Viewport.from_bounds(200, 200)
    bright = Particle(0, Transform(opacity=1.0), scale=0.3)
    faint = Particle(1, Transform(opacity=0.05), scale=0.3)

    BokehRenderer((255, 0, 0, 255), glow=False).draw(screen, viewport, [bright, faint])

    assert screen.get_at((100, 100))[0] >= 250


def test_overlapping_translucent_discs_accumulate(screen):
    viewport = Viewport.from_bounds(200, 200)
    renderer = BokehRenderer((255, 255, 255, 128), glow=False)

    renderer.draw(screen, viewport, [Particle(0, Transform(opacity=1.0), scale=0.3)])
    single = screen.get_at((100, 100))[0]

    screen.fill((0, 0, 0))
    renderer.draw(screen, viewport, [Particle(i, Transform(opacity=1.0), scale=0.3) for i in range(2)])

    assert screen.get_at((100, 100))[0] > single
