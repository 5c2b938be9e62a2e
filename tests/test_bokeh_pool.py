from bokeh_pool import BokehPool
from config import BokehConfig
from scheduler import RunState


def make_pool(clock, rng, **kwargs):
    config = BokehConfig(**{"count": 3, "leg_duration": 900, **kwargs})
    return BokehPool(config, rng=rng, time_source=clock)


def test_pool_is_built_on_construction(clock, rng):
    pool = make_pool(clock, rng)
    assert pool.run_state is RunState.BUILT
    assert len(pool.particles) == 3
    assert pool.color == (100, 100, 100, 150)


def test_default_config(rng):
    pool = BokehPool(rng=rng)
    assert len(pool.particles) == 20
    assert not pool.is_running


def test_lifecycle(clock, rng):
    pool = make_pool(clock, rng)
    pool.start()
    assert pool.is_running
    assert [p.active_leg.start_delay for p in pool.particles] == [0, 300, 600]

    pool.stop()
    assert pool.run_state is RunState.STOPPED
    assert len(pool.particles) == 3

    pool.start()
    assert pool.is_running


def test_layout_change_keeps_animations(clock, rng):
    pool = make_pool(clock, rng)
    pool.on_layout(400, 300)
    pool.start()
    legs = [p.active_leg for p in pool.particles]

    viewport = pool.viewport
    pool.on_layout(1000, 500, padding=(0, 0, 0, 100))

    assert pool.viewport is viewport
    assert (viewport.center_x, viewport.center_y, viewport.radius) == (500, 200, 200)
    assert pool.is_running
    assert [p.active_leg for p in pool.particles] == legs


def test_tick_uses_time_source(clock, rng):
    pool = make_pool(clock, rng, count=1)
    pool.start()
    leg = pool.particles[0].active_leg

    clock.advance(900)
    pool.tick()

    assert leg.finished
    assert pool.particles[0].active_leg is not leg


def test_rebuild_keeps_running(clock, rng):
    pool = make_pool(clock, rng)
    pool.start()
    pool.rebuild()
    assert pool.is_running
    assert len(pool.particles) == 3


def test_destroy_releases_particles(clock, rng):
    pool = make_pool(clock, rng)
    pool.start()
    particles = pool.particles
    pool.destroy()
    assert pool.run_state is RunState.IDLE
    assert pool.particles == ()
    assert all(p.active_leg is None for p in particles)

    # Host re-attach: start() builds a fresh pool.
    pool.start()
    assert len(pool.particles) == 3
