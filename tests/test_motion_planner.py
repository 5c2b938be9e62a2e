import numpy as np

from motion_planner import MotionTarget, RandomMotionPlanner
from viewport import Viewport


def test_plan_ranges(rng):
    planner = RandomMotionPlanner(rng)
    targets = [planner.plan(Viewport.from_bounds(100, 100)) for _ in range(500)]

    dxs = np.array([t.dx for t in targets])
    dys = np.array([t.dy for t in targets])
    opacities = np.array([t.opacity for t in targets])

    assert np.all(np.abs(dxs) <= 500) and np.all(np.abs(dys) <= 500)
    # Offsets are not clamped to the viewport and take both signs.
    assert dxs.min() < -50 < 50 < dxs.max()
    assert dys.min() < 0 < dys.max()
    assert np.all((opacities >= 0) & (opacities <= 1))


def test_plan_returns_plain_floats(rng):
    target = RandomMotionPlanner(rng).plan()
    assert isinstance(target, MotionTarget)
    assert all(type(v) is float for v in (target.dx, target.dy, target.opacity))


def test_initial_scale_range(rng):
    planner = RandomMotionPlanner(rng)
    scales = [planner.plan_initial_scale() for _ in range(500)]
    assert min(scales) >= 0.0
    assert max(scales) <= 0.5
    assert max(scales) > 0.4


def test_unseeded_planner_works():
    target = RandomMotionPlanner().plan()
    assert -500 <= target.dx <= 500
