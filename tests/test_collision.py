"""Tests for collision detection and resolution."""

import numpy as np
import pytest

from body import Body
from collision import overlaps, resolve_collision, elastic_1d
from constants import ENERGY_LOSS


class TestOverlaps:
    def test_intersecting_circles(self):
        assert overlaps(Body(0, 0, 10), Body(15, 0, 10))

    def test_separate_circles(self):
        assert not overlaps(Body(0, 0, 10), Body(25, 0, 10))

    def test_touching_circles_do_not_overlap(self):
        assert not overlaps(Body(0, 0, 10), Body(20, 0, 10))


class TestResolveCollision:
    def test_head_on_equal_masses_exchange_velocities(self):
        a = Body(0, 0, 10, velocity=(1.0, 0.0))
        b = Body(15, 0, 10, velocity=(-1.0, 0.0))

        resolve_collision(a, b)

        assert a.velocity == pytest.approx([-1.0 * ENERGY_LOSS, 0.0], abs=1e-12)
        assert b.velocity == pytest.approx([1.0 * ENERGY_LOSS, 0.0], abs=1e-12)

    def test_oblique_equal_masses_exchange_normal_component_only(self):
        # Normal is the (1, 1) diagonal; a moves along +x, b is at rest.
        a = Body(0, 0, 10, velocity=(2.0, 0.0))
        b = Body(10, 10, 10)

        resolve_collision(a, b)

        # a keeps its tangential part (1, -1), b receives the normal part (1, 1).
        assert a.velocity == pytest.approx([0.6, -0.6], abs=1e-12)
        assert b.velocity == pytest.approx([0.6, 0.6], abs=1e-12)

    def test_momentum_conserved_before_energy_loss(self):
        a = Body(0, 0, 10, velocity=(3.0, 1.0), mass=1.0)
        b = Body(12, 5, 10, velocity=(-1.0, 0.5), mass=3.0)
        before = a.mass * a.velocity + b.mass * b.velocity

        resolve_collision(a, b, energy_loss=1.0)

        after = a.mass * a.velocity + b.mass * b.velocity
        assert after == pytest.approx(before)

    def test_energy_loss_scales_result(self):
        a1 = Body(0, 0, 10, velocity=(3.0, 1.0))
        b1 = Body(12, 5, 10, velocity=(-1.0, 0.5), mass=2.0)
        a2 = Body(0, 0, 10, velocity=(3.0, 1.0))
        b2 = Body(12, 5, 10, velocity=(-1.0, 0.5), mass=2.0)

        resolve_collision(a1, b1, energy_loss=1.0)
        resolve_collision(a2, b2, energy_loss=0.6)

        assert a2.velocity == pytest.approx(a1.velocity * 0.6)
        assert b2.velocity == pytest.approx(b1.velocity * 0.6)

    def test_separating_pair_is_untouched(self):
        a = Body(0, 0, 10, velocity=(-1.0, 0.0))
        b = Body(15, 0, 10, velocity=(1.0, 0.0))

        resolve_collision(a, b)

        assert a.velocity.tolist() == [-1.0, 0.0]
        assert b.velocity.tolist() == [1.0, 0.0]

    def test_pair_at_rest_is_untouched(self):
        a = Body(0, 0, 10)
        b = Body(15, 0, 10)

        resolve_collision(a, b)

        assert a.velocity.tolist() == [0.0, 0.0]
        assert b.velocity.tolist() == [0.0, 0.0]

    def test_tangential_motion_only_is_untouched(self):
        # Relative velocity perpendicular to the displacement: dot product is 0.
        a = Body(0, 0, 10, velocity=(0.0, 1.0))
        b = Body(15, 0, 10, velocity=(0.0, -1.0))

        resolve_collision(a, b)

        assert a.velocity.tolist() == [0.0, 1.0]
        assert b.velocity.tolist() == [0.0, -1.0]

    def test_does_not_move_bodies(self):
        a = Body(0, 0, 10, velocity=(1.0, 0.0))
        b = Body(15, 0, 10)

        resolve_collision(a, b)

        assert a.position.tolist() == [0.0, 0.0]
        assert b.position.tolist() == [15.0, 0.0]


@pytest.mark.parametrize("m1,m2,u1,u2", [
    (1.0, 1.0, 2.0, -1.0),
    (1.0, 4.0, 3.0, 0.0),
    (5.0, 2.0, -1.5, 2.5),
])
def test_elastic_1d_conserves_momentum_and_energy(m1, m2, u1, u2):
    v1, v2 = elastic_1d(u1, u2, m1, m2)
    assert m1 * v1 + m2 * v2 == pytest.approx(m1 * u1 + m2 * u2)
    assert m1 * v1**2 + m2 * v2**2 == pytest.approx(m1 * u1**2 + m2 * u2**2)


def test_elastic_1d_equal_masses_swap():
    assert elastic_1d(2.0, -1.0, 1.0, 1.0) == pytest.approx((-1.0, 2.0))
