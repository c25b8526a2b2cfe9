# collision.py
"""
Resolves collisions between two circular bodies.

Velocities are rotated into the frame whose x-axis is the collision normal,
where a 2D elastic collision reduces to the 1D formula on x while y
(tangential) passes through. The result is rotated back and scaled by the
energy-loss factor. Positions are never corrected.
"""
import math
import numpy as np
from vector import rotate, distance
from constants import ENERGY_LOSS

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from body import Body

# --- Data Contracts ---
#
# overlaps(a: Body, b: Body) -> bool:
#   - Outputs: True if the circles intersect (distance minus radii < 0).
#
# resolve_collision(a: Body, b: Body, energy_loss: float) -> None:
#   - Inputs: Two overlapping bodies (checked by the caller).
#   - Side Effects: Replaces a.velocity and b.velocity in place.
#   - Invariants: A separating pair (relative velocity . displacement >= 0)
#     is left untouched. Momentum along the normal is conserved before the
#     energy-loss scaling.


def overlaps(a: "Body", b: "Body") -> bool:
    return distance(a.position, b.position) - a.radius - b.radius < 0


def elastic_1d(u1: float, u2: float, m1: float, m2: float):
    """Final speeds of a 1D elastic collision between masses m1 and m2."""
    total = m1 + m2
    v1 = (u1 * (m1 - m2) + 2 * m2 * u2) / total
    v2 = (u2 * (m2 - m1) + 2 * m1 * u1) / total
    return v1, v2


def resolve_collision(a: "Body", b: "Body", energy_loss: float = ENERGY_LOSS) -> None:
    """
    Updates the velocities of two overlapping bodies after they collide.

    Args:
        a (Body): The body being updated this frame.
        b (Body): The body it overlaps.
        energy_loss (float): Scale applied to both final velocities.
    """
    assert a.mass > 0 and b.mass > 0, "bodies must have positive mass"

    relative_velocity = b.velocity - a.velocity
    displacement = b.position - a.position

    # Only approaching pairs are resolved.
    if float(np.dot(relative_velocity, displacement)) >= 0:
        return

    angle = -math.atan2(displacement[1], displacement[0])

    u1 = rotate(a.velocity, angle)
    u2 = rotate(b.velocity, angle)

    v1x, v2x = elastic_1d(u1[0], u2[0], a.mass, b.mass)
    v1 = np.array([v1x, u1[1]])
    v2 = np.array([v2x, u2[1]])

    a.velocity = rotate(v1, -angle) * energy_loss
    b.velocity = rotate(v2, -angle) * energy_loss
