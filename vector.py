# vector.py
"""
Pure 2D vector helpers used by the collision resolver and the drag gesture.
"""
import math
import numpy as np


def rotate(velocity: np.ndarray, angle: float) -> np.ndarray:
    """
    Rotates a 2D vector by `angle` radians.

    Equivalent to expressing the vector in a coordinate system rotated by
    `-angle`, which is how the collision resolver moves velocities into the
    collision-normal frame and back.
    """
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return np.array([
        velocity[0] * cos_a - velocity[1] * sin_a,
        velocity[0] * sin_a + velocity[1] * cos_a,
    ], dtype=np.float64)


def distance(p: np.ndarray, q: np.ndarray) -> float:
    """Euclidean distance between two points."""
    return math.hypot(q[0] - p[0], q[1] - p[1])
